"""Shared fixtures for analysis tests."""

import pytest

from oo_metrics.analysis.model import ClassCollection, ClassDescriptor, MethodDecl


@pytest.fixture
def animal_collection() -> ClassCollection:
    """Animal sample hierarchy.

    Animal
    ├── Mammal
    │   ├── Dog   (make_sound override)
    │   └── Cat   (make_sound override)
    ├── Bird
    │   └── Pigeon (_private_child_method, __protected_child_method)
    └── Reptile
    """
    animal = ClassDescriptor("Animal", methods=(MethodDecl("make_sound"),))
    mammal = ClassDescriptor("Mammal", parent=animal)
    bird = ClassDescriptor("Bird", parent=animal)
    reptile = ClassDescriptor("Reptile", parent=animal)
    dog = ClassDescriptor(
        "Dog", parent=mammal, methods=(MethodDecl("make_sound", is_override=True),)
    )
    cat = ClassDescriptor(
        "Cat", parent=mammal, methods=(MethodDecl("make_sound", is_override=True),)
    )
    pigeon = ClassDescriptor(
        "Pigeon",
        parent=bird,
        methods=(
            MethodDecl("_private_child_method"),
            MethodDecl("__protected_child_method"),
        ),
    )
    return ClassCollection([animal, mammal, bird, reptile, dog, cat, pigeon])
