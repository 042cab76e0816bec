"""Unit tests for hierarchy metric collectors (DIT, NOC)."""

import pytest

from oo_metrics.analysis.collectors.hierarchy import dit, noc
from oo_metrics.analysis.model import ClassCollection, ClassDescriptor
from oo_metrics.core.exceptions import HierarchyCycleError


def _chain(depth: int) -> list[ClassDescriptor]:
    classes = [ClassDescriptor("C0")]
    for i in range(1, depth + 1):
        classes.append(ClassDescriptor(f"C{i}", parent=classes[-1]))
    return classes


class TestDIT:
    """Test Depth of Inheritance Tree."""

    def test_root_is_zero(self, animal_collection):
        assert dit(animal_collection["Animal"]) == 0

    def test_sample_hierarchy(self, animal_collection):
        assert dit(animal_collection["Mammal"]) == 1
        assert dit(animal_collection["Dog"]) == 2
        assert dit(animal_collection["Pigeon"]) == 2

    @pytest.mark.parametrize("depth", [0, 1, 2, 5, 20])
    def test_chain_depth(self, depth):
        classes = _chain(depth)
        assert dit(classes[-1]) == depth

    def test_parent_outside_collection_still_counted(self):
        """DIT follows parent links, not collection membership."""
        base = ClassDescriptor("Base")
        child = ClassDescriptor("Child", parent=base)
        assert dit(child) == 1

    def test_cycle_raises(self):
        a = ClassDescriptor("A")
        b = ClassDescriptor("B", parent=a)
        object.__setattr__(a, "parent", b)
        with pytest.raises(HierarchyCycleError):
            dit(b)


class TestNOC:
    """Test Number of Children."""

    def test_sample_hierarchy(self, animal_collection):
        assert noc(animal_collection["Animal"], animal_collection) == 3
        assert noc(animal_collection["Mammal"], animal_collection) == 2
        assert noc(animal_collection["Bird"], animal_collection) == 1

    def test_leaf_is_zero(self, animal_collection):
        for name in ("Reptile", "Dog", "Cat", "Pigeon"):
            assert noc(animal_collection[name], animal_collection) == 0

    def test_direct_children_only(self):
        classes = _chain(3)
        collection = ClassCollection(classes)
        assert noc(classes[0], collection) == 1

    def test_order_independent(self, animal_collection):
        reversed_collection = ClassCollection(reversed(list(animal_collection)))
        for cls in animal_collection:
            assert noc(cls, animal_collection) == noc(cls, reversed_collection)

    def test_children_outside_collection_ignored(self):
        base = ClassDescriptor("Base")
        ClassDescriptor("Stray", parent=base)
        assert noc(base, ClassCollection([base])) == 0

    def test_same_name_different_class_not_counted(self):
        """Children are matched by identity, not by parent name."""
        base = ClassDescriptor("Base")
        impostor = ClassDescriptor("Base")
        child = ClassDescriptor("Child", parent=impostor)
        assert noc(base, ClassCollection([base, child])) == 0
