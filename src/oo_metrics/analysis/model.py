"""Class model dataclasses for object-oriented design analysis.

The model is plain data: each ``ClassDescriptor`` carries its name, an
optional parent reference and the members declared directly on it. Inherited
members are never flattened into a class; inheritance is resolved by walking
``parent``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..core.exceptions import (
    ClassNotFoundError,
    DuplicateClassError,
    HierarchyCycleError,
    ModelError,
)


@dataclass(frozen=True)
class MethodDecl:
    """A method declared directly on a class.

    Attributes:
        name: Method name
        is_override: True when the declaring class redefines an ancestor method
    """

    name: str
    is_override: bool = False


@dataclass(frozen=True)
class AttributeDecl:
    """An attribute declared directly on a class."""

    name: str
    value: Any = None


def _as_method(item: MethodDecl | str) -> MethodDecl:
    if isinstance(item, MethodDecl):
        return item
    if isinstance(item, str):
        return MethodDecl(item)
    raise ModelError(f"Invalid method declaration: {item!r}")


def _as_attribute(item: AttributeDecl | str) -> AttributeDecl:
    if isinstance(item, AttributeDecl):
        return item
    if isinstance(item, str):
        return AttributeDecl(item)
    raise ModelError(f"Invalid attribute declaration: {item!r}")


@dataclass(frozen=True, eq=False)
class ClassDescriptor:
    """One class in the analyzed hierarchy.

    Descriptors compare and hash by identity: two classes with the same shape
    are still different classes.

    Attributes:
        name: Class name, unique within a collection
        parent: Direct superclass, or None for a root class
        methods: Methods declared directly on this class
        attributes: Attributes declared directly on this class
    """

    name: str
    parent: ClassDescriptor | None = None
    methods: tuple[MethodDecl, ...] = field(default_factory=tuple)
    attributes: tuple[AttributeDecl, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept lists and bare names, store immutable tuples
        methods = _members(self.methods, "methods", self.name)
        attributes = _members(self.attributes, "attributes", self.name)
        object.__setattr__(self, "methods", tuple(_as_method(m) for m in methods))
        object.__setattr__(
            self, "attributes", tuple(_as_attribute(a) for a in attributes)
        )

    def __repr__(self) -> str:
        parent = self.parent.name if self.parent is not None else None
        return f"ClassDescriptor(name={self.name!r}, parent={parent!r})"

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def method_names(self) -> list[str]:
        return [method.name for method in self.methods]

    def attribute_names(self) -> list[str]:
        return [attribute.name for attribute in self.attributes]

    def ancestors(self) -> Iterator[ClassDescriptor]:
        """Yield parent, grandparent, ... up to the root.

        Raises:
            HierarchyCycleError: If the parent chain loops
        """
        seen: set[int] = {id(self)}
        current = self.parent
        while current is not None:
            if id(current) in seen:
                raise HierarchyCycleError(
                    f"Inheritance cycle detected at class '{current.name}'",
                    context={"class": self.name, "cycle_at": current.name},
                )
            seen.add(id(current))
            yield current
            current = current.parent


class ClassCollection:
    """Immutable, ordered set of classes supplied for one analysis run.

    Example:
        animal = ClassDescriptor("Animal", methods=("make_sound",))
        dog = ClassDescriptor("Dog", parent=animal, methods=("make_sound",))
        collection = ClassCollection([animal, dog])
        assert collection.children_of(animal) == [dog]
    """

    def __init__(self, classes: Iterable[ClassDescriptor] = ()) -> None:
        by_name: dict[str, ClassDescriptor] = {}
        for cls in classes:
            if cls.name in by_name:
                raise DuplicateClassError(
                    f"Duplicate class name '{cls.name}'", context={"class": cls.name}
                )
            by_name[cls.name] = cls
        self._classes = by_name

    def __len__(self) -> int:
        return len(self._classes)

    def __iter__(self) -> Iterator[ClassDescriptor]:
        return iter(self._classes.values())

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._classes
        if isinstance(item, ClassDescriptor):
            return self._classes.get(item.name) is item
        return False

    def __getitem__(self, name: str) -> ClassDescriptor:
        try:
            return self._classes[name]
        except KeyError:
            raise ClassNotFoundError(
                f"Class '{name}' not found in collection", context={"class": name}
            ) from None

    def __repr__(self) -> str:
        return f"ClassCollection({list(self._classes)!r})"

    def get(self, name: str) -> ClassDescriptor | None:
        return self._classes.get(name)

    @property
    def names(self) -> list[str]:
        return list(self._classes)

    def children_of(self, cls: ClassDescriptor) -> list[ClassDescriptor]:
        """Return direct subclasses of ``cls`` in collection order."""
        return [member for member in self if member.parent is cls]

    def validate(self) -> None:
        """Check that parent links form a forest.

        Raises:
            HierarchyCycleError: If any parent chain loops
        """
        for cls in self:
            for _ in cls.ancestors():
                pass

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Mapping[str, Any] | None]
    ) -> ClassCollection:
        """Build a collection from a plain mapping.

        Parents may be listed in any order. Each entry looks like::

            {
                "parent": "Animal",            # or None / omitted
                "methods": ["speak", {"name": "run", "override": True}],
                "attributes": ["legs", {"name": "_sound", "value": "woof"}],
                "external": False,             # optional
            }

        Entries marked ``external`` are built so they can serve as parents but
        are left out of the returned collection.

        Args:
            data: Mapping of class name to its declaration

        Returns:
            ClassCollection in the mapping's iteration order

        Raises:
            ClassNotFoundError: A parent name is not declared
            HierarchyCycleError: Parent names form a cycle
            ModelError: An entry or member list is malformed
        """
        built: dict[str, ClassDescriptor] = {}

        for start in data:
            # Walk up to the first built class or root, then build downwards
            chain: list[str] = []
            pending: set[str] = set()
            name = start
            while name and name not in built:
                if name not in data:
                    raise ClassNotFoundError(
                        f"Parent class '{name}' is not declared",
                        context={"class": chain[-1] if chain else None},
                    )
                if name in pending:
                    cycle = chain[chain.index(name) :] + [name]
                    raise HierarchyCycleError(
                        f"Inheritance cycle detected: {' -> '.join(cycle)}",
                        context={"cycle": cycle},
                    )
                chain.append(name)
                pending.add(name)
                name = _entry(data, name).get("parent")

            for class_name in reversed(chain):
                entry = _entry(data, class_name)
                parent_name = entry.get("parent")
                methods = _members(entry.get("methods", ()), "methods", class_name)
                attributes = _members(
                    entry.get("attributes", ()), "attributes", class_name
                )
                built[class_name] = ClassDescriptor(
                    name=class_name,
                    parent=built[parent_name] if parent_name else None,
                    methods=tuple(_method_from_raw(m) for m in methods),
                    attributes=tuple(_attribute_from_raw(a) for a in attributes),
                )

        return cls(
            built[name] for name in data if not _entry(data, name).get("external")
        )

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Convert to the plain mapping accepted by ``from_dict``.

        Ancestors that are not members of the collection are written after the
        members with ``"external": True`` so the hierarchy survives a round
        trip without changing collection membership.

        Raises:
            ModelError: An outside ancestor shares its name with another class
        """
        result = {c.name: _class_to_dict(c) for c in self}

        external: dict[str, ClassDescriptor] = {}
        for member in self:
            for ancestor in member.ancestors():
                if ancestor in self:
                    continue
                seen = external.get(ancestor.name)
                if ancestor.name in self._classes or (
                    seen is not None and seen is not ancestor
                ):
                    raise ModelError(
                        f"Outside ancestor '{ancestor.name}' of '{member.name}' "
                        "clashes with another class of the same name",
                        context={"class": member.name, "ancestor": ancestor.name},
                    )
                external[ancestor.name] = ancestor

        for name, ancestor in external.items():
            result[name] = {**_class_to_dict(ancestor), "external": True}
        return result


def _class_to_dict(c: ClassDescriptor) -> dict[str, Any]:
    return {
        "parent": c.parent.name if c.parent is not None else None,
        "methods": [{"name": m.name, "override": m.is_override} for m in c.methods],
        "attributes": [{"name": a.name, "value": a.value} for a in c.attributes],
    }


def _entry(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    entry = data[name]
    if entry is None:
        return {}
    if not isinstance(entry, Mapping):
        raise ModelError(
            f"Declaration of class '{name}' must be a mapping, got {entry!r}",
            context={"class": name},
        )
    return entry


def _members(raw: Any, kind: str, owner: str) -> tuple[Any, ...]:
    # A bare string would otherwise be split into one member per character
    if isinstance(raw, (str, bytes, Mapping)) or not isinstance(raw, Iterable):
        raise ModelError(
            f"{kind.capitalize()} of class '{owner}' must be a list, got {raw!r}",
            context={"class": owner, "kind": kind},
        )
    return tuple(raw)


def _method_from_raw(raw: str | Mapping[str, Any]) -> MethodDecl:
    if isinstance(raw, str):
        return MethodDecl(raw)
    if isinstance(raw, Mapping) and "name" in raw:
        return MethodDecl(str(raw["name"]), bool(raw.get("override", False)))
    raise ModelError(f"Invalid method declaration: {raw!r}")


def _attribute_from_raw(raw: str | Mapping[str, Any]) -> AttributeDecl:
    if isinstance(raw, str):
        return AttributeDecl(raw)
    if isinstance(raw, Mapping) and "name" in raw:
        return AttributeDecl(str(raw["name"]), raw.get("value"))
    raise ModelError(f"Invalid attribute declaration: {raw!r}")
