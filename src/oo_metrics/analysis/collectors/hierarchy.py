"""Hierarchy metric collectors.

Structural metrics over the parent/child graph:

- Depth of Inheritance Tree (DIT): number of parent links from a class to
  its root. Deep trees make behavior harder to predict because more
  inherited methods are in play.
- Number of Children (NOC): count of direct subclasses. High NOC means a
  base class has wide reuse and wide blast radius for changes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from ..model import ClassCollection, ClassDescriptor


def dit(cls: ClassDescriptor) -> int:
    """Compute Depth of Inheritance Tree for a class.

    A root class (no parent) has DIT 0.

    Args:
        cls: Class to measure

    Returns:
        Number of parent links traversed to reach the root

    Raises:
        HierarchyCycleError: If the parent chain loops

    Examples:
        >>> animal = ClassDescriptor("Animal")
        >>> dit(ClassDescriptor("Dog", parent=ClassDescriptor("Mammal", parent=animal)))
        2
    """
    depth = sum(1 for _ in cls.ancestors())
    logger.debug(f"DIT({cls.name}) = {depth}")
    return depth


def noc(cls: ClassDescriptor, collection: ClassCollection) -> int:
    """Compute Number of Children for a class.

    Only direct subclasses present in ``collection`` are counted; deeper
    descendants are not.

    Args:
        cls: Class to measure
        collection: All classes under analysis

    Returns:
        Count of classes whose parent is ``cls``
    """
    count = sum(1 for member in collection if member.parent is cls)
    logger.debug(f"NOC({cls.name}) = {count}")
    return count
