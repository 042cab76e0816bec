"""Member metric collectors (MOOD factor metrics).

Each factor is a ratio over the members declared directly on every class in
a collection. When the denominator is zero the factor is ``0.0`` rather than
NaN, and no rounding is applied here.

Metrics:
    - MIF (Method Inheritance Factor): methods that redefine a same-named
      method of the direct parent / all methods
    - AIF (Attribute Inheritance Factor): same as MIF over attributes
    - MHF (Method Hiding Factor): private methods / all methods
    - AHF (Attribute Hiding Factor): private attributes / all attributes
    - POF (Polymorphism Factor): public methods that override a public
      method of the direct parent / all public methods

Inheritance is checked against the direct parent only. A method declared on
a grandparent but not redeclared on the parent does not count.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from loguru import logger

from ..visibility import is_private, is_public

if TYPE_CHECKING:
    from ..model import ClassCollection, ClassDescriptor


def ratio(numerator: int, denominator: int) -> float:
    """Divide, returning 0.0 for a zero denominator."""
    return numerator / denominator if denominator != 0 else 0.0


def _method_names(cls: ClassDescriptor | None) -> list[str]:
    return cls.method_names() if cls is not None else []


def _attribute_names(cls: ClassDescriptor | None) -> list[str]:
    return cls.attribute_names() if cls is not None else []


def _inheritance_factor(
    classes: Iterable[ClassDescriptor], names: Callable[..., list[str]]
) -> tuple[int, int]:
    inherited = 0
    total = 0
    for cls in classes:
        own = names(cls)
        base = set(names(cls.parent))
        total += len(own)
        inherited += sum(1 for name in own if name in base)
    return inherited, total


def _hiding_factor(
    classes: Iterable[ClassDescriptor], names: Callable[..., list[str]]
) -> tuple[int, int]:
    hidden = 0
    total = 0
    for cls in classes:
        own = names(cls)
        total += len(own)
        hidden += sum(1 for name in own if is_private(name))
    return hidden, total


def mif(collection: ClassCollection) -> float:
    """Compute Method Inheritance Factor.

    Args:
        collection: Classes under analysis

    Returns:
        Ratio in [0, 1]; 0.0 when no methods are declared
    """
    inherited, total = _inheritance_factor(collection, _method_names)
    logger.debug(f"MIF: {inherited} inherited / {total} methods")
    return ratio(inherited, total)


def aif(collection: ClassCollection) -> float:
    """Compute Attribute Inheritance Factor.

    Args:
        collection: Classes under analysis

    Returns:
        Ratio in [0, 1]; 0.0 when no attributes are declared
    """
    inherited, total = _inheritance_factor(collection, _attribute_names)
    logger.debug(f"AIF: {inherited} inherited / {total} attributes")
    return ratio(inherited, total)


def mhf(collection: ClassCollection) -> float:
    """Compute Method Hiding Factor."""
    hidden, total = _hiding_factor(collection, _method_names)
    logger.debug(f"MHF: {hidden} private / {total} methods")
    return ratio(hidden, total)


def ahf(collection: ClassCollection) -> float:
    """Compute Attribute Hiding Factor."""
    hidden, total = _hiding_factor(collection, _attribute_names)
    logger.debug(f"AHF: {hidden} private / {total} attributes")
    return ratio(hidden, total)


def pof(collection: ClassCollection) -> float:
    """Compute Polymorphism Factor.

    A public method counts as overridden when the direct parent declares a
    public method of the same name.

    Args:
        collection: Classes under analysis

    Returns:
        Ratio in [0, 1]; 0.0 when no public methods are declared
    """
    overridden = 0
    total_public = 0
    for cls in collection:
        public_base = {name for name in _method_names(cls.parent) if is_public(name)}
        public_own = [name for name in cls.method_names() if is_public(name)]
        total_public += len(public_own)
        overridden += sum(1 for name in public_own if name in public_base)

    logger.debug(f"POF: {overridden} overridden / {total_public} public methods")
    return ratio(overridden, total_public)
