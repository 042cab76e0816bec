"""Member visibility classification.

Visibility is a naming convention, not a language feature: any member whose
name starts with an underscore is private, everything else is public. The
rule is the same for methods and attributes.
"""

from __future__ import annotations

from enum import StrEnum

PRIVATE_PREFIX = "_"


class Visibility(StrEnum):
    """Visibility of a declared class member."""

    PUBLIC = "public"
    PRIVATE = "private"


def classify(member_name: str) -> Visibility:
    """Classify a member name as public or private.

    Args:
        member_name: Method or attribute name

    Returns:
        ``Visibility.PRIVATE`` for ``_``-prefixed names, else ``Visibility.PUBLIC``

    Examples:
        >>> classify("make_sound")
        <Visibility.PUBLIC: 'public'>

        >>> classify("__protected")
        <Visibility.PRIVATE: 'private'>
    """
    if member_name.startswith(PRIVATE_PREFIX):
        return Visibility.PRIVATE
    return Visibility.PUBLIC


def is_private(member_name: str) -> bool:
    return classify(member_name) is Visibility.PRIVATE


def is_public(member_name: str) -> bool:
    return classify(member_name) is Visibility.PUBLIC
