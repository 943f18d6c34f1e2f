"""Equality checks between values of mixed types."""

from __future__ import annotations

from typing import Any


def variant_eq_fuzzy(lhs: Any, rhs: Any) -> bool:
    """True when the two values compare equal with ``==``.

    Values of types that cannot be compared with each other are unequal.
    """
    try:
        return bool(lhs == rhs)
    except (TypeError, ValueError):
        return False


def variant_eq_strict(lhs: Any, rhs: Any) -> bool:
    """True when both values have exactly the same type and are equal."""
    if type(lhs) is not type(rhs):
        return False
    return variant_eq_fuzzy(lhs, rhs)