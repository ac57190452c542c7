"""Helpers for passing optional request fields on to the API.

A request field left at its zero value ("" for text, 0 for numbers, None)
counts as "not set" and is left out of the query or body.
"""

from __future__ import annotations

from typing import Optional, TypeVar

T = TypeVar("T")


def _is_zero(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bytes, int, float)):
        return not value
    return False


def if_set(value: Optional[T]) -> Optional[T]:
    """Return ``value`` unless it is the zero value of its type, else None."""
    return None if _is_zero(value) else value


def with_default(value: Optional[T], fallback: T) -> T:
    """Return ``value`` unless it is the zero value of its type, else ``fallback``."""
    return fallback if _is_zero(value) else value  # type: ignore[return-value]