"""Helpers for ordered sequences.

All helpers return new lists and leave their input untouched. Passing a keyed
mapping raises :class:`~loscore.core.exceptions.UnsupportedCollectionError`.
"""

from typing import Any, List, Sequence

from loscore.core.enums import Shape
from loscore.core.exceptions import UnsupportedCollectionError
from loscore.core.shapes import shape_of

__all__ = ["head", "tail", "take", "take_right", "uniq"]


def _require_sequence(array: Any) -> Sequence[Any]:
    if shape_of(array) is not Shape.SEQUENCE:
        raise UnsupportedCollectionError(array)
    return array


def head(array: Sequence[Any]) -> Any:
    """Return the first element, or ``None`` for an empty sequence."""
    array = _require_sequence(array)
    return array[0] if len(array) else None


def tail(array: Sequence[Any]) -> List[Any]:
    """Return a new list holding every element but the first."""
    return list(_require_sequence(array)[1:])


def take(array: Sequence[Any], n: int = 1) -> List[Any]:
    """Slice ``n`` elements from one end of ``array``.

    Args:
        array: Sequence to slice.
        n: Number of elements. Positive counts from the front, negative from
            the back, zero yields an empty list.

    Returns:
        New list with at most ``abs(n)`` elements.
    """
    array = _require_sequence(array)
    if n == 0:
        return []
    if n < 0:
        return list(array[n:])
    return list(array[:n])


def take_right(array: Sequence[Any], n: int = 1) -> List[Any]:
    """Return the last ``n`` elements of ``array``."""
    return take(array, -n)


def uniq(array: Sequence[Any]) -> List[Any]:
    """Drop repeated values, keeping first occurrences in their original order.

    Unhashable values (lists, dicts) are compared with ``==``.
    """
    seen_hashable = set()
    seen_other: List[Any] = []
    result: List[Any] = []
    for value in _require_sequence(array):
        try:
            if value in seen_hashable:
                continue
            seen_hashable.add(value)
        except TypeError:
            if value in seen_other:
                continue
            seen_other.append(value)
        result.append(value)
    return result
