"""Traversal primitives over ordered sequences and keyed mappings.

Every function in this module walks its input exactly once and returns a new
value; none of them mutate the collection they are given (``each`` aside, whose
iteratee may do anything it likes).

Both container shapes are accepted:
    - **Ordered sequence** (``list``, ``tuple``, ``str``, ...): walked by
      position, the iteratee of ``each`` receives integer indices.
    - **Keyed mapping** (``dict`` and friends): walked in the mapping's own key
      order, the iteratee of ``each`` receives keys.

Anything else raises :class:`~loscore.core.exceptions.UnsupportedCollectionError`.

Equality tests (``contains``, ``index_of``) use ``==``.

Examples:
    >>> from loscore.functional.collections import map_, reduce_
    >>> map_([1, 2, 3], lambda x: x * 2)
    [2, 4, 6]
    >>> reduce_([1, 2, 3, 4], lambda acc, x: acc + x, 100)
    110
"""

from typing import Any, Callable, Hashable, List, Union

from loscore.core.shapes import iter_items, iter_values, shape_of
from loscore.core.types import Collection, Iteratee, Predicate
from loscore.functional.basics import identity

__all__ = [
    "size",
    "index_of",
    "each",
    "map_",
    "filter_",
    "reject",
    "pluck",
    "reduce_",
    "contains",
    "every",
]

# Marks an accumulator that was not supplied, so ``None`` stays a usable seed.
_MISSING = object()


def size(collection: Collection) -> int:
    """Return the number of values in ``collection``.

    Args:
        collection: Sequence, mapping or string.

    Returns:
        Element count (character count for a string).
    """
    shape_of(collection)
    return len(collection)


def index_of(collection: Collection, target: Any) -> Union[int, Hashable]:
    """Find the first position of ``target``.

    Args:
        collection: Collection to search.
        target: Value to look for.

    Returns:
        Index (or key, for a mapping) of the first value equal to ``target``,
        or ``-1`` if there is none.
    """
    found: List[Any] = []

    def check(value: Any, key: Any, _collection: Collection) -> None:
        if not found and value == target:
            found.append(key)

    each(collection, check)
    return found[0] if found else -1


def each(collection: Collection, iteratee: Iteratee) -> None:
    """Call ``iteratee(value, key_or_index, collection)`` for every element.

    Args:
        collection: Collection to walk.
        iteratee: Callback invoked for its side effects.
    """
    for key, value in iter_items(collection):
        iteratee(value, key, collection)


def map_(collection: Collection, iteratee: Predicate) -> List[Any]:
    """Return ``[iteratee(value) for each value]``, preserving order and count."""
    result: List[Any] = []
    each(collection, lambda value, *_: result.append(iteratee(value)))
    return result


def filter_(collection: Collection, predicate: Predicate) -> List[Any]:
    """Return the values for which ``predicate`` is truthy, in order."""
    result: List[Any] = []

    def keep(value: Any, *_: Any) -> None:
        if predicate(value):
            result.append(value)

    each(collection, keep)
    return result


def reject(collection: Collection, predicate: Predicate) -> List[Any]:
    """Return the values for which ``predicate`` is falsy, in order."""
    return filter_(collection, lambda value: not predicate(value))


def pluck(collection: Collection, key: Hashable) -> List[Any]:
    """Extract ``item[key]`` from every item.

    Args:
        collection: Collection of mappings (or other subscriptable items).
        key: Key to read from each item.

    Returns:
        List of the extracted values.

    Raises:
        KeyError: If an item lacks ``key``.
    """
    return map_(collection, lambda item: item[key])


def reduce_(
    collection: Collection,
    iteratee: Callable[[Any, Any], Any],
    accumulator: Any = _MISSING,
) -> Any:
    """Fold ``collection`` from left to right.

    Args:
        collection: Collection to fold.
        iteratee: Called as ``iteratee(accumulator, value)``; its return value
            becomes the next accumulator.
        accumulator: Initial value. When omitted, the first value seeds the
            fold and folding starts from the second value.

    Returns:
        The final accumulator. An empty collection without an initial
        accumulator yields ``None``.
    """
    values = iter_values(collection)
    if accumulator is _MISSING:
        accumulator = next(values, None)
    for value in values:
        accumulator = iteratee(accumulator, value)
    return accumulator


def contains(collection: Collection, target: Any) -> bool:
    """Whether any value in ``collection`` equals ``target``."""
    return reduce_(
        collection,
        lambda was_found, value: was_found or bool(value == target),
        False,
    )


def every(collection: Collection, predicate: Predicate = identity) -> bool:
    """Whether every value satisfies ``predicate`` (truthiness by default).

    Every value is visited; the result is the same as with an early exit.
    An empty collection yields ``True``.
    """
    return reduce_(
        collection,
        lambda passed, value: bool(predicate(value)) and passed,
        True,
    )
