"""Container shape dispatch.

Traversal primitives accept either an ordered sequence or a keyed mapping and
decide how to walk it at call time. This module is the single place where that
decision is made.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Iterator, Tuple

from loscore.core.enums import Shape
from loscore.core.exceptions import UnsupportedCollectionError
from loscore.core.types import Collection
from loscore.logger.logger import logger

__all__ = ["shape_of", "iter_items", "iter_values"]


def shape_of(collection: Any) -> Shape:
    """Return the shape of ``collection``.

    Args:
        collection: Value to inspect.

    Returns:
        ``Shape.MAPPING`` for mappings, ``Shape.SEQUENCE`` for sequences.

    Raises:
        UnsupportedCollectionError: If ``collection`` is neither.
    """
    # Mapping first: some mapping types also register as sequences.
    if isinstance(collection, Mapping):
        return Shape.MAPPING
    if isinstance(collection, Sequence):
        return Shape.SEQUENCE
    logger.debug(
        "Rejected unsupported collection of type %s", type(collection).__name__
    )
    raise UnsupportedCollectionError(collection)


def iter_items(collection: Collection) -> Iterator[Tuple[Any, Any]]:
    """Yield ``(key_or_index, value)`` pairs in the container's native order."""
    if shape_of(collection).is_keyed:
        for key in collection:
            yield key, collection[key]  # type: ignore[index]
    else:
        for index in range(len(collection)):
            yield index, collection[index]


def iter_values(collection: Collection) -> Iterator[Any]:
    for _, value in iter_items(collection):
        yield value
