"""Helpers for keyed mappings."""

from typing import Any, MutableMapping, Mapping

from loscore.core.enums import Shape
from loscore.core.exceptions import UnsupportedCollectionError
from loscore.core.shapes import shape_of
from loscore.functional.collections import each

__all__ = ["extend"]


def extend(
    target: MutableMapping[Any, Any], *sources: Mapping[Any, Any]
) -> MutableMapping[Any, Any]:
    """Copy every key of ``sources`` into ``target``, left to right.

    Later sources overwrite earlier ones. ``target`` is mutated in place.

    Args:
        target: Mapping that receives the keys.
        *sources: Mappings to copy from.

    Returns:
        ``target`` itself.

    Raises:
        UnsupportedCollectionError: If any argument is not a mapping.
    """
    for obj in (target, *sources):
        if shape_of(obj) is not Shape.MAPPING:
            raise UnsupportedCollectionError(obj)

    for source in sources:
        each(source, lambda value, key, _source: target.__setitem__(key, value))
    return target
