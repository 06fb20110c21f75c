"""Core building blocks shared by the functional utilities."""

from loscore.core.enums import Shape
from loscore.core.exceptions import LoscoreError, UnsupportedCollectionError
from loscore.core.shapes import iter_items, iter_values, shape_of

__all__ = [
    "Shape",
    "LoscoreError",
    "UnsupportedCollectionError",
    "shape_of",
    "iter_items",
    "iter_values",
]
