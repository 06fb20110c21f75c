"""Functional primitives for loscore.

This package provides the collection and function utilities of the library:
traversal primitives over ordered sequences and keyed mappings, sequence and
mapping helpers, and combinators that wrap a function with private state.
Apart from the combinators, utilities are stateless and side-effect-free so
they can be composed freely.
"""

from loscore.functional.arrays import head, tail, take, take_right, uniq
from loscore.functional.basics import add, identity
from loscore.functional.collections import (
    contains,
    each,
    every,
    filter_,
    index_of,
    map_,
    pluck,
    reduce_,
    reject,
    size,
)
from loscore.functional.combinators import Memoized, Once, invoke, memoize, once
from loscore.functional.objects import extend

__all__ = [
    # Basics
    "identity",
    "add",
    # Arrays
    "head",
    "tail",
    "take",
    "take_right",
    "uniq",
    # Collections
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
    # Objects
    "extend",
    # Functions
    "once",
    "memoize",
    "invoke",
    "Once",
    "Memoized",
]
