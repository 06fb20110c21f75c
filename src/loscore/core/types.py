"""Reusable type definitions for loscore.

Type Aliases:
    Collection: An ordered sequence or a keyed mapping.
    Iteratee: Callback receiving ``(value, key_or_index, collection)``.
    Predicate: Single-argument callback whose truthiness is tested.
    Resolver: Single-argument callback producing a memoization cache key.
"""

from typing import Any, Callable, Hashable, Mapping, Sequence, Union

__all__ = [
    "Collection",
    "Iteratee",
    "Predicate",
    "Resolver",
]

Collection = Union[Sequence[Any], Mapping[Any, Any]]

Iteratee = Callable[[Any, Any, Collection], Any]

Predicate = Callable[[Any], Any]

Resolver = Callable[[Any], Hashable]
