"""Elementary functions used as defaults by the other utilities."""

from typing import Any

__all__ = ["identity", "add"]


def identity(value: Any) -> Any:
    """Return ``value`` unchanged."""
    return value


def add(x: Any, y: Any) -> Any:
    """Return ``x + y``.

    Works for anything supporting ``+``, so strings and lists concatenate.
    """
    return x + y
