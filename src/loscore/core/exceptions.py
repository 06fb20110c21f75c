"""Exceptions raised by loscore."""

__all__ = ["LoscoreError", "UnsupportedCollectionError"]


class LoscoreError(Exception):
    """Base class for all loscore errors."""


class UnsupportedCollectionError(LoscoreError, TypeError):
    """Raised when a value is neither an ordered sequence nor a keyed mapping."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Expected an ordered sequence or a keyed mapping, got {type(value).__name__}."
        )
