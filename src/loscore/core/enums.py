"""Enumerations describing container shapes."""

from enum import Enum


class Shape(Enum):
    """Concrete shape of a container, decided at call time."""

    SEQUENCE = "sequence"
    MAPPING = "mapping"

    @property
    def is_keyed(self) -> bool:
        """Whether elements are addressed by key rather than by position."""
        return self is Shape.MAPPING
