"""Generic collection and function utilities."""

from loscore.core import LoscoreError, UnsupportedCollectionError
from loscore.functional import *  # noqa: F401,F403
from loscore.functional import __all__ as _functional_all

__version__ = "0.1.0"

__all__ = ["LoscoreError", "UnsupportedCollectionError", *_functional_all]
