"""clampable package.

One generic :func:`clamp` for every type that supports ``<`` and ``>``, plus
a strict variant, a range value object, pandas helpers and a Typer CLI.
"""

from __future__ import annotations

from .bounds import Bounds
from .core import check_bounds, clamp, clamp_strict, is_within
from .errors import InvalidRangeError
from .ordering import SupportsOrdering

__all__ = [
    "Bounds",
    "clamp",
    "clamp_strict",
    "check_bounds",
    "is_within",
    "InvalidRangeError",
    "SupportsOrdering",
]
