"""Closed interval value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic

from .core import check_bounds, clamp, is_within
from .ordering import T

__all__ = ["Bounds"]


@dataclass(frozen=True)
class Bounds(Generic[T]):
    """Inclusive ``[lower, upper]`` range over any orderable type.

    Construction does not validate the ordering so a ``Bounds`` behaves
    exactly like :func:`clamp` with the same arguments.  Use
    :meth:`Bounds.strict` to reject inverted bounds up front.

    Attributes
    ----------
    lower:
        Inclusive lower bound.
    upper:
        Inclusive upper bound.
    """

    lower: T
    upper: T

    @classmethod
    def strict(cls, lower: T, upper: T) -> "Bounds[T]":
        """Build a ``Bounds`` raising :class:`InvalidRangeError` if inverted."""

        check_bounds(lower, upper)
        return cls(lower, upper)

    @property
    def is_inverted(self) -> bool:
        return self.lower > self.upper

    def clamp(self, value: T) -> T:
        return clamp(value, self.lower, self.upper)

    def contains(self, value: T) -> bool:
        return is_within(value, self.lower, self.upper)
