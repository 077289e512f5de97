"""Ordering capability shared by the clamp helpers.

Rather than writing one clamp per numeric type, the helpers are written once
against :class:`SupportsOrdering`.  Anything exposing ``<`` and ``>`` satisfies
the protocol structurally: ``int``, ``float``, ``Decimal``, ``Fraction``,
``str``, ``date``, tuples and user-defined classes alike.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

__all__ = ["SupportsOrdering", "T"]


@runtime_checkable
class SupportsOrdering(Protocol):
    """Structural type for values comparable with ``<`` and ``>``."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=SupportsOrdering)
