"""Generic clamp helpers.

:func:`clamp` works for any value type supporting ``<`` and ``>``.  It relies
on nothing else: no arithmetic, no equality, no ``min``/``max``.  The result
is always one of the three arguments, returned as is.

Inverted bounds (``lower_bound > upper_bound``) are not validated by
:func:`clamp`; the three branches are applied literally so ``clamp(5, 10, 1)``
yields ``10``.  Callers wanting validation use :func:`clamp_strict`.
"""

from __future__ import annotations

from .errors import InvalidRangeError
from .ordering import T

__all__ = ["clamp", "clamp_strict", "check_bounds", "is_within"]


def clamp(value: T, lower_bound: T, upper_bound: T) -> T:
    """Return *value* constrained to the inclusive range ``[lower_bound, upper_bound]``.

    Parameters
    ----------
    value:
        The value to clamp.
    lower_bound:
        Returned when ``value < lower_bound``.
    upper_bound:
        Returned when ``value > upper_bound``.

    Returns
    -------
    T
        One of the three arguments.  Exceptions raised by the operands' own
        comparisons propagate unchanged.

    Examples
    --------
    >>> clamp(20, 1, 10)
    10
    >>> clamp("a", "x", "z")
    'x'
    >>> clamp(5, 10, 1)
    10
    """

    if value < lower_bound:
        return lower_bound
    if value > upper_bound:
        return upper_bound
    return value


def check_bounds(lower_bound: T, upper_bound: T) -> None:
    """Raise :class:`InvalidRangeError` when *lower_bound* orders after *upper_bound*."""

    if lower_bound > upper_bound:
        raise InvalidRangeError(lower_bound, upper_bound)


def clamp_strict(value: T, lower_bound: T, upper_bound: T) -> T:
    """Like :func:`clamp` but reject inverted bounds.

    Raises
    ------
    InvalidRangeError
        If ``lower_bound > upper_bound``.
    """

    check_bounds(lower_bound, upper_bound)
    return clamp(value, lower_bound, upper_bound)


def is_within(value: T, lower_bound: T, upper_bound: T) -> bool:
    """Return ``True`` when :func:`clamp` would hand back *value* itself."""

    return not (value < lower_bound) and not (value > upper_bound)
