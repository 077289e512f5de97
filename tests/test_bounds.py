from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from clampable import Bounds, InvalidRangeError


def test_bounds_clamp_and_contains() -> None:
    scale = Bounds(1, 7)
    assert scale.clamp(10) == 7
    assert scale.clamp(0) == 1
    assert scale.clamp(4) == 4
    assert scale.contains(7)
    assert not scale.contains(8)


def test_bounds_with_dates() -> None:
    quarter = Bounds(date(2024, 1, 1), date(2024, 3, 31))
    assert quarter.clamp(date(2023, 12, 25)) == date(2024, 1, 1)
    assert quarter.contains(date(2024, 2, 29))


def test_inverted_bounds_follow_clamp() -> None:
    inverted = Bounds(10, 1)
    assert inverted.is_inverted
    assert inverted.clamp(5) == 10
    assert not inverted.contains(5)


def test_strict_constructor() -> None:
    assert Bounds.strict("a", "m") == Bounds("a", "m")
    with pytest.raises(InvalidRangeError):
        Bounds.strict(10, 1)


def test_bounds_are_frozen() -> None:
    b = Bounds(0.0, 1.0)
    with pytest.raises(FrozenInstanceError):
        b.lower = 2.0  # type: ignore[misc]
