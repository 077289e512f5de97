"""Turn text from the command line, INI files and CSV cells into typed values.

Bounds and values arrive as strings.  Clamping strings lexicographically when
the user meant numbers gives surprising answers (``"9" > "10"``), so every
entry point names a value type and converts through :func:`parse_value`.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Literal, Mapping, cast

from .errors import ConfigError

__all__ = ["ValueType", "VALUE_TYPES", "parse_value", "coerce_value_type"]

ValueType = Literal["int", "float", "decimal", "str", "date"]

VALUE_TYPES: Mapping[str, Callable[[str], Any]] = {
    "int": int,
    "float": float,
    "decimal": Decimal,
    "str": str,
    "date": date.fromisoformat,
}


def parse_value(raw: Any, value_type: str) -> Any:
    """Convert *raw* to *value_type*.

    Values that already have a non-string type (e.g. numbers loaded from
    YAML) are converted via ``str`` first so ``1`` becomes ``Decimal("1")``
    rather than the binary float expansion.

    Raises
    ------
    ConfigError
        If *value_type* is unknown or *raw* cannot be converted,
        or converts to a decimal NaN.
    """

    try:
        converter = VALUE_TYPES[value_type]
    except KeyError:
        raise ConfigError(
            f"unknown value type '{value_type}', expected one of {sorted(VALUE_TYPES)}"
        ) from None

    text = raw if isinstance(raw, str) else str(raw)
    if value_type != "str":
        text = text.strip()
    try:
        value = converter(text)
    except (ValueError, InvalidOperation) as exc:
        raise ConfigError(f"cannot parse {raw!r} as {value_type}") from exc
    # Decimal NaN raises on ordering comparisons instead of returning False
    if isinstance(value, Decimal) and value.is_nan():
        raise ConfigError(f"cannot clamp {raw!r}: decimal NaN is not orderable")
    return value


def coerce_value_type(value_type: str) -> ValueType:
    """Validate *value_type* and narrow it to :data:`ValueType`."""

    if value_type not in VALUE_TYPES:
        raise ConfigError(
            f"unknown value type '{value_type}', expected one of {sorted(VALUE_TYPES)}"
        )
    return cast(ValueType, value_type)
