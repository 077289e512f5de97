"""Clamp whole columns of tabular data and write reports.

The helpers apply :func:`core.clamp` element by element instead of using
``Series.clip``.  ``clip`` is vectorised but differs from :func:`clamp` for
inverted bounds and NaN and would not work for strings or dates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

import pandas as pd

from .core import check_bounds, clamp
from .errors import ConfigError
from .parsing import parse_value

__all__ = [
    "ClampSummary",
    "clamp_series",
    "clamp_column",
    "clamp_csv",
]

logger = logging.getLogger(__name__)

LOW = "low"
HIGH = "high"


@dataclass
class ClampSummary:
    """Outcome of clamping a single column.

    Attributes
    ----------
    frame:
        Copy of the input with ``<column>_clamped`` and ``saturation`` columns.
    column:
        Name of the clamped column.
    lower, upper:
        Bounds that were applied.
    low_count, high_count:
        Number of values replaced by the lower/upper bound.
    """

    frame: pd.DataFrame
    column: str
    lower: Any
    upper: Any
    low_count: int
    high_count: int

    @property
    def unchanged_count(self) -> int:
        return len(self.frame) - self.low_count - self.high_count


def _saturation(value: Any, lower: Any, upper: Any) -> str:
    if value < lower:
        return LOW
    if value > upper:
        return HIGH
    return ""


def clamp_series(series: pd.Series, lower: Any, upper: Any, *, strict: bool = False) -> pd.Series:
    """Return a new series with every element passed through :func:`clamp`."""

    if strict:
        check_bounds(lower, upper)
    values = [clamp(v, lower, upper) for v in series]
    # object columns (Decimal, date, ...) must not be re-inferred as floats
    dtype = object if series.dtype == object else None
    return pd.Series(values, index=series.index, name=series.name, dtype=dtype)


def clamp_column(
    df: pd.DataFrame, column: str, lower: Any, upper: Any, *, strict: bool = False
) -> ClampSummary:
    """Clamp ``df[column]`` and record which rows saturated.

    Raises
    ------
    ConfigError
        If *column* is missing from *df*.
    InvalidRangeError
        If *strict* is set and the bounds are inverted.
    """

    if column not in df.columns:
        raise ConfigError(f"missing column '{column}', available: {list(df.columns)}")

    out = df.copy()
    out[f"{column}_clamped"] = clamp_series(df[column], lower, upper, strict=strict)
    out["saturation"] = df[column].map(lambda v: _saturation(v, lower, upper))
    low = int((out["saturation"] == LOW).sum())
    high = int((out["saturation"] == HIGH).sum())
    logger.info(
        "clamped %d values of %s to [%r, %r]: %d low, %d high",
        len(out),
        column,
        lower,
        upper,
        low,
        high,
    )
    return ClampSummary(out, column, lower, upper, low, high)


def _df_to_markdown(df: pd.DataFrame) -> str:
    """Render ``df`` as a simple GitHub‑flavoured Markdown table."""

    headers = [str(c) for c in df.columns]
    header_line = "| " + " | ".join(headers) + " |\n"
    separator = "| " + " | ".join(["---"] * len(headers)) + " |\n"
    lines = [header_line, separator]

    for _, row in df.iterrows():
        cells = ["" if pd.isna(val) else str(val) for val in row]
        lines.append("| " + " | ".join(cells) + " |\n")

    return "".join(lines)


def _summary_lines(summary: ClampSummary) -> list[tuple[str, Any]]:
    return [
        ("Column", summary.column),
        ("Lower", summary.lower),
        ("Upper", summary.upper),
        ("Rows", len(summary.frame)),
        ("Saturated low", summary.low_count),
        ("Saturated high", summary.high_count),
    ]


def clamp_csv(
    csv_path: Path,
    column: str,
    lower: Any,
    upper: Any,
    *,
    value_type: str = "float",
    strict: bool = False,
    output_dir: Path | None = None,
    as_of: datetime | None = None,
) -> ClampSummary | tuple[ClampSummary, Path, Path]:
    """Clamp one column of a CSV file and optionally persist a report.

    Parameters
    ----------
    csv_path:
        Input CSV with a header row.
    column:
        Column whose cells are parsed as *value_type* and clamped.
    lower, upper:
        Already typed bounds, see :func:`parsing.parse_value`.
    output_dir:
        When supplied, CSV and Markdown reports are written to this directory
        using a timestamped filename.
    as_of:
        Timestamp used for naming the output files.  Defaults to ``datetime.now()``.

    Returns
    -------
    ClampSummary
        The clamped data.  When ``output_dir`` is provided the tuple
        ``(summary, csv_path, md_path)`` is returned.
    """

    try:
        df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise ConfigError(f"cannot read {csv_path}: {exc}") from exc

    if column not in df.columns:
        raise ConfigError(f"missing column '{column}', available: {list(df.columns)}")

    parsed: list[Any] = []
    for line_no, raw in enumerate(df[column], start=2):  # account for header
        try:
            parsed.append(parse_value(raw, value_type))
        except ConfigError as exc:
            raise ConfigError(f"line {line_no}: {exc}") from exc
    df[column] = pd.Series(parsed, index=df.index, dtype=object)

    summary = clamp_column(df, column, lower, upper, strict=strict)

    if output_dir is None:
        return summary

    as_of = as_of or datetime.now()
    stamp = as_of.strftime("%Y%m%dT%H%M%S")
    output_dir.mkdir(parents=True, exist_ok=True)
    report_csv = output_dir / f"clamp_report_{stamp}.csv"
    report_md = output_dir / f"clamp_report_{stamp}.md"

    header = _summary_lines(summary)
    csv_content = "\n".join(f"{k},{v}" for k, v in header) + "\n\n"
    csv_content += summary.frame.to_csv(index=False)
    report_csv.write_text(csv_content)

    md_content = "\n".join(f"{k}: {v}" for k, v in header) + "\n\n"
    md_content += _df_to_markdown(summary.frame)
    report_md.write_text(md_content)

    logger.info("clamp report written to %s and %s", report_csv, report_md)
    return summary, report_csv, report_md
