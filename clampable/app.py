"""Command line interface for clampable.

This module exposes a small Typer based CLI over the library helpers:

* :func:`core.clamp` / :func:`core.clamp_strict` – clamp a single value.
* :func:`batch.clamp_csv` – clamp one column of a CSV file and write reports.
* :func:`cases.run_cases` – check a YAML case file of expected results.

Bounds and the value type may be supplied on the command line or fall back to
the ``[clamp]`` section of an INI config file (see :mod:`config`).

Example
-------

Clamping a single integer::

    python -m clampable.app value 20 --lower 1 --upper 10 --type int

Clamping the ``price`` column of a CSV and writing reports to ``reports/``::

    python -m clampable.app file prices.csv --column price \
        --config clampable.ini --output-dir reports
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
import importlib.metadata
import logging
from pathlib import Path
from typing import Any, Iterator

import typer

from .batch import ClampSummary, clamp_csv
from .cases import load_cases, run_cases
from .config import AppConfig, load_config
from .core import clamp, clamp_strict
from .errors import ConfigError, ExitCode, InvalidRangeError
from .logging_utils import setup_logging
from .parsing import coerce_value_type, parse_value

logger = logging.getLogger(__name__)

DIST_NAME = "clampable"

app = typer.Typer(help="Clamp values, CSV columns and case files to closed ranges")


@dataclass
class CLIOptions:
    """Global command line flags routed to downstream components."""

    log_level: str | None = None
    json_logs: bool = False


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(importlib.metadata.version(DIST_NAME))
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the installed version and exit",
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Override the [io] log_level from the config file"
    ),
    json_logs: bool = typer.Option(False, "--json-logs", help="Write JSON formatted logs"),
) -> None:
    """clampable command line utilities."""
    ctx.obj = CLIOptions(log_level=log_level, json_logs=json_logs)


@contextmanager
def _exit_on_error() -> Iterator[None]:
    """Translate library exceptions into :class:`ExitCode` values."""

    try:
        yield
    except typer.Exit:
        raise
    except InvalidRangeError as exc:
        logger.error("%s", exc)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=ExitCode.RANGE) from exc
    except ConfigError as exc:
        logger.error("%s", exc)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=ExitCode.CONFIG) from exc
    except Exception as exc:
        logger.exception("unexpected error")
        typer.echo(f"Unexpected error: {exc}", err=True)
        raise typer.Exit(code=ExitCode.UNKNOWN) from exc


def _load(config: Path | None) -> AppConfig:
    return load_config(config) if config is not None else AppConfig()


def _resolve_bounds(
    cfg: AppConfig,
    lower: str | None,
    upper: str | None,
    value_type: str | None,
    strict: bool | None,
) -> tuple[Any, Any, str, bool]:
    """Merge command line bounds with the ``[clamp]`` config section.

    Command line values win.  Both bounds are parsed with the effective value
    type so a ``--type`` override re-interprets bounds taken from the config.
    """

    vtype = coerce_value_type(value_type or cfg.clamp.value_type)
    raw_lower = lower if lower is not None else cfg.clamp.lower
    raw_upper = upper if upper is not None else cfg.clamp.upper
    if raw_lower is None or raw_upper is None:
        raise ConfigError("both --lower and --upper are required unless set in [clamp] config")
    use_strict = cfg.clamp.strict if strict is None else strict
    return parse_value(raw_lower, vtype), parse_value(raw_upper, vtype), vtype, use_strict


def _setup_run_logging(
    ctx: typer.Context, cfg: AppConfig, log_dir: Path, as_of: datetime | None = None
) -> Path:
    options: CLIOptions = ctx.obj if isinstance(ctx.obj, CLIOptions) else CLIOptions()
    log_path, run_id = setup_logging(
        log_dir,
        level=options.log_level or cfg.io.log_level,
        json_logs=options.json_logs or cfg.io.json_logs,
        as_of=as_of,
    )
    logger.info("run %s started", run_id)
    return log_path


_LOWER_OPT = typer.Option(None, "--lower", "-l", help="Inclusive lower bound")
_UPPER_OPT = typer.Option(None, "--upper", "-u", help="Inclusive upper bound")
_TYPE_OPT = typer.Option(
    None, "--type", "-t", help="Value type: int, float, decimal, str or date"
)
_STRICT_OPT = typer.Option(
    None, "--strict/--no-strict", help="Reject bounds where lower orders after upper"
)
_CONFIG_OPT = typer.Option(None, "--config", exists=True, readable=True, help="INI config file")


@app.command("value")
def value_cmd(
    value: str = typer.Argument(..., help="Value to clamp"),
    lower: str | None = _LOWER_OPT,
    upper: str | None = _UPPER_OPT,
    value_type: str | None = _TYPE_OPT,
    strict: bool | None = _STRICT_OPT,
    config: Path | None = _CONFIG_OPT,
) -> None:
    """Clamp a single VALUE and print the result."""

    with _exit_on_error():
        cfg = _load(config)
        lo, hi, vtype, use_strict = _resolve_bounds(cfg, lower, upper, value_type, strict)
        parsed = parse_value(value, vtype)
        result = clamp_strict(parsed, lo, hi) if use_strict else clamp(parsed, lo, hi)
    typer.echo(str(result))


def _echo_summary(summary: ClampSummary) -> None:
    typer.echo(
        f"Clamped {len(summary.frame)} values of '{summary.column}' to "
        f"[{summary.lower}, {summary.upper}]: {summary.low_count} low, "
        f"{summary.high_count} high, {summary.unchanged_count} unchanged"
    )


@app.command("file")
def file_cmd(
    ctx: typer.Context,
    csv_path: Path = typer.Argument(..., exists=True, readable=True, help="CSV file to clamp"),
    column: str = typer.Option(..., "--column", "-c", help="Column to clamp"),
    lower: str | None = _LOWER_OPT,
    upper: str | None = _UPPER_OPT,
    value_type: str | None = _TYPE_OPT,
    strict: bool | None = _STRICT_OPT,
    config: Path | None = _CONFIG_OPT,
    output_dir: Path | None = typer.Option(
        None, "--output-dir", "-o", help="Directory for generated reports"
    ),
) -> None:
    """Clamp one column of a CSV file and write CSV and Markdown reports."""

    with _exit_on_error():
        cfg = _load(config)
        report_dir = output_dir or Path(cfg.io.report_dir)
        as_of = datetime.now(timezone.utc)
        log_path = _setup_run_logging(ctx, cfg, report_dir, as_of)
        lo, hi, vtype, use_strict = _resolve_bounds(cfg, lower, upper, value_type, strict)
        summary, report_csv, report_md = clamp_csv(
            csv_path,
            column,
            lo,
            hi,
            value_type=vtype,
            strict=use_strict,
            output_dir=report_dir,
            as_of=as_of,
        )

    _echo_summary(summary)
    typer.echo(f"CSV report written to {report_csv}")
    typer.echo(f"Markdown report written to {report_md}")
    typer.echo(f"Log written to {log_path}")


@app.command("check")
def check_cmd(
    ctx: typer.Context,
    cases_path: Path = typer.Argument(..., exists=True, readable=True, help="YAML case file"),
    config: Path | None = _CONFIG_OPT,
    output_dir: Path | None = typer.Option(
        None, "--output-dir", "-o", help="Directory for the run log"
    ),
) -> None:
    """Run every case in CASES_PATH and report mismatches."""

    with _exit_on_error():
        cfg = _load(config)
        _setup_run_logging(ctx, cfg, output_dir or Path(cfg.io.report_dir))
        results = run_cases(load_cases(cases_path))

    for result in results:
        typer.echo(result.describe())
    failed = [r for r in results if not r.passed]
    typer.echo(f"{len(results) - len(failed)} passed, {len(failed)} failed")
    if failed:
        raise typer.Exit(code=ExitCode.CHECK)


if __name__ == "__main__":  # pragma: no cover
    app()
