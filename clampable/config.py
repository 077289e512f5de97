"""Application configuration using Pydantic models."""

from __future__ import annotations

from configparser import ConfigParser, Error as ConfigParserError
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .errors import ConfigError
from .parsing import ValueType, parse_value


def _parse_bool(v: Any, name: str) -> bool:
    """Accept bools, 0/1 and the usual INI spellings; reject anything else."""

    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)) and v in (0, 1):
        return bool(v)
    if isinstance(v, str):
        val = v.strip().lower()
        if val in {"true", "1", "yes", "on"}:
            return True
        if val in {"false", "0", "no", "off"}:
            return False
    raise ValueError(f"{name} must be a boolean")


class ClampConfig(BaseModel):
    """Default bounds used when the CLI does not receive them explicitly.

    Bounds are kept as text and converted with :func:`parsing.parse_value`
    so the same config drives integer, decimal, string or date clamping.
    """

    lower: str | None = Field(None, description="Default inclusive lower bound")
    upper: str | None = Field(None, description="Default inclusive upper bound")
    value_type: ValueType = Field("float", description="Type values and bounds are parsed as")
    strict: bool = Field(False, description="Reject bounds where lower orders after upper")

    @field_validator("strict", mode="before")
    @classmethod
    def _validate_strict(cls, v: Any) -> bool:
        return _parse_bool(v, "strict")

    @field_validator("lower", "upper", mode="before")
    @classmethod
    def _bounds_as_text(cls, v: Any) -> Any:
        if v is None:
            return None
        if isinstance(v, str):
            return v if v.strip() else None
        return str(v)

    @model_validator(mode="after")
    def bounds_parse_as_value_type(self) -> "ClampConfig":
        for name in ("lower", "upper"):
            raw = getattr(self, name)
            if raw is None:
                continue
            try:
                parse_value(raw, self.value_type)
            except ConfigError as exc:
                raise ValueError(f"{name}: {exc}") from exc
        return self

    def typed_bounds(self) -> tuple[Any, Any]:
        """Return ``(lower, upper)`` parsed as :attr:`value_type` (``None`` when unset)."""

        lower = None if self.lower is None else parse_value(self.lower, self.value_type)
        upper = None if self.upper is None else parse_value(self.upper, self.value_type)
        return lower, upper


class IOConfig(BaseModel):
    """Input/output paths and options."""

    report_dir: str = Field("reports", description="Directory for generated reports and logs")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging verbosity"
    )
    json_logs: bool = Field(False, description="Write JSON formatted log lines")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v: Any) -> Any:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("json_logs", mode="before")
    @classmethod
    def _validate_json_logs(cls, v: Any) -> bool:
        return _parse_bool(v, "json_logs")


class AppConfig(BaseModel):
    """Top level application configuration."""

    clamp: ClampConfig = Field(default_factory=ClampConfig)
    io: IOConfig = Field(default_factory=IOConfig)


def load_config(path: Path) -> AppConfig:
    """Load configuration from an INI file.

    Parameters
    ----------
    path:
        Path to the configuration file.

    Returns
    -------
    AppConfig
        The parsed application configuration.

    Raises
    ------
    ConfigError
        If the file cannot be read, is not valid INI or fails validation.
    """

    parser = ConfigParser()
    try:
        with path.open() as handle:
            parser.read_file(handle)
    except (OSError, ConfigParserError) as exc:
        raise ConfigError(f"cannot read config {path}: {exc}") from exc

    data: dict[str, Any] = {}
    for section in ["clamp", "io"]:
        if parser.has_section(section):
            data[section] = dict(parser.items(section))

    try:
        return AppConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"invalid config {path}: {exc}") from exc


__all__ = [
    "ClampConfig",
    "IOConfig",
    "AppConfig",
    "load_config",
]
