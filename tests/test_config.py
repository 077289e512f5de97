from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest
from pydantic import ValidationError

from clampable.config import AppConfig, ClampConfig, load_config
from clampable.errors import ConfigError


def test_defaults():
    cfg = AppConfig()
    assert cfg.clamp.lower is None
    assert cfg.clamp.upper is None
    assert cfg.clamp.value_type == "float"
    assert cfg.clamp.strict is False
    assert cfg.io.report_dir == "reports"
    assert cfg.io.log_level == "INFO"
    assert cfg.io.json_logs is False


def test_typed_bounds():
    cfg = ClampConfig(lower="0.9", upper="10.1", value_type="decimal")
    assert cfg.typed_bounds() == (Decimal("0.9"), Decimal("10.1"))
    dates = ClampConfig(lower="2024-01-01", upper=None, value_type="date")
    assert dates.typed_bounds() == (date(2024, 1, 1), None)


def test_numeric_bounds_are_kept_as_text():
    cfg = ClampConfig(lower=1, upper=10, value_type="int")
    assert cfg.lower == "1"
    assert cfg.typed_bounds() == (1, 10)


def test_blank_bound_is_unset():
    assert ClampConfig(lower="  ").lower is None


def test_bound_must_parse_as_value_type():
    with pytest.raises(ValidationError):
        ClampConfig(lower="ten", value_type="int")


def test_invalid_value_type():
    with pytest.raises(ValidationError):
        ClampConfig(value_type="complex")


@pytest.mark.parametrize("raw,expected", [("yes", True), ("off", False), ("1", True), (0, False)])
def test_strict_accepts_boolean_spellings(raw, expected):
    assert ClampConfig(strict=raw).strict is expected


def test_strict_rejects_other_values():
    with pytest.raises(ValidationError):
        ClampConfig(strict=-1)


def test_log_level_is_normalised():
    assert AppConfig(io={"log_level": "debug"}).io.log_level == "DEBUG"
    with pytest.raises(ValidationError):
        AppConfig(io={"log_level": "chatty"})


def test_load_config(tmp_path: Path):
    path = tmp_path / "clampable.ini"
    path.write_text(
        "[clamp]\n"
        "lower = 1\n"
        "upper = 10\n"
        "value_type = int\n"
        "strict = true\n\n"
        "[io]\n"
        f"report_dir = {tmp_path / 'out'}\n"
        "json_logs = on\n"
    )
    cfg = load_config(path)
    assert cfg.clamp.typed_bounds() == (1, 10)
    assert cfg.clamp.strict is True
    assert cfg.io.report_dir == str(tmp_path / "out")
    assert cfg.io.json_logs is True


def test_load_config_missing_sections_use_defaults(tmp_path: Path):
    path = tmp_path / "empty.ini"
    path.write_text("")
    assert load_config(path) == AppConfig()


def test_load_config_invalid_values(tmp_path: Path):
    path = tmp_path / "bad.ini"
    path.write_text("[clamp]\nlower = abc\nvalue_type = int\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_missing_file(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.ini")


def test_load_config_not_ini(tmp_path: Path):
    path = tmp_path / "broken.ini"
    path.write_text("lower = 1\n")
    with pytest.raises(ConfigError):
        load_config(path)
