import json
import logging
from datetime import datetime, timezone

from freezegun import freeze_time

from clampable.logging_utils import setup_logging


def test_setup_logging_creates_json_log(tmp_path):
    as_of = datetime(2023, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    log_path, run_id = setup_logging(tmp_path, json_logs=True, as_of=as_of)
    assert log_path.exists()
    assert run_id == "20230102T030405"
    assert run_id in log_path.name

    logger = logging.getLogger(__name__)
    logger.info("hello world")

    lines = log_path.read_text().strip().splitlines()
    assert lines, "log file should contain lines"
    data = json.loads(lines[0])
    assert data["run_id"] == run_id
    assert data["message"] == "hello world"
    assert data["logger"] == __name__


@freeze_time("2024-05-06 07:08:09")
def test_setup_logging_plain_text_defaults_to_now(tmp_path):
    log_path, run_id = setup_logging(tmp_path / "logs", level="warning")
    assert run_id == "20240506T070809"
    assert log_path == tmp_path / "logs" / "run_20240506T070809.log"

    logger = logging.getLogger("clampable.test")
    logger.info("filtered out")
    logger.warning("kept")

    text = log_path.read_text()
    assert "filtered out" not in text
    assert "WARNING [20240506T070809] clampable.test: kept" in text
