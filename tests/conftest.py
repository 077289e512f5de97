import logging
import sys
from pathlib import Path

import pytest

root = Path(__file__).resolve().parents[1]
# Ensure project root is on ``sys.path`` so tests can import the package
sys.path.append(str(root))


@pytest.fixture(autouse=True)
def _restore_logging():
    """CLI commands reconfigure the root logger; put it back after each test."""
    root_logger = logging.getLogger()
    prev_handlers = root_logger.handlers[:]
    prev_level = root_logger.level
    prev_factory = logging.getLogRecordFactory()
    yield
    for h in root_logger.handlers[:]:
        if h not in prev_handlers:
            root_logger.removeHandler(h)
            h.close()
    for h in prev_handlers:
        if h not in root_logger.handlers:
            root_logger.addHandler(h)
    root_logger.setLevel(prev_level)
    logging.setLogRecordFactory(prev_factory)
