from __future__ import annotations

import io
import json
import logging

import pytest

from timed_metrics import LoggingSink
from timed_metrics.core.observability.logging_config import setup_logging


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_level_from_env(restore_root_logging, monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")
    setup_logging(json_logs=False)
    assert restore_root_logging.level == logging.WARNING


def test_json_logs_carry_timing_extras(restore_root_logging) -> None:
    handler = setup_logging(level="DEBUG", json_logs=True)
    stream = io.StringIO()
    handler.setStream(stream)

    LoggingSink(logging.getLogger("tests.json"), level=logging.INFO).record("timer.a.b", 9)

    payload = json.loads(stream.getvalue().strip())
    assert payload["level"] == "INFO"
    assert payload["logger"] == "tests.json"
    assert payload["msg"] == "timer.a.b took 9ms"
    assert payload["event"] == "timing"
    assert payload["metric_key"] == "timer.a.b"
    assert payload["duration_ms"] == 9
