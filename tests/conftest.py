"""
Pytest configuration and shared fixtures.
"""
import logging
import os
from typing import List

import pytest
from dotenv import load_dotenv

# Load ONLY the .env.example so tests never depend on a local .env
load_dotenv(".env.example")

# Settings are read at import time, so pin logging before exec_timer loads
os.environ["LOG_LEVEL"] = "INFO"
os.environ["LOG_FORMAT"] = "text"


class RecordingSink:
    """Measurement sink that keeps every measurement it receives."""

    def __init__(self):
        self.measurements = []

    def __call__(self, measurement):
        self.measurements.append(measurement)


class ListHandler(logging.Handler):
    """Collects log records emitted on a logger."""

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def messages(self, level: int = logging.NOTSET) -> List[str]:
        return [r.getMessage() for r in self.records if r.levelno >= level]


@pytest.fixture
def sink():
    return RecordingSink()


def _capture(name: str):
    logger = logging.getLogger(name)
    handler = ListHandler()
    logger.addHandler(handler)
    return logger, handler


@pytest.fixture
def metrics_log():
    """Records emitted by the metrics logger during the test."""
    from exec_timer.monitoring import metrics  # noqa: F401  configures the metrics logger

    logger, handler = _capture("metrics")
    yield handler
    logger.removeHandler(handler)


@pytest.fixture
def fake_clock(monkeypatch):
    """Replace the monotonic clock with a fixed sequence of readings (seconds)."""
    from exec_timer.monitoring import metrics

    def install(*readings: float):
        monkeypatch.setattr(metrics, "monotonic", iter(readings).__next__)

    return install
