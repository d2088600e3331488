"""
Global pytest fixtures.

Sinks here stand in for the real media so tests can read back exactly what
each backend wrote.
"""

import io
import logging
import uuid
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Callable, List, Tuple

import pytest

from owtorg_logger.config import reset_structlog_state
from owtorg_logger.logger import Initializable, Logger
from owtorg_logger.logger.log_backends import SystemLogger

ENV_KEYS = (
    "OWTORG_LOG_LEVEL",
    "OWTORG_LOG_BACKENDS",
    "OWTORG_LOG_FILE",
    "OWTORG_LOG_STREAM",
    "OWTORG_SYSTEM_LOGGER",
)

SEVERITIES = [
    ("emergency", "Emergency"),
    ("alert", "Alert"),
    ("critical", "Critical"),
    ("error", "Error"),
    ("warning", "Warning"),
    ("notice", "Notice"),
    ("info", "Info"),
    ("debug", "Debug"),
]


class RecordingHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


class RecordingLogger(Initializable["RecordingLogger"], Logger):
    """Logger double that appends (name, method, level, values) to a journal."""

    def __init__(self, name: str = "rec", journal: List[Tuple[Any, ...]] | None = None):
        super().__init__()
        self.name = name
        self.journal: List[Tuple[Any, ...]] = journal if journal is not None else []
        self.init_count = 0

    def init(self) -> None:
        self._apply_init_callbacks()
        self.init_count += 1

    def log(self, level: str, *values: Any) -> None:
        self.journal.append((self.name, str(level), values))


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Clear package env vars and structlog state around every test."""
    for key in ENV_KEYS:
        # setenv first so values loaded from .env files are undone too
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    reset_structlog_state()
    yield
    reset_structlog_state()


@pytest.fixture()
def in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with tmp_path as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def system_sink():
    """A private stdlib logger whose output is kept in memory."""
    logger = logging.getLogger(f"owtorg-tests.{uuid.uuid4().hex}")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    stream = io.StringIO()
    text_handler = logging.StreamHandler(stream)
    text_handler.setFormatter(logging.Formatter("%(message)s"))
    recorder = RecordingHandler()
    logger.addHandler(text_handler)
    logger.addHandler(recorder)

    def use_sink(s: SystemLogger) -> None:
        s.logger = logger

    yield SimpleNamespace(
        logger=logger,
        stream=stream,
        records=recorder.records,
        callback=use_sink,
    )

    logger.removeHandler(text_handler)
    logger.removeHandler(recorder)


@pytest.fixture()
def make_recorder() -> Callable[..., RecordingLogger]:
    """Factory for RecordingLoggers sharing one journal."""
    journal: List[Tuple[Any, ...]] = []

    def factory(name: str) -> RecordingLogger:
        return RecordingLogger(name, journal)

    factory.journal = journal  # type: ignore[attr-defined]
    return factory
