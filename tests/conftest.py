# ABOUTME: Shared fixtures for the CLI logging tests
# ABOUTME: Builds loguru-shaped records, a recording fake spinner and resets the process-wide sink

import logging
from datetime import UTC, datetime
from types import SimpleNamespace

import pytest
from loguru import logger
from rich.console import Console

from crunchy_cli.utils.logging import config as log_config

LEVEL_NUMBERS = {"TRACE": 5, "DEBUG": 10, "INFO": 20, "SUCCESS": 25, "WARNING": 30, "ERROR": 40, "CRITICAL": 50}


def build_record(
    message: str = "",
    level: str = "INFO",
    target: str | None = "crunchy_cli::test",
    name: str = "tests",
    thread_id: int = 7,
    time: datetime | None = None,
) -> dict:
    """Build a dict shaped like the loguru record the sink receives."""
    extra = {} if target is None else {"target": target}
    return {
        "level": SimpleNamespace(name=level, no=LEVEL_NUMBERS[level]),
        "message": message,
        "name": name,
        "extra": extra,
        "thread": SimpleNamespace(id=thread_id, name="MainThread"),
        "time": time or datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC),
    }


class FakeSpinner:
    """Records every call the sink makes on its spinner."""

    def __init__(self, factory: "FakeSpinnerFactory", message: str, console: Console | None):
        self.factory = factory
        self.console = console
        self.initial_message = message
        self.message = message
        self.lines: list[str] = []
        self.is_hidden = False
        self.is_finished = False
        self.final_message: str | None = None

    def println(self, line: str) -> None:
        self.lines.append(line)

    def toggle(self) -> None:
        self.is_hidden = not self.is_hidden

    def finish(self, message: str | None = None) -> None:
        if message:
            self.message = message
        self.final_message = message
        self.is_finished = True
        self.factory.live -= 1


class FakeSpinnerFactory:
    """Spinner factory collecting every FakeSpinner it builds and counting the live ones."""

    def __init__(self):
        self.built: list[FakeSpinner] = []
        self.live = 0
        self.max_live = 0

    def __call__(self, message: str, console: Console | None = None) -> FakeSpinner:
        spinner = FakeSpinner(self, message, console)
        self.built.append(spinner)
        self.live += 1
        self.max_live = max(self.max_live, self.live)
        return spinner


@pytest.fixture
def fake_spinners():
    return FakeSpinnerFactory()


@pytest.fixture
def captured_records():
    """Collect every loguru record emitted during the test."""
    records: list[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE", format="{message}")
    yield records
    logger.remove(handler_id)


@pytest.fixture
def reset_logging():
    """Uninstall the process-wide sink and undo the stdlib bridge after the test."""
    root = logging.getLogger()
    saved_level = root.level

    yield

    if log_config._handler_id is not None:
        try:
            logger.remove(log_config._handler_id)
        except ValueError:
            # Already removed by the test
            pass
    log_config._sink = None
    log_config._handler_id = None

    for handler in list(root.handlers):
        if isinstance(handler, log_config.InterceptHandler):
            root.removeHandler(handler)
    root.setLevel(saved_level)
    logging.captureWarnings(False)


@pytest.fixture
def make_record():
    return build_record
