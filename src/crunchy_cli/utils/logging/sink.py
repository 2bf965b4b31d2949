# ABOUTME: Loguru sink rendering records as terse CLI lines, extended debug lines or spinner updates
# ABOUTME: Owns the single progress spinner slot and serialises all access to it with one lock

import contextlib
import sys
import threading
from collections.abc import Callable, Mapping
from datetime import UTC
from typing import Any, TextIO

from rich.console import Console

from crunchy_cli.utils.logging.levels import Verbosity
from crunchy_cli.utils.logging.progress import ProgressSpinner

# Reserved targets, only emitted through the helpers in crunchy_cli.utils.logging.utils
PROGRESS = "progress"
PROGRESS_PAUSE = "progress_pause"
PROGRESS_END = "progress_end"
PROGRESS_TARGETS = frozenset({PROGRESS, PROGRESS_PAUSE, PROGRESS_END})

DEFAULT_PREFIX = "crunchy_cli"
TERSE_PREFIX = ":: "
INTERLEAVE_PREFIX = ":: → "

SpinnerFactory = Callable[[str, Console], ProgressSpinner]


def record_target(record: Mapping[str, Any]) -> str:
    """Target of a loguru record: the bound ``target`` extra, else the emitting module."""
    target = record["extra"].get("target")
    if target is None:
        target = record["name"] or ""
    return str(target)


class CliLogger:
    """Loguru sink multiplexing plain lines, error lines and a progress spinner.

    Below DEBUG verbosity, records are rendered tersely as ``:: <message>``,
    or routed through the live spinner when one exists. At DEBUG and above
    every record becomes one extended line on stdout and no spinner is drawn.
    """

    def __init__(
        self,
        level: Verbosity,
        prefix: str = DEFAULT_PREFIX,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        spinner_factory: SpinnerFactory | None = None,
    ):
        """Initialize the sink.

        Args:
            level: Verbosity records are filtered against
            prefix: Target prefix of records belonging to the application
            stdout: Stream for informational output, sys.stdout at write time if None
            stderr: Stream for terse warnings and errors, sys.stderr at write time if None
            spinner_factory: Builds the spinner from its initial message and the console it draws on
        """
        self.level = Verbosity.parse(level)
        self.prefix = prefix
        self._stdout = stdout
        self._stderr = stderr
        self._spinner_factory = spinner_factory or ProgressSpinner
        self._lock = threading.Lock()
        self._progress: ProgressSpinner | None = None

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    @property
    def has_progress(self) -> bool:
        with self._lock:
            return self._progress is not None

    def enabled(self, record: Mapping[str, Any]) -> bool:
        return Verbosity.from_loguru_no(record["level"].no) <= self.level

    def admits(self, record: Mapping[str, Any]) -> bool:
        if not self.enabled(record):
            return False
        target = record_target(record)
        return target in PROGRESS_TARGETS or target.startswith(self.prefix)

    def __call__(self, message: Any) -> None:
        """Entry point used by loguru, ``message.record`` holds the record."""
        self.log(message.record)

    def log(self, record: Mapping[str, Any]) -> None:
        if not self.admits(record):
            return

        if self.level.is_verbose:
            self.extended(record)
            return

        target = record_target(record)
        if target == PROGRESS:
            self.progress(record, stop=False)
        elif target == PROGRESS_PAUSE:
            self.toggle_progress()
        elif target == PROGRESS_END:
            self.progress(record, stop=True)
        else:
            with self._lock:
                spinner = self._progress
                if spinner is not None:
                    self._draw(spinner.println, f"{INTERLEAVE_PREFIX}{record['message']}")
                    return
            if record["level"].no < Verbosity.WARN.loguru_no:
                self.normal(record)
            else:
                self.error(record)

    def flush(self) -> None:
        with contextlib.suppress(OSError, ValueError):
            self.stdout.flush()

    def normalize_target(self, target: str) -> str:
        """Collapse progress targets and the ``<prefix>_core`` package onto the prefix."""
        if target in PROGRESS_TARGETS:
            return self.prefix
        core = f"{self.prefix}_core"
        if target.startswith(core):
            return self.prefix + target[len(core) :]
        return target

    def format_extended(self, record: Mapping[str, Any]) -> str:
        timestamp = record["time"].astimezone(UTC).strftime("%Y-%m-%d %H:%M:%S")
        level = Verbosity.from_loguru_no(record["level"].no).name
        thread_id = "".join(ch for ch in str(record["thread"].id) if ch.isdigit())
        target = self.normalize_target(record_target(record))
        return f"[{timestamp}] {level}  {target} ({thread_id}) {record['message']}"

    def extended(self, record: Mapping[str, Any]) -> None:
        self._write(self.stdout, self.format_extended(record))
        self.flush()

    def normal(self, record: Mapping[str, Any]) -> None:
        self._write(self.stdout, f"{TERSE_PREFIX}{record['message']}")
        self.flush()

    def error(self, record: Mapping[str, Any]) -> None:
        self._write(self.stderr, f"{TERSE_PREFIX}{record['message']}")

    def progress(self, record: Mapping[str, Any], stop: bool) -> None:
        """Start, interleave into or finish the spinner."""
        message = record["message"]
        with self._lock:
            spinner = self._progress
            if stop:
                if spinner is None:
                    return
                self._progress = None
                self._draw(spinner.finish, message or None)
            elif spinner is not None:
                self._draw(spinner.println, f"{INTERLEAVE_PREFIX}{message}")
            else:
                try:
                    # Without an explicit stream the console follows sys.stdout like the terse lines
                    console = Console(file=self._stdout, highlight=False)
                    self._progress = self._spinner_factory(message, console)
                except Exception:
                    # Terminal unavailable or not drawable, progress stays off
                    self._progress = None

    def toggle_progress(self) -> None:
        with self._lock:
            if self._progress is not None:
                self._draw(self._progress.toggle)

    @staticmethod
    def _write(stream: TextIO, line: str) -> None:
        with contextlib.suppress(OSError, ValueError):
            print(line, file=stream)

    @staticmethod
    def _draw(action: Callable[..., None], *args: Any) -> None:
        try:
            action(*args)
        except Exception:
            # Don't let a failing spinner redraw break the logging system
            pass
