# ABOUTME: One-time installation of the CLI sink into loguru with the startup verbosity
# ABOUTME: Also bridges the standard logging module into loguru and reports the logging status

import functools
import inspect
import logging
import threading
from typing import Any, TextIO

from loguru import logger

from crunchy_cli.config import get_config
from crunchy_cli.utils.logging.errors import AlreadyInstalledError
from crunchy_cli.utils.logging.levels import Verbosity
from crunchy_cli.utils.logging.progress import ProgressSpinner
from crunchy_cli.utils.logging.sink import CliLogger


class LoggingMode:
    """Logging mode constants."""

    TERSE = "terse"
    VERBOSE = "verbose"


def mode_for(level: Verbosity) -> str:
    return LoggingMode.VERBOSE if level.is_verbose else LoggingMode.TERSE


# Process-wide sink, installed once by init_logging
_sink: CliLogger | None = None
_handler_id: int | None = None
_install_lock = threading.Lock()


class InterceptHandler(logging.Handler):
    """Logging handler forwarding standard library records to loguru.

    The stdlib logger name becomes the record target, so records of
    third-party libraries are dropped by the sink's prefix filter.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip the logging module's frames so loguru sees the original caller
        frame, depth = inspect.currentframe(), 0
        while frame is not None and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).bind(target=record.name).log(
            level, record.getMessage()
        )


def setup_third_party_logging(level: Verbosity = Verbosity.INFO) -> None:
    """Route the standard logging module and warnings through loguru."""
    logging.basicConfig(handlers=[InterceptHandler()], level=level.loguru_no, force=True)
    logging.captureWarnings(True)


def verbosity_from_flags(verbose: int = 0, quiet: bool = False, default: Verbosity | str = Verbosity.INFO) -> Verbosity:
    """Pick the verbosity from CLI flags: -q wins, -v is DEBUG and -vv TRACE."""
    if quiet:
        return Verbosity.ERROR
    if verbose >= 2:
        return Verbosity.TRACE
    if verbose == 1:
        return Verbosity.DEBUG
    return Verbosity.parse(default)


def init_logging(
    level: Verbosity | str | None = None,
    prefix: str | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    intercept_stdlib: bool | None = None,
) -> CliLogger:
    """Install the CLI sink as the only loguru handler.

    Args:
        level: Verbosity, the configured log_level if None
        prefix: Target prefix, the configured log_prefix if None
        stdout: Stream for informational output, sys.stdout if None
        stderr: Stream for terse warnings and errors, sys.stderr if None
        intercept_stdlib: Bridge the standard logging module, configured default if None

    Returns:
        The installed sink

    Raises:
        AlreadyInstalledError: If the sink was installed before in this process
    """
    global _sink, _handler_id

    config = get_config()
    verbosity = Verbosity.parse(level if level is not None else config.log_level)

    with _install_lock:
        if _sink is not None:
            raise AlreadyInstalledError(_sink.level.name)

        sink = CliLogger(
            verbosity,
            prefix=prefix or config.log_prefix,
            stdout=stdout,
            stderr=stderr,
            spinner_factory=functools.partial(ProgressSpinner, interval=config.progress_tick_ms / 1000),
        )

        # Remove default loguru handler
        logger.remove()
        _handler_id = logger.add(
            sink,
            level=verbosity.loguru_level,
            format="{message}",
            backtrace=False,
            diagnose=False,
        )
        _sink = sink

    if intercept_stdlib is None:
        intercept_stdlib = config.intercept_stdlib
    if intercept_stdlib:
        setup_third_party_logging(verbosity)

    return sink


def get_sink() -> CliLogger | None:
    return _sink


def max_level() -> Verbosity | None:
    """Verbosity of the installed sink, None before installation."""
    return _sink.level if _sink is not None else None


def get_logging_status() -> dict[str, Any]:
    """Get current logging configuration status."""
    config = get_config()
    sink = _sink
    level = sink.level if sink is not None else Verbosity.parse(config.log_level)

    return {
        "installed": sink is not None,
        "level": level.name,
        "mode": mode_for(level),
        "prefix": sink.prefix if sink is not None else config.log_prefix,
        "stdlib_intercepted": any(isinstance(h, InterceptHandler) for h in logging.getLogger().handlers),
        "progress_active": sink.has_progress if sink is not None else False,
        "progress_tick_ms": config.progress_tick_ms,
    }
