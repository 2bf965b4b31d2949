# ABOUTME: CLI logging facade: terse lines, extended debug lines and a progress spinner on one stream
# ABOUTME: Exports sink installation, the verbosity scale and the producer-side helpers

from .config import (
    InterceptHandler,
    LoggingMode,
    get_logging_status,
    get_sink,
    init_logging,
    max_level,
    setup_third_party_logging,
    verbosity_from_flags,
)
from .errors import AlreadyInstalledError, LoggingError
from .levels import Verbosity
from .progress import DONE_GLYPH, TICK_STRINGS, ProgressSpinner
from .sink import PROGRESS, PROGRESS_END, PROGRESS_PAUSE, CliLogger
from .utils import ProgressHandler, get_logger, progress, progress_pause, tab_info

__all__ = [
    # Configuration
    "InterceptHandler",
    "LoggingMode",
    "get_logging_status",
    "get_sink",
    "init_logging",
    "max_level",
    "setup_third_party_logging",
    "verbosity_from_flags",
    "Verbosity",
    # Errors
    "AlreadyInstalledError",
    "LoggingError",
    # Sink and spinner
    "CliLogger",
    "ProgressSpinner",
    "DONE_GLYPH",
    "TICK_STRINGS",
    "PROGRESS",
    "PROGRESS_PAUSE",
    "PROGRESS_END",
    # Producer helpers
    "ProgressHandler",
    "get_logger",
    "progress",
    "progress_pause",
    "tab_info",
]
