# ABOUTME: Producer-side helpers emitting the reserved progress records through loguru
# ABOUTME: Provides the progress scope guard, pause toggling, indented infos and get_logger

import threading
from types import TracebackType
from typing import TYPE_CHECKING, Any

from loguru import logger

from crunchy_cli.utils.logging.config import max_level
from crunchy_cli.utils.logging.sink import PROGRESS, PROGRESS_END, PROGRESS_PAUSE

if TYPE_CHECKING:
    from loguru import Logger


def get_logger(name: str | None = None) -> "Logger":
    """Get a logger instance.

    Args:
        name: Target attached to every record, the calling module is used if None

    Returns:
        Loguru logger, bound to the target when one is given
    """
    if name is None:
        return logger
    return logger.bind(target=name)


class ProgressHandler:
    """Scope guard of a spinner started with :func:`progress`.

    Exactly one ``progress_end`` record is emitted per guard: by :meth:`stop`,
    or with an empty message when the ``with`` block is left (or the guard
    is collected) without an explicit stop.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.stopped = False

    def stop(self, message: str = "") -> None:
        """Finish the spinner, replacing its message when ``message`` is non-empty."""
        self._end(message, depth=2)

    def _end(self, message: str, depth: int) -> None:
        with self._lock:
            if self.stopped:
                return
            self.stopped = True
        logger.opt(depth=depth).bind(target=PROGRESS_END).info("{}", message)

    def __enter__(self) -> "ProgressHandler":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._end("", depth=2)

    def __del__(self) -> None:
        if not getattr(self, "stopped", True):
            self._end("", depth=1)


def progress(message: str, *args: Any, **kwargs: Any) -> ProgressHandler:
    """Start a spinner, or print above the live one, and return its scope guard.

    Usage:
        with progress("Fetching {}", url) as handler:
            ...
            handler.stop("Fetched {}".format(url))
    """
    logger.opt(depth=1).bind(target=PROGRESS).info(message, *args, **kwargs)
    return ProgressHandler()


def progress_pause() -> None:
    """Hide the live spinner, or show it again when it is already hidden."""
    logger.opt(depth=1).bind(target=PROGRESS_PAUSE).info("")


def tab_info(message: str, *args: Any, **kwargs: Any) -> None:
    """Log an info line indented by a tab in terse mode, unchanged in verbose mode."""
    level = max_level()
    if level is not None and level.is_verbose:
        logger.opt(depth=1).info(message, *args, **kwargs)
        return
    text = message.format(*args, **kwargs) if args or kwargs else message
    logger.opt(depth=1).info("\t{}", text)
