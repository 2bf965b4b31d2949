# ABOUTME: Steady-tick terminal spinner built on Rich's progress display
# ABOUTME: Supports printing above the spinner, hiding it for prompts and finishing with a done glyph

import sys
from collections.abc import Sequence

from rich.console import Console
from rich.progress import Progress, ProgressColumn, Task
from rich.text import Text

# The Windows console does not render the heavy check mark by default, the square root sign is used instead
DONE_GLYPH = "√" if sys.platform == "win32" else "✔"
TICK_STRINGS = ("—", "\\", "|", "/", DONE_GLYPH)
TICK_INTERVAL = 0.2


class SpinnerTickColumn(ProgressColumn):
    """Progress column rendering ``:: <frame> <message>``.

    The last tick string is the done frame, shown once the task is finished;
    the others are cycled every ``interval`` seconds while it runs.
    """

    def __init__(self, tick_strings: Sequence[str] = TICK_STRINGS, interval: float = TICK_INTERVAL):
        if len(tick_strings) < 2:
            raise ValueError("tick_strings needs at least one animation frame and a done frame")
        super().__init__()
        self.frames = tuple(tick_strings[:-1])
        self.done_frame = tick_strings[-1]
        self.interval = interval

    def frame_for(self, task: Task) -> str:
        if task.finished:
            return self.done_frame
        elapsed = task.elapsed or 0.0
        return self.frames[int(elapsed / self.interval) % len(self.frames)]

    def render(self, task: Task) -> Text:
        return Text(f":: {self.frame_for(task)} {task.description}")


class ProgressSpinner:
    """A single animated spinner line drawn to standard output.

    The animation runs on Rich's refresh thread, which is created when the
    spinner is constructed and stopped by :meth:`finish`.
    """

    def __init__(
        self,
        message: str,
        console: Console | None = None,
        tick_strings: Sequence[str] = TICK_STRINGS,
        interval: float = TICK_INTERVAL,
    ):
        """Create and start the spinner.

        Args:
            message: Initial message shown next to the spinner
            console: Rich console to draw on, a stdout console if None
            tick_strings: Animation frames followed by the done frame
            interval: Seconds between two animation frames
        """
        self.console = console or Console(highlight=False)
        self.column = SpinnerTickColumn(tick_strings, interval)
        self._progress = Progress(
            self.column,
            console=self.console,
            refresh_per_second=1 / interval,
            transient=False,
        )
        self._task_id = self._progress.add_task(message, total=None)
        self._hidden = False
        self._finished = False
        self._progress.start()

    @property
    def task(self) -> Task:
        return self._progress.tasks[0]

    @property
    def message(self) -> str:
        return self.task.description

    @property
    def is_hidden(self) -> bool:
        return self._hidden

    @property
    def is_finished(self) -> bool:
        return self._finished

    @property
    def frame(self) -> str:
        """Frame the spinner currently shows."""
        return self.column.frame_for(self.task)

    def set_message(self, message: str) -> None:
        self._progress.update(self._task_id, description=message)

    def println(self, line: str) -> None:
        """Print a line above the spinner without tearing its animation."""
        self.console.print(line, markup=False, highlight=False, emoji=False)

    def hide(self) -> None:
        """Stop drawing the spinner, leaving nothing of it on screen."""
        if self._hidden or self._finished:
            return
        live = self._progress.live
        live.transient = True
        live.stop()
        self._hidden = True

    def show(self) -> None:
        """Resume drawing a hidden spinner."""
        if not self._hidden or self._finished:
            return
        live = self._progress.live
        live.transient = False
        live.start(refresh=True)
        self._hidden = False

    def toggle(self) -> None:
        if self._hidden:
            self.show()
        else:
            self.hide()

    def finish(self, message: str | None = None) -> None:
        """Draw the final frame with the done glyph and stop the animation.

        Args:
            message: Replaces the current message when non-empty
        """
        if self._finished:
            return
        if message:
            self.set_message(message)
        self._progress.update(self._task_id, total=1, completed=1)
        self._finished = True
        if self._hidden:
            return
        # Draws the last frame, then ends its line on non-interactive consoles
        self._progress.stop()
