"""Live terminal view of a StepTracker.

The view registers itself as the tracker's refresh callback, so every
tracker mutation repaints the Rich Live display while it is active.

    with LiveTrackerView(tracker):
        tracker.start("precheck")
        ...
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from speckit.core.step_tracker import StepTracker
from speckit.utils.console import console

# Refresh rate for the Live display (times per second)
REFRESH_RATE = 8


@dataclass
class LiveTrackerView:
    """Rich Live display bound to a tracker.

    Attributes:
        tracker: Tracker to display
        target_console: Console the display is drawn on
        transient: Clear the display on exit instead of leaving it on screen
    """

    tracker: StepTracker
    target_console: Console = field(default_factory=lambda: console)
    transient: bool = True

    _live: Live | None = field(default=None, init=False, repr=False)

    def render(self) -> Panel:
        return Panel(Text.from_markup(self.tracker.render()), border_style="cyan", expand=False)

    def start(self) -> None:
        """Start the Live display and attach to the tracker."""
        self._live = Live(
            self.render(),
            console=self.target_console,
            refresh_per_second=REFRESH_RATE,
            transient=self.transient,
        )
        self._live.start()
        self.tracker.attach_refresh(self.refresh)

    def stop(self) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None

    def refresh(self) -> None:
        """Repaint with the current tracker state. No-op when stopped."""
        if self._live is not None:
            self._live.update(self.render())

    def __enter__(self) -> LiveTrackerView:
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()


__all__ = [
    "LiveTrackerView",
    "REFRESH_RATE",
]
