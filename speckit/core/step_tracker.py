"""Step tracker for command progress.

Tracks an ordered list of named steps and renders them as a tree. A single
refresh callback can be attached so a live view repaints after every
mutation.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum

from rich.markup import escape

from speckit.utils.console import console

logger = logging.getLogger(__name__)

RefreshCallback = Callable[[], None]

BRANCH = "├── "
LAST_BRANCH = "└── "


class StepStatus(Enum):
    """Status of a single step."""

    PENDING = "pending"
    RUNNING = "running"
    DONE = "done"
    ERROR = "error"
    SKIPPED = "skipped"


# (glyph, style) per status
STATUS_SYMBOLS: dict[StepStatus, tuple[str, str]] = {
    StepStatus.DONE: ("●", "green"),
    StepStatus.PENDING: ("○", "bright_black"),
    StepStatus.RUNNING: ("○", "cyan"),
    StepStatus.ERROR: ("●", "red"),
    StepStatus.SKIPPED: ("○", "yellow"),
}


def _one_line(text: str) -> str:
    # Each step renders on exactly one line
    return " ".join(text.split())


@dataclass
class Step:
    """A single checklist entry.

    Attributes:
        key: Identifier, unique within a tracker
        label: Text shown when rendering
        status: Current status
        detail: Free-text annotation, empty when there is none
    """

    key: str
    label: str
    status: StepStatus = StepStatus.PENDING
    detail: str = ""


class StepTracker:
    """Ordered collection of steps with an optional refresh hook.

    Steps render in insertion order; changing a status never moves a step.
    Any status may follow any other, callers sequence their calls.

    The refresh callback runs synchronously after every mutation. Exceptions
    raised by it are discarded so a broken view cannot abort a command or
    leave a mutation half-applied.
    """

    def __init__(self, title: str) -> None:
        self._title = title
        self._steps: list[Step] = []
        self._refresh_cb: RefreshCallback | None = None

    def attach_refresh(self, callback: RefreshCallback) -> None:
        """Register the refresh callback, replacing any previous one."""
        self._refresh_cb = callback

    def add(self, key: str, label: str) -> None:
        """Register a pending step. Re-adding an existing key is a no-op."""
        if self._find(key) is not None:
            return
        self._steps.append(Step(key=key, label=label))
        self._maybe_refresh()

    def start(self, key: str, detail: str = "") -> None:
        self._update(key, StepStatus.RUNNING, detail)

    def complete(self, key: str, detail: str = "") -> None:
        self._update(key, StepStatus.DONE, detail)

    def error(self, key: str, detail: str = "") -> None:
        self._update(key, StepStatus.ERROR, detail)

    def skip(self, key: str, detail: str = "") -> None:
        self._update(key, StepStatus.SKIPPED, detail)

    def _update(self, key: str, status: StepStatus, detail: str) -> None:
        """Set the status of a step, creating it if the key is unknown.

        An empty detail keeps whatever detail the step already had. A step
        created here uses its key as label.
        """
        step = self._find(key)
        if step is not None:
            step.status = status
            if detail:
                step.detail = detail
            self._maybe_refresh()
            return

        self._steps.append(Step(key=key, label=key, status=status, detail=detail))
        self._maybe_refresh()

    def _find(self, key: str) -> Step | None:
        for step in self._steps:
            if step.key == key:
                return step
        return None

    def _maybe_refresh(self) -> None:
        if self._refresh_cb is None:
            return
        try:
            self._refresh_cb()
        except Exception:
            logger.debug("Step tracker refresh callback failed", exc_info=True)

    def _render_step(self, step: Step) -> str:
        symbol, style = STATUS_SYMBOLS[step.status]
        label = escape(_one_line(step.label))
        detail = escape(_one_line(step.detail))

        if step.status is StepStatus.PENDING:
            # Entire line dimmed
            text = f"{symbol} {label} ({detail})" if detail else f"{symbol} {label}"
            return f"[{style}]{text}[/{style}]"

        line = f"[{style}]{symbol}[/{style}] [white]{label}[/white]"
        if detail:
            line += f" [bright_black]({detail})[/bright_black]"
        return line

    def render(self) -> str:
        """Render the tracker as Rich markup.

        Returns:
            The title line followed by one line per step; the last step uses
            a terminating connector
        """
        lines = [f"[cyan]{escape(_one_line(self._title))}[/cyan]"]
        for index, step in enumerate(self._steps):
            connector = LAST_BRANCH if index == len(self._steps) - 1 else BRANCH
            lines.append(connector + self._render_step(step))
        return "\n".join(lines)

    def display(self) -> None:
        """Print the rendered tracker framed by blank lines."""
        console.print()
        console.print(self.render())
        console.print()

    def get_all_steps(self) -> list[Step]:
        """Return copies of the steps in render order."""
        return [replace(step) for step in self._steps]

    def get_statistics(self) -> dict[str, int]:
        """Count steps per status.

        Returns:
            Dict with "total" and one entry per status value, zero included
        """
        stats = {"total": len(self._steps)}
        stats.update({status.value: 0 for status in StepStatus})
        for step in self._steps:
            stats[step.status.value] += 1
        return stats

    def clear(self) -> None:
        self._steps = []
        self._maybe_refresh()

    def is_all_completed(self) -> bool:
        """True when no step is pending or running."""
        return all(
            step.status not in (StepStatus.PENDING, StepStatus.RUNNING) for step in self._steps
        )

    def has_errors(self) -> bool:
        return any(step.status is StepStatus.ERROR for step in self._steps)

    @property
    def title(self) -> str:
        return self._title

    def get_title(self) -> str:
        return self._title

    def set_title(self, title: str) -> None:
        self._title = title
        self._maybe_refresh()

    def __len__(self) -> int:
        return len(self._steps)


__all__ = [
    "BRANCH",
    "LAST_BRANCH",
    "STATUS_SYMBOLS",
    "RefreshCallback",
    "Step",
    "StepStatus",
    "StepTracker",
]
