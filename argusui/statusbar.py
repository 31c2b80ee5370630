"""The bottom status bar: task counts or an error, plus key hints."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Iterable

from argusui.models import Status, Task
from argusui.theme import Style, Theme, visible_width

_PROJECT_KEYS = (
    ("n", "new"),
    ("d", "del"),
    ("1", "tasks"),
    ("?", "help"),
    ("q", "quit"),
)

_TASK_KEYS = (
    ("n", "new"),
    ("RET", "attach"),
    ("s", "status"),
    ("d", "del"),
    ("2", "projects"),
    ("?", "help"),
    ("q", "quit"),
)

_KEY_STYLE = Style(fg="87")
_LABEL_STYLE = Style(fg="240")


@dataclass
class StatusBar:
    """Renders task counts (or the last error) and key hints on one line."""

    theme: Theme
    width: int = 0
    tasks: list[Task] = field(default_factory=list)
    project_tab: bool = False
    running: set[str] = field(default_factory=set)
    error: str = ""

    def set_running(self, ids: Iterable[str]) -> None:
        """Record which task IDs have a live agent session."""
        self.running = set(ids)

    def set_error(self, message: str) -> None:
        """Show an error instead of the task counts."""
        self.error = message

    def clear_error(self) -> None:
        """Go back to showing the task counts."""
        self.error = ""

    def _summary(self) -> str:
        if self.error:
            return " " + self.theme.error.render("! " + self.error)
        active = sum(
            1
            for t in self.tasks
            if t.status == Status.IN_PROGRESS and t.id in self.running
        )
        pending = sum(1 for t in self.tasks if t.status == Status.PENDING)
        complete = sum(1 for t in self.tasks if t.status == Status.COMPLETE)
        return f" {active} active  {pending} pending  {complete} done"

    def view(self) -> str:
        """Render the bar at the configured width."""
        left = self._summary()
        keys = _PROJECT_KEYS if self.project_tab else _TASK_KEYS
        right = (
            "  ".join(
                _KEY_STYLE.render(key) + _LABEL_STYLE.render(" " + label)
                for key, label in keys
            )
            + " "
        )
        gap = max(self.width - visible_width(left) - visible_width(right), 0)
        style = dataclasses.replace(self.theme.status_bar, width=self.width)
        return style.render(left + " " * gap + right)