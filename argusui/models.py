"""Task, project and status data shared by the views."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterable


class Status(str, Enum):
    """Lifecycle state of a task."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    IN_REVIEW = "in_review"
    COMPLETE = "complete"

    def __str__(self) -> str:
        return self.value

    def display(self) -> str:
        """The glyph shown for this status."""
        return _DISPLAY[self]

    def display_alt(self) -> str:
        """The alternate animation glyph; the normal glyph for static statuses."""
        return _DISPLAY_ALT.get(self, self.display())


_DISPLAY = {
    Status.PENDING: "○",
    Status.IN_PROGRESS: "●",
    Status.IN_REVIEW: "◎",
    Status.COMPLETE: "✓",
}

_DISPLAY_ALT = {Status.IN_PROGRESS: "◉"}


def _format_duration(seconds: int) -> str:
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}h{minutes}m"
    if minutes:
        return f"{minutes}m"
    return f"{secs}s"


@dataclass(eq=False)
class Task:
    """A unit of agent work belonging to a project."""

    id: str = ""
    name: str = ""
    status: Status = Status.PENDING
    project: str = ""
    branch: str = ""
    prompt: str = ""
    backend: str = ""
    worktree: str = ""
    session_id: str = ""
    agent_pid: int = 0
    created_at: datetime | None = None
    started_at: datetime | None = None
    ended_at: datetime | None = None

    def elapsed_string(self) -> str:
        """Time since the task started, or "" if it has not started."""
        if self.started_at is None:
            return ""
        end = self.ended_at or datetime.now(self.started_at.tzinfo)
        seconds = max(int((end - self.started_at).total_seconds()), 0)
        return _format_duration(seconds)


@dataclass(frozen=True)
class Project:
    """Configuration of a project."""

    path: str = ""
    branch: str = ""
    backend: str = ""


@dataclass
class StatusCounts:
    """Number of tasks in each status."""

    pending: int = 0
    in_progress: int = 0
    in_review: int = 0
    complete: int = 0

    def total(self) -> int:
        return self.pending + self.in_progress + self.in_review + self.complete


_COUNT_FIELD = {
    Status.PENDING: "pending",
    Status.IN_PROGRESS: "in_progress",
    Status.IN_REVIEW: "in_review",
    Status.COMPLETE: "complete",
}


def count_statuses(tasks: Iterable[Task]) -> dict[str, StatusCounts]:
    """Count tasks per status for each project name."""
    counts: defaultdict[str, StatusCounts] = defaultdict(StatusCounts)
    for task in tasks:
        sc = counts[task.project]
        name = _COUNT_FIELD.get(task.status)
        if name is not None:
            setattr(sc, name, getattr(sc, name) + 1)
    return dict(counts)