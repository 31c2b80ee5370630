"""The projects tab: a scrollable list of configured projects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping

from argusui.models import Project, StatusCounts, Task, count_statuses
from argusui.scrollstate import ScrollState
from argusui.theme import Theme, visible_width


@dataclass(frozen=True)
class ProjectEntry:
    """A named project as shown in the list."""

    name: str
    project: Project = field(default_factory=Project)


def sort_projects(entries: list[ProjectEntry]) -> None:
    """Sort entries alphabetically by name, in place."""
    entries.sort(key=lambda entry: entry.name)


class ProjectList:
    """List of projects with per-project task status counts."""

    def __init__(self, theme: Theme) -> None:
        self.theme = theme
        self.projects: list[ProjectEntry] = []
        self.scroll = ScrollState()
        self.width = 0
        self.height = 0
        self._counts: dict[str, StatusCounts] = {}

    def set_projects(self, projects: Mapping[str, Project]) -> None:
        """Replace the projects, sorted by name."""
        self.projects = [ProjectEntry(name, proj) for name, proj in projects.items()]
        sort_projects(self.projects)
        self.scroll.clamp_cursor(len(self.projects))

    def set_tasks(self, tasks: Iterable[Task]) -> None:
        """Recompute the task status counts of every project."""
        self._counts = count_statuses(tasks)

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def cursor_up(self) -> None:
        self.scroll.cursor_up()

    def cursor_down(self) -> None:
        self.scroll.cursor_down(len(self.projects), self._visible_rows())

    def selected(self) -> ProjectEntry | None:
        """The project under the cursor, or None."""
        c = self.scroll.cursor
        if 0 <= c < len(self.projects):
            return self.projects[c]
        return None

    def task_counts(self, name: str) -> StatusCounts:
        """Task status counts for the named project (zeros if unknown)."""
        return self._counts.get(name, StatusCounts())

    def _visible_rows(self) -> int:
        # Each project takes three lines: name, path, status summary.
        return max(self.height // 3, 1)

    def view(self) -> str:
        """Render the visible window of the list."""
        if not self.projects:
            return "\n" + self.theme.dimmed.render(
                "    No projects configured. Press [n] to add one."
            )

        offset = self.scroll.offset
        cursor = self.scroll.cursor
        window = self.projects[offset : offset + self._visible_rows()]
        out: list[str] = []
        for i, entry in enumerate(window, start=offset):
            is_selected = i == cursor
            name_style = self.theme.selected if is_selected else self.theme.normal
            name = name_style.render(entry.name)
            cur = self.theme.selected.render(">") + " " if is_selected else "  "

            sc = self.task_counts(entry.name)
            total = sc.total()
            badge = self.theme.dimmed.render(f" {total} tasks") if total > 0 else ""

            left = f" {cur} {name}"
            gap = max(self.width - visible_width(left) - visible_width(badge) - 1, 1)
            out.append(left + " " * gap + badge + "\n")

            detail = "     "
            if entry.project.path:
                detail += self.theme.dimmed.render(entry.project.path)
            if entry.project.branch:
                detail += self.theme.dimmed.render(f" ({entry.project.branch})")
            out.append(detail + "\n")

            if total > 0:
                out.append("     " + self._mini_status(sc) + "\n")
            else:
                out.append("     " + self.theme.dimmed.render("no tasks") + "\n")
        return "".join(out)

    def _mini_status(self, sc: StatusCounts) -> str:
        parts = []
        if sc.pending:
            parts.append(self.theme.pending.render(f"○ {sc.pending}"))
        if sc.in_progress:
            parts.append(self.theme.in_progress.render(f"● {sc.in_progress}"))
        if sc.in_review:
            parts.append(self.theme.in_review.render(f"● {sc.in_review}"))
        if sc.complete:
            parts.append(self.theme.complete.render(f"✓ {sc.complete}"))
        return "  ".join(parts)