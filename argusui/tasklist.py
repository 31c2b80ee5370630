"""The tasks tab: tasks grouped under collapsible project headers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from argusui.models import Status, Task
from argusui.scrollstate import ScrollState
from argusui.theme import Style, Theme

UNCATEGORIZED = "Uncategorized"
IDLE_ICON = "\uf186"


class RowKind(Enum):
    """Whether a row is a project header or a task."""

    PROJECT = "project"
    TASK = "task"


@dataclass(frozen=True)
class Row:
    """One navigable row: a project header or a task nested under it."""

    kind: RowKind
    project: str
    task: Task | None = None


def _project_of(task: Task) -> str:
    return task.project or UNCATEGORIZED


def project_priority(tasks: Iterable[Task]) -> int:
    """Sort key of a project: 0 with work in progress, 1 with pending work, else 2."""
    statuses = {t.status for t in tasks}
    if Status.IN_PROGRESS in statuses:
        return 0
    if Status.PENDING in statuses:
        return 1
    return 2


class TaskList:
    """Task list where only one project is expanded at a time."""

    def __init__(self, theme: Theme) -> None:
        self.theme = theme
        self.tasks: list[Task] = []
        self.filtered: list[Task] = []
        self.scroll = ScrollState()
        self.width = 0
        self.height = 0
        self.filter = ""
        self.running: set[str] = set()
        self.idle: set[str] = set()
        self.rows: list[Row] = []
        self.expanded = ""
        self.tick_even = False

    def tick(self) -> None:
        """Advance the status icon animation."""
        self.tick_even = not self.tick_even

    def set_running(self, ids: Iterable[str] | None) -> None:
        """Record which task IDs have a live agent session."""
        self.running = set(ids or ())

    def set_idle(self, ids: Iterable[str] | None) -> None:
        """Record which task IDs are waiting for input."""
        self.idle = set(ids or ())

    def set_tasks(self, tasks: Sequence[Task] | None) -> None:
        """Replace the tasks and rebuild the rows."""
        self.tasks = list(tasks or ())
        self._apply_filter()
        self._build_rows()
        self.scroll.clamp_cursor(len(self.rows))
        self._skip_to_first_task()

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def cursor_up(self) -> None:
        self._move_cursor(-1)

    def cursor_down(self) -> None:
        self._move_cursor(1)

    def _move_cursor(self, direction: int) -> None:
        # Project headers are skipped; moving up into another project lands
        # on that project's last task.
        if not self.rows:
            return
        prev = self.scroll.cursor
        if direction > 0:
            self.scroll.cursor_down(len(self.rows), self._visible_rows())
        else:
            self.scroll.cursor_up()
        self._auto_expand()

        c = self.scroll.cursor
        if not 0 <= c < len(self.rows) or self.rows[c].kind is RowKind.TASK:
            return

        if direction > 0:
            if c + 1 < len(self.rows) and self.rows[c + 1].kind is RowKind.TASK:
                self.scroll.cursor_down(len(self.rows), self._visible_rows())
            return

        if c == 0:
            self.scroll.cursor = prev
            return
        self.scroll.cursor_up()
        self._auto_expand()
        c = self.scroll.cursor
        if not (0 <= c < len(self.rows) and self.rows[c].kind is RowKind.PROJECT):
            return
        last_task = -1
        i = c + 1
        while i < len(self.rows) and self.rows[i].kind is RowKind.TASK:
            last_task = i
            i += 1
        if last_task >= 0:
            self.scroll.cursor = last_task
            visible = self._visible_rows()
            if last_task >= self.scroll.offset + visible:
                self.scroll.offset = last_task - visible + 1

    def _skip_to_first_task(self) -> None:
        c = self.scroll.cursor
        if 0 <= c < len(self.rows) and self.rows[c].kind is RowKind.PROJECT:
            for i in range(c, len(self.rows)):
                if self.rows[i].kind is RowKind.TASK:
                    self.scroll.cursor = i
                    return

    def selected(self) -> Task | None:
        """The task under the cursor; on a header, the first task below it."""
        c = self.scroll.cursor
        if not 0 <= c < len(self.rows):
            return None
        row = self.rows[c]
        if row.kind is RowKind.TASK:
            return row.task
        if c + 1 < len(self.rows) and self.rows[c + 1].kind is RowKind.TASK:
            return self.rows[c + 1].task
        return None

    def adjacent_task(self, task_id: str, direction: int) -> Task | None:
        """The task after (+1) or before (-1) ``task_id`` in filtered order."""
        index = next((i for i, t in enumerate(self.filtered) if t.id == task_id), None)
        if index is None:
            return None
        target = index + direction
        if 0 <= target < len(self.filtered):
            return self.filtered[target]
        return None

    def set_filter(self, text: str) -> None:
        """Show only tasks whose name or project contains ``text``, ignoring case."""
        self.filter = text
        self._apply_filter()
        if self.expanded and all(_project_of(t) != self.expanded for t in self.filtered):
            self.expanded = ""
        self._build_rows()
        self.scroll.reset()
        self._skip_to_first_task()

    def _apply_filter(self) -> None:
        if not self.filter:
            self.filtered = list(self.tasks)
            return
        needle = self.filter.lower()
        self.filtered = [
            t for t in self.tasks if needle in t.name.lower() or needle in t.project.lower()
        ]

    def _build_rows(self) -> None:
        groups: dict[str, list[Task]] = {}
        for task in self.filtered:
            groups.setdefault(_project_of(task), []).append(task)

        def sort_key(name: str) -> tuple[int, str]:
            priority = project_priority(groups[name])
            if name == UNCATEGORIZED:
                priority += 100
            return priority, name

        order = sorted(groups, key=sort_key)

        if self.expanded and self.expanded not in groups:
            self.expanded = ""
        if not self.expanded and order:
            self.expanded = order[0]

        rows: list[Row] = []
        for name in order:
            rows.append(Row(RowKind.PROJECT, name))
            if name == self.expanded:
                rows.extend(Row(RowKind.TASK, name, t) for t in groups[name])
        self.rows = rows

    def _auto_expand(self) -> None:
        c = self.scroll.cursor
        if not 0 <= c < len(self.rows):
            return
        current = self.rows[c]
        if current.project == self.expanded:
            return
        self.expanded = current.project
        self._build_rows()
        self._restore_cursor(current)

    def _restore_cursor(self, target: Row) -> None:
        for i, row in enumerate(self.rows):
            if row.kind is not target.kind or row.project != target.project:
                continue
            if row.kind is RowKind.PROJECT or row.task is target.task:
                self.scroll.cursor = i
                visible = self._visible_rows()
                if i < self.scroll.offset:
                    self.scroll.offset = i
                elif i >= self.scroll.offset + visible:
                    self.scroll.offset = i - visible + 1
                return
        self.scroll.clamp_cursor(len(self.rows))

    def _visible_rows(self) -> int:
        return max(self.height, 1)

    def project_tasks(self, project: str) -> list[Task]:
        """Filtered tasks belonging to ``project``."""
        return [t for t in self.filtered if _project_of(t) == project]

    def _status_style(self, status: Status) -> Style:
        if status == Status.IN_PROGRESS:
            return self.theme.in_progress
        if status == Status.IN_REVIEW:
            return self.theme.in_review
        if status == Status.COMPLETE:
            return self.theme.complete
        return self.theme.pending

    def task_status_icon(self, task: Task) -> str:
        """Styled status icon, animated for active in-progress tasks."""
        text = task.status.display()
        if task.status == Status.IN_PROGRESS:
            if task.id not in self.running or task.id in self.idle:
                text = IDLE_ICON
            elif self.tick_even:
                text = task.status.display_alt()
        return self._status_style(task.status).render(text)

    def project_status_icon(self, tasks: Iterable[Task]) -> str:
        """One styled icon summarising the statuses of a project's tasks."""
        has_in_progress = has_in_review = has_pending = has_complete = False
        all_idle = True
        for task in tasks:
            if task.status == Status.IN_PROGRESS:
                has_in_progress = True
                if task.id in self.running and task.id not in self.idle:
                    all_idle = False
            elif task.status == Status.IN_REVIEW:
                has_in_review = True
            elif task.status == Status.COMPLETE:
                has_complete = True
            else:
                has_pending = True

        if has_in_progress:
            text = Status.IN_PROGRESS.display()
            if all_idle:
                text = IDLE_ICON
            elif self.tick_even:
                text = Status.IN_PROGRESS.display_alt()
            return self._status_style(Status.IN_PROGRESS).render(text)
        if has_in_review:
            return self._status_style(Status.IN_REVIEW).render(Status.IN_REVIEW.display())
        if has_complete and not has_pending:
            return self._status_style(Status.COMPLETE).render(Status.COMPLETE.display())
        if has_complete:
            return self.theme.dimmed.render(Status.COMPLETE.display())
        return self._status_style(Status.PENDING).render(Status.PENDING.display())

    def _render_project_header(self, project: str, is_selected: bool) -> str:
        chevron = "▾" if project == self.expanded else "▸"
        tasks = self.project_tasks(project)
        if is_selected:
            name_style = chevron_style = self.theme.selected
            cursor = self.theme.selected.render(" >")
        else:
            name_style = self.theme.section
            chevron_style = self.theme.dimmed
            cursor = "  "
        icon = self.project_status_icon(tasks)
        count = self.theme.dimmed.render(f" ({len(tasks)})")
        return (
            f"{cursor} {icon} {chevron_style.render(chevron)} "
            f"{name_style.render(project)}{count}\n"
        )

    def _render_task_row(self, task: Task, is_selected: bool) -> str:
        icon = self.task_status_icon(task)
        name_style = self.theme.selected if is_selected else self.theme.normal
        if task.status == Status.COMPLETE:
            name_style = self.theme.dimmed
        cursor = self.theme.selected.render("   >") if is_selected else "    "
        elapsed = task.elapsed_string()
        suffix = " " + self.theme.elapsed.render(f"({elapsed})") if elapsed else ""
        return f"{cursor} {icon}  {name_style.render(task.name)}{suffix}\n"

    def view(self) -> str:
        """Render the visible window of rows."""
        if not self.rows:
            return "\n" + self.theme.dimmed.render("    No tasks yet. Press [n] to create one.")
        offset = self.scroll.offset
        cursor = self.scroll.cursor
        window = self.rows[offset : offset + self._visible_rows()]
        out = []
        for i, row in enumerate(window, start=offset):
            if row.kind is RowKind.PROJECT:
                out.append(self._render_project_header(row.project, i == cursor))
            else:
                assert row.task is not None
                out.append(self._render_task_row(row.task, i == cursor))
        return "".join(out)