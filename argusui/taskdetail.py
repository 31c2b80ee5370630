"""The task detail panel: metadata and prompt of the selected task."""

from __future__ import annotations

from argusui.models import Status, Task
from argusui.theme import Style, Theme, bordered_panel


def wrap_text(text: str, max_width: int) -> str:
    """Wrap text at word boundaries so lines fit within ``max_width``."""
    if max_width <= 0:
        return text
    words = text.split()
    if not words:
        return ""
    lines: list[str] = []
    line = words[0]
    for word in words[1:]:
        if len(line) + 1 + len(word) > max_width:
            lines.append(line)
            line = word
        else:
            line += " " + word
    lines.append(line)
    return "\n".join(lines)


class TaskDetail:
    """Right-hand panel describing one task."""

    def __init__(self, theme: Theme) -> None:
        self.theme = theme
        self.width = 0
        self.height = 0

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def _status_style(self, status: Status) -> Style:
        styles = {
            Status.PENDING: self.theme.pending,
            Status.IN_PROGRESS: self.theme.in_progress,
            Status.IN_REVIEW: self.theme.in_review,
            Status.COMPLETE: self.theme.complete,
        }
        return styles.get(status, self.theme.normal)

    def _field(self, label: str, value: str, style: Style | None = None) -> str:
        value_style = style or self.theme.normal
        return "  " + self.theme.dimmed.render(label + ": ") + value_style.render(value) + "\n"

    def view(self, task: Task | None, running: bool) -> str:
        """Render the panel for ``task``; an empty state when it is None."""
        if task is None:
            return bordered_panel(
                self.width, self.height, False, self.theme.dimmed.render(" No task selected")
            )

        inner_w = max(self.width - 4, 10)
        inner_h = max(self.height - 2, 1)
        parts: list[str] = []

        name = task.name
        if len(name) > inner_w - 2:
            name = name[: inner_w - 5] + "..."
        parts.append(self.theme.title.render(" " + name) + "\n\n")

        label = str(task.status)
        if task.status == Status.IN_PROGRESS:
            label += " (running)" if running else " (idle)"
        parts.append(self._field("Status", label, self._status_style(task.status)))

        if task.project:
            parts.append(self._field("Project", task.project))
        if task.branch:
            parts.append(self._field("Branch", task.branch))
        if task.backend:
            parts.append(self._field("Backend", task.backend))
        if task.worktree:
            wt = task.worktree
            max_len = inner_w - 14
            if 0 < max_len < len(wt):
                wt = "..." + wt[len(wt) - max_len + 3 :]
            parts.append(self._field("Worktree", wt))
        if task.created_at is not None:
            parts.append(self._field("Created", task.created_at.strftime("%Y-%m-%d")))
        elapsed = task.elapsed_string()
        if elapsed:
            parts.append(self._field("Elapsed", elapsed, self.theme.elapsed))

        if task.prompt:
            parts.append("\n" + self.theme.section.render("  PROMPT") + "\n")
            prompt_lines = wrap_text(task.prompt, inner_w - 2).split("\n")
            remaining = inner_h - "".join(parts).count("\n")
            if remaining > 0:
                parts.extend(
                    "  " + self.theme.normal.render(line) + "\n"
                    for line in prompt_lines[:remaining]
                )

        content = "".join(parts).rstrip("\n")
        lines = content.split("\n")
        if len(lines) > inner_h:
            content = "\n".join(lines[:inner_h])
        return bordered_panel(self.width, self.height, False, content)