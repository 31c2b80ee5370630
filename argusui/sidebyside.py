"""Side-by-side and unified rendering of parsed diffs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from argusui.theme import Style, Theme, truncate_ansi, visible_width

LINE_NUM_WIDTH = 4
SEPARATOR_TEXT = "───"
_RESET = "\x1b[0m"

_REMOVED_STYLE = Style(fg="203")
_ADDED_STYLE = Style(fg="78")
_LINE_NUM_STYLE = Style(fg="239")
_DIVIDER_STYLE = Style(fg="236")
_HUNK_HEADER_STYLE = Style(fg="243", italic=True)


class DiffLineType(Enum):
    """Kind of a line in a diff."""

    CONTEXT = "context"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class SideBySideLine:
    """One row of a side-by-side diff; a line number of 0 means no line."""

    left_num: int = 0
    left_text: str = ""
    left_type: DiffLineType = DiffLineType.CONTEXT
    right_num: int = 0
    right_text: str = ""
    right_type: DiffLineType = DiffLineType.CONTEXT


@dataclass(frozen=True)
class DiffLine:
    """One line of a hunk with its old and new line numbers (0 when absent)."""

    type: DiffLineType = DiffLineType.CONTEXT
    content: str = ""
    old_num: int = 0
    new_num: int = 0


@dataclass(frozen=True)
class Hunk:
    """A hunk header and the lines under it."""

    header: str = ""
    lines: list[DiffLine] = field(default_factory=list)


@dataclass(frozen=True)
class ParsedDiff:
    """The hunks of one file's diff."""

    hunks: list[Hunk] = field(default_factory=list)


def format_line_num(num: int, width: int) -> str:
    """Right-align a line number in ``width`` cells; blank when there is no line."""
    if num <= 0:
        return " " * width
    return f"{num:>{width}}"


def _highlight_lines(lines: Sequence[str], filename: str) -> list[str]:
    # No syntax highlighter is available; lines are rendered as plain text
    # and coloured by their diff type instead.
    return list(lines)


def truncate_plain(text: str, max_width: int) -> str:
    """Cut a plain string to at most ``max_width`` characters."""
    if len(text) <= max_width:
        return text
    return text[: max(max_width, 0)]


def format_side_content(
    highlighted: str,
    raw: str,
    line_type: DiffLineType,
    width: int,
    removed_style: Style,
    added_style: Style,
) -> str:
    """Render one side of a diff row, padded to ``width + 1`` cells."""
    if not raw and line_type is DiffLineType.CONTEXT:
        return " " * (width + 1)

    if line_type is DiffLineType.REMOVED:
        style: Style | None = removed_style
        prefix = removed_style.render("-")
    elif line_type is DiffLineType.ADDED:
        style = added_style
        prefix = added_style.render("+")
    else:
        style = None
        prefix = " "

    if highlighted == raw:
        plain = truncate_plain(raw, width - 1)
        content = style.render(plain) if style is not None else plain
    else:
        content = truncate_ansi(highlighted, width - 1, _RESET)

    pad = max(width + 1 - visible_width(prefix + content), 0)
    return prefix + content + " " * pad


def _is_marker(row: SideBySideLine) -> bool:
    return row.left_num == 0 and row.right_num == 0


def render_side_by_side(
    rows: Sequence[SideBySideLine],
    filename: str,
    total_width: int,
    visible_height: int,
    scroll_offset: int,
    theme: Theme,
) -> str:
    """Render the visible window of a side-by-side diff."""
    if not rows:
        return theme.dimmed.render("(no diff)")

    side_w = (total_width - 1) // 2
    content_w = max(side_w - LINE_NUM_WIDTH - 2, 5)

    left_hl = _highlight_lines([r.left_text for r in rows], filename)
    right_hl = _highlight_lines([r.right_text for r in rows], filename)
    divider = _DIVIDER_STYLE.render("│")

    end = min(scroll_offset + visible_height, len(rows))
    start = min(scroll_offset, end)

    out: list[str] = []
    for i in range(start, end):
        row = rows[i]
        if _is_marker(row) and row.left_text.startswith("@@"):
            out.append(_HUNK_HEADER_STYLE.render(truncate_ansi(row.left_text, total_width, _RESET)))
            continue
        if _is_marker(row) and row.left_text == SEPARATOR_TEXT:
            out.append(_DIVIDER_STYLE.render("─" * total_width))
            continue

        left_num = _LINE_NUM_STYLE.render(format_line_num(row.left_num, LINE_NUM_WIDTH))
        left = format_side_content(
            left_hl[i], row.left_text, row.left_type, content_w, _REMOVED_STYLE, _ADDED_STYLE
        )
        right_num = _LINE_NUM_STYLE.render(format_line_num(row.right_num, LINE_NUM_WIDTH))
        right = format_side_content(
            right_hl[i], row.right_text, row.right_type, content_w, _REMOVED_STYLE, _ADDED_STYLE
        )
        out.append(left_num + " " + left + divider + right_num + " " + right)
    return "\n".join(out)


def render_diff_header(
    filename: str, file_index: int, file_count: int, mode: str, theme: Theme
) -> str:
    """Header line of the diff panel with file position and view mode."""
    return (
        theme.section.render("  DIFF")
        + theme.dimmed.render(" " + filename)
        + theme.dimmed.render(f"  [{file_index + 1}/{file_count}]")
        + theme.dimmed.render("  " + mode)
    )


def render_unified_lines(parsed: ParsedDiff, filename: str) -> list[str]:
    """Pre-render every line of a unified diff, with line numbers and markers."""
    if not parsed.hunks:
        return []

    # Each entry: (text, diff line or None for headers and separators).
    entries: list[tuple[str, DiffLine | None]] = []
    for index, hunk in enumerate(parsed.hunks):
        if index > 0:
            entries.append((SEPARATOR_TEXT, None))
        entries.append((hunk.header, None))
        entries.extend((line.content, line) for line in hunk.lines)

    highlighted = _highlight_lines([text for text, _ in entries], filename)

    result: list[str] = []
    for (text, line), hl in zip(entries, highlighted):
        if line is None:
            if text == SEPARATOR_TEXT:
                result.append(_DIVIDER_STYLE.render(SEPARATOR_TEXT))
            else:
                result.append(_HUNK_HEADER_STYLE.render(text))
            continue

        nums = (
            _LINE_NUM_STYLE.render(format_line_num(line.old_num, LINE_NUM_WIDTH))
            + " "
            + _LINE_NUM_STYLE.render(format_line_num(line.new_num, LINE_NUM_WIDTH))
        )
        if line.type is DiffLineType.REMOVED:
            content = _REMOVED_STYLE.render(line.content) if hl == line.content else hl
            result.append(nums + " " + _REMOVED_STYLE.render("-") + content)
        elif line.type is DiffLineType.ADDED:
            content = _ADDED_STYLE.render(line.content) if hl == line.content else hl
            result.append(nums + " " + _ADDED_STYLE.render("+") + content)
        else:
            result.append(nums + "  " + hl)
    return result


def render_unified(
    lines: Sequence[str], display_width: int, visible_height: int, scroll_offset: int
) -> str:
    """Render the visible window of pre-rendered unified diff lines."""
    if not lines:
        return "(no diff)"
    end = min(scroll_offset + visible_height, len(lines))
    start = min(scroll_offset, end)
    return "\n".join(truncate_ansi(line, display_width, _RESET) for line in lines[start:end])