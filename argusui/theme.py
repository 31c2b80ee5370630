"""Terminal styling primitives and the default colour theme."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from wcwidth import wcwidth

_ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")
_TOKEN_RE = re.compile(r"(\x1b\[[0-9;?]*[A-Za-z])|(.)", re.DOTALL)

_BORDER_TOP_LEFT = "╭"
_BORDER_TOP_RIGHT = "╮"
_BORDER_BOTTOM_LEFT = "╰"
_BORDER_BOTTOM_RIGHT = "╯"
_BORDER_HORIZONTAL = "─"
_BORDER_VERTICAL = "│"


def _char_width(ch: str) -> int:
    return max(wcwidth(ch), 0)


def visible_width(text: str) -> int:
    """Return the display width of the widest line, ignoring ANSI escapes."""
    return max(
        (sum(_char_width(ch) for ch in _ANSI_RE.sub("", line)) for line in text.split("\n")),
        default=0,
    )


def truncate_ansi(text: str, width: int, tail: str = "") -> str:
    """Cut text to at most ``width`` display cells, keeping escapes, then append ``tail``.

    Text that already fits is returned unchanged.
    """
    if visible_width(text) <= width:
        return text
    limit = width - visible_width(tail)
    out: list[str] = []
    used = 0
    for match in _TOKEN_RE.finditer(text):
        escape, ch = match.groups()
        if escape is not None:
            out.append(escape)
            continue
        w = _char_width(ch)
        if used + w > limit:
            break
        out.append(ch)
        used += w
    return "".join(out) + tail


def _sgr(codes: list[str], text: str) -> str:
    if not codes or not text:
        return text
    return "\x1b[" + ";".join(codes) + "m" + text + "\x1b[0m"


@dataclass(frozen=True)
class Style:
    """A block style: colours, emphasis, fixed size, padding and an optional rounded border.

    Lines wider than a fixed ``width`` are clipped; ``height`` is a minimum.
    """

    fg: str | None = None
    bg: str | None = None
    bold: bool = False
    italic: bool = False
    border: bool = False
    border_fg: str | None = None
    width: int = 0
    height: int = 0
    padding: tuple[int, int] = (0, 0)

    def _codes(self) -> list[str]:
        codes = []
        if self.bold:
            codes.append("1")
        if self.italic:
            codes.append("3")
        if self.fg is not None:
            codes.append(f"38;5;{self.fg}")
        if self.bg is not None:
            codes.append(f"48;5;{self.bg}")
        return codes

    def render(self, text: str) -> str:
        """Render text with this style applied."""
        pad_v, pad_h = self.padding
        lines = text.split("\n")
        if self.width > 0:
            block = max(self.width - 2 * pad_h, 0)
            lines = [truncate_ansi(line, block) for line in lines]
        else:
            block = max(visible_width(line) for line in lines)
        codes = self._codes()
        lines = [_sgr(codes, line + " " * (block - visible_width(line))) for line in lines]
        if pad_h:
            lines = [" " * pad_h + line + " " * pad_h for line in lines]
        full = block + 2 * pad_h
        blank = " " * full
        lines = [blank] * pad_v + lines + [blank] * pad_v
        if self.height > len(lines):
            lines.extend([blank] * (self.height - len(lines)))
        if self.border:
            edge = [f"38;5;{self.border_fg}"] if self.border_fg is not None else []
            top = _sgr(edge, _BORDER_TOP_LEFT + _BORDER_HORIZONTAL * full + _BORDER_TOP_RIGHT)
            bottom = _sgr(
                edge, _BORDER_BOTTOM_LEFT + _BORDER_HORIZONTAL * full + _BORDER_BOTTOM_RIGHT
            )
            side = _sgr(edge, _BORDER_VERTICAL)
            lines = [top, *(side + line + side for line in lines), bottom]
        return "\n".join(lines)


@dataclass(frozen=True)
class Theme:
    """The colour scheme used by every view."""

    title: Style = field(default_factory=Style)
    status_bar: Style = field(default_factory=Style)
    selected: Style = field(default_factory=Style)
    normal: Style = field(default_factory=Style)
    dimmed: Style = field(default_factory=Style)
    pending: Style = field(default_factory=Style)
    in_progress: Style = field(default_factory=Style)
    in_review: Style = field(default_factory=Style)
    complete: Style = field(default_factory=Style)
    project_name: Style = field(default_factory=Style)
    elapsed: Style = field(default_factory=Style)
    help: Style = field(default_factory=Style)
    border: Style = field(default_factory=Style)
    badge: Style = field(default_factory=Style)
    section: Style = field(default_factory=Style)
    divider: Style = field(default_factory=Style)
    error: Style = field(default_factory=Style)


def default_theme() -> Theme:
    """Return the standard theme."""
    return Theme(
        title=Style(bold=True, fg="87"),
        status_bar=Style(bg="235", fg="245"),
        selected=Style(bold=True, fg="212"),
        normal=Style(fg="252"),
        dimmed=Style(fg="240"),
        pending=Style(fg="245"),
        in_progress=Style(fg="214"),
        in_review=Style(fg="81"),
        complete=Style(fg="78"),
        project_name=Style(fg="87"),
        elapsed=Style(fg="243"),
        help=Style(fg="241"),
        border=Style(border=True, border_fg="238"),
        badge=Style(fg="252"),
        section=Style(bold=True, fg="245"),
        divider=Style(fg="236"),
        error=Style(fg="203"),
    )


def clamp_modal_width(total_width: int) -> int:
    """Modal width: two fifths of the terminal, kept within 50..80 and width-4."""
    w = total_width * 2 // 5
    w = min(max(w, 50), 80)
    return min(w, total_width - 4)


def bordered_panel(width: int, height: int, focused: bool, content: str) -> str:
    """Render content in a rounded-border panel of the given outer size."""
    border_color = "87" if focused else "238"
    inner_height = max(height - 2, 1)
    style = Style(border=True, border_fg=border_color, width=width - 2, height=inner_height)
    return style.render(content)