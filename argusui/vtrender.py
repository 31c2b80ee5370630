"""Rendering of virtual-terminal screen cells back into ANSI-coloured text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Sequence

DEFAULT_FG = 1 << 24
DEFAULT_BG = DEFAULT_FG + 1


class CellMode(IntFlag):
    """Attribute bits carried by a screen cell."""

    NONE = 0
    REVERSE = 1 << 0
    UNDERLINE = 1 << 1
    BOLD = 1 << 2
    ITALIC = 1 << 4


@dataclass(frozen=True)
class Cell:
    """One character cell of a terminal screen."""

    char: str = " "
    fg: int = DEFAULT_FG
    bg: int = DEFAULT_BG
    mode: int = CellMode.NONE

    @property
    def glyph(self) -> str:
        return " " if self.char in ("", "\0") else self.char

    def is_blank(self) -> bool:
        return (
            self.glyph == " "
            and self.fg == DEFAULT_FG
            and self.bg == DEFAULT_BG
            and self.mode == 0
        )


def estimate_vt_rows(raw: bytes, cols: int, display_height: int) -> int:
    """Estimate how many terminal rows are needed to hold all of ``raw``."""
    rows = display_height
    newlines = raw.count(b"\n")
    if newlines > rows:
        rows = newlines + display_height
    if cols > 0:
        rows = max(rows, len(raw) // cols + display_height)
    return rows


def render_line(cells: Sequence[Cell], cursor_x: int = -1) -> str:
    """Render one screen row as ANSI text, trimming trailing blank cells.

    ``cursor_x`` is the column drawn as a reverse-video cursor, or -1 for none.
    """
    last = next((x for x in reversed(range(len(cells))) if not cells[x].is_blank()), -1)
    last = max(last, cursor_x)

    row = list(cells[: last + 1])
    row.extend(Cell() for _ in range(last + 1 - len(row)))

    parts: list[str] = []
    current: tuple[int, int, int] = (0, 0, 0)
    active = False
    for x, cell in enumerate(row):
        if x == cursor_x:
            parts.append(build_sgr(cell.fg, cell.bg, cell.mode ^ CellMode.REVERSE))
            parts.append(cell.glyph)
            parts.append("\x1b[0m")
            active = False
            continue
        attrs = (cell.fg, cell.bg, int(cell.mode))
        if attrs != current or not active:
            parts.append(build_sgr(cell.fg, cell.bg, cell.mode))
            current = attrs
            active = True
        parts.append(cell.glyph)
    if active:
        parts.append("\x1b[0m")
    return "".join(parts)


def build_sgr(fg: int, bg: int, mode: int) -> str:
    """Build an SGR escape sequence for the given colours and attributes."""
    params = ["0"]
    if mode & CellMode.BOLD:
        params.append("1")
    if mode & CellMode.ITALIC:
        params.append("3")
    if mode & CellMode.UNDERLINE:
        params.append("4")
    if mode & CellMode.REVERSE:
        params.append("7")
    if fg != DEFAULT_FG:
        params.append(sgr_color(fg, 30))
    if bg != DEFAULT_BG:
        params.append(sgr_color(bg, 40))
    return "\x1b[" + ";".join(params) + "m"


def sgr_color(color: int, base: int) -> str:
    """SGR parameters for a colour; ``base`` is 30 for foreground, 40 for background."""
    prefix = 48 if base == 40 else 38
    if color < 8:
        return str(base + color)
    if color < 16:
        return str(base + 60 + color - 8)
    if color < 256:
        return f"{prefix};5;{color}"
    r, g, b = (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF
    return f"{prefix};2;{r};{g};{b}"


def strip_ansi(text: str) -> str:
    """Remove CSI escape sequences and surrounding whitespace."""
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        if text[i] == "\x1b" and i + 1 < n and text[i + 1] == "[":
            j = i + 2
            while j < n and not text[j].isascii() or (j < n and not text[j].isalpha()):
                j += 1
            i = min(j + 1, n)
        else:
            out.append(text[i])
            i += 1
    return "".join(out).strip()