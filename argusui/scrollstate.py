"""Cursor and scroll-offset tracking for scrollable lists."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScrollState:
    """Cursor position and the index of the first visible row."""

    cursor: int = 0
    offset: int = 0

    def cursor_up(self) -> None:
        """Move the cursor up one row, scrolling if it leaves the window."""
        if self.cursor > 0:
            self.cursor -= 1
            if self.cursor < self.offset:
                self.offset = self.cursor

    def cursor_down(self, total: int, visible: int) -> None:
        """Move the cursor down one row within ``total`` rows, ``visible`` at a time."""
        if self.cursor < total - 1:
            self.cursor += 1
            if self.cursor >= self.offset + visible:
                self.offset = self.cursor - visible + 1

    def clamp_cursor(self, total: int) -> None:
        """Keep the cursor inside a list of ``total`` rows."""
        if self.cursor >= total:
            self.cursor = max(0, total - 1)

    def reset(self) -> None:
        """Return cursor and offset to the top."""
        self.cursor = 0
        self.offset = 0