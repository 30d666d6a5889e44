"""Caret movement and the editing keys that change the line structure."""

from __future__ import annotations

from typing import Optional

from scedit.buffer import TextBuffer
from scedit.declarations import DeclarationScanner

AUTOSAVE_INTERVAL = 100
INDENT_WIDTH = 4


class Editor:
    """Applies editing keys to a :class:`TextBuffer`.

    The optional *scanner* is kept up to date when a single line is edited in
    place. ``preferred_col`` is the column remembered for vertical movement.
    ``edit_count`` counts editing keystrokes; ``autosave_due`` is true every
    ``AUTOSAVE_INTERVAL`` of them.
    """

    def __init__(self, buffer: TextBuffer, scanner: Optional[DeclarationScanner] = None) -> None:
        self.buffer = buffer
        self.scanner = scanner
        self.preferred_col = 0
        self.edit_count = 0

    @property
    def autosave_due(self) -> bool:
        """Whether the latest editing keystroke falls on an autosave point."""
        return self.edit_count > 0 and self.edit_count % AUTOSAVE_INTERVAL == 0

    def _fits(self, length: int) -> bool:
        limit = self.buffer.max_cols
        return limit is None or length < limit

    def _limit(self, text: str) -> str:
        limit = self.buffer.max_cols
        return text if limit is None else text[: limit - 1]

    def _rescan(self, line_index: int) -> None:
        if self.scanner is not None:
            self.scanner.rescan_line(self.buffer.lines, line_index)

    def delete_forward(self) -> bool:
        """Delete the character under the caret, or join the next line at line end.

        Returns whether the buffer changed.
        """
        buf = self.buffer
        buf.save_undo_state()
        self.edit_count += 1
        line = buf.current_text
        col = buf.current_col
        row = buf.current_line
        if col < len(line):
            buf.lines[row] = line[:col] + line[col + 1:]
            self._rescan(row)
            return True
        if row < buf.line_count - 1:
            following = buf.lines[row + 1]
            if self._fits(len(line) + len(following)):
                buf.lines[row] = line + following
                del buf.lines[row + 1]
                return True
        return False

    def backspace(self) -> bool:
        """Delete the character before the caret, or join with the previous line.

        At the start of a line the caret moves to the end of the previous line
        even when the joined line would be too long to make. Returns whether
        the buffer changed.
        """
        buf = self.buffer
        buf.save_undo_state()
        self.edit_count += 1
        row = buf.current_line
        col = buf.current_col
        line = buf.current_text
        if col > 0:
            buf.lines[row] = line[: col - 1] + line[col:]
            buf.current_col = col - 1
            self._rescan(row)
            return True
        if row > 0:
            previous = buf.lines[row - 1]
            buf.current_col = len(previous)
            if self._fits(len(previous) + len(line)):
                buf.lines[row - 1] = previous + line
                del buf.lines[row]
                buf.current_line = row - 1
                return True
        return False

    def newline(self) -> None:
        """Split the line at the caret, carrying the line's indentation over.

        Between ``{`` and ``}`` an indented empty line is opened and the
        closing brace goes on the line after it.
        """
        buf = self.buffer
        buf.save_undo_state()
        self.edit_count += 1
        row = buf.current_line
        col = buf.current_col
        line = buf.current_text

        indent = len(line) - len(line.lstrip(" "))
        between_braces = 0 < col < len(line) and line[col - 1] == "{" and line[col] == "}"

        rest = self._limit(line[col:])
        buf.lines[row] = line[:col]
        buf.lines.insert(row + 1, rest)
        row += 1
        buf.current_line = row

        if between_braces:
            buf.lines[row] = self._limit(" " * (indent + INDENT_WIDTH))
            buf.lines.insert(row + 1, self._limit(" " * indent + "}"))
            buf.current_col = indent + INDENT_WIDTH
        else:
            buf.lines[row] = self._limit(" " * indent + rest)
            buf.current_col = indent

    def _vertical(self, row: int) -> None:
        buf = self.buffer
        buf.current_line = row
        buf.current_col = min(self.preferred_col, len(buf.lines[row]))

    def move_up(self) -> bool:
        """Move to the previous line at the remembered column; return whether it moved."""
        if self.buffer.current_line <= 0:
            return False
        self._vertical(self.buffer.current_line - 1)
        return True

    def move_down(self) -> bool:
        """Move to the next line at the remembered column; return whether it moved."""
        if self.buffer.current_line >= self.buffer.line_count - 1:
            return False
        self._vertical(self.buffer.current_line + 1)
        return True

    def move_left(self) -> bool:
        """Move one character left, wrapping to the end of the previous line."""
        buf = self.buffer
        if buf.current_col > 0:
            buf.current_col -= 1
        elif buf.current_line > 0:
            buf.current_line -= 1
            buf.current_col = len(buf.current_text)
        else:
            return False
        self.preferred_col = buf.current_col
        return True

    def move_right(self) -> bool:
        """Move one character right, wrapping to the start of the next line."""
        buf = self.buffer
        if buf.current_col < len(buf.current_text):
            buf.current_col += 1
        elif buf.current_line < buf.line_count - 1:
            buf.current_line += 1
            buf.current_col = 0
        else:
            return False
        self.preferred_col = buf.current_col
        return True

    def line_start(self) -> int:
        """Put the caret at the start of the line."""
        self.buffer.current_col = 0
        return 0

    def line_end(self) -> int:
        """Put the caret at the end of the line."""
        self.buffer.current_col = len(self.buffer.current_text)
        return self.buffer.current_col