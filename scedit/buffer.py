"""Text buffer operations: search and replace, undo history, word motion and saved cursors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class Cursor:
    """A saved cursor position."""

    row: int
    col: int


@dataclass(frozen=True)
class UndoState:
    """A snapshot of the buffer contents and caret position."""

    lines: Tuple[str, ...]
    cursor_line: int
    cursor_col: int


class TextBuffer:
    """Lines of text with a caret, undo history and a set of saved cursors.

    *max_cols* bounds the stored length of a line (one less than the value,
    leaving room for a terminator as the on-screen line storage does); ``None``
    means no limit. *max_undo* bounds the number of undo snapshots kept;
    ``None`` means no limit.
    """

    def __init__(
        self,
        lines: Optional[Iterable[str]] = None,
        max_cols: Optional[int] = None,
        max_undo: Optional[int] = None,
    ) -> None:
        if max_cols is not None and max_cols < 1:
            raise ValueError("max_cols must be at least 1")
        if max_undo is not None and max_undo < 1:
            raise ValueError("max_undo must be at least 1")
        self.max_cols = max_cols
        self.max_undo = max_undo
        self.lines: List[str] = [self._fit(line) for line in (lines or [])] or [""]
        self.current_line = 0
        self.current_col = 0
        self.history: List[UndoState] = []
        self.undo_position = 0
        self.cursors: List[Cursor] = []

    @property
    def line_count(self) -> int:
        """Number of lines in the buffer."""
        return len(self.lines)

    @property
    def current_text(self) -> str:
        """Text of the line the caret is on."""
        return self.lines[self.current_line]

    def _fit(self, text: str) -> str:
        if self.max_cols is None:
            return text
        return text[: self.max_cols - 1]

    # Search and replace

    def search(self, needle: str) -> List[int]:
        """Return the indices of the lines containing *needle*, each line once."""
        if not needle:
            return []
        return [index for index, line in enumerate(self.lines) if needle in line]

    def _replace_in_line(self, line_index: int, needle: str, replacement: str) -> bool:
        line = self.lines[line_index]
        pos = line.find(needle) if needle else -1
        if pos < 0:
            return False
        self.lines[line_index] = self._fit(line[:pos] + replacement + line[pos + len(needle):])
        return True

    def replace_first(self, line_index: int, needle: str, replacement: str) -> bool:
        """Replace the first *needle* on one line, saving an undo state first.

        Returns whether a replacement was made.
        """
        if not 0 <= line_index < len(self.lines):
            raise IndexError(f"line {line_index} out of range")
        if not needle or needle not in self.lines[line_index]:
            return False
        self.save_undo_state()
        return self._replace_in_line(line_index, needle, replacement)

    def replace_all(self, needle: str, replacement: str) -> int:
        """Replace the first *needle* on every matching line; return how many were replaced.

        A single undo state covers the whole operation.
        """
        matches = self.search(needle)
        if not matches:
            return 0
        self.save_undo_state()
        return sum(self._replace_in_line(index, needle, replacement) for index in matches)

    # Undo

    def save_undo_state(self) -> None:
        """Snapshot the buffer and caret, dropping the oldest snapshot when full."""
        if self.max_undo is not None and len(self.history) >= self.max_undo:
            del self.history[: len(self.history) - self.max_undo + 1]
        self.history.append(UndoState(tuple(self.lines), self.current_line, self.current_col))
        self.undo_position = len(self.history)

    def undo(self) -> bool:
        """Step back one snapshot; return whether there was one to restore."""
        if self.undo_position <= 0:
            return False
        self.undo_position -= 1
        state = self.history[self.undo_position]
        self.lines = [self._fit(line) for line in state.lines] or [""]
        self.current_line = state.cursor_line
        self.current_col = state.cursor_col
        return True

    # Word motion

    def word_right(self) -> int:
        """Move the caret past the current run of spaces or of non-spaces."""
        line = self.current_text
        pos = self.current_col
        if pos >= len(line):
            return self.current_col
        is_space = line[pos] == " "
        while pos < len(line) and (line[pos] == " ") == is_space:
            pos += 1
        self.current_col = pos
        return pos

    def word_left(self) -> int:
        """Move the caret back over the run of spaces or of non-spaces before it."""
        line = self.current_text
        pos = self.current_col
        if pos <= 0:
            return self.current_col
        is_space = line[pos - 1] == " "
        while pos > 0 and (line[pos - 1] == " ") == is_space:
            pos -= 1
        self.current_col = pos
        return pos

    # Saved cursors

    def save_cursor(self, line: int, col: int) -> Cursor:
        """Remember a cursor position, keeping the saved cursors ordered by row."""
        cursor = Cursor(line, col)
        self.cursors.append(cursor)
        self.cursors.sort(key=lambda c: c.row)
        return cursor

    def clear_cursors(self) -> None:
        """Forget every saved cursor."""
        self.cursors.clear()

    def _jump(self, target: Optional[Cursor]) -> bool:
        if target is None:
            return False
        self.current_line = target.row
        self.current_col = target.col
        return True

    def jump_cursor_up(self) -> bool:
        """Move the caret to the nearest saved cursor above it; return whether it moved."""
        target: Optional[Cursor] = None
        for cursor in self.cursors:
            if cursor.row < self.current_line and (target is None or cursor.row > target.row):
                target = cursor
        return self._jump(target)

    def jump_cursor_down(self) -> bool:
        """Move the caret to the nearest saved cursor below it; return whether it moved."""
        target: Optional[Cursor] = None
        for cursor in self.cursors:
            if cursor.row > self.current_line and (target is None or cursor.row < target.row):
                target = cursor
        return self._jump(target)