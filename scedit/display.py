"""Screen layout: viewport scrolling, status bar text and the fixed help pages."""

from __future__ import annotations

from typing import List, NamedTuple, Tuple

LINE_NUMBER_WIDTH = 6
MAX_DISPLAY_NAME = 63
MIN_GIT_LABEL_COLUMN = 30

_C_SUFFIXES = (".c", ".h", ".cpp", ".cc", ".hh", ".hpp", ".cxx", ".hxx")


class PageLine(NamedTuple):
    """One line of a fixed page, placed by its row relative to the screen centre."""

    row: int
    text: str


def is_c_source(file_name: str) -> bool:
    """Return whether *file_name* names a C or C++ source or header file."""
    return file_name.endswith(_C_SUFFIXES)


def viewport_start(line_count: int, current_line: int, rows: int) -> int:
    """Return the first file line shown so that the caret line sits mid-screen.

    *rows* is the terminal height; its last row is kept for the status bar.
    """
    visible = rows - 1
    if line_count <= visible:
        return 0
    half = visible // 2
    if current_line <= half:
        return 0
    if current_line >= line_count - half:
        return line_count - visible
    return current_line - half


def editor_viewport(line_count: int, current_line: int, rows: int) -> Tuple[int, int]:
    """Return ``(start_line, screen_line)`` used while editing.

    *start_line* is the first file line shown and *screen_line* the screen row
    of the caret.
    """
    start = 0
    screen_line = current_line
    if line_count > rows - 1:
        half = rows // 2
        if current_line > half:
            start = current_line - half
            screen_line = half
        if start + rows > line_count:
            start = line_count - rows + 1
            screen_line = current_line - start
    return start, screen_line


def horizontal_offset(current_col: int, offset: int, visible_cols: int) -> int:
    """Return the horizontal scroll offset that keeps *current_col* in view."""
    if current_col < offset:
        return current_col
    if current_col >= offset + visible_cols:
        return current_col - visible_cols + 1
    return offset


def display_name(file_name: str) -> str:
    """Return the part of *file_name* after its last ``/``, shortened for the status bar."""
    return file_name.rpartition("/")[2][:MAX_DISPLAY_NAME]


def status_text(current_line: int, current_col: int) -> str:
    """Return the caret position text shown at the left of the status bar."""
    return f"Line: {current_line + 1}, Column: {current_col + 1}"


def git_label(repo: str, branch: str, user: str) -> str:
    """Return the repository label shown in the status bar."""
    return f"[{repo}:{branch}@{user}]"


def git_label_position(label: str, cols: int) -> int:
    """Return the status bar column for *label*: centred, but not left of column 30."""
    # The width reserved is five more than the label itself.
    width = len(label) + 5
    return max(int((cols - width) / 2), MIN_GIT_LABEL_COLUMN)


def help_lines() -> List[PageLine]:
    """Return the lines of the help page."""
    return [
        PageLine(-1, "press:   F1   for instructions about filesystem"),
        PageLine(0, "press:   F2   for instructions about macros"),
        PageLine(1, "press:   esc   to exit"),
    ]


def info_lines() -> List[PageLine]:
    """Return the lines of the start-up information page, top to bottom."""
    return [
        PageLine(-5, "Info"),
        PageLine(-3, "press:   F1\t\t for instructions"),
        PageLine(-2, "press:   F2\t\t to display this page"),
        PageLine(-1, "press:   F3\t\t for the file explorer"),
        PageLine(0, "press:   F4\t\t to save file"),
        PageLine(1, "press:   F7\t\t for the git page"),
        PageLine(2, "press:   F9\t\t to open the command input"),
        PageLine(3, "press:   esc\t\t to exit"),
        PageLine(5, "Press any key to continue..."),
    ]


def file_menu_lines() -> List[PageLine]:
    """Return the lines of the file explorer menu page."""
    return [
        PageLine(-2, "File Explorer"),
        PageLine(0, "Press:   S      to save"),
        PageLine(1, "Press:   L      to load"),
        PageLine(3, "Press any key to continue..."),
    ]