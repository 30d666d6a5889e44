import pytest

from scedit.buffer import TextBuffer
from scedit.declarations import DeclarationScanner
from scedit.editing import AUTOSAVE_INTERVAL, Editor


def make(lines, line=0, col=0, max_cols=None):
    buf = TextBuffer(lines, max_cols=max_cols)
    buf.current_line = line
    buf.current_col = col
    return Editor(buf), buf


def test_delete_forward_removes_char_under_caret():
    editor, buf = make(["abc"], col=1)
    assert editor.delete_forward() is True
    assert buf.lines == ["ac"]
    assert buf.current_col == 1


def test_delete_forward_joins_next_line():
    editor, buf = make(["ab", "cd"], col=2)
    assert editor.delete_forward() is True
    assert buf.lines == ["abcd"]


def test_delete_forward_at_end_of_buffer_saves_undo_only():
    editor, buf = make(["ab"], col=2)
    assert editor.delete_forward() is False
    assert buf.lines == ["ab"]
    assert buf.undo() is True


def test_delete_forward_join_limited_by_max_cols():
    editor, buf = make(["ab", "cd"], col=2, max_cols=4)
    assert editor.delete_forward() is False
    assert buf.lines == ["ab", "cd"]


def test_backspace_removes_previous_char():
    editor, buf = make(["abc"], col=2)
    assert editor.backspace() is True
    assert buf.lines == ["ac"]
    assert buf.current_col == 1


def test_backspace_at_line_start_joins_previous():
    editor, buf = make(["ab", "cd"], line=1, col=0)
    assert editor.backspace() is True
    assert buf.lines == ["abcd"]
    assert (buf.current_line, buf.current_col) == (0, 2)


def test_backspace_at_buffer_start_does_nothing():
    editor, buf = make(["ab"])
    assert editor.backspace() is False
    assert buf.lines == ["ab"]
    assert (buf.current_line, buf.current_col) == (0, 0)


def test_backspace_blocked_join_still_moves_column():
    editor, buf = make(["ab", "cd"], line=1, col=0, max_cols=4)
    assert editor.backspace() is False
    assert buf.lines == ["ab", "cd"]
    assert (buf.current_line, buf.current_col) == (1, 2)


def test_newline_keeps_indentation():
    editor, buf = make(["    foo(bar)"], col=8)
    editor.newline()
    assert buf.lines == ["    foo(", "    bar)"]
    assert (buf.current_line, buf.current_col) == (1, 4)


def test_newline_between_braces_opens_block():
    editor, buf = make(["  if {}"], col=6)
    editor.newline()
    assert buf.lines == ["  if {", "      ", "  }"]
    assert (buf.current_line, buf.current_col) == (1, 6)


def test_newline_at_end_adds_indented_empty_line():
    editor, buf = make(["  x", "y"], col=3)
    editor.newline()
    assert buf.lines == ["  x", "  ", "y"]
    assert buf.current_col == 2


def test_newline_can_be_undone():
    editor, buf = make(["hello world"], col=5)
    editor.newline()
    assert buf.line_count == 2
    assert buf.undo() is True
    assert buf.lines == ["hello world"]
    assert (buf.current_line, buf.current_col) == (0, 5)


def test_vertical_moves_keep_preferred_column():
    editor, buf = make(["abcdef", "ab", "abcdef"], col=4)
    assert editor.move_right() is True
    assert editor.move_down() is True
    assert (buf.current_line, buf.current_col) == (1, 2)
    assert editor.move_down() is True
    assert (buf.current_line, buf.current_col) == (2, 5)
    assert editor.move_down() is False
    assert editor.move_up() is True
    assert buf.current_col == 2


def test_move_up_at_top_returns_false():
    editor, buf = make(["abc"])
    assert editor.move_up() is False
    assert buf.current_line == 0


def test_move_left_wraps_to_previous_line_end():
    editor, buf = make(["abc", "de"], line=1, col=0)
    assert editor.move_left() is True
    assert (buf.current_line, buf.current_col) == (0, 3)
    assert editor.preferred_col == 3


def test_move_right_wraps_to_next_line_start():
    editor, buf = make(["abc", "de"], col=3)
    assert editor.move_right() is True
    assert (buf.current_line, buf.current_col) == (1, 0)
    assert editor.preferred_col == 0


def test_move_right_at_buffer_end_returns_false():
    editor, buf = make(["ab"], col=2)
    assert editor.move_right() is False
    assert buf.current_col == 2


def test_line_start_and_end():
    editor, buf = make(["hello"], col=2)
    assert editor.line_end() == 5
    assert buf.current_col == 5
    assert editor.line_start() == 0
    assert buf.current_col == 0


def test_backspace_rescans_declarations():
    scanner = DeclarationScanner(["int"], [])
    buf = TextBuffer(["int xy;"])
    scanner.detect(buf.lines[0], 0)
    assert [v.name for v in scanner.variables] == ["xy"]
    buf.current_col = 5
    editor = Editor(buf, scanner)
    editor.backspace()
    assert buf.lines == ["int y;"]
    assert [v.name for v in scanner.variables] == ["y"]


@pytest.mark.parametrize("action", ["delete_forward", "backspace", "newline"])
def test_edit_count_increments(action):
    editor, _ = make(["abc"], col=1)
    getattr(editor, action)()
    assert editor.edit_count == 1
    assert editor.autosave_due is False


def test_autosave_due_on_interval():
    editor, _ = make(["x" * (AUTOSAVE_INTERVAL + 5)])
    for _ in range(AUTOSAVE_INTERVAL):
        editor.delete_forward()
    assert editor.edit_count == AUTOSAVE_INTERVAL
    assert editor.autosave_due is True