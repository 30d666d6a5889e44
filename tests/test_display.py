import pytest

from scedit.display import (
    display_name,
    editor_viewport,
    file_menu_lines,
    git_label,
    git_label_position,
    help_lines,
    horizontal_offset,
    info_lines,
    is_c_source,
    status_text,
    viewport_start,
)


@pytest.mark.parametrize(
    "name", ["main.c", "lib.h", "a.cpp", "b.cc", "c.hh", "d.hpp", "e.cxx", "f.hxx"]
)
def test_c_sources_recognised(name):
    assert is_c_source(name) is True


@pytest.mark.parametrize("name", ["notes.txt", "script.py", "c", "", "file.cs"])
def test_other_files_not_c(name):
    assert is_c_source(name) is False


def test_viewport_short_file_starts_at_top():
    for current in range(5):
        assert viewport_start(5, current, 24) == 0


@pytest.mark.parametrize("current", range(100))
def test_viewport_keeps_caret_visible(current):
    rows = 24
    start = viewport_start(100, current, rows)
    assert start >= 0
    assert start <= current < start + rows - 1
    assert start + rows - 1 <= 100


def test_viewport_end_of_file_shows_last_page():
    rows = 24
    assert viewport_start(100, 99, rows) == 100 - (rows - 1)


@pytest.mark.parametrize("current", range(100))
def test_editor_viewport_screen_line_matches_start(current):
    rows = 24
    start, screen = editor_viewport(100, current, rows)
    assert screen == current - start
    assert 0 <= screen < rows


def test_editor_viewport_short_file_is_unscrolled():
    assert editor_viewport(3, 2, 24) == (0, 2)


@pytest.mark.parametrize("col", range(0, 200, 7))
def test_horizontal_offset_keeps_column_in_view(col):
    for offset in (0, 30, 150):
        new = horizontal_offset(col, offset, 40)
        assert new <= col < new + 40


def test_horizontal_offset_unchanged_when_visible():
    assert horizontal_offset(15, 10, 40) == 10


def test_display_name_takes_basename():
    assert display_name("/home/user/project/main.c") == "main.c"
    assert display_name("main.c") == "main.c"


def test_display_name_is_truncated():
    name = "x" * 100
    result = display_name("dir/" + name)
    assert len(result) == 63
    assert name.startswith(result)


def test_status_text_is_one_based():
    assert status_text(0, 0) == "Line: 1, Column: 1"


def test_git_label_format():
    assert git_label("repo", "main", "alice") == "[repo:main@alice]"


def test_git_label_position_never_left_of_minimum():
    label = git_label("repo", "main", "alice")
    for cols in (0, 10, 40, 60):
        assert git_label_position(label, cols) >= 30


def test_git_label_position_centres_on_wide_screen():
    label = git_label("r", "b", "u")
    wide = git_label_position(label, 400)
    wider = git_label_position(label, 600)
    assert wider - wide == 100


def test_help_page_text():
    texts = [line.text for line in help_lines()]
    assert texts == [
        "press:   F1   for instructions about filesystem",
        "press:   F2   for instructions about macros",
        "press:   esc   to exit",
    ]


def test_info_page_rows_ordered_and_unique():
    rows = [line.row for line in info_lines()]
    assert rows == sorted(rows)
    assert len(set(rows)) == len(rows)
    assert info_lines()[0].text == "Info"
    assert info_lines()[-1].text == "Press any key to continue..."


def test_file_menu_text():
    texts = [line.text for line in file_menu_lines()]
    assert "Press:   S      to save" in texts
    assert "Press:   L      to load" in texts
    assert texts[0] == "File Explorer"