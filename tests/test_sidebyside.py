import re

import pytest

from argusui.sidebyside import (
    DiffLine,
    DiffLineType,
    Hunk,
    ParsedDiff,
    SideBySideLine,
    format_line_num,
    format_side_content,
    render_diff_header,
    render_side_by_side,
    render_unified,
    render_unified_lines,
    truncate_plain,
)
from argusui.theme import default_theme, visible_width

_ANSI = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def plain(text):
    return _ANSI.sub("", text)


def context_row(num, left="left", right="right"):
    return SideBySideLine(
        left_num=num,
        left_text=left,
        left_type=DiffLineType.CONTEXT,
        right_num=num,
        right_text=right,
        right_type=DiffLineType.CONTEXT,
    )


def test_basic_output_has_divider():
    rows = [
        SideBySideLine(1, "old line", DiffLineType.REMOVED, 1, "new line", DiffLineType.ADDED),
        context_row(2, "same", "same"),
    ]
    output = render_side_by_side(rows, "test.go", 80, 10, 0, default_theme())
    assert "│" in output
    assert "old line" in plain(output)
    assert "new line" in plain(output)


def test_rows_have_fixed_width():
    rows = [
        SideBySideLine(1, "old line", DiffLineType.REMOVED, 1, "new line", DiffLineType.ADDED),
        context_row(2, "same", "same"),
    ]
    output = render_side_by_side(rows, "test.go", 80, 10, 0, default_theme())
    lines = output.split("\n")
    assert len(lines) == 2
    assert all(visible_width(line) == 79 for line in lines)


def test_empty_rows():
    output = render_side_by_side([], "test.go", 80, 10, 0, default_theme())
    assert "no diff" in output


def test_scroll_offset_limits_lines():
    rows = [context_row(i + 1) for i in range(20)]
    output = render_side_by_side(rows, "test.go", 80, 5, 10, default_theme())
    lines = output.split("\n")
    assert len(lines) == 5
    assert plain(lines[0]).startswith("  11")


def test_scroll_past_end_is_empty():
    rows = [context_row(i + 1) for i in range(3)]
    assert render_side_by_side(rows, "test.go", 80, 5, 10, default_theme()) == ""


def test_hunk_header():
    rows = [
        SideBySideLine(left_text="@@ -1,3 +1,3 @@", right_text="@@ -1,3 +1,3 @@"),
        context_row(1, "line", "line"),
    ]
    output = render_side_by_side(rows, "test.go", 80, 10, 0, default_theme())
    assert plain(output.split("\n")[0]) == "@@ -1,3 +1,3 @@"


def test_separator_spans_width():
    rows = [
        context_row(1, "line", "line"),
        SideBySideLine(left_text="───", right_text="───"),
        context_row(10, "line10", "line10"),
    ]
    output = render_side_by_side(rows, "test.go", 80, 10, 0, default_theme())
    assert plain(output.split("\n")[1]) == "─" * 80


def test_narrow_width_still_renders():
    rows = [context_row(1, "short", "short")]
    output = render_side_by_side(rows, "test.go", 20, 5, 0, default_theme())
    assert "short" in plain(output)


def test_render_diff_header():
    header = plain(render_diff_header("main.go", 0, 5, "split", default_theme()))
    assert "DIFF" in header
    assert "main.go" in header
    assert "[1/5]" in header
    assert "split" in header


def test_format_side_content_removed():
    theme = default_theme()
    result = format_side_content("old code", "old code", DiffLineType.REMOVED, 20, theme.error, theme.complete)
    assert plain(result).startswith("-old code")
    assert visible_width(result) == 21


def test_format_side_content_added():
    theme = default_theme()
    result = format_side_content("new code", "new code", DiffLineType.ADDED, 20, theme.error, theme.complete)
    assert plain(result).startswith("+new code")


def test_format_side_content_context():
    theme = default_theme()
    result = format_side_content("same", "same", DiffLineType.CONTEXT, 20, theme.error, theme.complete)
    assert result == " same" + " " * 16


def test_format_side_content_blank_context():
    theme = default_theme()
    result = format_side_content("", "", DiffLineType.CONTEXT, 10, theme.error, theme.complete)
    assert result == " " * 11


def test_format_side_content_truncates_long_text():
    theme = default_theme()
    result = format_side_content("x" * 50, "x" * 50, DiffLineType.CONTEXT, 10, theme.error, theme.complete)
    assert result == " " + "x" * 9 + " "


@pytest.mark.parametrize(
    "text, max_width, expected",
    [
        ("hello", 10, "hello"),
        ("hello world", 5, "hello"),
        ("", 5, ""),
        ("abc", 3, "abc"),
    ],
)
def test_truncate_plain(text, max_width, expected):
    assert truncate_plain(text, max_width) == expected


def test_format_line_num():
    assert format_line_num(0, 4) == "    "
    assert format_line_num(7, 4) == "   7"
    assert format_line_num(1234, 4) == "1234"


def test_render_unified_lines_empty():
    assert render_unified_lines(ParsedDiff(), "a.go") == []


def test_render_unified_lines_structure():
    parsed = ParsedDiff(
        hunks=[
            Hunk(
                header="@@ -1,2 +1,2 @@",
                lines=[
                    DiffLine(DiffLineType.REMOVED, "old", 1, 0),
                    DiffLine(DiffLineType.ADDED, "new", 0, 1),
                    DiffLine(DiffLineType.CONTEXT, "ctx", 2, 2),
                ],
            ),
            Hunk(header="@@ -9 +9 @@", lines=[DiffLine(DiffLineType.CONTEXT, "tail", 9, 9)]),
        ]
    )
    lines = [plain(line) for line in render_unified_lines(parsed, "a.go")]
    assert lines == [
        "@@ -1,2 +1,2 @@",
        "   1      -old",
        "        1 +new",
        "   2    2  ctx",
        "───",
        "@@ -9 +9 @@",
        "   9    9  tail",
    ]


def test_render_unified_empty():
    assert render_unified([], 80, 10, 0) == "(no diff)"


def test_render_unified_window_and_truncation():
    lines = [f"line{i}-" + "x" * 30 for i in range(10)]
    output = render_unified(lines, 10, 3, 2)
    rendered = output.split("\n")
    assert len(rendered) == 3
    assert plain(rendered[0]) == "line2-xxxx"
    assert all(visible_width(line) <= 10 for line in rendered)