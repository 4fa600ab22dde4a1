from __future__ import annotations

import pytest

from srcoffsets import OffsetCursor, OffsetTable, Position, PositionError, Span, build_table, offset_of


LINE_SEP = "\u2028"
PAR_SEP = "\u2029"
SMILEY = "\U0001f603"  # F0 9F 98 83

STR_WITH_SMILEY = f"foo {SMILEY} bar\nbaz\n"


@pytest.mark.parametrize(
    ("text", "line", "column", "expected"),
    [
        pytest.param("foo\n\nbar", 3, 0, 5, id="empty_line"),
        pytest.param("foo bar\n", 1, 0, 0, id="first_char"),
        pytest.param("foo bar\n", 1, 6, 6, id="last_char"),
        # End positions are exclusive: "foo" spans (1, 0)-(1, 3).
        pytest.param("foo\nbar\n", 1, 3, 3, id="column_after_last"),
        pytest.param("foo\nbar", 2, 3, 7, id="char_after_last"),
        pytest.param("", 1, 0, 0, id="empty"),
        pytest.param("foo bar", 1, 6, 6, id="no_last_line_terminator"),
        pytest.param("foo\nbar\n", 2, 1, 5, id="multi_line"),
        pytest.param("foo\rbar\r", 2, 1, 5, id="carriage_return"),
        pytest.param("foo\r\nbar\r\n", 2, 1, 6, id="windows_line_terminator"),
        pytest.param(f"foo{LINE_SEP}bar{LINE_SEP}", 2, 1, 7, id="unicode_line_separator"),
        pytest.param(f"foo{PAR_SEP}bar{PAR_SEP}", 2, 1, 7, id="unicode_paragraph_separator"),
        pytest.param(STR_WITH_SMILEY, 1, 3, 3, id="offset_before_multibyte_char"),
        pytest.param(STR_WITH_SMILEY, 1, 4, 4, id="offset_of_multibyte_char"),
        pytest.param(STR_WITH_SMILEY, 1, 5, 8, id="offset_after_multibyte_char"),
        pytest.param(STR_WITH_SMILEY, 2, 0, 13, id="offset_line_after_multibyte_char"),
    ],
)
def test_offset(text: str, line: int, column: int, expected: int) -> None:
    table = OffsetTable.build(text)
    assert table.offset(Position(line=line, column=column)) == expected


def test_bytes_and_str_build_the_same_table() -> None:
    text = f"a{SMILEY}\r\nb{LINE_SEP}c"
    assert OffsetTable.build(text) == OffsetTable.build(text.encode("utf-8"))
    assert OffsetTable.build(bytearray(text.encode("utf-8"))).text == text.encode("utf-8")


def test_line_starts() -> None:
    table = OffsetTable.build(f"a\nb\r\nc\rd{LINE_SEP}e{PAR_SEP}f")
    assert table.line_starts == (0, 2, 5, 7, 11, 15)
    assert table.line_count == 6
    assert len(table) == 6
    assert table.line_start(4) == 7


def test_empty_text_has_one_line() -> None:
    table = OffsetTable.build("")
    assert table.line_starts == (0,)
    assert table.offset_at(1, 0) == 0
    assert table.offset_at(1, 5) == 0


def test_consecutive_terminators_make_empty_lines() -> None:
    table = OffsetTable.build("\n\r\n\r\n\r")
    # \n | \r\n | \r\n | \r
    assert table.line_starts == (0, 1, 3, 5, 6)
    assert [table.offset_at(i, 3) for i in range(1, 6)] == [0, 1, 3, 5, 6]


def test_cr_lf_is_one_terminator_but_lf_cr_is_two() -> None:
    assert OffsetTable.build("a\r\nb").line_count == 2
    assert OffsetTable.build("a\n\rb").line_count == 3


def test_column_past_end_clamps_to_terminator() -> None:
    table = OffsetTable.build("foo\r\nbar\r\n")
    assert table.offset_at(1, 3) == 3
    assert table.offset_at(1, 100) == 3
    assert table.offset_at(2, 100) == 8
    # last line is empty
    assert table.offset_at(3, 0) == 10
    assert table.offset_at(3, 7) == 10


def test_column_past_end_clamps_before_unicode_separator() -> None:
    table = OffsetTable.build(f"ab{PAR_SEP}cd")
    assert table.offset_at(1, 9) == 2
    assert table.offset_at(2, 0) == 5
    assert table.offset_at(2, 9) == 7


def test_column_past_end_of_file_returns_length() -> None:
    text = f"x = 1\ny = {SMILEY}"
    table = OffsetTable.build(text)
    n = len(text.encode("utf-8"))
    assert table.offset_at(2, 5) == n
    assert table.offset_at(2, 50) == n


def test_multibyte_widths() -> None:
    table = OffsetTable.build("aé€\U0001f603z")
    assert [table.offset_at(1, c) for c in range(6)] == [0, 1, 3, 6, 10, 11]


def test_other_line_breaks_are_ordinary_characters() -> None:
    # Only \n, \r, \r\n, U+2028 and U+2029 end a line.
    table = OffsetTable.build("a\x0bb\x0cc\x85d")
    assert table.line_count == 1
    assert table.offset_at(1, 6) == 7


def test_offset_is_idempotent() -> None:
    table = OffsetTable.build(STR_WITH_SMILEY)
    pos = Position(line=1, column=5)
    assert table.offset(pos) == table.offset(pos) == 8


def test_span_offsets() -> None:
    table = OffsetTable.build("let x = 1;\nlet y = 2;")
    span = Span(file="x.js", start=Position(2, 4), end=Position(2, 5))
    assert table.span_offsets(span) == (15, 16)
    assert table.text[15:16] == b"y"


def test_offset_of_one_shot() -> None:
    assert offset_of(STR_WITH_SMILEY, 1, 5) == 8
    assert offset_of(b"foo\nbar", 2, 3) == 7


@pytest.mark.parametrize(
    ("line", "column", "message"),
    [
        (0, 0, "line 0 out of range"),
        (-1, 0, "line -1 out of range"),
        (3, 0, "line 3 out of range"),
        (1, -1, "negative column -1"),
    ],
)
def test_invalid_position_is_error(line: int, column: int, message: str) -> None:
    table = OffsetTable.build("foo\nbar")
    with pytest.raises(PositionError) as e:
        table.offset_at(line, column)
    assert message in str(e.value)
    assert e.value.position == Position(line=line, column=column)
    assert e.value.line_count == 2


def test_line_out_of_range_hint_names_line_count() -> None:
    table = OffsetTable.build("a\nb\nc")
    with pytest.raises(PositionError) as e:
        table.line_start(4)
    assert "4:0: line 4 out of range" in str(e.value)
    assert "hint: text has 3 line(s)" in str(e.value)


def test_cursor_matches_table_for_forward_and_backward_queries() -> None:
    text = f"foo {SMILEY} bar\r\nbaz{LINE_SEP}qux"
    table = OffsetTable.build(text)
    cursor = OffsetCursor(table)
    queries = [(1, 0), (1, 3), (1, 5), (1, 40), (1, 41), (1, 2), (2, 1), (2, 9), (3, 0), (3, 3), (1, 6)]
    for line, column in queries:
        pos = Position(line=line, column=column)
        assert cursor.offset(pos) == table.offset(pos), pos


def test_cursor_rejects_invalid_positions() -> None:
    cursor = OffsetCursor(OffsetTable.build("abc"))
    with pytest.raises(PositionError):
        cursor.offset(Position(line=2, column=0))
    cursor.reset()
    assert cursor.offset(Position(line=1, column=2)) == 2


def test_table_is_frozen() -> None:
    table = OffsetTable.build("abc")
    with pytest.raises(AttributeError):
        table.line_starts = (0, 1)  # type: ignore[misc]


def test_build_table() -> None:
    assert build_table("a\nb") == OffsetTable.build(b"a\nb")
