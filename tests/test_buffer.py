import pytest

from textedit_engine.buffer import (
    LineBuffer,
    clamp_cursor,
    delete_char_before,
    insert_char,
    insert_string,
    join_lines,
    join_with_previous,
    split_line,
    split_text,
)


@pytest.mark.parametrize(
    "lines",
    [
        [""],
        ["abc"],
        ["", ""],
        ["first", "", "third", ""],
        ["  indented", "tab\there", "unicode é ü"],
    ],
)
def test_lines_round_trip_through_flat_text(lines: list[str]) -> None:
    assert list(split_text(join_lines(lines))) == lines


def test_from_text_keeps_trailing_empty_line() -> None:
    buffer = LineBuffer.from_text("ab\ncd\n")

    assert buffer.lines() == ("ab", "cd", "")
    assert buffer.to_text() == "ab\ncd\n"


def test_empty_document_is_single_empty_line() -> None:
    assert LineBuffer.from_text("").lines() == ("",)
    assert LineBuffer().line_count == 1
    assert LineBuffer().set_lines([]).lines() == ("",)


def test_carriage_returns_are_not_separators() -> None:
    buffer = LineBuffer.from_text("a\r\nb")

    assert buffer.lines() == ("a\r", "b")


def test_set_lines_returns_new_buffer_with_bumped_version() -> None:
    buffer = LineBuffer.from_text("one")

    updated = buffer.set_lines(["one", "two"])

    assert buffer.lines() == ("one",)
    assert updated.lines() == ("one", "two")
    assert updated.version == buffer.version + 1


def test_insert_char_advances_cursor() -> None:
    result = insert_char(("ac",), (0, 1), "b")

    assert result.lines == ("abc",)
    assert result.cursor == (0, 2)
    assert result.changed


def test_insert_char_clamps_out_of_range_column() -> None:
    result = insert_char(("ab",), (0, 99), "c")

    assert result.lines == ("abc",)
    assert result.cursor == (0, 3)


@pytest.mark.parametrize("text", ["\n", "", "xy"])
def test_insert_char_rejects_anything_but_one_character(text: str) -> None:
    with pytest.raises(ValueError):
        insert_char(("ab",), (0, 1), text)


def test_insert_string_breaks_lines_on_newline() -> None:
    result = insert_string(("ab", "cd"), (0, 1), "x\ny\nz")

    assert result.lines == ("ax", "y", "zb", "cd")
    assert result.cursor == (2, 1)
    assert all("\n" not in line for line in result.lines)


def test_insert_string_without_newline_stays_on_line() -> None:
    result = insert_string(("ad",), (0, 1), "bc")

    assert result.lines == ("abcd",)
    assert result.cursor == (0, 3)


def test_insert_string_empty_is_unchanged() -> None:
    result = insert_string(("ab",), (0, 1), "")

    assert not result.changed
    assert result.lines == ("ab",)


def test_delete_char_before_removes_previous_character() -> None:
    result = delete_char_before(("abc",), (0, 2))

    assert result.lines == ("ac",)
    assert result.cursor == (0, 1)


def test_delete_char_before_at_origin_is_noop() -> None:
    lines = ("abc", "def")

    result = delete_char_before(lines, (0, 0))

    assert result.lines == lines
    assert result.cursor == (0, 0)
    assert not result.changed


def test_delete_char_before_at_column_zero_joins_lines() -> None:
    result = delete_char_before(("ab", "cd"), (1, 0))

    assert result.lines == ("abcd",)
    assert result.cursor == (0, 2)


def test_join_with_previous_on_first_line_is_noop() -> None:
    result = join_with_previous(("ab", "cd"), 0)

    assert result.lines == ("ab", "cd")
    assert not result.changed


def test_split_line_moves_tail_to_new_line() -> None:
    result = split_line(("abcd",), (0, 2))

    assert result.lines == ("ab", "cd")
    assert result.cursor == (1, 0)


def test_split_line_at_end_adds_empty_line() -> None:
    result = split_line(("ab", "cd"), (0, 2))

    assert result.lines == ("ab", "", "cd")
    assert result.cursor == (1, 0)


def test_transforms_do_not_mutate_input() -> None:
    lines = ["ab", "cd"]

    split_line(lines, (0, 1))
    delete_char_before(lines, (1, 0))
    insert_char(lines, (0, 0), "x")

    assert lines == ["ab", "cd"]


def test_clamp_cursor() -> None:
    lines = ("abc", "d")

    assert clamp_cursor(lines, (5, 5)) == (1, 1)
    assert clamp_cursor(lines, (-1, -3)) == (0, 0)
    assert clamp_cursor(lines, (0, 3)) == (0, 3)
    assert clamp_cursor((), (3, 3)) == (0, 0)
