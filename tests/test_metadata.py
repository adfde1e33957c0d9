import pytest

from textedit_engine.buffer import (
    content_start_offset,
    content_start_offsets,
    display_column,
)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("id;date;author;text", 15),
        ("1;2;3;rest;with;more", 6),
        ("a;b;c", 0),
        ("no separators", 0),
        ("", 0),
        (";;;", 3),
    ],
)
def test_content_start_offset(line: str, expected: int) -> None:
    assert content_start_offset(line) == expected


def test_custom_separator() -> None:
    assert content_start_offset("a|b|c|d", separator="|") == 6
    assert content_start_offset("a;b;c;d", separator="|") == 0


def test_offsets_for_whole_buffer() -> None:
    assert content_start_offsets(["x;y;z;w", "plain"]) == (6, 0)


def test_display_column_counts_from_content_start() -> None:
    line = "1;2;3;hello"

    assert display_column(line, 2) is None
    assert display_column(line, 6) == 1
    assert display_column(line, 10) == 5
    assert display_column("plain", 0) == 1


def test_multi_character_separator() -> None:
    line = "a::b::c::text"

    assert content_start_offset(line, separator="::") == 9
    assert display_column(line, 9, separator="::") == 1
    assert display_column(line, 8, separator="::") is None
