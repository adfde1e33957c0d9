"""Pure line transformations backing the editing keys.

None of these touch a ``LineBuffer``; they take a line sequence and a cursor
and return the proposed lines plus the cursor that should follow. The caller
decides whether to commit the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .document import LINE_SEPARATOR
from .state import Cursor
from .validation import clamp_cursor


@dataclass(frozen=True, slots=True)
class EditResult:
    lines: Tuple[str, ...]
    cursor: Cursor
    changed: bool = True


def _unchanged(lines: Sequence[str], cursor: Cursor) -> EditResult:
    return EditResult(lines=tuple(lines) or ("",), cursor=cursor, changed=False)


def insert_char(lines: Sequence[str], cursor: Cursor, char: str) -> EditResult:
    if len(char) != 1 or char == LINE_SEPARATOR:
        raise ValueError(f"expected one non-newline character, got {char!r}")
    row, col = clamp_cursor(lines, cursor)
    updated = list(lines) or [""]
    line = updated[row]
    updated[row] = line[:col] + char + line[col:]
    return EditResult(lines=tuple(updated), cursor=(row, col + 1))


def insert_string(lines: Sequence[str], cursor: Cursor, text: str) -> EditResult:
    """Insert ``text`` at ``cursor``; each ``\\n`` in it breaks the line there."""

    row, col = clamp_cursor(lines, cursor)
    if not text:
        return _unchanged(lines, (row, col))
    updated = list(lines) or [""]
    line = updated[row]
    pieces = text.split(LINE_SEPARATOR)
    pieces[0] = line[:col] + pieces[0]
    end_col = len(pieces[-1])
    pieces[-1] += line[col:]
    updated[row : row + 1] = pieces
    return EditResult(lines=tuple(updated), cursor=(row + len(pieces) - 1, end_col))


def join_with_previous(lines: Sequence[str], line: int) -> EditResult:
    """Merge ``line`` onto the end of the line above (Backspace at column 0)."""

    row, _ = clamp_cursor(lines, (line, 0))
    if row == 0:
        return _unchanged(lines, (0, 0))
    updated = list(lines)
    join_col = len(updated[row - 1])
    updated[row - 1] += updated[row]
    del updated[row]
    return EditResult(lines=tuple(updated), cursor=(row - 1, join_col))


def delete_char_before(lines: Sequence[str], cursor: Cursor) -> EditResult:
    row, col = clamp_cursor(lines, cursor)
    if col == 0:
        return join_with_previous(lines, row)
    updated = list(lines)
    line = updated[row]
    updated[row] = line[: col - 1] + line[col:]
    return EditResult(lines=tuple(updated), cursor=(row, col - 1))


def split_line(lines: Sequence[str], cursor: Cursor) -> EditResult:
    """Break the line at the cursor (Enter); the cursor lands on the new line."""

    row, col = clamp_cursor(lines, cursor)
    updated = list(lines) or [""]
    line = updated[row]
    updated[row : row + 1] = [line[:col], line[col:]]
    return EditResult(lines=tuple(updated), cursor=(row + 1, 0))


__all__ = [
    "EditResult",
    "insert_char",
    "insert_string",
    "delete_char_before",
    "split_line",
    "join_with_previous",
]
