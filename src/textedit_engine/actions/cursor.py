"""Navigation actions. None of these touch content or history."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textedit_engine.buffer.cursor import Direction
from textedit_engine.keys import KeyResult

if TYPE_CHECKING:  # pragma: no cover
    from textedit_engine.keymaps import ResolutionMatch
    from textedit_engine.session.editor import EditSession


def _move(session: "EditSession", direction: Direction) -> KeyResult:
    before = session.cursor
    after = session.move_cursor(direction)
    status = "cursor_move" if after != before else "cursor_edge"
    return KeyResult(consumed=True, status=status)


def cursor_up(session: "EditSession", match: "ResolutionMatch") -> KeyResult:
    del match
    return _move(session, Direction.UP)


def cursor_down(session: "EditSession", match: "ResolutionMatch") -> KeyResult:
    del match
    return _move(session, Direction.DOWN)


def cursor_left(session: "EditSession", match: "ResolutionMatch") -> KeyResult:
    del match
    return _move(session, Direction.LEFT)


def cursor_right(session: "EditSession", match: "ResolutionMatch") -> KeyResult:
    del match
    return _move(session, Direction.RIGHT)


def cursor_home(session: "EditSession", match: "ResolutionMatch") -> KeyResult:
    del match
    return _move(session, Direction.HOME)


def cursor_end(session: "EditSession", match: "ResolutionMatch") -> KeyResult:
    del match
    return _move(session, Direction.END)


__all__ = [
    "cursor_up",
    "cursor_down",
    "cursor_left",
    "cursor_right",
    "cursor_home",
    "cursor_end",
]
