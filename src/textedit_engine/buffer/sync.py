"""Adapter boundary types for pushing session state to host widgets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .state import Cursor


@dataclass(frozen=True, slots=True)
class MatchSpan:
    """One search hit, ``start`` inclusive and ``end`` exclusive."""

    line: int
    start: int
    end: int

    def contains(self, line: int, column: int) -> bool:
        return line == self.line and self.start <= column < self.end


@dataclass(frozen=True, slots=True)
class SessionMirror:
    """Host-friendly snapshot: buffer content, cursor address and match spans."""

    name: str
    lines: Tuple[str, ...]
    cursor: Cursor
    matches: Tuple[MatchSpan, ...] = ()
    query: str = ""
    content_offsets: Tuple[int, ...] = ()
    version: int = 0
    can_undo: bool = False
    can_redo: bool = False

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def spans_on_line(matches: Sequence[MatchSpan], line: int) -> Tuple[MatchSpan, ...]:
    return tuple(span for span in matches if span.line == line)


__all__ = ["MatchSpan", "SessionMirror", "spans_on_line"]
