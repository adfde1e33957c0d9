"""Line-oriented text storage for a single document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence, Tuple

LINE_SEPARATOR = "\n"


def split_text(text: str) -> Tuple[str, ...]:
    """Split flat text on ``\\n`` only, so ``join`` reproduces it exactly."""

    return tuple(text.split(LINE_SEPARATOR))


def join_lines(lines: Iterable[str]) -> str:
    return LINE_SEPARATOR.join(lines)


def _normalize(lines: Iterable[str]) -> Tuple[str, ...]:
    values = tuple(lines)
    return values or ("",)


@dataclass(frozen=True, slots=True)
class LineBuffer:
    """Immutable list-of-lines model; every change produces a new buffer.

    An empty document is a single empty line, so ``(0, 0)`` is always a
    valid address. ``version`` increases by one per replacement and lets
    hosts cheaply detect stale mirrors.
    """

    _lines: Tuple[str, ...] = field(default=("",))
    version: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "_lines", _normalize(self._lines))

    @classmethod
    def from_text(cls, text: str) -> "LineBuffer":
        return cls(_lines=split_text(text))

    def to_text(self) -> str:
        return join_lines(self._lines)

    def lines(self) -> Sequence[str]:
        return self._lines

    def set_lines(self, lines: Iterable[str]) -> "LineBuffer":
        return LineBuffer(_lines=_normalize(lines), version=self.version + 1)

    def set_text(self, text: str) -> "LineBuffer":
        return self.set_lines(split_text(text))

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]


__all__ = ["LineBuffer", "LINE_SEPARATOR", "split_text", "join_lines"]
