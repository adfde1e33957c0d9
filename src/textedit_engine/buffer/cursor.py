"""Single-cursor motion over a line sequence."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .state import Cursor
from .validation import clamp_cursor


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"


@dataclass(frozen=True, slots=True)
class CharBox:
    """Horizontal extent of one rendered character, in host pixels."""

    left: float
    width: float

    @property
    def midpoint(self) -> float:
        return self.left + self.width / 2


def move(position: Cursor, direction: Direction | str, lines: Sequence[str]) -> Cursor:
    """Return the cursor reached from ``position`` by one motion step.

    Up/Down keep the column when the target line is long enough and clamp it
    otherwise. Left/Right wrap across line boundaries. Home/End never leave
    the current line. Every motion is a no-op at the matching document edge.
    """

    direction = Direction(direction)
    row, col = clamp_cursor(lines, position)
    if not lines:
        return (0, 0)
    last_row = len(lines) - 1

    if direction is Direction.UP:
        if row > 0:
            return (row - 1, min(col, len(lines[row - 1])))
    elif direction is Direction.DOWN:
        if row < last_row:
            return (row + 1, min(col, len(lines[row + 1])))
    elif direction is Direction.LEFT:
        if col > 0:
            return (row, col - 1)
        if row > 0:
            return (row - 1, len(lines[row - 1]))
    elif direction is Direction.RIGHT:
        if col < len(lines[row]):
            return (row, col + 1)
        if row < last_row:
            return (row + 1, 0)
    elif direction is Direction.HOME:
        return (row, 0)
    elif direction is Direction.END:
        return (row, len(lines[row]))
    return (row, col)


def place_from_pointer(
    x: float, boxes: Sequence[CharBox], *, line_length: Optional[int] = None
) -> int:
    """Map a pointer offset to the character boundary nearest to it.

    The character whose midpoint is closest to ``x`` wins, the earlier one on
    a tie. The boundary returned is before that character when the pointer is
    left of its midpoint and after it otherwise.
    """

    column = 0
    best: Optional[float] = None
    for index, box in enumerate(boxes):
        mid = box.midpoint
        distance = abs(x - mid)
        if best is None or distance < best:
            best = distance
            column = index if x < mid else index + 1
    if line_length is not None:
        column = max(0, min(column, line_length))
    return column


__all__ = ["Direction", "CharBox", "move", "place_from_pointer"]
