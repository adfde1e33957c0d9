"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import Sequence

from .state import ORIGIN, Cursor


def clamp_cursor(lines: Sequence[str], cursor: Cursor) -> Cursor:
    """Pull ``cursor`` back inside ``lines``; an empty sequence acts as ``[""]``."""

    if not lines:
        return ORIGIN
    row, col = cursor
    row = max(0, min(row, len(lines) - 1))
    col = max(0, min(col, len(lines[row])))
    return (row, col)


__all__ = ["clamp_cursor"]
