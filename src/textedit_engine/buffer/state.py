"""Cursor addressing types shared by buffer services."""

from __future__ import annotations

from typing import Tuple

Cursor = Tuple[int, int]  # (line, column)

ORIGIN: Cursor = (0, 0)

__all__ = ["Cursor", "ORIGIN"]
