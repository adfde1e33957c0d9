"""Metadata-prefixed lines.

Some files carry a fixed three-field prefix on each line
(``id;date;author;text...``). Hosts grey that prefix out and number the
remaining characters from 1; these helpers compute where it ends.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

METADATA_FIELDS = 3


def content_start_offset(line: str, separator: str = ";") -> int:
    parts = line.split(separator)
    if len(parts) > METADATA_FIELDS:
        return len(separator.join(parts[:METADATA_FIELDS])) + len(separator)
    return 0


def content_start_offsets(
    lines: Iterable[str], separator: str = ";"
) -> Tuple[int, ...]:
    return tuple(content_start_offset(line, separator) for line in lines)


def display_column(line: str, index: int, separator: str = ";") -> Optional[int]:
    """1-based column label for the character at ``index``, ``None`` inside the prefix."""

    offset = content_start_offset(line, separator)
    if index < offset:
        return None
    return index - offset + 1


__all__ = [
    "METADATA_FIELDS",
    "content_start_offset",
    "content_start_offsets",
    "display_column",
]
