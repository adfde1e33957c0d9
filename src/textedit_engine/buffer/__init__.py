"""Line buffer, cursor motion, and undo/redo data structures."""

from .cursor import CharBox, Direction, move, place_from_pointer
from .document import LINE_SEPARATOR, LineBuffer, join_lines, split_text
from .edits import (
    EditResult,
    delete_char_before,
    insert_char,
    insert_string,
    join_with_previous,
    split_line,
)
from .metadata import content_start_offset, content_start_offsets, display_column
from .state import ORIGIN, Cursor
from .sync import MatchSpan, SessionMirror, spans_on_line
from .undo import EditHistory
from .validation import clamp_cursor

__all__ = [
    "CharBox",
    "Cursor",
    "Direction",
    "EditHistory",
    "EditResult",
    "LINE_SEPARATOR",
    "LineBuffer",
    "MatchSpan",
    "ORIGIN",
    "SessionMirror",
    "clamp_cursor",
    "content_start_offset",
    "content_start_offsets",
    "delete_char_before",
    "display_column",
    "insert_char",
    "insert_string",
    "join_lines",
    "join_with_previous",
    "move",
    "place_from_pointer",
    "split_line",
    "split_text",
    "spans_on_line",
]
