"""Editing verbs bound to keystrokes."""

from .cursor import (
    cursor_down,
    cursor_end,
    cursor_home,
    cursor_left,
    cursor_right,
    cursor_up,
)
from .edit import delete_backward, insert_newline, redo, undo
from .file import save_file

__all__ = [
    "cursor_up",
    "cursor_down",
    "cursor_left",
    "cursor_right",
    "cursor_home",
    "cursor_end",
    "delete_backward",
    "insert_newline",
    "undo",
    "redo",
    "save_file",
]
