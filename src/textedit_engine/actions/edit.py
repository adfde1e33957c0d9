"""Content-changing actions and history navigation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textedit_engine.keys import KeyResult

if TYPE_CHECKING:  # pragma: no cover
    from textedit_engine.keymaps import ResolutionMatch
    from textedit_engine.session.editor import EditSession


def delete_backward(session: "EditSession", match: "ResolutionMatch") -> KeyResult:
    del match
    changed = session.delete_backward()
    return KeyResult(
        consumed=True, status="edit" if changed else "edit_noop", changed=changed
    )


def insert_newline(session: "EditSession", match: "ResolutionMatch") -> KeyResult:
    del match
    changed = session.insert_newline()
    return KeyResult(consumed=True, status="edit", changed=changed)


def undo(session: "EditSession", match: "ResolutionMatch") -> KeyResult:
    del match
    changed = session.undo()
    return KeyResult(
        consumed=True, status="undo" if changed else "undo_empty", changed=changed
    )


def redo(session: "EditSession", match: "ResolutionMatch") -> KeyResult:
    del match
    changed = session.redo()
    return KeyResult(
        consumed=True, status="redo" if changed else "redo_empty", changed=changed
    )


__all__ = ["delete_backward", "insert_newline", "undo", "redo"]
