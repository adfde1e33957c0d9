"""File-level actions delegated to host collaborators."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textedit_engine.keys import KeyResult

if TYPE_CHECKING:  # pragma: no cover
    from textedit_engine.keymaps import ResolutionMatch
    from textedit_engine.session.editor import EditSession


def save_file(session: "EditSession", match: "ResolutionMatch") -> KeyResult:
    del match
    request = session.save()
    if request is None:
        return KeyResult(consumed=True, status="save_skipped")
    return KeyResult(consumed=True, status="save", message=request.filename)


__all__ = ["save_file"]
