"""Linear undo/redo over whole-content snapshots."""

from __future__ import annotations

from typing import List, Optional


class EditHistory:
    """Snapshot log with a movable index.

    ``history[index]`` mirrors the live buffer content. Committing after an
    undo discards the redo branch. Cursor positions are not recorded.
    """

    def __init__(self, initial: Optional[str] = None) -> None:
        self._entries: List[str] = []
        self._index: int = -1
        if initial is not None:
            self.reset(initial)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> Optional[str]:
        if self._index < 0:
            return None
        return self._entries[self._index]

    def reset(self, content: str) -> None:
        self._entries = [content]
        self._index = 0

    def commit(self, content: str) -> bool:
        """Record ``content``; returns ``False`` when it repeats the current entry."""

        if self._index >= 0 and self._entries[self._index] == content:
            return False
        del self._entries[self._index + 1 :]
        self._entries.append(content)
        self._index = len(self._entries) - 1
        return True

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def undo(self) -> Optional[str]:
        if not self.can_undo():
            return None
        self._index -= 1
        return self._entries[self._index]

    def redo(self) -> Optional[str]:
        if not self.can_redo():
            return None
        self._index += 1
        return self._entries[self._index]


__all__ = ["EditHistory"]
