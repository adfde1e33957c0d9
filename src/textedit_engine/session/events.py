"""Session event bus and user-facing notifications."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Literal

NotificationLevel = Literal["success", "info", "error"]

DOCUMENT_OPENED = "document.opened"
DOCUMENT_CLOSED = "document.closed"
DOCUMENT_SELECTED = "document.selected"
BUFFER_CHANGED = "buffer.changed"
SEARCH_UPDATED = "search.updated"
FILE_SAVE = "file.save"
NOTIFY = "notify"

SESSION_EVENTS = (
    DOCUMENT_OPENED,
    DOCUMENT_CLOSED,
    DOCUMENT_SELECTED,
    BUFFER_CHANGED,
    SEARCH_UPDATED,
    FILE_SAVE,
    NOTIFY,
)


@dataclass(frozen=True, slots=True)
class Notification:
    message: str
    level: NotificationLevel = "info"


@dataclass(frozen=True, slots=True)
class SaveRequest:
    """What the host needs to write a document out: suggested name and flat text."""

    filename: str
    content: str


class EditorBus:
    """Minimal event bus letting the session signal hosts."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[[object], None]) -> None:
        callbacks = self._subscribers.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


__all__ = [
    "EditorBus",
    "Notification",
    "NotificationLevel",
    "SaveRequest",
    "SESSION_EVENTS",
    "DOCUMENT_OPENED",
    "DOCUMENT_CLOSED",
    "DOCUMENT_SELECTED",
    "BUFFER_CHANGED",
    "SEARCH_UPDATED",
    "FILE_SAVE",
    "NOTIFY",
]
