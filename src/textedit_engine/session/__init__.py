"""Documents, workspace persistence and the edit session."""

from .editor import EditSession, SessionState
from .events import EditorBus, Notification, SaveRequest
from .store import (
    DocumentRecord,
    JsonFileStore,
    MemoryStore,
    WorkspaceSnapshot,
    WorkspaceStateError,
    WorkspaceStore,
    decode_snapshot,
)
from .workspace import Document, Workspace

__all__ = [
    "EditSession",
    "SessionState",
    "EditorBus",
    "Notification",
    "SaveRequest",
    "Document",
    "DocumentRecord",
    "Workspace",
    "WorkspaceSnapshot",
    "WorkspaceStateError",
    "WorkspaceStore",
    "JsonFileStore",
    "MemoryStore",
    "decode_snapshot",
]
