"""Persistence of the open-document list and the active index.

The stored shape is a JSON object::

    {"openedFiles": [{"name": "...", "content": "..."}], "currentFileIndex": 0}
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Protocol, Tuple

from textedit_engine.runtime import telemetry

FILES_KEY = "openedFiles"
INDEX_KEY = "currentFileIndex"


class WorkspaceStateError(ValueError):
    """Raised when stored workspace state cannot be decoded."""


@dataclass(frozen=True, slots=True)
class DocumentRecord:
    name: str
    content: str

    def to_json(self) -> dict[str, str]:
        return {"name": self.name, "content": self.content}


@dataclass(frozen=True, slots=True)
class WorkspaceSnapshot:
    documents: Tuple[DocumentRecord, ...] = field(default_factory=tuple)
    active_index: int = 0

    def to_json(self) -> dict[str, Any]:
        return {
            FILES_KEY: [record.to_json() for record in self.documents],
            INDEX_KEY: self.active_index,
        }


def _decode_index(raw: Any) -> int:
    if raw is None:
        return 0
    if isinstance(raw, bool):
        raise WorkspaceStateError(f"'{INDEX_KEY}' must be an integer")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.strip().lstrip("-").isdigit():
        return int(raw.strip())
    raise WorkspaceStateError(f"'{INDEX_KEY}' must be an integer, got {raw!r}")


def _decode_record(position: int, raw: Any) -> DocumentRecord:
    if not isinstance(raw, Mapping):
        raise WorkspaceStateError(f"document #{position} is not an object")
    name = raw.get("name")
    content = raw.get("content")
    if not isinstance(name, str) or not isinstance(content, str):
        raise WorkspaceStateError(
            f"document #{position} needs string 'name' and 'content'"
        )
    return DocumentRecord(name=name, content=content)


def decode_snapshot(payload: Any) -> WorkspaceSnapshot:
    if not isinstance(payload, Mapping):
        raise WorkspaceStateError("workspace state must be a JSON object")
    files = payload.get(FILES_KEY, [])
    if not isinstance(files, list):
        raise WorkspaceStateError(f"'{FILES_KEY}' must be a list")
    records = tuple(_decode_record(i, raw) for i, raw in enumerate(files))
    return WorkspaceSnapshot(
        documents=records, active_index=_decode_index(payload.get(INDEX_KEY))
    )


class WorkspaceStore(Protocol):
    def load(self) -> WorkspaceSnapshot:
        """Return the stored snapshot; raise ``WorkspaceStateError`` if malformed."""
        ...

    def save(self, snapshot: WorkspaceSnapshot) -> bool:
        """Persist ``snapshot``; return ``False`` when the write failed."""
        ...


class MemoryStore:
    """Keeps the serialized state in memory, for tests and headless hosts."""

    def __init__(self, raw: Optional[str] = None) -> None:
        self.raw = raw
        self.saves = 0

    def load(self) -> WorkspaceSnapshot:
        if self.raw is None:
            return WorkspaceSnapshot()
        try:
            payload = json.loads(self.raw)
        except json.JSONDecodeError as exc:
            raise WorkspaceStateError(f"invalid JSON: {exc}") from exc
        return decode_snapshot(payload)

    def save(self, snapshot: WorkspaceSnapshot) -> bool:
        self.raw = json.dumps(snapshot.to_json())
        self.saves += 1
        return True


class JsonFileStore:
    """Stores the workspace as a JSON document on disk."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> WorkspaceSnapshot:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return WorkspaceSnapshot()
        except (OSError, UnicodeDecodeError) as exc:
            raise WorkspaceStateError(f"cannot read {self.path}: {exc}") from exc
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise WorkspaceStateError(f"invalid JSON in {self.path}: {exc}") from exc
        return decode_snapshot(payload)

    def save(self, snapshot: WorkspaceSnapshot) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp.write_text(
                json.dumps(snapshot.to_json(), ensure_ascii=False), encoding="utf-8"
            )
            tmp.replace(self.path)
        except OSError as exc:
            telemetry.record_event(
                "workspace.save_failed",
                level="error",
                data={"path": str(self.path), "error": str(exc)},
                logger_name="textedit_engine.session",
            )
            return False
        return True


__all__ = [
    "DocumentRecord",
    "JsonFileStore",
    "MemoryStore",
    "WorkspaceSnapshot",
    "WorkspaceStateError",
    "WorkspaceStore",
    "decode_snapshot",
]
