"""Open documents and the active-document index.

The workspace is the single owner of what used to be ambient UI state. It is
restored from a store once at startup and written back after every change.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from textedit_engine.buffer import EditHistory, LineBuffer
from textedit_engine.runtime import telemetry

from .store import (
    DocumentRecord,
    MemoryStore,
    WorkspaceSnapshot,
    WorkspaceStateError,
    WorkspaceStore,
)

_logger_name = "textedit_engine.session"


@dataclass(slots=True)
class Document:
    """One open file. Names are labels only and may repeat."""

    name: str
    buffer: LineBuffer = field(default_factory=LineBuffer)
    history: EditHistory = field(default_factory=EditHistory)

    @classmethod
    def from_record(cls, record: DocumentRecord) -> "Document":
        return cls(name=record.name, buffer=LineBuffer.from_text(record.content))

    def to_record(self) -> DocumentRecord:
        return DocumentRecord(name=self.name, content=self.content)

    @property
    def content(self) -> str:
        return self.buffer.to_text()


class Workspace:
    def __init__(
        self,
        documents: Optional[List[Document]] = None,
        *,
        active_index: int = 0,
        store: Optional[WorkspaceStore] = None,
        autosave: bool = True,
    ) -> None:
        self._documents: List[Document] = list(documents or [])
        self._active = 0
        self.store: WorkspaceStore = store or MemoryStore()
        self.autosave = autosave
        self._active = self._clamp_index(active_index)

    @classmethod
    def restore(cls, store: WorkspaceStore, *, autosave: bool = True) -> "Workspace":
        """Load a workspace from ``store``, starting empty if the state is unusable."""

        try:
            snapshot = store.load()
        except WorkspaceStateError as exc:
            telemetry.record_event(
                "workspace.restore_failed",
                level="warning",
                data={"error": str(exc)},
                logger_name=_logger_name,
            )
            snapshot = WorkspaceSnapshot()
        documents = [Document.from_record(record) for record in snapshot.documents]
        workspace = cls(
            documents,
            active_index=snapshot.active_index,
            store=store,
            autosave=autosave,
        )
        telemetry.record_event(
            "workspace.restored",
            data={"documents": len(documents), "active": workspace.active_index},
            logger_name=_logger_name,
        )
        return workspace

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def __getitem__(self, index: int) -> Document:
        return self._documents[index]

    @property
    def active_index(self) -> int:
        return self._active

    @property
    def active(self) -> Optional[Document]:
        if not self._documents:
            return None
        return self._documents[self._active]

    def open(self, name: str, content: str) -> Document:
        document = Document(name=name, buffer=LineBuffer.from_text(content))
        self._documents.append(document)
        self._active = len(self._documents) - 1
        self.changed()
        return document

    def close(self, index: Optional[int] = None) -> Optional[Document]:
        """Remove a document and return the one that becomes active, if any."""

        if not self._documents:
            return None
        target = self._active if index is None else self._check_index(index)
        del self._documents[target]
        self._active = max(0, target - 1) if self._documents else 0
        self.changed()
        return self.active

    def select(self, index: int) -> Document:
        self._active = self._check_index(index)
        self.changed()
        return self._documents[self._active]

    def snapshot(self) -> WorkspaceSnapshot:
        return WorkspaceSnapshot(
            documents=tuple(document.to_record() for document in self._documents),
            active_index=self._active,
        )

    def changed(self) -> None:
        """Lifecycle hook run after every mutation; persists when autosave is on."""

        if self.autosave:
            self.persist()

    def persist(self) -> bool:
        return self.store.save(self.snapshot())

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._documents):
            raise IndexError(
                f"document index {index} out of range for {len(self._documents)} documents"
            )
        return index

    def _clamp_index(self, index: int) -> int:
        if not self._documents:
            return 0
        return max(0, min(index, len(self._documents) - 1))


__all__ = ["Document", "Workspace"]
