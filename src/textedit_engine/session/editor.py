"""Edit session: turns keystrokes and replace requests into buffer changes."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence

from textedit_engine.buffer import (
    CharBox,
    Cursor,
    ORIGIN,
    Direction,
    EditResult,
    SessionMirror,
    clamp_cursor,
    content_start_offsets,
    delete_char_before,
    insert_char,
    insert_string,
    move,
    place_from_pointer,
    split_line,
)
from textedit_engine.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from textedit_engine.keys import KeyInput, KeyResult
from textedit_engine.runtime import telemetry
from textedit_engine.search import ReplaceOutcome, SearchIndex, replace_all

from .events import (
    BUFFER_CHANGED,
    DOCUMENT_CLOSED,
    DOCUMENT_OPENED,
    DOCUMENT_SELECTED,
    FILE_SAVE,
    NOTIFY,
    SEARCH_UPDATED,
    EditorBus,
    Notification,
    NotificationLevel,
    SaveRequest,
)
from .workspace import Document, Workspace


class SessionState(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"


class EditSession:
    """Orchestrates buffer, cursor, history and search for the active document.

    Every operation runs to completion before returning: content changes are
    committed to history and the match set is recomputed synchronously.
    Undo/redo swap content without committing and only clamp the cursor.
    """

    def __init__(
        self,
        workspace: Optional[Workspace] = None,
        *,
        bus: Optional[EditorBus] = None,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
        metadata_separator: str = ";",
    ) -> None:
        self.workspace = workspace if workspace is not None else Workspace()
        self.bus = bus if bus is not None else EditorBus()
        self.logger = telemetry.get_logger("textedit_engine.session")
        if keymap_registry is None:
            keymap_registry = KeymapRegistry(logger_name="textedit_engine.keymaps")
            if load_defaults:
                load_default_keymaps(keymap_registry)
        self.keymap_registry = keymap_registry
        if keymap_resolver is None:
            keymap_resolver = KeymapResolver(
                self.keymap_registry, logger_name="textedit_engine.keymaps"
            )
        self.keymap_resolver = keymap_resolver
        self.metadata_separator = metadata_separator
        self.search = SearchIndex()
        self._cursor: Cursor = ORIGIN
        self._activate(self.workspace.active)

    # -- state -----------------------------------------------------------

    @property
    def state(self) -> SessionState:
        if self.workspace.active is None:
            return SessionState.IDLE
        return SessionState.ACTIVE

    @property
    def document(self) -> Optional[Document]:
        return self.workspace.active

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def lines(self) -> Sequence[str]:
        document = self.document
        if document is None:
            return ("",)
        return document.buffer.lines()

    @property
    def query(self) -> str:
        return self.search.query

    # -- document lifecycle ----------------------------------------------

    def load_document(self, name: str, content: str) -> Document:
        document = self.workspace.open(name, content)
        self._activate(document)
        telemetry.record_event(
            "document.opened",
            data={"name": name, "lines": document.buffer.line_count},
            logger_name="textedit_engine.session",
        )
        self.bus.emit(DOCUMENT_OPENED, document)
        return document

    def close_document(self, index: Optional[int] = None) -> Optional[Document]:
        if self.state is SessionState.IDLE:
            return None
        closing = self.workspace.active_index if index is None else index
        closed = self.workspace[closing]
        active = self.workspace.close(closing)
        self._activate(active)
        telemetry.record_event(
            "document.closed",
            data={"name": closed.name, "remaining": len(self.workspace)},
            logger_name="textedit_engine.session",
        )
        self.bus.emit(DOCUMENT_CLOSED, closed)
        return active

    def select_document(self, index: int) -> Document:
        document = self.workspace.select(index)
        self._activate(document)
        self.bus.emit(DOCUMENT_SELECTED, document)
        return document

    def _activate(self, document: Optional[Document]) -> None:
        self._cursor = ORIGIN
        if document is not None:
            document.history.reset(document.content)
        self._refresh_search()

    # -- key dispatch ----------------------------------------------------

    def handle_key(self, key: KeyInput) -> KeyResult:
        if key.is_modifier_key:
            return KeyResult(consumed=False, status="modifier", prevent_default=False)
        if self.state is SessionState.IDLE:
            return KeyResult(consumed=False, status="idle")

        with telemetry.span(
            "session::key",
            logger_name="textedit_engine.session",
            component="session",
            metadata={"key": key.token},
        ) as handle:
            match = self.keymap_resolver.resolve(key.token)
            if match is not None:
                outcome = match.action(self, match)
                result = (
                    outcome
                    if isinstance(outcome, KeyResult)
                    else KeyResult(consumed=True)
                )
            elif key.printable is not None:
                changed = self._apply(
                    insert_char(self.lines, self._cursor, key.printable), "insert"
                )
                result = KeyResult(consumed=True, status="insert", changed=changed)
            else:
                result = KeyResult(consumed=False, status="ignored")
            handle.add_metadata("status", result.status)
        return result

    # -- editing primitives ----------------------------------------------

    def move_cursor(self, direction: Direction | str) -> Cursor:
        self._cursor = move(self._cursor, direction, self.lines)
        return self._cursor

    def set_cursor(self, line: int, column: int) -> Cursor:
        self._cursor = clamp_cursor(self.lines, (line, column))
        return self._cursor

    def click(self, line: int, x: float, boxes: Sequence[CharBox]) -> Cursor:
        """Place the cursor on ``line`` at the boundary nearest to pointer ``x``."""

        row, _ = clamp_cursor(self.lines, (line, 0))
        column = place_from_pointer(x, boxes, line_length=len(self.lines[row]))
        self._cursor = (row, column)
        return self._cursor

    def insert_text(self, text: str) -> bool:
        """Insert ``text`` at the cursor; embedded newlines split the line."""

        return self._apply(insert_string(self.lines, self._cursor, text), "insert")

    def delete_backward(self) -> bool:
        return self._apply(delete_char_before(self.lines, self._cursor), "backspace")

    def insert_newline(self) -> bool:
        return self._apply(split_line(self.lines, self._cursor), "newline")

    def undo(self) -> bool:
        document = self.document
        if document is None:
            return False
        return self._restore(document.history.undo(), "undo")

    def redo(self) -> bool:
        document = self.document
        if document is None:
            return False
        return self._restore(document.history.redo(), "redo")

    def _apply(self, result: EditResult, label: str) -> bool:
        document = self.document
        if document is None:
            return False
        if not result.changed:
            self._cursor = clamp_cursor(self.lines, result.cursor)
            return False
        with telemetry.span(
            f"buffer::{label}",
            logger_name="textedit_engine.buffer",
            component="buffer",
            metadata={"document": document.name},
        ):
            document.buffer = document.buffer.set_lines(result.lines)
            self._cursor = clamp_cursor(self.lines, result.cursor)
            document.history.commit(document.content)
        self._after_change(document, label)
        return True

    def _restore(self, content: Optional[str], label: str) -> bool:
        document = self.document
        if content is None or document is None:
            return False
        document.buffer = document.buffer.set_text(content)
        self._cursor = clamp_cursor(self.lines, self._cursor)
        self._after_change(document, label)
        return True

    def _after_change(self, document: Document, label: str) -> None:
        self._refresh_search()
        self.workspace.changed()
        self.bus.emit(BUFFER_CHANGED, {"document": document.name, "label": label})

    # -- search / replace ------------------------------------------------

    def set_query(self, query: str) -> None:
        self.search.update(self.lines, query=query)
        self.bus.emit(SEARCH_UPDATED, self.search.matches)

    def _refresh_search(self) -> None:
        if self.document is None:
            self.search.clear()
            return
        self.search.update(self.lines)

    def replace_all(
        self, replacement: str, *, query: Optional[str] = None
    ) -> Optional[ReplaceOutcome]:
        """Replace every match of the query (the active one by default)."""

        document = self.document
        if document is None:
            return None
        if query is not None and query != self.search.query:
            self.set_query(query)
        pattern = self.search.query
        outcome = replace_all(document.content, pattern, replacement)
        if not pattern:
            return outcome

        if outcome.status == "error":
            self._notify("Invalid search expression.", "error")
        elif outcome.status == "no_matches":
            self._notify("No matches found.", "info")
        else:
            if outcome.content != document.content:
                document.buffer = document.buffer.set_text(outcome.content)
                self._cursor = clamp_cursor(self.lines, self._cursor)
                document.history.commit(document.content)
                self._after_change(document, "replace_all")
            noun = "occurrence" if outcome.count == 1 else "occurrences"
            self._notify(f"Replaced {outcome.count} {noun}.", "success")
        telemetry.record_event(
            "search.replace_all",
            data={"status": outcome.status, "count": outcome.count},
            logger_name="textedit_engine.search",
        )
        return outcome

    # -- save / host surface ---------------------------------------------

    def save(self) -> Optional[SaveRequest]:
        """Hand the active document to ``file.save`` subscribers.

        Subscribers write synchronously; an ``OSError`` from any of them turns
        into an error notification and ``None`` instead of a success.
        """

        document = self.document
        if document is None:
            return None
        request = SaveRequest(filename=document.name, content=document.content)
        try:
            self.bus.emit(FILE_SAVE, request)
        except OSError as exc:
            telemetry.record_event(
                "document.save_failed",
                level="error",
                data={"name": document.name, "error": str(exc)},
                logger_name="textedit_engine.session",
            )
            self._notify(f"Failed to save file: {exc}", "error")
            return None
        self._notify("File saved.", "success")
        return request

    def mirror(self) -> Optional[SessionMirror]:
        document = self.document
        if document is None:
            return None
        lines = tuple(document.buffer.lines())
        return SessionMirror(
            name=document.name,
            lines=lines,
            cursor=self._cursor,
            matches=self.search.matches,
            query=self.search.query,
            content_offsets=content_start_offsets(lines, self.metadata_separator),
            version=document.buffer.version,
            can_undo=document.history.can_undo(),
            can_redo=document.history.can_redo(),
        )

    def _notify(self, message: str, level: NotificationLevel) -> None:
        self.bus.emit(NOTIFY, Notification(message=message, level=level))


__all__ = ["EditSession", "SessionState"]
