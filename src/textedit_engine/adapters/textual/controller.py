"""Hook-based adapter that wires an EditSession into a host UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from textedit_engine.buffer import CharBox, SessionMirror, display_column
from textedit_engine.keys import KeyInput, KeyResult
from textedit_engine.search import ReplaceOutcome
from textedit_engine.session import EditSession, Notification
from textedit_engine.session.events import NOTIFY, SESSION_EVENTS

# Textual key names that differ from the browser-style names the engine binds.
TEXTUAL_KEY_NAMES: Dict[str, str] = {
    "up": "ArrowUp",
    "down": "ArrowDown",
    "left": "ArrowLeft",
    "right": "ArrowRight",
    "home": "Home",
    "end": "End",
    "backspace": "Backspace",
    "enter": "Enter",
    "tab": "Tab",
    "escape": "Escape",
}


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class EditorUIHooks:
    """Callbacks invoked by the adapter to update host widgets."""

    update_view: Callable[[Optional[SessionMirror]], None]
    update_status: Callable[[str], None] = _noop
    notify: Callable[[Notification], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


def split_textual_key(key: str) -> tuple[str, tuple[str, ...]]:
    """Turn Textual's ``"ctrl+z"`` style names into a key and its modifiers."""

    parts = key.split("+")
    if len(parts) > 1 and parts[-1]:
        name, modifiers = parts[-1], tuple(parts[:-1])
    else:
        name, modifiers = key, ()
    return TEXTUAL_KEY_NAMES.get(name, name), modifiers


class TextualEditorAdapter:
    """Bridges an EditSession and its bus to a host-friendly surface."""

    def __init__(self, session: EditSession, hooks: EditorUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._subscriptions: List[Tuple[str, Callable[[object], None]]] = []
        self._subscribe_events()
        self._refresh_view()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> KeyResult:
        name, parsed = split_textual_key(key)
        key_input = KeyInput(
            key=name, modifiers=tuple(parsed) + tuple(modifiers), text=text
        )
        self._log_state("key ->", key=key_input.token, text=text)
        result = self.session.handle_key(key_input)
        self._after_result(result)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            changed=result.changed,
        )
        return result

    def handle_click(self, line: int, x: float, boxes: Sequence[CharBox]) -> None:
        self.session.click(line, x, boxes)
        self._refresh_view()

    def set_query(self, query: str) -> None:
        self.session.set_query(query)
        self.hooks.update_status(f"{self.session.search.count} results")
        self._refresh_view()

    def replace_all(self, replacement: str) -> Optional[ReplaceOutcome]:
        outcome = self.session.replace_all(replacement)
        self._refresh_view()
        return outcome

    def detach(self) -> None:
        """Stop relaying session events to the hooks."""

        for event, callback in self._subscriptions:
            self.session.bus.unsubscribe(event, callback)
        self._subscriptions.clear()

    def position_label(self) -> str:
        """``Ln``/``Col`` text for the status line; no column inside a metadata prefix."""

        row, col = self.session.cursor
        line = self.session.lines[row]
        column = display_column(line, col, self.session.metadata_separator)
        if column is None:
            return f"Ln {row + 1}"
        return f"Ln {row + 1}, Col {column}"

    def _after_result(self, result: KeyResult) -> None:
        status = result.message or result.status
        if status:
            self.hooks.update_status(status)
        self._refresh_view()

    def _subscribe_events(self) -> None:
        for event in SESSION_EVENTS:
            callback = lambda payload, name=event: self._handle_event(name, payload)
            self.session.bus.subscribe(event, callback)
            self._subscriptions.append((event, callback))

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name)
        self.hooks.handle_event(name, payload)
        if name == NOTIFY and isinstance(payload, Notification):
            self.hooks.notify(payload)

    def _refresh_view(self) -> None:
        self.hooks.update_view(self.session.mirror())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "state": self.session.state.value,
            "cursor": self.session.cursor,
            "query": self.session.query,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["EditorUIHooks", "TextualEditorAdapter", "split_textual_key"]
