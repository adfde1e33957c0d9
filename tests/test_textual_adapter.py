from __future__ import annotations

from typing import List, Optional

from textedit_engine.adapters.textual import (
    EditorUIHooks,
    TextualEditorAdapter,
    split_textual_key,
)
from textedit_engine.buffer import CharBox, SessionMirror
from textedit_engine.session import EditSession, MemoryStore, Notification, Workspace


def make_session(content: Optional[str] = "ab\ncd") -> EditSession:
    session = EditSession(Workspace(store=MemoryStore()))
    if content is not None:
        session.load_document("doc.txt", content)
    return session


def test_split_textual_key_maps_names() -> None:
    assert split_textual_key("up") == ("ArrowUp", ())
    assert split_textual_key("ctrl+z") == ("z", ("ctrl",))
    assert split_textual_key("a") == ("a", ())
    assert split_textual_key("shift+home") == ("Home", ("shift",))


def test_adapter_updates_view_and_status() -> None:
    session = make_session()
    views: List[Optional[SessionMirror]] = []
    statuses: List[str] = []
    hooks = EditorUIHooks(update_view=views.append, update_status=statuses.append)
    adapter = TextualEditorAdapter(session, hooks)

    adapter.handle_textual_key("right")
    adapter.handle_textual_key("x", text="x")

    assert views[-1] is not None
    assert views[-1].text == "axb\ncd"
    assert views[-1].cursor == (0, 2)
    assert "cursor_move" in statuses
    assert statuses[-1] == "insert"


def test_adapter_undo_accelerator() -> None:
    session = make_session("")
    views: List[Optional[SessionMirror]] = []
    adapter = TextualEditorAdapter(session, EditorUIHooks(update_view=views.append))

    adapter.handle_textual_key("q", text="q")
    result = adapter.handle_textual_key("ctrl+z")

    assert result.status == "undo"
    assert views[-1] is not None and views[-1].text == ""


def test_adapter_idle_session_renders_nothing() -> None:
    session = make_session(None)
    views: List[Optional[SessionMirror]] = []

    TextualEditorAdapter(session, EditorUIHooks(update_view=views.append))

    assert views == [None]


def test_adapter_relays_notifications_and_events() -> None:
    session = make_session("foo foo")
    notes: List[Notification] = []
    events: List[str] = []
    hooks = EditorUIHooks(
        update_view=lambda mirror: None,
        notify=notes.append,
        handle_event=lambda name, payload: events.append(name),
    )
    adapter = TextualEditorAdapter(session, hooks)

    adapter.set_query("foo")
    outcome = adapter.replace_all("bar")

    assert outcome is not None and outcome.count == 2
    assert notes == [Notification("Replaced 2 occurrences.", "success")]
    assert "search.updated" in events
    assert "buffer.changed" in events


def test_adapter_save_request_event() -> None:
    session = make_session("keep")
    saved: List[object] = []
    hooks = EditorUIHooks(
        update_view=lambda mirror: None,
        handle_event=lambda name, payload: saved.append(payload)
        if name == "file.save"
        else None,
    )
    adapter = TextualEditorAdapter(session, hooks)

    adapter.handle_textual_key("ctrl+s")

    assert len(saved) == 1
    assert getattr(saved[0], "content") == "keep"


def test_adapter_click_moves_cursor() -> None:
    session = make_session()
    views: List[Optional[SessionMirror]] = []
    adapter = TextualEditorAdapter(session, EditorUIHooks(update_view=views.append))

    adapter.handle_click(1, 100.0, [CharBox(0, 10), CharBox(10, 10)])

    assert views[-1] is not None and views[-1].cursor == (1, 2)


def test_adapter_emits_log_lines() -> None:
    session = make_session()
    logs: List[str] = []
    hooks = EditorUIHooks(update_view=lambda mirror: None, log=logs.append)
    adapter = TextualEditorAdapter(session, hooks)

    adapter.handle_textual_key("left")

    assert any(line.startswith("key ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)


def test_position_label_counts_from_content_start() -> None:
    session = make_session("1;2;3;hello\nplain")
    adapter = TextualEditorAdapter(session, EditorUIHooks(update_view=lambda mirror: None))

    assert adapter.position_label() == "Ln 1"

    session.set_cursor(0, 6)
    assert adapter.position_label() == "Ln 1, Col 1"

    session.set_cursor(1, 2)
    assert adapter.position_label() == "Ln 2, Col 3"


def test_detach_stops_relaying_events() -> None:
    session = make_session("foo")
    events: List[str] = []
    hooks = EditorUIHooks(
        update_view=lambda mirror: None,
        handle_event=lambda name, payload: events.append(name),
    )
    adapter = TextualEditorAdapter(session, hooks)

    adapter.detach()
    session.set_query("foo")
    session.save()

    assert events == []
