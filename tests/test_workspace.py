import json
from pathlib import Path

import pytest

from textedit_engine.session import (
    DocumentRecord,
    JsonFileStore,
    MemoryStore,
    Workspace,
    WorkspaceSnapshot,
    WorkspaceStateError,
    decode_snapshot,
)


def make_payload(*names: str, index: object = 0) -> dict:
    return {
        "openedFiles": [{"name": name, "content": f"{name} body"} for name in names],
        "currentFileIndex": index,
    }


def test_decode_snapshot_reads_documents_and_index() -> None:
    snapshot = decode_snapshot(make_payload("a.txt", "b.txt", index=1))

    assert snapshot.documents == (
        DocumentRecord("a.txt", "a.txt body"),
        DocumentRecord("b.txt", "b.txt body"),
    )
    assert snapshot.active_index == 1


def test_decode_snapshot_accepts_string_index() -> None:
    assert decode_snapshot(make_payload("a", index="0")).active_index == 0


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"openedFiles": "nope"},
        {"openedFiles": [{"name": 1, "content": "x"}]},
        {"openedFiles": [["a", "b"]]},
        {"openedFiles": [], "currentFileIndex": "one"},
        {"openedFiles": [], "currentFileIndex": True},
    ],
)
def test_decode_snapshot_rejects_malformed_state(payload) -> None:
    with pytest.raises(WorkspaceStateError):
        decode_snapshot(payload)


def test_restore_from_malformed_store_falls_back_to_empty() -> None:
    workspace = Workspace.restore(MemoryStore("{not json"))

    assert len(workspace) == 0
    assert workspace.active is None


def test_restore_clamps_out_of_range_index() -> None:
    store = MemoryStore(json.dumps(make_payload("a", "b", index=7)))

    workspace = Workspace.restore(store)

    assert workspace.active_index == 1
    assert workspace.active.name == "b"


def test_every_mutation_is_persisted() -> None:
    store = MemoryStore()
    workspace = Workspace(store=store)

    workspace.open("a.txt", "alpha")
    workspace.open("b.txt", "beta")
    workspace.select(0)

    assert store.saves == 3
    saved = json.loads(store.raw)
    assert saved == {
        "openedFiles": [
            {"name": "a.txt", "content": "alpha"},
            {"name": "b.txt", "content": "beta"},
        ],
        "currentFileIndex": 0,
    }


def test_autosave_disabled_skips_store() -> None:
    store = MemoryStore()
    workspace = Workspace(store=store, autosave=False)

    workspace.open("a.txt", "alpha")

    assert store.saves == 0
    assert workspace.persist() is True
    assert store.saves == 1


def test_close_activates_previous_document() -> None:
    workspace = Workspace()
    for name in ("a", "b", "c"):
        workspace.open(name, "")

    workspace.select(1)
    active = workspace.close()

    assert active is not None and active.name == "a"
    assert [doc.name for doc in workspace] == ["a", "c"]


def test_close_first_document_keeps_index_zero() -> None:
    workspace = Workspace()
    workspace.open("a", "")
    workspace.open("b", "")

    active = workspace.close(0)

    assert active is not None and active.name == "b"
    assert workspace.active_index == 0


def test_close_last_document_leaves_workspace_empty() -> None:
    workspace = Workspace()
    workspace.open("only", "")

    assert workspace.close() is None
    assert workspace.active is None
    assert workspace.close() is None


def test_select_out_of_range_raises() -> None:
    workspace = Workspace()
    workspace.open("a", "")

    with pytest.raises(IndexError):
        workspace.select(3)


def test_duplicate_names_are_allowed() -> None:
    workspace = Workspace()
    workspace.open("same.txt", "one")
    workspace.open("same.txt", "two")

    assert [doc.content for doc in workspace] == ["one", "two"]


def test_json_file_store_round_trip(tmp_path: Path) -> None:
    store = JsonFileStore(tmp_path / "nested" / "state.json")
    snapshot = WorkspaceSnapshot(
        documents=(DocumentRecord("notes.txt", "línea 1\nlínea 2"),),
        active_index=0,
    )

    assert store.save(snapshot) is True

    assert store.load() == snapshot


def test_json_file_store_missing_file_is_empty(tmp_path: Path) -> None:
    assert JsonFileStore(tmp_path / "absent.json").load() == WorkspaceSnapshot()


def test_json_file_store_malformed_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    path.write_text("[1, 2", encoding="utf-8")

    with pytest.raises(WorkspaceStateError):
        JsonFileStore(path).load()


def test_json_file_store_save_failure_returns_false(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    store = JsonFileStore(blocker / "state.json")

    assert store.save(WorkspaceSnapshot()) is False
