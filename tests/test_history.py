from textedit_engine.buffer import EditHistory


def make_history(*contents: str) -> EditHistory:
    history = EditHistory(contents[0])
    for content in contents[1:]:
        history.commit(content)
    return history


def test_reset_leaves_single_entry() -> None:
    history = make_history("a", "ab", "abc")

    history.reset("x")

    assert len(history) == 1
    assert history.index == 0
    assert history.current == "x"
    assert history.undo() is None


def test_commit_is_idempotent_for_same_content() -> None:
    history = EditHistory("a")

    assert history.commit("ab") is True
    assert history.commit("ab") is False

    assert len(history) == 2


def test_undo_then_redo_restores_content() -> None:
    history = make_history("a", "ab", "abc")

    assert history.undo() == "ab"
    assert history.redo() == "abc"
    assert history.current == "abc"


def test_undo_at_start_returns_none() -> None:
    history = make_history("a", "ab")

    assert history.undo() == "a"
    assert history.undo() is None
    assert history.index == 0


def test_redo_at_end_returns_none() -> None:
    history = make_history("a", "ab")

    assert history.redo() is None
    assert history.index == 1


def test_commit_after_undo_discards_redo_branch() -> None:
    history = make_history("a", "ab", "abc")
    history.undo()

    history.commit("abX")

    assert history.redo() is None
    assert history.can_redo() is False
    assert history.undo() == "ab"


def test_commit_matching_current_after_undo_keeps_redo() -> None:
    history = make_history("a", "ab")
    history.undo()

    assert history.commit("a") is False
    assert history.redo() == "ab"


def test_empty_history_first_commit_becomes_entry_zero() -> None:
    history = EditHistory()
    assert history.current is None

    history.commit("start")

    assert history.index == 0
    assert history.can_undo() is False
