from pathlib import Path

import pytest

from textedit_engine.runtime import EditorConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("STATE_FILE", "METADATA_SEPARATOR", "AUTOSAVE"):
        monkeypatch.delenv(f"TEXTEDIT_ENGINE_{name}", raising=False)

    config = EditorConfig.from_env()

    assert config.metadata_separator == ";"
    assert config.autosave is True
    assert config.state_file.name == "state.json"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TEXTEDIT_ENGINE_STATE_FILE", str(tmp_path / "s.json"))
    monkeypatch.setenv("TEXTEDIT_ENGINE_METADATA_SEPARATOR", "|")
    monkeypatch.setenv("TEXTEDIT_ENGINE_AUTOSAVE", "off")

    config = EditorConfig.from_env()

    assert config.state_file == tmp_path / "s.json"
    assert config.metadata_separator == "|"
    assert config.autosave is False


def test_empty_separator_rejected() -> None:
    with pytest.raises(ValueError):
        EditorConfig(metadata_separator="")
