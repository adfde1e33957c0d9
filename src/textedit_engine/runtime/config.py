"""Environment-driven settings shared by the session and host adapters."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .telemetry import env_flag, env_value

DEFAULT_STATE_FILE = "~/.textedit_engine/state.json"
DEFAULT_METADATA_SEPARATOR = ";"


@dataclass(frozen=True, slots=True)
class EditorConfig:
    state_file: Path = Path(os.path.expanduser(DEFAULT_STATE_FILE))
    metadata_separator: str = DEFAULT_METADATA_SEPARATOR
    autosave: bool = True

    def __post_init__(self) -> None:
        if not self.metadata_separator:
            raise ValueError("metadata_separator cannot be empty")

    @classmethod
    def from_env(cls) -> "EditorConfig":
        """Read ``TEXTEDIT_ENGINE_STATE_FILE``, ``..._METADATA_SEPARATOR``, ``..._AUTOSAVE``."""

        raw_path = env_value("STATE_FILE") or DEFAULT_STATE_FILE
        return cls(
            state_file=Path(os.path.expanduser(raw_path)),
            metadata_separator=env_value("METADATA_SEPARATOR")
            or DEFAULT_METADATA_SEPARATOR,
            autosave=env_flag("AUTOSAVE", True),
        )


__all__ = ["EditorConfig", "DEFAULT_STATE_FILE", "DEFAULT_METADATA_SEPARATOR"]
