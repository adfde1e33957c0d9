"""Telemetry and configuration shared across the engine."""

from . import telemetry
from .config import EditorConfig

__all__ = ["telemetry", "EditorConfig"]
