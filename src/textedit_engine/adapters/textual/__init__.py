"""Textual host adapter. ``app`` is imported lazily since it needs textual."""

from .controller import EditorUIHooks, TextualEditorAdapter, split_textual_key

__all__ = ["EditorUIHooks", "TextualEditorAdapter", "split_textual_key"]
