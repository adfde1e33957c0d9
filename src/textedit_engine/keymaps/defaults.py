"""Built-in bindings: navigation, editing keys and the ctrl/meta accelerators."""

from __future__ import annotations

from typing import Iterable, Sequence

from textedit_engine.actions import cursor as cursor_actions
from textedit_engine.actions import edit as edit_actions
from textedit_engine.actions import file as file_actions

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(id="cursor.up", handler=cursor_actions.cursor_up, description="Move up"),
    ActionRef(
        id="cursor.down", handler=cursor_actions.cursor_down, description="Move down"
    ),
    ActionRef(
        id="cursor.left", handler=cursor_actions.cursor_left, description="Move left"
    ),
    ActionRef(
        id="cursor.right", handler=cursor_actions.cursor_right, description="Move right"
    ),
    ActionRef(
        id="cursor.home",
        handler=cursor_actions.cursor_home,
        description="Move to line start",
    ),
    ActionRef(
        id="cursor.end", handler=cursor_actions.cursor_end, description="Move to line end"
    ),
    ActionRef(
        id="edit.delete_backward",
        handler=edit_actions.delete_backward,
        description="Delete the character before the cursor",
    ),
    ActionRef(
        id="edit.newline",
        handler=edit_actions.insert_newline,
        description="Split the line at the cursor",
    ),
    ActionRef(id="history.undo", handler=edit_actions.undo, description="Undo"),
    ActionRef(id="history.redo", handler=edit_actions.redo, description="Redo"),
    ActionRef(
        id="file.save",
        handler=file_actions.save_file,
        description="Save the current document",
    ),
)


def _binding(binding_id: str, stroke: str, action_id: str, *tags: str) -> Binding:
    return Binding(
        id=binding_id,
        stroke=KeyStroke.parse(stroke),
        action_id=action_id,
        tags=tags,
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _binding("nav.up", "ArrowUp", "cursor.up", "navigation"),
    _binding("nav.down", "ArrowDown", "cursor.down", "navigation"),
    _binding("nav.left", "ArrowLeft", "cursor.left", "navigation"),
    _binding("nav.right", "ArrowRight", "cursor.right", "navigation"),
    _binding("nav.home", "Home", "cursor.home", "navigation"),
    _binding("nav.end", "End", "cursor.end", "navigation"),
    _binding("edit.backspace", "Backspace", "edit.delete_backward", "edit"),
    _binding("edit.enter", "Enter", "edit.newline", "edit"),
    _binding("history.undo.ctrl", "ctrl+z", "history.undo", "accelerator"),
    _binding("history.undo.meta", "meta+z", "history.undo", "accelerator"),
    _binding("history.redo.ctrl", "ctrl+y", "history.redo", "accelerator"),
    _binding("history.redo.meta", "meta+y", "history.redo", "accelerator"),
    _binding("file.save.ctrl", "ctrl+s", "file.save", "accelerator"),
    _binding("file.save.meta", "meta+s", "file.save", "accelerator"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in actions, then the selected default bindings."""

    include = set(include_bindings) if include_bindings else None
    exclude = set(exclude_bindings or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if include is not None and binding.id not in include:
            continue
        if binding.id in exclude:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=True)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
