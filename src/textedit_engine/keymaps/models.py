"""Dataclasses describing key bindings and action metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

from textedit_engine.keys import normalize_modifiers


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single key press a binding listens for."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            key = self.key.lower() if len(self.key) == 1 else self.key
            return "+".join(self.modifiers) + f"+{key}"
        return self.key

    @classmethod
    def parse(cls, text: str) -> "KeyStroke":
        """Build a stroke from ``"ctrl+z"`` style text."""

        parts = [part for part in text.split("+") if part]
        if not parts:
            raise ValueError("key stroke cannot be empty")
        return cls(key=parts[-1], modifiers=tuple(parts[:-1]))


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: Callable[..., object]
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


def _normalize_tags(tags: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(tag.strip() for tag in tags if tag.strip()))


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a keystroke with an action."""

    id: str
    stroke: KeyStroke
    action_id: str
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        object.__setattr__(self, "tags", _normalize_tags(self.tags))

    @property
    def token(self) -> str:
        return self.stroke.token


__all__ = ["KeyStroke", "ActionRef", "Binding"]
