"""Normalized key events and dispatch results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

MODIFIER_KEYS = frozenset({"Meta", "Control", "Alt", "Shift"})
# Modifiers that turn a key into an accelerator. Shift is already reflected
# in the key value ("A" vs "a") and never blocks insertion.
ACCELERATOR_MODIFIERS = frozenset({"ctrl", "meta", "alt"})


def normalize_modifiers(modifiers: Iterable[str]) -> Tuple[str, ...]:
    values = (str(m).strip().lower() for m in modifiers)
    aliases = {"control": "ctrl", "cmd": "meta", "command": "meta", "option": "alt"}
    cleaned = (aliases.get(value, value) for value in values if value)
    return tuple(sorted(dict.fromkeys(m for m in cleaned if m != "shift")))


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Key press as reported by a host, using browser-style key names."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "modifiers", normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        key = self.key.lower() if len(self.key) == 1 and self.modifiers else self.key
        if self.modifiers:
            return "+".join(self.modifiers) + f"+{key}"
        return key

    @property
    def is_modifier_key(self) -> bool:
        return self.key in MODIFIER_KEYS

    @property
    def printable(self) -> Optional[str]:
        """The character to insert, or ``None`` for control keys and accelerators."""

        if ACCELERATOR_MODIFIERS.intersection(self.modifiers):
            return None
        char = self.text if self.text is not None else self.key
        if len(char) != 1 or not char.isprintable():
            return None
        return char


@dataclass(frozen=True, slots=True)
class KeyResult:
    """Outcome of ``EditSession.handle_key``.

    ``prevent_default`` tells the host to suppress its own handling of the
    key so the engine stays the only source of truth for the buffer.
    """

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    changed: bool = False
    prevent_default: bool = True


__all__ = [
    "ACCELERATOR_MODIFIERS",
    "KeyInput",
    "KeyResult",
    "MODIFIER_KEYS",
    "normalize_modifiers",
]
