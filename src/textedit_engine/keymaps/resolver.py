"""Keystroke resolution with telemetry instrumentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from textedit_engine.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


class KeymapResolver:
    """Resolves key tokens against a registry, caching per registry revision."""

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._revision = -1
        self._cache: Dict[str, ResolutionMatch] = {}

    @property
    def registry(self) -> KeymapRegistry:
        return self._registry

    def resolve(self, token: str) -> Optional[ResolutionMatch]:
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"token": token},
        ) as handle:
            match = self._index().get(token)
            handle.add_metadata("status", "match" if match else "miss")
            if match:
                handle.add_metadata("binding_id", match.binding.id)
            return match

    def _index(self) -> Dict[str, ResolutionMatch]:
        revision = self._registry.revision()
        if revision == self._revision:
            return self._cache
        index: Dict[str, ResolutionMatch] = {}
        for binding in self._registry.iter_bindings():
            action = self._registry.get_action(binding.action_id)
            index[binding.token] = ResolutionMatch(binding=binding, action=action)
        self._cache = index
        self._revision = revision
        return index


__all__ = ["KeymapResolver", "ResolutionMatch"]
