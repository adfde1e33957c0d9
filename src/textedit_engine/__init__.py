"""UI-agnostic plain-text editing engine."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "keymaps",
    "keys",
    "runtime",
    "search",
    "session",
]

__version__ = "0.1.0"
