"""Search highlighting and replace-all."""

from .index import SearchIndex, compile_query, find_matches, scan_lines
from .replace import ReplaceOutcome, ReplaceStatus, replace_all

__all__ = [
    "SearchIndex",
    "compile_query",
    "find_matches",
    "scan_lines",
    "ReplaceOutcome",
    "ReplaceStatus",
    "replace_all",
]
