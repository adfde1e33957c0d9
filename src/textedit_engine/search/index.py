"""Literal, case-insensitive search over a line buffer."""

from __future__ import annotations

import re
from typing import List, Optional, Pattern, Sequence, Tuple

from textedit_engine.buffer.sync import MatchSpan
from textedit_engine.runtime import telemetry

_logger_name = "textedit_engine.search"


def compile_query(query: str) -> Optional[Pattern[str]]:
    """Compile ``query`` as an escaped literal; ``None`` means search is inactive."""

    if not query:
        return None
    try:
        return re.compile(re.escape(query), re.IGNORECASE)
    except re.error as exc:
        telemetry.record_event(
            "search.compile_failed",
            level="debug",
            data={"query": query, "error": str(exc)},
            logger_name=_logger_name,
        )
        return None


def scan_lines(pattern: Pattern[str], lines: Sequence[str]) -> List[MatchSpan]:
    results: List[MatchSpan] = []
    for line_index, line in enumerate(lines):
        for match in pattern.finditer(line):
            if match.end() == match.start():
                continue
            results.append(MatchSpan(line_index, match.start(), match.end()))
    return results


def find_matches(lines: Sequence[str], query: str) -> List[MatchSpan]:
    pattern = compile_query(query)
    if pattern is None:
        return []
    return scan_lines(pattern, lines)


class SearchIndex:
    """Active query plus the match set derived from the last buffer it saw.

    Every ``update`` recomputes from scratch; there is no incremental
    patching of spans.
    """

    def __init__(self, query: str = "") -> None:
        self._query = query
        self._matches: Tuple[MatchSpan, ...] = ()

    @property
    def query(self) -> str:
        return self._query

    @property
    def matches(self) -> Tuple[MatchSpan, ...]:
        return self._matches

    @property
    def count(self) -> int:
        return len(self._matches)

    @property
    def active(self) -> bool:
        return bool(self._query)

    def update(
        self, lines: Sequence[str], *, query: Optional[str] = None
    ) -> Tuple[MatchSpan, ...]:
        if query is not None:
            self._query = query
        if not self._query:
            self._matches = ()
            return self._matches
        with telemetry.span(
            "search::find",
            logger_name=_logger_name,
            component="search",
            metadata={"query_length": len(self._query), "lines": len(lines)},
        ) as handle:
            self._matches = tuple(find_matches(lines, self._query))
            handle.add_metadata("matches", len(self._matches))
        return self._matches

    def clear(self) -> None:
        self._matches = ()

    def is_highlighted(self, line: int, column: int) -> bool:
        if not self._query:
            return False
        return any(span.contains(line, column) for span in self._matches)


__all__ = ["SearchIndex", "compile_query", "find_matches", "scan_lines"]
