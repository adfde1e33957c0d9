"""Replace-all using the same matching rules as the search index."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal, Optional

from textedit_engine.runtime import telemetry

ReplaceStatus = Literal["replaced", "no_matches", "error"]


@dataclass(frozen=True, slots=True)
class ReplaceOutcome:
    content: str
    count: int
    error: Optional[str] = None

    @property
    def status(self) -> ReplaceStatus:
        if self.error is not None:
            return "error"
        if self.count == 0:
            return "no_matches"
        return "replaced"


def replace_all(content: str, query: str, replacement: str) -> ReplaceOutcome:
    """Substitute every occurrence of ``query`` in ``content`` with ``replacement``.

    ``count`` is measured on the original content. The replacement is
    inserted as-is: backslashes and group references are not expanded.
    """

    if not query:
        return ReplaceOutcome(content=content, count=0)

    with telemetry.span(
        "search::replace_all",
        logger_name="textedit_engine.search",
        component="search",
        metadata={"query_length": len(query)},
    ) as handle:
        try:
            pattern = re.compile(re.escape(query), re.IGNORECASE)
        except re.error as exc:
            handle.add_metadata("error", exc)
            return ReplaceOutcome(content=content, count=0, error=str(exc))

        count = sum(1 for match in pattern.finditer(content) if match.end() > match.start())
        handle.add_metadata("count", count)
        if count == 0:
            return ReplaceOutcome(content=content, count=0)

        updated = pattern.sub(lambda _match: replacement, content)
        return ReplaceOutcome(content=updated, count=count)


__all__ = ["ReplaceOutcome", "ReplaceStatus", "replace_all"]
