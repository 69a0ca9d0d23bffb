from __future__ import annotations

from polymer_lint.types import LintError
from polymer_lint.types import SourceLocation


def loc(line: int, col: int, start: int = 0, end: int | None = None) -> SourceLocation:
    return SourceLocation(
        line=line, col=col, start_offset=start, end_offset=start if end is None else end
    )


def summarize(errors: list[LintError]) -> list[tuple[int, int, str]]:
    return [(e.location.line, e.location.col, e.message) for e in errors]


def span(location: SourceLocation) -> tuple[int, int, int, int]:
    return (location.line, location.col, location.start_offset, location.end_offset)
