"""
Shared types for tokenization, directive tracking and rule execution.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .markup.events import EventSource


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """
    A position (or span) in a document.

    `line` and `col` are 1-based. `start_offset`/`end_offset` are 0-based
    character offsets into the whole document; `end_offset` is exclusive.
    """

    line: int = 1
    col: int = 1
    start_offset: int = 0
    end_offset: int = 0

    @property
    def position(self) -> tuple[int, int]:
        """(line, col) key used for document ordering."""
        return (self.line, self.col)

    def __str__(self) -> str:
        return f"{self.line}:{self.col}"


@dataclass(frozen=True)
class StartTagLocation(SourceLocation):
    """
    Location of a start tag, plus the location of each of its attributes.

    `values` locates each attribute value as written in the source (without
    its quotes) and `raw_values` holds that source text, entity references
    undecoded. Attributes written without a value appear in neither.
    """

    attrs: dict[str, SourceLocation] = field(default_factory=dict, compare=False)
    values: dict[str, SourceLocation] = field(default_factory=dict, compare=False)
    raw_values: dict[str, str] = field(default_factory=dict, compare=False)


DOCUMENT_START = SourceLocation()


@dataclass(frozen=True, slots=True)
class Directive:
    """A linter directive comment, e.g. `<!-- bplint-disable foo, bar -->`."""

    name: str
    args: tuple[str, ...]
    location: SourceLocation


@dataclass(frozen=True, slots=True)
class LintError:
    """A finding reported by a rule."""

    rule: str
    message: str
    location: SourceLocation

    def __str__(self) -> str:
        return f"{self.location} {self.message} ({self.rule})"


@dataclass(frozen=True, slots=True)
class RuleContext:
    """Passed unchanged to every rule for one document."""

    filename: str | None = None


Attributes = list[tuple[str, str]]

ReportCallback = Callable[[str, SourceLocation], None]

# A rule subscribes to events on the source and calls `report(message, location)`
# for every problem it finds. Rules never return findings directly.
Rule = Callable[[RuleContext, "EventSource", ReportCallback], None]


def sort_by_location(errors: list[LintError]) -> list[LintError]:
    """
    Sort findings by line, then column.

    `sorted()` is stable, so findings sharing a location keep report order.
    """
    return sorted(errors, key=lambda error: error.location.position)
