"""
Scoped linter directive tracking.

`ScopedDirectiveStack` follows the tokenizer's `linter_directive`,
`enter_scope` and `leave_scope` events while a document is scanned once,
forward. Each frame holds the directives seen in one open element; the bottom
frame is the document root.

Consider:

    1| <foo>
    2|   <!-- bplint-disable grumpy, sleepy -->
    3|   <bar>
    4|     <!-- bplint-disable sneezy -->
    5|     Line five
    6|   </bar>
    7|   Line seven
    8| </foo>

After line 4 the frames are (bottom first):

    []                                      # root
    [bplint-disable (grumpy, sleepy) @2:3]  # <foo>
    [bplint-disable (sneezy,) @4:5]         # <bar>

so `directive_args("bplint-disable")` is `["grumpy", "sleepy", "sneezy"]`.
Leaving `<bar>` on line 6 pops its frame, and `sneezy` is no longer in effect.

Snapshots:
- after every directive and every scope exit, an immutable `Snapshot` of all
  frames is recorded with the event's location (entering a scope changes
  nothing that is in effect, so it records nothing)
- `snapshot_at_location()` answers "what was in effect at X" for any location
  already scanned, which is how findings are filtered after the pass ends
"""

from __future__ import annotations

import bisect
from abc import ABC
from abc import abstractmethod
from dataclasses import dataclass
from dataclasses import field
from typing import Iterable
from typing import Iterator
from typing import TYPE_CHECKING

from .types import DOCUMENT_START
from .types import Directive
from .types import SourceLocation

if TYPE_CHECKING:
    from .markup.events import EventSource


class ScopeUnderflowError(RuntimeError):
    """Raised when a scope exit would pop the document root frame."""


class _DirectiveQueries(ABC):
    """Read-only queries shared by the live stack and its snapshots."""

    __slots__ = ()

    @abstractmethod
    def _iter_frames(self) -> Iterable[Iterable[Directive]]:
        """Directive lists of each frame, bottom frame first."""

    def directives(self, *names: str) -> list[Directive]:
        """
        Directives in effect, bottom frame first, in encounter order.

        If `names` are given, only directives with those names are returned.
        """
        wanted = set(names)
        return [
            directive
            for frame in self._iter_frames()
            for directive in frame
            if not wanted or directive.name in wanted
        ]

    def directive_args(
        self, name: str, flatten: bool = True
    ) -> list[str] | list[tuple[str, ...]]:
        """
        Arguments of every `name` directive in effect, in encounter order.

        With `flatten=False` each directive's argument tuple is returned
        separately; otherwise they are concatenated into one list.
        """
        arg_lists = [directive.args for directive in self.directives(name)]
        if not flatten:
            return arg_lists
        return [arg for args in arg_lists for arg in args]


@dataclass(frozen=True, slots=True)
class Snapshot(_DirectiveQueries):
    """The full directive state recorded at one location."""

    location: SourceLocation
    frames: tuple[tuple[Directive, ...], ...]

    def _iter_frames(self) -> Iterable[Iterable[Directive]]:
        return self.frames

    @property
    def depth(self) -> int:
        return len(self.frames)


@dataclass(slots=True)
class ScopeFrame:
    """Directives encountered in one open scope. Append-only."""

    directives: list[Directive] = field(default_factory=list)

    def append(self, directive: Directive) -> None:
        self.directives.append(directive)

    def freeze(self) -> tuple[Directive, ...]:
        return tuple(self.directives)


class ScopedDirectiveStack(_DirectiveQueries):
    """
    A stack of `ScopeFrame`s plus the timeline of snapshots recorded so far.

    One instance is created per lint pass. It trusts its event source: scope
    exits are expected to balance scope entries.
    """

    def __init__(self) -> None:
        self._frames: list[ScopeFrame] = [ScopeFrame()]
        self._timeline: list[Snapshot] = []
        self._positions: list[tuple[int, int]] = []
        # Seeded so every location in the document has a snapshot.
        self._record(DOCUMENT_START)

    def __repr__(self) -> str:
        return (
            f"<ScopedDirectiveStack depth={self.depth} "
            f"snapshots={len(self._timeline)}>"
        )

    @property
    def depth(self) -> int:
        return len(self._frames)

    @property
    def frames(self) -> tuple[ScopeFrame, ...]:
        return tuple(self._frames)

    @property
    def timeline(self) -> tuple[Snapshot, ...]:
        return tuple(self._timeline)

    def peek(self) -> ScopeFrame:
        """The frame on top of the stack."""
        return self._frames[-1]

    def _iter_frames(self) -> Iterator[Iterable[Directive]]:
        for frame in self._frames:
            yield frame.directives

    def listen_to(self, source: EventSource) -> None:
        source.on("linter_directive", self.on_directive)
        source.on("enter_scope", self.on_enter_scope)
        source.on("leave_scope", self.on_leave_scope)

    def on_directive(
        self, name: str, args: Iterable[str], location: SourceLocation
    ) -> None:
        directive = Directive(name=name, args=tuple(args), location=location)
        self.peek().append(directive)
        self._record(location)

    def on_enter_scope(self, location: SourceLocation | None = None) -> None:
        self._frames.append(ScopeFrame())

    def on_leave_scope(self, location: SourceLocation) -> None:
        if len(self._frames) == 1:
            raise ScopeUnderflowError(
                f"Cannot leave the document root scope (at {location})"
            )
        self._frames.pop()
        self._record(location)

    def snapshot(self) -> tuple[tuple[Directive, ...], ...]:
        """An immutable copy of the current frames."""
        return tuple(frame.freeze() for frame in self._frames)

    def _record(self, location: SourceLocation) -> None:
        self._timeline.append(Snapshot(location=location, frames=self.snapshot()))
        self._positions.append(location.position)

    def snapshot_at_location(self, location: SourceLocation) -> Snapshot | None:
        """
        The latest snapshot recorded at or before `location`.

        Locations are ordered by line, then column. Snapshots sharing a
        position are ordered by recording order, so the last one wins.
        """
        index = bisect.bisect_right(self._positions, location.position)
        if index == 0:
            return None
        return self._timeline[index - 1]
