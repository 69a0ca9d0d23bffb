"""
Linter directive comments.

    <!-- bplint-disable no-auto-binding, one-component -->
    <!-- bplint-enable no-auto-binding -->

Arguments are comma-delimited only; whitespace around commas and at the
comment edges is insignificant.
"""

from __future__ import annotations

import re

from ..types import Directive
from ..types import SourceLocation

DISABLE = "bplint-disable"
ENABLE = "bplint-enable"

_MATCH_DIRECTIVE_COMMENT = re.compile(
    rf"^\s*({re.escape(DISABLE)}|{re.escape(ENABLE)})(?:\s+(.*?))?\s*$",
    re.DOTALL,
)
_SPLIT_DIRECTIVE_ARGS = re.compile(r"\s*(?:,\s*)+")


def parse_directive_args(text: str) -> tuple[str, ...]:
    """
    Split a directive's argument string on runs of commas.

    `"a, b,,c"` -> `("a", "b", "c")`; `"a b"` -> `("a b",)`.
    """
    return tuple(
        arg for arg in (part.strip() for part in _SPLIT_DIRECTIVE_ARGS.split(text)) if arg
    )


def parse_directive_comment(
    text: str, location: SourceLocation
) -> Directive | None:
    """Return the directive in a comment's text, or None if it isn't one."""
    match = _MATCH_DIRECTIVE_COMMENT.match(text)
    if not match:
        return None
    name, args = match.group(1), match.group(2) or ""
    return Directive(name=name, args=parse_directive_args(args), location=location)
