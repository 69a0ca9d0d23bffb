"""
Directive-based suppression of findings.

Runs after a lint pass: each finding is checked against the directives that
were in effect at its location.
"""

from __future__ import annotations

from typing import Iterable

from ..directive_stack import ScopedDirectiveStack
from ..markup.directives import DISABLE
from ..markup.directives import ENABLE
from ..types import Directive
from ..types import LintError


def is_rule_disabled(directives: Iterable[Directive], rule: str) -> bool:
    """
    Replay directives in order and report whether `rule` ends up disabled.

    `bplint-disable` with no arguments disables every rule. `bplint-enable`
    only re-enables the rules it names; a bare `bplint-enable` has no effect.
    """
    disabled = False
    for directive in directives:
        if directive.name == DISABLE:
            if not directive.args or rule in directive.args:
                disabled = True
        elif directive.name == ENABLE:
            if rule in directive.args:
                disabled = False
    return disabled


def filter_errors(
    errors: Iterable[LintError], stack: ScopedDirectiveStack
) -> list[LintError]:
    """Drop findings whose rule was disabled at the finding's location."""
    kept: list[LintError] = []
    for error in errors:
        snapshot = stack.snapshot_at_location(error.location)
        if snapshot is not None and is_rule_disabled(
            snapshot.directives(DISABLE, ENABLE), error.rule
        ):
            continue
        kept.append(error)
    return kept
