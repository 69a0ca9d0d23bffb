from __future__ import annotations

import pytest

from polymer_lint.directive_stack import ScopedDirectiveStack
from polymer_lint.linting.suppression import filter_errors
from polymer_lint.linting.suppression import is_rule_disabled
from polymer_lint.types import Directive
from polymer_lint.types import LintError

from ._helpers import loc
from ._helpers import summarize


def error(rule: str, line: int, col: int) -> LintError:
    return LintError(rule=rule, message=f"{rule} at {line}:{col}", location=loc(line, col))


def test_disable_drops_only_the_named_rule() -> None:
    stack = ScopedDirectiveStack()
    stack.on_directive("bplint-disable", ["foo"], loc(1, 1))

    errors = [error("foo", 1, 1), error("bar", 1, 1), error("foo", 2, 3)]

    assert filter_errors(errors, stack) == [error("bar", 1, 1)]


def test_enable_in_nested_scope_lasts_until_scope_ends() -> None:
    stack = ScopedDirectiveStack()
    stack.on_directive("bplint-disable", ["foo"], loc(1, 1))
    stack.on_enter_scope(loc(2, 1))
    stack.on_directive("bplint-enable", ["foo"], loc(3, 1))
    stack.on_leave_scope(loc(5, 1))

    inside = error("foo", 4, 1)
    after = error("foo", 6, 1)

    assert filter_errors([inside, after], stack) == [inside]


def test_finding_before_directive_is_kept() -> None:
    stack = ScopedDirectiveStack()
    stack.on_directive("bplint-disable", ["foo"], loc(3, 10))

    assert filter_errors([error("foo", 3, 9)], stack) == [error("foo", 3, 9)]
    assert filter_errors([error("foo", 3, 10)], stack) == []


def test_refiltering_removes_nothing() -> None:
    stack = ScopedDirectiveStack()
    stack.on_directive("bplint-disable", ["foo"], loc(2, 1))
    stack.on_enter_scope()
    stack.on_directive("bplint-disable", [], loc(3, 1))
    stack.on_leave_scope(loc(4, 1))

    errors = [error(rule, line, 1) for line in range(1, 6) for rule in ("foo", "bar")]
    once = filter_errors(errors, stack)

    assert filter_errors(once, stack) == once
    assert [(e.rule, e.location.line) for e in once] == [
        ("foo", 1),
        ("bar", 1),
        ("bar", 2),
        ("bar", 4),
        ("bar", 5),
    ]


@pytest.mark.parametrize(
    "directives,rule,disabled",
    [
        ([], "foo", False),
        ([("bplint-disable", ())], "foo", True),
        ([("bplint-disable", ("foo",))], "foo", True),
        ([("bplint-disable", ("bar",))], "foo", False),
        ([("bplint-disable", ("foo",)), ("bplint-enable", ("foo",))], "foo", False),
        ([("bplint-enable", ("foo",)), ("bplint-disable", ("foo",))], "foo", True),
        ([("bplint-disable", ()), ("bplint-enable", ("foo",))], "foo", False),
        ([("bplint-disable", ()), ("bplint-enable", ("foo",))], "bar", True),
        # A bare enable re-enables nothing.
        ([("bplint-disable", ("foo",)), ("bplint-enable", ())], "foo", True),
        # Other directive kinds are ignored.
        ([("bplint-ignore", ("foo",))], "foo", False),
    ],
)
def test_is_rule_disabled(
    directives: list[tuple[str, tuple[str, ...]]], rule: str, disabled: bool
) -> None:
    records = [
        Directive(name=name, args=args, location=loc(i, 1))
        for i, (name, args) in enumerate(directives, start=1)
    ]
    assert is_rule_disabled(records, rule) is disabled


def test_bare_disable_in_document(lint_filtered) -> None:
    text = (
        "<button></button>\n"
        "<!-- bplint-disable -->\n"
        "<button></button>\n"
        '<a href="#">x</a>\n'
    )

    assert summarize(
        lint_filtered(text, "no-typeless-buttons", "no-hashtag-anchors")
    ) == [(1, 1, "Unexpected <button> without type attribute")]


def test_disable_scoped_to_element(lint_filtered) -> None:
    text = (
        "<div>\n"
        "  <!-- bplint-disable no-typeless-buttons -->\n"
        "  <button></button>\n"
        "</div>\n"
        "<button></button>\n"
    )

    assert summarize(lint_filtered(text, "no-typeless-buttons")) == [
        (5, 1, "Unexpected <button> without type attribute")
    ]


def test_enable_inside_nested_element(lint_filtered) -> None:
    text = (
        "<!-- bplint-disable no-typeless-buttons, no-hashtag-anchors -->\n"
        "<section>\n"
        "  <!-- bplint-enable no-typeless-buttons -->\n"
        '  <button></button><a href="#"></a>\n'
        "</section>\n"
        "<button></button>\n"
    )

    assert summarize(
        lint_filtered(text, "no-typeless-buttons", "no-hashtag-anchors")
    ) == [(4, 3, "Unexpected <button> without type attribute")]


def test_directive_after_finding_on_same_line(lint_filtered) -> None:
    text = "<button></button><!-- bplint-disable -->\n<button></button>"

    assert summarize(lint_filtered(text, "no-typeless-buttons")) == [
        (1, 1, "Unexpected <button> without type attribute")
    ]
