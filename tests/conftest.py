from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from polymer_lint.linting.engine import LintResult
from polymer_lint.linting.engine import lint_data
from polymer_lint.linting.suppression import filter_errors
from polymer_lint.markup.tokenization import MarkupTokenizer
from polymer_lint.types import LintError
from polymer_lint.types import RuleContext


@pytest.fixture
def tokenize():
    """Run text through a tokenizer and return the named events it emitted."""

    def _tokenize(text: str, *events: str) -> list[tuple[Any, ...]]:
        tokenizer = MarkupTokenizer()
        seen: list[tuple[Any, ...]] = []
        for event in events:
            tokenizer.on(
                event, lambda *args, _event=event: seen.append((_event, *args))
            )
        tokenizer.write(text)
        tokenizer.end()
        return seen

    return _tokenize


@pytest.fixture
def lint():
    """Lint text with the given rules and return the unfiltered result."""

    def _lint(text: str, *rules: str, filename: str | None = None) -> LintResult:
        return lint_data(text, RuleContext(filename=filename), rules=rules)

    return _lint


@pytest.fixture
def lint_filtered(lint):
    """Lint text and apply directive suppression to the findings."""

    def _lint_filtered(
        text: str, *rules: str, filename: str | None = None
    ) -> list[LintError]:
        result = lint(text, *rules, filename=filename)
        return filter_errors(result.errors, result.context.stack)

    return _lint_filtered


@pytest.fixture
def write_file(tmp_path: Path):
    def _write_file(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write_file
