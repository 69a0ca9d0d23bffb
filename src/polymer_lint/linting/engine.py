"""
Rule execution.

For each document a fresh tokenizer and `ScopedDirectiveStack` are created,
every enabled rule subscribes to the tokenizer's events, and the document is
fed through once. Findings come back sorted by location but *unfiltered*:
suppression directives are applied afterwards (see `suppression.py`) against
the completed stack returned in the result context.
"""

from __future__ import annotations

import asyncio
import codecs
import io
import logging
import os
from dataclasses import dataclass
from dataclasses import field
from typing import IO
from typing import Iterable
from typing import Iterator
from typing import Mapping
from typing import Union

from ..directive_stack import ScopedDirectiveStack
from ..markup.tokenization import MarkupTokenizer
from ..rules import enabled_rules
from ..types import DOCUMENT_START
from ..types import LintError
from ..types import ReportCallback
from ..types import Rule
from ..types import RuleContext
from ..types import SourceLocation
from ..types import sort_by_location

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024
ENCODING = "utf-8-sig"


@dataclass
class LintContext:
    filename: str | None
    stack: ScopedDirectiveStack = field(repr=False)


@dataclass
class LintResult:
    """
    Outcome of linting one document.

    `errors` are sorted by location and not yet filtered by directives. A
    document that could not be read has `exception` set and no errors.
    """

    errors: list[LintError]
    context: LintContext
    exception: Exception | None = None

    @property
    def failed(self) -> bool:
        return self.exception is not None

    @classmethod
    def failure(cls, filename: str | None, exception: Exception) -> LintResult:
        return cls(
            errors=[],
            context=LintContext(filename=filename, stack=ScopedDirectiveStack()),
            exception=exception,
        )


Document = Union[str, bytes, IO[str], IO[bytes]]


class Linter:
    """Runs a set of named rules over documents."""

    def __init__(self, rules: Mapping[str, Rule | None]) -> None:
        # A name mapped to None has no implementation; it is reported, not fatal.
        self.rules = dict(rules)

    @classmethod
    def from_rule_names(cls, names: Iterable[str] = ()) -> Linter:
        return cls(enabled_rules(names))

    def lint_stream(
        self, stream: IO[str] | IO[bytes], context: RuleContext | None = None
    ) -> LintResult:
        """Lint everything readable from `stream` (text or binary)."""
        context = context or RuleContext()
        tokenizer = MarkupTokenizer()
        stack = ScopedDirectiveStack()
        stack.listen_to(tokenizer)

        errors: list[LintError] = []

        def collector(rule_name: str) -> ReportCallback:
            def report(message: str, location: SourceLocation) -> None:
                errors.append(
                    LintError(rule=rule_name, message=message, location=location)
                )

            return report

        for name, rule in self.rules.items():
            if rule is None:
                logger.warning("Definition for rule '%s' was not found", name)
                collector(name)(
                    f"Definition for rule '{name}' was not found", DOCUMENT_START
                )
                continue
            rule(context, tokenizer, collector(name))

        logger.debug("Linting %s", context.filename or "<input>")
        for chunk in _iter_chunks(stream):
            tokenizer.write(chunk)
        tokenizer.end()
        logger.debug(
            "Linted %s: %d finding(s)", context.filename or "<input>", len(errors)
        )

        return LintResult(
            errors=sort_by_location(errors),
            context=LintContext(filename=context.filename, stack=stack),
        )

    def lint_file(self, filename: str | os.PathLike[str]) -> LintResult:
        path = os.fspath(filename)
        with open(path, "rb") as fh:
            return self.lint_stream(fh, RuleContext(filename=path))

    def lint_data(
        self, data: Document, context: RuleContext | None = None
    ) -> LintResult:
        """Lint a string, bytes, or an already-open stream."""
        if isinstance(data, str):
            stream: IO[str] | IO[bytes] = io.StringIO(data)
        elif isinstance(data, (bytes, bytearray)):
            stream = io.BytesIO(bytes(data))
        else:
            stream = data
        return self.lint_stream(stream, context)

    async def lint_files(
        self, filenames: Iterable[str | os.PathLike[str]]
    ) -> list[LintResult]:
        """
        Lint many files concurrently. Results are in input order.

        A file that cannot be read or decoded yields a failed result for that
        file only.
        """
        return list(
            await asyncio.gather(*(self._lint_file_guarded(f) for f in filenames))
        )

    async def _lint_file_guarded(self, filename: str | os.PathLike[str]) -> LintResult:
        try:
            return await asyncio.to_thread(self.lint_file, filename)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not lint %s: %s", os.fspath(filename), exc)
            return LintResult.failure(os.fspath(filename), exc)


def _iter_chunks(stream: IO[str] | IO[bytes]) -> Iterator[str]:
    decoder = codecs.getincrementaldecoder(ENCODING)()
    while True:
        chunk = stream.read(CHUNK_SIZE)
        if not chunk:
            break
        if isinstance(chunk, bytes):
            text = decoder.decode(chunk)
        else:
            text = chunk
        if text:
            yield text
    tail = decoder.decode(b"", final=True)
    if tail:
        yield tail


def lint_data(
    data: Document,
    context: RuleContext | None = None,
    rules: Iterable[str] = (),
) -> LintResult:
    """Convenience wrapper: lint `data` with the named rules (default: all)."""
    return Linter.from_rule_names(rules).lint_data(data, context)


def lint_files(
    filenames: Iterable[str | os.PathLike[str]], rules: Iterable[str] = ()
) -> list[LintResult]:
    """Blocking wrapper around `Linter.lint_files()`."""
    return asyncio.run(Linter.from_rule_names(rules).lint_files(filenames))
