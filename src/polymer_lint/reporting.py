"""
Console reporting.

    components/x-foo.html
      3:5   Custom element 'x-bar' used but not imported  no-missing-import
      12:17 Unexpected hashtag anchor                     no-hashtag-anchors

    ✖ 2 errors

Findings are filtered through the document's directives before printing.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from rich.console import Console
from rich.text import Text

from .linting.engine import LintContext
from .linting.engine import LintResult
from .linting.suppression import filter_errors
from .types import LintError

UNNAMED_DOCUMENT = "<input>"


def _line_metrics(errors: list[LintError]) -> tuple[int, int, int]:
    line_w = max((len(str(e.location.line)) for e in errors), default=0)
    col_w = max((len(str(e.location.col)) for e in errors), default=0)
    message_w = max((len(e.message) for e in errors), default=0)
    return line_w, col_w, message_w


def format_error(error: LintError, metrics: tuple[int, int, int]) -> Text:
    line_w, col_w, message_w = metrics
    location = f"{error.location.line:>{line_w}}:{error.location.col:<{col_w}}"
    return Text.assemble(
        "  ",
        (location, "dim"),
        "  ",
        f"{error.message:<{message_w}}",
        "  ",
        (error.rule, "dim"),
    )


class ConsoleReporter:
    def __init__(
        self,
        console: Console | None = None,
        *,
        color: bool | None = None,
        cwd: Path | None = None,
    ) -> None:
        if console is None:
            console = Console(
                force_terminal=True if color else None,
                no_color=color is False,
                highlight=False,
            )
        self.console = console
        self.cwd = cwd

    def report(self, results: Iterable[LintResult]) -> int:
        """Print every result; return the number of findings printed."""
        total = 0
        for result in results:
            if result.failed:
                self.report_failure(result)
                continue
            total += self.report_file(result.errors, result.context)

        if total > 0:
            self.report_summary(total)
        return total

    def report_file(self, errors: list[LintError], context: LintContext) -> int:
        filtered = filter_errors(errors, context.stack)
        if filtered:
            self._write_filename(context.filename)
            metrics = _line_metrics(filtered)
            for error in filtered:
                self._write(format_error(error, metrics))
            self._write(Text())
        return len(filtered)

    def report_failure(self, result: LintResult) -> None:
        self._write_filename(result.context.filename)
        self._write(Text(f"  Could not lint file: {result.exception}", style="red"))
        self._write(Text())

    def report_summary(self, num: int) -> None:
        if num == 0:
            return
        plural = "" if num == 1 else "s"
        self._write(Text(f"✖ {num} error{plural}", style="bold red"))

    def _write_filename(self, filename: str | None) -> None:
        if filename is None:
            display = UNNAMED_DOCUMENT
        else:
            display = os.path.relpath(filename, self.cwd or Path.cwd())
        self._write(Text(display, style="underline"))

    def _write(self, text: Text) -> None:
        self.console.print(text, soft_wrap=True, highlight=False)
