from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
from typing import Sequence

from . import __version__
from .config import ConfigError
from .config import LintConfig
from .config import find_config
from .config import load_config
from .linting.engine import Linter
from .logging import LogConfig
from .logging import configure_logging
from .paths import resolve_patterns
from .reporting import ConsoleReporter

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polymer-lint",
        description="Lint Polymer components in HTML files.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Files, directories or glob patterns to lint.",
    )
    parser.add_argument(
        "--rule",
        action="append",
        dest="rules",
        default=[],
        metavar="NAME",
        help="Enable only this rule (repeatable). Default: all rules.",
    )
    parser.add_argument(
        "--ext",
        action="append",
        dest="extensions",
        default=[],
        metavar="EXT",
        help="File extension to lint inside directories (repeatable). Default: .html",
    )
    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Force colored output on or off.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Read settings from this TOML file instead of searching for one.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _load_settings(args: argparse.Namespace, cwd: Path) -> LintConfig:
    path = args.config or find_config(cwd)
    config = LintConfig() if path is None else load_config(path)
    if path is not None:
        logger.debug("Using configuration from %s", path)
    return config.merged(
        rules=args.rules,
        extensions=args.extensions,
        color=args.color,
    )


def main(argv: Sequence[str] | None = None, *, cwd: Path | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        LogConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    )

    if not args.paths:
        parser.print_help()
        return EXIT_OK

    cwd = cwd or Path.cwd()
    try:
        config = _load_settings(args, cwd)
    except ConfigError as e:
        logger.error("%s", e)
        return EXIT_USAGE

    filenames = resolve_patterns(args.paths, cwd=cwd, extensions=config.extensions)
    filenames = [str(cwd / name) for name in filenames]
    logger.debug("Linting %d file(s)", len(filenames))

    linter = Linter.from_rule_names(config.rules)
    results = asyncio.run(linter.lint_files(filenames))

    reporter = ConsoleReporter(color=config.color, cwd=cwd)
    num_errors = reporter.report(results)

    if num_errors > 0 or any(result.failed for result in results):
        return EXIT_FINDINGS
    return EXIT_OK
