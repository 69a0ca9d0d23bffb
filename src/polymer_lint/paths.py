"""
Resolve command-line path patterns to files.
"""

from __future__ import annotations

import glob
from pathlib import Path
from typing import Iterable

DEFAULT_EXTENSIONS = (".html",)


def resolve_patterns(
    patterns: Iterable[str],
    *,
    cwd: Path | None = None,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> list[str]:
    """
    Expand patterns into a de-duplicated list of paths, first occurrence wins.

    Relative patterns produce paths relative to `cwd` (default: the current
    working directory).

    - an existing directory expands to every file below it with one of
      `extensions`
    - anything else is treated as a glob (`**` is recursive); a pattern that
      matches nothing is kept as-is so the caller can report it
    """
    base = cwd or Path.cwd()
    exts = tuple(ext if ext.startswith(".") else f".{ext}" for ext in extensions)
    found: dict[str, None] = {}

    for pattern in patterns:
        resolved = base / pattern
        if resolved.is_dir():
            for path in sorted(resolved.rglob("*")):
                if path.is_file() and path.name.endswith(exts):
                    found.setdefault(_display(path, base, pattern), None)
            continue

        matches = sorted(glob.glob(pattern, root_dir=base, recursive=True))
        if not matches:
            found.setdefault(pattern, None)
            continue
        for match in matches:
            if (base / match).is_file():
                found.setdefault(match, None)

    return list(found)


def _display(path: Path, base: Path, pattern: str) -> str:
    # Keep paths relative when the pattern was relative.
    if Path(pattern).is_absolute():
        return str(path)
    return str(path.relative_to(base))
