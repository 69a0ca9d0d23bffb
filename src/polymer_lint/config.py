"""
Configuration.

Settings are read from TOML, either a dedicated `.polymer-lint.toml` or the
`[tool.polymer-lint]` table of a `pyproject.toml`:

    [tool.polymer-lint]
    rules = ["no-missing-import", "no-unused-import"]
    extensions = [".html"]
    color = true

Command-line options take precedence over file values.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator

CONFIG_FILENAME = ".polymer-lint.toml"
PYPROJECT_FILENAME = "pyproject.toml"
TOOL_TABLE = "polymer-lint"


class ConfigError(ValueError):
    """Raised for unreadable or invalid configuration."""


class LintConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    rules: list[str] = Field(default_factory=list)
    extensions: list[str] = Field(default_factory=lambda: [".html"])
    color: bool | None = None

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        return [ext if ext.startswith(".") else f".{ext}" for ext in value if ext]

    def merged(self, **overrides: Any) -> LintConfig:
        """Return a copy with every non-empty override applied."""
        updates = {
            key: value
            for key, value in overrides.items()
            if value is not None and value != []
        }
        return LintConfig.model_validate({**self.model_dump(), **updates})


def _tool_table(data: dict[str, Any]) -> dict[str, Any] | None:
    return data.get("tool", {}).get(TOOL_TABLE)


def load_config(path: Path) -> LintConfig:
    """Load settings from a TOML file (a `pyproject.toml` or a dedicated file)."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Could not read {path}: {e}") from e

    if path.name == PYPROJECT_FILENAME:
        data = _tool_table(data) or {}

    try:
        return LintConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}:\n{e}") from e


def find_config(start: Path) -> Path | None:
    """
    Walk up from `start` to the first directory with a config file.

    `.polymer-lint.toml` wins over `pyproject.toml`; a `pyproject.toml`
    only counts if it has a `[tool.polymer-lint]` table.
    """
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file():
            try:
                data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
            except (OSError, tomllib.TOMLDecodeError):
                continue
            if _tool_table(data) is not None:
                return pyproject
    return None
