from __future__ import annotations

import pytest

from polymer_lint.config import ConfigError
from polymer_lint.config import LintConfig
from polymer_lint.config import find_config
from polymer_lint.config import load_config


def test_defaults() -> None:
    config = LintConfig()

    assert config.rules == []
    assert config.extensions == [".html"]
    assert config.color is None


def test_extensions_are_normalized() -> None:
    assert LintConfig(extensions=["html", ".htm", ""]).extensions == [".html", ".htm"]


def test_merged_skips_empty_overrides() -> None:
    config = LintConfig(rules=["icon-titles"], color=True)

    merged = config.merged(rules=[], extensions=["js"], color=None)

    assert merged.rules == ["icon-titles"]
    assert merged.extensions == [".js"]
    assert merged.color is True
    assert config.extensions == [".html"]


def test_load_dedicated_file(write_file) -> None:
    path = write_file(
        ".polymer-lint.toml",
        'rules = ["no-missing-import"]\nextensions = ["htm"]\ncolor = false\n',
    )

    config = load_config(path)

    assert config == LintConfig(
        rules=["no-missing-import"], extensions=[".htm"], color=False
    )


def test_load_pyproject_table(write_file) -> None:
    path = write_file(
        "pyproject.toml",
        '[project]\nname = "x"\n\n[tool.polymer-lint]\nrules = ["one-component"]\n',
    )

    assert load_config(path).rules == ["one-component"]


def test_load_pyproject_without_table(write_file) -> None:
    path = write_file("pyproject.toml", '[project]\nname = "x"\n')

    assert load_config(path) == LintConfig()


@pytest.mark.parametrize(
    "content",
    [
        "rules = [",
        "unknown = 1\n",
        'rules = "icon-titles"\n',
        "color = 'sometimes'\n",
    ],
)
def test_invalid_config(write_file, content: str) -> None:
    path = write_file(".polymer-lint.toml", content)

    with pytest.raises(ConfigError):
        load_config(path)


def test_missing_config_file(tmp_path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.toml")


def test_find_config_walks_up(write_file, tmp_path) -> None:
    config = write_file(".polymer-lint.toml", "")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert find_config(nested) == config.resolve()


def test_find_config_prefers_dedicated_file(write_file, tmp_path) -> None:
    write_file("pyproject.toml", "[tool.polymer-lint]\n")
    dedicated = write_file(".polymer-lint.toml", "")

    assert find_config(tmp_path) == dedicated.resolve()


def test_find_config_ignores_pyproject_without_table(write_file, tmp_path) -> None:
    write_file("project/pyproject.toml", '[project]\nname = "x"\n')
    outer = write_file("pyproject.toml", "[tool.polymer-lint]\ncolor = true\n")

    assert find_config(tmp_path / "project") == outer.resolve()
