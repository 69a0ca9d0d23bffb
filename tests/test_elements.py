from __future__ import annotations

import pytest

from polymer_lint.markup.elements import component_name_from_path
from polymer_lint.markup.elements import get_attribute
from polymer_lint.markup.elements import has_attribute
from polymer_lint.markup.elements import is_valid_custom_element_name
from polymer_lint.markup.elements import is_void_element


@pytest.mark.parametrize(
    "name,valid",
    [
        ("x-foo", True),
        ("paper-button", True),
        ("x-", True),
        ("my-élément", True),
        ("a.b-c_d", True),
        ("foo", False),
        ("X-foo", False),
        ("1-foo", False),
        ("-foo", False),
        ("x-foo!", False),
        ("dom-module", False),
        ("font-face", False),
        ("", False),
        (None, False),
    ],
)
def test_is_valid_custom_element_name(name, valid: bool) -> None:
    assert is_valid_custom_element_name(name) is valid


@pytest.mark.parametrize(
    "path,expected",
    [
        ("../paper-button/paper-button.html", "paper-button"),
        ("x-foo.html", "x-foo"),
        ("components\\x-foo.html", "x-foo"),
        ("/abs/path/x-foo.html", "x-foo"),
        ("../polymer/polymer.html", None),
        ("", None),
        (None, None),
    ],
)
def test_component_name_from_path(path: str | None, expected: str | None) -> None:
    assert component_name_from_path(path) == expected


def test_void_elements() -> None:
    assert is_void_element("br")
    assert is_void_element("link")
    assert not is_void_element("div")
    assert not is_void_element("template")


def test_attribute_helpers() -> None:
    attrs = [("type", "button"), ("hidden", ""), ("type", "submit")]

    assert get_attribute(attrs, "type") == "button"
    assert get_attribute(attrs, "hidden") == ""
    assert get_attribute(attrs, "title") is None
    assert has_attribute(attrs, "hidden")
    assert not has_attribute(attrs, "title")
