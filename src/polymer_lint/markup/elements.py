"""
Element and attribute helpers shared by the tokenizer and rules.
"""

from __future__ import annotations

import re
from pathlib import PurePosixPath

from ..types import Attributes

# Elements that are implicitly self-closing (never open a scope).
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# https://html.spec.whatwg.org/multipage/custom-elements.html#valid-custom-element-name
# Code point ranges allowed after the first character of a custom element name.
_PCEN_RANGES = (
    (0xB7, 0xB7),
    (0xC0, 0xD6),
    (0xD8, 0xF6),
    (0xF8, 0x37D),
    (0x37F, 0x1FFF),
    (0x200C, 0x200D),
    (0x203F, 0x2040),
    (0x2070, 0x218F),
    (0x2C00, 0x2FEF),
    (0x3001, 0xD7FF),
    (0xF900, 0xFDCF),
    (0xFDF0, 0xFFFD),
    (0x10000, 0xEFFFF),
)
_PCEN_CHAR = (
    "[-.0-9_a-z"
    + "".join(f"{chr(low)}-{chr(high)}" for low, high in _PCEN_RANGES)
    + "]"
)
_POTENTIAL_CUSTOM_ELEMENT_NAME = re.compile(rf"^[a-z]{_PCEN_CHAR}*-{_PCEN_CHAR}*$")

_DISALLOWED_NAMES = frozenset(
    {
        "annotation-xml",
        "color-profile",
        "dom-module",
        "font-face",
        "font-face-src",
        "font-face-uri",
        "font-face-format",
        "font-face-name",
        "missing-glyph",
    }
)

COMPONENT_EXTENSION = ".html"


def is_void_element(name: str) -> bool:
    return name in VOID_ELEMENTS


def is_valid_custom_element_name(name: object) -> bool:
    return (
        isinstance(name, str)
        and _POTENTIAL_CUSTOM_ELEMENT_NAME.match(name) is not None
        and name not in _DISALLOWED_NAMES
    )


def component_name_from_path(
    path: str | None, extension: str = COMPONENT_EXTENSION
) -> str | None:
    """
    Derive a component name from an import href or filename.

    `"../paper-button/paper-button.html"` -> `"paper-button"`. Returns None when
    the basename is not a valid custom element name.
    """
    if not path:
        return None
    name = PurePosixPath(path.replace("\\", "/")).name
    if extension and name.endswith(extension):
        name = name[: -len(extension)]
    if is_valid_custom_element_name(name):
        return name
    return None


def get_attribute(attrs: Attributes, name: str) -> str | None:
    """Value of the first attribute called `name`, or None."""
    for attr_name, value in attrs:
        if attr_name == name:
            return value
    return None


def has_attribute(attrs: Attributes, name: str) -> bool:
    return any(attr_name == name for attr_name, _ in attrs)
