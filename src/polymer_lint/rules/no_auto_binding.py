"""
Rule: no-auto-binding

Flags two-way `{{...}}` bindings in attribute values and text. The reported
location is the binding itself, not the enclosing tag or text node.
"""

from __future__ import annotations

import re

from ..location import resolve_attribute_value_location
from ..location import resolve_sub_location
from ..markup.events import EventSource
from ..types import Attributes
from ..types import ReportCallback
from ..types import RuleContext
from ..types import SourceLocation
from ..types import StartTagLocation

_AUTO_BINDING = re.compile(r"\{\{.*\}\}")


def no_auto_binding(
    context: RuleContext, source: EventSource, report: ReportCallback
) -> None:
    def on_start_tag(
        name: str,
        attrs: Attributes,
        self_closing: bool,
        location: StartTagLocation,
    ) -> None:
        for attr_name, value in attrs:
            match = _AUTO_BINDING.search(value)
            if not match:
                continue
            # `foo$="..."` binds to an attribute, anything else to a property.
            kind = "attribute" if attr_name.endswith("$") else "property"
            raw = location.raw_values.get(attr_name, value)
            raw_match = _AUTO_BINDING.search(raw) or match
            report(
                f"Unexpected automatic binding in {kind} '{attr_name}': {match.group(0)}",
                resolve_attribute_value_location(
                    location, attr_name, raw_match.start(), raw_match.end()
                ),
            )

    def on_text(text: str, location: SourceLocation) -> None:
        for match in _AUTO_BINDING.finditer(text):
            report(
                f"Unexpected automatic binding in text: {match.group(0)}",
                resolve_sub_location(text, match.start(), match.end(), location),
            )

    source.on("start_tag", on_start_tag)
    source.on("text", on_text)
