"""
Rule: no-missing-import

Every custom element used in a document must be imported (earlier in the
document) with `<link rel="import" href=".../x-foo.html">`. Uses include:
- custom element tags: `<x-foo>`
- shared styles: `<style include="x-foo x-bar">`
- type extensions: `<button is="x-foo">`
"""

from __future__ import annotations

from ..markup.elements import component_name_from_path
from ..markup.elements import get_attribute
from ..markup.elements import is_valid_custom_element_name
from ..markup.events import EventSource
from ..types import Attributes
from ..types import ReportCallback
from ..types import RuleContext
from ..types import SourceLocation
from ..types import StartTagLocation

POLYMER_BUILTINS = frozenset(
    {
        "array-selector",
        "custom-style",
        "dom-bind",
        "dom-if",
        "dom-repeat",
        "dom-template",
    }
)


def no_missing_import(
    context: RuleContext, source: EventSource, report: ReportCallback
) -> None:
    imports: set[str] = set()

    def check(name: str, location: SourceLocation) -> None:
        if name in POLYMER_BUILTINS or name in imports:
            return
        report(f"Custom element '{name}' used but not imported", location)

    def on_import_tag(href: str | None, location: SourceLocation) -> None:
        name = component_name_from_path(href)
        if name:
            imports.add(name)

    def on_start_tag(
        name: str,
        attrs: Attributes,
        self_closing: bool,
        location: StartTagLocation,
    ) -> None:
        if name == "style":
            included = get_attribute(attrs, "include")
            if included:
                for component_name in included.split():
                    check(component_name, location.attrs.get("include", location))
            return

        if is_valid_custom_element_name(name):
            # Reported via custom_element_start_tag.
            return

        extended = get_attribute(attrs, "is")
        if extended:
            check(extended, location.attrs.get("is", location))

    def on_custom_element_start_tag(
        name: str,
        attrs: Attributes,
        self_closing: bool,
        location: SourceLocation,
    ) -> None:
        check(name, location)

    source.on("import_tag", on_import_tag)
    source.on("start_tag", on_start_tag)
    source.on("custom_element_start_tag", on_custom_element_start_tag)
