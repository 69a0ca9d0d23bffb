from __future__ import annotations

from ..markup.elements import component_name_from_path
from ..markup.elements import get_attribute
from ..markup.elements import is_valid_custom_element_name
from ..markup.events import EventSource
from ..types import Attributes
from ..types import ReportCallback
from ..types import RuleContext
from ..types import SourceLocation


def no_unused_import(
    context: RuleContext, source: EventSource, report: ReportCallback
) -> None:
    """Every imported component must be used somewhere in the document."""
    imports: list[tuple[str, SourceLocation]] = []
    used: set[str] = set()

    def on_import_tag(href: str | None, location: SourceLocation) -> None:
        name = component_name_from_path(href)
        if name:
            imports.append((name, location))

    def on_start_tag(
        name: str, attrs: Attributes, self_closing: bool, location: SourceLocation
    ) -> None:
        if name == "style":
            used.update((get_attribute(attrs, "include") or "").split())
        elif not is_valid_custom_element_name(name):
            extended = get_attribute(attrs, "is")
            if extended:
                used.add(extended)

    def on_custom_element_start_tag(
        name: str, attrs: Attributes, self_closing: bool, location: SourceLocation
    ) -> None:
        used.add(name)

    def on_end() -> None:
        for name, location in imports:
            if name not in used:
                report(f"Component '{name}' was imported but never used", location)

    source.on("import_tag", on_import_tag)
    source.on("start_tag", on_start_tag)
    source.on("custom_element_start_tag", on_custom_element_start_tag)
    source.on("end", on_end)
