from __future__ import annotations

from pathlib import PurePath

from ..markup.elements import component_name_from_path
from ..markup.events import EventSource
from ..types import Attributes
from ..types import ReportCallback
from ..types import RuleContext
from ..types import SourceLocation


def component_name_matches_filename(
    context: RuleContext, source: EventSource, report: ReportCallback
) -> None:
    """`<dom-module id>` must match the component name implied by the filename."""
    filename = context.filename
    if not filename:
        return
    expected = component_name_from_path(filename)

    def on_dom_module_start_tag(
        component_name: str | None,
        attrs: Attributes,
        self_closing: bool,
        location: SourceLocation,
    ) -> None:
        if component_name == expected:
            return
        report(
            f"Expected '{PurePath(filename).name}' to declare component "
            f"'{expected}' but it declared '{component_name}'",
            location,
        )

    source.on("dom_module_start_tag", on_dom_module_start_tag)
