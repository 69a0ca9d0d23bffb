from __future__ import annotations

from ..markup.events import EventSource
from ..types import Attributes
from ..types import ReportCallback
from ..types import RuleContext
from ..types import SourceLocation


def one_component(
    context: RuleContext, source: EventSource, report: ReportCallback
) -> None:
    """Only one `<dom-module>` may be defined per file."""
    count = 0

    def on_dom_module_start_tag(
        component_name: str | None,
        attrs: Attributes,
        self_closing: bool,
        location: SourceLocation,
    ) -> None:
        nonlocal count
        count += 1
        if count > 1:
            report(f"More than one component defined: {component_name}", location)

    source.on("dom_module_start_tag", on_dom_module_start_tag)
