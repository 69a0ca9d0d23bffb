from __future__ import annotations

from ..markup.elements import get_attribute
from ..markup.events import EventSource
from ..types import Attributes
from ..types import ReportCallback
from ..types import RuleContext
from ..types import SourceLocation

BUTTON_TAGS = ("button", "jha-button")


def no_typeless_buttons(
    context: RuleContext, source: EventSource, report: ReportCallback
) -> None:
    def on_start_tag(
        name: str, attrs: Attributes, self_closing: bool, location: SourceLocation
    ) -> None:
        if name not in BUTTON_TAGS or get_attribute(attrs, "type"):
            return
        report(f"Unexpected <{name}> without type attribute", location)

    source.on("start_tag", on_start_tag)
