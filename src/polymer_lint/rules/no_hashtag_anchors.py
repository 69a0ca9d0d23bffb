from __future__ import annotations

from ..location import resolve_attribute_value_location
from ..markup.events import EventSource
from ..types import Attributes
from ..types import ReportCallback
from ..types import RuleContext
from ..types import StartTagLocation


def no_hashtag_anchors(
    context: RuleContext, source: EventSource, report: ReportCallback
) -> None:
    """`<a href="#">` is a button in disguise."""

    def on_start_tag(
        name: str,
        attrs: Attributes,
        self_closing: bool,
        location: StartTagLocation,
    ) -> None:
        if name != "a":
            return
        for attr_name, value in attrs:
            if attr_name != "href" or value != "#":
                continue
            raw = location.raw_values.get(attr_name, value)
            report(
                "Unexpected hashtag anchor",
                resolve_attribute_value_location(location, attr_name, 0, len(raw)),
            )

    source.on("start_tag", on_start_tag)
