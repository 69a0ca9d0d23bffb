from __future__ import annotations

import re

from ..markup.elements import has_attribute
from ..markup.events import EventSource
from ..types import Attributes
from ..types import ReportCallback
from ..types import RuleContext
from ..types import SourceLocation

_ICON_TAG = re.compile(r"jha-icon-[\w-]+")


def icon_titles(
    context: RuleContext, source: EventSource, report: ReportCallback
) -> None:
    """Icon elements need a `title` for assistive technology."""

    def on_start_tag(
        name: str, attrs: Attributes, self_closing: bool, location: SourceLocation
    ) -> None:
        if not _ICON_TAG.search(name) or has_attribute(attrs, "title"):
            return
        report(f"Icon has no title attribute: {name}", location)

    source.on("start_tag", on_start_tag)
