from __future__ import annotations

from ..markup.events import EventSource
from ..types import Attributes
from ..types import ReportCallback
from ..types import RuleContext
from ..types import SourceLocation


def style_inside_template(
    context: RuleContext, source: EventSource, report: ReportCallback
) -> None:
    """`<style>` must be nested inside a `<template>`."""
    inside_template = 0

    def on_start_tag(
        name: str, attrs: Attributes, self_closing: bool, location: SourceLocation
    ) -> None:
        nonlocal inside_template
        if name == "template":
            if not self_closing:
                inside_template += 1
            return
        if name == "style" and inside_template < 1:
            report("<style> tag outside of <template>", location)

    def on_end_tag(name: str, location: SourceLocation) -> None:
        nonlocal inside_template
        if name == "template" and inside_template > 0:
            inside_template -= 1

    source.on("start_tag", on_start_tag)
    source.on("end_tag", on_end_tag)
