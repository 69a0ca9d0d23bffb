"""
Rule registry.

Rules are registered explicitly here rather than discovered on disk. A rule
is a callable `rule(context, source, report)` that subscribes to events on
`source` and calls `report(message, location)` for each problem.
"""

from __future__ import annotations

from typing import Iterable

from ..types import Rule
from .component_name_matches_filename import component_name_matches_filename
from .icon_titles import icon_titles
from .no_auto_binding import no_auto_binding
from .no_hashtag_anchors import no_hashtag_anchors
from .no_missing_import import no_missing_import
from .no_typeless_buttons import no_typeless_buttons
from .no_unused_import import no_unused_import
from .one_component import one_component
from .style_inside_template import style_inside_template

RULES: dict[str, Rule] = {
    "component-name-matches-filename": component_name_matches_filename,
    "icon-titles": icon_titles,
    "no-auto-binding": no_auto_binding,
    "no-hashtag-anchors": no_hashtag_anchors,
    "no-missing-import": no_missing_import,
    "no-typeless-buttons": no_typeless_buttons,
    "no-unused-import": no_unused_import,
    "one-component": one_component,
    "style-inside-template": style_inside_template,
}


def enabled_rules(names: Iterable[str] = ()) -> dict[str, Rule | None]:
    """
    Select rules by name; all registered rules if `names` is empty.

    Unknown names map to None so the engine can report them.
    """
    selected = list(names)
    if not selected:
        return dict(RULES)
    return {name: RULES.get(name) for name in selected}
