"""
Location arithmetic.

Rules often find a problem inside a larger token (e.g. a binding expression in
a multi-line attribute value). The tokenizer only knows where the token
starts, so the exact location is computed from an offset into the token's
text plus the token's own location.
"""

from __future__ import annotations

from .types import DOCUMENT_START
from .types import SourceLocation
from .types import StartTagLocation


def resolve_sub_location(
    text: str,
    start_offset: int,
    end_offset: int | None = None,
    base: SourceLocation | None = None,
) -> SourceLocation:
    """
    Return the location of `text[start_offset:end_offset]`, as if `text`
    began exactly at `base`.

    Offsets are 0-based. `end_offset` defaults to `start_offset` (zero width)
    and is raised to `start_offset` if smaller. A `start_offset` past the last
    character resolves to the last character.

    Example:
        >>> resolve_sub_location("foo\\nbar baz", 8, 11)
        SourceLocation(line=2, col=5, start_offset=8, end_offset=11)
    """
    if base is None:
        base = DOCUMENT_START
    if end_offset is None:
        end_offset = start_offset

    if not text:
        return SourceLocation(
            line=base.line,
            col=base.col,
            start_offset=base.start_offset,
            end_offset=base.start_offset,
        )

    end_offset = max(end_offset, start_offset)
    if start_offset > len(text) - 1:
        start_offset = end_offset = len(text) - 1

    local_line = text.count("\n", 0, start_offset) + 1
    line_start = text.rfind("\n", 0, start_offset) + 1
    local_col = start_offset - line_start + 1

    return _add_locations(
        base,
        line=local_line,
        col=local_col,
        start_offset=start_offset,
        width=end_offset - start_offset,
    )


def resolve_attribute_value_location(
    tag: StartTagLocation,
    name: str,
    start_offset: int,
    end_offset: int | None = None,
) -> SourceLocation:
    """
    Location of `tag.raw_values[name][start_offset:end_offset]`.

    Offsets index the value as written in the source, so quoting style,
    whitespace around `=` and entity references do not shift the result.
    Without a recorded value this falls back to the attribute's location,
    then to the tag's.
    """
    base = tag.values.get(name)
    if base is None:
        return tag.attrs.get(name, tag)
    return resolve_sub_location(tag.raw_values[name], start_offset, end_offset, base)


def _add_locations(
    base: SourceLocation,
    *,
    line: int,
    col: int,
    start_offset: int,
    width: int,
) -> SourceLocation:
    # Not commutative: a newline resets the base column, and both line/col are
    # 1-based so one unit is subtracted when they are combined.
    if line == 1:
        col = base.col + col - 1
    start = base.start_offset + start_offset
    return SourceLocation(
        line=base.line + line - 1,
        col=col,
        start_offset=start,
        end_offset=start + width,
    )
