"""
Markup tokenization.

`MarkupTokenizer` wraps the standard library's `html.parser.HTMLParser` and
re-emits what it sees as named events on an `EventSource`, adding the
Polymer-specific and scope events the linter core relies on.

Events (in emission order for a single tag):
- `dom_module_start_tag(id, attrs, self_closing, location)`
- `import_tag(href, location)` for `<link rel="import" href="...">`
- `custom_element_start_tag(name, attrs, self_closing, location)`
- `enter_scope(location)` for tags that are neither self-closing nor void
- `start_tag(name, attrs, self_closing, location)`
- `dom_module_end_tag(location)` / `custom_element_end_tag(name, location)`
- `leave_scope(location)` for end tags that close an open scope
- `end_tag(name, location)`
- `text(text, location)` with adjacent text (including entity references)
  merged and kept as raw source text, so offsets into it map onto the source
- `comment(text, location)`, followed by
  `linter_directive(name, args, location)` if the comment is a directive
- `end()` once the document is exhausted

Scope events are always balanced: stray end tags never leave a scope, and
scopes still open at the end of input are closed at the end-of-document
location.
"""

from __future__ import annotations

import re
from html.parser import HTMLParser

from ..location import resolve_sub_location
from ..types import Attributes
from ..types import SourceLocation
from ..types import StartTagLocation
from .directives import parse_directive_comment
from .elements import get_attribute
from .elements import is_valid_custom_element_name
from .elements import is_void_element
from .events import EventSource

_TAG_NAME = re.compile(r"<[^\s/>]*")
_ATTRIBUTE = re.compile(
    r"""(?P<name>[^\s/>"'=]+)(?:\s*=\s*(?P<value>"[^"]*"|'[^']*'|[^\s>]+))?"""
)


class MarkupTokenizer(EventSource, HTMLParser):
    """Incremental, location-aware markup tokenizer. Feed with `write()`."""

    def __init__(self) -> None:
        EventSource.__init__(self)
        HTMLParser.__init__(self, convert_charrefs=False)
        self._line_starts: list[int] = [0]
        self._fed = 0
        self._rawdata_base = 0
        self._depth = 0
        self._pending_text: list[str] = []
        self._pending_text_location: SourceLocation | None = None
        self._ended = False

    @property
    def depth(self) -> int:
        """Number of scopes currently open."""
        return self._depth

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def write(self, chunk: str) -> None:
        if not chunk:
            return
        self._rawdata_base = self._fed - len(self.rawdata)
        newline = chunk.find("\n")
        while newline != -1:
            self._line_starts.append(self._fed + newline + 1)
            newline = chunk.find("\n", newline + 1)
        self._fed += len(chunk)
        self.feed(chunk)

    def end(self) -> None:
        if self._ended:
            return
        self._ended = True
        self._rawdata_base = self._fed - len(self.rawdata)
        self.close()
        self._flush_text()

        location = self._end_location()
        while self._depth:
            self._depth -= 1
            self.emit("leave_scope", location)
        self.emit("end")

    # ------------------------------------------------------------------
    # Locations
    # ------------------------------------------------------------------

    def _offset(self, line: int, col0: int) -> int:
        return self._line_starts[line - 1] + col0

    def _here(self, width: int = 0) -> SourceLocation:
        line, col0 = self.getpos()
        start = self._offset(line, col0)
        return SourceLocation(
            line=line, col=col0 + 1, start_offset=start, end_offset=start + width
        )

    def _width_until(self, start: int, terminator: str, default: int) -> int:
        index = self.rawdata.find(terminator, start - self._rawdata_base)
        if index < 0:
            return default
        return self._rawdata_base + index + len(terminator) - start

    def _end_location(self) -> SourceLocation:
        return SourceLocation(
            line=len(self._line_starts),
            col=self._fed - self._line_starts[-1] + 1,
            start_offset=self._fed,
            end_offset=self._fed,
        )

    def _start_tag_location(self, raw: str) -> StartTagLocation:
        base = self._here(len(raw))
        attrs: dict[str, SourceLocation] = {}
        values: dict[str, SourceLocation] = {}
        raw_values: dict[str, str] = {}
        name_match = _TAG_NAME.match(raw)
        position = name_match.end() if name_match else 0
        for match in _ATTRIBUTE.finditer(raw, position):
            name = match.group("name").lower()
            if name in attrs:
                continue
            attrs[name] = resolve_sub_location(raw, match.start(), match.end(), base)
            value = match.group("value")
            if value is None:
                continue
            value_start = match.start("value")
            if len(value) > 1 and value[0] in "\"'" and value[-1] == value[0]:
                value = value[1:-1]
                value_start += 1
            values[name] = resolve_sub_location(
                raw, value_start, value_start + len(value), base
            )
            raw_values[name] = value
        return StartTagLocation(
            line=base.line,
            col=base.col,
            start_offset=base.start_offset,
            end_offset=base.end_offset,
            attrs=attrs,
            values=values,
            raw_values=raw_values,
        )

    # ------------------------------------------------------------------
    # HTMLParser callbacks
    # ------------------------------------------------------------------

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._start_tag(tag, attrs, self_closing=False)

    def handle_startendtag(
        self, tag: str, attrs: list[tuple[str, str | None]]
    ) -> None:
        self._start_tag(tag, attrs, self_closing=True)

    def _start_tag(
        self,
        name: str,
        raw_attrs: list[tuple[str, str | None]],
        *,
        self_closing: bool,
    ) -> None:
        self._flush_text()
        attrs: Attributes = [(attr, value or "") for attr, value in raw_attrs]
        location = self._start_tag_location(self.get_starttag_text() or "")

        if name == "dom-module":
            self.emit(
                "dom_module_start_tag",
                get_attribute(attrs, "id"),
                attrs,
                self_closing,
                location,
            )
        elif name == "link":
            if get_attribute(attrs, "rel") == "import":
                self.emit("import_tag", get_attribute(attrs, "href"), location)
        elif is_valid_custom_element_name(name):
            self.emit("custom_element_start_tag", name, attrs, self_closing, location)

        if not self_closing and not is_void_element(name):
            self._depth += 1
            self.emit("enter_scope", location)

        self.emit("start_tag", name, attrs, self_closing, location)

    def handle_endtag(self, tag: str) -> None:
        self._flush_text()
        location = self._here()
        width = self._width_until(location.start_offset, ">", len(tag) + 3)
        location = SourceLocation(
            line=location.line,
            col=location.col,
            start_offset=location.start_offset,
            end_offset=location.start_offset + width,
        )

        if tag == "dom-module":
            self.emit("dom_module_end_tag", location)
        elif is_valid_custom_element_name(tag):
            self.emit("custom_element_end_tag", tag, location)

        if not is_void_element(tag) and self._depth > 0:
            self._depth -= 1
            self.emit("leave_scope", location)

        self.emit("end_tag", tag, location)

    def handle_data(self, data: str) -> None:
        if not data:
            return
        if not self._pending_text:
            self._pending_text_location = self._here()
        self._pending_text.append(data)

    def handle_entityref(self, name: str) -> None:
        self.handle_data(self._raw_reference("&", name))

    def handle_charref(self, name: str) -> None:
        self.handle_data(self._raw_reference("&#", name))

    def _raw_reference(self, prefix: str, name: str) -> str:
        # The terminating semicolon is optional in HTML.
        text = f"{prefix}{name}"
        index = self._here().start_offset - self._rawdata_base + len(text)
        if self.rawdata[index : index + 1] == ";":
            text += ";"
        return text

    def handle_comment(self, data: str) -> None:
        self._flush_text()
        location = self._here(len(data) + len("<!---->"))
        self.emit("comment", data, location)

        directive = parse_directive_comment(data, location)
        if directive is not None:
            self.emit(
                "linter_directive", directive.name, directive.args, directive.location
            )

    def handle_decl(self, decl: str) -> None:
        self._flush_text()

    def handle_pi(self, data: str) -> None:
        self._flush_text()

    def _flush_text(self) -> None:
        start = self._pending_text_location
        if not self._pending_text or start is None:
            return
        text = "".join(self._pending_text)
        self._pending_text = []
        self._pending_text_location = None
        self.emit(
            "text",
            text,
            SourceLocation(
                line=start.line,
                col=start.col,
                start_offset=start.start_offset,
                end_offset=start.start_offset + len(text),
            ),
        )
