"""ParsedText — the caller side of an extraction.

Resolves parse options (built-in ``type`` or custom ``pattern`` plus
metadata) into descriptors and runs the extraction on string content.
Anything that is not a string is handed back untouched.

Usage:
    parser = ParsedText(
        parse=[
            {"type": "url", "style": "link", "on_press": open_url},
            {"pattern": r"#(\\w+)", "style": "hashtag"},
        ],
        children_props={"style": "body"},
    )
    segments = parser.parse_text("see www.example.com #today")
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from .extraction import TextExtraction
from .patterns import resolve_descriptors
from .types import PatternDescriptor, Segment


@dataclass
class ParsedText:
    """Parse options plus the props shared by every rendered segment."""

    parse: Sequence[Mapping[str, Any] | PatternDescriptor] | None = None
    children_props: dict[str, Any] = field(default_factory=dict)

    def get_patterns(self) -> list[PatternDescriptor]:
        """Resolve the parse options; unknown types raise UnsupportedPatternType."""
        return resolve_descriptors(self.parse or [])

    def parse_text(self, children: Any) -> list[Segment] | Any:
        """Segment string children; return anything else unchanged."""
        if self.parse is None or not isinstance(children, str):
            return children
        return TextExtraction(children, self.get_patterns()).parse()

    def segment_props(self, segment: Segment) -> dict[str, Any]:
        """Props for one segment: children_props overridden by match metadata."""
        return {
            **self.children_props,
            **segment.metadata,
            "children": segment.display_text,
        }


def parse_text(
    children: Any,
    parse: Sequence[Mapping[str, Any] | PatternDescriptor] | None,
) -> list[Segment] | Any:
    """Shortcut for ``ParsedText(parse).parse_text(children)``."""
    return ParsedText(parse=parse).parse_text(children)
