"""TextExtraction — splits a string into plain and matched segments.

Usage:
    from parsed_text import TextExtraction, PatternDescriptor, resolve

    extraction = TextExtraction(
        "Visit https://example.com today",
        [PatternDescriptor(resolve("url"), {"style": "link"}, type="url")],
    )
    for segment in extraction.parse():
        print(segment.text, segment.is_match)
    # "Visit "               False
    # "https://example.com"  True
    # " today"               False

Descriptors are tried in list order.  When matches from different
descriptors overlap, the descriptor listed first keeps its match and the
other match is dropped whole.
"""

from __future__ import annotations
import bisect
import logging
import re
from typing import Any, NamedTuple, Sequence

from .errors import InvalidPattern
from .types import PatternDescriptor, Segment

logger = logging.getLogger(__name__)

# Metadata key holding the display transform, called with the matched text
TRANSFORM_KEY = "render_text"


class _Candidate(NamedTuple):
    start: int
    end: int
    order: int                 # index of the owning descriptor
    match: re.Match


class TextExtraction:
    """One extraction run over an immutable (text, descriptors) pair."""

    __slots__ = ("_text", "_descriptors")

    def __init__(self, text: str, descriptors: Sequence[PatternDescriptor]) -> None:
        self._text = text
        self._descriptors = tuple(descriptors)

    @property
    def text(self) -> str:
        return self._text

    @property
    def descriptors(self) -> tuple[PatternDescriptor, ...]:
        return self._descriptors

    def parse(self) -> list[Segment]:
        """Return the ordered segment list covering the whole text."""
        compiled = [_compile(i, d) for i, d in enumerate(self._descriptors)]
        if not self._text:
            return []

        # --- Scan: every descriptor over the full text ---
        candidates: list[_Candidate] = []
        for order, pattern in enumerate(compiled):
            for m in pattern.finditer(self._text):
                if m.end() == m.start():
                    continue
                candidates.append(_Candidate(m.start(), m.end(), order, m))

        accepted = _resolve_overlaps(candidates)
        logger.debug(
            "extraction: %d descriptors, %d candidates, %d accepted",
            len(compiled), len(candidates), len(accepted),
        )

        # --- Walk left to right, filling gaps with plain segments ---
        segments: list[Segment] = []
        cursor = 0
        for cand in accepted:
            if cand.start > cursor:
                segments.append(self._plain(cursor, cand.start, len(segments)))
            segments.append(self._matched(cand, len(segments)))
            cursor = cand.end
        if cursor < len(self._text):
            segments.append(self._plain(cursor, len(self._text), len(segments)))
        return segments

    def _plain(self, start: int, end: int, index: int) -> Segment:
        return Segment(text=self._text[start:end], start=start, end=end, index=index)

    def _matched(self, cand: _Candidate, index: int) -> Segment:
        descriptor = self._descriptors[cand.order]
        text = cand.match.group()
        metadata: dict[str, Any] = dict(descriptor.metadata)

        transformed = None
        transform = metadata.get(TRANSFORM_KEY)
        if callable(transform):
            transformed = transform(text)

        return Segment(
            text=text,
            start=cand.start,
            end=cand.end,
            index=index,
            descriptor=descriptor,
            metadata=metadata,
            transformed_text=transformed,
            groups=cand.match.groups(),
        )


def extract(text: str, descriptors: Sequence[PatternDescriptor]) -> list[Segment]:
    """Segment text with the given descriptors (see TextExtraction)."""
    return TextExtraction(text, descriptors).parse()


def _compile(index: int, descriptor: PatternDescriptor) -> re.Pattern:
    pattern = descriptor.pattern
    if isinstance(pattern, re.Pattern):
        if isinstance(pattern.pattern, bytes):
            raise InvalidPattern(index, "bytes patterns cannot match text")
        if descriptor.flags:
            inherited = pattern.flags
            if isinstance(descriptor.flags, int) and descriptor.flags & re.ASCII:
                # str patterns carry UNICODE implicitly; ASCII replaces it
                inherited &= ~re.UNICODE
            pattern = _compile_source(index, pattern.pattern, inherited | descriptor.flags)
        return pattern
    if isinstance(pattern, str):
        return _compile_source(index, pattern, descriptor.flags)
    raise InvalidPattern(index, f"expected a regex or string, got {type(pattern).__name__}")


def _compile_source(index: int, source: str, flags: int) -> re.Pattern:
    try:
        return re.compile(source, flags)
    except (re.error, ValueError, TypeError) as e:
        # ValueError/TypeError: incompatible or malformed flags
        raise InvalidPattern(index, f"{source!r}: {e}") from e


def _resolve_overlaps(candidates: list[_Candidate]) -> list[_Candidate]:
    """Drop overlapping candidates, keeping those of earlier descriptors."""
    if not candidates:
        return candidates
    # Earlier descriptor first, then earlier start, then longer span
    ranked = sorted(candidates, key=lambda c: (c.order, c.start, -(c.end - c.start)))

    # Accepted spans never overlap, so sorted by start they are sorted by end
    # too and only the neighbours of an insertion point can collide.
    starts: list[int] = []
    taken: list[_Candidate] = []
    for c in ranked:
        i = bisect.bisect_right(starts, c.start)
        if (i > 0 and taken[i - 1].end > c.start) or (i < len(taken) and taken[i].start < c.end):
            logger.debug("dropping overlapped match at %d-%d", c.start, c.end)
            continue
        starts.insert(i, c.start)
        taken.insert(i, c)
    return taken
