"""Core types."""

from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class PatternDescriptor:
    """A pattern plus the metadata attached to every segment it matches."""
    pattern: re.Pattern | str
    metadata: Mapping[str, Any] = field(default_factory=dict)
    flags: int = 0             # only used when pattern is a string
    type: str | None = None    # built-in type it was resolved from, if any


@dataclass(frozen=True, slots=True)
class Segment:
    """One span of the output partition, plain or matched."""
    text: str
    start: int
    end: int
    index: int = 0
    # descriptor and metadata hold caller mappings; hashing uses the span only
    descriptor: PatternDescriptor | None = field(default=None, hash=False)
    metadata: dict[str, Any] = field(default_factory=dict, hash=False)
    transformed_text: str | None = None
    groups: tuple[str | None, ...] = ()

    @property
    def is_match(self) -> bool:
        return self.descriptor is not None

    @property
    def display_text(self) -> str:
        """Text destined for rendering (transform applied, if any)."""
        if self.transformed_text is not None:
            return self.transformed_text
        return self.text

    def as_dict(self) -> dict[str, Any]:
        """JSON-friendly view; callables in metadata are left out."""
        out: dict[str, Any] = {
            "text": self.text,
            "start": self.start,
            "end": self.end,
            "matched": self.is_match,
        }
        if self.descriptor is not None:
            out["type"] = self.descriptor.type
            out["metadata"] = {
                k: v for k, v in self.metadata.items() if not callable(v)
            }
            if self.transformed_text is not None:
                out["transformed_text"] = self.transformed_text
            if self.groups:
                out["groups"] = list(self.groups)
        return out
