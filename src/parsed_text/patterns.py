"""Built-in pattern registry.

Maps the built-in type names (``url``, ``phone``, ``email``) to default
regular expressions, and turns caller parse options into PatternDescriptor
lists.  Options naming a ``type`` get the registry pattern; options with an
explicit ``pattern`` are passed through as custom patterns.
"""

from __future__ import annotations
import re
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from .errors import InvalidPattern, UnsupportedPatternType
from .types import PatternDescriptor

# Keys of a parse option that describe the pattern itself; the rest is metadata
_STRUCTURAL_KEYS = ("type", "pattern", "flags")

PATTERNS: Mapping[str, re.Pattern] = MappingProxyType({
    # http://, https:// or www. followed by a domain and optional path/query
    "url": re.compile(
        r"(?:https?://|www\.)"
        r"[-a-zA-Z0-9@:%._+~#=]{2,256}\.[a-z]{2,6}\b"
        r"[-a-zA-Z0-9@:%_+.~#?&/=]*",
        re.IGNORECASE,
    ),

    # Optional +, optional (area code), groups split by - . or whitespace
    "phone": re.compile(
        r"\+?\(?\d{3}\)?[-\s.]?\d{3}[-\s.]?\d{4,7}"
    ),

    # Permissive heuristic, not RFC 5322
    "email": re.compile(
        r"\S+@\S+\.\S+"
    ),
})


def supported_types() -> list[str]:
    """Names accepted by :func:`resolve`."""
    return sorted(PATTERNS)


def resolve(type_name: str) -> re.Pattern:
    """Return the default pattern for a built-in type name."""
    try:
        return PATTERNS[type_name]
    except (KeyError, TypeError):
        raise UnsupportedPatternType(type_name) from None


def resolve_descriptors(
    options: Iterable[Mapping[str, Any] | PatternDescriptor],
) -> list[PatternDescriptor]:
    """Build descriptors from parse options, resolving built-in types.

    Each option holds either ``type`` or ``pattern`` (``type`` wins when both
    are given) plus any metadata keys.  Options are copied, never mutated.
    """
    descriptors: list[PatternDescriptor] = []
    for index, option in enumerate(options):
        if isinstance(option, PatternDescriptor):
            descriptors.append(option)
            continue

        type_name = option.get("type")
        metadata = {k: v for k, v in option.items() if k not in _STRUCTURAL_KEYS}

        if type_name:
            pattern = resolve(type_name)
        elif option.get("pattern") is not None:
            pattern = option["pattern"]
            type_name = None
        else:
            raise InvalidPattern(index, "option needs a 'type' or a 'pattern'")

        descriptors.append(PatternDescriptor(
            pattern=pattern,
            metadata=metadata,
            flags=option.get("flags", 0),
            type=type_name,
        ))
    return descriptors
