"""parsed-text — split strings into plain and pattern-matched segments."""

from .extraction import TextExtraction, extract
from .patterns import PATTERNS, resolve, resolve_descriptors, supported_types
from .parser import ParsedText, parse_text
from .config import create_parser, load_config, load_from_yaml
from .errors import ParsedTextError, UnsupportedPatternType, InvalidPattern
from .types import PatternDescriptor, Segment

__all__ = [
    "TextExtraction", "extract",
    "PATTERNS", "resolve", "resolve_descriptors", "supported_types",
    "ParsedText", "parse_text",
    "create_parser", "load_config", "load_from_yaml",
    "ParsedTextError", "UnsupportedPatternType", "InvalidPattern",
    "PatternDescriptor", "Segment",
]
__version__ = "0.1.0"
