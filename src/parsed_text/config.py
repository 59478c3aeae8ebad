"""YAML/dict config loader for parsed-text.

Supports loading from a YAML file or a plain dict (for embedding
in a larger application config).

Example YAML:

    parsed_text:
      children_props:
        style: body
      parse:
        - type: url
          style: link
        - type: email
          id: mail
        - pattern: '#(\\w+)'
          flags: [IGNORECASE]
          style: hashtag
          id: hashtag

Callables (``on_press``, ``render_text``) cannot come from YAML; add them
to the loaded options in code before building the parser.
"""

from __future__ import annotations
import re
from pathlib import Path
from typing import Any

from .errors import InvalidPattern
from .parser import ParsedText

_FLAG_NAMES = {
    "IGNORECASE": re.IGNORECASE,
    "MULTILINE": re.MULTILINE,
    "DOTALL": re.DOTALL,
    "VERBOSE": re.VERBOSE,
    "ASCII": re.ASCII,
}


def _parse_flags(index: int, value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = [value]
    flags = 0
    for name in value:
        try:
            flags |= _FLAG_NAMES[str(name).upper()]
        except KeyError:
            raise InvalidPattern(index, f"unknown regex flag {name!r}") from None
    return flags


def load_config(data: dict[str, Any]) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    # Support nested under "parsed_text" key or flat
    if "parsed_text" in data:
        data = data["parsed_text"] or {}

    parse: list[dict[str, Any]] = []
    for index, option in enumerate(data.get("parse") or []):
        option = dict(option)
        if "flags" in option:
            option["flags"] = _parse_flags(index, option["flags"])
        parse.append(option)

    return {
        "parse": parse,
        "children_props": dict(data.get("children_props") or {}),
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml
    with open(Path(path).expanduser(), encoding="utf-8") as f:
        return load_config(yaml.safe_load(f) or {})


def create_parser(config: dict[str, Any]) -> ParsedText:
    """Create a ParsedText from a raw or already-normalized config dict."""
    cfg = config if "parse" in config and "children_props" in config else load_config(config)
    return ParsedText(parse=cfg["parse"], children_props=cfg["children_props"])
