"""CLI interface for parsed-text.

Usage:
    # Segment text (stdin: plain text, stdout: JSON list of segments)
    echo 'Visit https://example.com or call 555-123-4567' | \
        python -m parsed_text.cli --type url,phone segment

    # Only the matched segments, with a custom pattern after the built-ins
    echo 'ping @alice about #42' | \
        python -m parsed_text.cli --type email --pattern 'ticket=#\\d+' matches

    # Parse options from a YAML file (see parsed_text.config)
    python -m parsed_text.cli --config parse.yaml segment < message.txt

    # List built-in pattern types
    python -m parsed_text.cli types

A --pattern of the form NAME=REGEX tags its segments with id NAME.
Options from --config come first, then --type, then --pattern; earlier
options win when matches overlap.
"""

from __future__ import annotations
import argparse
import json
import logging
import re
import sys
from typing import Any

from .config import load_config, load_from_yaml
from .errors import ParsedTextError
from .parser import ParsedText
from .patterns import supported_types

logger = logging.getLogger(__name__)

_NAMED_PATTERN = re.compile(r"([A-Za-z_]\w*)=(.+)", re.DOTALL)


def _split_named(source: str) -> tuple[str | None, str]:
    """Split ``NAME=REGEX`` into (NAME, REGEX); plain regexes get no name."""
    m = _NAMED_PATTERN.fullmatch(source)
    if m:
        return m.group(1), m.group(2)
    return None, source


def _build_parser(args: argparse.Namespace) -> ParsedText:
    cfg: dict[str, Any] = load_from_yaml(args.config) if args.config else load_config({})
    parse = list(cfg["parse"])
    if args.type:
        parse.extend({"type": t.strip(), "id": t.strip()}
                     for t in args.type.split(",") if t.strip())
    flags = re.IGNORECASE if args.ignore_case else 0
    for n, source in enumerate(args.pattern, start=1):
        name, source = _split_named(source)
        parse.append({"pattern": source, "flags": flags, "id": name or f"pattern{n}"})
    logger.debug("using %d parse options", len(parse))
    return ParsedText(parse=parse, children_props=cfg["children_props"])


def _dump(data: Any) -> None:
    json.dump(data, sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_segment(args: argparse.Namespace) -> None:
    """Segment text on stdin into plain and matched parts."""
    parser = _build_parser(args)
    segments = parser.parse_text(sys.stdin.read())
    _dump([s.as_dict() for s in segments])


def cmd_matches(args: argparse.Namespace) -> None:
    """Print only the matched segments of text on stdin."""
    parser = _build_parser(args)
    segments = parser.parse_text(sys.stdin.read())
    _dump([s.as_dict() for s in segments if s.is_match])


def cmd_types(args: argparse.Namespace) -> None:
    """List built-in pattern types."""
    _dump(supported_types())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="parsed_text",
        description="Split text into plain and pattern-matched segments",
    )
    parser.add_argument("--config", default=None, help="YAML file with parse options")
    parser.add_argument("--type", default="", help="Comma-separated built-in types (url,phone,email)")
    parser.add_argument("--pattern", action="append", default=[], help="Custom regex or NAME=REGEX (repeatable)")
    parser.add_argument("--ignore-case", action="store_true", help="Case-insensitive custom patterns")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("segment", help="Segment text (stdin) into JSON")
    sub.add_parser("matches", help="Matched segments only (stdin)")
    sub.add_parser("types", help="List built-in pattern types")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cmds = {
        "segment": cmd_segment,
        "matches": cmd_matches,
        "types": cmd_types,
    }
    try:
        cmds[args.command](args)
    except ParsedTextError as e:
        parser.exit(2, f"parsed_text: error: {e}\n")


if __name__ == "__main__":
    main()
