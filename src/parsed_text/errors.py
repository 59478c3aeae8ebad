"""Errors raised while resolving or compiling patterns."""

from __future__ import annotations


class ParsedTextError(Exception):
    """Base class for all parsed-text errors."""


class UnsupportedPatternType(ParsedTextError, KeyError):
    """A descriptor named a built-in type the registry does not know."""

    def __init__(self, type_name: object) -> None:
        self.type_name = type_name
        super().__init__(f"{type_name} is not a supported type")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class InvalidPattern(ParsedTextError, ValueError):
    """A descriptor's pattern is missing or cannot be compiled."""

    def __init__(self, index: int | None, reason: str) -> None:
        self.index = index
        self.reason = reason
        where = f"descriptor {index}" if index is not None else "pattern"
        super().__init__(f"Invalid {where}: {reason}")
