"""Expansion of positional arguments into code point sequences."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
import logging
import re

from .codepoints import parse_hex
from .database import Database
from .exceptions import PatternError, UsageError
from .modes import RANGE_SEPARATOR, InputMode, OutputMode, Resolution


logger = logging.getLogger(__name__)

SPACE = 0x20


@dataclass(slots=True)
class Expansion:
    """Code points produced from the arguments, plus whether a range was seen."""

    codes: list[int] = field(default_factory=list)
    has_range: bool = False


def chars_to_codes(args: Sequence[str], *, separate: bool = False) -> list[int]:
    """Decompose every argument into its code points.

    When ``separate`` is set a space is inserted between consecutive arguments.
    """
    codes: list[int] = []
    for index, arg in enumerate(args):
        codes.extend(ord(ch) for ch in arg)
        if separate and index < len(args) - 1:
            codes.append(SPACE)
    return codes


def expand_range(low: int, high: int) -> list[int]:
    """Return the inclusive range ``low..high``."""
    if high < low:
        raise UsageError(f"invalid range: {high:04x} is lower than {low:04x}")
    return list(range(low, high + 1))


def hex_to_codes(args: Sequence[str]) -> Expansion:
    """Parse hex values and ``low-high`` ranges."""
    expansion = Expansion()
    for arg in args:
        parts = arg.split(RANGE_SEPARATOR)
        if len(parts) == 2:
            expansion.has_range = True
            expansion.codes.extend(expand_range(parse_hex(parts[0]), parse_hex(parts[1])))
            continue
        expansion.codes.append(parse_hex(arg))
    return expansion


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a name search pattern, matching case-insensitively."""
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as exc:
        raise PatternError(f"invalid pattern {pattern!r}: {exc}") from exc


def search_names(patterns: Sequence[str], database: Database) -> list[int]:
    """Return the code points whose names match each pattern in turn.

    Patterns are matched against ``{name};{unicode 1.0 name}`` and against the
    name alone, so ``foo;`` and ``foo$`` both anchor on the end of the name.
    Duplicates across patterns are kept.
    """
    compiled = [compile_pattern(pattern) for pattern in patterns]
    entries = list(database.search_strings())
    codes: list[int] = []
    for regex in compiled:
        matched = 0
        for code, name, search in entries:
            if regex.search(search) or regex.search(name):
                codes.append(code)
                matched += 1
        logger.debug("pattern %r matched %d records", regex.pattern, matched)
    return codes


def expand(resolution: Resolution, args: Sequence[str], database: Database) -> Expansion:
    """Expand ``args`` into code points according to ``resolution``."""
    if resolution.input_mode is InputMode.CHARS:
        separate = resolution.output_mode is OutputMode.TEXT
        return Expansion(chars_to_codes(args, separate=separate))
    if resolution.input_mode is InputMode.HEX:
        return hex_to_codes(args)
    if resolution.input_mode is InputMode.REGEXP:
        return Expansion(search_names(args, database))
    return Expansion()


__all__ = [
    "Expansion",
    "chars_to_codes",
    "compile_pattern",
    "expand",
    "expand_range",
    "hex_to_codes",
    "search_names",
]
