"""Resolution of the requested flags into a single lookup mode.

The command line exposes independent boolean flags. :func:`resolve_mode`
folds them into one :class:`Resolution` using a fixed precedence:

========================  ==========================================
Input                     ``grep`` > ``char`` (hex) > ``numeric``
Output                    ``describe_full`` > ``describe_unicode`` >
                          ``describe_simple`` > ``text`` > ``char`` >
                          ``numeric``
========================  ==========================================

Searching without an explicit output flag implies ``numeric``. Without
``numeric`` or ``char`` the arguments are sniffed: when every character is a
hex digit or ``-`` and at most one ``-`` appears, they are hex code points.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .exceptions import UsageError


RANGE_SEPARATOR = "-"
_HEX_OR_RANGE = frozenset("0123456789abcdefABCDEF" + RANGE_SEPARATOR)


class InputMode(str, Enum):
    """How positional arguments are interpreted."""

    CHARS = "chars"
    HEX = "hex"
    REGEXP = "regexp"


class OutputMode(str, Enum):
    """How the resulting code points are rendered."""

    HEX = "hex"
    CHARS = "chars"
    TEXT = "text"
    DESCRIBE_SIMPLE = "describe-simple"
    DESCRIBE_UNICODE = "describe-unicode"
    DESCRIBE_FULL = "describe-full"

    @property
    def describes(self) -> bool:
        return self in _DESCRIPTION_MODES


_DESCRIPTION_MODES = frozenset(
    {OutputMode.DESCRIBE_SIMPLE, OutputMode.DESCRIBE_UNICODE, OutputMode.DESCRIBE_FULL}
)


@dataclass(frozen=True, slots=True)
class RequestFlags:
    """Boolean mode flags as requested by the caller."""

    numeric: bool = False
    char: bool = False
    text: bool = False
    describe_simple: bool = False
    describe_unicode: bool = False
    describe_full: bool = False
    grep: bool = False
    sort: bool = False

    @property
    def describes(self) -> bool:
        return self.describe_simple or self.describe_unicode or self.describe_full


@dataclass(frozen=True, slots=True)
class Resolution:
    """Explicit lookup mode derived from :class:`RequestFlags`."""

    input_mode: InputMode
    output_mode: OutputMode
    sort: bool = False


def sniff_hex(args: Sequence[str]) -> bool:
    """Return whether the joined arguments look like a hex value or range."""
    joined = "".join(args)
    if any(ch not in _HEX_OR_RANGE for ch in joined):
        return False
    return joined.count(RANGE_SEPARATOR) <= 1


def _output_mode(flags: RequestFlags, *, char: bool) -> OutputMode:
    if flags.describe_full:
        return OutputMode.DESCRIBE_FULL
    if flags.describe_unicode:
        return OutputMode.DESCRIBE_UNICODE
    if flags.describe_simple:
        return OutputMode.DESCRIBE_SIMPLE
    if flags.text:
        return OutputMode.TEXT
    if char:
        return OutputMode.CHARS
    return OutputMode.HEX


def resolve_mode(flags: RequestFlags, args: Sequence[str]) -> Resolution:
    """Fold ``flags`` and ``args`` into a :class:`Resolution`."""
    if not args:
        raise UsageError("no arguments given")

    numeric = flags.numeric
    char = flags.char
    if flags.grep and not (numeric or char or flags.describes):
        numeric = True
    if not (numeric or char) and not flags.grep:
        if sniff_hex(args):
            char = True
        else:
            numeric = True

    if flags.grep:
        input_mode = InputMode.REGEXP
    elif char:
        input_mode = InputMode.HEX
    else:
        input_mode = InputMode.CHARS

    return Resolution(
        input_mode=input_mode,
        output_mode=_output_mode(flags, char=char),
        sort=flags.sort,
    )


__all__ = [
    "RANGE_SEPARATOR",
    "InputMode",
    "OutputMode",
    "RequestFlags",
    "Resolution",
    "resolve_mode",
    "sniff_hex",
]
