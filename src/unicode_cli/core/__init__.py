"""Core lookup engine: database loading, mode resolution, expansion, rendering."""

from __future__ import annotations

from .codepoints import format_header, format_hex, parse_hex, to_char
from .database import Database, load_database, read_database
from .diagnostics import DiagnosticEmitter, NullEmitter
from .exceptions import (
    DatabaseFetchError,
    HexParseError,
    MalformedDatabaseError,
    ParseError,
    PatternError,
    UnicodeToolError,
    UsageError,
)
from .expander import Expansion, expand
from .modes import InputMode, OutputMode, RequestFlags, Resolution, resolve_mode
from .processing import dedupe, process
from .render import render
from .sources import fetch_database, open_database


def lookup(
    flags: RequestFlags,
    args: list[str],
    database: Database,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> str:
    """Run a complete request against ``database`` and return the rendered output."""
    resolution = resolve_mode(flags, args)
    expansion = expand(resolution, args, database)
    expansion.codes = process(expansion.codes, resolution)
    return render(expansion, resolution, database, emitter=emitter)


__all__ = [
    "Database",
    "DatabaseFetchError",
    "DiagnosticEmitter",
    "Expansion",
    "HexParseError",
    "InputMode",
    "MalformedDatabaseError",
    "NullEmitter",
    "OutputMode",
    "ParseError",
    "PatternError",
    "RequestFlags",
    "Resolution",
    "UnicodeToolError",
    "UsageError",
    "dedupe",
    "expand",
    "fetch_database",
    "format_header",
    "format_hex",
    "load_database",
    "lookup",
    "open_database",
    "parse_hex",
    "process",
    "read_database",
    "render",
    "resolve_mode",
    "to_char",
]
