"""Primary public API for unicode-cli."""

from __future__ import annotations

from unicode_cli.core import (
    Database,
    DatabaseFetchError,
    Expansion,
    HexParseError,
    InputMode,
    MalformedDatabaseError,
    OutputMode,
    PatternError,
    RequestFlags,
    Resolution,
    UnicodeToolError,
    UsageError,
    dedupe,
    expand,
    fetch_database,
    load_database,
    lookup,
    open_database,
    process,
    read_database,
    render,
    resolve_mode,
)
from unicode_cli.core.user_dir import UserDir, get_user_dir, user_dir_context
from unicode_cli.version import get_version


__version__ = get_version()

__all__ = [
    "Database",
    "DatabaseFetchError",
    "Expansion",
    "HexParseError",
    "InputMode",
    "MalformedDatabaseError",
    "OutputMode",
    "PatternError",
    "RequestFlags",
    "Resolution",
    "UnicodeToolError",
    "UsageError",
    "UserDir",
    "__version__",
    "dedupe",
    "expand",
    "fetch_database",
    "get_user_dir",
    "get_version",
    "load_database",
    "lookup",
    "open_database",
    "process",
    "read_database",
    "render",
    "resolve_mode",
    "user_dir_context",
]
