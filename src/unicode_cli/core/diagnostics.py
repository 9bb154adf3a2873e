"""Diagnostic hooks through which the lookup engine reports warnings and progress."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DiagnosticEmitter(Protocol):
    """Receiver for recoverable problems and database progress events."""

    def warning(self, message: str, exc: BaseException | None = None) -> None: ...

    def event(self, name: str, payload: Mapping[str, Any]) -> None: ...


class NullEmitter:
    """Emitter used when the caller does not care about diagnostics."""

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        return

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        return


def format_event_message(name: str, payload: Mapping[str, Any]) -> str | None:
    """Describe a database event in one line, or return ``None`` for unknown events."""
    if name == "database_source":
        kind = payload.get("kind") or "<unknown>"
        path = payload.get("path")
        return f"Using {kind} database: {path}" if path else f"Using {kind} database"
    if name == "database_loaded":
        return f"Loaded {payload.get('records', 0)} database records"
    if name == "database_generated":
        version = payload.get("unidata_version") or "<unknown>"
        return f"Generated {payload.get('records', 0)} records from Unicode {version} tables"
    if name == "database_fetch":
        return f"Fetching: {payload.get('url') or '<unknown>'}"
    return None


__all__ = [
    "DiagnosticEmitter",
    "NullEmitter",
    "format_event_message",
]
