"""Public CLI exports for unicode-cli."""

from __future__ import annotations

from .app import app, main
from .commands import lookup
from .state import emit_error, emit_warning, get_cli_state


__all__ = [
    "app",
    "emit_error",
    "emit_warning",
    "get_cli_state",
    "lookup",
    "main",
]
