"""Route lookup engine diagnostics to the CLI's stderr console."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from unicode_cli.core.diagnostics import format_event_message

from .state import CLIState, emit_warning, get_cli_state, render_message


class CliEmitter:
    """Show warnings always and database events only at ``-v``."""

    def __init__(self, state: CLIState | None = None) -> None:
        self._state = state or get_cli_state()

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        emit_warning(message, exception=exc)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        if self._state.verbosity < 1:
            return
        message = format_event_message(name, payload)
        if message:
            render_message("info", message)


__all__ = ["CliEmitter"]
