"""Per-invocation CLI settings and stderr reporting."""

from __future__ import annotations

from dataclasses import dataclass, field
import sys
from typing import TYPE_CHECKING

import typer


if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "CLIState",
    "emit_error",
    "emit_warning",
    "get_cli_state",
    "render_message",
    "set_cli_state",
]


@dataclass(slots=True)
class CLIState:
    """Verbosity and traceback settings chosen on the command line."""

    verbosity: int = 0
    show_tracebacks: bool = False
    _err_console: Console | None = field(default=None, init=False, repr=False)

    @property
    def err_console(self) -> Console:
        """Return a stderr console, rebuilt when ``sys.stderr`` has been swapped."""
        from rich.console import Console

        if self._err_console is None or self._err_console.file is not sys.stderr:
            self._err_console = Console(file=sys.stderr, highlight=False)
        return self._err_console


_CURRENT = CLIState()


def get_cli_state() -> CLIState:
    """Return the settings of the running invocation."""
    return _CURRENT


def set_cli_state(
    *,
    ctx: typer.Context | None = None,
    verbosity: int = 0,
    debug: bool = False,
) -> CLIState:
    """Start a fresh state for one invocation and attach it to ``ctx``."""
    global _CURRENT
    _CURRENT = CLIState(verbosity=max(0, verbosity), show_tracebacks=debug)
    if ctx is not None:
        ctx.obj = _CURRENT
    return _CURRENT


def render_message(
    level: str,
    message: str,
    *,
    exception: BaseException | None = None,
) -> None:
    """Print ``message`` on stderr; ``-v`` adds the exception type."""
    from rich.text import Text

    state = get_cli_state()

    if level == "info":
        # stdout carries the lookup output.
        state.err_console.log(message)
        return

    style = "red" if level == "error" else "yellow"
    text = Text.assemble((f"{level}: ", f"bold {style}"), (message, style))
    if exception is not None and state.verbosity >= 1:
        text.append(f"\ntype: {type(exception).__name__}", style=style)
    state.err_console.print(text)


def emit_warning(message: str, *, exception: BaseException | None = None) -> None:
    render_message("warning", message, exception=exception)


def emit_error(message: str, *, exception: BaseException | None = None) -> None:
    render_message("error", message, exception=exception)
