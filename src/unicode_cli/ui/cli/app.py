"""Typer application and console-script entry point."""

from __future__ import annotations

import typer

from unicode_cli.ui.cli.commands.lookup import lookup

from .state import emit_error, get_cli_state


app = typer.Typer(
    help="Convert between Unicode characters, code points, and descriptions.",
    context_settings={"help_option_names": ["--help", "-h"]},
    add_completion=False,
)
app.command()(lookup)


def main() -> None:
    """Run the CLI, turning stray exceptions into a one-line error and exit status 1."""
    try:
        app()
    except Exception as exc:
        state = get_cli_state()
        if state.show_tracebacks:
            from rich.traceback import Traceback

            state.err_console.print(
                Traceback.from_exception(
                    type(exc), exc, exc.__traceback__, show_locals=state.verbosity >= 2
                )
            )
        else:
            emit_error(str(exc) or type(exc).__name__, exception=exc)
        raise SystemExit(1) from exc


__all__ = ["app", "main"]
