"""Implementation of the primary ``unicode`` CLI command.

For ``-g``, regular expressions are matched against a search string composed
of the Name and Unicode 1.0 Name fields, ``{name};{unicode 1.0 name}``. The
separator is always present, even when the 1.0 name is empty, so ``^regexp;``
matches a whole name and ``;regexp`` the start of a 1.0 name.
"""

from __future__ import annotations

from typing import Annotated

import typer

from unicode_cli.core.database import Database
from unicode_cli.core.exceptions import (
    DatabaseFetchError,
    MalformedDatabaseError,
    ParseError,
    UsageError,
)
from unicode_cli.core.expander import expand
from unicode_cli.core.modes import RequestFlags, resolve_mode
from unicode_cli.core.processing import process
from unicode_cli.core.render import render
from unicode_cli.core.sources import fetch_database, open_database
from unicode_cli.version import get_version

from .._options import (
    DIAGNOSTICS_PANEL,
    ArgumentsArgument,
    CharOption,
    DatabaseOption,
    DebugOption,
    DescribeFullOption,
    DescribeOption,
    DescribeUnicodeOption,
    FetchDatabaseOption,
    GrepOption,
    NumericOption,
    SortOption,
    TextOption,
    VerboseOption,
)
from ..diagnostics import CliEmitter
from ..state import emit_error, set_cli_state


# Exit status shared by usage, parse, and database integrity failures.
EXIT_USAGE = 2


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(get_version())
        raise typer.Exit()


def _usage_error(exc: UsageError) -> typer.BadParameter:
    return typer.BadParameter(str(exc), param_hint="ARG...")


def _fail(exc: BaseException, *, code: int = EXIT_USAGE) -> typer.Exit:
    emit_error(str(exc), exception=exc)
    return typer.Exit(code=code)


def lookup(
    ctx: typer.Context,
    args: ArgumentsArgument = None,
    numeric: NumericOption = False,
    char: CharOption = False,
    grep: GrepOption = False,
    sort: SortOption = False,
    text: TextOption = False,
    describe: DescribeOption = False,
    describe_unicode: DescribeUnicodeOption = False,
    describe_full: DescribeFullOption = False,
    database_path: DatabaseOption = None,
    fetch: FetchDatabaseOption = False,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
            rich_help_panel=DIAGNOSTICS_PANEL,
        ),
    ] = False,
) -> None:
    """Convert between Unicode characters, code points, and descriptions."""

    state = set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)
    emitter = CliEmitter(state=state)

    if fetch:
        try:
            destination = fetch_database(emitter=emitter)
        except (DatabaseFetchError, OSError) as exc:
            raise _fail(exc, code=1) from exc
        typer.echo(str(destination))
        raise typer.Exit()

    arguments = list(args or [])
    flags = RequestFlags(
        numeric=numeric,
        char=char,
        text=text,
        describe_simple=describe,
        describe_unicode=describe_unicode,
        describe_full=describe_full,
        grep=grep,
        sort=sort,
    )
    try:
        resolution = resolve_mode(flags, arguments)
    except UsageError as exc:
        raise _usage_error(exc) from exc

    try:
        database: Database = open_database(database_path, emitter=emitter)
    except MalformedDatabaseError as exc:
        raise _fail(exc) from exc
    except UnicodeDecodeError as exc:
        raise _fail(MalformedDatabaseError.from_decode_error(exc)) from exc
    except OSError as exc:
        raise _fail(exc, code=1) from exc

    try:
        expansion = expand(resolution, arguments, database)
        expansion.codes = process(expansion.codes, resolution)
        output = render(expansion, resolution, database, emitter=emitter)
    except UsageError as exc:
        raise _usage_error(exc) from exc
    except ParseError as exc:
        raise _fail(exc) from exc

    typer.echo(output, nl=False)


__all__ = ["lookup"]
