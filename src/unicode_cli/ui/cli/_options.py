"""Shared Typer option definitions for the CLI command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUT_PANEL = "Input"
OUTPUT_PANEL = "Output"
DATABASE_PANEL = "Database"
DIAGNOSTICS_PANEL = "Diagnostics"

ArgumentsArgument = Annotated[
    list[str] | None,
    typer.Argument(
        metavar="ARG...",
        help=(
            "Characters, hex code points (41 or 41-5a), or name patterns. "
            "Without -n or -c the arguments are sniffed: hex digits with at most "
            "one '-' are code points, anything else is characters."
        ),
        show_default=False,
    ),
]

NumericOption = Annotated[
    bool,
    typer.Option(
        "-n",
        "--numeric",
        help="Arguments are characters; output hex code points.",
        rich_help_panel=INPUT_PANEL,
    ),
]

CharOption = Annotated[
    bool,
    typer.Option(
        "-c",
        "--char",
        help="Arguments are hex code points or ranges; output characters.",
        rich_help_panel=INPUT_PANEL,
    ),
]

GrepOption = Annotated[
    bool,
    typer.Option(
        "-g",
        "--grep",
        help=(
            "Arguments are regular expressions matched against '{name};{unicode 1.0 name}'. "
            "Use 'regexp;' to match names only or ';regexp' for Unicode 1.0 names."
        ),
        rich_help_panel=INPUT_PANEL,
    ),
]

SortOption = Annotated[
    bool,
    typer.Option(
        "-s",
        "--sort",
        help="Sort search results before output (useful with -g and several patterns).",
        rich_help_panel=INPUT_PANEL,
    ),
]

TextOption = Annotated[
    bool,
    typer.Option(
        "-t",
        "--text",
        help="Output plain text instead of one character per line.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

DescribeOption = Annotated[
    bool,
    typer.Option(
        "-d",
        "--describe",
        help="Describe the characters from the database, in simple form.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

DescribeUnicodeOption = Annotated[
    bool,
    typer.Option(
        "-u",
        "--describe-unicode",
        help="Describe the characters with their raw database record.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

DescribeFullOption = Annotated[
    bool,
    typer.Option(
        "-U",
        "--describe-full",
        help="Describe the characters field by field.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

DatabaseOption = Annotated[
    Path | None,
    typer.Option(
        "--database",
        metavar="PATH",
        envvar="UNICODE_CLI_DATABASE",
        help="UnicodeData.txt file to read instead of the cached or generated database.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=DATABASE_PANEL,
    ),
]

FetchDatabaseOption = Annotated[
    bool,
    typer.Option(
        "--fetch-database",
        help="Download UnicodeData.txt from unicode.org into the user cache and exit.",
        rich_help_panel=DATABASE_PANEL,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]


__all__ = [
    "DATABASE_PANEL",
    "DIAGNOSTICS_PANEL",
    "INPUT_PANEL",
    "OUTPUT_PANEL",
    "ArgumentsArgument",
    "CharOption",
    "DatabaseOption",
    "DebugOption",
    "DescribeFullOption",
    "DescribeOption",
    "DescribeUnicodeOption",
    "FetchDatabaseOption",
    "GrepOption",
    "NumericOption",
    "SortOption",
    "TextOption",
    "VerboseOption",
]
