"""Rendering of code point sequences into terminal output."""

from __future__ import annotations

from collections.abc import Sequence

from .codepoints import format_header, format_hex, to_char
from .database import DELIMITER, Database
from .diagnostics import DiagnosticEmitter, NullEmitter
from .expander import Expansion
from .modes import OutputMode, Resolution


# Labels for the fields following the code point, index-aligned with them.
PROPERTY_LABELS: tuple[str, ...] = (
    "",
    "category: ",
    "canonical combining classes: ",
    "bidirectional category: ",
    "character decomposition mapping: ",
    "decimal digit value: ",
    "digit value: ",
    "numeric value: ",
    "mirrored: ",
    "Unicode 1.0 name: ",
    "10646 comment field: ",
    "uppercase mapping: ",
    "lowercase mapping: ",
    "titlecase mapping: ",
)

UNICODE_1_NAME_INDEX = 9
CELLS_PER_ROW = 4


def dump_fields(remainder: str, *, emitter: DiagnosticEmitter | None = None) -> str:
    """Render every non-empty field of ``remainder`` on its own labelled line."""
    fields = remainder.split(DELIMITER)
    if len(fields) != len(PROPERTY_LABELS):
        message = (
            f"{remainder}: can't print: expected {len(PROPERTY_LABELS)} fields, "
            f"got {len(fields)}"
        )
        (emitter or NullEmitter()).warning(message)
        return message + "\n"
    lines: list[str] = []
    for index, value in enumerate(fields):
        if not value:
            continue
        prefix = "\t" if index > 0 else ""
        lines.append(f"{prefix}{PROPERTY_LABELS[index]}{value}\n")
    return "".join(lines)


def simple_description(remainder: str) -> str:
    """Return the lower-cased name, followed by the Unicode 1.0 name if any."""
    fields = remainder.lower().split(DELIMITER)
    description = fields[0]
    if len(fields) > UNICODE_1_NAME_INDEX and fields[UNICODE_1_NAME_INDEX]:
        description += "; " + fields[UNICODE_1_NAME_INDEX]
    return description


def describe(
    codes: Sequence[int],
    mode: OutputMode,
    database: Database,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> str:
    """Describe each code point from its database record."""
    remainders = database.remainders()
    chunks: list[str] = []
    for code in codes:
        remainder = remainders.get(code, "")
        header = format_header(code)
        if mode is OutputMode.DESCRIBE_FULL:
            chunks.append(f"{header} {dump_fields(remainder, emitter=emitter)}")
        elif mode is OutputMode.DESCRIBE_UNICODE:
            chunks.append(f"{header} {remainder}\n")
        else:
            chunks.append(f"{header} {simple_description(remainder)}\n")
    return "".join(chunks)


def render_text(codes: Sequence[int]) -> str:
    """Concatenate the characters into one line."""
    return "".join(to_char(code) for code in codes) + "\n"


def render_table(codes: Sequence[int]) -> str:
    """Lay out ``hex char`` cells four per row, separated by tabs."""
    rows: list[str] = []
    for start in range(0, len(codes), CELLS_PER_ROW):
        cells = codes[start : start + CELLS_PER_ROW]
        rows.append("\t".join(f"{format_hex(code)} {to_char(code)}" for code in cells))
    return "".join(row + "\n" for row in rows)


def render_lines(codes: Sequence[int], mode: OutputMode) -> str:
    """Render one code point per line, as hex or as the character itself."""
    if mode is OutputMode.CHARS:
        return "".join(to_char(code) + "\n" for code in codes)
    return "".join(format_hex(code) + "\n" for code in codes)


def _ensure_newline(output: str) -> str:
    if output and not output.endswith("\n"):
        return output + "\n"
    return output


def render(
    expansion: Expansion,
    resolution: Resolution,
    database: Database,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> str:
    """Render ``expansion`` according to the resolved output mode."""
    mode = resolution.output_mode
    codes = expansion.codes
    if mode.describes:
        return describe(codes, mode, database, emitter=emitter)
    if mode is OutputMode.TEXT:
        return render_text(codes)
    if expansion.has_range:
        return _ensure_newline(render_table(codes))
    return _ensure_newline(render_lines(codes, mode))


__all__ = [
    "CELLS_PER_ROW",
    "PROPERTY_LABELS",
    "describe",
    "dump_fields",
    "render",
    "render_lines",
    "render_table",
    "render_text",
    "simple_description",
]
