"""Loader for ``UnicodeData.txt``-style character databases.

Each record holds fifteen ``;``-separated fields, see
<https://www.unicode.org/reports/tr44/#UnicodeData.txt>. Loading only checks
that every non-empty line carries the separator; consumers cope with records
holding a different number of fields.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
import logging
from pathlib import Path

from .codepoints import parse_hex
from .diagnostics import DiagnosticEmitter, NullEmitter
from .exceptions import MalformedDatabaseError


logger = logging.getLogger(__name__)

DELIMITER = ";"

FIELD_NAMES: tuple[str, ...] = (
    "code point",
    "name",
    "general category",
    "canonical combining class",
    "bidirectional category",
    "character decomposition mapping",
    "decimal digit value",
    "digit value",
    "numeric value",
    "mirrored",
    "unicode 1.0 name",
    "iso 10646 comment",
    "uppercase mapping",
    "lowercase mapping",
    "titlecase mapping",
)

NAME_FIELD = 1
UNICODE_1_NAME_FIELD = 10


def split_lines(text: str) -> tuple[str, ...]:
    """Split database text into non-empty records, validating each one."""
    records: list[str] = []
    for index, raw in enumerate(text.split("\n"), start=1):
        line = raw.rstrip("\r")
        if not line:
            continue
        if DELIMITER not in line:
            raise MalformedDatabaseError(index)
        records.append(line)
    return tuple(records)


def _field(fields: list[str], index: int) -> str:
    return fields[index] if index < len(fields) else ""


@dataclass(frozen=True, slots=True)
class Database:
    """Immutable, ordered collection of raw database records."""

    lines: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def remainders(self) -> dict[int, str]:
        """Map each code point to the text following its first separator."""
        mapping: dict[int, str] = {}
        for line in self.lines:
            head, _, rest = line.partition(DELIMITER)
            mapping[parse_hex(head)] = rest
        return mapping

    def search_strings(self) -> Iterator[tuple[int, str, str]]:
        """Yield ``(code point, name, search string)`` in database order.

        The search string is ``{name};{unicode 1.0 name}`` in lower case and
        always carries exactly one separator.
        """
        for line in self.lines:
            fields = line.lower().split(DELIMITER)
            name = _field(fields, NAME_FIELD)
            search = name + DELIMITER + _field(fields, UNICODE_1_NAME_FIELD)
            yield parse_hex(fields[0]), name, search


def load_database(text: str, *, emitter: DiagnosticEmitter | None = None) -> Database:
    """Parse database text into a :class:`Database`."""
    emitter = emitter or NullEmitter()
    database = Database(split_lines(text))
    logger.debug("loaded %d database records", len(database))
    emitter.event("database_loaded", {"records": len(database)})
    return database


def read_database(path: Path, *, emitter: DiagnosticEmitter | None = None) -> Database:
    """Read and parse a UTF-8 database file."""
    return load_database(path.read_text(encoding="utf-8"), emitter=emitter)


__all__ = [
    "DELIMITER",
    "FIELD_NAMES",
    "NAME_FIELD",
    "UNICODE_1_NAME_FIELD",
    "Database",
    "load_database",
    "read_database",
    "split_lines",
]
