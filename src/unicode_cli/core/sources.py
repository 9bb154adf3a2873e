"""Locate, generate, and download the character database text.

The database is read from the first available source:

1. an explicit path supplied by the caller;
2. ``UnicodeData.txt`` downloaded into the user cache;
3. a copy generated from the interpreter's :mod:`unicodedata` tables and
   cached next to it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from fractions import Fraction
import logging
import os
from pathlib import Path
import tempfile
import unicodedata

import requests

from .database import DELIMITER, Database, load_database, read_database
from .diagnostics import DiagnosticEmitter, NullEmitter
from .exceptions import DatabaseFetchError, MalformedDatabaseError
from .user_dir import get_user_dir


logger = logging.getLogger(__name__)

UNICODE_DATA_URL = "https://www.unicode.org/Public/UCD/latest/ucd/UnicodeData.txt"
DATABASE_FILENAME = "UnicodeData.txt"
CONTROL_NAME = "<control>"


@dataclass(frozen=True, slots=True)
class DatabaseSource:
    """Where the database text comes from."""

    kind: str
    path: Path | None = None


def cached_database_path() -> Path:
    """Return the location of the downloaded database."""
    return get_user_dir().cache_path(DATABASE_FILENAME)


def generated_database_path() -> Path:
    """Return the location of the database generated for this interpreter."""
    name = f"UnicodeData-{unicodedata.unidata_version}.generated.txt"
    return get_user_dir().cache_path(name)


def resolve_database_source(explicit: Path | None = None) -> DatabaseSource:
    """Pick the database source to read from."""
    if explicit is not None:
        return DatabaseSource("explicit", explicit)
    cached = cached_database_path()
    if cached.is_file():
        return DatabaseSource("downloaded", cached)
    generated = generated_database_path()
    if generated.is_file():
        return DatabaseSource("generated", generated)
    return DatabaseSource("generated")


# ---------------------------------------------------------------- generation


def _mapping(char: str, mapped: str) -> str:
    if len(mapped) != 1 or mapped == char:
        return ""
    return f"{ord(mapped):04X}"


def _numeric(char: str) -> str:
    value = unicodedata.numeric(char, None)
    if value is None:
        return ""
    if float(value).is_integer():
        return str(int(value))
    fraction = Fraction(value).limit_denominator(1000)
    return f"{fraction.numerator}/{fraction.denominator}"


def _optional(value: int | None) -> str:
    return "" if value is None else str(value)


def generate_record(code: int) -> str | None:
    """Build a database record for ``code``, or ``None`` when it has no name."""
    char = chr(code)
    category = unicodedata.category(char)
    name = unicodedata.name(char, None)
    if name is None:
        if category != "Cc":
            return None
        name = CONTROL_NAME
    fields = (
        f"{code:04X}",
        name,
        category,
        str(unicodedata.combining(char)),
        unicodedata.bidirectional(char),
        unicodedata.decomposition(char),
        _optional(unicodedata.decimal(char, None)),
        _optional(unicodedata.digit(char, None)),
        _numeric(char),
        "Y" if unicodedata.mirrored(char) else "N",
        "",
        "",
        _mapping(char, char.upper()),
        _mapping(char, char.lower()),
        _mapping(char, char.title()),
    )
    return DELIMITER.join(fields)


def generate_records(codes: Iterable[int] | None = None) -> Iterator[str]:
    """Yield records for every named code point in ``codes``."""
    for code in codes if codes is not None else range(0x110000):
        if 0xD800 <= code <= 0xDFFF:
            continue
        record = generate_record(code)
        if record is not None:
            yield record


def generate_database_text(codes: Iterable[int] | None = None) -> str:
    """Return database text generated from :mod:`unicodedata`."""
    return "".join(record + "\n" for record in generate_records(codes))


# ---------------------------------------------------------------- storage


def write_atomic(path: Path, payload: str) -> None:
    """Write ``payload`` to ``path`` through a temporary sibling file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    handle, temp_name = tempfile.mkstemp(prefix=f".{path.name}-", dir=path.parent)
    try:
        with os.fdopen(handle, "w", encoding="utf-8") as stream:
            stream.write(payload)
        os.replace(temp_name, path)
    except BaseException:
        Path(temp_name).unlink(missing_ok=True)
        raise


class DatabaseFetcher:
    """Download ``UnicodeData.txt`` over HTTP."""

    _DEFAULT_USER_AGENT = "unicode-cli-database-fetcher"

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        timeout: float = 30.0,
        user_agent: str | None = None,
    ) -> None:
        self._session = session
        self._timeout = timeout
        self._user_agent = user_agent or self._DEFAULT_USER_AGENT

    def fetch(self, url: str = UNICODE_DATA_URL) -> str:
        """Return the database text served at ``url``."""
        client = self._ensure_session()
        try:
            response = client.get(
                url, headers={"User-Agent": self._user_agent}, timeout=self._timeout
            )
        except requests.RequestException as exc:
            raise DatabaseFetchError(f"Unable to download '{url}': {exc}") from exc
        if response.status_code >= 400:
            raise DatabaseFetchError(f"Unable to download '{url}': HTTP {response.status_code}")
        response.encoding = "utf-8"
        content = response.text
        if not content.strip():
            raise DatabaseFetchError(f"Unable to download '{url}': empty response")
        return content

    def _ensure_session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session


def fetch_database(
    *,
    url: str = UNICODE_DATA_URL,
    destination: Path | None = None,
    fetcher: DatabaseFetcher | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> Path:
    """Download, validate, and store the database; return where it was written."""
    emitter = emitter or NullEmitter()
    fetcher = fetcher or DatabaseFetcher()
    destination = destination or cached_database_path()
    emitter.event("database_fetch", {"url": url})
    payload = fetcher.fetch(url)
    try:
        load_database(payload, emitter=emitter)
    except MalformedDatabaseError as exc:
        raise DatabaseFetchError(f"Downloaded database from '{url}' is invalid: {exc}") from exc
    write_atomic(destination, payload)
    logger.info("stored database at %s", destination)
    return destination


def open_database(
    explicit: Path | None = None,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> Database:
    """Resolve the database source and load it."""
    emitter = emitter or NullEmitter()
    source = resolve_database_source(explicit)
    emitter.event("database_source", {"kind": source.kind, "path": source.path})
    if source.path is not None:
        return read_database(source.path, emitter=emitter)

    text = generate_database_text()
    emitter.event(
        "database_generated",
        {"records": text.count("\n"), "unidata_version": unicodedata.unidata_version},
    )
    try:
        write_atomic(generated_database_path(), text)
    except OSError as exc:
        emitter.warning("Unable to cache the generated database.", exc)
    return load_database(text, emitter=emitter)


__all__ = [
    "DATABASE_FILENAME",
    "UNICODE_DATA_URL",
    "DatabaseFetcher",
    "DatabaseSource",
    "cached_database_path",
    "fetch_database",
    "generate_database_text",
    "generate_record",
    "generate_records",
    "generated_database_path",
    "open_database",
    "resolve_database_source",
    "write_atomic",
]
