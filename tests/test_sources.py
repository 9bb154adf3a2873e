from __future__ import annotations

from pathlib import Path

import pytest
import requests

from unicode_cli.core import sources
from unicode_cli.core.exceptions import DatabaseFetchError, MalformedDatabaseError
from unicode_cli.core.sources import (
    DatabaseFetcher,
    fetch_database,
    generate_database_text,
    generate_record,
    open_database,
    resolve_database_source,
)
from unicode_cli.core.user_dir import user_dir_context


SAMPLE_PATH = Path(__file__).parent / "data" / "UnicodeData-sample.txt"


class _FakeResponse:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code
        self.encoding: str | None = None


class _FakeSession:
    def __init__(self, response: _FakeResponse | Exception) -> None:
        self.response = response
        self.calls: list[str] = []

    def get(self, url: str, **_: object) -> _FakeResponse:
        self.calls.append(url)
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


def test_generate_record_matches_official_layout() -> None:
    assert generate_record(0x41) == "0041;LATIN CAPITAL LETTER A;Lu;0;L;;;;;N;;;;0061;"
    assert generate_record(0x61) == "0061;LATIN SMALL LETTER A;Ll;0;L;;;;;N;;;0041;;0041"
    assert generate_record(0x31) == "0031;DIGIT ONE;Nd;0;EN;;1;1;1;N;;;;;"


def test_generate_record_fills_decomposition_and_fractions() -> None:
    grave = generate_record(0xE0).split(";")
    assert grave[5] == "0061 0300"
    assert grave[12] == "00C0"
    fifth = generate_record(0x2155).split(";")
    assert fifth[8] == "1/5"


def test_generate_record_names_controls_and_skips_unassigned() -> None:
    assert generate_record(0x0).split(";")[:3] == ["0000", "<control>", "Cc"]
    assert generate_record(0xE000) is None


def test_generated_text_loads_as_database() -> None:
    text = generate_database_text(range(0x20, 0x80))
    assert all(len(line.split(";")) == 15 for line in text.splitlines())
    assert text.splitlines()[0].startswith("0020;SPACE;Zs")


def test_generated_text_skips_surrogates() -> None:
    assert generate_database_text(range(0xD800, 0xE000)) == ""


def test_resolve_source_prefers_explicit_then_download(tmp_path: Path) -> None:
    with user_dir_context(tmp_path / "cache"):
        explicit = resolve_database_source(SAMPLE_PATH)
        assert explicit.kind == "explicit"
        assert explicit.path == SAMPLE_PATH

        assert resolve_database_source().kind == "generated"
        assert resolve_database_source().path is None

        downloaded = tmp_path / "cache" / "UnicodeData.txt"
        downloaded.parent.mkdir(parents=True)
        downloaded.write_text(SAMPLE_PATH.read_text(encoding="utf-8"), encoding="utf-8")
        assert resolve_database_source() == sources.DatabaseSource("downloaded", downloaded)


def test_open_database_caches_generated_copy(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(
        sources, "generate_database_text", lambda codes=None: generate_database_text(range(0x41, 0x44))
    )
    with user_dir_context(tmp_path / "cache"):
        database = open_database()
        assert len(database) == 3
        cached = sources.generated_database_path()
        assert cached.is_file()
        assert resolve_database_source().kind == "generated"
        assert resolve_database_source().path == cached


def test_open_database_reads_explicit_path() -> None:
    assert len(open_database(SAMPLE_PATH)) == 13


def test_open_database_rejects_malformed_file(tmp_path: Path) -> None:
    broken = tmp_path / "UnicodeData.txt"
    broken.write_text("0041;LATIN CAPITAL LETTER A\n0042 LATIN CAPITAL LETTER B\n", encoding="utf-8")
    with pytest.raises(MalformedDatabaseError):
        open_database(broken)


def test_fetch_database_writes_validated_payload(tmp_path: Path) -> None:
    payload = SAMPLE_PATH.read_text(encoding="utf-8")
    session = _FakeSession(_FakeResponse(payload))
    destination = tmp_path / "cache" / "UnicodeData.txt"

    written = fetch_database(
        url="https://example.invalid/UnicodeData.txt",
        destination=destination,
        fetcher=DatabaseFetcher(session=session),
    )

    assert written == destination
    assert destination.read_text(encoding="utf-8") == payload
    assert session.calls == ["https://example.invalid/UnicodeData.txt"]


def test_fetch_database_rejects_invalid_payload(tmp_path: Path) -> None:
    session = _FakeSession(_FakeResponse("<html>not found</html>\n"))
    destination = tmp_path / "UnicodeData.txt"
    with pytest.raises(DatabaseFetchError, match="invalid"):
        fetch_database(destination=destination, fetcher=DatabaseFetcher(session=session))
    assert not destination.exists()


@pytest.mark.parametrize(
    "response",
    [
        _FakeResponse("", status_code=404),
        _FakeResponse("   "),
        requests.ConnectionError("offline"),
    ],
)
def test_fetcher_reports_failures(response: _FakeResponse | Exception) -> None:
    fetcher = DatabaseFetcher(session=_FakeSession(response))
    with pytest.raises(DatabaseFetchError, match="Unable to download"):
        fetcher.fetch("https://example.invalid/UnicodeData.txt")
