from __future__ import annotations

from pathlib import Path

import pytest

from unicode_cli.core.database import Database, load_database, read_database, split_lines
from unicode_cli.core.exceptions import MalformedDatabaseError


SAMPLE_PATH = Path(__file__).parent / "data" / "UnicodeData-sample.txt"


def test_split_lines_drops_blank_lines() -> None:
    text = "0041;LATIN CAPITAL LETTER A;Lu\n\n0042;LATIN CAPITAL LETTER B;Lu\n"
    assert split_lines(text) == (
        "0041;LATIN CAPITAL LETTER A;Lu",
        "0042;LATIN CAPITAL LETTER B;Lu",
    )


def test_split_lines_strips_carriage_returns() -> None:
    assert split_lines("0041;A\r\n0042;B\r\n") == ("0041;A", "0042;B")


def test_missing_separator_reports_one_based_line() -> None:
    text = "0041;LATIN CAPITAL LETTER A\n\n0042 LATIN CAPITAL LETTER B\n"
    with pytest.raises(MalformedDatabaseError) as excinfo:
        load_database(text)
    assert excinfo.value.line_number == 3
    assert str(excinfo.value) == "malformed database: line 3"


def test_read_database_keeps_file_order() -> None:
    database = read_database(SAMPLE_PATH)
    assert len(database) == 13
    assert database.lines[0].startswith("0000;<control>")
    assert list(database)[-1].startswith("2155;")


def test_remainders_map_code_points_to_record_tail() -> None:
    database = load_database("0041;LATIN CAPITAL LETTER A;Lu\n00E0;LATIN SMALL LETTER A WITH GRAVE;Ll\n")
    assert database.remainders() == {
        0x41: "LATIN CAPITAL LETTER A;Lu",
        0xE0: "LATIN SMALL LETTER A WITH GRAVE;Ll",
    }


def test_search_strings_always_carry_one_separator() -> None:
    database = read_database(SAMPLE_PATH)
    entries = {code: (name, search) for code, name, search in database.search_strings()}
    assert entries[0x41] == ("latin capital letter a", "latin capital letter a;")
    assert entries[0x0] == ("<control>", "<control>;null")
    assert entries[0xE0][1] == "latin small letter a with grave;latin small letter a grave"
    assert all(search.count(";") == 1 for _, search in entries.values())


def test_search_strings_tolerate_short_records() -> None:
    database = Database(("0041;LATIN CAPITAL LETTER A",))
    assert list(database.search_strings()) == [
        (0x41, "latin capital letter a", "latin capital letter a;")
    ]


def test_undecodable_bytes_report_their_line(tmp_path: Path) -> None:
    path = tmp_path / "UnicodeData.txt"
    path.write_bytes(b"0020;SPACE;Zs\n\n0041;\xffA;Lu\n")
    with pytest.raises(UnicodeDecodeError) as excinfo:
        read_database(path)
    error = MalformedDatabaseError.from_decode_error(excinfo.value)
    assert error.line_number == 3
    assert str(error) == "malformed database: line 3"
