from __future__ import annotations

from pathlib import Path

import pytest

import unicode_cli
from unicode_cli import RequestFlags, UsageError, lookup, read_database


SAMPLE_PATH = Path(__file__).parent / "data" / "UnicodeData-sample.txt"


@pytest.fixture(scope="module")
def database() -> unicode_cli.Database:
    return read_database(SAMPLE_PATH)


def test_lookup_runs_the_whole_pipeline(database: unicode_cli.Database) -> None:
    assert lookup(RequestFlags(), ["41-43"], database) == "0041 A\t0042 B\t0043 C\n"
    assert lookup(RequestFlags(numeric=True), ["abc"], database) == "0061\n0062\n0063\n"
    assert lookup(RequestFlags(grep=True, sort=True), ["letter c", "letter a;"], database) == (
        "0041\n0043\n0061\n0063\n"
    )


def test_lookup_shares_one_database_across_requests(database: unicode_cli.Database) -> None:
    first = lookup(RequestFlags(describe_simple=True, char=True), ["61"], database)
    second = lookup(RequestFlags(describe_simple=True, char=True), ["61"], database)
    assert first == second == "U+0061 'a' latin small letter a\n"
    assert len(database) == 13


def test_lookup_requires_arguments(database: unicode_cli.Database) -> None:
    with pytest.raises(UsageError):
        lookup(RequestFlags(), [], database)
