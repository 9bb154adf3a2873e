from __future__ import annotations

from unicode_cli.core.modes import InputMode, OutputMode, Resolution
from unicode_cli.core.processing import dedupe, process


def test_dedupe_preserves_first_occurrence_order() -> None:
    assert dedupe([5, 3, 5, 7, 3]) == [5, 3, 7]


def test_process_dedupes_then_sorts_search_results() -> None:
    resolution = Resolution(InputMode.REGEXP, OutputMode.HEX, sort=True)
    assert process([5, 3, 5, 7, 3], resolution) == [3, 5, 7]


def test_process_without_sort_keeps_search_order() -> None:
    resolution = Resolution(InputMode.REGEXP, OutputMode.HEX)
    assert process([5, 3, 5, 7, 3], resolution) == [5, 3, 7]


def test_process_leaves_other_modes_untouched() -> None:
    resolution = Resolution(InputMode.CHARS, OutputMode.HEX, sort=True)
    assert process([0x62, 0x61, 0x62], resolution) == [0x62, 0x61, 0x62]
