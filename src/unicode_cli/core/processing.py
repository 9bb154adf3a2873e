"""Post-processing of search results."""

from __future__ import annotations

from collections.abc import Iterable

from .modes import InputMode, Resolution


def dedupe(codes: Iterable[int]) -> list[int]:
    """Drop repeated code points, keeping the first occurrence of each."""
    seen: set[int] = set()
    deduped: list[int] = []
    for code in codes:
        if code not in seen:
            seen.add(code)
            deduped.append(code)
    return deduped


def process(codes: list[int], resolution: Resolution) -> list[int]:
    """Dedupe then optionally sort search results; other modes pass through."""
    if resolution.input_mode is not InputMode.REGEXP:
        return codes
    codes = dedupe(codes)
    if resolution.sort:
        codes.sort()
    return codes


__all__ = ["dedupe", "process"]
