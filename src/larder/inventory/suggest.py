"""Fuzzy "did you mean" lookups over record names."""

from __future__ import annotations

from typing import Iterable, Optional

from rapidfuzz import fuzz, process

DEFAULT_SCORE_CUTOFF = 80.0


def closest_name(
    query: str, names: Iterable[str], *, score_cutoff: float = DEFAULT_SCORE_CUTOFF
) -> Optional[str]:
    """Return the known name closest to ``query`` or None when nothing scores high enough."""

    choices = list(dict.fromkeys(name for name in names if name))
    if not query or not choices:
        return None
    match = process.extractOne(
        query,
        choices,
        scorer=fuzz.WRatio,
        processor=str.lower,
        score_cutoff=score_cutoff,
    )
    if match is None:
        return None
    return match[0]


__all__ = ["closest_name"]
