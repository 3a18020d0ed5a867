from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LyricLine:
    t_ms: int
    text: str


# Sorted by t_ms, ties in source order. Replaced wholesale, never mutated.
Timeline = tuple[LyricLine, ...]

EMPTY_TIMELINE: Timeline = ()
