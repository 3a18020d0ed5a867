from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field

from lyric_sync.lrc.model import Timeline

NO_LINE = -1


def resolve_active_line(timeline: Timeline, position_ms: int) -> int:
    """Index of the last line with t_ms <= position_ms, or NO_LINE."""
    return _resolve([e.t_ms for e in timeline], position_ms)


def _resolve(t_ms: list[int], position_ms: int) -> int:
    i = bisect_right(t_ms, position_ms) - 1
    return i if i >= 0 else NO_LINE


@dataclass(slots=True)
class LineTracker:
    """
    Efficient lookup: O(log n) via bisect + report only on change.
    """

    t_ms: list[int] = field(default_factory=list)
    last_idx: int = NO_LINE

    @classmethod
    def from_timeline(cls, timeline: Timeline) -> "LineTracker":
        return cls(t_ms=[e.t_ms for e in timeline])

    def current_index(self, now_ms: int) -> int:
        return _resolve(self.t_ms, now_ms)

    def changed_index(self, now_ms: int) -> int | None:
        i = self.current_index(now_ms)
        if i != self.last_idx:
            self.last_idx = i
            return i
        return None
