from __future__ import annotations

from dataclasses import dataclass
import re

from .model import LyricLine, Timeline

_TS_RE = re.compile(r"\[(\d{2}):(\d{2})\.(\d{2,3})\]")  # [mm:ss.xx] / [mm:ss.xxx]
_LEADING_TS_RE = re.compile(r"(?:\[\d{2}:\d{2}\.\d{2,3}\])+")


@dataclass(frozen=True, slots=True)
class LrcParseStats:
    lines_total: int
    events_total: int
    lines_with_timestamps: int
    lines_ignored: int
    lines_blank: int


def _parse_ts_to_ms(m: int, s: int, frac: str) -> int:
    # "50" -> 500ms, "500" -> 500ms
    ms = int(frac) * 10 if len(frac) == 2 else int(frac)
    return m * 60_000 + s * 1_000 + ms


def parse_lrc_with_stats(text: str) -> tuple[Timeline, LrcParseStats]:
    """
    Parse LRC text and report how many source lines were used.

    A line is kept only when it starts with one or more [mm:ss.xx] /
    [mm:ss.xxx] tags; every tag produces one entry with the same text.
    Metadata tags ([ar:], [ti:], [offset:] ...) and anything else that does
    not match are skipped. Entries with blank text are dropped.

    Result is sorted by time; the sort is stable, so entries sharing a
    timestamp stay in source order.
    """
    lines: list[LyricLine] = []

    total = 0
    lines_with_ts = 0
    ignored = 0
    blank = 0

    for raw in text.splitlines():
        total += 1
        line = raw.lstrip("\ufeff \t")
        if not line.strip():
            blank += 1
            continue

        lead = _LEADING_TS_RE.match(line)
        if lead is None:
            ignored += 1
            continue

        lines_with_ts += 1
        payload = line[lead.end() :].strip()
        if not payload:
            blank += 1
            continue

        for m in _TS_RE.finditer(lead.group(0)):
            t_ms = _parse_ts_to_ms(int(m.group(1)), int(m.group(2)), m.group(3))
            lines.append(LyricLine(t_ms=t_ms, text=payload))

    lines.sort(key=lambda e: e.t_ms)
    timeline: Timeline = tuple(lines)
    stats = LrcParseStats(
        lines_total=total,
        events_total=len(timeline),
        lines_with_timestamps=lines_with_ts,
        lines_ignored=ignored,
        lines_blank=blank,
    )
    return timeline, stats


def parse_lrc(text: str) -> Timeline:
    timeline, _stats = parse_lrc_with_stats(text)
    return timeline
