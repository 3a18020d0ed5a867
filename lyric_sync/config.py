from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Callable, TypeVar

from lyric_sync.sync.animator import DEFAULT_DAMPING, DEFAULT_EPSILON, DEFAULT_LINE_SPACING


@dataclass(frozen=True)
class AppConfig:
    # Animation
    line_spacing: float
    damping: float
    epsilon: float

    # Host loop
    refresh_hz: float
    poll_interval_ms: int

    # Sources
    fetch_timeout_s: float
    fetch_max_retries: int
    fetch_backoff_base_s: float

    # Rendering
    rows_per_line: int  # terminal rows per line_spacing unit
    use_alt_screen: bool
    placeholder: str


T = TypeVar("T")


def _env(name: str, default: str, conv: Callable[[str], T]) -> T:
    raw = os.getenv(name, default)
    try:
        return conv(raw)
    except ValueError as e:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from e


def load_config() -> AppConfig:
    use_alt_screen = os.getenv("LYRIC_SYNC_ALT_SCREEN", "1") not in ("0", "false", "False")

    return AppConfig(
        line_spacing=_env("LYRIC_SYNC_LINE_SPACING", str(DEFAULT_LINE_SPACING), float),
        damping=_env("LYRIC_SYNC_DAMPING", str(DEFAULT_DAMPING), float),
        epsilon=_env("LYRIC_SYNC_EPSILON", str(DEFAULT_EPSILON), float),
        refresh_hz=_env("LYRIC_SYNC_REFRESH_HZ", "30.0", float),
        poll_interval_ms=_env("LYRIC_SYNC_POLL_INTERVAL_MS", "100", int),
        fetch_timeout_s=_env("LYRIC_SYNC_FETCH_TIMEOUT", "10.0", float),
        fetch_max_retries=_env("LYRIC_SYNC_FETCH_MAX_RETRIES", "3", int),
        fetch_backoff_base_s=_env("LYRIC_SYNC_FETCH_BACKOFF_BASE", "1.0", float),
        rows_per_line=max(_env("LYRIC_SYNC_ROWS_PER_LINE", "1", int), 1),
        use_alt_screen=use_alt_screen,
        placeholder=os.getenv("LYRIC_SYNC_PLACEHOLDER") or "No lyrics",
    )
