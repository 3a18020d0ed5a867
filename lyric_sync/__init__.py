"""Lyric synchronization engine: LRC timelines, active-line lookup and smooth scrolling."""

from lyric_sync.lrc.model import EMPTY_TIMELINE, LyricLine, Timeline
from lyric_sync.lrc.parse import parse_lrc
from lyric_sync.sync.animator import ScrollAnimator
from lyric_sync.sync.presenter import LyricPresenter, PresenterState, RenderState
from lyric_sync.sync.resolver import resolve_active_line

__all__ = [
    "EMPTY_TIMELINE",
    "LyricLine",
    "LyricPresenter",
    "PresenterState",
    "RenderState",
    "ScrollAnimator",
    "Timeline",
    "parse_lrc",
    "resolve_active_line",
]

__version__ = "0.1.0"
