from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterator

from lyric_sync.lrc.model import EMPTY_TIMELINE, LyricLine, Timeline
from lyric_sync.sync.animator import ScrollAnimator
from lyric_sync.sync.resolver import NO_LINE, LineTracker

logger = logging.getLogger(__name__)


class PresenterState(enum.Enum):
    EMPTY = "empty"
    IDLE = "idle"
    TRACKING = "tracking"


@dataclass(frozen=True, slots=True)
class RenderState:
    """Snapshot handed to the rendering surface for one draw cycle."""

    active_index: int
    scroll_offset: float
    line_spacing: float
    lines: Timeline = EMPTY_TIMELINE

    @property
    def has_lyrics(self) -> bool:
        return bool(self.lines)

    def is_active(self, index: int) -> bool:
        return index != NO_LINE and index == self.active_index

    def line_offsets(self) -> Iterator[tuple[int, LyricLine, float]]:
        """
        Yield (index, line, y) where y is the line's vertical distance from
        the focus position of the surface (0 = focus, negative = above).
        """
        for i, line in enumerate(self.lines):
            yield i, line, i * self.line_spacing - self.scroll_offset


class LyricPresenter:
    """
    Owns the timeline for one song and turns position updates and redraw
    ticks into RenderState snapshots.

    Not thread-safe: position updates and ticks must be delivered serially
    from the thread that drives redraws.
    """

    def __init__(self, animator: ScrollAnimator | None = None):
        self.animator = animator or ScrollAnimator()
        self._timeline: Timeline = EMPTY_TIMELINE
        self._tracker = LineTracker()
        self._tracking = False

    @property
    def timeline(self) -> Timeline:
        return self._timeline

    @property
    def has_lyrics(self) -> bool:
        return bool(self._timeline)

    @property
    def active_index(self) -> int:
        return self._tracker.last_idx

    @property
    def state(self) -> PresenterState:
        if not self._timeline:
            return PresenterState.EMPTY
        if not self._tracking:
            return PresenterState.IDLE
        return PresenterState.TRACKING

    def set_lyrics(self, timeline: Timeline) -> None:
        self._timeline = tuple(timeline)
        self._tracker = LineTracker.from_timeline(self._timeline)
        self._tracking = False
        self.animator.reset()
        logger.debug("Timeline loaded: %d lines", len(self._timeline))

    def reset(self) -> None:
        self.set_lyrics(EMPTY_TIMELINE)

    def update_position(self, position_ms: int) -> RenderState:
        if self._timeline:
            self._tracking = True
        changed = self._tracker.changed_index(position_ms)
        if changed is not None:
            logger.debug("Active line %d at %d ms", changed, position_ms)
            self.animator.retarget(changed)
        self.animator.tick()
        return self.get_render_state()

    def tick(self) -> RenderState:
        self.animator.tick()
        return self.get_render_state()

    def get_render_state(self) -> RenderState:
        return RenderState(
            active_index=self._tracker.last_idx,
            scroll_offset=self.animator.current_offset,
            line_spacing=self.animator.line_spacing,
            lines=self._timeline,
        )
