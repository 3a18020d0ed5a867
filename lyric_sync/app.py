from __future__ import annotations

import logging
import time
from typing import Callable

from lyric_sync.config import AppConfig
from lyric_sync.lrc.model import Timeline
from lyric_sync.render.ansi import AnsiRenderer
from lyric_sync.sync.animator import ScrollAnimator
from lyric_sync.sync.presenter import LyricPresenter, RenderState

logger = logging.getLogger(__name__)

TAIL_MS = 5_000


class PlaybackClock:
    """
    Stand-in for a playback engine: reports a position that advances with
    wall-clock time, scaled by the playback speed.
    """

    def __init__(
        self,
        start_ms: int = 0,
        speed: float = 1.0,
        now: Callable[[], float] = time.monotonic,
    ):
        self.speed = speed
        self._now = now
        self._base_ms = float(max(start_ms, 0))
        self._started_at = now()

    def position_ms(self) -> int:
        elapsed = self._now() - self._started_at
        return int(self._base_ms + elapsed * 1000.0 * self.speed)


def build_presenter(cfg: AppConfig) -> LyricPresenter:
    return LyricPresenter(
        ScrollAnimator(line_spacing=cfg.line_spacing, damping=cfg.damping, epsilon=cfg.epsilon)
    )


def default_duration_ms(timeline: Timeline) -> int:
    return (timeline[-1].t_ms if timeline else 0) + TAIL_MS


def run_player(
    cfg: AppConfig,
    presenter: LyricPresenter,
    timeline: Timeline,
    clock: PlaybackClock,
    renderer: AnsiRenderer,
    *,
    title: str,
    duration_ms: int | None = None,
    now: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Host loop: two deadlines, position polling and redraw ticks, serviced
    serially on this thread. Every presenter call happens here.
    """
    presenter.set_lyrics(timeline)
    end_ms = duration_ms if duration_ms is not None else default_duration_ms(timeline)

    poll_s = max(cfg.poll_interval_ms, 1) / 1000.0
    tick_s = 1.0 / max(cfg.refresh_hz, 1.0)

    renderer.enter()
    try:
        last_rendered: RenderState | None = None
        next_poll = next_tick = now()

        while True:
            t = now()
            if t >= next_poll:
                pos_ms = clock.position_ms()
                if pos_ms >= end_ms:
                    logger.debug("Reached end of track at %d ms", pos_ms)
                    return 0
                presenter.update_position(pos_ms)
                next_poll = max(next_poll + poll_s, t)

            if t >= next_tick:
                state = presenter.tick()
                if state != last_rendered:
                    renderer.render(title, state)
                    last_rendered = state
                next_tick = max(next_tick + tick_s, t)

            sleep(max(min(next_poll, next_tick) - now(), 0.0))
    except KeyboardInterrupt:
        return 130
    finally:
        renderer.exit()
