from __future__ import annotations

import logging

from lyric_sync.config import AppConfig
from lyric_sync.errors import SourceUnavailable
from lyric_sync.lrc.model import EMPTY_TIMELINE, Timeline
from lyric_sync.lrc.parse import parse_lrc

from .base import LyricsSource
from .local import FileSource
from .url import UrlSource

logger = logging.getLogger(__name__)


class LyricsLoader:
    def __init__(self, cfg: AppConfig):
        self.cfg = cfg
        self.url_source = UrlSource(
            timeout_s=cfg.fetch_timeout_s,
            max_retries=cfg.fetch_max_retries,
            backoff_base_s=cfg.fetch_backoff_base_s,
        )
        self.file_source = FileSource()

    def source_for(self, location: str) -> LyricsSource:
        if location.lower().startswith(("http://", "https://")):
            return self.url_source
        return self.file_source

    def fetch_text(self, location: str) -> str:
        src = self.source_for(location)
        logger.debug("Fetching lyrics from %s via %s", location, src.name)
        return src.fetch(location)

    def load(self, location: str) -> Timeline:
        """Fetch and parse. Raises SourceUnavailable; an empty result is not an error."""
        timeline = parse_lrc(self.fetch_text(location))
        if not timeline:
            logger.info("No timed lyrics in %s", location)
        return timeline

    def load_or_empty(self, location: str) -> Timeline:
        try:
            return self.load(location)
        except SourceUnavailable as e:
            logger.warning("Lyrics unavailable, showing none: %s", e)
            return EMPTY_TIMELINE
