from __future__ import annotations

import logging
import time

import requests

from lyric_sync.errors import SourceUnavailable

from .base import LyricsSource

logger = logging.getLogger(__name__)


class UrlSource(LyricsSource):
    name = "url"

    def __init__(self, *, timeout_s: float, max_retries: int, backoff_base_s: float):
        self.timeout_s = timeout_s
        self.max_retries = max(max_retries, 1)
        self.backoff_base_s = backoff_base_s

    def fetch(self, location: str) -> str:
        for attempt in range(1, self.max_retries + 1):
            try:
                r = requests.get(location, timeout=self.timeout_s)
                if r.status_code == 404:
                    raise SourceUnavailable(location, "not found (404)")
                r.raise_for_status()
                if not r.encoding or r.encoding.lower() == "iso-8859-1":
                    # LRC files are almost always UTF-8 even when served as text/plain
                    r.encoding = "utf-8"
                return r.text
            except requests.RequestException as e:
                logger.warning("lyrics fetch error (attempt %s/%s): %s", attempt, self.max_retries, e)
                if attempt == self.max_retries:
                    raise SourceUnavailable(location, str(e)) from e
                time.sleep(self.backoff_base_s * attempt)

        raise SourceUnavailable(location, "no attempts made")
