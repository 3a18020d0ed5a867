from __future__ import annotations

import logging
from pathlib import Path

from lyric_sync.errors import SourceUnavailable

from .base import LyricsSource

logger = logging.getLogger(__name__)


class FileSource(LyricsSource):
    name = "file"

    def __init__(self, *, encoding: str = "utf-8"):
        self.encoding = encoding

    def fetch(self, location: str) -> str:
        path = Path(location).expanduser()
        try:
            return path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Unable to read %s: %s", path, e)
            raise SourceUnavailable(location, str(e)) from e
