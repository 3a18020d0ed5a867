from __future__ import annotations


class LyricsSource:
    name: str

    def fetch(self, location: str) -> str:
        """Return raw LRC text or raise SourceUnavailable."""
        raise NotImplementedError
