from .local import FileSource
from .service import LyricsLoader
from .url import UrlSource

__all__ = ["FileSource", "LyricsLoader", "UrlSource"]
