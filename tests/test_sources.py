from __future__ import annotations

import logging

import pytest
import requests

import lyric_sync.sources.url as url_mod
from lyric_sync.config import load_config
from lyric_sync.errors import LyricSyncError, SourceUnavailable
from lyric_sync.lrc.model import LyricLine
from lyric_sync.sources import FileSource, LyricsLoader, UrlSource

LRC = "[ti:Song]\n[00:01.00]Hello\n[00:03.50]World\n"


def _response(status: int, body: bytes = b"", encoding: str | None = None) -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r._content = body
    r.encoding = encoding
    r.url = "https://example.test/song.lrc"
    return r


@pytest.fixture
def url_source() -> UrlSource:
    return UrlSource(timeout_s=1.0, max_retries=3, backoff_base_s=0.0)


def test_file_source_reads_text(tmp_path):
    path = tmp_path / "song.lrc"
    path.write_text(LRC, encoding="utf-8")
    assert FileSource().fetch(str(path)) == LRC


def test_file_source_missing_file(tmp_path):
    with pytest.raises(SourceUnavailable) as exc:
        FileSource().fetch(str(tmp_path / "nope.lrc"))
    assert exc.value.location.endswith("nope.lrc")
    assert isinstance(exc.value, LyricSyncError)


def test_url_source_decodes_utf8(monkeypatch, url_source):
    body = "[00:01.00]Привет\n".encode("utf-8")
    monkeypatch.setattr(url_mod.requests, "get", lambda url, timeout: _response(200, body))
    assert url_source.fetch("https://example.test/song.lrc") == "[00:01.00]Привет\n"


def test_url_source_404_is_not_retried(monkeypatch, url_source):
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        return _response(404)

    monkeypatch.setattr(url_mod.requests, "get", fake_get)
    with pytest.raises(SourceUnavailable):
        url_source.fetch("https://example.test/song.lrc")
    assert len(calls) == 1


def test_url_source_retries_then_fails(monkeypatch, url_source):
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        raise requests.ConnectionError("boom")

    monkeypatch.setattr(url_mod.requests, "get", fake_get)
    with pytest.raises(SourceUnavailable) as exc:
        url_source.fetch("https://example.test/song.lrc")
    assert len(calls) == 3
    assert "boom" in str(exc.value)


def test_url_source_recovers_after_server_error(monkeypatch, url_source):
    responses = [_response(503), _response(200, LRC.encode("utf-8"), "utf-8")]
    monkeypatch.setattr(url_mod.requests, "get", lambda url, timeout: responses.pop(0))
    assert url_source.fetch("https://example.test/song.lrc") == LRC


def test_loader_picks_source():
    loader = LyricsLoader(load_config())
    assert loader.source_for("https://example.test/a.lrc") is loader.url_source
    assert loader.source_for("HTTP://example.test/a.lrc") is loader.url_source
    assert loader.source_for("/tmp/a.lrc") is loader.file_source


def test_loader_load_parses(tmp_path):
    path = tmp_path / "song.lrc"
    path.write_text(LRC, encoding="utf-8")
    timeline = LyricsLoader(load_config()).load(str(path))
    assert timeline == (LyricLine(1000, "Hello"), LyricLine(3500, "World"))


def test_loader_empty_lyrics_is_not_an_error(tmp_path):
    path = tmp_path / "plain.txt"
    path.write_text("just words\nno timing\n", encoding="utf-8")
    assert LyricsLoader(load_config()).load(str(path)) == ()


def test_loader_load_raises_source_unavailable(tmp_path):
    with pytest.raises(SourceUnavailable):
        LyricsLoader(load_config()).load(str(tmp_path / "missing.lrc"))


def test_loader_load_or_empty_logs_and_recovers(tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="lyric_sync.sources.service")
    timeline = LyricsLoader(load_config()).load_or_empty(str(tmp_path / "missing.lrc"))
    assert timeline == ()
    assert "Lyrics unavailable" in caplog.text
