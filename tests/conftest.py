"""Shared fixtures: fake Telegram messages and a fake Spotify client."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from utils.errors import SearchUnavailable
from utils.models import SearchResult, Track


def make_track(name="Imagine", artists=("John Lennon",), url="https://open.spotify.com/track/abc"):
    return Track(name=name, artists=tuple(artists), url=url)


class FakeSpotify:
    """Stands in for SpotifySearch; records queries and returns a canned result."""

    def __init__(self, tracks=(), error=None):
        self.tracks = tuple(tracks)
        self.error = error
        self.queries = []

    async def search(self, query):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return SearchResult(query=query, tracks=self.tracks, total=len(self.tracks))


@pytest.fixture
def fake_spotify():
    return FakeSpotify(tracks=[make_track()])


@pytest.fixture
def failing_spotify():
    return FakeSpotify(error=SearchUnavailable("boom"))


@pytest.fixture
def make_message():
    def _make(title=None, performer=None, file_name=None, audio=True):
        message = MagicMock()
        message.chat.id = 42
        message.reply = AsyncMock()
        message.audio = (
            SimpleNamespace(title=title, performer=performer, file_name=file_name)
            if audio else None
        )
        return message

    return _make
