# utils/spotify.py
import asyncio
import logging
from functools import partial
from typing import Optional
from urllib.parse import quote

import requests
import spotipy
from spotipy.exceptions import SpotifyException
from spotipy.oauth2 import SpotifyClientCredentials, SpotifyOauthError

from utils.errors import SearchUnavailable
from utils.models import SearchResult, Track

logger = logging.getLogger("spotify")

SPOTIFY_SEARCH_URL = "https://open.spotify.com/search"

_SPOTIFY_ERRORS = (SpotifyException, SpotifyOauthError, requests.exceptions.RequestException)


def spotify_search_url(query: str) -> str:
    """Link to the Spotify web search page pre-filled with the query."""
    return f"{SPOTIFY_SEARCH_URL}/{quote(query, safe='')}"


class SpotifySearch:
    """
    Thin wrapper around spotipy for track lookups.

    One instance is shared by all handlers. It keeps no per-call state, so
    concurrent searches are fine. Token refresh is left to spotipy's
    auth manager.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        requests_timeout: Optional[float] = None,
        limit: int = 5,
        client: Optional[spotipy.Spotify] = None,
    ):
        self.limit = limit
        self._auth = SpotifyClientCredentials(
            client_id=client_id,
            client_secret=client_secret,
            requests_timeout=requests_timeout,
        )
        self._client = client or spotipy.Spotify(
            auth_manager=self._auth,
            requests_timeout=requests_timeout,
            retries=0,
            status_retries=0,
        )

    def authenticate(self) -> None:
        """Client-credentials exchange, done once at startup."""
        try:
            self._auth.get_access_token(as_dict=False)
        except _SPOTIFY_ERRORS as e:
            raise SearchUnavailable(f"Spotify token request failed: {e}") from e
        logger.info("🎧 Spotify client authenticated.")

    def search_sync(self, query: str) -> SearchResult:
        try:
            results = self._client.search(q=query, type="track", limit=self.limit)
        except _SPOTIFY_ERRORS as e:
            raise SearchUnavailable(f"Spotify search failed for {query!r}: {e}") from e

        tracks = (results or {}).get("tracks") or {}
        items = [item for item in tracks.get("items") or [] if item]
        result = SearchResult(
            query=query,
            tracks=tuple(Track.from_api(item) for item in items),
            total=tracks.get("total") or 0,
        )
        logger.debug(f"Spotify returned {len(result.tracks)}/{result.total} tracks for {query!r}")
        return result

    async def search(self, query: str) -> SearchResult:
        """Runs the blocking spotipy call in the default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(self.search_sync, query))
