"""
Spotify adapter: track search, genre recommendations and audio features.

Uses the client-credentials flow; the access token is cached on the
adapter until shortly before it expires.
"""
import asyncio
import logging
import time
from typing import Optional

import httpx

from ..models import AUDIO_FEATURES, ContentItem, MusicParameters, ProviderKind
from .base import DEFAULT_TIMEOUT, ContentProvider, parse_date
from .errors import ProviderCallFailed, ProviderUnavailable
from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

TOKEN_URL = "https://accounts.spotify.com/api/token"
API_BASE = "https://api.spotify.com/v1"

MAX_SEED_GENRES = 5  # Spotify rejects more than five seeds
MAX_PAGE_SIZE = 50
TOKEN_EXPIRY_MARGIN = 60


def _parse_track(track: dict) -> Optional[ContentItem]:
    track_id = track.get("id")
    if not track_id:
        return None
    artists = track.get("artists") or []
    album = track.get("album") or {}
    images = album.get("images") or []
    return ContentItem(
        provider=ProviderKind.MUSIC,
        item_id=track_id,
        title=track.get("name", ""),
        image_url=images[0].get("url") if images else None,
        url=(track.get("external_urls") or {}).get("spotify"),
        attribution=", ".join(a.get("name", "") for a in artists),
        attribution_id=artists[0].get("id") if artists else None,
        popularity=float(track.get("popularity") or 0),
        explicit=bool(track.get("explicit", False)),
        published_at=parse_date(album.get("release_date")),
        summary=album.get("name", ""),
    )


class SpotifyProvider(ContentProvider):
    """Music content from the Spotify Web API."""

    kind = ProviderKind.MUSIC
    name = "spotify"

    def __init__(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        rate_limiter: Optional[RateLimiter] = None,
    ):
        if not client_id or not client_secret:
            raise ProviderUnavailable("Spotify client id/secret not configured")
        super().__init__(client=client, timeout=timeout, rate_limiter=rate_limiter)
        self.client_id = client_id
        self.client_secret = client_secret
        self._token: Optional[str] = None
        self._token_expires_at = 0.0
        self._token_lock = asyncio.Lock()

    def _cached_token(self) -> Optional[str]:
        if self._token and time.monotonic() < self._token_expires_at:
            return self._token
        return None

    async def _get_token(self) -> str:
        token = self._cached_token()
        if token:
            return token
        # Concurrent strategies share one token request
        async with self._token_lock:
            token = self._cached_token()
            if token:
                return token
            return await self._fetch_token()

    async def _fetch_token(self) -> str:
        data = await self._request_json(
            "POST",
            TOKEN_URL,
            data={"grant_type": "client_credentials"},
            auth=(self.client_id, self.client_secret),
        )
        token = data.get("access_token")
        if not token:
            raise ProviderCallFailed("spotify token response missing access_token")
        expires_in = float(data.get("expires_in", 3600))
        self._token = token
        self._token_expires_at = time.monotonic() + max(0.0, expires_in - TOKEN_EXPIRY_MARGIN)
        logger.debug(f"Fetched Spotify access token (expires in {expires_in:.0f}s)")
        return token

    async def _api_get(self, path: str, params: dict) -> dict:
        token = await self._get_token()
        return await self._request_json(
            "GET",
            f"{API_BASE}{path}",
            params=params,
            headers={"Authorization": f"Bearer {token}"},
        )

    async def _attach_audio_features(self, items: list[ContentItem]) -> None:
        """Fill item.features from /audio-features. Missing features are tolerated."""
        if not items:
            return
        try:
            data = await self._api_get(
                "/audio-features", {"ids": ",".join(i.item_id for i in items[:100])}
            )
        except ProviderCallFailed as e:
            logger.warning(f"Spotify audio features unavailable: {e}")
            return

        by_id = {
            f["id"]: f for f in (data.get("audio_features") or []) if f and f.get("id")
        }
        for item in items:
            features = by_id.get(item.item_id)
            if features:
                item.features = {
                    name: float(features[name])
                    for name in AUDIO_FEATURES
                    if features.get(name) is not None
                }

    async def search(self, query: str, limit: int) -> list[ContentItem]:
        data = await self._api_get(
            "/search",
            {"q": query, "type": "track", "limit": max(1, min(limit, MAX_PAGE_SIZE))},
        )
        tracks = (data.get("tracks") or {}).get("items") or []
        items = [item for item in map(_parse_track, tracks) if item is not None]
        await self._attach_audio_features(items)
        logger.info(f"Spotify search '{query}': {len(items)} tracks")
        return items

    async def discover(self, params: MusicParameters, limit: int) -> list[ContentItem]:
        query = {
            "seed_genres": ",".join(params.genres[:MAX_SEED_GENRES]),
            "limit": max(1, min(limit, 100)),
            "min_popularity": params.min_popularity,
        }
        for name, value in params.audio_features.items():
            query[f"target_{name}"] = round(value, 3)

        data = await self._api_get("/recommendations", query)
        items = [
            item for item in map(_parse_track, data.get("tracks") or []) if item is not None
        ]
        await self._attach_audio_features(items)
        logger.info(f"Spotify recommendations ({query['seed_genres']}): {len(items)} tracks")
        return items
