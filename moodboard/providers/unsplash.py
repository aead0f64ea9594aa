"""
Unsplash adapter: photo search.
"""
import logging
from typing import Optional

import httpx

from ..models import ContentItem, ImageParameters, ProviderKind
from .base import DEFAULT_TIMEOUT, ContentProvider, parse_date
from .errors import ProviderUnavailable
from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

SEARCH_URL = "https://api.unsplash.com/search/photos"
MAX_PAGE_SIZE = 30

# Values accepted by the `color` search filter
UNSPLASH_COLORS = {
    "black_and_white", "black", "white", "yellow", "orange", "red",
    "purple", "magenta", "green", "teal", "blue",
}


def _parse_photo(photo: dict) -> Optional[ContentItem]:
    photo_id = photo.get("id")
    if not photo_id:
        return None
    user = photo.get("user") or {}
    urls = photo.get("urls") or {}
    description = photo.get("description") or ""
    alt = photo.get("alt_description") or ""
    return ContentItem(
        provider=ProviderKind.IMAGE,
        item_id=photo_id,
        title=description or alt,
        image_url=urls.get("regular") or urls.get("full"),
        url=(photo.get("links") or {}).get("html"),
        attribution=user.get("name", ""),
        attribution_id=user.get("username"),
        popularity=float(photo.get("likes") or 0),
        width=photo.get("width"),
        height=photo.get("height"),
        published_at=parse_date(photo.get("created_at")),
        caption=description,
        alt_text=alt,
        tags=[t.get("title", "") for t in photo.get("tags") or [] if isinstance(t, dict)],
    )


def _search_color(colors) -> Optional[str]:
    for color in colors:
        value = color.strip().lower().replace(" ", "_")
        if value in UNSPLASH_COLORS:
            return value
    return None


class UnsplashProvider(ContentProvider):
    """Photos from the Unsplash search API."""

    kind = ProviderKind.IMAGE
    name = "unsplash"

    def __init__(
        self,
        access_key: Optional[str],
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        rate_limiter: Optional[RateLimiter] = None,
    ):
        if not access_key:
            raise ProviderUnavailable("Unsplash access key not configured")
        super().__init__(client=client, timeout=timeout, rate_limiter=rate_limiter)
        self.access_key = access_key

    async def _search(self, query: str, limit: int, **extra) -> list[ContentItem]:
        data = await self._request_json(
            "GET",
            SEARCH_URL,
            params={
                "query": query,
                "per_page": max(1, min(limit, MAX_PAGE_SIZE)),
                "order_by": "relevant",
                "content_filter": "high",
                **extra,
            },
            headers={
                "Authorization": f"Client-ID {self.access_key}",
                "Accept-Version": "v1",
            },
        )
        items = [p for p in map(_parse_photo, data.get("results") or []) if p is not None]
        logger.info(f"Unsplash search '{query}': {len(items)} photos")
        return items[:limit]

    async def search(self, query: str, limit: int) -> list[ContentItem]:
        return await self._search(query, limit)

    async def discover(self, params: ImageParameters, limit: int) -> list[ContentItem]:
        """Search the heaviest term, narrowed by a supported color when one fits."""
        if not params.search_terms:
            return []
        extra = {}
        color = _search_color(params.colors)
        if color:
            extra["color"] = color
        return await self._search(params.search_terms[0], limit, **extra)
