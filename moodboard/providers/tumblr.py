"""
Tumblr adapter: tagged photo posts.
"""
import logging
from typing import Optional

import httpx

from ..models import BlogParameters, ContentItem, ProviderKind
from .base import DEFAULT_TIMEOUT, ContentProvider, parse_date
from .errors import ProviderUnavailable
from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

TAGGED_URL = "https://api.tumblr.com/v2/tagged"
MAX_PAGE_SIZE = 20


def best_image_url(photo: dict) -> str:
    """Middle alt size by width, falling back to the original."""
    original = (photo.get("original_size") or {}).get("url", "")
    sizes = sorted(
        photo.get("alt_sizes") or [], key=lambda s: s.get("width", 0), reverse=True
    )
    if not sizes:
        return original
    return sizes[len(sizes) // 2].get("url") or original


def _parse_post(post: dict) -> Optional[ContentItem]:
    if post.get("type") != "photo" or not post.get("photos"):
        return None
    photo = post["photos"][0]
    original = photo.get("original_size") or {}
    post_id = post.get("id_string") or post.get("id")
    if post_id is None:
        return None
    return ContentItem(
        provider=ProviderKind.BLOG,
        item_id=str(post_id),
        title=post.get("summary") or post.get("slug", ""),
        image_url=best_image_url(photo),
        url=post.get("post_url"),
        attribution=post.get("blog_name", ""),
        attribution_id=post.get("blog_name"),
        popularity=float(post.get("note_count") or 0),
        width=original.get("width"),
        height=original.get("height"),
        published_at=parse_date(post.get("timestamp")),
        caption=post.get("caption", ""),
        summary=post.get("summary", ""),
        alt_text=photo.get("alt_text", ""),
        tags=[str(t) for t in post.get("tags") or []],
    )


class TumblrProvider(ContentProvider):
    """Blog photo posts from the Tumblr tagged endpoint."""

    kind = ProviderKind.BLOG
    name = "tumblr"

    def __init__(
        self,
        api_key: Optional[str],
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        rate_limiter: Optional[RateLimiter] = None,
    ):
        if not api_key:
            raise ProviderUnavailable("Tumblr api key not configured")
        super().__init__(client=client, timeout=timeout, rate_limiter=rate_limiter)
        self.api_key = api_key

    async def search(self, query: str, limit: int) -> list[ContentItem]:
        """Photo posts tagged with `query`."""
        data = await self._request_json(
            "GET",
            TAGGED_URL,
            params={
                "tag": query,
                "api_key": self.api_key,
                "limit": max(1, min(limit, MAX_PAGE_SIZE)),
            },
        )
        posts = data.get("response") or []
        items = [item for item in map(_parse_post, posts) if item is not None]
        logger.info(f"Tumblr tag '{query}': {len(items)} photo posts of {len(posts)}")
        return items[:limit]

    async def discover(self, params: BlogParameters, limit: int) -> list[ContentItem]:
        """Photo posts for the heaviest primary tag."""
        if not params.primary_tags:
            return []
        return await self.search(params.primary_tags[0], limit)
