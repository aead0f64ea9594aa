"""
TMDb adapter: movie search and genre discovery.
"""
import logging
from typing import Optional

import httpx

from ..models import ContentItem, FilmParameters, ProviderKind
from .base import DEFAULT_TIMEOUT, ContentProvider, parse_date
from .errors import ProviderUnavailable
from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

API_BASE = "https://api.themoviedb.org/3"
IMAGE_BASE = "https://image.tmdb.org/t/p/w500"
MOVIE_URL = "https://www.themoviedb.org/movie/{id}"
MIN_DISCOVER_VOTES = 100


def _parse_movie(movie: dict) -> Optional[ContentItem]:
    movie_id = movie.get("id")
    if movie_id is None:
        return None
    poster = movie.get("poster_path")
    return ContentItem(
        provider=ProviderKind.FILM,
        item_id=str(movie_id),
        title=movie.get("title") or movie.get("name") or "",
        image_url=f"{IMAGE_BASE}{poster}" if poster else None,
        url=MOVIE_URL.format(id=movie_id),
        attribution="TMDb",
        popularity=float(movie.get("popularity") or 0.0),
        vote_average=float(movie.get("vote_average") or 0.0),
        vote_count=int(movie.get("vote_count") or 0),
        adult=bool(movie.get("adult", False)),
        published_at=parse_date(movie.get("release_date")),
        summary=movie.get("overview", ""),
    )


class TMDbProvider(ContentProvider):
    """Film content from The Movie Database."""

    kind = ProviderKind.FILM
    name = "tmdb"

    def __init__(
        self,
        api_key: Optional[str],
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        rate_limiter: Optional[RateLimiter] = None,
    ):
        if not api_key:
            raise ProviderUnavailable("TMDb api key not configured")
        super().__init__(client=client, timeout=timeout, rate_limiter=rate_limiter)
        self.api_key = api_key

    async def _movies(self, path: str, params: dict, limit: int) -> list[ContentItem]:
        data = await self._request_json(
            "GET",
            f"{API_BASE}{path}",
            params={"api_key": self.api_key, "include_adult": "false", **params},
        )
        movies = [m for m in map(_parse_movie, data.get("results") or []) if m is not None]
        return movies[:limit]

    async def search(self, query: str, limit: int) -> list[ContentItem]:
        items = await self._movies("/search/movie", {"query": query}, limit)
        logger.info(f"TMDb search '{query}': {len(items)} movies")
        return items

    async def discover(self, params: FilmParameters, limit: int) -> list[ContentItem]:
        query = {
            # "|" means OR for TMDb genre filters
            "with_genres": "|".join(str(g) for g in params.genres),
            "sort_by": "popularity.desc",
            "vote_average.gte": params.vote_threshold,
            "vote_count.gte": MIN_DISCOVER_VOTES,
        }
        if params.year_range:
            start, end = params.year_range
            query["primary_release_date.gte"] = f"{start}-01-01"
            query["primary_release_date.lte"] = f"{end}-12-31"

        items = await self._movies("/discover/movie", query, limit)
        logger.info(f"TMDb discover ({query['with_genres']}): {len(items)} movies")
        return items
