"""
Builds the configured content providers.
"""
import logging
from typing import Optional

import httpx

from ..config import Settings, get_settings
from ..models import ProviderKind
from .base import ContentProvider
from .errors import ProviderUnavailable
from .rate_limiter import RateLimiter
from .spotify import SpotifyProvider
from .tmdb import TMDbProvider
from .tumblr import TumblrProvider
from .unsplash import UnsplashProvider

logger = logging.getLogger(__name__)


def build_providers(
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> dict[ProviderKind, ContentProvider]:
    """Construct every provider whose credentials are configured.

    Providers without credentials are left out and logged; the aggregator
    treats a missing provider as contributing zero items.
    """
    settings = settings or get_settings()

    def limiter() -> RateLimiter:
        # Pacing between term queries is the aggregator's job; this one
        # only handles 429 backoff.
        return RateLimiter(min_interval=0.0, max_retries=settings.max_retries)

    factories = {
        ProviderKind.MUSIC: lambda: SpotifyProvider(
            settings.spotify_client_id, settings.spotify_client_secret,
            client=client, timeout=settings.provider_timeout, rate_limiter=limiter(),
        ),
        ProviderKind.FILM: lambda: TMDbProvider(
            settings.tmdb_api_key,
            client=client, timeout=settings.provider_timeout, rate_limiter=limiter(),
        ),
        ProviderKind.BLOG: lambda: TumblrProvider(
            settings.tumblr_api_key,
            client=client, timeout=settings.provider_timeout, rate_limiter=limiter(),
        ),
        ProviderKind.IMAGE: lambda: UnsplashProvider(
            settings.unsplash_access_key,
            client=client, timeout=settings.provider_timeout, rate_limiter=limiter(),
        ),
    }

    providers = {}
    for kind, factory in factories.items():
        try:
            providers[kind] = factory()
        except ProviderUnavailable as e:
            logger.warning(f"Skipping {kind.value} provider: {e}")
    return providers
