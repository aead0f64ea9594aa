# Providers module
from .base import ContentProvider, parse_date
from .errors import (
    ProviderCallFailed,
    ProviderError,
    ProviderRateLimited,
    ProviderUnavailable,
)
from .rate_limiter import RateLimiter
from .registry import build_providers
from .spotify import SpotifyProvider
from .tmdb import TMDbProvider
from .tumblr import TumblrProvider
from .unsplash import UnsplashProvider
