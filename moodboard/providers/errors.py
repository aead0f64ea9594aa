"""
Provider error taxonomy.

Adapters raise these; the aggregator catches them per call and turns the
failure into an empty contribution.
"""
from typing import Optional


class ProviderError(Exception):
    """Base class for content provider failures."""


class ProviderUnavailable(ProviderError):
    """The provider is not configured (e.g. missing credentials)."""


class ProviderCallFailed(ProviderError):
    """A provider call failed: network error, non-2xx response or bad payload."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ProviderRateLimited(ProviderCallFailed):
    """The provider answered HTTP 429."""

    def __init__(self, message: str, retry_after: Optional[float] = None):
        super().__init__(message, status_code=429)
        self.retry_after = retry_after
