"""
Content provider interface and shared HTTP handling.
"""
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Optional

import httpx

from ..models import ContentItem, ProviderKind
from .errors import ProviderCallFailed, ProviderRateLimited
from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def parse_date(value: Any) -> Optional[datetime]:
    """Parse provider dates: ISO strings, partial dates ("1999", "1999-05") or epoch seconds."""
    if value is None or value == "":
        return None
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    text = str(value).strip()
    for fmt in ("%Y-%m-%d", "%Y-%m", "%Y"):
        try:
            return datetime.strptime(text, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            continue
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        logger.debug(f"Unparseable date: {value!r}")
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _retry_after(response: httpx.Response) -> Optional[float]:
    value = response.headers.get("Retry-After")
    try:
        return float(value) if value is not None else None
    except ValueError:
        return None


class ContentProvider(ABC):
    """A source of ContentItems for one provider kind."""

    kind: ProviderKind
    name: str = "provider"

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        rate_limiter: Optional[RateLimiter] = None,
    ):
        self._client = client
        self._owns_client = client is None
        self.timeout = timeout
        self.rate_limiter = rate_limiter or RateLimiter(min_interval=0.0)

    @abstractmethod
    async def search(self, query: str, limit: int) -> list[ContentItem]:
        """Free-text search."""

    @abstractmethod
    async def discover(self, params, limit: int) -> list[ContentItem]:
        """Parametric query using projected provider parameters."""

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def _send(self, method: str, url: str, **kwargs) -> Any:
        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise ProviderCallFailed(f"{self.name} request failed: {e}") from e

        if response.status_code == 429:
            raise ProviderRateLimited(
                f"{self.name} rate limited", retry_after=_retry_after(response)
            )
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ProviderCallFailed(
                f"{self.name} API error: {e}", status_code=response.status_code
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise ProviderCallFailed(f"{self.name} returned invalid JSON") from e

    async def _request_json(self, method: str, url: str, **kwargs) -> Any:
        """Send a request with 429 backoff and return the decoded JSON body."""
        return await self.rate_limiter.execute_with_retry(
            lambda: self._send(method, url, **kwargs)
        )
