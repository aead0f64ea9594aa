"""
Pacing and rate-limit backoff for provider calls.
"""
import asyncio
import logging
import time
from typing import Awaitable, Callable, TypeVar

from .errors import ProviderRateLimited

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RateLimiter:
    """Simple rate limiter with exponential backoff."""

    def __init__(
        self,
        min_interval: float = 0.2,
        max_retries: int = 3,
        backoff_base: float = 0.5,
    ):
        self.min_interval = min_interval
        self.max_retries = max(1, max_retries)
        self.backoff_base = backoff_base
        self._last_request = 0.0

    async def wait(self) -> None:
        """Wait for the minimum interval since last request."""
        now = time.monotonic()
        elapsed = now - self._last_request
        if elapsed < self.min_interval:
            await asyncio.sleep(self.min_interval - elapsed)
        self._last_request = time.monotonic()

    async def execute_with_retry(self, call: Callable[[], Awaitable[T]]) -> T:
        """Run `call()`, retrying with exponential backoff when rate limited.

        `call` is a factory so every attempt gets a fresh coroutine. Errors
        other than ProviderRateLimited propagate immediately.
        """
        last_error = None
        for attempt in range(self.max_retries):
            await self.wait()
            try:
                return await call()
            except ProviderRateLimited as e:
                last_error = e
                if attempt + 1 == self.max_retries:
                    break
                wait_time = e.retry_after or (2 ** attempt) * self.backoff_base
                logger.warning(
                    f"Rate limited, waiting {wait_time:.1f}s "
                    f"(attempt {attempt + 1}/{self.max_retries})"
                )
                await asyncio.sleep(wait_time)

        logger.error(f"Max retries exceeded: {last_error}")
        raise last_error
