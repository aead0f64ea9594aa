"""
Tests for RateLimiter pacing and 429 backoff.
"""
from unittest.mock import AsyncMock, patch

import pytest

from moodboard.providers import ProviderCallFailed, ProviderRateLimited, RateLimiter


class TestRateLimiter:
    @pytest.mark.asyncio
    @patch("moodboard.providers.rate_limiter.asyncio.sleep", new_callable=AsyncMock)
    async def test_wait_paces_consecutive_calls(self, mock_sleep):
        limiter = RateLimiter(min_interval=5.0)
        await limiter.wait()
        mock_sleep.assert_not_called()
        await limiter.wait()
        mock_sleep.assert_awaited_once()
        assert 0 < mock_sleep.call_args.args[0] <= 5.0

    @pytest.mark.asyncio
    @patch("moodboard.providers.rate_limiter.asyncio.sleep", new_callable=AsyncMock)
    async def test_zero_interval_never_sleeps(self, mock_sleep):
        limiter = RateLimiter(min_interval=0.0)
        for _ in range(3):
            await limiter.wait()
        mock_sleep.assert_not_called()

    @pytest.mark.asyncio
    @patch("moodboard.providers.rate_limiter.asyncio.sleep", new_callable=AsyncMock)
    async def test_retries_after_rate_limit(self, mock_sleep):
        call = AsyncMock(side_effect=[ProviderRateLimited("429"), {"ok": True}])
        limiter = RateLimiter(min_interval=0.0, max_retries=3, backoff_base=0.5)

        result = await limiter.execute_with_retry(call)

        assert result == {"ok": True}
        assert call.await_count == 2
        mock_sleep.assert_awaited_once_with(0.5)

    @pytest.mark.asyncio
    @patch("moodboard.providers.rate_limiter.asyncio.sleep", new_callable=AsyncMock)
    async def test_exponential_backoff(self, mock_sleep):
        call = AsyncMock(side_effect=[
            ProviderRateLimited("429"),
            ProviderRateLimited("429"),
            "done",
        ])
        limiter = RateLimiter(min_interval=0.0, max_retries=3, backoff_base=0.5)
        assert await limiter.execute_with_retry(call) == "done"
        assert [c.args[0] for c in mock_sleep.await_args_list] == [0.5, 1.0]

    @pytest.mark.asyncio
    @patch("moodboard.providers.rate_limiter.asyncio.sleep", new_callable=AsyncMock)
    async def test_retry_after_header_honoured(self, mock_sleep):
        call = AsyncMock(side_effect=[ProviderRateLimited("429", retry_after=7.0), "done"])
        limiter = RateLimiter(min_interval=0.0)
        await limiter.execute_with_retry(call)
        mock_sleep.assert_awaited_once_with(7.0)

    @pytest.mark.asyncio
    @patch("moodboard.providers.rate_limiter.asyncio.sleep", new_callable=AsyncMock)
    async def test_gives_up_after_max_retries(self, mock_sleep):
        call = AsyncMock(side_effect=ProviderRateLimited("429"))
        limiter = RateLimiter(min_interval=0.0, max_retries=3)

        with pytest.raises(ProviderRateLimited):
            await limiter.execute_with_retry(call)

        assert call.await_count == 3
        assert mock_sleep.await_count == 2

    @pytest.mark.asyncio
    async def test_other_errors_propagate_immediately(self):
        call = AsyncMock(side_effect=ProviderCallFailed("500", status_code=500))
        limiter = RateLimiter(min_interval=0.0)
        with pytest.raises(ProviderCallFailed):
            await limiter.execute_with_retry(call)
        assert call.await_count == 1
