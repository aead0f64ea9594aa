"""
Multi-strategy, multi-provider content aggregation.

Per provider, three strategies run concurrently:
  A. discover - parametric query from the projected parameters
  B. search   - free-text query with the raw vibe
  C. terms    - one search per top weighted term, issued sequentially with
                a pacing delay

Every call is bounded by a timeout and fault-tolerant: a failure is logged
and contributes nothing. Results are merged in strategy order, deduplicated
by item id (first occurrence wins), filtered, ranked and truncated.
"""
import asyncio
import logging
from dataclasses import replace
from datetime import datetime
from typing import Awaitable, Callable, Iterable, Mapping, Optional, Sequence

from ..filters import ContentFilterPipeline, FilterOptions, ProductMode
from ..models import ContentItem, ProviderKind, RankedResultSet
from ..projection import product_focused_terms
from ..providers.base import ContentProvider
from ..providers.rate_limiter import RateLimiter
from .ranking import rank_items

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_REQUEST_DELAY = 0.2
DEFAULT_MAX_TERM_QUERIES = 3

STRATEGY_DISCOVER = "discover"
STRATEGY_SEARCH = "search"
STRATEGY_TERMS = "terms"


def dedupe(items: Iterable[ContentItem]) -> list[ContentItem]:
    """Drop repeated item ids, keeping the first occurrence."""
    seen = set()
    unique = []
    for item in items:
        if item.item_id in seen:
            continue
        seen.add(item.item_id)
        unique.append(item)
    return unique


class MultiProviderAggregator:
    """Fans out to content providers and returns ranked, bounded result sets."""

    def __init__(
        self,
        providers: Optional[Mapping[ProviderKind, ContentProvider]] = None,
        filter_pipeline: Optional[ContentFilterPipeline] = None,
        timeout: float = DEFAULT_TIMEOUT,
        request_delay: float = DEFAULT_REQUEST_DELAY,
        max_term_queries: int = DEFAULT_MAX_TERM_QUERIES,
    ):
        self.providers = dict(providers or {})
        self.filter_pipeline = filter_pipeline or ContentFilterPipeline()
        self.timeout = timeout
        self.request_delay = request_delay
        self.max_term_queries = max_term_queries

    async def _call(
        self,
        provider: ContentProvider,
        label: str,
        call: Callable[[], Awaitable[list[ContentItem]]],
        failures: list[str],
    ) -> list[ContentItem]:
        """Run one provider call with a timeout; any failure yields []."""
        try:
            items = await asyncio.wait_for(call(), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning(f"{provider.name} {label} timed out after {self.timeout:.1f}s")
            failures.append(label)
            return []
        except Exception as e:
            logger.warning(f"{provider.name} {label} failed: {e}")
            failures.append(label)
            return []
        return list(items or [])

    async def _strategy_terms(
        self,
        provider: ContentProvider,
        terms: Sequence[str],
        limit: int,
        failures: list[str],
    ) -> list[ContentItem]:
        pacer = RateLimiter(min_interval=self.request_delay)
        collected: list[ContentItem] = []
        for term in terms:
            await pacer.wait()
            collected.extend(
                await self._call(
                    provider,
                    f"{STRATEGY_TERMS}:{term}",
                    lambda term=term: provider.search(term, limit),
                    failures,
                )
            )
        return collected

    def _term_queries(
        self, params, vibe: Optional[str], product_mode: Optional[ProductMode]
    ) -> list[str]:
        if product_mode is not None:
            terms = product_focused_terms(vibe or "")
        else:
            terms = params.query_terms() if params is not None else []
        # The vibe itself is already queried by strategy B
        if vibe and vibe.strip():
            terms = [t for t in terms if t.lower() != vibe.strip().lower()]
        return list(dict.fromkeys(terms))[: self.max_term_queries]

    async def aggregate(
        self,
        provider: ContentProvider,
        params,
        limit: int,
        vibe: Optional[str] = None,
        product_mode: Optional[ProductMode] = None,
        filter_options: Optional[FilterOptions] = None,
        now: Optional[datetime] = None,
    ) -> RankedResultSet:
        """Query one provider with all strategies and return ranked results.

        Args:
            provider: The content provider to query.
            params: Projected parameters for the provider's kind.
            limit: Maximum number of items to return.
            vibe: Free-text vibe for the direct search strategy. Skipped
                when empty.
            product_mode: Apply the product filter (wishlist layouts).
            filter_options: Explicit thresholds; derived from params when omitted.
            now: Reference time for recency scoring.

        Returns:
            RankedResultSet with at most `limit` unique items. Empty (never
            an exception) when every strategy fails.
        """
        kind = provider.kind
        if limit <= 0:
            return RankedResultSet(provider=kind)

        failures: list[str] = []
        # Over-fetch so filtering still leaves enough to fill the limit
        fetch_limit = max(limit, 10)

        async def no_items() -> list[ContentItem]:
            return []

        strategy_a = (
            self._call(provider, STRATEGY_DISCOVER,
                       lambda: provider.discover(params, fetch_limit), failures)
            if params is not None else no_items()
        )
        strategy_b = (
            self._call(provider, STRATEGY_SEARCH,
                       lambda: provider.search(vibe, fetch_limit), failures)
            if vibe and vibe.strip() else no_items()
        )
        strategy_c = self._strategy_terms(
            provider, self._term_queries(params, vibe, product_mode), fetch_limit, failures
        )

        # Each branch fills its own list; merge happens after all settle
        results_a, results_b, results_c = await asyncio.gather(
            strategy_a, strategy_b, strategy_c
        )
        candidates = [*results_a, *results_b, *results_c]
        unique = dedupe(candidates)

        if filter_options is None:
            options = FilterOptions.from_parameters(params, product_mode)
        elif product_mode is not None:
            options = replace(filter_options, product_mode=product_mode)
        else:
            options = filter_options
        kept = self.filter_pipeline.filter(unique, kind, options)
        ranked = rank_items(kept, kind, params, now=now)[:limit]

        failed = f" (failed: {', '.join(failures)})" if failures else ""
        logger.info(
            f"{provider.name}: {len(candidates)} candidates, {len(unique)} unique, "
            f"{len(kept)} after filters, returning {len(ranked)}{failed}"
        )
        return RankedResultSet(
            provider=kind,
            items=ranked,
            candidates_found=len(candidates),
            failed_strategies=failures,
        )

    async def aggregate_all(
        self,
        parameters: Mapping[ProviderKind, object],
        vibe: Optional[str],
        limit: int,
        kinds: Optional[Iterable[ProviderKind]] = None,
        product_mode: Optional[ProductMode] = None,
        now: Optional[datetime] = None,
    ) -> dict[ProviderKind, RankedResultSet]:
        """Aggregate every requested provider kind concurrently.

        A kind without a configured provider yields an empty result set.
        """
        kinds = list(kinds) if kinds is not None else list(ProviderKind)

        async def run(kind: ProviderKind) -> RankedResultSet:
            provider = self.providers.get(kind)
            if provider is None:
                logger.info(f"No {kind.value} provider configured, skipping")
                return RankedResultSet(provider=kind)
            try:
                return await self.aggregate(
                    provider, parameters.get(kind), limit,
                    vibe=vibe, product_mode=product_mode, now=now,
                )
            except Exception as e:
                logger.error(f"{kind.value} aggregation failed: {e}")
                return RankedResultSet(provider=kind, failed_strategies=["aggregate"])

        results = await asyncio.gather(*(run(kind) for kind in kinds))
        total = sum(len(r) for r in results)
        if total == 0:
            logger.warning(f"No content from any provider for vibe '{vibe}'")
        return dict(zip(kinds, results))
