"""
Merge per-provider result sets into one feed.

  round_robin: one item from each provider in turn
  by_type:     contiguous blocks per provider kind, each capped at an even
               share of the limit, leftover room filled in kind order
"""
import math
from enum import Enum
from typing import Sequence

from ..models import ContentItem, RankedResultSet


class MergePolicy(str, Enum):
    ROUND_ROBIN = "round_robin"
    BY_TYPE = "by_type"


def _key(item: ContentItem) -> tuple:
    return (item.provider, item.item_id)


def round_robin(result_sets: Sequence[RankedResultSet], limit: int) -> list[ContentItem]:
    queues = [list(rs.items) for rs in result_sets if rs.items]
    merged: list[ContentItem] = []
    seen = set()
    position = 0
    while len(merged) < limit and any(position < len(q) for q in queues):
        for queue in queues:
            if position < len(queue) and len(merged) < limit:
                item = queue[position]
                if _key(item) not in seen:
                    seen.add(_key(item))
                    merged.append(item)
        position += 1
    return merged


def by_type(result_sets: Sequence[RankedResultSet], limit: int) -> list[ContentItem]:
    groups = [list(rs.items) for rs in result_sets if rs.items]
    if not groups or limit <= 0:
        return []
    share = math.ceil(limit / len(groups))

    blocks = [group[:share] for group in groups]
    room = limit - sum(len(b) for b in blocks)
    for block, group in zip(blocks, groups):
        if room <= 0:
            break
        extra = group[len(block):len(block) + room]
        block.extend(extra)
        room -= len(extra)

    merged: list[ContentItem] = []
    seen = set()
    for block in blocks:
        for item in block:
            if _key(item) not in seen and len(merged) < limit:
                seen.add(_key(item))
                merged.append(item)
    return merged


def merge_results(
    result_sets: Sequence[RankedResultSet],
    limit: int,
    policy: MergePolicy = MergePolicy.ROUND_ROBIN,
) -> RankedResultSet:
    """Merge result sets into a single RankedResultSet of at most `limit` items."""
    policy = MergePolicy(policy)
    merge = round_robin if policy is MergePolicy.ROUND_ROBIN else by_type
    return RankedResultSet(
        provider=None,
        items=merge(result_sets, limit),
        candidates_found=sum(rs.candidates_found for rs in result_sets),
        failed_strategies=[
            f"{rs.provider.value}:{name}" if rs.provider else name
            for rs in result_sets
            for name in rs.failed_strategies
        ],
    )
