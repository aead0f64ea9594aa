# Aggregation module
from .aggregator import MultiProviderAggregator, dedupe
from .merge import MergePolicy, by_type, merge_results, round_robin
from .ranking import (
    BLOG_WEIGHTS,
    FILM_WEIGHTS,
    IMAGE_WEIGHTS,
    MUSIC_WEIGHTS,
    feature_match,
    rank_items,
    recency_score,
)
