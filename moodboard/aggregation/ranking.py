"""
Composite scoring for filtered provider results.

Each signal is normalized to [0, 1], then weighted per provider kind:
  film:  vote_average 0.4, popularity 0.2, vote_count 0.2, recency 0.2
  music: popularity 0.4, feature match 0.3, artist diversity 0.3
  blog:  notes 0.4, recency 0.6
  image: likes 0.7, recency 0.3
"""
import logging
import math
from collections import Counter
from datetime import datetime, timezone
from typing import Iterable, Mapping, Optional

from ..models import ContentItem, MusicParameters, ProviderKind

logger = logging.getLogger(__name__)

FILM_WEIGHTS = {"vote_average": 0.4, "popularity": 0.2, "vote_count": 0.2, "recency": 0.2}
MUSIC_WEIGHTS = {"popularity": 0.4, "feature_match": 0.3, "diversity": 0.3}
BLOG_WEIGHTS = {"notes": 0.4, "recency": 0.6}
IMAGE_WEIGHTS = {"likes": 0.7, "recency": 0.3}

# Films decay over decades; posts and photos over a few years
RECENCY_WINDOW_YEARS = {
    ProviderKind.FILM: 50.0,
    ProviderKind.BLOG: 5.0,
    ProviderKind.IMAGE: 5.0,
}
DEFAULT_FILM_YEAR = 2000
NEUTRAL = 0.5

# Counts at which the log-scaled signals saturate
NOTES_SATURATION = 10_000
LIKES_SATURATION = 10_000


def _log_scale(value: float, saturation: float) -> float:
    if value is None or value <= 0:
        return 0.0
    return min(1.0, math.log1p(value) / math.log1p(saturation))


def recency_score(
    published_at: Optional[datetime],
    kind: ProviderKind,
    now: Optional[datetime] = None,
) -> float:
    """Linear decay from 1.0 (this year) to 0.0 at the end of the kind's window."""
    now = now or datetime.now(timezone.utc)
    window = RECENCY_WINDOW_YEARS.get(kind, 50.0)
    if published_at is None:
        if kind is not ProviderKind.FILM:
            return NEUTRAL
        years = now.year - DEFAULT_FILM_YEAR
    else:
        if published_at.tzinfo is None:
            published_at = published_at.replace(tzinfo=timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        years = (now - published_at).days / 365.25
    return max(0.0, min(1.0, 1.0 - years / window))


def feature_match(features: Mapping[str, float], targets: Mapping[str, float]) -> float:
    """Mean of 1 - |item - target| over shared features; neutral when none are shared."""
    shared = [name for name in targets if name in features]
    if not shared:
        return NEUTRAL
    total = sum(1.0 - min(1.0, abs(features[name] - targets[name])) for name in shared)
    return total / len(shared)


def film_score(item: ContentItem, now: Optional[datetime] = None) -> float:
    popularity = min(1.0, math.log10(item.popularity + 1) / 3) if item.popularity > 0 else 0.0
    vote_average = min(1.0, max(0.0, (item.vote_average or 0.0) / 10))
    vote_count = min(1.0, math.log10((item.vote_count or 0) + 1) / 5)
    return (
        FILM_WEIGHTS["vote_average"] * vote_average
        + FILM_WEIGHTS["popularity"] * popularity
        + FILM_WEIGHTS["vote_count"] * vote_count
        + FILM_WEIGHTS["recency"] * recency_score(item.published_at, ProviderKind.FILM, now)
    )


def music_score(
    item: ContentItem,
    targets: Optional[Mapping[str, float]] = None,
    artist_count: int = 1,
) -> float:
    popularity = min(1.0, max(0.0, item.popularity / 100))
    match = feature_match(item.features, targets) if targets and item.features else NEUTRAL
    diversity = 1.0 / math.sqrt(max(1, artist_count))
    return (
        MUSIC_WEIGHTS["popularity"] * popularity
        + MUSIC_WEIGHTS["feature_match"] * match
        + MUSIC_WEIGHTS["diversity"] * diversity
    )


def blog_score(item: ContentItem, now: Optional[datetime] = None) -> float:
    return (
        BLOG_WEIGHTS["notes"] * _log_scale(item.popularity, NOTES_SATURATION)
        + BLOG_WEIGHTS["recency"] * recency_score(item.published_at, ProviderKind.BLOG, now)
    )


def image_score(item: ContentItem, now: Optional[datetime] = None) -> float:
    return (
        IMAGE_WEIGHTS["likes"] * _log_scale(item.popularity, LIKES_SATURATION)
        + IMAGE_WEIGHTS["recency"] * recency_score(item.published_at, ProviderKind.IMAGE, now)
    )


def rank_items(
    items: Iterable[ContentItem],
    kind: ProviderKind,
    params=None,
    now: Optional[datetime] = None,
) -> list[ContentItem]:
    """Score every item (sets item.score) and return them best first.

    Sorting is stable, so equal scores keep their merge order.
    """
    items = list(items)
    now = now or datetime.now(timezone.utc)

    if kind is ProviderKind.MUSIC:
        targets = params.audio_features if isinstance(params, MusicParameters) else None
        artists = Counter(i.attribution_id or i.attribution for i in items)
        for item in items:
            item.score = music_score(
                item, targets, artists[item.attribution_id or item.attribution]
            )
    elif kind is ProviderKind.FILM:
        for item in items:
            item.score = film_score(item, now)
    elif kind is ProviderKind.BLOG:
        for item in items:
            item.score = blog_score(item, now)
    else:
        for item in items:
            item.score = image_score(item, now)

    items.sort(key=lambda i: i.score, reverse=True)
    return items
