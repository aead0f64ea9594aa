"""
Projects detected aesthetics into one query parameter bundle per provider.

Each detection contributes its provider mapping weighted by its confidence:
  - text terms and genre codes accumulate weight per value, then the
    heaviest TOP_N per field are kept
  - numeric targets (audio features) become confidence-weighted means
  - quality thresholds take the strictest (max) contributing value

With nothing to project, every provider gets a neutral default bundle so
aggregation always has something to query with.
"""
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, Mapping, Optional, Sequence

from ..catalog import PROVIDER_TAG_MAPPINGS
from ..models import (
    AUDIO_FEATURES,
    BlogParameters,
    DetectionResult,
    FilmParameters,
    ImageParameters,
    MusicParameters,
    ProviderKind,
    ProviderTagMapping,
)

logger = logging.getLogger(__name__)

TOP_N = 10


class WeightedBucket:
    """Accumulates weight per distinct value, remembering first-seen order."""

    def __init__(self):
        self._weights: Dict[Hashable, float] = {}

    def add(self, value: Hashable, weight: float) -> None:
        self._weights[value] = self._weights.get(value, 0.0) + weight

    def weight_of(self, value: Hashable) -> float:
        return self._weights.get(value, 0.0)

    def top(self, n: Optional[int] = TOP_N) -> list:
        """Values by descending weight; equal weights keep first-seen order."""
        ranked = sorted(self._weights, key=self._weights.get, reverse=True)
        return ranked if n is None else ranked[:n]

    def __len__(self) -> int:
        return len(self._weights)


def accumulate(bucket: WeightedBucket, values: Iterable[Hashable], weight: float) -> None:
    """Add `weight` to every value in `values`."""
    for value in values:
        bucket.add(value, weight)


@dataclass
class _MusicAccumulator:
    genres: WeightedBucket = field(default_factory=WeightedBucket)
    moods: WeightedBucket = field(default_factory=WeightedBucket)
    artists: WeightedBucket = field(default_factory=WeightedBucket)
    search_terms: WeightedBucket = field(default_factory=WeightedBucket)
    feature_sums: Dict[str, float] = field(default_factory=lambda: defaultdict(float))
    feature_weights: Dict[str, float] = field(default_factory=lambda: defaultdict(float))
    min_popularity: int = 0


@dataclass
class _FilmAccumulator:
    genres: WeightedBucket = field(default_factory=WeightedBucket)
    keywords: WeightedBucket = field(default_factory=WeightedBucket)
    year_ranges: WeightedBucket = field(default_factory=WeightedBucket)
    countries: WeightedBucket = field(default_factory=WeightedBucket)
    vote_threshold: float = 0.0


@dataclass
class _BlogAccumulator:
    primary_tags: WeightedBucket = field(default_factory=WeightedBucket)
    secondary_tags: WeightedBucket = field(default_factory=WeightedBucket)
    related_hashtags: WeightedBucket = field(default_factory=WeightedBucket)
    blog_types: WeightedBucket = field(default_factory=WeightedBucket)
    min_dimension: int = 0


@dataclass
class _ImageAccumulator:
    search_terms: WeightedBucket = field(default_factory=WeightedBucket)
    colors: WeightedBucket = field(default_factory=WeightedBucket)
    min_dimension: int = 0


# ── Defaults ──────────────────────────────────────────────────────────


def default_music_parameters() -> MusicParameters:
    return MusicParameters(
        genres=["pop", "indie"],
        moods=[],
        artists=[],
        search_terms=["indie", "alternative", "popular music"],
        audio_features={name: 0.5 for name in AUDIO_FEATURES},
        min_popularity=30,
        total_weight=0.0,
        is_default=True,
    )


def default_film_parameters() -> FilmParameters:
    return FilmParameters(
        genres=[18, 35],
        keywords=["indie", "contemporary"],
        year_ranges=[(2000, 2024)],
        countries=[],
        vote_threshold=6.0,
        total_weight=0.0,
        is_default=True,
    )


def default_blog_parameters() -> BlogParameters:
    return BlogParameters(
        primary_tags=["aesthetic", "mood", "vibes"],
        secondary_tags=["artsy", "indie"],
        related_hashtags=[],
        blog_types=[],
        min_dimension=400,
        total_weight=0.0,
        is_default=True,
    )


def default_image_parameters() -> ImageParameters:
    return ImageParameters(
        search_terms=["aesthetic", "minimalist", "trendy", "modern", "artistic"],
        colors=[],
        min_dimension=400,
        total_weight=0.0,
        is_default=True,
    )


def default_parameters() -> dict:
    return {
        ProviderKind.MUSIC: default_music_parameters(),
        ProviderKind.FILM: default_film_parameters(),
        ProviderKind.BLOG: default_blog_parameters(),
        ProviderKind.IMAGE: default_image_parameters(),
    }


# ── Projection ────────────────────────────────────────────────────────


class ProviderParameterProjector:
    """Merges per-aesthetic provider mappings into weighted parameter bundles."""

    def __init__(
        self,
        mappings: Optional[Mapping[str, ProviderTagMapping]] = None,
        top_n: int = TOP_N,
    ):
        self.mappings = mappings if mappings is not None else PROVIDER_TAG_MAPPINGS
        self.top_n = top_n

    def project(self, detections: Sequence[DetectionResult]) -> dict:
        """Project detections into {ProviderKind: parameters}.

        Detections without a provider mapping (or with no positive
        confidence) are skipped. If nothing contributes, the neutral
        default bundle is returned for every provider.
        """
        music = _MusicAccumulator()
        film = _FilmAccumulator()
        blog = _BlogAccumulator()
        image = _ImageAccumulator()
        total_weight = 0.0

        for detection in detections:
            mapping = self.mappings.get(detection.aesthetic_id)
            if mapping is None:
                logger.debug(f"No provider mapping for {detection.aesthetic_id}, skipping")
                continue
            weight = detection.confidence
            if weight <= 0:
                continue
            total_weight += weight

            accumulate(music.genres, mapping.music.genres, weight)
            accumulate(music.moods, mapping.music.moods, weight)
            accumulate(music.artists, mapping.music.artists, weight)
            accumulate(music.search_terms, mapping.music.search_terms, weight)
            for name, value in mapping.music.audio_features:
                music.feature_sums[name] += value * weight
                music.feature_weights[name] += weight
            music.min_popularity = max(music.min_popularity, mapping.music.min_popularity)

            accumulate(film.genres, mapping.film.genres, weight)
            accumulate(film.keywords, mapping.film.keywords, weight)
            accumulate(film.year_ranges, mapping.film.year_ranges, weight)
            accumulate(film.countries, mapping.film.countries, weight)
            film.vote_threshold = max(film.vote_threshold, mapping.film.vote_threshold)

            accumulate(blog.primary_tags, mapping.blog.primary_tags, weight)
            accumulate(blog.secondary_tags, mapping.blog.secondary_tags, weight)
            accumulate(blog.related_hashtags, mapping.blog.related_hashtags, weight)
            accumulate(blog.blog_types, mapping.blog.blog_types, weight)
            blog.min_dimension = max(blog.min_dimension, mapping.blog.min_dimension)

            accumulate(image.search_terms, mapping.image.search_terms, weight)
            accumulate(image.colors, mapping.image.colors, weight)
            image.min_dimension = max(image.min_dimension, mapping.image.min_dimension)

        if total_weight <= 0:
            logger.info("No mapped detections, using default provider parameters")
            return default_parameters()

        n = self.top_n
        return {
            ProviderKind.MUSIC: MusicParameters(
                genres=music.genres.top(n),
                moods=music.moods.top(n),
                artists=music.artists.top(n),
                search_terms=music.search_terms.top(n),
                audio_features={
                    name: music.feature_sums[name] / music.feature_weights[name]
                    for name in music.feature_sums
                    if music.feature_weights[name] > 0
                },
                min_popularity=music.min_popularity,
                total_weight=total_weight,
            ),
            ProviderKind.FILM: FilmParameters(
                genres=film.genres.top(n),
                keywords=film.keywords.top(n),
                year_ranges=film.year_ranges.top(None),
                countries=film.countries.top(n),
                vote_threshold=film.vote_threshold,
                total_weight=total_weight,
            ),
            ProviderKind.BLOG: BlogParameters(
                primary_tags=blog.primary_tags.top(n),
                secondary_tags=blog.secondary_tags.top(n),
                related_hashtags=blog.related_hashtags.top(n),
                blog_types=blog.blog_types.top(n),
                min_dimension=blog.min_dimension,
                total_weight=total_weight,
            ),
            ProviderKind.IMAGE: ImageParameters(
                search_terms=image.search_terms.top(n),
                colors=image.colors.top(n),
                min_dimension=image.min_dimension,
                total_weight=total_weight,
            ),
        }


PRODUCT_SEARCH_SUFFIXES = ("wishlist", "objects", "things", "aesthetic items", "flatlay")
PRODUCT_SEARCH_TERMS = (
    "wishlist",
    "aesthetic objects",
    "girly things",
    "cute objects",
    "shopping aesthetic",
    "flatlay",
)


def product_focused_terms(vibe: str) -> list[str]:
    """Search variants for wishlist-style (product) layouts."""
    vibe = (vibe or "").strip()
    if not vibe:
        return list(PRODUCT_SEARCH_TERMS)
    terms = [vibe] + [f"{vibe} {suffix}" for suffix in PRODUCT_SEARCH_SUFFIXES]
    terms.extend(PRODUCT_SEARCH_TERMS)
    return list(dict.fromkeys(terms))
