"""
Data models for the moodboard engine.

Static catalog records (profiles and provider tag mappings) are frozen
dataclasses; everything produced per request is a plain dataclass.
"""
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple


class ProviderKind(str, Enum):
    """The kinds of external content source the engine fans out to."""
    MUSIC = "music"
    FILM = "film"
    BLOG = "blog"
    IMAGE = "image"


AUDIO_FEATURES = ("energy", "valence", "danceability", "acousticness")


# ── Catalog records ───────────────────────────────────────────────────


@dataclass(frozen=True)
class AestheticProfile:
    """A catalogued aesthetic with the tag groups used for similarity scoring."""
    id: str
    name: str
    description: str
    keywords: Tuple[str, ...]
    colors: Tuple[str, ...]
    emotions: Tuple[str, ...]
    visual_elements: Tuple[str, ...]
    lifestyle: Tuple[str, ...]
    fashion: Tuple[str, ...]
    confidence_threshold: float

    @property
    def descriptive_tags(self) -> Tuple[str, ...]:
        return (
            self.keywords
            + self.colors
            + self.emotions
            + self.visual_elements
            + self.lifestyle
            + self.fashion
        )


@dataclass(frozen=True)
class MusicMapping:
    genres: Tuple[str, ...]
    moods: Tuple[str, ...]
    artists: Tuple[str, ...]
    search_terms: Tuple[str, ...]
    audio_features: Tuple[Tuple[str, float], ...]  # (feature, target in [0, 1])
    min_popularity: int = 30


@dataclass(frozen=True)
class FilmMapping:
    genres: Tuple[int, ...]  # TMDb genre ids
    keywords: Tuple[str, ...]
    year_ranges: Tuple[Tuple[int, int], ...]
    countries: Tuple[str, ...]
    vote_threshold: float = 6.0


@dataclass(frozen=True)
class BlogMapping:
    primary_tags: Tuple[str, ...]
    secondary_tags: Tuple[str, ...]
    related_hashtags: Tuple[str, ...]
    blog_types: Tuple[str, ...]
    min_dimension: int = 400


@dataclass(frozen=True)
class ImageMapping:
    search_terms: Tuple[str, ...]
    colors: Tuple[str, ...]
    min_dimension: int = 400


@dataclass(frozen=True)
class ProviderTagMapping:
    """Per-provider query parameters for one aesthetic."""
    aesthetic_id: str
    music: MusicMapping
    film: FilmMapping
    blog: BlogMapping
    image: ImageMapping


# ── Detection ─────────────────────────────────────────────────────────


@dataclass
class DetectionResult:
    """One detected aesthetic and how strongly the input matched it."""
    aesthetic_id: str
    confidence: float  # 0.0-1.0
    profile: AestheticProfile

    def to_dict(self) -> dict:
        return {
            "aesthetic": self.aesthetic_id,
            "name": self.profile.name,
            "confidence": round(self.confidence, 4),
        }


# ── Projected provider parameters ─────────────────────────────────────


@dataclass
class MusicParameters:
    genres: List[str]
    moods: List[str]
    artists: List[str]
    search_terms: List[str]
    audio_features: Dict[str, float]
    min_popularity: int
    total_weight: float
    is_default: bool = False

    def query_terms(self) -> List[str]:
        return list(self.search_terms)


@dataclass
class FilmParameters:
    genres: List[int]
    keywords: List[str]
    year_ranges: List[Tuple[int, int]]
    countries: List[str]
    vote_threshold: float
    total_weight: float
    is_default: bool = False

    @property
    def year_range(self) -> Optional[Tuple[int, int]]:
        """The year window of the heaviest contributing aesthetic."""
        return self.year_ranges[0] if self.year_ranges else None

    def query_terms(self) -> List[str]:
        return list(self.keywords)


@dataclass
class BlogParameters:
    primary_tags: List[str]
    secondary_tags: List[str]
    related_hashtags: List[str]
    blog_types: List[str]
    min_dimension: int
    total_weight: float
    is_default: bool = False

    def query_terms(self) -> List[str]:
        # The first primary tag is already used by the discover strategy
        return self.primary_tags[1:] + self.secondary_tags


@dataclass
class ImageParameters:
    search_terms: List[str]
    colors: List[str]
    min_dimension: int
    total_weight: float
    is_default: bool = False

    def query_terms(self) -> List[str]:
        return self.search_terms[1:]


# ── Content ───────────────────────────────────────────────────────────


@dataclass
class ContentItem:
    """A single result parsed from a provider response."""
    provider: ProviderKind
    item_id: str
    title: str
    image_url: Optional[str] = None
    url: Optional[str] = None
    attribution: str = ""
    attribution_id: Optional[str] = None
    popularity: float = 0.0
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    explicit: bool = False
    adult: bool = False
    width: Optional[int] = None
    height: Optional[int] = None
    published_at: Optional[datetime] = None
    caption: str = ""
    summary: str = ""
    alt_text: str = ""
    tags: List[str] = field(default_factory=list)
    features: Dict[str, float] = field(default_factory=dict)
    score: Optional[float] = None

    def text_blob(self) -> str:
        """All free-text fields joined and lower-cased, for keyword filters."""
        parts = [self.title, self.caption, self.summary, self.alt_text, *self.tags]
        return " ".join(p for p in parts if p).lower()

    def to_dict(self) -> dict:
        data = asdict(self)
        data["provider"] = self.provider.value
        data["published_at"] = (
            self.published_at.isoformat() if self.published_at else None
        )
        return data


@dataclass
class RankedResultSet:
    """Final ordered output for one provider (or a merged feed)."""
    provider: Optional[ProviderKind]
    items: List[ContentItem] = field(default_factory=list)
    candidates_found: int = 0
    failed_strategies: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ContentItem]:
        return iter(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def to_dict(self) -> dict:
        return {
            "provider": self.provider.value if self.provider else None,
            "total": len(self.items),
            "candidates_found": self.candidates_found,
            "failed_strategies": list(self.failed_strategies),
            "items": [item.to_dict() for item in self.items],
        }
