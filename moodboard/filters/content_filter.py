"""
Predicate filters applied to raw provider results.

Every predicate takes a single ContentItem and returns True to keep it:
  1. passes_explicit_filter  - deny-list of explicit keywords
  2. passes_quality_filter   - provider-specific size/popularity/vote thresholds
  3. passes_product_filter   - product vs. non-product heuristic (wishlist layouts)

ContentFilterPipeline chains them in that order.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from ..models import (
    BlogParameters,
    ContentItem,
    FilmParameters,
    ImageParameters,
    MusicParameters,
    ProviderKind,
)

logger = logging.getLogger(__name__)

# Ambiguous clothing and skin words (lace, nude, underwear) are not listed;
# fashion captions use them constantly.
EXPLICIT_KEYWORDS = (
    "nsfw", "porn", "sex", "xxx", "explicit",
    "erotic", "sexual", "fetish", "kink", "bdsm",
    "orgasm", "masturbat", "dildo", "vibrator",
    "hardcore", "gangbang", "threesome", "orgy",
)

PRODUCT_INDICATORS = (
    # Fashion & accessories
    "bag", "handbag", "purse", "backpack", "tote", "clutch", "satchel",
    "shoes", "boots", "sneakers", "heels", "sandals", "flats",
    "jewelry", "necklace", "earrings", "bracelet", "ring", "watch",
    "dress", "outfit", "clothing", "jacket", "coat", "sweater",
    # Beauty
    "makeup", "lipstick", "perfume", "fragrance", "skincare", "cosmetics",
    "nail polish", "mascara", "foundation", "blush", "eyeshadow",
    # Objects
    "phone", "laptop", "headphones", "camera", "gadget", "tech",
    "book", "diary", "journal", "notebook", "planner",
    "candle", "home decor", "mug", "cup", "bottle", "tumbler",
    "luxury", "designer", "vintage", "collectible", "antique",
    "crystal", "ceramic", "glass", "metal", "wood",
    "sculpture", "figurine", "vase", "ornament", "decoration",
    "mirror", "frame", "artwork", "poster", "print",
    # Shopping
    "flatlay", "product", "haul", "wishlist", "shopping", "aesthetic",
    "object", "item", "thing", "stuff", "collection",
)

NON_PRODUCT_INDICATORS = (
    # Landscapes
    "landscape", "mountain", "ocean", "beach", "forest", "sky", "sunset", "sunrise",
    "nature", "outdoor", "scenery", "wilderness", "field", "desert",
    # Abstract
    "abstract", "pattern", "texture", "gradient", "background", "wallpaper",
    "geometric", "minimal", "color study", "digital art", "illustration",
    # People
    "portrait", "selfie", "group photo", "candid", "lifestyle photo",
    "street photography", "documentary", "photojournalism",
    # Architecture
    "building", "architecture", "cityscape", "urban", "street",
    "interior design", "room", "space",
)

MIN_ASPECT_RATIO = 0.3
MAX_ASPECT_RATIO = 3.0
ANIMATED_EXTENSIONS = (".gif",)


class ProductMode(str, Enum):
    STRICT = "strict"
    LENIENT = "lenient"


@dataclass
class FilterOptions:
    """Thresholds for one provider kind. Defaults are the catalog-wide baseline."""
    min_popularity: float = 30
    min_vote_average: float = 5.0
    min_vote_count: int = 100
    min_width: int = 400
    min_height: int = 400
    year_range: Optional[Tuple[int, int]] = None
    product_mode: Optional[ProductMode] = None

    @classmethod
    def from_parameters(cls, params, product_mode: Optional[ProductMode] = None):
        """Derive filter thresholds from projected provider parameters."""
        options = cls(product_mode=product_mode)
        if isinstance(params, MusicParameters):
            options.min_popularity = params.min_popularity
        elif isinstance(params, FilmParameters):
            # vote_threshold is sent to the discover query; the filter floor
            # stays at min_vote_average so searched films are not over-pruned
            if not params.is_default:
                options.year_range = params.year_range
        elif isinstance(params, (BlogParameters, ImageParameters)):
            options.min_width = params.min_dimension
            options.min_height = params.min_dimension
        return options


def _count_indicators(text: str, indicators: Iterable[str]) -> int:
    return sum(1 for indicator in indicators if indicator in text)


def passes_explicit_filter(item: ContentItem) -> bool:
    """False if any explicit keyword appears in the item's text."""
    text = item.text_blob()
    return not any(keyword in text for keyword in EXPLICIT_KEYWORDS)


def _passes_music(item: ContentItem, options: FilterOptions) -> bool:
    return item.popularity >= options.min_popularity and not item.explicit


def _passes_blog(item: ContentItem, options: FilterOptions) -> bool:
    if item.width is None or item.height is None:
        return False
    if item.width < options.min_width or item.height < options.min_height:
        return False
    image_url = (item.image_url or "").lower()
    return not any(ext in image_url for ext in ANIMATED_EXTENSIONS)


def _passes_film(item: ContentItem, options: FilterOptions) -> bool:
    if item.adult or not item.image_url:
        return False
    if (item.vote_count or 0) < options.min_vote_count:
        return False
    if (item.vote_average or 0.0) < options.min_vote_average:
        return False
    if options.year_range and item.published_at is not None:
        start, end = options.year_range
        if not start <= item.published_at.year <= end:
            return False
    return True


def _passes_image(item: ContentItem, options: FilterOptions) -> bool:
    if not item.width or not item.height:
        return False
    if item.width < options.min_width or item.height < options.min_height:
        return False
    aspect = item.width / item.height
    return MIN_ASPECT_RATIO <= aspect <= MAX_ASPECT_RATIO


_QUALITY_CHECKS = {
    ProviderKind.MUSIC: _passes_music,
    ProviderKind.BLOG: _passes_blog,
    ProviderKind.FILM: _passes_film,
    ProviderKind.IMAGE: _passes_image,
}


def passes_quality_filter(
    item: ContentItem,
    kind: Optional[ProviderKind] = None,
    options: Optional[FilterOptions] = None,
) -> bool:
    """Provider-specific minimum quality checks."""
    check = _QUALITY_CHECKS.get(kind or item.provider)
    if check is None:
        return True
    return check(item, options or FilterOptions())


def passes_product_filter(item: ContentItem, mode: ProductMode = ProductMode.LENIENT) -> bool:
    """Heuristic: does the item look like a product photo?

    strict:  reject on any non-product indicator, else require at least
             one product indicator
    lenient: accept when product indicators strictly outnumber non-product
             ones, or when neither is present; reject otherwise
    """
    text = item.text_blob()
    product_score = _count_indicators(text, PRODUCT_INDICATORS)
    non_product_score = _count_indicators(text, NON_PRODUCT_INDICATORS)

    if ProductMode(mode) is ProductMode.STRICT:
        if non_product_score > 0:
            return False
        return product_score > 0

    if product_score == 0 and non_product_score == 0:
        return True
    return product_score > non_product_score


class ContentFilterPipeline:
    """Applies explicit -> quality -> product filters in order."""

    def filter(
        self,
        items: Iterable[ContentItem],
        kind: ProviderKind,
        options: Optional[FilterOptions] = None,
    ) -> list[ContentItem]:
        options = options or FilterOptions()
        items = list(items)

        kept = [i for i in items if passes_explicit_filter(i)]
        explicit_dropped = len(items) - len(kept)

        before = len(kept)
        kept = [i for i in kept if passes_quality_filter(i, kind, options)]
        quality_dropped = before - len(kept)

        product_dropped = 0
        if options.product_mode is not None:
            before = len(kept)
            kept = [i for i in kept if passes_product_filter(i, options.product_mode)]
            product_dropped = before - len(kept)

        logger.debug(
            f"{kind.value} filter: {len(items)} in, {len(kept)} kept "
            f"(explicit={explicit_dropped}, quality={quality_dropped}, "
            f"product={product_dropped} dropped)"
        )
        return kept
