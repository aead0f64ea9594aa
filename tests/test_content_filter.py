"""
Tests for the content filter predicates and pipeline.
"""
from datetime import datetime, timezone

import pytest

from moodboard.filters import (
    ContentFilterPipeline,
    FilterOptions,
    ProductMode,
    passes_explicit_filter,
    passes_product_filter,
    passes_quality_filter,
)
from moodboard.models import (
    BlogParameters,
    ContentItem,
    FilmParameters,
    MusicParameters,
    ProviderKind,
)


def _make_item(provider=ProviderKind.IMAGE, item_id="1", **kwargs):
    defaults = dict(
        provider=provider,
        item_id=item_id,
        title="Untitled",
        image_url="https://example.com/a.jpg",
        width=800,
        height=1000,
    )
    defaults.update(kwargs)
    return ContentItem(**defaults)


def _make_film(**kwargs):
    defaults = dict(
        provider=ProviderKind.FILM,
        item_id="550",
        title="A Film",
        image_url="https://image.tmdb.org/t/p/w500/poster.jpg",
        vote_average=7.5,
        vote_count=2000,
        published_at=datetime(2010, 5, 1, tzinfo=timezone.utc),
    )
    defaults.update(kwargs)
    return ContentItem(**defaults)


class TestExplicitFilter:
    def test_clean_item_passes(self):
        assert passes_explicit_filter(_make_item(title="Sunset over the lake"))

    def test_keyword_in_tags_rejected(self):
        assert not passes_explicit_filter(_make_item(tags=["NSFW", "art"]))

    def test_keyword_in_caption_rejected_case_insensitive(self):
        assert not passes_explicit_filter(_make_item(caption="An EROTIC poem"))

    def test_substring_match(self):
        assert not passes_explicit_filter(_make_item(summary="masturbation"))

    def test_ambiguous_terms_allowed(self):
        item = _make_item(caption="Lace underwear and a slip dress, nude lipstick")
        assert passes_explicit_filter(item)

    def test_idempotent(self):
        items = [
            _make_item(item_id="1", title="ok"),
            _make_item(item_id="2", tags=["porn"]),
            _make_item(item_id="3", caption="fine art"),
        ]
        once = [i for i in items if passes_explicit_filter(i)]
        twice = [i for i in once if passes_explicit_filter(i)]
        assert once == twice
        assert [i.item_id for i in once] == ["1", "3"]


class TestQualityFilter:
    def test_music_popularity(self):
        assert passes_quality_filter(_make_item(ProviderKind.MUSIC, popularity=30))
        assert not passes_quality_filter(_make_item(ProviderKind.MUSIC, popularity=29))

    def test_music_explicit_flag(self):
        item = _make_item(ProviderKind.MUSIC, popularity=90, explicit=True)
        assert not passes_quality_filter(item)

    def test_blog_dimensions(self):
        assert passes_quality_filter(_make_item(ProviderKind.BLOG, width=400, height=400))
        assert not passes_quality_filter(_make_item(ProviderKind.BLOG, width=399, height=800))
        assert not passes_quality_filter(_make_item(ProviderKind.BLOG, width=None, height=None))

    def test_blog_gif_rejected(self):
        item = _make_item(ProviderKind.BLOG, image_url="https://64.media.tumblr.com/x.GIF")
        assert not passes_quality_filter(item)

    def test_film_passes(self):
        assert passes_quality_filter(_make_film())

    @pytest.mark.parametrize("override", [
        {"vote_average": 4.9},
        {"vote_count": 99},
        {"image_url": None},
        {"adult": True},
        {"vote_count": None},
    ])
    def test_film_rejections(self, override):
        assert not passes_quality_filter(_make_film(**override))

    def test_film_year_window(self):
        options = FilterOptions(year_range=(2015, 2024))
        assert not passes_quality_filter(_make_film(), ProviderKind.FILM, options)
        undated = _make_film(published_at=None)
        assert passes_quality_filter(undated, ProviderKind.FILM, options)

    def test_image_aspect_ratio(self):
        assert passes_quality_filter(_make_item(width=1200, height=400))
        assert not passes_quality_filter(_make_item(width=4000, height=1000))
        assert not passes_quality_filter(_make_item(width=400, height=1500))

    def test_image_min_size(self):
        assert not passes_quality_filter(_make_item(width=300, height=300))

    def test_options_override(self):
        options = FilterOptions(min_popularity=70)
        item = _make_item(ProviderKind.MUSIC, popularity=50)
        assert not passes_quality_filter(item, ProviderKind.MUSIC, options)


class TestProductFilter:
    def test_one_non_product_indicator(self):
        item = _make_item(caption="a mountain at dawn")
        assert not passes_product_filter(item, ProductMode.STRICT)
        assert not passes_product_filter(item, ProductMode.LENIENT)

    def test_no_indicators(self):
        item = _make_item(title="", caption="hello")
        assert not passes_product_filter(item, ProductMode.STRICT)
        assert passes_product_filter(item, ProductMode.LENIENT)

    def test_product_indicator(self):
        item = _make_item(caption="my new handbag")
        assert passes_product_filter(item, ProductMode.STRICT)
        assert passes_product_filter(item, ProductMode.LENIENT)

    def test_strict_rejects_mixed(self):
        item = _make_item(caption="perfume bottle, candle and lipstick on the beach")
        assert not passes_product_filter(item, ProductMode.STRICT)
        assert passes_product_filter(item, ProductMode.LENIENT)

    def test_lenient_tie_rejected(self):
        # one product indicator ("backpack") vs one non-product ("ocean")
        item = _make_item(title="", caption="backpack by the ocean")
        assert not passes_product_filter(item, ProductMode.LENIENT)

    def test_mode_accepts_string(self):
        item = _make_item(caption="my new handbag")
        assert passes_product_filter(item, "strict")


class TestFilterOptions:
    def test_from_music_parameters(self):
        params = MusicParameters(
            genres=[], moods=[], artists=[], search_terms=[],
            audio_features={}, min_popularity=45, total_weight=1.0,
        )
        assert FilterOptions.from_parameters(params).min_popularity == 45

    def test_from_blog_parameters(self):
        params = BlogParameters(
            primary_tags=[], secondary_tags=[], related_hashtags=[], blog_types=[],
            min_dimension=500, total_weight=1.0,
        )
        options = FilterOptions.from_parameters(params, ProductMode.STRICT)
        assert options.min_width == 500
        assert options.product_mode is ProductMode.STRICT

    def test_from_film_parameters(self):
        params = FilmParameters(
            genres=[18], keywords=[], year_ranges=[(1990, 2010), (2015, 2024)],
            countries=[], vote_threshold=6.5, total_weight=1.0,
        )
        options = FilterOptions.from_parameters(params)
        assert options.year_range == (1990, 2010)
        assert options.min_vote_average == 5.0

    def test_default_film_parameters_have_no_window(self):
        params = FilmParameters(
            genres=[18], keywords=[], year_ranges=[(2000, 2024)],
            countries=[], vote_threshold=6.0, total_weight=0.0, is_default=True,
        )
        assert FilterOptions.from_parameters(params).year_range is None

    def test_none_gives_defaults(self):
        assert FilterOptions.from_parameters(None) == FilterOptions()


class TestContentFilterPipeline:
    def test_applies_all_stages(self):
        items = [
            _make_item(item_id="ok", caption="vintage camera"),
            _make_item(item_id="nsfw", caption="xxx"),
            _make_item(item_id="small", width=100, height=100, caption="vintage camera"),
            _make_item(item_id="landscape", caption="forest path"),
        ]
        pipeline = ContentFilterPipeline()

        without_product = pipeline.filter(items, ProviderKind.IMAGE, FilterOptions())
        assert [i.item_id for i in without_product] == ["ok", "landscape"]

        strict = pipeline.filter(
            items, ProviderKind.IMAGE, FilterOptions(product_mode=ProductMode.STRICT)
        )
        assert [i.item_id for i in strict] == ["ok"]

    def test_empty_input(self):
        assert ContentFilterPipeline().filter([], ProviderKind.MUSIC) == []
