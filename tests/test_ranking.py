"""
Tests for composite ranking.
"""
import math
from datetime import datetime, timezone

import pytest

from moodboard.aggregation import (
    BLOG_WEIGHTS,
    FILM_WEIGHTS,
    IMAGE_WEIGHTS,
    MUSIC_WEIGHTS,
    feature_match,
    rank_items,
    recency_score,
)
from moodboard.models import ContentItem, MusicParameters, ProviderKind

NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)


def _make_item(provider, item_id, **kwargs):
    return ContentItem(provider=provider, item_id=item_id, title=item_id, **kwargs)


def _music_params(**features):
    return MusicParameters(
        genres=[], moods=[], artists=[], search_terms=[],
        audio_features=features, min_popularity=30, total_weight=1.0,
    )


class TestWeights:
    @pytest.mark.parametrize("weights", [FILM_WEIGHTS, MUSIC_WEIGHTS, BLOG_WEIGHTS, IMAGE_WEIGHTS])
    def test_weights_sum_to_one(self, weights):
        assert sum(weights.values()) == pytest.approx(1.0)


class TestRecency:
    def test_this_year_is_one(self):
        assert recency_score(NOW, ProviderKind.FILM, NOW) == pytest.approx(1.0)

    def test_film_decays_over_fifty_years(self):
        published = datetime(2000, 1, 1, tzinfo=timezone.utc)
        assert recency_score(published, ProviderKind.FILM, NOW) == pytest.approx(0.5, abs=0.01)

    def test_old_film_clamps_to_zero(self):
        published = datetime(1920, 1, 1, tzinfo=timezone.utc)
        assert recency_score(published, ProviderKind.FILM, NOW) == 0.0

    def test_missing_film_date_defaults_to_2000(self):
        assert recency_score(None, ProviderKind.FILM, NOW) == pytest.approx(1 - 25 / 50)

    def test_missing_post_date_is_neutral(self):
        assert recency_score(None, ProviderKind.BLOG, NOW) == 0.5

    def test_naive_datetime_accepted(self):
        assert recency_score(datetime(2024, 12, 31), ProviderKind.IMAGE, NOW) > 0.99


class TestFeatureMatch:
    def test_perfect_match(self):
        assert feature_match({"energy": 0.4}, {"energy": 0.4}) == 1.0

    def test_average_over_shared(self):
        score = feature_match(
            {"energy": 0.5, "valence": 1.0, "tempo": 120},
            {"energy": 0.3, "valence": 0.5},
        )
        assert score == pytest.approx(((1 - 0.2) + (1 - 0.5)) / 2)

    def test_no_shared_is_neutral(self):
        assert feature_match({}, {"energy": 0.4}) == 0.5


class TestRankItems:
    def test_film_ordering(self):
        good = _make_item(
            ProviderKind.FILM, "good", vote_average=8.5, vote_count=20000,
            popularity=80.0, published_at=datetime(2020, 1, 1, tzinfo=timezone.utc),
        )
        weak = _make_item(
            ProviderKind.FILM, "weak", vote_average=5.5, vote_count=150,
            popularity=3.0, published_at=datetime(1985, 1, 1, tzinfo=timezone.utc),
        )
        ranked = rank_items([weak, good], ProviderKind.FILM, now=NOW)
        assert [i.item_id for i in ranked] == ["good", "weak"]
        assert all(0.0 <= i.score <= 1.0 for i in ranked)

    def test_film_score_formula(self):
        item = _make_item(
            ProviderKind.FILM, "f", vote_average=8.0, vote_count=9999,
            popularity=99.0, published_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
        )
        rank_items([item], ProviderKind.FILM, now=NOW)
        expected = (
            0.4 * 0.8
            + 0.2 * math.log10(100) / 3
            + 0.2 * math.log10(10000) / 5
            + 0.2 * 1.0
        )
        assert item.score == pytest.approx(expected)

    def test_music_artist_diversity(self):
        items = [
            _make_item(ProviderKind.MUSIC, "a1", popularity=70, attribution_id="artist-a"),
            _make_item(ProviderKind.MUSIC, "a2", popularity=70, attribution_id="artist-a"),
            _make_item(ProviderKind.MUSIC, "b1", popularity=70, attribution_id="artist-b"),
        ]
        ranked = rank_items(items, ProviderKind.MUSIC)
        assert ranked[0].item_id == "b1"
        assert ranked[1].score == pytest.approx(0.4 * 0.7 + 0.3 * 0.5 + 0.3 / math.sqrt(2))

    def test_music_feature_match(self):
        params = _music_params(energy=0.2, valence=0.3)
        close = _make_item(ProviderKind.MUSIC, "close", popularity=50, attribution_id="x",
                           features={"energy": 0.2, "valence": 0.3})
        far = _make_item(ProviderKind.MUSIC, "far", popularity=50, attribution_id="y",
                         features={"energy": 0.9, "valence": 0.9})
        ranked = rank_items([far, close], ProviderKind.MUSIC, params)
        assert [i.item_id for i in ranked] == ["close", "far"]

    def test_music_without_features_is_neutral(self):
        item = _make_item(ProviderKind.MUSIC, "m", popularity=100, attribution_id="x")
        rank_items([item], ProviderKind.MUSIC, _music_params(energy=0.5))
        assert item.score == pytest.approx(0.4 + 0.3 * 0.5 + 0.3)

    def test_blog_prefers_recent_and_noted(self):
        fresh = _make_item(ProviderKind.BLOG, "fresh", popularity=5000,
                           published_at=datetime(2024, 12, 1, tzinfo=timezone.utc))
        stale = _make_item(ProviderKind.BLOG, "stale", popularity=10,
                           published_at=datetime(2016, 1, 1, tzinfo=timezone.utc))
        ranked = rank_items([stale, fresh], ProviderKind.BLOG, now=NOW)
        assert [i.item_id for i in ranked] == ["fresh", "stale"]

    def test_image_likes_dominate(self):
        liked = _make_item(ProviderKind.IMAGE, "liked", popularity=5000,
                           published_at=datetime(2018, 1, 1, tzinfo=timezone.utc))
        new = _make_item(ProviderKind.IMAGE, "new", popularity=2,
                         published_at=datetime(2024, 12, 1, tzinfo=timezone.utc))
        ranked = rank_items([new, liked], ProviderKind.IMAGE, now=NOW)
        assert ranked[0].item_id == "liked"

    def test_stable_for_equal_scores(self):
        items = [_make_item(ProviderKind.IMAGE, str(n), popularity=10) for n in range(5)]
        ranked = rank_items(items, ProviderKind.IMAGE, now=NOW)
        assert [i.item_id for i in ranked] == ["0", "1", "2", "3", "4"]
