"""
Tests for tag-similarity aesthetic detection.
"""
import pytest

from moodboard.catalog import AESTHETIC_PROFILES, get_profile
from moodboard.detection import AestheticDetector, clean_tags, score_profile
from moodboard.models import AestheticProfile


def _make_profile(id="test", keywords=("alpha",), threshold=0.1, **groups):
    return AestheticProfile(
        id=id,
        name=id.title(),
        description="",
        keywords=tuple(keywords),
        colors=tuple(groups.get("colors", ())),
        emotions=tuple(groups.get("emotions", ())),
        visual_elements=tuple(groups.get("visual_elements", ())),
        lifestyle=tuple(groups.get("lifestyle", ())),
        fashion=tuple(groups.get("fashion", ())),
        confidence_threshold=threshold,
    )


class TestCleanTags:
    def test_strips_lowercases_and_drops_blanks(self):
        assert clean_tags(["  Vintage ", "", "   ", "FILM", None]) == ["vintage", "film"]


class TestScoreProfile:
    def test_empty_tags_score_zero(self):
        assert score_profile([], get_profile("girlblogger")) == 0.0

    def test_exact_match_single_tag(self):
        profile = _make_profile(keywords=("alpha",))
        assert score_profile(["alpha"], profile) == pytest.approx(1.0)

    def test_no_overlap_scores_zero(self):
        profile = _make_profile(keywords=("alpha",))
        assert score_profile(["zzz"], profile) == 0.0

    def test_substring_containment_matches(self):
        # "academia" is contained in "dark academia" and vice versa
        profile = _make_profile(keywords=("dark academia",))
        assert score_profile(["academia"], profile) > 0.0

    def test_case_insensitive_profile_tags(self):
        profile = _make_profile(keywords=("Alpha",))
        assert score_profile(["alpha"], profile) == pytest.approx(1.0)

    def test_scenario_scores(self):
        tags = ["vintage", "film photography", "melancholy"]
        assert score_profile(tags, get_profile("girlblogger")) == pytest.approx(0.59, abs=0.01)


class TestDetect:
    def setup_method(self):
        self.detector = AestheticDetector()

    def test_empty_input_returns_empty(self):
        assert self.detector.detect([], 0.0) == []
        assert self.detector.detect(["", "  "], 0.0) == []

    def test_end_to_end_scenario(self):
        results = self.detector.detect(
            ["vintage", "film photography", "melancholy"], min_confidence=0.4
        )
        assert results
        assert results[0].aesthetic_id == "girlblogger"
        assert results[0].confidence > 0.4
        assert results[0].profile is AESTHETIC_PROFILES["girlblogger"]

    def test_sorted_descending_and_above_bars(self):
        tags = ["cottage", "flowers", "baking", "vintage", "soft pink", "bows", "lace"]
        min_conf = 0.1
        results = self.detector.detect(tags, min_conf)
        confidences = [r.confidence for r in results]
        assert confidences == sorted(confidences, reverse=True)
        for r in results:
            assert r.confidence >= max(min_conf, r.profile.confidence_threshold)

    def test_profile_threshold_applies_over_lower_minimum(self):
        profile = _make_profile(keywords=("alpha", "beta"), threshold=0.9)
        detector = AestheticDetector(profiles={"test": profile})
        # cosine(["alpha"], [alpha, beta]) ~ 0.707, below the profile's 0.9
        assert detector.detect(["alpha"], 0.0) == []

    def test_min_confidence_applies_over_lower_threshold(self):
        profile = _make_profile(keywords=("alpha", "beta"), threshold=0.1)
        detector = AestheticDetector(profiles={"test": profile})
        assert detector.detect(["alpha"], 0.8) == []
        assert len(detector.detect(["alpha"], 0.5)) == 1

    def test_default_min_confidence_used(self):
        profile = _make_profile(keywords=("alpha", "beta"), threshold=0.1)
        detector = AestheticDetector(profiles={"test": profile}, default_min_confidence=0.8)
        assert detector.detect(["alpha"]) == []

    def test_no_match_returns_empty(self):
        assert self.detector.detect(["quantum chromodynamics"], 0.3) == []

    def test_deterministic(self):
        tags = ["library", "candles", "gothic", "old books"]
        first = [(r.aesthetic_id, r.confidence) for r in self.detector.detect(tags, 0.1)]
        second = [(r.aesthetic_id, r.confidence) for r in self.detector.detect(tags, 0.1)]
        assert first == second

    def test_ties_keep_catalog_order(self):
        a = _make_profile(id="first", keywords=("alpha",))
        b = _make_profile(id="second", keywords=("alpha",))
        detector = AestheticDetector(profiles={"first": a, "second": b})
        results = detector.detect(["alpha"], 0.0)
        assert [r.aesthetic_id for r in results] == ["first", "second"]

    def test_score_all_covers_catalog(self):
        scores = self.detector.score_all(["vintage"])
        assert list(scores) == list(AESTHETIC_PROFILES)
        assert all(0.0 <= s <= 1.0 for s in scores.values())
