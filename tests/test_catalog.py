"""
Tests for the aesthetic catalog.
"""
import dataclasses

import pytest

from moodboard.catalog import (
    AESTHETIC_PROFILES,
    PROVIDER_TAG_MAPPINGS,
    get_mapping,
    get_profile,
    get_profile_by_name,
    profile_ids,
)


EXPECTED_IDS = [
    "girlblogger", "indie_sleaze", "y2k_revival", "dark_academia", "cottagecore",
    "coquette", "coastal_grandmother", "clean_girl", "cyber_fairy", "kidcore",
    "old_money",
]


class TestProfiles:
    def test_all_profiles_present_in_order(self):
        assert profile_ids() == EXPECTED_IDS

    def test_ids_match_keys(self):
        for key, profile in AESTHETIC_PROFILES.items():
            assert profile.id == key

    def test_thresholds_in_range(self):
        for profile in AESTHETIC_PROFILES.values():
            assert 0.0 < profile.confidence_threshold < 1.0

    def test_descriptive_tags_cover_all_groups(self):
        p = get_profile("girlblogger")
        tags = p.descriptive_tags
        assert "girlblogger" in tags
        assert "melancholy" in tags
        assert "film photography" in tags
        assert "mary janes" in tags
        assert len(tags) == sum(
            len(g) for g in (p.keywords, p.colors, p.emotions,
                             p.visual_elements, p.lifestyle, p.fashion)
        )

    def test_tags_are_lower_case(self):
        for profile in AESTHETIC_PROFILES.values():
            for tag in profile.descriptive_tags:
                assert tag == tag.lower(), (profile.id, tag)

    def test_get_profile_unknown(self):
        assert get_profile("vaporwave") is None

    def test_get_profile_by_name(self):
        assert get_profile_by_name("Dark Academia").id == "dark_academia"
        assert get_profile_by_name("coastal-grandmother").id == "coastal_grandmother"
        assert get_profile_by_name("y2k_revival").id == "y2k_revival"
        assert get_profile_by_name("nothing like this") is None


class TestImmutability:
    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            AESTHETIC_PROFILES["new"] = get_profile("kidcore")

    def test_profiles_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            get_profile("kidcore").confidence_threshold = 0.0

    def test_mappings_are_read_only(self):
        with pytest.raises(TypeError):
            del PROVIDER_TAG_MAPPINGS["kidcore"]


class TestMappings:
    def test_every_profile_has_a_mapping(self):
        assert set(PROVIDER_TAG_MAPPINGS) == set(AESTHETIC_PROFILES)

    def test_mapping_ids_match(self):
        for key, mapping in PROVIDER_TAG_MAPPINGS.items():
            assert mapping.aesthetic_id == key

    def test_audio_features_in_unit_range(self):
        for mapping in PROVIDER_TAG_MAPPINGS.values():
            names = [name for name, _ in mapping.music.audio_features]
            assert names == ["energy", "valence", "danceability", "acousticness"]
            for _, value in mapping.music.audio_features:
                assert 0.0 <= value <= 1.0

    def test_film_fields(self):
        for mapping in PROVIDER_TAG_MAPPINGS.values():
            assert all(isinstance(g, int) for g in mapping.film.genres)
            for start, end in mapping.film.year_ranges:
                assert start <= end
            assert mapping.film.vote_threshold >= 5.0

    def test_every_provider_has_query_terms(self):
        for mapping in PROVIDER_TAG_MAPPINGS.values():
            assert mapping.music.search_terms
            assert mapping.music.genres
            assert mapping.film.keywords
            assert mapping.blog.primary_tags
            assert mapping.image.search_terms

    def test_get_mapping(self):
        assert get_mapping("girlblogger").music.genres[0] == "indie-pop"
        assert get_mapping("unknown") is None
