"""
Pytest configuration and fixtures.
"""
import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from moodboard.config import Settings, get_settings


@pytest.fixture
def settings():
    """Settings with no credentials, independent of the local environment/.env."""
    return Settings(
        _env_file=None,
        spotify_client_id=None,
        spotify_client_secret=None,
        tmdb_api_key=None,
        tumblr_api_key=None,
        unsplash_access_key=None,
        request_delay=0.0,
        use_llm_classifier=False,
    )


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
