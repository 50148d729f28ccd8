import os
from unittest.mock import patch
from recipe_explorer.core.settings import DEFAULT_BASE_URL, Settings, load_settings

ENV_KEYS = [
    "MFDS_API_KEY", "MFDS_BASE_URL", "MFDS_SERVICE_ID", "MFDS_BATCH_SIZE", "MFDS_MAX_RECIPES",
    "MFDS_TIMEOUT_SECONDS", "RECIPE_CACHE_TTL_SECONDS", "RECIPES_PER_PAGE",
]


def load_with(env):
    clean = {k: v for k, v in os.environ.items() if k not in ENV_KEYS}
    clean.update(env)
    with patch.dict(os.environ, clean, clear=True):
        with patch("recipe_explorer.core.settings.load_dotenv"):
            return load_settings()


def test_defaults():
    settings = load_with({})
    assert settings.api_key is None
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.service_id == "COOKRCP01"
    assert settings.batch_size == 100
    assert settings.max_recipes == 500
    assert settings.cache_ttl_seconds == 300
    assert settings.items_per_page == 16
    assert not settings.is_configured


def test_values_from_environment():
    settings = load_with({
        "MFDS_API_KEY": " abc123 ",
        "MFDS_BASE_URL": "http://localhost/api",
        "MFDS_BATCH_SIZE": "50",
        "RECIPE_CACHE_TTL_SECONDS": "0",
    })
    assert settings.api_key == "abc123"
    assert settings.base_url == "http://localhost/api"
    assert settings.batch_size == 50
    assert settings.cache_ttl_seconds == 0
    assert settings.is_configured


def test_invalid_numbers_fall_back_to_defaults():
    settings = load_with({
        "MFDS_BATCH_SIZE": "lots",
        "MFDS_MAX_RECIPES": "-5",
        "MFDS_TIMEOUT_SECONDS": "0",
        "RECIPE_CACHE_TTL_SECONDS": "-1",
    })
    assert settings.batch_size == 100
    assert settings.max_recipes == 500
    assert settings.request_timeout == 10
    assert settings.cache_ttl_seconds == 0


def test_blank_base_url_is_not_configured():
    settings = Settings(api_key="k", base_url=None)
    assert not settings.is_configured
