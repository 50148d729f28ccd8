import os
from dataclasses import dataclass
from typing import Any, Optional

from dotenv import load_dotenv

from recipe_explorer.core.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "http://openapi.foodsafetykorea.go.kr/api"
DEFAULT_SERVICE_ID = "COOKRCP01"


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    base_url: Optional[str] = DEFAULT_BASE_URL
    service_id: str = DEFAULT_SERVICE_ID
    batch_size: int = 100
    max_recipes: int = 500
    request_timeout: int = 10
    cache_ttl_seconds: int = 300
    items_per_page: int = 16

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.base_url)


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def _as_positive_int(value: Any, default: int) -> int:
    parsed = _as_int(value, default)
    return parsed if parsed > 0 else default


def _as_str(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def load_settings() -> Settings:
    """Build settings from the environment, reading .env first if present."""
    load_dotenv(".env")

    cache_ttl = _as_int(os.getenv("RECIPE_CACHE_TTL_SECONDS"), 300)
    settings = Settings(
        api_key=_as_str(os.getenv("MFDS_API_KEY")),
        base_url=_as_str(os.getenv("MFDS_BASE_URL", DEFAULT_BASE_URL)),
        service_id=_as_str(os.getenv("MFDS_SERVICE_ID")) or DEFAULT_SERVICE_ID,
        batch_size=_as_positive_int(os.getenv("MFDS_BATCH_SIZE"), 100),
        max_recipes=_as_positive_int(os.getenv("MFDS_MAX_RECIPES"), 500),
        request_timeout=_as_positive_int(os.getenv("MFDS_TIMEOUT_SECONDS"), 10),
        cache_ttl_seconds=max(cache_ttl, 0),
        items_per_page=_as_positive_int(os.getenv("RECIPES_PER_PAGE"), 16)
    )

    if not settings.api_key:
        logger.warning("MFDS_API_KEY not set. Recipe retrieval is disabled.")
    return settings
