import time
from typing import Any, Dict, List, Optional

import requests

from recipe_explorer.core.errors import MfdsApiError, MfdsConfigError
from recipe_explorer.core.logging_config import get_logger
from recipe_explorer.core.settings import Settings, load_settings

logger = get_logger(__name__)


class MfdsClient:
    """Client for the food safety recipe service (COOKRCP01)."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or load_settings()

    def build_url(self, start: int, end: int) -> str:
        if not self.settings.is_configured:
            raise MfdsConfigError("MFDS_API_KEY or MFDS_BASE_URL is not set.")
        base_url = self.settings.base_url.rstrip("/")
        return f"{base_url}/{self.settings.api_key}/{self.settings.service_id}/json/{start}/{end}"

    def fetch_recipe_list(self, start: int = 1, end: int = 10) -> List[Dict[str, Any]]:
        """
        Fetch one inclusive, 1-based range of recipe rows.

        Raises:
            MfdsConfigError: when the API key or base URL is missing.
            MfdsApiError: on transport failures, non-OK status codes or invalid JSON.
        """
        url = self.build_url(start, end)
        logger.info(f"Requesting recipes {start}-{end}")

        try:
            api_start = time.time()
            response = requests.get(url, timeout=self.settings.request_timeout)
            api_time = time.time() - api_start
        except requests.exceptions.RequestException as exc:
            logger.error(f"Recipe API request {start}-{end} failed: {exc}")
            raise MfdsApiError(f"Recipe API request failed: {exc}") from exc

        if not response.ok:
            logger.error(f"Recipe API error: {response.status_code} {response.reason}")
            raise MfdsApiError(
                f"Recipe API request failed: {response.status_code}",
                status_code=response.status_code
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise MfdsApiError("Recipe API returned invalid JSON") from exc

        service = payload.get(self.settings.service_id) if isinstance(payload, dict) else None
        rows = service.get("row") if isinstance(service, dict) else None
        if not isinstance(rows, list):
            result = _result_of(payload, service)
            logger.warning(
                f"Unexpected recipe API payload for {start}-{end}: "
                f"code={result.get('CODE')} message={result.get('MSG')}"
            )
            return []

        logger.info(
            f"Recipe API returned {len(rows)} rows "
            f"(total_count={service.get('total_count')}) in {api_time:.2f}s"
        )
        return rows


def _result_of(payload: Any, service: Any) -> Dict[str, Any]:
    for container in (service, payload):
        if isinstance(container, dict) and isinstance(container.get("RESULT"), dict):
            return container["RESULT"]
    return {}
