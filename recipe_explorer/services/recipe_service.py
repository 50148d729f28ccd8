from typing import Any, Dict, List, Optional
import time
from recipe_explorer.core.errors import MfdsApiError
from recipe_explorer.core.logging_config import get_logger
from recipe_explorer.core.settings import Settings, load_settings
from recipe_explorer.services.mfds_client import MfdsClient
from recipe_explorer.utils.field_parser import recipe_id

logger = get_logger(__name__)

MAX_CACHE_ENTRIES = 32


class RecipeService:
    def __init__(self, client: Optional[MfdsClient] = None, settings: Optional[Settings] = None):
        self.settings = settings or (client.settings if client else load_settings())
        self.client = client or MfdsClient(self.settings)
        self.cache = {}
        self.cache_ttl_seconds = self.settings.cache_ttl_seconds

    @property
    def default_range(self):
        return 1, self.settings.max_recipes, self.settings.max_recipes

    def load_recipes(self, start: int = 1, end: int = 100, max_recipes: int = 500) -> List[Dict[str, Any]]:
        """
        Fetch recipes in sequential batches up to min(end, max_recipes).

        Stops at the first empty batch or the first batch that fails with
        MfdsApiError, keeping whatever was collected. MfdsConfigError propagates.
        """
        upper = min(end, max_recipes)
        cache_key = (start, upper)
        now = time.time()
        cached = self.cache.get(cache_key)
        if self.cache_ttl_seconds and cached and now - cached["timestamp"] < self.cache_ttl_seconds:
            logger.debug(f"Serving {len(cached['recipes'])} cached recipes for {cache_key}")
            return list(cached["recipes"])

        batch_size = self.settings.batch_size
        recipes: List[Dict[str, Any]] = []

        for batch_start in range(start, upper + 1, batch_size):
            batch_end = min(batch_start + batch_size - 1, upper)
            logger.info(f"Fetching batch {batch_start}-{batch_end}")
            try:
                batch = self.client.fetch_recipe_list(batch_start, batch_end)
            except MfdsApiError as e:
                logger.error(f"Batch {batch_start}-{batch_end} failed, stopping: {e}")
                break

            recipes.extend(batch)
            if not batch:
                logger.info(f"No recipes from {batch_start} onwards, stopping")
                break

        logger.info(f"Loaded {len(recipes)} recipes")

        if recipes and self.cache_ttl_seconds:
            self._store(cache_key, recipes, now)
        return list(recipes)

    def _store(self, cache_key, recipes, now):
        """Drop expired entries, then the oldest ones beyond MAX_CACHE_ENTRIES."""
        expired = [key for key, entry in self.cache.items() if now - entry["timestamp"] >= self.cache_ttl_seconds]
        for key in expired:
            del self.cache[key]

        self.cache[cache_key] = {
            "timestamp": now,
            "recipes": recipes
        }
        while len(self.cache) > MAX_CACHE_ENTRIES:
            oldest = min(self.cache, key=lambda key: self.cache[key]["timestamp"])
            del self.cache[oldest]

    def get_recipe(self, rid: str) -> Optional[Dict[str, Any]]:
        """Find a recipe by RCP_SEQ within the default range."""
        start, end, max_recipes = self.default_range
        wanted = str(rid).strip()
        for record in self.load_recipes(start, end, max_recipes):
            if recipe_id(record) == wanted:
                return record
        logger.warning(f"Recipe {wanted} not found")
        return None


recipe_service = RecipeService()
