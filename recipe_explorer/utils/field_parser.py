import re
from typing import Any, Dict, List, Optional

from recipe_explorer.models import CookingStep, NutritionInfo, Recipe

MANUAL_SLOTS = 20

NUTRITION_FIELDS = {
    "calories": "INFO_ENG",
    "carbohydrate": "INFO_CAR",
    "protein": "INFO_PRO",
    "fat": "INFO_FAT",
    "sodium": "INFO_NA",
}

# Source data tags some manual lines with a lone letter, e.g. "...넣는다.a"
_STEP_MARKER = re.compile(r"(?<![A-Za-z])\s*[A-Za-z]\s*$")
_HASH_TAG_SPLIT = re.compile(r"[,\s#]+")
_INGREDIENT_SPLIT = re.compile(r"[,\n\r]+")
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def parse_number(value: Any) -> float:
    """Parse the leading decimal number of a loosely formatted string, or 0."""
    if value is None:
        return 0.0
    text = str(value)
    if not text.strip():
        return 0.0
    cleaned = re.sub(r"[^0-9.]", "", text)
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return 0.0
    return float(match.group(0))


def parse_nutrition_info(record: Dict[str, Any]) -> NutritionInfo:
    values = {field: parse_number(record.get(key)) for field, key in NUTRITION_FIELDS.items()}
    return NutritionInfo(**values)


def get_cooking_steps(record: Dict[str, Any]) -> List[CookingStep]:
    """Collect the MANUALnn / MANUAL_IMGnn slots that carry text or an image."""
    steps = []
    for i in range(1, MANUAL_SLOTS + 1):
        description = _text(record.get(f"MANUAL{i:02d}"))
        image_url = _text(record.get(f"MANUAL_IMG{i:02d}"))
        description = _STEP_MARKER.sub("", description).strip()
        if description or image_url:
            steps.append(CookingStep(step=i, description=description, image_url=image_url))
    return steps


def parse_hash_tags(record: Dict[str, Any]) -> List[str]:
    raw = _text(record.get("HASH_TAG"))
    if not raw:
        return []
    return [normalize_hash_tag(tag) for tag in _HASH_TAG_SPLIT.split(raw) if tag.strip()]


def normalize_hash_tag(tag: str) -> str:
    tag = tag.strip()
    if not tag:
        return ""
    return tag if tag.startswith("#") else f"#{tag}"


def parse_ingredients(record: Dict[str, Any]) -> List[str]:
    raw = _text(record.get("RCP_PARTS_DTLS"))
    if not raw:
        return []
    pieces = (piece.strip() for piece in _INGREDIENT_SPLIT.split(raw))
    return [piece for piece in pieces if piece]


def main_image(record: Dict[str, Any]) -> Optional[str]:
    for key in ("ATT_FILE_NO_MAIN", "ATT_FILE_NO_MK", "MANUAL_IMG01"):
        url = _text(record.get(key))
        if url:
            return url
    return None


def shorten_name(name: str, limit: int = 15) -> str:
    name = name or ""
    if len(name) > limit:
        return name[:limit] + "..."
    return name


def recipe_id(record: Dict[str, Any]) -> str:
    return _text(record.get("RCP_SEQ"))


def recipe_name(record: Dict[str, Any]) -> str:
    return _text(record.get("RCP_NM"))


def adapt_recipe(record: Dict[str, Any]) -> Recipe:
    """Turn a raw COOKRCP01 row into the display-oriented Recipe model."""
    return Recipe(
        id=recipe_id(record),
        name=recipe_name(record),
        category=_text(record.get("RCP_PAT2")),
        cooking_method=_text(record.get("RCP_WAY2")),
        image=main_image(record),
        hash_tags=parse_hash_tags(record),
        ingredients=parse_ingredients(record),
        steps=get_cooking_steps(record),
        nutrition=parse_nutrition_info(record),
        original_data=record
    )


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()
