import math
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar

from recipe_explorer.core.logging_config import get_logger
from recipe_explorer.models import RecipePage, RecipeQuery, RecipeSummary
from recipe_explorer.utils.field_parser import (
    main_image,
    normalize_hash_tag,
    parse_hash_tags,
    parse_number,
    recipe_id,
    recipe_name,
)

logger = get_logger(__name__)

ALL = "all"
DEFAULT_PER_PAGE = 16
PAGE_WINDOW = 5
VISIBLE_TAGS = 3

T = TypeVar("T")
Record = Dict[str, Any]


def list_categories(records: Iterable[Record]) -> List[str]:
    return _distinct(records, "RCP_PAT2")


def list_cooking_methods(records: Iterable[Record]) -> List[str]:
    return _distinct(records, "RCP_WAY2")


def list_hash_tags(records: Iterable[Record]) -> List[str]:
    tags = set()
    for record in records:
        tags.update(parse_hash_tags(record))
    return sorted(tags)


def filter_recipes(
    records: Iterable[Record],
    search: str = "",
    category: Optional[str] = None,
    cooking_method: Optional[str] = None,
    hash_tag: str = ""
) -> List[Record]:
    """Keep the records that satisfy every active filter."""
    needle = (search or "").strip().lower()
    wanted_tag = normalize_hash_tag(hash_tag or "")

    def matches(record: Record) -> bool:
        if needle and needle not in recipe_name(record).lower():
            return False
        if not _is_all(category) and _field(record, "RCP_PAT2") != category.strip():
            return False
        if not _is_all(cooking_method) and _field(record, "RCP_WAY2") != cooking_method.strip():
            return False
        if wanted_tag and wanted_tag not in parse_hash_tags(record):
            return False
        return True

    return [r for r in records if matches(r)]


def sort_recipes(records: Iterable[Record], sort: str = "name") -> List[Record]:
    records = list(records)
    if sort == "name":
        return sorted(records, key=lambda record: recipe_name(record).casefold())
    if sort == "calories-asc":
        return sorted(records, key=_calories)
    if sort == "calories-desc":
        return sorted(records, key=_calories, reverse=True)
    logger.warning(f"Unknown sort option '{sort}', keeping source order")
    return records


def total_pages_for(count: int, per_page: int = DEFAULT_PER_PAGE) -> int:
    return math.ceil(count / per_page) if count else 0


def paginate(items: Sequence[T], page: int = 1, per_page: int = DEFAULT_PER_PAGE) -> Tuple[List[T], int, int]:
    """
    Slice one page out of items.

    Returns:
        (page items, clamped page number, total pages)
    """
    total_pages = total_pages_for(len(items), per_page)
    page = min(max(page, 1), max(total_pages, 1))
    start = (page - 1) * per_page
    return list(items[start:start + per_page]), page, total_pages


def page_window(current: int, total_pages: int, width: int = PAGE_WINDOW) -> List[int]:
    """Page numbers shown around the current page, at most `width` of them."""
    if total_pages <= width:
        return list(range(1, total_pages + 1))
    half = width // 2
    if current <= half + 1:
        first = 1
    elif current >= total_pages - half:
        first = total_pages - width + 1
    else:
        first = current - half
    return list(range(first, first + width))


def summarize_tags(tags: List[str], limit: int = VISIBLE_TAGS) -> Tuple[List[str], int]:
    return tags[:limit], max(0, len(tags) - limit)


def summarize(record: Record) -> RecipeSummary:
    shown, extra = summarize_tags(parse_hash_tags(record))
    return RecipeSummary(
        id=recipe_id(record),
        name=recipe_name(record),
        image=main_image(record),
        category=_field(record, "RCP_PAT2"),
        cooking_method=_field(record, "RCP_WAY2"),
        calories=_calories(record),
        hash_tags=shown,
        extra_tag_count=extra
    )


def browse(records: List[Record], query: RecipeQuery, per_page: int = DEFAULT_PER_PAGE) -> RecipePage:
    filtered = filter_recipes(
        records,
        search=query.search,
        category=query.category,
        cooking_method=query.cooking_method,
        hash_tag=query.hash_tag
    )
    ordered = sort_recipes(filtered, query.sort)
    items, page, total_pages = paginate(ordered, query.page, per_page)
    logger.debug(f"Browse matched {len(ordered)} of {len(records)} recipes, page {page}/{total_pages}")

    return RecipePage(
        items=[summarize(r) for r in items],
        page=page,
        per_page=per_page,
        total_items=len(ordered),
        total_pages=total_pages,
        page_numbers=page_window(page, total_pages),
        categories=list_categories(records),
        cooking_methods=list_cooking_methods(records),
        hash_tags=list_hash_tags(records)
    )


def _distinct(records: Iterable[Record], key: str) -> List[str]:
    values = {_field(r, key) for r in records}
    values.discard("")
    return sorted(values)


def _field(record: Record, key: str) -> str:
    value = record.get(key)
    return str(value).strip() if value is not None else ""


def _calories(record: Record) -> float:
    return parse_number(record.get("INFO_ENG"))


def _is_all(value: Optional[str]) -> bool:
    return value is None or not value.strip() or value.strip() == ALL
