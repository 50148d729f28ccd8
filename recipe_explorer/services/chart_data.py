from typing import Any, Dict, Iterable, List, Optional, Tuple

from recipe_explorer.models import ChartPoint, MacroSlice, NutritionInfo, RadarAxis
from recipe_explorer.utils.field_parser import parse_number, recipe_name, shorten_name

CHART_POINT_LIMIT = 50
RADAR_FULL_MARK = 100.0

# (label, attribute, scale) mapping raw amounts onto a 0-100 axis
RADAR_SCALES = [
    ("Calories", "calories", 0.1),
    ("Carbohydrate", "carbohydrate", 2.0),
    ("Protein", "protein", 5.0),
    ("Fat", "fat", 5.0),
    ("Sodium", "sodium", 0.1),
]


def build_calorie_chart_data(records: Iterable[Dict[str, Any]]) -> List[ChartPoint]:
    return [
        ChartPoint(name=shorten_name(recipe_name(r)), calories=parse_number(r.get("INFO_ENG")))
        for r in records
    ]


def limit_chart_points(points: List[ChartPoint], limit: int = CHART_POINT_LIMIT) -> Tuple[List[ChartPoint], Optional[str]]:
    """Keep the first `limit` points and describe the truncation, if any."""
    if len(points) <= limit:
        return points, None
    return points[:limit], f"Showing the first {limit} of {len(points)} recipes."


def macro_breakdown(nutrition: NutritionInfo) -> List[MacroSlice]:
    slices = [
        MacroSlice(name="Carbohydrate", value=nutrition.carbohydrate or 0.0),
        MacroSlice(name="Protein", value=nutrition.protein or 0.0),
        MacroSlice(name="Fat", value=nutrition.fat or 0.0),
    ]
    return [s for s in slices if s.value > 0]


def nutrition_radar(nutrition: NutritionInfo) -> List[RadarAxis]:
    return [
        RadarAxis(
            subject=label,
            value=min((getattr(nutrition, attr) or 0.0) * scale, RADAR_FULL_MARK),
            full_mark=RADAR_FULL_MARK
        )
        for label, attr, scale in RADAR_SCALES
    ]
