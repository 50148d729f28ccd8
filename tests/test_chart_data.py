import pytest
from recipe_explorer.models import ChartPoint, NutritionInfo
from recipe_explorer.services.chart_data import (
    build_calorie_chart_data,
    limit_chart_points,
    macro_breakdown,
    nutrition_radar,
)
from conftest import make_record


def test_calorie_chart_data_shortens_names():
    records = [
        make_record(1, "가나다라마바사아자차카타파하가나", "450"),
        make_record(2, "Soup", ""),
    ]
    points = build_calorie_chart_data(records)
    assert points == [
        ChartPoint(name="가나다라마바사아자차카타파하가...", calories=450.0),
        ChartPoint(name="Soup", calories=0.0),
    ]


def test_limit_chart_points_truncates_with_notice():
    points = [ChartPoint(name=str(i), calories=i) for i in range(120)]
    shown, notice = limit_chart_points(points)
    assert len(shown) == 50
    assert shown[0].name == "0"
    assert "50" in notice and "120" in notice


def test_limit_chart_points_small_series():
    points = [ChartPoint(name="a", calories=1)]
    assert limit_chart_points(points) == (points, None)


def test_macro_breakdown_drops_zero_values():
    slices = macro_breakdown(NutritionInfo(carbohydrate=30, protein=0, fat=12.5))
    assert [(s.name, s.value) for s in slices] == [("Carbohydrate", 30.0), ("Fat", 12.5)]
    assert macro_breakdown(NutritionInfo()) == []


def test_nutrition_radar_scales_and_caps():
    axes = nutrition_radar(NutritionInfo(calories=250, carbohydrate=80, protein=10, fat=4, sodium=2500))
    values = {a.subject: a.value for a in axes}
    assert values["Calories"] == pytest.approx(25.0)
    assert values["Carbohydrate"] == pytest.approx(100.0)
    assert values["Protein"] == pytest.approx(50.0)
    assert values["Fat"] == pytest.approx(20.0)
    assert values["Sodium"] == pytest.approx(100.0)
    assert all(a.full_mark == 100.0 for a in axes)
