"""
Altair chart builders for the recipe views.

The builders only turn chart series into Altair specs; Streamlit renders them.
"""

from typing import List

import altair as alt
import pandas as pd

from recipe_explorer.models import ChartPoint, MacroSlice, RadarAxis

COLORS = {
    "primary": "#3b82f6",
    "grid": "#f1f5f9",
    "text": "#1e293b",
}

MACRO_COLORS = ["#3b82f6", "#10b981", "#f59e0b", "#ef4444", "#8b5cf6"]


def apply_theme(chart: alt.Chart) -> alt.Chart:
    return chart.configure_view(
        strokeWidth=0,
    ).configure_axis(
        gridColor=COLORS["grid"],
        labelColor=COLORS["text"],
        titleColor=COLORS["text"],
        labelFontSize=11,
        titleFontSize=12,
        ticks=False,
    )


def build_calorie_bar_chart(points: List[ChartPoint]) -> alt.Chart:
    """
    Bar chart of calories per recipe, in the order given.

    Args:
        points: Chart points (already truncated for display)

    Returns:
        Themed bar chart
    """
    data = pd.DataFrame([p.model_dump() for p in points], columns=["name", "calories"])
    chart = alt.Chart(data).mark_bar(color=COLORS["primary"]).encode(
        x=alt.X("name:N", sort=None, title=None, axis=alt.Axis(labelAngle=-45)),
        y=alt.Y("calories:Q", title="Calories (kcal)"),
        tooltip=[
            alt.Tooltip("name:N", title="Recipe"),
            alt.Tooltip("calories:Q", title="Calories", format=".0f"),
        ],
    ).properties(height=400)
    return apply_theme(chart)


def build_macro_donut(slices: List[MacroSlice]) -> alt.Chart:
    data = pd.DataFrame([s.model_dump() for s in slices], columns=["name", "value"])
    total = data["value"].sum()
    data["share"] = data["value"] / total if total else 0.0

    chart = alt.Chart(data).mark_arc(innerRadius=40, outerRadius=80).encode(
        theta=alt.Theta("value:Q", stack=True),
        color=alt.Color(
            "name:N",
            scale=alt.Scale(range=MACRO_COLORS),
            legend=alt.Legend(title=None, orient="bottom"),
        ),
        tooltip=[
            alt.Tooltip("name:N", title="Nutrient"),
            alt.Tooltip("value:Q", title="Grams", format=".1f"),
            alt.Tooltip("share:Q", title="Share", format=".0%"),
        ],
    ).properties(height=300)
    return apply_theme(chart)


def build_nutrition_profile(axes: List[RadarAxis]) -> alt.Chart:
    """Normalized nutrient profile on a shared 0-100 scale."""
    data = pd.DataFrame([a.model_dump() for a in axes], columns=["subject", "value", "full_mark"])
    domain_max = float(data["full_mark"].max()) if not data.empty else 100.0

    chart = alt.Chart(data).mark_bar(color=COLORS["primary"], opacity=0.7).encode(
        y=alt.Y("subject:N", sort=None, title=None),
        x=alt.X("value:Q", scale=alt.Scale(domain=[0, domain_max]), title="Relative amount"),
        tooltip=[
            alt.Tooltip("subject:N", title="Nutrient"),
            alt.Tooltip("value:Q", title="Score", format=".0f"),
        ],
    ).properties(height=300)
    return apply_theme(chart)
