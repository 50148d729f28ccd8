import os

import requests
import streamlit as st

from recipe_explorer.models import ChartPoint, NutritionInfo
from recipe_explorer.services.chart_data import limit_chart_points, macro_breakdown, nutrition_radar
from recipe_explorer.ui.charts import build_calorie_bar_chart, build_macro_donut, build_nutrition_profile

# Configuration
API_URL = os.getenv("API_URL", "http://127.0.0.1:8000").rstrip("/")
API_DOCS_URL = os.getenv("API_DOCS_URL", f"{API_URL}/docs")
MAX_RECIPES = 500
GRID_COLUMNS = 4

SORT_LABELS = {
    "name": "Name",
    "calories-asc": "Calories: low to high",
    "calories-desc": "Calories: high to low",
}

FILTER_DEFAULTS = {
    "search": "",
    "category": "all",
    "cooking_method": "all",
    "hash_tag": "",
    "sort": "name",
    "page": 1,
}


@st.cache_data(ttl=300, show_spinner=False)
def fetch_recipe_list() -> dict:
    response = requests.get(
        f"{API_URL}/api/recipes",
        params={"start": 1, "end": MAX_RECIPES, "maxRecipes": MAX_RECIPES},
        timeout=120
    )
    data = response.json()
    if response.status_code != 200 or not data.get("success"):
        raise RuntimeError(data.get("error") or f"API request failed: {response.status_code}")
    return data


def fetch_page(params: dict) -> dict:
    response = requests.get(f"{API_URL}/api/recipes/browse", params=params, timeout=120)
    response.raise_for_status()
    return response.json()


def fetch_recipe(recipe_id: str):
    response = requests.get(f"{API_URL}/api/recipes/{recipe_id}", timeout=120)
    if response.status_code == 404:
        return None
    response.raise_for_status()
    return response.json()


def init_state() -> None:
    for key, value in FILTER_DEFAULTS.items():
        st.session_state.setdefault(key, value)


def reset_page() -> None:
    st.session_state["page"] = 1


def reset_filters() -> None:
    for key, value in FILTER_DEFAULTS.items():
        if key != "sort":
            st.session_state[key] = value


def set_state(key: str, value) -> None:
    st.session_state[key] = value
    if key != "page":
        reset_page()


def open_recipe(recipe_id: str) -> None:
    st.query_params["recipe"] = recipe_id


def close_recipe() -> None:
    st.query_params.clear()


def render_chart_section() -> None:
    data = fetch_recipe_list()
    points = [ChartPoint(**p) for p in data.get("chart_data", [])]
    st.subheader(f"Calories per recipe ({len(points)} total)" if points else "Calories per recipe")
    if not points:
        st.info("No chart data available.")
        return
    shown, notice = limit_chart_points(points)
    st.altair_chart(build_calorie_bar_chart(shown), width="stretch")
    if notice:
        st.caption(notice)


def render_filters(page: dict) -> None:
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.text_input("Search recipes", key="search", placeholder="Search by recipe name...", on_change=reset_page)
    with c2:
        options = ["all"] + page["categories"]
        if st.session_state["category"] not in options:
            st.session_state["category"] = "all"
        st.selectbox("Dish type", options, key="category",
                     format_func=lambda v: "All" if v == "all" else v, on_change=reset_page)
    with c3:
        options = ["all"] + page["cooking_methods"]
        if st.session_state["cooking_method"] not in options:
            st.session_state["cooking_method"] = "all"
        st.selectbox("Cooking method", options, key="cooking_method",
                     format_func=lambda v: "All" if v == "all" else v, on_change=reset_page)
    with c4:
        options = [""] + page["hash_tags"]
        if st.session_state["hash_tag"] not in options:
            st.session_state["hash_tag"] = ""
        st.selectbox("Hashtag", options, key="hash_tag",
                     format_func=lambda v: v or "All", on_change=reset_page)

    sort_cols = st.columns(len(SORT_LABELS))
    for col, (value, label) in zip(sort_cols, SORT_LABELS.items()):
        with col:
            st.button(
                label,
                key=f"sort-{value}",
                type="primary" if st.session_state["sort"] == value else "secondary",
                on_click=set_state,
                args=("sort", value),
                width="stretch"
            )


def render_card(item: dict) -> None:
    with st.container(border=True):
        if item.get("image"):
            st.image(item["image"], width="stretch")
        else:
            st.caption("No image")
        st.markdown(f"**{item['name']}**")
        if item["hash_tags"]:
            tag_cols = st.columns(len(item["hash_tags"]) + (1 if item["extra_tag_count"] else 0))
            for i, tag in enumerate(item["hash_tags"]):
                tag_cols[i].button(tag, key=f"tag-{item['id']}-{i}", on_click=set_state, args=("hash_tag", tag))
            if item["extra_tag_count"]:
                tag_cols[-1].caption(f"+{item['extra_tag_count']}")
        st.caption(f"{item['calories']:.0f} kcal")
        st.button("View recipe", key=f"open-{item['id']}", on_click=open_recipe, args=(item["id"],))


def render_pagination(page: dict) -> None:
    if page["total_pages"] <= 1:
        return
    current = page["page"]
    cols = st.columns(len(page["page_numbers"]) + 2)
    cols[0].button("Previous", key="page-prev", disabled=current == 1,
                   on_click=set_state, args=("page", max(1, current - 1)))
    for col, number in zip(cols[1:-1], page["page_numbers"]):
        col.button(str(number), key=f"page-{number}",
                   type="primary" if number == current else "secondary",
                   on_click=set_state, args=("page", number))
    cols[-1].button("Next", key="page-next", disabled=current == page["total_pages"],
                    on_click=set_state, args=("page", min(page["total_pages"], current + 1)))


def render_list() -> None:
    st.title("Recipe Explorer")
    st.markdown("Browse public recipes with their nutrition information.")

    render_chart_section()
    st.divider()

    page = fetch_page({
        "search": st.session_state["search"],
        "category": st.session_state["category"],
        "cooking_method": st.session_state["cooking_method"],
        "hash_tag": st.session_state["hash_tag"],
        "sort": st.session_state["sort"],
        "page": st.session_state["page"],
    })
    st.session_state["page"] = page["page"]

    st.subheader(f"Recipes ({page['total_items']})")
    render_filters(page)

    if not page["items"]:
        st.warning("No recipes match the current filters.")
        st.button("Reset filters", on_click=reset_filters)
        return

    for row_start in range(0, len(page["items"]), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for col, item in zip(cols, page["items"][row_start:row_start + GRID_COLUMNS]):
            with col:
                render_card(item)

    render_pagination(page)


def render_detail(recipe_id: str) -> None:
    st.button("Back to list", on_click=close_recipe)
    recipe = fetch_recipe(recipe_id)
    if recipe is None:
        st.error("Recipe not found.")
        return

    st.title(recipe["name"])
    st.caption(" | ".join(v for v in (recipe["category"], recipe["cooking_method"]) if v))
    if recipe["hash_tags"]:
        st.markdown(" ".join(f"`{tag}`" for tag in recipe["hash_tags"]))

    c1, c2 = st.columns([1, 1])
    with c1:
        if recipe.get("image"):
            st.image(recipe["image"], width="stretch")
        else:
            st.caption("No image")
    with c2:
        st.markdown("**Ingredients**")
        if recipe["ingredients"]:
            for ing in recipe["ingredients"]:
                st.markdown(f"- {ing}")
        else:
            st.caption("No ingredient information.")

    nutrition = NutritionInfo(**recipe["nutrition"])
    st.subheader("Nutrition")
    m1, m2, m3, m4, m5 = st.columns(5)
    m1.metric("Calories", f"{nutrition.calories:.0f} kcal")
    m2.metric("Carbohydrate", f"{nutrition.carbohydrate:.1f} g")
    m3.metric("Protein", f"{nutrition.protein:.1f} g")
    m4.metric("Fat", f"{nutrition.fat:.1f} g")
    m5.metric("Sodium", f"{nutrition.sodium:.0f} mg")

    chart1, chart2 = st.columns(2)
    with chart1:
        st.markdown("**Macronutrient split**")
        slices = macro_breakdown(nutrition)
        if slices:
            st.altair_chart(build_macro_donut(slices), width="stretch")
        else:
            st.caption("No macronutrient data.")
    with chart2:
        st.markdown("**Nutrition profile**")
        st.altair_chart(build_nutrition_profile(nutrition_radar(nutrition)), width="stretch")

    st.subheader("Instructions")
    if not recipe["steps"]:
        st.caption("No cooking steps available.")
    for step in recipe["steps"]:
        s1, s2 = st.columns([3, 1])
        with s1:
            st.markdown(f"**{step['step']}.** {step['description']}")
        with s2:
            if step.get("image_url"):
                st.image(step["image_url"], width="stretch")
        st.divider()


st.set_page_config(page_title="Recipe Explorer", layout="wide")
init_state()

with st.sidebar:
    st.link_button("API Docs", API_DOCS_URL, type="secondary", width="stretch")

try:
    selected = st.query_params.get("recipe")
    if selected:
        render_detail(selected)
    else:
        render_list()
except requests.exceptions.ConnectionError:
    st.error("Could not connect to the API. Is the backend running? (`uvicorn recipe_explorer.main:app`)")
except Exception as e:
    st.error(f"An error occurred: {str(e)}")
