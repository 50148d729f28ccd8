from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse
import time
import uuid
from typing import Optional
from recipe_explorer.core.errors import MfdsConfigError, RecipeNotFoundError
from recipe_explorer.core.logging_config import get_logger
from recipe_explorer.models import Recipe, RecipeListResponse, RecipePage, RecipeQuery, SortOption
from recipe_explorer.services import catalog
from recipe_explorer.services.chart_data import build_calorie_chart_data
from recipe_explorer.services.recipe_service import recipe_service
from recipe_explorer.utils.field_parser import adapt_recipe

app = FastAPI(title="Recipe Explorer API", version="0.1.0")
logger = get_logger(__name__)


def _failure(message: str) -> JSONResponse:
    body = RecipeListResponse(success=False, error=message)
    return JSONResponse(status_code=500, content=body.model_dump())


@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = str(uuid.uuid4())
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000.0
    logger.info(
        f"{request.method} {request.url.path} {response.status_code} "
        f"{duration_ms:.1f}ms request_id={request_id}"
    )
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(MfdsConfigError)
async def config_error_handler(request: Request, exc: MfdsConfigError):
    logger.error(f"Recipe API is not configured: {exc}")
    return _failure(str(exc))


@app.exception_handler(RecipeNotFoundError)
async def recipe_not_found_handler(request: Request, exc: RecipeNotFoundError):
    return JSONResponse(
        status_code=404,
        content={
            "error_code": "RECIPE_NOT_FOUND",
            "message": str(exc)
        }
    )


@app.get("/")
def read_root():
    return {"message": "Welcome to the Recipe Explorer API. Visit /docs for documentation."}


@app.get("/api/recipes", response_model=RecipeListResponse)
def list_recipes(
    start: int = Query(1, ge=1),
    end: int = Query(100, ge=1),
    max_recipes: int = Query(500, ge=1, alias="maxRecipes")
):
    """
    Fetch raw recipe rows in batches together with per-recipe calorie chart data.
    """
    logger.info(f"Recipe list requested: start={start} end={end} max_recipes={max_recipes}")
    try:
        recipes = recipe_service.load_recipes(start, end, max_recipes)
    except MfdsConfigError:
        raise
    except Exception as e:
        logger.error(f"Recipe list failed: {e}")
        return _failure(str(e) or "Failed to load recipes.")

    return RecipeListResponse(
        success=True,
        recipes=recipes,
        chart_data=build_calorie_chart_data(recipes),
        total_count=len(recipes)
    )


@app.get("/api/recipes/browse", response_model=RecipePage)
def browse_recipes(
    search: str = "",
    category: Optional[str] = None,
    cooking_method: Optional[str] = None,
    hash_tag: str = "",
    sort: SortOption = "name",
    page: int = Query(1, ge=1)
):
    """
    Filter, sort and paginate the default recipe range.
    """
    query = RecipeQuery(
        search=search,
        category=category,
        cooking_method=cooking_method,
        hash_tag=hash_tag,
        sort=sort,
        page=page
    )
    start, end, max_recipes = recipe_service.default_range
    records = recipe_service.load_recipes(start, end, max_recipes)
    return catalog.browse(records, query, recipe_service.settings.items_per_page)


@app.get("/api/recipes/{recipe_id}", response_model=Recipe)
def get_recipe(recipe_id: str):
    """
    Detail view of one recipe: nutrition, hashtags, ingredients and cooking steps.
    """
    record = recipe_service.get_recipe(recipe_id)
    if record is None:
        raise RecipeNotFoundError(recipe_id)
    return adapt_recipe(record)
