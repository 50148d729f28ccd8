from typing import List, Optional, Dict, Any, Literal
from pydantic import BaseModel, Field

SortOption = Literal["name", "calories-asc", "calories-desc"]


class NutritionInfo(BaseModel):
    calories: float = 0.0
    carbohydrate: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    sodium: float = 0.0


class CookingStep(BaseModel):
    step: int = Field(..., ge=1, le=20, description="Manual slot number the step came from")
    description: str = ""
    image_url: str = ""


class ChartPoint(BaseModel):
    name: str
    calories: float


class MacroSlice(BaseModel):
    name: str
    value: float


class RadarAxis(BaseModel):
    subject: str
    value: float
    full_mark: float = 100.0


class Recipe(BaseModel):
    id: str
    name: str
    category: str = ""
    cooking_method: str = ""
    image: Optional[str] = None
    hash_tags: List[str] = Field(default_factory=list)
    ingredients: List[str] = Field(default_factory=list)
    steps: List[CookingStep] = Field(default_factory=list)
    nutrition: NutritionInfo = Field(default_factory=NutritionInfo)
    original_data: Optional[Dict[str, Any]] = None


class RecipeSummary(BaseModel):
    id: str
    name: str
    image: Optional[str] = None
    category: str = ""
    cooking_method: str = ""
    calories: float = 0.0
    hash_tags: List[str] = Field(default_factory=list)
    extra_tag_count: int = 0


class RecipeQuery(BaseModel):
    search: str = ""
    category: Optional[str] = Field(default=None, description="Dish type, or 'all'")
    cooking_method: Optional[str] = Field(default=None, description="Cooking method, or 'all'")
    hash_tag: str = ""
    sort: SortOption = "name"
    page: int = Field(default=1, ge=1)


class RecipeListResponse(BaseModel):
    success: bool
    recipes: List[Dict[str, Any]] = Field(default_factory=list)
    chart_data: List[ChartPoint] = Field(default_factory=list)
    total_count: int = 0
    error: Optional[str] = None


class RecipePage(BaseModel):
    items: List[RecipeSummary]
    page: int
    per_page: int
    total_items: int
    total_pages: int
    page_numbers: List[int] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    cooking_methods: List[str] = Field(default_factory=list)
    hash_tags: List[str] = Field(default_factory=list)
