"""Schemas for meal records and meal listings."""

from typing import List, Optional

from pydantic import Field

from .base_schema import CamelModel


class MealRecord(CamelModel):
    """A meal as seen by the recommender and returned by the API.

    Only `id` is required. List fields default to empty and `spiciness` may be
    missing, in which case scoring treats it as 0.
    """

    id: str = Field(..., min_length=1, examples=["12"], description="Meal identifier")
    name: str = Field("", examples=["Rainy Day Soup"])
    cuisine: Optional[str] = Field(None, examples=["French"])
    description: Optional[str] = None
    image_url: Optional[str] = None
    primary_ingredients: List[str] = Field(default_factory=list, examples=[["vegetables", "broth"]])
    allergens: List[str] = Field(default_factory=list, examples=[["celery"]])
    weather: List[str] = Field(default_factory=list, examples=[["rain", "cold"]], description="Weather conditions the meal suits")
    time_of_day: List[str] = Field(default_factory=list, examples=[["lunch", "dinner"]])
    spiciness: Optional[int] = Field(None, examples=[1], description="0 (mild) to 5 (very hot)")
    heaviness: Optional[int] = Field(None, examples=[2], description="0 (light) to 5 (very filling)")
    flavor_tags: List[str] = Field(default_factory=list, examples=[["warming", "comfort"]])


class Pagination(CamelModel):
    """Paging metadata attached to meal listings."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class MealListResponse(CamelModel):
    """A page of meals."""

    meals: List[MealRecord]
    pagination: Pagination


class RandomMealResponse(CamelModel):
    meal: MealRecord
