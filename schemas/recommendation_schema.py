"""Schemas for recommendation requests, weather and analytics responses."""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base_schema import CamelModel


class WeatherCondition(str, Enum):
    """Coarse weather classification used for the weather bonus."""

    COLD = "cold"
    HOT = "hot"
    RAIN = "rain"
    NORMAL = "normal"


class QuizAnswers(CamelModel):
    """A user's preference quiz.

    Numeric answers are unbounded: values outside the nominal
    ranges still score, they just move further from typical meals.
    """

    ingredients_to_avoid: List[str] = Field(default_factory=list, examples=[["nuts", "dairy"]])
    spiciness: int = Field(2, examples=[2], description="Preferred spiciness, nominally 0-5")
    surprise_factor: int = Field(5, examples=[5], description="Randomness dial, nominally 0-10")


class RecommendRequest(CamelModel):
    """Body of POST /api/recommend. Every field is optional."""

    quiz: Optional[QuizAnswers] = None
    weather: Optional[WeatherCondition] = Field(None, examples=["rain"])
    random_seed: Optional[int] = Field(None, examples=[12345], description="Pin the surprise draws for reproducible results")


class WeatherResponse(CamelModel):
    condition: WeatherCondition


class MealLikeCount(CamelModel):
    """A meal and how many like (or dislike) feedback rows it has."""

    id: str
    name: str
    cuisine: Optional[str] = None
    image_url: Optional[str] = None
    flavor_tags: List[str] = Field(default_factory=list)
    like_count: Optional[int] = None
    dislike_count: Optional[int] = None


class FlavorTagCount(CamelModel):
    tag: str
    count: int


class AnalyticsResponse(CamelModel):
    """Aggregated feedback for the explore page."""

    top_liked_meals: List[MealLikeCount]
    top_disliked_meals: List[MealLikeCount]
    top_flavor_tags: List[FlavorTagCount]
