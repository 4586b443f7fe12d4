"""Pydantic schema package for request and response models."""

from .feedback_schema import FeedbackCreateRequest, FeedbackEntry, FeedbackResponse, FeedbackStats
from .meal_schema import MealListResponse, MealRecord, Pagination
from .recommendation_schema import AnalyticsResponse, QuizAnswers, RecommendRequest, WeatherCondition

__all__ = [
    "FeedbackCreateRequest",
    "FeedbackEntry",
    "FeedbackResponse",
    "FeedbackStats",
    "MealListResponse",
    "MealRecord",
    "Pagination",
    "AnalyticsResponse",
    "QuizAnswers",
    "RecommendRequest",
    "WeatherCondition",
]
