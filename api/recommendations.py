"""Recommendation endpoint.

Gathers the inputs for one recommendation (quiz answers, the caller's recent
feedback, the weather and a random sample of candidate meals), runs the
recommendation engine once and returns the selected meal.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.deps import get_caller_feedback
from core.config import settings
from core.exceptions import NoMealsAvailableError, NoSuitableMealError
from core.logger import get_logger
from core.repository import MealRepository, to_meal_record
from database.deps import get_db_read
from schemas.feedback_schema import FeedbackEntry
from schemas.meal_schema import MealRecord
from schemas.recommendation_schema import QuizAnswers, RecommendRequest, WeatherCondition
from services.recommender import recommendation_engine

logger = get_logger("api.recommendations")
router = APIRouter(prefix="/api/recommend", tags=["recommendations"])


def default_quiz() -> QuizAnswers:
    return QuizAnswers(
        ingredients_to_avoid=[],
        spiciness=settings.default_quiz_spiciness,
        surprise_factor=settings.default_quiz_surprise_factor,
    )


@router.post("", response_model=MealRecord)
def recommend(
    payload: Optional[RecommendRequest] = None,
    recent_feedback: List[FeedbackEntry] = Depends(get_caller_feedback),
    db: Session = Depends(get_db_read),
):
    """Select a single meal for the caller.

    Raises:
        NoMealsAvailableError: If the catalog returned no candidates.
        NoSuitableMealError: If every candidate was eliminated or scored at or below zero.
    """
    payload = payload or RecommendRequest()
    quiz = payload.quiz or default_quiz()
    weather = payload.weather or WeatherCondition(settings.default_weather)

    candidates = [to_meal_record(m) for m in MealRepository(db).sample(settings.candidate_sample_size)]
    if not candidates:
        logger.warning("Recommendation requested but the meal catalog is empty")
        raise NoMealsAvailableError()

    scored = recommendation_engine.score_meals(
        quiz, recent_feedback, weather, candidates, random_seed=payload.random_seed
    )
    ranked = recommendation_engine.rank(scored)
    if not ranked:
        logger.info("No suitable meal among %s candidates (avoid=%s)", len(candidates), quiz.ingredients_to_avoid)
        raise NoSuitableMealError(len(candidates))

    best = ranked[0]
    logger.info(
        "Recommended meal %s (%s) score=%.3f from %s candidates, weather=%s, feedback=%s",
        best.meal.id, best.meal.name, best.score, len(candidates), weather.value, len(recent_feedback),
    )
    logger.debug("Score breakdown for %s: %s", best.meal.id, best.breakdown)
    return best.meal
