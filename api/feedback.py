"""Feedback endpoints.

Users identified by `x-user-id` get their feedback persisted, one row per
meal; everyone else is treated as a guest and their feedback lives in the
in-memory guest store until the session goes idle.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.deps import get_caller_feedback, get_guest_store, get_session_id, get_user_id
from core.exceptions import NotFoundError, ValidationError
from core.logger import get_logger
from core.repository import MealRepository, to_meal_record
from database.deps import get_db_read, get_db_write
from database.feedback_helpers import get_feedback_stats, upsert_feedback
from schemas.feedback_schema import (
    FeedbackCreateRequest,
    FeedbackEntry,
    FeedbackResponse,
    FeedbackStats,
    LikedTagsResponse,
)
from services.guest_feedback import GuestFeedbackStore
from services.recommender import recommendation_engine

logger = get_logger("api.feedback")
router = APIRouter(prefix="/api/feedback", tags=["feedback"])


@router.post("", response_model=FeedbackResponse)
def submit_feedback(
    payload: FeedbackCreateRequest,
    user_id: Optional[str] = Depends(get_user_id),
    session_id: str = Depends(get_session_id),
    guests: GuestFeedbackStore = Depends(get_guest_store),
    db: Session = Depends(get_db_write),
):
    """Record a like, interested or dislike reaction to a meal.

    Raises:
        NotFoundError: If a signed-in user rates a meal that does not exist.
    """
    if user_id:
        meal = MealRepository(db).get_by_public_id(payload.meal_id)
        if meal is None:
            raise NotFoundError("Meal", payload.meal_id)
        upsert_feedback(db, user_id, meal.id, payload.type)
        logger.info("Feedback recorded: user=%s meal=%s type=%s", user_id, meal.id, payload.type)
        return FeedbackResponse(stored="database")

    guests.add(session_id, payload.meal_id, payload.type)
    logger.info("Guest feedback recorded: session=%s meal=%s type=%s", session_id, payload.meal_id, payload.type)
    return FeedbackResponse(stored="guest")


@router.get("/stats", response_model=FeedbackStats)
def feedback_stats(user_id: Optional[str] = Depends(get_user_id), db: Session = Depends(get_db_read)):
    """Return the caller's recent feedback counts per type.

    Raises:
        ValidationError: If no `x-user-id` header was sent.
    """
    if not user_id:
        raise ValidationError("x-user-id header is required", field="x-user-id")
    return FeedbackStats(**get_feedback_stats(db, user_id))


@router.get("/liked-tags", response_model=LikedTagsResponse)
def liked_tags(
    recent_feedback: List[FeedbackEntry] = Depends(get_caller_feedback),
    db: Session = Depends(get_db_read),
):
    """Return flavor tags of the meals the caller liked recently."""
    repo = MealRepository(db)
    liked_ids = {entry.meal_id for entry in recent_feedback if entry.type == "like"}
    meals = [repo.get_by_public_id(meal_id) for meal_id in liked_ids]
    records = [to_meal_record(m) for m in meals if m is not None]
    return LikedTagsResponse(tags=recommendation_engine.get_liked_flavor_tags(recent_feedback, records))
