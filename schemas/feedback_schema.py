"""Schemas for feedback entries, submission and statistics."""

from datetime import datetime
from typing import List, Literal

from pydantic import Field

from .base_schema import CamelModel

FeedbackType = Literal["like", "interested", "dislike"]
FEEDBACK_TYPES = ("like", "interested", "dislike")


class FeedbackEntry(CamelModel):
    """One user's reaction to one meal.

    All three fields are required and `type` must be one of `FEEDBACK_TYPES`;
    anything else is rejected when the entry is built.
    """

    meal_id: str = Field(..., min_length=1, examples=["12"])
    type: FeedbackType = Field(..., examples=["like"])
    timestamp: datetime


class FeedbackCreateRequest(CamelModel):
    """Payload for submitting feedback on a meal."""

    meal_id: str = Field(..., min_length=1, examples=["12"], description="ID of the meal being rated")
    type: FeedbackType = Field(..., examples=["like"], description="like, interested or dislike")


class FeedbackResponse(CamelModel):
    """Acknowledgement returned after feedback is stored."""

    ok: bool = True
    stored: Literal["database", "guest"]


class FeedbackStats(CamelModel):
    """Per-type feedback counts for one user inside the recent window."""

    like: int = 0
    interested: int = 0
    dislike: int = 0
    total: int = 0


class LikedTagsResponse(CamelModel):
    tags: List[str]
