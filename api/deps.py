"""Request-scoped dependencies shared by the routers.

Caller identity comes from headers: `x-user-id` for users whose feedback is
persisted, `x-session-id` for guests. Application-wide services are read from
`app.state`, where `main.lifespan` puts them.
"""

from typing import List, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from database.deps import get_db_read
from database.feedback_helpers import get_recent_feedback, to_feedback_entries
from schemas.feedback_schema import FeedbackEntry
from services.guest_feedback import DEFAULT_SESSION_ID, GuestFeedbackStore
from services.weather import WeatherService


def get_user_id(x_user_id: Optional[str] = Header(None)) -> Optional[str]:
    return x_user_id or None


def get_session_id(x_session_id: Optional[str] = Header(None)) -> str:
    return x_session_id or DEFAULT_SESSION_ID


def get_guest_store(request: Request) -> GuestFeedbackStore:
    return request.app.state.guest_feedback


def get_weather_service(request: Request) -> WeatherService:
    return request.app.state.weather_service


def get_caller_feedback(
    user_id: Optional[str] = Depends(get_user_id),
    session_id: str = Depends(get_session_id),
    guests: GuestFeedbackStore = Depends(get_guest_store),
    db: Session = Depends(get_db_read),
) -> List[FeedbackEntry]:
    """Recent feedback for whoever is calling: stored rows for a user, the guest store otherwise."""
    if user_id:
        return to_feedback_entries(get_recent_feedback(db, user_id))
    return guests.get(session_id)
