"""Analytics API router: aggregated feedback for the explore page."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.config import settings
from database.deps import get_db_read
from schemas.recommendation_schema import AnalyticsResponse
from services.analytics import compute_analytics

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("", response_model=AnalyticsResponse, response_model_exclude_none=True)
def analytics(
    limit: int = Query(settings.analytics_results_limit, ge=1, le=settings.max_page_size),
    db: Session = Depends(get_db_read),
):
    """Return the most liked meals, most disliked meals and top flavor tags."""
    return AnalyticsResponse(**compute_analytics(db, limit))
