"""Query helpers for feedback with a sliding time window.

Feedback only matters for a limited time: recommendations and stats look at
the last `days` days, and rows older than that are removed by
`delete_old_feedback`, which runs at startup, as a daily scheduled job
and from the command line::

    python -m database.feedback_helpers --days 14
"""

from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from core.config import settings
from core.logger import get_logger
from core.repository import BaseRepository, save
from database.models import Feedback
from schemas.feedback_schema import FEEDBACK_TYPES, FeedbackEntry

logger = get_logger("database.feedback_helpers")


def _cutoff(days: int, now: Optional[datetime] = None) -> datetime:
    # Stored timestamps are naive UTC.
    return (now or datetime.utcnow()) - timedelta(days=days)


def get_recent_feedback(db: Session, user_id: str, days: int = settings.recent_feedback_days) -> List[Feedback]:
    """Return a user's feedback from the last `days` days, newest first."""
    return (
        db.query(Feedback)
        .filter(Feedback.user_id == user_id, Feedback.timestamp >= _cutoff(days))
        .order_by(Feedback.timestamp.desc())
        .all()
    )


def get_meal_feedback(db: Session, meal_id: int, days: int = settings.recent_feedback_days) -> List[Feedback]:
    """Return all users' feedback on one meal from the last `days` days, newest first."""
    return (
        db.query(Feedback)
        .filter(Feedback.meal_id == meal_id, Feedback.timestamp >= _cutoff(days))
        .order_by(Feedback.timestamp.desc())
        .all()
    )


def to_feedback_entries(rows: Iterable[Feedback]) -> List[FeedbackEntry]:
    """Convert feedback rows into recommender entries with string meal ids."""
    return [
        FeedbackEntry(meal_id=str(row.meal_id), type=row.type, timestamp=row.timestamp)
        for row in rows
    ]


def get_feedback_stats(db: Session, user_id: str, days: int = settings.recent_feedback_days) -> Dict[str, int]:
    """Count a user's recent feedback per type.

    Returns:
        Dictionary with `like`, `interested`, `dislike` and `total` counts.
    """
    rows = (
        db.query(Feedback.type, func.count(Feedback.id))
        .filter(Feedback.user_id == user_id, Feedback.timestamp >= _cutoff(days))
        .group_by(Feedback.type)
        .all()
    )
    stats = {t: 0 for t in FEEDBACK_TYPES}
    stats["total"] = 0
    for feedback_type, count in rows:
        if feedback_type in stats:
            stats[feedback_type] = count
        stats["total"] += count
    return stats


def upsert_feedback(db: Session, user_id: str, meal_id: int, feedback_type: str) -> Feedback:
    """Create or update the single feedback row for (user, meal).

    The timestamp is reset to now on every call, so re-rating a meal restarts
    its recent window.
    """
    existing = (
        db.query(Feedback)
        .filter(Feedback.user_id == user_id, Feedback.meal_id == meal_id)
        .first()
    )
    now = datetime.utcnow()
    if existing:
        existing.type = feedback_type
        existing.timestamp = now
        return save(db, existing)
    return BaseRepository(Feedback, db).create(
        Feedback(user_id=user_id, meal_id=meal_id, type=feedback_type, timestamp=now)
    )


def delete_old_feedback(db: Session, days: int = settings.recent_feedback_days) -> int:
    """Delete feedback older than `days` days and return the number removed."""
    deleted = (
        db.query(Feedback)
        .filter(Feedback.timestamp < _cutoff(days))
        .delete(synchronize_session=False)
    )
    db.commit()
    logger.info("Deleted %s feedback entries older than %s days", deleted, days)
    return deleted


if __name__ == "__main__":
    import argparse

    from database import init_db
    from database.database import WriteSessionLocal

    p = argparse.ArgumentParser("Delete feedback older than the retention window")
    p.add_argument("--days", type=int, default=settings.recent_feedback_days)
    args = p.parse_args()
    init_db()
    session = WriteSessionLocal()
    try:
        delete_old_feedback(session, args.days)
    finally:
        session.close()
