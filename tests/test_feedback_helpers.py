"""Tests for the feedback query helpers in `database/feedback_helpers.py`."""
from datetime import datetime, timedelta

from database import models
from database.feedback_helpers import (
    delete_old_feedback,
    get_feedback_stats,
    get_meal_feedback,
    get_recent_feedback,
    to_feedback_entries,
    upsert_feedback,
)


def _add(session, user_id, meal_id, feedback_type, days_ago):
    session.add(models.Feedback(
        user_id=user_id,
        meal_id=meal_id,
        type=feedback_type,
        timestamp=datetime.utcnow() - timedelta(days=days_ago),
    ))
    session.commit()


def test_upsert_keeps_one_row_per_user_and_meal(db_session):
    """Re-rating a meal updates the existing row."""
    upsert_feedback(db_session, "alice", 1, "like")
    upsert_feedback(db_session, "alice", 1, "dislike")
    rows = db_session.query(models.Feedback).filter_by(user_id="alice").all()
    assert len(rows) == 1
    assert rows[0].type == "dislike"


def test_upsert_refreshes_the_timestamp(db_session):
    """Re-rating a meal restarts its recent window."""
    _add(db_session, "bob", 2, "like", days_ago=20)
    row = upsert_feedback(db_session, "bob", 2, "interested")
    assert datetime.utcnow() - row.timestamp < timedelta(minutes=1)


def test_recent_feedback_respects_window(db_session):
    """Only the user's feedback inside the window is returned."""
    _add(db_session, "carol", 1, "like", days_ago=13)
    _add(db_session, "carol", 2, "dislike", days_ago=21)
    _add(db_session, "dave", 3, "like", days_ago=1)
    rows = get_recent_feedback(db_session, "carol", days=14)
    assert [r.meal_id for r in rows] == [1]

    entries = to_feedback_entries(rows)
    assert entries[0].meal_id == "1"
    assert entries[0].type == "like"


def test_meal_feedback_spans_users(db_session):
    """Per-meal feedback includes every user, newest first."""
    _add(db_session, "erin", 4, "like", days_ago=2)
    _add(db_session, "frank", 4, "dislike", days_ago=1)
    _add(db_session, "gina", 4, "like", days_ago=40)
    rows = get_meal_feedback(db_session, 4, days=14)
    assert [r.user_id for r in rows] == ["frank", "erin"]


def test_feedback_stats_counts_recent_rows(db_session):
    """Stats count recent rows per feedback type."""
    _add(db_session, "hank", 1, "like", days_ago=1)
    _add(db_session, "hank", 2, "like", days_ago=2)
    _add(db_session, "hank", 3, "interested", days_ago=3)
    _add(db_session, "hank", 4, "dislike", days_ago=30)
    assert get_feedback_stats(db_session, "hank", days=14) == {
        "like": 2,
        "interested": 1,
        "dislike": 0,
        "total": 3,
    }


def test_delete_old_feedback_removes_only_expired_rows(db_session):
    """Retention cleanup deletes only rows older than the window."""
    _add(db_session, "ivy", 1, "like", days_ago=15)
    _add(db_session, "ivy", 2, "like", days_ago=30)
    _add(db_session, "ivy", 3, "like", days_ago=1)
    assert delete_old_feedback(db_session, days=14) == 2
    remaining = db_session.query(models.Feedback).filter_by(user_id="ivy").all()
    assert [r.meal_id for r in remaining] == [3]


def test_scheduled_cleanup_uses_recent_window(db_session):
    """The scheduled cleanup job uses the configured window."""
    from main import run_feedback_cleanup

    _add(db_session, "jack", 1, "like", days_ago=40)
    _add(db_session, "jack", 2, "like", days_ago=2)
    assert run_feedback_cleanup() == 1
    db_session.expire_all()
    assert db_session.query(models.Feedback).filter_by(user_id="jack").count() == 1
