"""Shared pytest fixtures.

The database and log directory are pointed at a temporary location before any
application module is imported, since engines and loggers are created at
import time.
"""
import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="mealrec-tests-")
_DB_URL = "sqlite:///" + os.path.join(_TMP_DIR, "test.db")
os.environ["WRITE_DATABASE_URL"] = _DB_URL
os.environ["READ_DATABASE_URL"] = _DB_URL
os.environ["LOG_DIR"] = os.path.join(_TMP_DIR, "logs")
os.environ["FEEDBACK_CLEANUP_ENABLED"] = "false"

from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from database import WriteSessionLocal, init_db, write_engine  # noqa: E402
from database.models import Base  # noqa: E402
from schemas.feedback_schema import FeedbackEntry  # noqa: E402
from schemas.meal_schema import MealRecord  # noqa: E402
from schemas.recommendation_schema import QuizAnswers  # noqa: E402

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def db_session():
    """Fresh schema seeded with the bundled catalog; yields a write session."""
    Base.metadata.drop_all(bind=write_engine)
    init_db()
    session = WriteSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    """TestClient with the app lifespan running (guest store, weather client)."""
    from main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_meal():
    def _make(meal_id, **overrides):
        data = {
            "id": meal_id,
            "name": f"Meal {meal_id}",
            "primary_ingredients": [],
            "allergens": [],
            "weather": [],
            "spiciness": 0,
            "flavor_tags": [],
        }
        data.update(overrides)
        return MealRecord(**data)

    return _make


@pytest.fixture
def make_feedback():
    def _make(meal_id, feedback_type="like", days_ago=0.0):
        return FeedbackEntry(meal_id=meal_id, type=feedback_type, timestamp=NOW - timedelta(days=days_ago))

    return _make


@pytest.fixture
def calm_quiz():
    """Quiz with no surprise, so scores are exact."""
    return QuizAnswers(ingredients_to_avoid=[], spiciness=2, surprise_factor=0)
