"""Database helpers: engines, session factories and DB initialization.

Provides read/write session factories and an `init_db` helper that creates
tables and seeds the bundled meal catalog when the meals table is empty.
"""

import json

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.config import settings
from core.logger import get_logger
from .models import Base, Meal
from data.meals_dataset import MEALS_DATA

logger = get_logger("database")

# Read/Write partitioning pattern. In production, set WRITE_DATABASE_URL and
# READ_DATABASE_URL to different instances; locally both share one SQLite file.
WRITE_DATABASE_URL = settings.write_database_url
READ_DATABASE_URL = settings.read_database_url


def _connect_args(url: str) -> dict:
    return {"check_same_thread": False} if url.startswith("sqlite") else {}


write_engine = create_engine(WRITE_DATABASE_URL, connect_args=_connect_args(WRITE_DATABASE_URL))
read_engine = create_engine(READ_DATABASE_URL, connect_args=_connect_args(READ_DATABASE_URL))

WriteSessionLocal = sessionmaker(bind=write_engine)
ReadSessionLocal = sessionmaker(bind=read_engine)

LIST_FIELDS = ("primary_ingredients", "allergens", "weather", "time_of_day", "flavor_tags")


def meal_from_dict(item: dict) -> Meal:
    """Build a `Meal` row from a plain dictionary, JSON-encoding list fields."""
    return Meal(
        name=item["name"],
        cuisine=item.get("cuisine"),
        description=item.get("description"),
        image_url=item.get("image_url"),
        spiciness=item.get("spiciness"),
        heaviness=item.get("heaviness"),
        **{f: json.dumps(list(item.get(f) or [])) for f in LIST_FIELDS},
    )


def init_db():
    """Create all tables and seed the meal catalog if it is empty."""
    Base.metadata.create_all(bind=write_engine)
    session = WriteSessionLocal()
    try:
        if session.query(Meal).count() == 0:
            session.add_all(meal_from_dict(item) for item in MEALS_DATA)
            session.commit()
            logger.info("Seeded %s meals", len(MEALS_DATA))
    finally:
        session.close()


def get_write_session():
    """Yield a write-enabled SQLAlchemy session for the request scope."""
    db = WriteSessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_read_session():
    """Yield a read-only SQLAlchemy session for the request scope.

    Used for read endpoints where routing reads to a replica may be desired.
    """
    db = ReadSessionLocal()
    try:
        yield db
    finally:
        db.close()
