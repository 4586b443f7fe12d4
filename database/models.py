"""SQLAlchemy ORM models for the meal recommendation service.

Two tables back the service: `meals` (the catalog) and `feedback` (one row per
user and meal). List-valued meal attributes are stored as JSON-encoded text.
Models stay behavior-free apart from small JSON accessors.
"""

import json
from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def load_json_list(raw):
    """Decode a JSON-encoded list column into a list of strings."""
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        return []
    return [str(v) for v in value] if isinstance(value, list) else []


class Meal(Base):
    """ORM model representing a meal in the catalog."""

    __tablename__ = "meals"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    cuisine = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)
    primary_ingredients = Column(Text, nullable=True)
    allergens = Column(Text, nullable=True)
    weather = Column(Text, nullable=True)
    time_of_day = Column(Text, nullable=True)
    spiciness = Column(Integer, nullable=True)  # 0-5
    heaviness = Column(Integer, nullable=True)  # 0-5
    flavor_tags = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    feedback = relationship("Feedback", back_populates="meal", cascade="all, delete-orphan")

    def list_field(self, name: str):
        """Decode one of the JSON list columns, tolerating empty or bad values."""
        return load_json_list(getattr(self, name))


class Feedback(Base):
    """ORM model storing one user's latest reaction to a meal."""

    __tablename__ = "feedback"
    __table_args__ = (UniqueConstraint("user_id", "meal_id", name="uq_feedback_user_meal"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    meal_id = Column(Integer, ForeignKey("meals.id"), nullable=False, index=True)
    type = Column(String, nullable=False)  # like | interested | dislike
    timestamp = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    meal = relationship("Meal", back_populates="feedback")
