"""Feedback analytics for the explore page.

Aggregates all stored feedback (not just the recent window) into the most
liked meals, the most disliked meals and the most popular flavor tags.
"""

from collections import Counter
from typing import Any, Dict, List

from sqlalchemy import func
from sqlalchemy.orm import Session

from core.config import settings
from core.logger import get_logger
from database.models import Feedback, Meal, load_json_list

logger = get_logger("services.analytics")


def _top_meals_by_type(db: Session, feedback_type: str, count_key: str, limit: int) -> List[Dict[str, Any]]:
    count = func.count(Feedback.id).label("n")
    rows = (
        db.query(Meal, count)
        .join(Feedback, Feedback.meal_id == Meal.id)
        .filter(Feedback.type == feedback_type)
        .group_by(Meal.id)
        .order_by(count.desc(), Meal.id)
        .limit(limit)
        .all()
    )
    return [
        {
            "id": str(meal.id),
            "name": meal.name,
            "cuisine": meal.cuisine,
            "image_url": meal.image_url,
            "flavor_tags": meal.list_field("flavor_tags"),
            count_key: n,
        }
        for meal, n in rows
    ]


def get_top_liked_meals(db: Session, limit: int = settings.analytics_results_limit) -> List[Dict[str, Any]]:
    return _top_meals_by_type(db, "like", "like_count", limit)


def get_top_disliked_meals(db: Session, limit: int = settings.analytics_results_limit) -> List[Dict[str, Any]]:
    return _top_meals_by_type(db, "dislike", "dislike_count", limit)


def get_top_flavor_tags(db: Session, limit: int = settings.analytics_results_limit) -> List[Dict[str, Any]]:
    """Count flavor tags across meals with `like` or `interested` feedback.

    Each feedback row contributes one count to every tag of its meal. Ties
    are ordered by tag name.
    """
    rows = (
        db.query(Meal.flavor_tags, func.count(Feedback.id))
        .join(Feedback, Feedback.meal_id == Meal.id)
        .filter(Feedback.type.in_(("like", "interested")))
        .group_by(Meal.id, Meal.flavor_tags)
        .all()
    )
    counter: Counter = Counter()
    for raw_tags, n in rows:
        for tag in set(load_json_list(raw_tags)):
            counter[tag] += n
    ranked = sorted(counter.items(), key=lambda kv: (-kv[1], kv[0]))
    return [{"tag": tag, "count": n} for tag, n in ranked[:limit]]


def compute_analytics(db: Session, limit: int = settings.analytics_results_limit) -> Dict[str, Any]:
    """Build the full analytics payload."""
    result = {
        "top_liked_meals": get_top_liked_meals(db, limit),
        "top_disliked_meals": get_top_disliked_meals(db, limit),
        "top_flavor_tags": get_top_flavor_tags(db, limit),
    }
    logger.debug(
        "Analytics: %s liked, %s disliked, %s tags",
        len(result["top_liked_meals"]), len(result["top_disliked_meals"]), len(result["top_flavor_tags"]),
    )
    return result
