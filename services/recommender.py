"""Recommendation engine: pick one meal for a quiz, feedback window and weather.

The engine is pure. It performs no I/O, keeps no state between calls and
never logs; every call builds its own feedback lookup and its own seeded
generator, so concurrent calls from request threads cannot interfere.

Scoring, per candidate and in candidate order:

1. Start at ``base`` (1.0).
2. Any avoided ingredient in the meal's primary ingredients or allergens
   forces the score to 0 and skips every later step, including the random
   draw.
3. Recent ``like`` feedback adds ``feedback_weight``, ``dislike`` subtracts it,
   ``interested`` is neutral.
4. Subtract ``spiciness_weight`` per point of distance between the quiz
   spiciness and the meal's (missing counts as 0).
5. Add ``weather_bonus`` when the meal lists the current weather.
6. Multiply by ``1 + surprise_factor / 10 * r`` with ``r`` drawn uniformly
   from [-0.5, 0.5).

Only meals scoring strictly above 0 can win. The highest score wins and
exact ties go to the earliest candidate.
"""

import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Union

from core.config import settings
from schemas.feedback_schema import FeedbackEntry
from schemas.meal_schema import MealRecord
from schemas.recommendation_schema import QuizAnswers, WeatherCondition

# Linear congruential generator constants.
LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280


class SeededRandom:
    """Deterministic generator: the same seed always yields the same draws."""

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = int(time.time() * 1000)
        self.seed = int(seed)

    def next(self) -> float:
        """Advance the generator and return a value in [0, 1)."""
        self.seed = (self.seed * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self.seed / LCG_MODULUS

    def range(self, minimum: float, maximum: float) -> float:
        """Return a value in [minimum, maximum)."""
        return minimum + self.next() * (maximum - minimum)


@dataclass
class ScoreBreakdown:
    """Each term that went into a meal's final score."""

    base: float = 1.0
    feedback_bonus: float = 0.0
    spiciness_distance: float = 0.0
    weather_match: float = 0.0
    surprise_factor: float = 0.0
    final_score: float = 0.0


@dataclass
class ScoredMeal:
    meal: MealRecord
    score: float
    breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown)
    eliminated: bool = False


def _as_utc(value: datetime) -> datetime:
    # Storage hands back naive UTC datetimes.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _now_utc(now: Optional[datetime]) -> datetime:
    return _as_utc(now) if now is not None else datetime.now(timezone.utc)


class RecommendationEngine:
    """Scores candidate meals and selects a single recommendation.

    Parameters
    ----------
    feedback_window_days: int
        Only feedback newer than this many days influences scoring.
    feedback_weight: float
        Added for a recent like, subtracted for a recent dislike.
    spiciness_weight: float
        Penalty per point of spiciness distance.
    weather_bonus: float
        Added when the meal suits the current weather.
    """

    def __init__(
        self,
        feedback_window_days: int = 14,
        base_score: float = 1.0,
        feedback_weight: float = 0.4,
        spiciness_weight: float = 0.05,
        weather_bonus: float = 0.2,
    ):
        self.feedback_window_days = feedback_window_days
        self.base_score = base_score
        self.feedback_weight = feedback_weight
        self.spiciness_weight = spiciness_weight
        self.weather_bonus = weather_bonus

    def window_start(self, now: Optional[datetime] = None) -> datetime:
        """Return the oldest timestamp still considered recent."""
        return _now_utc(now) - timedelta(days=self.feedback_window_days)

    def recent_feedback(
        self, feedback: Iterable[FeedbackEntry], now: Optional[datetime] = None
    ) -> List[FeedbackEntry]:
        """Filter feedback to entries inside the recent window, keeping order."""
        cutoff = self.window_start(now)
        return [entry for entry in feedback if _as_utc(entry.timestamp) >= cutoff]

    def build_feedback_lookup(
        self, feedback: Iterable[FeedbackEntry], now: Optional[datetime] = None
    ) -> Dict[str, FeedbackEntry]:
        """Map meal id to its recent feedback entry.

        When a meal id appears more than once, the last entry in iteration
        order wins.
        """
        lookup: Dict[str, FeedbackEntry] = {}
        for entry in self.recent_feedback(feedback, now):
            lookup[entry.meal_id] = entry
        return lookup

    @staticmethod
    def is_eliminated(meal: MealRecord, ingredients_to_avoid: Sequence[str]) -> bool:
        """True when an avoided ingredient is a primary ingredient or allergen."""
        return any(
            avoided in meal.primary_ingredients or avoided in meal.allergens
            for avoided in ingredients_to_avoid
        )

    def score_meal(
        self,
        meal: MealRecord,
        quiz: QuizAnswers,
        feedback_lookup: Dict[str, FeedbackEntry],
        weather: str,
        random: SeededRandom,
    ) -> ScoredMeal:
        """Score one meal. Draws from `random` only if the meal is not eliminated."""
        breakdown = ScoreBreakdown(base=self.base_score)
        score = breakdown.base

        if self.is_eliminated(meal, quiz.ingredients_to_avoid):
            breakdown.final_score = 0.0
            return ScoredMeal(meal=meal, score=0.0, breakdown=breakdown, eliminated=True)

        feedback = feedback_lookup.get(meal.id)
        if feedback is not None:
            if feedback.type == "like":
                breakdown.feedback_bonus = self.feedback_weight
            elif feedback.type == "dislike":
                breakdown.feedback_bonus = -self.feedback_weight
            score += breakdown.feedback_bonus

        meal_spiciness = meal.spiciness if meal.spiciness is not None else 0
        breakdown.spiciness_distance = -self.spiciness_weight * abs(quiz.spiciness - meal_spiciness)
        score += breakdown.spiciness_distance

        if weather in meal.weather:
            breakdown.weather_match = self.weather_bonus
            score += breakdown.weather_match

        multiplier = 1 + (quiz.surprise_factor / 10) * random.range(-0.5, 0.5)
        breakdown.surprise_factor = multiplier - 1
        score *= multiplier

        breakdown.final_score = score
        return ScoredMeal(meal=meal, score=score, breakdown=breakdown)

    def score_meals(
        self,
        quiz: QuizAnswers,
        recent_feedback: Iterable[FeedbackEntry],
        weather: Union[WeatherCondition, str],
        candidate_meals: Sequence[MealRecord],
        random_seed: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> List[ScoredMeal]:
        """Score every candidate, eliminated ones included, in candidate order."""
        random = SeededRandom(random_seed)
        lookup = self.build_feedback_lookup(recent_feedback, now)
        weather_value = weather.value if isinstance(weather, Enum) else weather
        return [
            self.score_meal(meal, quiz, lookup, weather_value, random)
            for meal in candidate_meals
        ]

    def rank(self, scored: Iterable[ScoredMeal]) -> List[ScoredMeal]:
        """Drop non-positive scores and sort the rest best first.

        The sort is stable, so equal scores keep their candidate order.
        """
        valid = [s for s in scored if s.score > 0]
        return sorted(valid, key=lambda s: s.score, reverse=True)

    def select_recommendation(
        self,
        quiz: QuizAnswers,
        recent_feedback: Iterable[FeedbackEntry],
        weather: Union[WeatherCondition, str],
        candidate_meals: Sequence[MealRecord],
        random_seed: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> Optional[MealRecord]:
        """Return the best meal for this request, or None when nothing qualifies."""
        if not candidate_meals:
            return None
        ranked = self.rank(
            self.score_meals(quiz, recent_feedback, weather, candidate_meals, random_seed, now)
        )
        if not ranked:
            return None
        return ranked[0].meal

    def get_liked_flavor_tags(
        self,
        recent_feedback: Iterable[FeedbackEntry],
        meals: Iterable[MealRecord],
        now: Optional[datetime] = None,
    ) -> List[str]:
        """Collect flavor tags of meals liked inside the recent window.

        Tags are returned once each in first-seen order. Feedback for unknown
        meal ids is skipped.
        """
        meal_map = {meal.id: meal for meal in meals}
        tags: Dict[str, None] = {}
        for entry in self.recent_feedback(recent_feedback, now):
            if entry.type != "like":
                continue
            meal = meal_map.get(entry.meal_id)
            if meal is None:
                continue
            for tag in meal.flavor_tags:
                tags.setdefault(tag, None)
        return list(tags)


# export a default instance
recommendation_engine = RecommendationEngine(feedback_window_days=settings.recent_feedback_days)


def select_recommendation(
    quiz: QuizAnswers,
    recent_feedback: Iterable[FeedbackEntry],
    weather: Union[WeatherCondition, str],
    candidate_meals: Sequence[MealRecord],
    random_seed: Optional[int] = None,
    now: Optional[datetime] = None,
) -> Optional[MealRecord]:
    return recommendation_engine.select_recommendation(
        quiz, recent_feedback, weather, candidate_meals, random_seed, now
    )


def get_liked_flavor_tags(
    recent_feedback: Iterable[FeedbackEntry],
    meals: Iterable[MealRecord],
    now: Optional[datetime] = None,
) -> List[str]:
    return recommendation_engine.get_liked_flavor_tags(recent_feedback, meals, now)
