"""Repository classes for database access.

`BaseRepository` carries the generic CRUD helpers; `MealRepository` adds the
catalog queries the API needs (random sampling, pagination) and converts ORM
rows into the `MealRecord` shape consumed by the recommender.
"""

from typing import TypeVar, Generic, Type, Optional, List, Any, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from database.models import Base, Meal
from schemas.meal_schema import MealRecord

T = TypeVar('T', bound=Base)

MAX_DB_INT = 2 ** 63 - 1
MIN_DB_INT = -(2 ** 63)


class BaseRepository(Generic[T]):
    """Generic repository for common database operations.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    def __init__(self, model: Type[T], session: Session):
        self.model = model
        self.session = session

    def create(self, obj: T) -> T:
        """Add, commit and refresh a new object."""
        return save(self.session, obj)

    def get_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an object by its primary key, or None if missing."""
        return self.session.get(self.model, id)

    def get_all(self, skip: int = 0, limit: int = 100) -> List[T]:
        """Retrieve objects with offset pagination, ordered by primary key."""
        return (
            self.session.query(self.model)
            .order_by(self.model.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def count(self) -> int:
        return self.session.query(self.model).count()


class MealRepository(BaseRepository[Meal]):
    """Catalog queries over the `meals` table."""

    def __init__(self, session: Session):
        super().__init__(Meal, session)

    def get_by_public_id(self, meal_id: str) -> Optional[Meal]:
        """Look up a meal by the string id exposed through the API."""
        try:
            pk = int(meal_id)
        except (TypeError, ValueError):
            return None
        # Ids outside the 64-bit INTEGER range cannot exist in storage.
        if not MIN_DB_INT <= pk <= MAX_DB_INT:
            return None
        return self.get_by_id(pk)

    def sample(self, size: int) -> List[Meal]:
        """Return up to `size` meals in random order."""
        return self.session.query(Meal).order_by(func.random()).limit(size).all()

    def paginate(self, page: int, limit: int) -> Tuple[List[Meal], int]:
        """Return one page of meals (1-based `page`) and the total count."""
        return self.get_all(skip=(page - 1) * limit, limit=limit), self.count()


def to_meal_record(meal: Meal) -> MealRecord:
    """Convert a `Meal` row into the recommender's `MealRecord`."""
    return MealRecord(
        id=str(meal.id),
        name=meal.name,
        cuisine=meal.cuisine,
        description=meal.description,
        image_url=meal.image_url,
        primary_ingredients=meal.list_field("primary_ingredients"),
        allergens=meal.list_field("allergens"),
        weather=meal.list_field("weather"),
        time_of_day=meal.list_field("time_of_day"),
        spiciness=meal.spiciness,
        heaviness=meal.heaviness,
        flavor_tags=meal.list_field("flavor_tags"),
    )


def save(session: Session, obj: Base) -> Base:
    """Convenience function to add, commit and refresh an object."""
    session.add(obj)
    session.commit()
    session.refresh(obj)
    return obj
