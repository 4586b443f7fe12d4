"""Meals API router.

Read-only catalog endpoints: a paginated listing, one random meal and a
lookup by id. Meals are returned in `MealRecord` format.
"""

import math

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.config import settings
from core.exceptions import NotFoundError
from core.logger import get_logger
from core.repository import MealRepository, to_meal_record
from database.deps import get_db_read
from schemas.meal_schema import MealListResponse, MealRecord, Pagination, RandomMealResponse

logger = get_logger("api.meals")
router = APIRouter(prefix="/api/meals", tags=["meals"])


@router.get("", response_model=MealListResponse)
def list_meals(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    db: Session = Depends(get_db_read),
):
    """Return one page of meals with paging metadata.

    Args:
        page: 1-based page number.
        limit: Page size, between 1 and `MAX_PAGE_SIZE`.
        db: Read-only SQLAlchemy session injected by dependency.
    """
    meals, total = MealRepository(db).paginate(page, limit)
    total_pages = math.ceil(total / limit) if total else 0
    return MealListResponse(
        meals=[to_meal_record(m) for m in meals],
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        ),
    )


@router.get("/random", response_model=RandomMealResponse)
def random_meal(db: Session = Depends(get_db_read)):
    """Return one meal picked at random.

    Raises:
        NotFoundError: If the catalog is empty.
    """
    sample = MealRepository(db).sample(1)
    if not sample:
        raise NotFoundError("Meal", "random")
    return RandomMealResponse(meal=to_meal_record(sample[0]))


@router.get("/{meal_id}", response_model=MealRecord)
def get_meal(meal_id: str, db: Session = Depends(get_db_read)):
    """Return a single meal by id.

    Raises:
        NotFoundError: If no meal has this id.
    """
    meal = MealRepository(db).get_by_public_id(meal_id)
    if meal is None:
        raise NotFoundError("Meal", meal_id)
    return to_meal_record(meal)
