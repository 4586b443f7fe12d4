"""Utilities to ingest meal catalogs (CSV or JSON) into the application's database.

This module provides:
- parse_meals_file(path): returns a list of normalized meal dicts
- seed_meals_from_file(path, session): idempotently seeds the meals table

Columns may be snake_case (`image_url`, `flavor_tags`) or camelCase
(`imageUrl`, `flavorTags`). List columns accept a JSON array or a comma or
semicolon separated string. Only `name` is required.
"""
from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from core.logger import get_logger
from database import models
from database.database import LIST_FIELDS, WriteSessionLocal, meal_from_dict

logger = get_logger("data.ingest_meals")

TEXT_FIELDS = ("cuisine", "description", "image_url")
INT_FIELDS = ("spiciness", "heaviness")
NAME_COLUMNS = ("name", "meal_name", "meal")


def _snake(column: str) -> str:
    column = column.strip()
    return re.sub(r"(?<!^)(?=[A-Z])", "_", column).lower().replace(" ", "_")


def _is_missing(val: Any) -> bool:
    if val is None:
        return True
    if isinstance(val, (list, tuple)):
        return False
    try:
        return bool(pd.isna(val))
    except (TypeError, ValueError):
        return False


def parse_list_cell(val: Any) -> List[str]:
    """Normalize a list cell into a list of stripped, non-empty strings."""
    if _is_missing(val):
        return []
    if isinstance(val, (list, tuple)):
        items = val
    else:
        raw = str(val).strip()
        if raw.startswith("["):
            try:
                items = json.loads(raw)
            except json.JSONDecodeError:
                items = re.split(r"[,;]", raw.strip("[]"))
        else:
            items = re.split(r"[,;]", raw)
    return [str(i).strip().strip("'\"") for i in items if str(i).strip().strip("'\"")]


def _optional_int(val: Any) -> Optional[int]:
    if _is_missing(val) or str(val).strip() == "":
        return None
    try:
        return int(float(val))
    except (TypeError, ValueError):
        logger.debug("Ignoring non-numeric value %r", val)
        return None


def _optional_text(val: Any) -> Optional[str]:
    if _is_missing(val):
        return None
    text = str(val).strip()
    return text or None


def load_meals_frame(path: str) -> pd.DataFrame:
    """Read a CSV or JSON meal catalog into a DataFrame with snake_case columns."""
    if Path(path).suffix.lower() == ".json":
        df = pd.read_json(path, orient="records")
    else:
        df = pd.read_csv(path, encoding="utf-8", engine="python")
    return df.rename(columns=_snake)


def parse_meals_file(path: str) -> List[Dict]:
    """Parse a meal catalog and return a list of normalized meal dictionaries.

    Rows without a name are skipped.
    """
    logger.info("Parsing meals file: %s", path)
    df = load_meals_frame(path)

    meals = []
    for _, row in df.iterrows():
        name = next((row.get(c) for c in NAME_COLUMNS if c in row.index and not _is_missing(row.get(c))), None)
        name = _optional_text(name)
        if not name:
            continue

        meal: Dict[str, Any] = {"name": name}
        for field in TEXT_FIELDS:
            meal[field] = _optional_text(row.get(field))
        for field in INT_FIELDS:
            meal[field] = _optional_int(row.get(field))
        for field in LIST_FIELDS:
            meal[field] = parse_list_cell(row.get(field))
        meals.append(meal)

    logger.info("Parsed %s meals from %s", len(meals), path)
    return meals


def seed_meals_from_file(path: str, session=None) -> int:
    """Idempotently seed the meals table from a catalog file.

    If `session` is not supplied, a `WriteSessionLocal` session is used.
    Existing meals are matched by name and skipped.

    Returns:
        Number of meals added.
    """
    close_session = False
    if session is None:
        session = WriteSessionLocal()
        close_session = True
    try:
        existing = {name for (name,) in session.query(models.Meal.name).all()}
        added = 0
        for item in parse_meals_file(path):
            if item["name"] in existing:
                continue
            session.add(meal_from_dict(item))
            existing.add(item["name"])
            added += 1
        if added:
            session.commit()
        logger.info("Seeded %s new meals into DB", added)
        return added
    finally:
        if close_session:
            session.close()


if __name__ == "__main__":
    import argparse

    from database import init_db

    p = argparse.ArgumentParser("Seed meals from a CSV or JSON file into the DB")
    p.add_argument("path")
    args = p.parse_args()
    init_db()
    added = seed_meals_from_file(args.path)
    print(f"Added {added} meals")
