"""Database package: ORM models, session factories and seeding."""

from .database import (
    write_engine,
    read_engine,
    WriteSessionLocal,
    ReadSessionLocal,
    init_db,
    meal_from_dict,
    get_write_session,
    get_read_session,
)
from . import models

__all__ = [
    "write_engine",
    "read_engine",
    "WriteSessionLocal",
    "ReadSessionLocal",
    "init_db",
    "meal_from_dict",
    "get_write_session",
    "get_read_session",
    "models",
]
