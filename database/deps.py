"""FastAPI dependencies for database sessions.

Routers that only read (meal listings, analytics) depend on `get_db_read`;
routers that write feedback depend on `get_db_write`.
"""

from .database import get_read_session, get_write_session


def get_db_write():
    """Yield a write-capable session scoped to one request."""
    yield from get_write_session()


def get_db_read():
    """Yield a session for read-only endpoints, routed to the read replica when configured."""
    yield from get_read_session()
