"""Application entry point for the Meal Recommendation API.

Defines the FastAPI app, middleware and exception handlers and includes the
API routers from the `api` package. The `lifespan` handler initializes the
DB, builds the shared guest-feedback store and weather client, and keeps the
feedback retention job running while the app is up.
"""

from contextlib import asynccontextmanager

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from api.analytics import router as analytics_router
from api.feedback import router as feedback_router
from api.meals import router as meals_router
from api.recommendations import router as recommendations_router
from api.weather import router as weather_router
from core.config import settings
from core.error_handlers import register_exception_handlers
from core.exceptions import DatabaseError
from core.logger import get_logger
from database import WriteSessionLocal, init_db
from database.deps import get_db_read
from database.feedback_helpers import delete_old_feedback
from services.guest_feedback import GuestFeedbackStore
from services.weather import WeatherService

logger = get_logger("main")


def run_feedback_cleanup() -> int:
    """Delete feedback that has aged out of the recommendation window."""
    session = WriteSessionLocal()
    try:
        return delete_old_feedback(session, settings.recent_feedback_days)
    finally:
        session.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fastapi lifespan context: initialize resources before serving requests."""
    init_db()
    run_feedback_cleanup()
    app.state.guest_feedback = GuestFeedbackStore(ttl_seconds=settings.guest_feedback_ttl_seconds)
    app.state.weather_service = WeatherService()

    scheduler = None
    if settings.feedback_cleanup_enabled:
        scheduler = AsyncIOScheduler()
        scheduler.add_job(
            run_feedback_cleanup,
            CronTrigger(hour=settings.feedback_cleanup_hour, minute=0),
            id="cleanup_old_feedback",
            name="Delete feedback older than the recommendation window",
            replace_existing=True,
        )
        scheduler.start()
        logger.info("Feedback cleanup scheduled daily at %02d:00", settings.feedback_cleanup_hour)
    try:
        yield
    finally:
        if scheduler is not None and scheduler.running:
            scheduler.shutdown(wait=False)
        app.state.weather_service.close()


app = FastAPI(title="Meal Recommendation API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests and their responses."""
    logger.info("%s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Request error: %s %s", request.method, request.url.path)
        raise
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


@app.get("/health")
def health(db: Session = Depends(get_db_read)):
    """Return basic health status and database connectivity.

    Raises:
        DatabaseError: If the database cannot be queried.
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.exception("Health check failed")
        raise DatabaseError("Database health check failed", operation="health_check") from e
    return {"status": "healthy", "database": "connected"}


app.include_router(meals_router)
app.include_router(recommendations_router)
app.include_router(feedback_router)
app.include_router(analytics_router)
app.include_router(weather_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
