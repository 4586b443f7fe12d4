"""Application settings read from the environment.

All tunables live on a single frozen `Settings` instance so that services and
routers read the same values. Override any of them with the matching
environment variable before the application is imported.
"""

import os
from dataclasses import dataclass, field
from typing import List

from core.exceptions import ConfigurationError


def _int_env(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to `default`."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}", config_key=name)


def _float_env(name: str, default: float) -> float:
    """Read a float environment variable, falling back to `default`."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}", config_key=name)


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the meal recommendation service."""

    # Read/Write partitioning: point both at the same SQLite file for local runs.
    write_database_url: str = os.getenv("WRITE_DATABASE_URL", "sqlite:///mealrec.db")
    read_database_url: str = os.getenv("READ_DATABASE_URL", os.getenv("WRITE_DATABASE_URL", "sqlite:///mealrec.db"))

    log_dir: str = os.getenv("LOG_DIR", os.path.join(os.path.dirname(__file__), "..", "logs"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    recent_feedback_days: int = _int_env("RECENT_FEEDBACK_DAYS", 14)
    feedback_cleanup_enabled: bool = os.getenv("FEEDBACK_CLEANUP_ENABLED", "true").strip().lower() in ("1", "true", "yes")
    feedback_cleanup_hour: int = _int_env("FEEDBACK_CLEANUP_HOUR", 2)
    guest_feedback_ttl_seconds: int = _int_env("GUEST_FEEDBACK_TTL_SECONDS", 2 * 60 * 60)

    candidate_sample_size: int = _int_env("CANDIDATE_MEALS_SAMPLE_SIZE", 50)
    default_quiz_spiciness: int = _int_env("DEFAULT_QUIZ_SPICINESS", 2)
    default_quiz_surprise_factor: int = _int_env("DEFAULT_QUIZ_SURPRISE_FACTOR", 5)
    default_weather: str = os.getenv("DEFAULT_WEATHER", "normal")

    analytics_results_limit: int = _int_env("ANALYTICS_RESULTS_LIMIT", 10)
    default_page_size: int = _int_env("DEFAULT_PAGE_SIZE", 10)
    max_page_size: int = _int_env("MAX_PAGE_SIZE", 100)

    weather_api_url: str = os.getenv("WEATHER_API_URL", "https://api.open-meteo.com/v1/forecast")
    weather_timeout_seconds: float = _float_env("WEATHER_TIMEOUT_SECONDS", 5.0)
    weather_cache_ttl_seconds: int = _int_env("WEATHER_CACHE_TTL_SECONDS", 10 * 60)

    cors_origins: List[str] = field(
        default_factory=lambda: [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    )


settings = Settings()
