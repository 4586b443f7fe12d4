"""Weather lookup and classification.

Fetches the current weather for a coordinate pair from Open-Meteo and reduces
it to one of the `WeatherCondition` values the recommender understands.
Results are cached per coordinate pair for a short TTL. Lookup failures never
reach the caller: they are logged and reported as `normal`.
"""

import threading
import time
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

import httpx

from core.config import settings
from core.exceptions import WeatherServiceError
from core.logger import get_logger
from schemas.recommendation_schema import WeatherCondition

logger = get_logger("services.weather")

RAIN_CODES = range(50, 100)  # WMO drizzle, rain, snow and thunderstorm codes
COLD_MAX_C = 10
HOT_MIN_C = 28


def classify_weather(temperature: float, weathercode: int) -> WeatherCondition:
    """Classify a temperature (Celsius) and WMO weather code.

    Precipitation wins over temperature. Otherwise 10C and below is cold,
    28C and above is hot, anything between is normal.
    """
    if weathercode in RAIN_CODES:
        return WeatherCondition.RAIN
    if temperature <= COLD_MAX_C:
        return WeatherCondition.COLD
    if temperature >= HOT_MIN_C:
        return WeatherCondition.HOT
    return WeatherCondition.NORMAL


class TTLCache:
    """Small thread-safe cache whose entries expire after `ttl_seconds`."""

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[Hashable, Tuple[Any, float]] = {}
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, stored_at = entry
            if self._clock() - stored_at >= self.ttl_seconds:
                del self._entries[key]
                return None
            return value

    def set(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._entries[key] = (value, self._clock())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class WeatherService:
    """Cached Open-Meteo client.

    Args:
        client: Optional `httpx.Client`; one is created when omitted.
        cache: Optional `TTLCache`; defaults to the configured TTL.
        base_url: Forecast endpoint.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        cache: Optional[TTLCache] = None,
        base_url: str = settings.weather_api_url,
        timeout: float = settings.weather_timeout_seconds,
    ):
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=timeout)
        self.cache = cache if cache is not None else TTLCache(settings.weather_cache_ttl_seconds)
        self.base_url = base_url
        self.timeout = timeout

    def fetch_current(self, lat: float, lon: float) -> Tuple[float, int]:
        """Return (temperature, weathercode) from the API.

        Raises:
            WeatherServiceError: On transport errors, non-2xx responses or an
                unexpected payload.
        """
        params = {"latitude": lat, "longitude": lon, "current_weather": "true"}
        try:
            resp = self.client.get(self.base_url, params=params, timeout=self.timeout)
        except httpx.HTTPError as exc:
            raise WeatherServiceError(f"Weather request failed: {exc}") from exc
        if resp.status_code >= 400:
            raise WeatherServiceError(
                f"Weather API returned HTTP {resp.status_code}", upstream_status=resp.status_code
            )
        try:
            current = resp.json()["current_weather"]
            return float(current["temperature"]), int(current["weathercode"])
        except (ValueError, KeyError, TypeError) as exc:
            raise WeatherServiceError(f"Unexpected weather payload: {exc}") from exc

    def get_current_weather(self, lat: float, lon: float) -> WeatherCondition:
        """Return the classified condition for a coordinate pair.

        Falls back to `normal` (uncached) when the lookup fails.
        """
        key = f"{lat},{lon}"
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        try:
            temperature, weathercode = self.fetch_current(lat, lon)
        except WeatherServiceError as exc:
            logger.warning("Failed to fetch weather for %s: %s", key, exc.message)
            return WeatherCondition.NORMAL

        condition = classify_weather(temperature, weathercode)
        self.cache.set(key, condition)
        logger.debug("Weather for %s: %.1fC code=%s -> %s", key, temperature, weathercode, condition.value)
        return condition

    def close(self) -> None:
        if self._owns_client:
            self.client.close()
