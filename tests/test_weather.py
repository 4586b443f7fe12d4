"""Tests for weather classification, the TTL cache and the Open-Meteo client."""
import httpx
import pytest

from core.exceptions import WeatherServiceError
from schemas.recommendation_schema import WeatherCondition
from services.weather import TTLCache, WeatherService, classify_weather


class FakeClock:
    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.mark.parametrize(
    "temperature, code, expected",
    [
        (20, 61, WeatherCondition.RAIN),
        (35, 50, WeatherCondition.RAIN),
        (-5, 99, WeatherCondition.RAIN),
        (10, 0, WeatherCondition.COLD),
        (10.1, 3, WeatherCondition.NORMAL),
        (27.9, 2, WeatherCondition.NORMAL),
        (28, 1, WeatherCondition.HOT),
        (15, 49, WeatherCondition.NORMAL),
        (15, 100, WeatherCondition.NORMAL),
    ],
)
def test_classify_weather(temperature, code, expected):
    """Rain codes win, then cold and hot temperature bounds."""
    assert classify_weather(temperature, code) == expected


def test_ttl_cache_expires_entries():
    """Cache entries expire once the TTL has elapsed."""
    clock = FakeClock()
    cache = TTLCache(ttl_seconds=600, clock=clock)
    cache.set("k", "v")
    clock.advance(599)
    assert cache.get("k") == "v"
    clock.advance(1)
    assert cache.get("k") is None
    assert len(cache) == 0


def _service(handler, clock=None):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    cache = TTLCache(ttl_seconds=600, clock=clock or FakeClock())
    return WeatherService(client=client, cache=cache, base_url="https://weather.test/v1/forecast")


def test_get_current_weather_classifies_and_caches():
    """A successful lookup is classified and cached."""
    calls = []

    def handler(request):
        calls.append(request)
        assert request.url.params["current_weather"] == "true"
        return httpx.Response(200, json={"current_weather": {"temperature": 31.5, "weathercode": 1}})

    service = _service(handler)
    assert service.get_current_weather(40.7, -74.0) == WeatherCondition.HOT
    assert service.get_current_weather(40.7, -74.0) == WeatherCondition.HOT
    assert len(calls) == 1


def test_cache_refreshes_after_ttl():
    """An expired entry triggers a fresh lookup."""
    clock = FakeClock()
    responses = iter([
        {"current_weather": {"temperature": 5, "weathercode": 0}},
        {"current_weather": {"temperature": 12, "weathercode": 63}},
    ])
    service = _service(lambda request: httpx.Response(200, json=next(responses)), clock=clock)
    assert service.get_current_weather(1.0, 2.0) == WeatherCondition.COLD
    clock.advance(601)
    assert service.get_current_weather(1.0, 2.0) == WeatherCondition.RAIN


def test_upstream_error_falls_back_to_normal_without_caching():
    """Upstream errors return normal and are not cached."""
    service = _service(lambda request: httpx.Response(500, json={"error": "boom"}))
    assert service.get_current_weather(1.0, 2.0) == WeatherCondition.NORMAL
    assert len(service.cache) == 0


def test_transport_error_falls_back_to_normal():
    """Connection errors return normal."""
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    service = _service(handler)
    assert service.get_current_weather(1.0, 2.0) == WeatherCondition.NORMAL


def test_fetch_current_raises_on_bad_payload():
    """Unexpected payloads raise WeatherServiceError."""
    service = _service(lambda request: httpx.Response(200, json={"hourly": {}}))
    with pytest.raises(WeatherServiceError) as exc_info:
        service.fetch_current(1.0, 2.0)
    assert exc_info.value.status_code == 502


def test_fetch_current_reports_upstream_status():
    """Upstream HTTP errors keep their status in the details."""
    service = _service(lambda request: httpx.Response(429))
    with pytest.raises(WeatherServiceError) as exc_info:
        service.fetch_current(1.0, 2.0)
    assert exc_info.value.details.get("upstream_status") == 429


def test_injected_cache_is_kept_even_when_empty():
    """A cache passed in is used even while it is empty."""
    cache = TTLCache(ttl_seconds=600, clock=FakeClock())
    service = WeatherService(client=httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(500))), cache=cache)
    assert service.cache is cache
