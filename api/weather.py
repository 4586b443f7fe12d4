"""Weather API router.

Lets the client resolve its coordinates to a weather condition before asking
for a recommendation.
"""

from fastapi import APIRouter, Depends, Query

from api.deps import get_weather_service
from schemas.recommendation_schema import WeatherResponse
from services.weather import WeatherService

router = APIRouter(prefix="/api/weather", tags=["weather"])


@router.get("", response_model=WeatherResponse)
def current_weather(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    weather: WeatherService = Depends(get_weather_service),
):
    """Return the classified current weather for a coordinate pair."""
    return WeatherResponse(condition=weather.get_current_weather(lat, lon))
