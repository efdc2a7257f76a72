"""Weather API routes."""

from typing import Optional
from fastapi import APIRouter, Query

from app.weather.models import ApiProvider, WeatherLookupResponse
from app.weather.service import WeatherService

router = APIRouter(prefix="/weather", tags=["Weather"])


@router.get("", response_model=WeatherLookupResponse)
async def get_weather(
    city: str = Query("", description="City name, Cyrillic or Latin"),
    country: Optional[str] = Query(None, min_length=2, max_length=2, description="ISO country code"),
    provider: Optional[ApiProvider] = Query(None, description="Weather data source"),
):
    """
    Get current weather for a city.

    Russian city names are translated (or transliterated) before the request
    is sent to the weather provider.
    """
    service = WeatherService()
    return await service.fetch_weather(city, country=country, provider=provider)
