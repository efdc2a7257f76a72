"""Weather-related models and schemas."""

from enum import Enum
from typing import Any, Dict
from pydantic import BaseModel, Field


class ApiProvider(str, Enum):
    """Data sources the weather endpoint can query."""
    OPENWEATHER = "openweather"
    WEATHERAPI = "weatherapi"

    @property
    def display_name(self) -> str:
        return "WeatherAPI" if self == ApiProvider.WEATHERAPI else "OpenWeather"


class WeatherLookupResponse(BaseModel):
    """Response schema for a weather lookup."""
    city: str = Field(..., description="City name as entered")
    resolved_city: str = Field(..., description="City name sent to the weather endpoint")
    country: str
    provider: ApiProvider
    provider_name: str
    weather: Dict[str, Any] = Field(default_factory=dict, description="Weather endpoint payload, passed through")
