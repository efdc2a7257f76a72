"""Weather lookup against the configured weather endpoint."""

import logging
from typing import Optional
import httpx

from app.core.config import get_settings
from app.core.exceptions import (
    BadRequestException,
    GatewayTimeoutException,
    UpstreamException,
)
from app.translation.service import resolve_city_name
from app.weather.models import ApiProvider, WeatherLookupResponse

logger = logging.getLogger(__name__)

EMPTY_CITY_MESSAGE = "Enter a city name"
TIMEOUT_MESSAGE = "The weather server did not respond in time"
NETWORK_ERROR_MESSAGE = "Failed to fetch weather data. Check your internet connection."
GENERIC_SERVER_ERROR = "Server error"
INVALID_RESPONSE_MESSAGE = "Invalid response from weather server"


class WeatherService:
    """Resolves city names and fetches weather from the weather endpoint."""
    
    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        settings = get_settings()
        self.base_url = settings.WEATHER_API_URL
        self.timeout = settings.WEATHER_API_TIMEOUT_SECONDS
        self._client = client
    
    async def fetch_weather(
        self,
        city: str,
        country: Optional[str] = None,
        provider: Optional[ApiProvider] = None,
    ) -> WeatherLookupResponse:
        """Get current weather for a city typed by the user (Cyrillic or Latin)."""
        settings = get_settings()
        if not city.strip():
            raise BadRequestException(EMPTY_CITY_MESSAGE)
        
        country = country or settings.DEFAULT_COUNTRY
        provider = ApiProvider(provider or settings.DEFAULT_PROVIDER)
        
        # Only the outgoing request uses the resolved name
        city_for_api = city
        try:
            city_for_api = await resolve_city_name(city)
            logger.info(f"Resolved {city!r} to {city_for_api!r} for weather request")
        except Exception as e:
            logger.warning(f"City name resolution failed, using original name {city!r}: {e}")
        
        data = await self._get(
            {"city": city_for_api, "country": country, "provider": provider.value}
        )
        
        return WeatherLookupResponse(
            city=city,
            resolved_city=city_for_api,
            country=country,
            provider=provider,
            provider_name=provider.display_name,
            weather=data,
        )
    
    async def _get(self, params: dict) -> dict:
        try:
            if self._client is not None:
                response = await self._client.get(
                    self.base_url,
                    params=params,
                    headers={"Accept": "application/json"},
                    timeout=self.timeout,
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(
                        self.base_url,
                        params=params,
                        headers={"Accept": "application/json"},
                    )
        except httpx.TimeoutException as e:
            logger.error(f"Weather request timed out for {params['city']!r}: {e}")
            raise GatewayTimeoutException(TIMEOUT_MESSAGE)
        except httpx.HTTPError as e:
            logger.error(f"Error fetching weather for {params['city']!r}: {e}")
            raise UpstreamException(NETWORK_ERROR_MESSAGE)
        
        if not response.is_success:
            raise UpstreamException(self._error_message(response))
        
        try:
            return response.json()
        except ValueError:
            logger.error(f"Weather endpoint returned non-JSON body for {params['city']!r}")
            raise UpstreamException(INVALID_RESPONSE_MESSAGE)
    
    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Server-provided `message`, or a generic status-based one."""
        try:
            body = response.json()
        except ValueError:
            body = {"message": GENERIC_SERVER_ERROR}
        
        message = body.get("message") if isinstance(body, dict) else None
        return message or f"HTTP error: {response.status_code}"
