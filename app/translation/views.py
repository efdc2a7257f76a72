"""API routes for city name resolution."""

from fastapi import APIRouter, Query

from app.core.exceptions import BadRequestException
from app.translation.models import (
    BatchResolutionRequest,
    BatchResolutionResponse,
    CityResolutionResponse,
)
from app.translation.service import get_resolver_or_default, resolve_city_name

router = APIRouter(prefix="/translation", tags=["Translation"])


@router.get("/resolve", response_model=CityResolutionResponse)
async def resolve_city(city: str = Query(..., description="City name, e.g. Москва")):
    """
    Resolve a city name to the form used for weather queries.

    Translation is attempted first; if it fails the name is transliterated.
    """
    if not city.strip():
        raise BadRequestException("City name must not be empty")
    resolved = await resolve_city_name(city)
    return CityResolutionResponse(original=city, resolved=resolved)


@router.post("/batch", response_model=BatchResolutionResponse)
async def resolve_batch(request: BatchResolutionRequest):
    """
    Resolve several names in order.

    Each entry succeeds or fails independently; failures are reported, not
    transliterated.
    """
    results = await get_resolver_or_default().resolve_batch(request.texts)
    return BatchResolutionResponse(results=results)
