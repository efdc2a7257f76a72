"""API routes for city typeahead."""

from fastapi import APIRouter, Query
from app.cities.service import CitiesService
from app.cities.schemas import CitySearchResponse

router = APIRouter(prefix="/cities", tags=["Cities"])


@router.get("", response_model=CitySearchResponse)
async def search_cities(
    query: str = Query("", description="Partial city name, Cyrillic or Latin"),
    limit: int = Query(8, ge=1, le=50, description="Max results to return"),
):
    """
    Case-insensitive city typeahead.

    Cities starting with the query are listed before cities that only contain
    it; results capped by `limit`.
    """
    cities = await CitiesService.search(query=query, limit=limit)
    return CitySearchResponse(cities=cities, show_suggestions=bool(cities))
