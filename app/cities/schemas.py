"""Schemas for city search and responses."""

from typing import List
from pydantic import BaseModel, Field


class CitySearchResponse(BaseModel):
    """List response for city search/typeahead."""
    cities: List[str] = Field(default_factory=list)
    show_suggestions: bool = False
