"""Tests for app.cities.service.rank_matches and CitiesService."""

import pytest

from app.cities.service import CitiesService, rank_matches
from app.cities.vocabulary import RUSSIAN_CITIES


VOCABULARY = (
    "Новомосковск",
    "Москва",
    "Подмосковье",
    "Мосальск",
    "Тула",
)


class TestRankMatches:
    """Prefix tier first, then substring tier, both in vocabulary order."""

    def test_prefix_matches_before_substring_matches(self):
        assert rank_matches("мос", VOCABULARY) == ["Москва", "Мосальск", "Новомосковск", "Подмосковье"]

    def test_case_insensitive(self):
        assert rank_matches("МОС", VOCABULARY) == rank_matches("мос", VOCABULARY)

    def test_query_is_trimmed(self):
        assert rank_matches("  тул ", VOCABULARY) == ["Тула"]

    def test_prefix_entry_never_repeated_in_substring_tier(self):
        vocabulary = ("Ааа", "Баа")
        # "а" is a prefix of the first and also occurs later inside it
        assert rank_matches("а", vocabulary) == ["Ааа", "Баа"]

    def test_truncated_to_limit(self):
        vocabulary = tuple(f"Город {i}" for i in range(20))
        result = rank_matches("город", vocabulary, limit=8)
        assert result == list(vocabulary[:8])

    def test_default_limit_is_eight(self):
        assert len(rank_matches("а", RUSSIAN_CITIES)) == 8

    @pytest.mark.parametrize("query", ["", "   "])
    def test_blank_query_returns_nothing(self, query):
        assert rank_matches(query, VOCABULARY) == []

    def test_no_match(self):
        assert rank_matches("xyz", VOCABULARY) == []

    def test_real_vocabulary_moscow_first(self):
        result = rank_matches("Мос", RUSSIAN_CITIES)
        assert result[0] == "Москва"
        assert result.index("Москва") < result.index("Новомосковск")


class TestCitiesService:
    @pytest.mark.asyncio
    async def test_search_ranks_against_directory(self):
        cities = await CitiesService.search("каз")
        assert cities == ["Казань", "Владикавказ"]

    @pytest.mark.asyncio
    async def test_short_query_returns_nothing(self):
        assert await CitiesService.search("м") == []

    @pytest.mark.asyncio
    async def test_limit_is_respected(self):
        cities = await CitiesService.search("ск", limit=3)
        assert len(cities) == 3
