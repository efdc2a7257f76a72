#!/usr/bin/env python3
"""
Weather lookup and city name resolution from the command line.

Usage:
    # Current weather for a city (Russian or English name)
    python -m scripts.lookup_weather --city Москва

    # Pick a provider and country
    python -m scripts.lookup_weather --city Казань --provider weatherapi --country RU

    # Show typeahead suggestions for a partial name
    python -m scripts.lookup_weather --suggest Мос

    # Resolve several names without fetching weather
    python -m scripts.lookup_weather --resolve Москва Тула Paris

Exit codes:
    0 - Success
    1 - Partial failure (some names had to be transliterated)
    2 - Complete failure or invalid arguments
"""

import argparse
import asyncio
import json
import logging
import os
import sys

# Make app package importable when run from scripts/ or repo root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.cities.service import SuggestionEngine
from app.core.exceptions import AppException
from app.translation.service import initialize_resolver
from app.translation.transliteration import transliterate
from app.weather.models import ApiProvider
from app.weather.service import WeatherService


# Configure logging for terminal output
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


async def lookup_city(city: str, country: str | None, provider: str | None) -> int:
    """Resolve and fetch weather for one city. Returns an exit code."""
    service = WeatherService()
    try:
        result = await service.fetch_weather(
            city,
            country=country,
            provider=ApiProvider(provider) if provider else None,
        )
    except AppException as e:
        logger.error(f"Weather lookup for {city!r} failed: {e.detail}")
        return 2
    
    print(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
    return 0


async def suggest(query: str) -> int:
    """Print ranked suggestions for a partial city name."""
    engine = SuggestionEngine(delay=0)
    session = await engine.request_matches(query)
    
    if not session.show_suggestions:
        logger.warning(f"No cities match {query!r}")
        return 2
    
    for index, name in enumerate(session.suggestions, start=1):
        print(f"{index}. {name}")
    return 0


async def resolve_names(names: list[str]) -> int:
    """
    Resolve names in order, transliterating any that fail.

    Returns 0 if all translated, 1 if some were transliterated, 2 if all were.
    """
    resolver = initialize_resolver()
    results = await resolver.resolve_batch(names)
    
    failures = 0
    for result in results:
        if result.success:
            print(f"{result.original_text} -> {result.translated_text}")
        else:
            failures += 1
            fallback = transliterate(result.original_text)
            logger.warning(f"{result.original_text!r}: {result.error}")
            print(f"{result.original_text} -> {fallback} (transliterated)")
    
    if failures == 0:
        return 0
    return 1 if failures < len(results) else 2


async def main():
    parser = argparse.ArgumentParser(
        description="Look up weather for Russian or English city names",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--city",
        type=str,
        help="Fetch weather for a city (e.g. 'Москва')",
    )
    parser.add_argument(
        "--country",
        type=str,
        help="ISO country code (default from settings)",
    )
    parser.add_argument(
        "--provider",
        choices=[p.value for p in ApiProvider],
        help="Weather data source (default from settings)",
    )
    parser.add_argument(
        "--suggest",
        type=str,
        metavar="QUERY",
        help="Show city suggestions for a partial name",
    )
    parser.add_argument(
        "--resolve",
        nargs="+",
        metavar="NAME",
        help="Resolve one or more city names without fetching weather",
    )
    
    args = parser.parse_args()
    
    modes = [m for m in (args.city, args.suggest, args.resolve) if m]
    if not modes:
        parser.error("Must specify one of --city, --suggest or --resolve")
    if len(modes) > 1:
        parser.error("--city, --suggest and --resolve are mutually exclusive")
    
    if args.city:
        initialize_resolver()
        sys.exit(await lookup_city(args.city, args.country, args.provider))
    elif args.suggest:
        sys.exit(await suggest(args.suggest))
    else:
        sys.exit(await resolve_names(args.resolve))


if __name__ == "__main__":
    asyncio.run(main())
