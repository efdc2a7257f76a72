"""
Pogoda API - Main application entry point.

Weather lookup for Russian city names.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_settings
from app.cities.views import router as cities_router
from app.translation.service import initialize_resolver, is_resolver_initialized, reset_resolver
from app.translation.views import router as translation_router
from app.weather.views import router as weather_router

settings = get_settings()
API_PREFIX = "/api/v1"

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown events."""
    # Startup
    initialize_resolver()
    yield
    # Shutdown
    reset_resolver()


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="""
## Pogoda API

Current weather for cities typed in Russian or English.

### Features

- 🔎 **City Suggestions**: Typeahead over a directory of Russian cities
- 🔤 **Name Resolution**: Russian city names are translated, or transliterated when the translator is unavailable
- 🌤️ **Weather**: Current conditions from OpenWeather or WeatherAPI

    """,
    lifespan=lifespan,
    docs_url=f"{API_PREFIX}/docs",
    redoc_url=f"{API_PREFIX}/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
routers = [
    cities_router,
    translation_router,
    weather_router,
]

for router in routers:
    app.include_router(router, prefix=API_PREFIX)


@app.get("/", tags=["Health"])
async def root():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "resolver_initialized": is_resolver_initialized(),
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "resolver": "initialized" if is_resolver_initialized() else "not initialized",
        "version": settings.APP_VERSION,
    }
