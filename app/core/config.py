"""
Application configuration using Pydantic Settings.
Loads from environment variables / .env file.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # App
    APP_NAME: str = "Pogoda API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = True
    
    # City suggestions
    SUGGESTION_LIMIT: int = 8
    SUGGESTION_DELAY_SECONDS: float = 0.15
    SUGGESTION_MIN_QUERY_LENGTH: int = 2
    
    # Translator (city name resolution)
    TRANSLATOR_SOURCE_LANG: str = "ru"
    TRANSLATOR_TARGET_LANG: str = "en"
    TRANSLATOR_TIMEOUT_SECONDS: float = 5.0
    TRANSLATOR_BATCH_DELAY_SECONDS: float = 0.1
    
    # OpenAI (translation backend)
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4o-mini"
    
    # Weather endpoint
    WEATHER_API_URL: str = "http://localhost:3000/api/weather"
    WEATHER_API_TIMEOUT_SECONDS: float = 10.0
    DEFAULT_COUNTRY: str = "RU"
    DEFAULT_PROVIDER: str = "openweather"
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"



@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
