"""Translation-related models and schemas."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field

from app.core.config import get_settings


class TranslationErrorKind(str, Enum):
    """Why a translation attempt failed."""
    TIMEOUT = "timeout"
    RATE_LIMITED = "rate_limited"
    ACCESS_ERROR = "access_error"
    UNKNOWN = "unknown"


ERROR_MESSAGES = {
    TranslationErrorKind.TIMEOUT: "Translation timed out",
    TranslationErrorKind.RATE_LIMITED: "Translator quota exceeded",
    TranslationErrorKind.ACCESS_ERROR: "Translation service access error",
    TranslationErrorKind.UNKNOWN: "Failed to translate text",
}

EMPTY_TEXT_MESSAGE = "Text to translate must not be empty"


@dataclass(frozen=True)
class ResolverConfig:
    """Language pair and per-call timeout (seconds) for name resolution."""
    source_lang: str = "ru"
    target_lang: str = "en"
    timeout: float = 5.0

    @classmethod
    def from_settings(cls) -> "ResolverConfig":
        settings = get_settings()
        return cls(
            source_lang=settings.TRANSLATOR_SOURCE_LANG,
            target_lang=settings.TRANSLATOR_TARGET_LANG,
            timeout=settings.TRANSLATOR_TIMEOUT_SECONDS,
        )


class ResolutionResult(BaseModel):
    """
    Outcome of resolving one name.

    Either `success` with a non-empty `translated_text`, or a failure with an
    empty `translated_text` and `error` set. Use `ok()` / `failed()`.
    """
    success: bool
    translated_text: str = ""
    original_text: str
    error: Optional[str] = None
    error_kind: Optional[TranslationErrorKind] = None

    @classmethod
    def ok(cls, original_text: str, translated_text: str) -> "ResolutionResult":
        return cls(success=True, translated_text=translated_text, original_text=original_text)

    @classmethod
    def failed(
        cls,
        original_text: str,
        error: str,
        error_kind: Optional[TranslationErrorKind] = None,
    ) -> "ResolutionResult":
        return cls(success=False, original_text=original_text, error=error, error_kind=error_kind)


class CityResolutionResponse(BaseModel):
    """Response schema for single city resolution."""
    original: str
    resolved: str


class BatchResolutionRequest(BaseModel):
    """Request schema for batch resolution."""
    texts: List[str] = Field(..., max_length=50, description="Names to resolve, in order")


class BatchResolutionResponse(BaseModel):
    """Positional results, one per requested name."""
    results: List[ResolutionResult] = Field(default_factory=list)
