"""
City name resolution service.

Turns a (usually Cyrillic) city name into the form sent to the weather
endpoint: Latin input is passed through, anything else goes to the
translator, and callers of `resolve_city_name()` get a transliteration
whenever translation fails.
"""

import asyncio
import logging
import re
from typing import List, Optional, Protocol, Sequence

import openai

from app.core.config import get_settings
from app.translation.models import (
    EMPTY_TEXT_MESSAGE,
    ERROR_MESSAGES,
    ResolutionResult,
    ResolverConfig,
    TranslationErrorKind,
)
from app.translation.openai_service import OpenAITranslator
from app.translation.transliteration import transliterate

logger = logging.getLogger(__name__)

TARGET_LANGUAGE_RE = re.compile(r"^[a-zA-Z\s\-,.'\"]+$")

# "api" / "key" as standalone words (letters only count as word characters, so "api_key" matches)
ACCESS_ERROR_RE = re.compile(r"(?<![a-z])(api|key)(?![a-z])", re.IGNORECASE)


class Translator(Protocol):
    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        ...


class ResolverNotInitializedError(RuntimeError):
    """get_resolver() was called before initialize_resolver()."""


def is_target_language(text: str) -> bool:
    """True if the text already looks like a Latin place name."""
    return bool(TARGET_LANGUAGE_RE.match(text.strip()))


def classify_translation_error(error: BaseException) -> TranslationErrorKind:
    """Map an exception raised by a translator onto a TranslationErrorKind."""
    # APITimeoutError subclasses APIConnectionError, RateLimitError subclasses APIStatusError
    if isinstance(error, (asyncio.TimeoutError, openai.APITimeoutError)):
        return TranslationErrorKind.TIMEOUT
    if isinstance(error, openai.RateLimitError):
        return TranslationErrorKind.RATE_LIMITED
    if isinstance(error, (openai.APIStatusError, openai.APIConnectionError)):
        return TranslationErrorKind.ACCESS_ERROR

    message = str(error).lower()
    if "quota" in message or "rate limit" in message:
        return TranslationErrorKind.RATE_LIMITED
    if ACCESS_ERROR_RE.search(message):
        return TranslationErrorKind.ACCESS_ERROR
    return TranslationErrorKind.UNKNOWN


def describe_translation_error(error: BaseException, kind: TranslationErrorKind) -> str:
    if kind == TranslationErrorKind.UNKNOWN and str(error):
        return f"{ERROR_MESSAGES[kind]}: {error}"
    return ERROR_MESSAGES[kind]


class NameResolver:
    """Resolves place names with a fixed language pair."""

    def __init__(
        self,
        config: Optional[ResolverConfig] = None,
        translator: Optional[Translator] = None,
        batch_delay: Optional[float] = None,
    ):
        self.config = config or ResolverConfig()
        self.translator = translator or default_translator()
        if batch_delay is None:
            batch_delay = get_settings().TRANSLATOR_BATCH_DELAY_SECONDS
        self.batch_delay = batch_delay

    async def resolve(self, text: str, timeout: Optional[float] = None) -> ResolutionResult:
        """
        Resolve a single name.

        Never raises for translator failures; they come back as a failed
        ResolutionResult carrying a readable message.
        """
        if not text.strip():
            return ResolutionResult.failed(text, EMPTY_TEXT_MESSAGE)

        if is_target_language(text):
            return ResolutionResult.ok(text, text)

        try:
            translated = await asyncio.wait_for(
                self.translator.translate(text, self.config.source_lang, self.config.target_lang),
                timeout=timeout if timeout is not None else self.config.timeout,
            )
            if not translated or not translated.strip():
                raise ValueError("Translator returned an empty result")
        except Exception as e:
            kind = classify_translation_error(e)
            logger.warning(f"Translation of {text!r} failed ({kind.value}): {e}")
            return ResolutionResult.failed(text, describe_translation_error(e, kind), kind)

        return ResolutionResult.ok(text, translated.strip())

    async def resolve_batch(self, texts: Sequence[str]) -> List[ResolutionResult]:
        """Resolve names one after another, pausing before each call to stay under rate limits."""
        results = []
        for text in texts:
            await asyncio.sleep(self.batch_delay)
            results.append(await self.resolve(text))
        return results


_resolver: Optional[NameResolver] = None
_default_translator: Optional[Translator] = None


def default_translator() -> Translator:
    """Shared OpenAI translator, so ad-hoc resolvers reuse one HTTP client."""
    global _default_translator
    if _default_translator is None:
        _default_translator = OpenAITranslator()
    return _default_translator


def initialize_resolver(
    config: Optional[ResolverConfig] = None,
    translator: Optional[Translator] = None,
) -> NameResolver:
    """Create the process-wide resolver. Calling it again replaces the previous one."""
    global _resolver
    _resolver = NameResolver(config or ResolverConfig.from_settings(), translator)
    logger.info(
        f"Name resolver initialized: {_resolver.config.source_lang} -> "
        f"{_resolver.config.target_lang}, timeout {_resolver.config.timeout}s"
    )
    return _resolver


def get_resolver() -> NameResolver:
    if _resolver is None:
        raise ResolverNotInitializedError("Resolver not initialized. Call initialize_resolver first.")
    return _resolver


def is_resolver_initialized() -> bool:
    return _resolver is not None


def reset_resolver() -> None:
    global _resolver, _default_translator
    _resolver = None
    _default_translator = None


def get_resolver_or_default() -> NameResolver:
    """The process-wide resolver, or a default one if it was never initialized."""
    if _resolver is None:
        logger.warning("Resolver not initialized, using default resolver")
        return NameResolver()
    return _resolver


async def translate_text(
    text: str,
    config: Optional[ResolverConfig] = None,
    timeout: Optional[float] = None,
) -> ResolutionResult:
    """One-off resolution with its own resolver (no initialization needed)."""
    return await NameResolver(config).resolve(text, timeout=timeout)


async def resolve_city_name(city_name: str) -> str:
    """
    Resolve a city name for the weather endpoint.

    Falls back to transliteration when translation fails, and to a default
    one-off resolver when the process-wide one was never initialized.
    """
    result = await get_resolver_or_default().resolve(city_name)
    if result.success:
        return result.translated_text

    logger.warning(f"Translation failed, transliterating {city_name!r}: {result.error}")
    return transliterate(city_name)
