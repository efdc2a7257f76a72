"""OpenAI-backed machine translation for place names."""

from typing import Optional
from openai import AsyncOpenAI

from app.core.config import get_settings


LANGUAGE_NAMES = {
    "ru": "Russian",
    "en": "English",
}


class OpenAITranslator:
    """Translates short texts (city names) with a chat completion."""
    
    def __init__(self, client: Optional[AsyncOpenAI] = None, model: Optional[str] = None):
        settings = get_settings()
        self._client = client
        self.model = model or settings.OPENAI_MODEL
    
    @property
    def client(self) -> AsyncOpenAI:
        # Created lazily so a missing key surfaces as a classifiable request error
        if self._client is None:
            self._client = AsyncOpenAI(api_key=get_settings().OPENAI_API_KEY)
        return self._client
    
    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """Translate `text` and return the bare translation."""
        source = LANGUAGE_NAMES.get(source_lang, source_lang)
        target = LANGUAGE_NAMES.get(target_lang, target_lang)
        
        prompt = f"""Translate this {source} place name into {target} as it is commonly written in {target}.
If it is a city, return the conventional {target} name of the city (e.g. "Москва" -> "Moscow").

Return ONLY the translated name, no quotes, no explanations.

{text}"""
        
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=60,
            temperature=0,
        )
        
        if not response.choices or not response.choices[0].message.content:
            raise ValueError("OpenAI returned an empty response")
        
        return response.choices[0].message.content.strip().strip('"').strip()
