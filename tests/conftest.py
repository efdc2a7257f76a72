"""Shared pytest fixtures and utilities for all tests."""

import asyncio

import pytest

from app.translation.service import reset_resolver


class FakeTranslator:
    """Translator double that records calls and returns canned answers."""

    def __init__(self, answers=None, error=None, delay=0.0):
        self.answers = answers or {}
        self.error = error
        self.delay = delay
        self.calls = []

    async def translate(self, text, source_lang, target_lang):
        self.calls.append((text, source_lang, target_lang))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.answers.get(text, "")


@pytest.fixture
def fake_translator():
    return FakeTranslator(answers={"Москва": "Moscow", "Тула": "Tula", "Казань": "Kazan"})


@pytest.fixture(autouse=True)
def _reset_resolver():
    """Each test starts without a process-wide resolver."""
    reset_resolver()
    yield
    reset_resolver()


@pytest.fixture
def make_translator():
    """Factory for translators with custom answers or a raised error."""
    return FakeTranslator
