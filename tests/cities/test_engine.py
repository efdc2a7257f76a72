"""Tests for app.cities.service.SuggestionEngine."""

import asyncio

import pytest

from app.cities import service as cities_service
from app.cities.service import SuggestionEngine
from app.cities.session import BlurredOutside, Key, KeyPressed, PanelState


VOCABULARY = ("Новомосковск", "Москва", "Мосальск", "Тула", "Тверь")


@pytest.fixture
def engine():
    return SuggestionEngine(vocabulary=VOCABULARY, limit=8, delay=0.01)


class TestRequestMatches:
    @pytest.mark.asyncio
    async def test_publishes_ranked_matches(self, engine):
        session = await engine.request_matches("Мос")
        assert session.suggestions == ("Москва", "Мосальск", "Новомосковск")
        assert session.selected_index == -1
        assert not session.is_loading
        assert session.state == PanelState.OPEN

    @pytest.mark.asyncio
    async def test_loading_while_pending(self, engine):
        task = asyncio.create_task(engine.request_matches("Тул"))
        await asyncio.sleep(0)
        assert engine.session.is_loading
        await task
        assert not engine.session.is_loading
        assert engine.session.suggestions == ("Тула",)

    @pytest.mark.asyncio
    async def test_empty_query_clears_prior_state(self, engine):
        await engine.request_matches("Мос")
        engine.dispatch(KeyPressed(Key.ARROW_DOWN))

        session = await engine.request_matches("")
        assert session.suggestions == ()
        assert session.selected_index == -1
        assert not session.is_loading
        assert session.last_query == ""

    @pytest.mark.asyncio
    async def test_same_query_twice_is_noop(self, engine, monkeypatch):
        calls = []
        real_rank = cities_service.rank_matches

        def counting_rank(*args, **kwargs):
            calls.append(args)
            return real_rank(*args, **kwargs)

        monkeypatch.setattr(cities_service, "rank_matches", counting_rank)

        await engine.request_matches("Мос")
        engine.dispatch(KeyPressed(Key.ARROW_DOWN))
        before = engine.session

        after = await engine.request_matches("Мос")
        assert after is before
        assert after.selected_index == 0
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_latest_request_wins(self, engine):
        first = asyncio.create_task(engine.request_matches("Мос"))
        await asyncio.sleep(0)
        second = asyncio.create_task(engine.request_matches("Тв"))
        await asyncio.gather(first, second)

        assert engine.session.suggestions == ("Тверь",)
        assert engine.session.last_query == "Тв"

    @pytest.mark.asyncio
    async def test_blur_discards_pending_cycle(self, engine):
        task = asyncio.create_task(engine.request_matches("Мос"))
        await asyncio.sleep(0)
        engine.dispatch(BlurredOutside())
        await task

        assert engine.session.suggestions == ()
        assert engine.session.state == PanelState.IDLE

    @pytest.mark.asyncio
    async def test_matching_failure_degrades_to_no_suggestions(self, engine, monkeypatch):
        def broken_rank(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(cities_service, "rank_matches", broken_rank)

        session = await engine.request_matches("Мос")
        assert session.suggestions == ()
        assert not session.show_suggestions
        assert not session.is_loading

    @pytest.mark.asyncio
    async def test_cancelled_caller_does_not_leave_session_loading(self, engine):
        task = asyncio.create_task(engine.request_matches("Мос"))
        await asyncio.sleep(0)
        assert engine.session.is_loading

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert not engine.session.is_loading
        assert engine.session.last_query == ""

        retry = await engine.request_matches("Мос")
        assert not retry.is_loading
        assert retry.suggestions == ("Москва", "Мосальск", "Новомосковск")

    @pytest.mark.asyncio
    async def test_zero_delay(self):
        engine = SuggestionEngine(vocabulary=VOCABULARY, delay=0)
        session = await engine.request_matches("тул")
        assert session.suggestions == ("Тула",)


class TestSelection:
    @pytest.mark.asyncio
    async def test_down_then_enter_commits_first_suggestion(self, engine):
        await engine.request_matches("Мос")
        engine.dispatch(KeyPressed(Key.ARROW_DOWN))
        transition = engine.dispatch(KeyPressed(Key.ENTER))

        assert transition.committed == "Москва"
        assert engine.session.state == PanelState.IDLE

    @pytest.mark.asyncio
    async def test_clear_resets_session(self, engine):
        await engine.request_matches("Мос")
        engine.clear()
        assert engine.session.suggestions == ()
        assert engine.session.last_query == ""

    @pytest.mark.asyncio
    async def test_query_can_be_repeated_after_clear(self, engine):
        await engine.request_matches("Мос")
        engine.clear()
        session = await engine.request_matches("Мос")
        assert session.suggestions[0] == "Москва"
