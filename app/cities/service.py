"""Service layer for city suggestions."""

import asyncio
import logging
from typing import List, Optional, Sequence

from app.core.config import get_settings
from app.cities.session import (
    Cleared,
    Event,
    MatchCancelled,
    MatchesPublished,
    MatchRequested,
    SuggestionSession,
    Transition,
    reduce,
)
from app.cities.vocabulary import RUSSIAN_CITIES

logger = logging.getLogger(__name__)


def rank_matches(query: str, vocabulary: Sequence[str] = RUSSIAN_CITIES, limit: int = 8) -> List[str]:
    """
    Rank vocabulary entries against a partial city name.

    Case-insensitive. Entries starting with the query come first, then entries
    merely containing it; each tier keeps vocabulary order. At most `limit`
    names are returned.
    """
    normalized_query = (query or "").lower().strip()
    if not normalized_query:
        return []

    prefix_matches = [city for city in vocabulary if city.lower().startswith(normalized_query)]
    substring_matches = [
        city for city in vocabulary
        if normalized_query in city.lower() and city not in prefix_matches
    ]
    return (prefix_matches + substring_matches)[:limit]


class CitiesService:
    """Service for city search/typeahead."""

    @classmethod
    async def search(cls, query: str = "", limit: Optional[int] = None) -> List[str]:
        """
        Stateless typeahead lookup against the static city directory.

        Queries shorter than SUGGESTION_MIN_QUERY_LENGTH return nothing.
        """
        settings = get_settings()
        q = (query or "").strip()
        if len(q) < settings.SUGGESTION_MIN_QUERY_LENGTH:
            return []
        return rank_matches(q, RUSSIAN_CITIES, limit or settings.SUGGESTION_LIMIT)


class SuggestionEngine:
    """
    Suggestion panel for one input session.

    `request_matches()` waits a short delay before computing matches so rapid
    typing collapses into a single cycle. Every cycle runs in its own task
    keyed by a request id; a newer request cancels the pending one, and a
    result is only published while its id is still the latest.
    """

    def __init__(
        self,
        vocabulary: Sequence[str] = RUSSIAN_CITIES,
        limit: Optional[int] = None,
        delay: Optional[float] = None,
    ):
        settings = get_settings()
        self.vocabulary = tuple(vocabulary)
        self.limit = limit if limit is not None else settings.SUGGESTION_LIMIT
        self.delay = delay if delay is not None else settings.SUGGESTION_DELAY_SECONDS
        self.session = SuggestionSession()
        self._request_id = 0
        self._pending: Optional[asyncio.Task] = None

    async def request_matches(self, query: str) -> SuggestionSession:
        """Run (or skip) a match cycle for `query` and return the resulting session."""
        transition = self.dispatch(MatchRequested(query))
        if not transition.start_matching:
            return self.session

        self._cancel_pending()
        self._request_id += 1
        task = asyncio.create_task(self._run_match(query, self._request_id))
        self._pending = task

        try:
            # wait() does not raise when the task is cancelled by a newer request
            await asyncio.wait({task})
        except asyncio.CancelledError:
            if self._pending is task:
                self._cancel_pending()
                self._apply(MatchCancelled())
            else:
                task.cancel()
            raise
        return self.session

    def dispatch(self, event: Event) -> Transition:
        """Apply a UI event; anything that closes the panel abandons the pending cycle."""
        transition = self._apply(event)
        if not self.session.is_loading:
            self._cancel_pending()
        return transition

    def clear(self) -> None:
        self.dispatch(Cleared())

    def _apply(self, event: Event) -> Transition:
        transition = reduce(self.session, event)
        self.session = transition.session
        return transition

    def _cancel_pending(self) -> None:
        # Bumping the id also makes an already-running cycle's result stale
        self._request_id += 1
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None

    async def _run_match(self, query: str, request_id: int) -> None:
        if self.delay > 0:
            await asyncio.sleep(self.delay)

        if request_id != self._request_id:
            return

        try:
            matches = rank_matches(query, self.vocabulary, self.limit)
        except Exception:
            logger.exception(f"Error in autocomplete for query {query!r}")
            matches = []

        self._apply(MatchesPublished(matches))
