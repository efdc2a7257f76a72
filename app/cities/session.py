"""
Suggestion panel state for a single input session.

The panel is modeled as an immutable `SuggestionSession` plus a pure
`reduce()` function that maps (session, event) to a `Transition`. The
engine in `app.cities.service` owns the async part (delay, publication);
everything here is synchronous and has no side effects.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Sequence, Tuple, Union


class PanelState(str, Enum):
    IDLE = "idle"
    OPEN = "open"


class Key(str, Enum):
    """Keys the suggestion panel reacts to (DOM `KeyboardEvent.key` names)."""
    ARROW_DOWN = "ArrowDown"
    ARROW_UP = "ArrowUp"
    ENTER = "Enter"
    ESCAPE = "Escape"


@dataclass(frozen=True)
class SuggestionSession:
    """Suggestions shown for the current input plus keyboard cursor."""
    suggestions: Tuple[str, ...] = ()
    selected_index: int = -1
    is_loading: bool = False
    last_query: str = ""

    @property
    def show_suggestions(self) -> bool:
        return len(self.suggestions) > 0

    @property
    def state(self) -> PanelState:
        return PanelState.OPEN if self.show_suggestions else PanelState.IDLE

    @property
    def selected(self) -> Optional[str]:
        if 0 <= self.selected_index < len(self.suggestions):
            return self.suggestions[self.selected_index]
        return None


CLEARED = SuggestionSession()


# Events

@dataclass(frozen=True)
class MatchRequested:
    query: str


@dataclass(frozen=True)
class MatchesPublished:
    suggestions: Sequence[str] = field(default_factory=tuple)


@dataclass(frozen=True)
class KeyPressed:
    key: Union[Key, str]


@dataclass(frozen=True)
class SuggestionClicked:
    suggestion: str


@dataclass(frozen=True)
class BlurredOutside:
    pass


@dataclass(frozen=True)
class Cleared:
    pass


@dataclass(frozen=True)
class MatchCancelled:
    """The pending match cycle was abandoned before it published."""


Event = Union[
    MatchRequested,
    MatchesPublished,
    MatchCancelled,
    KeyPressed,
    SuggestionClicked,
    BlurredOutside,
    Cleared,
]


@dataclass(frozen=True)
class Transition:
    """
    Result of applying an event.

    `committed` is set when a suggestion was chosen (Enter on a selected row
    or a click). `run_search` is set when Enter should trigger the primary
    search with the typed text. `start_matching` tells the engine to schedule
    a match cycle for `session.last_query`.
    """
    session: SuggestionSession
    committed: Optional[str] = None
    run_search: bool = False
    start_matching: bool = False


def reduce(session: SuggestionSession, event: Event) -> Transition:
    """Apply a single event to the session."""
    if isinstance(event, MatchRequested):
        return _reduce_match_request(session, event.query)

    if isinstance(event, MatchesPublished):
        return Transition(
            session=replace(
                session,
                suggestions=tuple(event.suggestions),
                selected_index=-1,
                is_loading=False,
            )
        )

    if isinstance(event, KeyPressed):
        try:
            key = Key(event.key)
        except ValueError:
            return Transition(session=session)
        return _reduce_key(session, key)

    if isinstance(event, SuggestionClicked):
        return Transition(session=CLEARED, committed=event.suggestion)

    if isinstance(event, MatchCancelled):
        # Forget the query so the same input can start a fresh cycle
        return Transition(session=replace(session, is_loading=False, last_query=""))

    if isinstance(event, (BlurredOutside, Cleared)):
        return Transition(session=CLEARED)

    raise TypeError(f"Unsupported suggestion event: {event!r}")


def _reduce_match_request(session: SuggestionSession, query: str) -> Transition:
    if not query.strip():
        return Transition(session=CLEARED)

    # Unchanged input (e.g. refocus) does not trigger another match cycle
    if query == session.last_query:
        return Transition(session=session)

    return Transition(
        session=replace(session, last_query=query, is_loading=True),
        start_matching=True,
    )


def _reduce_key(session: SuggestionSession, key: Key) -> Transition:
    count = len(session.suggestions)

    if key == Key.ENTER:
        if session.state == PanelState.OPEN and session.selected is not None:
            return Transition(session=CLEARED, committed=session.selected)
        # No highlighted row: search with whatever was typed
        return Transition(session=CLEARED, run_search=True)

    if session.state == PanelState.IDLE:
        return Transition(session=session)

    if key == Key.ARROW_DOWN:
        return Transition(session=replace(session, selected_index=(session.selected_index + 1) % count))

    if key == Key.ARROW_UP:
        # From "nothing selected" Up wraps straight to the last row
        current = max(session.selected_index, 0)
        return Transition(session=replace(session, selected_index=(current - 1 + count) % count))

    if key == Key.ESCAPE:
        return Transition(session=CLEARED)

    return Transition(session=session)
