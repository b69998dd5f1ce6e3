"""Session reducer: the full transition table from (state, event) to state.

Every change to SessionState goes through reduce(). Weather and forecast are
always set or cleared together, and suggestions only land while the query
they were fetched for is still the live one.
"""

from dataclasses import replace

from weatherapp.models.session import SearchPhase, SessionState, Theme
from weatherapp.session.events import (
    CitySelected,
    ClockTicked,
    ErrorDismissed,
    FetchFailed,
    FetchSettled,
    FetchStarted,
    FetchSucceeded,
    HistoryCleared,
    HistoryLoaded,
    HistoryPanelClosed,
    HistoryPanelToggled,
    HomeRequested,
    QueryChanged,
    SessionEvent,
    SuggestionsArrived,
    SuggestionsFailed,
    ThemeToggled,
)


def reduce(state: SessionState, event: SessionEvent) -> SessionState:
    if isinstance(event, QueryChanged):
        if event.query:
            return replace(state, query=event.query, phase=SearchPhase.SUGGESTING)
        return replace(state, query="", suggestions=(), phase=SearchPhase.IDLE)

    elif isinstance(event, SuggestionsArrived):
        if not _is_live(state, event.query):
            return state
        return replace(state, suggestions=tuple(event.suggestions))

    elif isinstance(event, SuggestionsFailed):
        if not _is_live(state, event.query):
            return state
        return replace(state, suggestions=())

    elif isinstance(event, CitySelected):
        return replace(state, query="", suggestions=(), phase=SearchPhase.SELECTED)

    elif isinstance(event, FetchStarted):
        return replace(state, loading=True, error="")

    elif isinstance(event, FetchSucceeded):
        return replace(
            state,
            current_weather=event.weather,
            forecast=tuple(event.forecast),
            query="",
            suggestions=(),
            error="",
        )

    elif isinstance(event, FetchFailed):
        return replace(state, current_weather=None, forecast=(), error=event.message)

    elif isinstance(event, FetchSettled):
        return replace(state, loading=False)

    elif isinstance(event, HistoryLoaded):
        return replace(state, history=tuple(event.entries))

    elif isinstance(event, HistoryCleared):
        return replace(state, history=())

    elif isinstance(event, HistoryPanelToggled):
        return replace(state, history_visible=not state.history_visible)

    elif isinstance(event, HistoryPanelClosed):
        return replace(state, history_visible=False)

    elif isinstance(event, ErrorDismissed):
        return replace(state, error="")

    elif isinstance(event, HomeRequested):
        return replace(
            state,
            current_weather=None,
            forecast=(),
            error="",
            query="",
            suggestions=(),
            phase=SearchPhase.IDLE,
        )

    elif isinstance(event, ThemeToggled):
        theme = Theme.DARK if state.theme == Theme.LIGHT else Theme.LIGHT
        return replace(state, theme=theme)

    elif isinstance(event, ClockTicked):
        return replace(state, now=event.now)

    raise TypeError(f"Unknown session event: {event!r}")


def _is_live(state: SessionState, query: str) -> bool:
    return state.phase == SearchPhase.SUGGESTING and state.query == query
