"""Tests for the session reducer transition table."""

from datetime import UTC, datetime

import pytest

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
    SuggestionsArrived,
    SuggestionsFailed,
    ThemeToggled,
)
from weatherapp.session.reducer import reduce


class TestQueryAndSuggestions:
    def test_non_empty_query_starts_suggesting(self):
        state = reduce(SessionState(), QueryChanged("Mum"))
        assert state.query == "Mum"
        assert state.phase == SearchPhase.SUGGESTING

    def test_empty_query_clears_suggestions(self):
        state = SessionState(query="Mum", suggestions=("Mumbai",), phase=SearchPhase.SUGGESTING)
        state = reduce(state, QueryChanged(""))
        assert state.suggestions == ()
        assert state.phase == SearchPhase.IDLE

    def test_suggestions_for_live_query_applied(self):
        state = reduce(SessionState(), QueryChanged("Mum"))
        state = reduce(state, SuggestionsArrived("Mum", ("Mumbai",)))
        assert state.suggestions == ("Mumbai",)

    def test_suggestions_for_stale_query_ignored(self):
        state = reduce(SessionState(), QueryChanged("Mum"))
        state = reduce(state, SuggestionsArrived("Mum", ("Mumbai",)))
        state = reduce(state, QueryChanged("Mumb"))
        before = state
        state = reduce(state, SuggestionsArrived("Mu", ("Mussoorie", "Mumbai")))
        assert state is before
        assert state.suggestions == ("Mumbai",)

    def test_suggestions_after_selection_ignored(self):
        state = reduce(SessionState(), QueryChanged("Mum"))
        state = reduce(state, CitySelected("Mum"))
        state = reduce(state, SuggestionsArrived("Mum", ("Mumbai",)))
        assert state.suggestions == ()

    def test_failed_suggestions_degrade_to_empty(self):
        state = SessionState(query="Pu", suggestions=("Pune",), phase=SearchPhase.SUGGESTING)
        state = reduce(state, SuggestionsFailed("Pu"))
        assert state.suggestions == ()
        assert state.error == ""

    def test_city_selected_clears_query(self):
        state = SessionState(query="Mum", suggestions=("Mumbai",), phase=SearchPhase.SUGGESTING)
        state = reduce(state, CitySelected("Mumbai"))
        assert state.query == ""
        assert state.suggestions == ()
        assert state.phase == SearchPhase.SELECTED


class TestFetchLifecycle:
    def test_started_sets_loading_and_clears_error(self):
        state = reduce(SessionState(error="City not found"), FetchStarted("Pune"))
        assert state.loading is True
        assert state.error == ""

    def test_succeeded_replaces_weather_and_forecast(self, weather, forecast):
        state = reduce(SessionState(loading=True), FetchSucceeded("Mumbai", weather, forecast))
        assert state.current_weather == weather
        assert state.forecast == forecast
        assert state.loading is True  # cleared by FetchSettled

    def test_failed_clears_both(self, weather, forecast):
        state = SessionState(current_weather=weather, forecast=forecast, loading=True)
        state = reduce(state, FetchFailed("Atlantis", "City not found"))
        assert state.current_weather is None
        assert state.forecast == ()
        assert state.error == "City not found"

    def test_settled_clears_loading(self):
        assert reduce(SessionState(loading=True), FetchSettled("Pune")).loading is False

    def test_error_dismissed(self):
        assert reduce(SessionState(error="boom"), ErrorDismissed()).error == ""

    def test_home_resets_view(self, weather, forecast):
        state = SessionState(
            query="Pu", suggestions=("Pune",), current_weather=weather,
            forecast=forecast, error="x", phase=SearchPhase.SUGGESTING,
        )
        state = reduce(state, HomeRequested())
        assert state.current_weather is None
        assert state.forecast == ()
        assert state.error == ""
        assert state.query == ""
        assert state.suggestions == ()
        assert state.phase == SearchPhase.IDLE


class TestHistoryAndChrome:
    def test_history_loaded_replaces(self, history_entries):
        state = reduce(SessionState(), HistoryLoaded(tuple(history_entries)))
        assert [e.city for e in state.history] == ["Mumbai", "Delhi"]

    def test_history_cleared(self, history_entries):
        state = SessionState(history=tuple(history_entries))
        assert reduce(state, HistoryCleared()).history == ()

    def test_panel_toggle_and_close(self):
        state = reduce(SessionState(), HistoryPanelToggled())
        assert state.history_visible is True
        assert reduce(state, HistoryPanelToggled()).history_visible is False
        assert reduce(state, HistoryPanelClosed()).history_visible is False

    def test_theme_toggle(self):
        state = reduce(SessionState(), ThemeToggled())
        assert state.theme == Theme.DARK
        assert reduce(state, ThemeToggled()).theme == Theme.LIGHT

    def test_clock_tick(self):
        now = datetime(2024, 6, 1, 9, 30, tzinfo=UTC)
        assert reduce(SessionState(), ClockTicked(now)).now == now

    def test_unknown_event_rejected(self):
        with pytest.raises(TypeError):
            reduce(SessionState(), object())  # type: ignore[arg-type]
