"""Session store: single owner of the current SessionState."""

import logging
from collections.abc import Callable

from weatherapp.models.session import SessionState
from weatherapp.session.events import ClockTicked, SessionEvent
from weatherapp.session.reducer import reduce

logger = logging.getLogger(__name__)

Listener = Callable[[SessionState], None]


class SessionStore:
    def __init__(self, initial: SessionState | None = None):
        self._state = initial or SessionState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> SessionState:
        return self._state

    def dispatch(self, event: SessionEvent) -> SessionState:
        """Apply an event and notify listeners if the state changed."""
        new_state = reduce(self._state, event)
        if not isinstance(event, ClockTicked):
            logger.debug("%s -> changed=%s", event, new_state is not self._state)
        if new_state is self._state:
            return new_state
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        return new_state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe
