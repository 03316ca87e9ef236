"""One-shot display session.

A session starts in ``LOADING``, receives the query outcome once, shows a
single frame and ends. There is no transition back to ``LOADING``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from loguru import logger


class State(Enum):
    LOADING = "loading"
    DISPLAYING = "displaying"
    ERROR = "error"
    DONE = "done"


class Event(Enum):
    DATA_READY = "data_ready"
    ERROR_READY = "error_ready"
    KEY_PRESS = "key_press"


_TRANSITIONS: dict[tuple[State, Event], State] = {
    (State.LOADING, Event.DATA_READY): State.DISPLAYING,
    (State.LOADING, Event.ERROR_READY): State.ERROR,
    (State.LOADING, Event.KEY_PRESS): State.DONE,
    (State.DISPLAYING, Event.KEY_PRESS): State.DONE,
    (State.ERROR, Event.KEY_PRESS): State.DONE,
}


class Session:
    def __init__(self) -> None:
        self.state = State.LOADING
        self.payload: Any = None

    def dispatch(self, event: Event, payload: Any = None) -> State:
        nxt = _TRANSITIONS.get((self.state, event))
        if nxt is None:
            logger.debug(f"Ignoring {event.name} in state {self.state.name}")
            return self.state

        logger.debug(f"{self.state.name} --{event.name}--> {nxt.name}")
        if event is not Event.KEY_PRESS:
            self.payload = payload
        self.state = nxt
        return nxt

    def finish(self) -> State:
        """End the session after its frame has been shown."""
        if self.state in (State.DISPLAYING, State.ERROR):
            self.state = State.DONE
        return self.state
