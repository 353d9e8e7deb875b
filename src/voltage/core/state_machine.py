"""Application state machine for the voltage session."""

from __future__ import annotations

from enum import Enum, auto
import logging


class AppState(Enum):
    LOADING_CONFIG = auto()
    CONFIG_ERROR = auto()
    SELECTING_LOCALE = auto()
    SHOWING_HEADING = auto()


class AppEvent(Enum):
    LOCALE_MISSING = auto()
    LOCALE_FOUND = auto()
    LOCALE_PERSISTED = auto()
    HEADING_ROLLED = auto()
    FAILED = auto()


_TRANSITIONS = {
    AppState.LOADING_CONFIG: {
        AppEvent.LOCALE_MISSING: AppState.SELECTING_LOCALE,
        AppEvent.LOCALE_FOUND: AppState.SHOWING_HEADING,
        AppEvent.FAILED: AppState.CONFIG_ERROR,
    },
    AppState.SELECTING_LOCALE: {
        AppEvent.LOCALE_PERSISTED: AppState.SHOWING_HEADING,
        AppEvent.FAILED: AppState.CONFIG_ERROR,
    },
    AppState.SHOWING_HEADING: {
        AppEvent.HEADING_ROLLED: AppState.SHOWING_HEADING,
        AppEvent.FAILED: AppState.CONFIG_ERROR,
    },
    AppState.CONFIG_ERROR: {},
}

TERMINAL_STATES = frozenset(state for state, events in _TRANSITIONS.items() if not events)


class AppStateMachine:
    def __init__(self):
        self.state = AppState.LOADING_CONFIG

    @property
    def terminal(self) -> bool:
        return self.state in TERMINAL_STATES

    def transition(self, event: AppEvent) -> AppState:
        next_state = _TRANSITIONS.get(self.state, {}).get(event, self.state)
        if next_state == self.state and event not in _TRANSITIONS.get(self.state, {}):
            logging.getLogger(__name__).warning(
                "Invalid state transition: %s --%s--> %s", self.state, event, next_state
            )
        self.state = next_state
        return self.state
