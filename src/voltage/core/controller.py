"""Core orchestration for voltage.

The controller is a pure state machine: it consumes one message at a time
and answers with the commands the surrounding loop must run. It never
performs I/O itself; results come back later as messages.
"""

from __future__ import annotations

import logging

from ..locales import REROLL_HINTS
from .config_model import RcConfig
from .errors import VoltageError
from .headings import HeadingPool, lookup, pool_for
from .messages import (
    CheckRc,
    Command,
    ErrorDisplayElapsed,
    FetchDefaultRc,
    InitSelector,
    KeyPressed,
    LoadRc,
    Message,
    NewHeading,
    PersistRc,
    Quit,
    RcCheckResult,
    RcContent,
    RcPersisted,
    Reroll,
    ScheduleMessage,
    SelectorReady,
)
from .ports import LocaleSelector
from .state_machine import AppEvent, AppState, AppStateMachine

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"q", "ctrl+c", "ctrl+q"})
REROLL_KEYS = frozenset({"space", "enter"})

DEFAULT_ERROR_DISPLAY_SECONDS = 10.0


class VoltageController:
    """Drives one voltage session from config loading to heading display."""

    def __init__(
        self,
        selector: LocaleSelector,
        error_display_seconds: float = DEFAULT_ERROR_DISPLAY_SECONDS,
    ):
        self._selector = selector
        self._error_display_seconds = error_display_seconds
        self._state = AppStateMachine()
        self._handlers = {
            SelectorReady: self._on_selector_ready,
            RcCheckResult: self._on_check_result,
            RcContent: self._on_content,
            RcPersisted: self._on_persisted,
            NewHeading: self._on_new_heading,
            KeyPressed: self._on_key,
            ErrorDisplayElapsed: self._on_error_display_elapsed,
        }

        self.rc = RcConfig()
        self.error: VoltageError | None = None
        self.pool: HeadingPool | None = None
        self.heading_index: int | None = None
        self.heading = ""
        self.finished = False
        self._selector_ready = False
        self._persisting = False
        self._rolling = False

    @property
    def state(self) -> AppState:
        return self._state.state

    @property
    def selector_visible(self) -> bool:
        return self.state is AppState.SELECTING_LOCALE and self._selector_ready

    def start(self) -> list[Command]:
        """Commands to issue on startup; they may complete in either order."""
        return [InitSelector(), CheckRc()]

    def handle(self, message: Message) -> list[Command]:
        if self.finished:
            logger.debug("session finished, dropping %r", message)
            return []

        if isinstance(message, KeyPressed) and message.key in QUIT_KEYS:
            logger.info("quit requested in %s", self.state.name)
            return self._finish(0)

        handler = self._handlers.get(type(message))
        if handler is None:
            logger.warning("no handler for %r", message)
            return []
        return handler(message)

    def render(self) -> str:
        state = self.state
        if state is AppState.LOADING_CONFIG:
            return "Loading...\n"
        if state is AppState.CONFIG_ERROR:
            return f"error!\n {self.error}"
        if state is AppState.SELECTING_LOCALE:
            if not self.selector_visible:
                return "Loading...\n"
            return self._selector.render()
        hint = REROLL_HINTS.get(self.pool.locale, "") if self.pool else ""
        return f"{self.heading}\n\n{hint}"

    # Message handlers

    def _on_selector_ready(self, message: SelectorReady) -> list[Command]:
        self._selector_ready = True
        return []

    def _on_check_result(self, message: RcCheckResult) -> list[Command]:
        logger.debug("got rc check result: %r", message)
        if not self._expect(AppState.LOADING_CONFIG, message):
            return []
        if message.error is not None:
            return self._fail(message.error)
        if not message.exists:
            logger.info("rc file missing, fetching defaults")
            return [FetchDefaultRc()]
        return [LoadRc()]

    def _on_content(self, message: RcContent) -> list[Command]:
        logger.debug("got rc content: %r", message.content)
        if not self._expect(AppState.LOADING_CONFIG, message):
            return []
        if message.error is not None:
            return self._fail(message.error)

        try:
            self.rc = RcConfig.from_mapping(message.content or {})
        except VoltageError as exc:
            return self._fail(exc)

        # Locale can be empty when the rc file was just downloaded.
        if self.rc.locale is None:
            self._state.transition(AppEvent.LOCALE_MISSING)
            return []

        self._state.transition(AppEvent.LOCALE_FOUND)
        return self._start_headings()

    def _on_persisted(self, message: RcPersisted) -> list[Command]:
        if not self._expect(AppState.SELECTING_LOCALE, message) or not self._persisting:
            return []
        self._persisting = False
        if message.error is not None:
            return self._fail(message.error)

        logger.info("locale %s saved", self.rc.locale.value)
        self._state.transition(AppEvent.LOCALE_PERSISTED)
        return self._start_headings()

    def _on_new_heading(self, message: NewHeading) -> list[Command]:
        if not self._expect(AppState.SHOWING_HEADING, message):
            return []
        self._rolling = False
        if message.error is not None:
            return self._fail(message.error)

        self.heading_index = message.index
        self.heading = lookup(self.pool, message.index)
        self._state.transition(AppEvent.HEADING_ROLLED)
        return []

    def _on_key(self, message: KeyPressed) -> list[Command]:
        if self._state.terminal:
            return []

        if self.state is AppState.SELECTING_LOCALE:
            if self._persisting:
                return []
            commands = list(self._selector.update(message.key))
            locale = self._selector.submitted_value()
            if locale is None:
                return commands

            logger.info("locale %s chosen", locale.value)
            self.rc = RcConfig(api=self.rc.api, locale=locale)
            self._persisting = True
            return commands + [PersistRc(self.rc.to_mapping())]

        if self.state is AppState.SHOWING_HEADING and message.key in REROLL_KEYS:
            # one reroll at a time, so each result excludes the heading on screen
            if self.pool is None or self._rolling:
                return []
            self._rolling = True
            return [Reroll(self.pool, self.heading_index)]

        return []

    def _on_error_display_elapsed(self, message: ErrorDisplayElapsed) -> list[Command]:
        if not self._expect(AppState.CONFIG_ERROR, message):
            return []
        return self._finish(1)

    # Helpers

    def _start_headings(self) -> list[Command]:
        self.pool = pool_for(self.rc.locale)
        self.heading_index = None
        self._rolling = True
        return [Reroll(self.pool, None)]

    def _fail(self, error: VoltageError) -> list[Command]:
        logger.error("%s: %s", type(error).__name__, error)
        self.error = error
        self._state.transition(AppEvent.FAILED)
        return [ScheduleMessage(self._error_display_seconds, ErrorDisplayElapsed())]

    def _finish(self, exit_code: int) -> list[Command]:
        self.finished = True
        return [Quit(exit_code)]

    def _expect(self, state: AppState, message: Message) -> bool:
        if self.state is state:
            return True
        logger.debug("ignoring %r in %s", message, self.state.name)
        return False
