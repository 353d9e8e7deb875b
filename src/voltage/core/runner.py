"""Executes controller commands and reports each outcome as one message."""

from __future__ import annotations

import logging
import random

from .errors import VoltageError
from .headings import reroll
from .messages import (
    CheckRc,
    FetchDefaultRc,
    InitSelector,
    LoadRc,
    Message,
    NewHeading,
    PersistRc,
    RcCheckResult,
    RcContent,
    RcPersisted,
    Reroll,
    SelectorReady,
)
from .ports import ConfigStore, LocaleSelector

logger = logging.getLogger(__name__)


class CommandRunner:
    """Runs work commands against the store, the selector and the heading pool.

    ``VoltageError`` failures are returned inside the result message; any
    other exception is a bug and propagates.
    """

    def __init__(
        self,
        store: ConfigStore,
        selector: LocaleSelector,
        rng: random.Random | None = None,
    ):
        self._store = store
        self._selector = selector
        self._rng = rng or random.Random()
        self._handlers = {
            InitSelector: self._init_selector,
            CheckRc: self._check,
            FetchDefaultRc: self._fetch_default,
            LoadRc: self._load,
            PersistRc: self._persist,
            Reroll: self._reroll,
        }

    def run(self, command) -> Message:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"CommandRunner cannot run {command!r}")
        logger.debug("running %s", type(command).__name__)
        return handler(command)

    def _init_selector(self, command: InitSelector) -> Message:
        self._selector.init()
        return SelectorReady()

    def _check(self, command: CheckRc) -> Message:
        try:
            return RcCheckResult(exists=self._store.exists())
        except VoltageError as exc:
            return RcCheckResult(exists=False, error=exc)

    def _fetch_default(self, command: FetchDefaultRc) -> Message:
        try:
            return RcContent(content=self._store.fetch_default())
        except VoltageError as exc:
            return RcContent(content=None, error=exc)

    def _load(self, command: LoadRc) -> Message:
        try:
            return RcContent(content=self._store.load())
        except VoltageError as exc:
            return RcContent(content=None, error=exc)

    def _persist(self, command: PersistRc) -> Message:
        try:
            self._store.persist(command.mapping)
        except VoltageError as exc:
            return RcPersisted(error=exc)
        return RcPersisted()

    def _reroll(self, command: Reroll) -> Message:
        try:
            return NewHeading(index=reroll(command.pool, command.current, self._rng))
        except VoltageError as exc:
            return NewHeading(index=None, error=exc)
