"""Commands issued by the controller and the messages that answer them.

Every command that does work produces exactly one result message. Results
carry their failure in ``error`` rather than raising, so the controller sees
success and failure through the same dispatch point.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from .errors import VoltageError
from .headings import HeadingPool


# Results


@dataclass(frozen=True)
class SelectorReady:
    pass


@dataclass(frozen=True)
class RcCheckResult:
    exists: bool
    error: VoltageError | None = None


@dataclass(frozen=True)
class RcContent:
    content: dict[str, str] | None
    error: VoltageError | None = None


@dataclass(frozen=True)
class RcPersisted:
    error: VoltageError | None = None


@dataclass(frozen=True)
class NewHeading:
    index: int | None
    error: VoltageError | None = None


@dataclass(frozen=True)
class KeyPressed:
    key: str


@dataclass(frozen=True)
class ErrorDisplayElapsed:
    pass


Message = Union[
    SelectorReady,
    RcCheckResult,
    RcContent,
    RcPersisted,
    NewHeading,
    KeyPressed,
    ErrorDisplayElapsed,
]


# Commands


@dataclass(frozen=True)
class InitSelector:
    blocking: ClassVar[bool] = False


@dataclass(frozen=True)
class CheckRc:
    blocking: ClassVar[bool] = True


@dataclass(frozen=True)
class FetchDefaultRc:
    blocking: ClassVar[bool] = True


@dataclass(frozen=True)
class LoadRc:
    blocking: ClassVar[bool] = True


@dataclass(frozen=True)
class PersistRc:
    mapping: dict[str, str]
    blocking: ClassVar[bool] = True


@dataclass(frozen=True)
class Reroll:
    pool: HeadingPool
    current: int | None = None
    blocking: ClassVar[bool] = False


@dataclass(frozen=True)
class ScheduleMessage:
    """Deliver ``message`` back to the controller after ``delay`` seconds."""

    delay: float
    message: Message


@dataclass(frozen=True)
class Quit:
    exit_code: int = 0


Command = Union[
    InitSelector,
    CheckRc,
    FetchDefaultRc,
    LoadRc,
    PersistRc,
    Reroll,
    ScheduleMessage,
    Quit,
]
