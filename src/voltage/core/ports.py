"""Core ports (interfaces) for voltage.

The controller and command runner only talk to the rc file and to the
locale prompt through these protocols, so both can be swapped for fakes.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .config_model import Locale
    from .messages import Command


@runtime_checkable
class ConfigStore(Protocol):
    """Access to the on-disk rc file.

    Every method raises a ``VoltageError`` subclass on failure.
    """

    def resolve_path(self) -> Path:
        """Return the rc file location."""

    def exists(self) -> bool:
        """Check whether the rc file is present."""

    def fetch_default(self) -> dict[str, str]:
        """Download the default rc file, write it and return its content."""

    def load(self) -> dict[str, str]:
        """Read and parse the rc file."""

    def persist(self, mapping: dict[str, str]) -> None:
        """Overwrite the rc file with ``mapping``."""


@runtime_checkable
class LocaleSelector(Protocol):
    """Interactive single-choice prompt for the locale."""

    def init(self) -> None:
        """Prepare the prompt for input and rendering."""

    def update(self, key: str) -> "list[Command]":
        """Consume one key press; return follow-up commands."""

    def render(self) -> str:
        """Return the prompt's current text representation."""

    def submitted_value(self) -> "Locale | None":
        """Return the chosen locale once submitted, else None."""
