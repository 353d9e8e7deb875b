"""Locale prompt backed by Textual's OptionList.

The list widget owns the highlight and its movement; this adapter only maps
relayed key names onto the list's cursor actions and reads the choice back.
"""

from __future__ import annotations

from textual.widgets import OptionList
from textual.widgets.option_list import Option

from ..core.config_model import Locale
from ..locales import LOCALE_PROMPT

_ACTIONS = {
    "up": "cursor_up",
    "k": "cursor_up",
    "shift+tab": "cursor_up",
    "down": "cursor_down",
    "j": "cursor_down",
    "tab": "cursor_down",
    "home": "first",
    "end": "last",
}
_SUBMIT_KEYS = frozenset({"enter"})


class LocaleOptions(OptionList, can_focus=False):
    """Option list that never takes focus; keys reach it through the controller."""


class LocaleForm:
    """LocaleSelector over EN and PL.

    Keys arriving before ``init()`` or after a choice is submitted are
    ignored; the submitted locale never changes afterwards.
    """

    def __init__(self, options: tuple[Locale, ...] = (Locale.EN, Locale.PL), title: str = LOCALE_PROMPT):
        self._title = title
        self._ready = False
        self._value: Locale | None = None
        self.widget = LocaleOptions(
            *(Option(locale.value, id=locale.value) for locale in options),
            id="locale",
        )

    def init(self) -> None:
        self.widget.action_first()
        self._value = None
        self._ready = True

    def update(self, key: str) -> list:
        if not self._ready or self._value is not None:
            return []
        action = _ACTIONS.get(key)
        if action is not None:
            getattr(self.widget, f"action_{action}")()
        elif key in _SUBMIT_KEYS:
            self._value = self.highlighted
        return []

    @property
    def highlighted(self) -> Locale | None:
        option = self.widget.highlighted_option
        return Locale(option.id) if option is not None else None

    def render(self) -> str:
        return self._title

    def submitted_value(self) -> Locale | None:
        return self._value
