"""Core configuration models (structured views)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import ParseError

API_URL_KEY = "VOLTAGE_API_URL"
LOCALE_KEY = "VOLTAGE_LOCALE"


class Locale(Enum):
    EN = "EN"
    PL = "PL"


@dataclass(frozen=True)
class AppSettings:
    rc_dir_name: str
    rc_file_name: str
    default_rc_url: str
    http_timeout: float
    error_display_seconds: float
    log_file: str
    debug: bool


@dataclass(frozen=True)
class RcConfig:
    """The two settings voltage remembers between runs."""

    api: str = ""
    locale: Locale | None = None

    @classmethod
    def from_mapping(cls, content: dict[str, str]) -> "RcConfig":
        """Build from parsed rc content.

        Missing keys read as empty. An empty locale means "unset"; anything
        other than EN or PL is rejected.
        """
        raw_locale = (content.get(LOCALE_KEY) or "").strip()
        locale = None
        if raw_locale:
            try:
                locale = Locale(raw_locale)
            except ValueError:
                raise ParseError(f"unsupported {LOCALE_KEY} value: {raw_locale!r}") from None
        return cls(api=content.get(API_URL_KEY) or "", locale=locale)

    def to_mapping(self) -> dict[str, str]:
        return {
            API_URL_KEY: self.api,
            LOCALE_KEY: self.locale.value if self.locale else "",
        }
