"""Error taxonomy for voltage.

Adapters translate library exceptions into these types; the controller
treats every one of them as fatal to the session.
"""

from __future__ import annotations


class VoltageError(Exception):
    """Base class for all session-ending errors."""


class PathResolutionError(VoltageError):
    """The home directory (and so the rc file path) cannot be determined."""


class ConfigIOError(VoltageError):
    """Reading, writing or checking the rc file failed."""


class NetworkError(VoltageError):
    """Downloading the default rc file failed."""


class ParseError(VoltageError):
    """The rc file content is malformed."""


class HeadingPoolError(VoltageError):
    """A reroll was requested that cannot produce a different heading."""
