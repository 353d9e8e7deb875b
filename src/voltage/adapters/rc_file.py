"""rc file adapter: the on-disk KEY=VALUE settings file and its remote default.

Parsing is delegated to python-dotenv's line parser (no interpolation, no
environment side effects). Writing quotes only the values that need it, so
a typical file reads ``VOLTAGE_LOCALE=PL``.
"""

from __future__ import annotations

import contextlib
import io
import logging
import os
import re
import stat
import tempfile
from pathlib import Path
from typing import Callable

import requests
from dotenv.parser import parse_stream

from ..config import DEFAULT_RC_URL
from ..core.config_model import AppSettings
from ..core.errors import ConfigIOError, NetworkError, ParseError, PathResolutionError

logger = logging.getLogger(__name__)

RC_ENCODING = "utf-8"
_KEY = re.compile(r"[A-Za-z_][A-Za-z0-9_.]*")
_BARE_VALUE = re.compile(r"[A-Za-z0-9_./:@+\\-]*")
_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def parse_rc(text: str) -> dict[str, str]:
    """Parse rc text into a mapping; blank lines and comments are skipped."""
    content: dict[str, str] = {}
    for binding in parse_stream(io.StringIO(text)):
        if binding.error:
            raise ParseError(
                f"malformed line {binding.original.line}: {binding.original.string.strip()!r}"
            )
        if binding.key is None:
            continue
        content[binding.key] = binding.value or ""
    return content


def serialize_rc(mapping: dict[str, str]) -> str:
    lines = []
    for key in sorted(mapping):
        if not _KEY.fullmatch(key):
            raise ParseError(f"invalid key: {key!r}")
        lines.append(f"{key}={_quote(key, mapping[key])}")
    return "\n".join(lines) + "\n"


def _quote(key: str, value: str) -> str:
    if _BARE_VALUE.fullmatch(value):
        return value
    # unquoted values are read verbatim, but inside quotes dotenv takes a
    # trailing backslash as escaping the closing quote
    if value.endswith("\\"):
        raise ParseError(f"value for {key} needs quoting and cannot end with a backslash")
    escaped = "".join(_ESCAPES.get(char, char) for char in value)
    return f'"{escaped}"'


def _decode(raw: bytes, source: str) -> str:
    try:
        return raw.decode(RC_ENCODING)
    except UnicodeDecodeError as exc:
        raise ParseError(f"{source} is not valid {RC_ENCODING}: {exc}") from exc


def _write_atomic(path: Path, data: bytes) -> None:
    """Write bytes atomically using tempfile + fsync + replace (mode 0600)."""
    fd, tmp_path_str = tempfile.mkstemp(dir=str(path.parent), prefix=path.name, suffix=".tmp")
    tmp_path = Path(tmp_path_str)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except BaseException:
        with contextlib.suppress(OSError):
            tmp_path.unlink(missing_ok=True)
        raise


class RcFileStore:
    """ConfigStore backed by ``~/<dir_name>/<file_name>``."""

    def __init__(
        self,
        dir_name: str = "config",
        file_name: str = ".voltagerc",
        default_url: str = DEFAULT_RC_URL,
        timeout: float = 10.0,
        home: Callable[[], Path] | None = None,
        http=None,
    ):
        self._dir_name = dir_name
        self._file_name = file_name
        self._default_url = default_url
        self._timeout = timeout
        self._home = home or Path.home
        self._http = http or requests

    @classmethod
    def from_settings(cls, settings: AppSettings, **kwargs) -> "RcFileStore":
        return cls(
            dir_name=settings.rc_dir_name,
            file_name=settings.rc_file_name,
            default_url=settings.default_rc_url,
            timeout=settings.http_timeout,
            **kwargs,
        )

    def resolve_path(self) -> Path:
        try:
            home = self._home()
        except (RuntimeError, KeyError, OSError) as exc:
            raise PathResolutionError(f"cannot determine home directory: {exc}") from exc
        return Path(home) / self._dir_name / self._file_name

    def exists(self) -> bool:
        path = self.resolve_path()
        try:
            info = path.stat()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise ConfigIOError(f"cannot check {path}: {exc}") from exc
        return not stat.S_ISDIR(info.st_mode)

    def fetch_default(self) -> dict[str, str]:
        path = self.resolve_path()
        logger.info("fetching default rc file from %s", self._default_url)
        try:
            response = self._http.get(self._default_url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise NetworkError(f"cannot download {self._default_url}: {exc}") from exc

        body = response.content
        content = parse_rc(_decode(body, self._default_url))
        try:
            path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
            _write_atomic(path, body)
        except OSError as exc:
            raise ConfigIOError(f"cannot write {path}: {exc}") from exc
        logger.info("default rc file written to %s", path)
        return content

    def load(self) -> dict[str, str]:
        path = self.resolve_path()
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise ConfigIOError(f"cannot read {path}: {exc}") from exc
        return parse_rc(_decode(raw, str(path)))

    def persist(self, mapping: dict[str, str]) -> None:
        path = self.resolve_path()
        data = serialize_rc(mapping).encode(RC_ENCODING)
        try:
            path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
            _write_atomic(path, data)
        except OSError as exc:
            raise ConfigIOError(f"cannot write {path}: {exc}") from exc
        logger.debug("rc file saved to %s", path)
