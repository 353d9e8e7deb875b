"""Env configuration adapter producing structured AppSettings."""

from __future__ import annotations

from ..config import config as env_config
from ..core.config_model import AppSettings


def load_app_settings() -> AppSettings:
    return AppSettings(
        rc_dir_name=env_config.RC_DIR_NAME,
        rc_file_name=env_config.RC_FILE_NAME,
        default_rc_url=env_config.DEFAULT_RC_URL,
        http_timeout=env_config.HTTP_TIMEOUT,
        error_display_seconds=env_config.ERROR_DISPLAY_SECONDS,
        log_file=env_config.LOG_FILE,
        debug=env_config.DEBUG,
    )
