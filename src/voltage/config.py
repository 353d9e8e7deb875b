"""Configuration for voltage"""
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_RC_URL = "https://raw.githubusercontent.com/pgulb/voltage/main/.voltagerc"


class Config:
    """Process-level settings, overridable from the environment or a .env file"""

    # rc file: ~/<RC_DIR_NAME>/<RC_FILE_NAME>
    RC_DIR_NAME = os.getenv("VOLTAGE_RC_DIR_NAME", "config")
    RC_FILE_NAME = os.getenv("VOLTAGE_RC_FILE_NAME", ".voltagerc")

    # Fetched only when the rc file does not exist yet
    DEFAULT_RC_URL = os.getenv("VOLTAGE_DEFAULT_RC_URL", DEFAULT_RC_URL)
    HTTP_TIMEOUT = float(os.getenv("VOLTAGE_HTTP_TIMEOUT", "10"))

    # How long a config error stays on screen before exiting
    ERROR_DISPLAY_SECONDS = float(os.getenv("VOLTAGE_ERROR_DISPLAY_SECONDS", "10"))

    # Relative to the working directory
    LOG_FILE = os.getenv("VOLTAGE_LOG_FILE", "game.log")

    DEBUG = os.getenv("DEBUG", "false").lower() == "true"


config = Config()
