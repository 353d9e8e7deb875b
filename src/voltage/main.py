#!/usr/bin/env python3
"""voltage: a localized proverb greeter for the terminal"""

import logging
import sys

from .adapters.config_env import load_app_settings
from .adapters.locale_form import LocaleForm
from .adapters.rc_file import RcFileStore
from .app import VoltageApp
from .core.config_model import AppSettings
from .core.controller import VoltageController
from .core.runner import CommandRunner

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Voltage:
    """Main application - wires the rc store, locale prompt and controller"""

    def __init__(self, settings: AppSettings, store=None):
        self.settings = settings
        self.store = store or RcFileStore.from_settings(settings)
        self.form = LocaleForm()
        self.controller = VoltageController(
            self.form, error_display_seconds=settings.error_display_seconds
        )
        self.runner = CommandRunner(self.store, self.form)
        self.app = VoltageApp(self.controller, self.runner, self.form.widget)

    def run(self) -> int:
        """Run the application and return its exit code"""
        self.app.run()
        return self.app.return_code or 0


def setup_logging(settings: AppSettings) -> logging.Handler:
    """Send all logging to the append-only log file; raises OSError if it cannot be opened"""
    handler = logging.FileHandler(settings.log_file, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if settings.debug else logging.INFO)
    return handler


def main():
    settings = load_app_settings()
    try:
        setup_logging(settings)
    except OSError as e:
        print(f"error opening file: {e}", file=sys.stderr)
        sys.exit(1)

    logging.getLogger(__name__).info("starting voltage")
    sys.exit(Voltage(settings).run())


if __name__ == "__main__":
    main()
