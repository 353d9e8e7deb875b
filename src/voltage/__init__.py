"""voltage - a localized proverb greeter for the terminal"""

__version__ = "1.0.0"
__description__ = "Terminal greeter showing a random localized proverb"

__all__ = ["main", "Voltage", "__version__"]


def __getattr__(name: str):
    """Lazy import to avoid loading Textual on package import.

    This allows importing voltage.core or voltage.adapters without the
    terminal stack, which keeps the core tests headless.
    """
    if name == "Voltage":
        from .main import Voltage

        return Voltage
    if name == "main":
        from .main import main

        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
