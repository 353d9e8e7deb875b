"""Static locale content for voltage.

Each locale ships a fixed pool of proverbs plus the few interface strings
shown next to them.
"""

from .core.config_model import Locale

LOCALE_PROMPT = "Choose your language / Wybierz język..."

HEADINGS: dict[Locale, tuple[str, ...]] = {
    Locale.EN: (
        "All that glitters is not gold.",
        "Better late than never.",
        "Clothes do not make the man.",
    ),
    Locale.PL: (
        "Nie wszystko złoto, co się świeci.",
        "Lepiej późno niż wcale.",
        "Nie szata zdobi człowieka.",
    ),
}

REROLL_HINTS: dict[Locale, str] = {
    Locale.EN: "space: another proverb, q: quit",
    Locale.PL: "spacja: kolejne przysłowie, q: wyjście",
}
