"""Text collation for sorting table columns.

Sorting approximates a locale-aware comparison without an ICU dependency:
accents and case are ignored at the primary level, except for the letters a
language treats as separate letters of its alphabet (Swedish 'ö' sorts after
'z', not with 'o').
"""

import unicodedata
from typing import Dict, Tuple

DEFAULT_LOCALE = "en-US"

# Language subtag -> letters that sort after 'z', in alphabet order.
LOCALE_TAILORINGS: Dict[str, str] = {
    "sv": "åäö",
    "fi": "åäö",
    "da": "æøå",
    "nb": "æøå",
    "nn": "æøå",
    "no": "æøå",
}

# Primary weights for tailored letters, above every other code point in use.
TAILORED_WEIGHT_BASE = 0xF0000


def _strip_marks(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _tailoring(locale: str) -> str:
    language = (locale or DEFAULT_LOCALE).split("-", 1)[0].lower()
    return LOCALE_TAILORINGS.get(language, "")


def _primary(folded: str, tailored: str) -> str:
    if not tailored:
        return _strip_marks(folded)
    weights = []
    for ch in unicodedata.normalize("NFC", folded):
        index = tailored.find(ch)
        if index >= 0:
            weights.append(chr(TAILORED_WEIGHT_BASE + index))
        else:
            weights.append(_strip_marks(ch))
    return "".join(weights)


def collation_key(text: str, locale: str = DEFAULT_LOCALE) -> Tuple[str, str, str]:
    """
    Sort key for one cell under a locale tag.

    Primary strength ignores accents and case ('é' sorts with 'e'), the
    secondary level orders accented after plain letters, and the original
    text breaks any remaining tie.

    Example:
        >>> sorted(["Örjan", "Olle", "Zara"], key=lambda t: collation_key(t, "sv-SE"))
        ['Olle', 'Zara', 'Örjan']
    """
    folded = text.casefold()
    return (_primary(folded, _tailoring(locale)), folded, text)
