"""Folding of free-form input words into the uppercase ASCII letters the grid uses."""

from __future__ import annotations

import re
import unicodedata

# Umlauts are spelled out the way crossword grids write them (SOELDEN,
# BUEGELEISEN); they take precedence over plain accent stripping.
GERMAN_FOLDINGS = {
    "ä": "ae",
    "ö": "oe",
    "ü": "ue",
    "ß": "ss",
    "Ä": "AE",
    "Ö": "OE",
    "Ü": "UE",
    "ẞ": "SS",
}

NON_ASCII_LETTER_RE = re.compile(r"[^A-Za-z]")


def fold_char(char: str) -> str:
    """Spell out umlauts, otherwise drop combining marks (``é`` -> ``e``, ``ﬁ`` -> ``fi``)."""

    if char in GERMAN_FOLDINGS:
        return GERMAN_FOLDINGS[char]
    decomposed = unicodedata.normalize("NFKD", char)
    return "".join(part for part in decomposed if not unicodedata.combining(part))


def clean_word(text: str) -> str:
    """Return ``text`` folded to uppercase ASCII; anything else is dropped."""

    folded = "".join(fold_char(char) for char in unicodedata.normalize("NFC", text))
    return NON_ASCII_LETTER_RE.sub("", folded).upper()


__all__ = ["clean_word", "fold_char", "GERMAN_FOLDINGS"]
