"""Static phonetic lookup tables and character-class primitives.

Everything here is built once at import time and never mutated, so all
encoders share it freely across threads.
"""

from string import ascii_uppercase
from types import MappingProxyType
from typing import Mapping

# Marker returned for reads outside the word. It belongs to no character class.
NO_CHAR = ""

ALPHABET = frozenset(ascii_uppercase)
VOWELS = frozenset("AEIOU")
SOFT = frozenset("EIY")


def _digit_table(digits: str) -> Mapping[str, str]:
    if len(digits) != len(ascii_uppercase):
        raise ValueError(f"digit table needs {len(ascii_uppercase)} entries, got {len(digits)}")
    return MappingProxyType(dict(zip(ascii_uppercase, digits)))


# Letter -> digit, indexed A..Z
SOUNDEX_DIGITS = _digit_table("01230120022455012623010202")
REFINED_SOUNDEX_DIGITS = _digit_table("01360240043788015936020505")


def char_at(text: str, index: int) -> str:
    """Return ``text[index]``, or :data:`NO_CHAR` when index is out of range.

    Negative indices are out of range; they never wrap around.
    """
    if 0 <= index < len(text):
        return text[index]
    return NO_CHAR


def substring(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters from ``start``; empty when out of range."""
    if start < 0 or start > len(text):
        return NO_CHAR
    return text[start : start + length]


def is_letter(char: str) -> bool:
    return char in ALPHABET


__all__ = [
    "NO_CHAR",
    "ALPHABET",
    "VOWELS",
    "SOFT",
    "SOUNDEX_DIGITS",
    "REFINED_SOUNDEX_DIGITS",
    "char_at",
    "substring",
    "is_letter",
]
