"""Enums for phonics API."""

from enum import Enum


class PhoneticAlgorithm(str, Enum):
    """Available phonetic encoders.

    This enum provides type-safe algorithm selection for encoding and matching.
    String values are accepted everywhere an enum member is.

    Example:
        >>> from phonics import PhoneticAlgorithm, encode
        >>> encode("Robert", algorithm=PhoneticAlgorithm.SOUNDEX)
        'R163'
    """

    SOUNDEX = "soundex"
    """Classic Soundex: first letter plus three zero-padded digits"""

    REFINED_SOUNDEX = "refined_soundex"
    """Refined Soundex: first letter plus an unpadded digit sequence"""

    METAPHONE = "metaphone"
    """Metaphone: variable-length consonant skeleton"""


__all__ = ["PhoneticAlgorithm"]
