"""Soundex and Refined Soundex encoders.

Both encoders keep the first letter verbatim and translate the remaining
letters to digits through a fixed table, dropping a digit that repeats the
previous one. A character outside ``A``-``Z`` ends the scan.

Example:
    >>> soundex("Robert"), soundex("Rupert")
    ('R163', 'R163')
    >>> refined_soundex("Robert")
    'R901096'
"""

from phonics._utils import validate_max_code_len
from phonics.normalize import normalize_word
from phonics.tables import REFINED_SOUNDEX_DIGITS, SOUNDEX_DIGITS

# Stands in for the last digit after a vowel; equal to no table digit.
_SEPARATOR = "?"
# H and W do not separate two letters of the same class.
_TRANSPARENT = frozenset("HW")

_PADDING = "0000"


def soundex(word: str, max_code_len: int = 4) -> str:
    """Encode a word with classic Soundex.

    Args:
        word: Word to encode. Surrounding whitespace and leading non-letters
            are ignored; case does not matter.
        max_code_len: Length of the returned code. Short codes are padded
            with ``"0"`` (at most four of them), long ones truncated.

    Returns:
        The Soundex code, or ``""`` when the word holds no letter.

    Example:
        >>> soundex("Ashcraft")
        'A261'
        >>> soundex("A")
        'A000'
    """
    validate_max_code_len(max_code_len)
    word = normalize_word(word)
    if word.is_empty:
        return ""

    first = word.first
    code = [first]
    last = SOUNDEX_DIGITS[first]

    for letter in word.rest:
        digit = SOUNDEX_DIGITS.get(letter)
        if digit is None:
            break
        if digit != "0":
            if digit != last:
                code.append(digit)
                last = digit
        elif letter not in _TRANSPARENT:
            last = _SEPARATOR

    return ("".join(code) + _PADDING)[:max_code_len]


def refined_soundex(word: str, max_code_len: int = 10) -> str:
    """Encode a word with Refined Soundex.

    Unlike :func:`soundex`, every change of digit is kept (zeros included),
    the first letter is followed by its own digit, and the code is never
    padded.

    Example:
        >>> refined_soundex("Braz")
        'B1905'
    """
    validate_max_code_len(max_code_len)
    word = normalize_word(word)
    if word.is_empty:
        return ""
    if word.is_single:
        return word.text[:max_code_len]

    first = word.first
    last = REFINED_SOUNDEX_DIGITS[first]
    code = [first, last]

    for letter in word.rest:
        digit = REFINED_SOUNDEX_DIGITS.get(letter)
        if digit is None:
            break
        if digit != last:
            code.append(digit)
            last = digit

    return "".join(code)[:max_code_len]


__all__ = ["soundex", "refined_soundex"]
