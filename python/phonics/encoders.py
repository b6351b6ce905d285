"""Algorithm dispatch and sound-alike helpers.

Example:
    >>> from phonics.encoders import encode, sounds_like
    >>> encode("Robert", "metaphone")
    'RBRT'
    >>> sounds_like("Smith", "Smyth")
    True
"""

from typing import Callable, Dict, Optional, Union

from phonics._utils import normalize_algorithm, resolve_max_code_len
from phonics.enums import PhoneticAlgorithm
from phonics.metaphone import metaphone
from phonics.soundex import refined_soundex, soundex

ENCODERS: Dict[str, Callable[..., str]] = {
    "soundex": soundex,
    "refined_soundex": refined_soundex,
    "metaphone": metaphone,
}


def get_encoder(
    algorithm: Union[str, PhoneticAlgorithm] = "soundex",
    max_code_len: Optional[int] = None,
    traditional: bool = True,
) -> Callable[[str], str]:
    """Bind an encoder and its parameters into a one-argument function.

    Arguments are validated once here, which makes the result cheap to call
    in a loop.

    Example:
        >>> encoder = get_encoder("soundex", max_code_len=6)
        >>> encoder("Washington")
        'W25235'
    """
    algo = normalize_algorithm(algorithm)
    length = resolve_max_code_len(algo, max_code_len)
    func = ENCODERS[algo]

    if algo == "metaphone":
        return lambda word: func(word, length, traditional)
    return lambda word: func(word, length)


def encode(
    word: str,
    algorithm: Union[str, PhoneticAlgorithm] = "soundex",
    max_code_len: Optional[int] = None,
    traditional: bool = True,
) -> str:
    """Encode a word with the named algorithm.

    Args:
        word: Word to encode.
        algorithm: "soundex" (default), "refined_soundex" or "metaphone".
        max_code_len: Maximum code length, None for the algorithm default
            (4 for Soundex, 10 otherwise).
        traditional: Classic CH/SCH rules for Metaphone; ignored otherwise.
    """
    return get_encoder(algorithm, max_code_len, traditional)(word)


def sounds_like(
    a: str,
    b: str,
    algorithm: Union[str, PhoneticAlgorithm] = "soundex",
    max_code_len: Optional[int] = None,
    traditional: bool = True,
) -> bool:
    """Check whether two words share a phonetic code.

    Words without any letter have no phonetic content and never match,
    not even each other.

    Example:
        >>> sounds_like("Robert", "Rupert")
        True
        >>> sounds_like("", "")
        False
    """
    encoder = get_encoder(algorithm, max_code_len, traditional)
    code = encoder(a)
    return bool(code) and code == encoder(b)


def soundex_match(a: str, b: str, max_code_len: int = 4) -> bool:
    """Check if two words have the same Soundex code."""
    return sounds_like(a, b, "soundex", max_code_len)


def refined_soundex_match(a: str, b: str, max_code_len: int = 10) -> bool:
    """Check if two words have the same Refined Soundex code."""
    return sounds_like(a, b, "refined_soundex", max_code_len)


def metaphone_match(a: str, b: str, max_code_len: int = 10, traditional: bool = True) -> bool:
    """Check if two words have the same Metaphone code."""
    return sounds_like(a, b, "metaphone", max_code_len, traditional)


__all__ = [
    "ENCODERS",
    "get_encoder",
    "encode",
    "sounds_like",
    "soundex_match",
    "refined_soundex_match",
    "metaphone_match",
]
