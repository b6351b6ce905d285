"""Word normalization shared by all encoders.

A word is trimmed, uppercased and scanned to its first ``A``-``Z`` letter.
Leading non-letters stay in :attr:`NormalizedWord.text` so that lookbehind
positions are counted from the start of the trimmed word.
"""

from typing import NamedTuple

from phonics.tables import is_letter


class NormalizedWord(NamedTuple):
    """A trimmed, uppercased word and the index of its first letter."""

    text: str
    start: int

    @property
    def is_empty(self) -> bool:
        """True when the word holds no alphabetic character at all."""
        return self.start >= len(self.text)

    @property
    def is_single(self) -> bool:
        """True when the whole word is exactly one letter."""
        return len(self.text) == 1 and not self.is_empty

    @property
    def first(self) -> str:
        return self.text[self.start]

    @property
    def rest(self) -> str:
        """Everything after the first letter."""
        return self.text[self.start + 1 :]


def normalize_word(word: str) -> NormalizedWord:
    """Trim, uppercase and locate the first letter of ``word``.

    Example:
        >>> normalize_word("  -robert ")
        NormalizedWord(text='-ROBERT', start=1)
        >>> normalize_word("123").is_empty
        True
    """
    if not isinstance(word, str):
        raise TypeError(f"word must be str, got {type(word).__name__}")

    text = word.strip().upper()
    start = 0
    while start < len(text) and not is_letter(text[start]):
        start += 1
    return NormalizedWord(text, start)


__all__ = ["NormalizedWord", "normalize_word"]
