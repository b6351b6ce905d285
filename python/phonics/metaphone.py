"""Metaphone encoder.

This follows the widely deployed PHP flavour of Metaphone. A word is encoded
in two phases:

1. A handful of initial-letter cases (silent ``K`` in ``KN``, ``WR`` -> ``R``,
   initial ``X`` -> ``S`` ...) are resolved up front.
2. The rest of the word is scanned once, left to right. Each letter is
   handled by a rule that looks at most two letters ahead and four behind,
   emits zero or more code characters and may skip letters it has consumed.

The ``traditional`` flag selects between two published readings of the
``CH`` / ``SCH`` rules. With ``traditional=False`` a ``CH`` before ``R`` or
after ``S`` is hard (``K``), and ``SCHW`` encodes as ``X``.

Example:
    >>> metaphone("Thompson")
    '0MPSN'
    >>> metaphone("knight") == metaphone("night")
    True
    >>> metaphone("school"), metaphone("school", traditional=False)
    ('SXL', 'SKL')
"""

from typing import Callable, Dict, Tuple

from phonics._utils import validate_max_code_len
from phonics.normalize import normalize_word
from phonics.tables import ALPHABET, NO_CHAR, SOFT, VOWELS, char_at, substring

# What a rule emits, and how many letters past the current one it consumed.
RuleResult = Tuple[str, int]

_SILENT: RuleResult = (NO_CHAR, 0)

_GH_SILENT_AFTER = frozenset("BDH")
_H_SILENT_AFTER = frozenset("CGPST")
_BROAD = frozenset("AO")
_NASAL_START = frozenset("GKP")
_VERBATIM = frozenset("FJLMNR")


class _Scan:
    """Cursor over a normalized word with bounded look-around."""

    __slots__ = ("text", "pos", "prev", "traditional")

    def __init__(self, text: str, pos: int, traditional: bool):
        self.text = text
        self.pos = pos
        # Previous letter as written in the word, before any encoding.
        self.prev = NO_CHAR
        self.traditional = traditional

    def at(self, offset: int = 0) -> str:
        return char_at(self.text, self.pos + offset)

    def ahead(self, length: int) -> str:
        """The ``length`` letters following the current one."""
        return substring(self.text, self.pos + 1, length)

    def done(self) -> bool:
        return self.pos >= len(self.text)


def _initial(scan: _Scan) -> RuleResult:
    """Initial-letter cases. The skip here is the total number of letters consumed."""
    first, nxt = scan.at(), scan.at(1)

    if first == "A":
        return ("E" if nxt == "E" else "A"), 1
    if first in _NASAL_START and nxt == "N":
        return "N", 2
    if first == "W":
        if nxt == "R":
            return "R", 2
        if nxt == "H" or nxt in VOWELS:
            return "W", 2
        return _SILENT
    if first == "X":
        return "S", 1
    if first in VOWELS:
        # A was handled above
        return first, 1
    return _SILENT


def _rule_b(scan: _Scan) -> RuleResult:
    # silent in a trailing MB, as in "dumb"
    return _SILENT if scan.prev == "M" else ("B", 0)


def _rule_c(scan: _Scan) -> RuleResult:
    nxt = scan.at(1)
    if nxt in SOFT:
        if nxt == "I" and scan.at(2) == "A":
            return "X", 0
        if scan.prev != "S":
            return "S", 0
        return _SILENT
    if nxt == "H":
        if not scan.traditional and (scan.at(2) == "R" or scan.prev == "S"):
            return "K", 1
        return "X", 1
    return "K", 0


def _rule_d(scan: _Scan) -> RuleResult:
    if scan.at(1) == "G" and scan.at(2) in SOFT:
        return "J", 1
    return "T", 0


def _rule_g(scan: _Scan) -> RuleResult:
    nxt = scan.at(1)
    if nxt == "H":
        if scan.at(-3) in _GH_SILENT_AFTER or scan.at(-4) == "H":
            return _SILENT
        return "F", 1
    if nxt == "N":
        if scan.at(2) in ALPHABET and scan.ahead(3) != "NED":
            return "K", 0
        return _SILENT
    if nxt in SOFT and scan.prev != "G":
        return "J", 0
    return "K", 0


def _rule_h(scan: _Scan) -> RuleResult:
    if scan.at(1) in VOWELS and scan.prev not in _H_SILENT_AFTER:
        return "H", 0
    return _SILENT


def _rule_k(scan: _Scan) -> RuleResult:
    return _SILENT if scan.prev == "C" else ("K", 0)


def _rule_p(scan: _Scan) -> RuleResult:
    return ("F" if scan.at(1) == "H" else "P"), 0


def _rule_q(scan: _Scan) -> RuleResult:
    return "K", 0


def _rule_s(scan: _Scan) -> RuleResult:
    nxt = scan.at(1)
    if nxt == "I" and scan.at(2) in _BROAD:
        return "X", 0
    if nxt == "H":
        return "X", 1
    if not scan.traditional and scan.ahead(3) == "CHW":
        return "X", 2
    return "S", 0


def _rule_t(scan: _Scan) -> RuleResult:
    nxt = scan.at(1)
    if nxt == "I" and scan.at(2) in _BROAD:
        return "X", 0
    if nxt == "H":
        # 0 stands for "th"
        return "0", 1
    if scan.ahead(2) != "CH":
        return "T", 0
    return _SILENT


def _rule_v(scan: _Scan) -> RuleResult:
    return "F", 0


def _rule_semivowel(scan: _Scan) -> RuleResult:
    # W, Y
    if scan.at(1) in VOWELS:
        return scan.at(), 0
    return _SILENT


def _rule_x(scan: _Scan) -> RuleResult:
    return "KS", 0


def _rule_z(scan: _Scan) -> RuleResult:
    return "S", 0


def _rule_verbatim(scan: _Scan) -> RuleResult:
    return scan.at(), 0


def _rule_silent(scan: _Scan) -> RuleResult:
    return _SILENT


Rule = Callable[[_Scan], RuleResult]

RULES: Dict[str, Rule] = {
    "B": _rule_b,
    "C": _rule_c,
    "D": _rule_d,
    "G": _rule_g,
    "H": _rule_h,
    "K": _rule_k,
    "P": _rule_p,
    "Q": _rule_q,
    "S": _rule_s,
    "T": _rule_t,
    "V": _rule_v,
    "W": _rule_semivowel,
    "Y": _rule_semivowel,
    "X": _rule_x,
    "Z": _rule_z,
}
RULES.update((letter, _rule_verbatim) for letter in _VERBATIM)
RULES.update((letter, _rule_silent) for letter in VOWELS)


def metaphone(word: str, max_code_len: int = 10, traditional: bool = True) -> str:
    """Encode a word with Metaphone.

    Args:
        word: Word to encode. Surrounding whitespace and leading non-letters
            are ignored; case does not matter.
        max_code_len: Maximum length of the returned code.
        traditional: Use the classic ``CH`` / ``SCH`` rules (default). Pass
            False for the revised rules.

    Returns:
        The Metaphone code, or ``""`` when the word holds no letter.

    Example:
        >>> metaphone("phone")
        'FN'
        >>> metaphone("Stephen") == metaphone("Steven")
        True
    """
    validate_max_code_len(max_code_len)
    word = normalize_word(word)
    if word.is_empty:
        return ""
    if word.is_single:
        return word.text[:max_code_len]

    scan = _Scan(word.text, word.start, traditional)
    code, consumed = _initial(scan)
    scan.pos += consumed

    while len(code) < max_code_len and not scan.done():
        current = scan.at()
        if current == scan.prev and current != "C":
            scan.pos += 1
            continue

        emitted, skip = RULES.get(current, _rule_silent)(scan)
        code += emitted
        scan.prev = current
        scan.pos += 1 + skip

    return code[:max_code_len]


__all__ = ["metaphone", "RULES"]
