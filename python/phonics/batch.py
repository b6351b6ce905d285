"""Batch operations API for phonics.

This module maps the single-word encoders over whole lists. Every function
preserves input order and passes missing values (``None``) through untouched
without calling an encoder.

Long batches pause at a checkpoint every ``check_interval`` items (see
:func:`phonics.set_check_interval`). At a checkpoint an optional progress
callback is told how far the batch got, and an optional
:class:`threading.Event` is consulted; once it is set the batch stops with
:class:`~phonics.exceptions.EncodingCancelled`.

Example usage:
    >>> import phonics.batch as batch

    # Encode a list, keeping missing values
    >>> batch.soundex(["Robert", None, "Rupert"])
    ['R163', None, 'R163']

    # Aligned sound-alike test
    >>> batch.pairwise(["Smith", "Jones"], ["Smyth", "Johnson"])
    [True, False]

    # Blocking: positions of words sharing a code
    >>> batch.group_by_code(["Smith", "Jones", "Smyth"])
    {'S530': [0, 2], 'J520': [1]}
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Callable, Iterable, Optional

from phonics._config import get_check_interval
from phonics.encoders import get_encoder
from phonics.exceptions import EncodingCancelled, ValidationError

if TYPE_CHECKING:
    from phonics.enums import PhoneticAlgorithm

__all__ = [
    "encode",
    "soundex",
    "refined_soundex",
    "metaphone",
    "pairwise",
    "group_by_code",
]

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


def encode(
    words: Iterable[Optional[str]],
    algorithm: str | PhoneticAlgorithm = "soundex",
    max_code_len: int | None = None,
    traditional: bool = True,
    cancel_event: threading.Event | None = None,
    progress: ProgressCallback | None = None,
) -> list[Optional[str]]:
    """Encode every word of a list with one algorithm.

    Args:
        words: Words to encode. ``None`` entries are returned as ``None``.
        algorithm: "soundex" (default), "refined_soundex" or "metaphone".
        max_code_len: Maximum code length, None for the algorithm default.
        traditional: Classic CH/SCH rules for Metaphone; ignored otherwise.
        cancel_event: Checked at every checkpoint; when set the batch stops.
        progress: Called at every checkpoint as ``progress(done, total)``.

    Returns:
        List of codes in the same order as ``words``.

    Raises:
        EncodingCancelled: If ``cancel_event`` was set at a checkpoint. Its
            ``processed`` attribute holds the number of items already done.

    Example:
        >>> encode(["knight", "night", None], algorithm="metaphone")
        ['NFT', 'NFT', None]
    """
    encoder = get_encoder(algorithm, max_code_len, traditional)
    items = list(words)
    total = len(items)
    interval = get_check_interval()
    logger.debug(
        "batch encode start algorithm=%s total=%d interval=%d", algorithm, total, interval
    )

    codes: list[Optional[str]] = []
    for i, word in enumerate(items):
        if i % interval == 0:
            _checkpoint(i, total, cancel_event, progress)
        codes.append(None if word is None else encoder(word))

    if progress is not None:
        progress(total, total)
    logger.debug("batch encode done algorithm=%s total=%d", algorithm, total)
    return codes


def _checkpoint(
    done: int,
    total: int,
    cancel_event: threading.Event | None,
    progress: ProgressCallback | None,
) -> None:
    if cancel_event is not None and cancel_event.is_set():
        logger.debug("batch cancelled at %d/%d", done, total)
        raise EncodingCancelled(done)
    if progress is not None:
        progress(done, total)


def soundex(
    words: Iterable[Optional[str]],
    max_code_len: int = 4,
    cancel_event: threading.Event | None = None,
    progress: ProgressCallback | None = None,
) -> list[Optional[str]]:
    """Soundex-encode a list of words. See :func:`encode`."""
    return encode(
        words,
        "soundex",
        max_code_len=max_code_len,
        cancel_event=cancel_event,
        progress=progress,
    )


def refined_soundex(
    words: Iterable[Optional[str]],
    max_code_len: int = 10,
    cancel_event: threading.Event | None = None,
    progress: ProgressCallback | None = None,
) -> list[Optional[str]]:
    """Refined-Soundex-encode a list of words. See :func:`encode`."""
    return encode(
        words,
        "refined_soundex",
        max_code_len=max_code_len,
        cancel_event=cancel_event,
        progress=progress,
    )


def metaphone(
    words: Iterable[Optional[str]],
    max_code_len: int = 10,
    traditional: bool = True,
    cancel_event: threading.Event | None = None,
    progress: ProgressCallback | None = None,
) -> list[Optional[str]]:
    """Metaphone-encode a list of words. See :func:`encode`."""
    return encode(
        words,
        "metaphone",
        max_code_len=max_code_len,
        traditional=traditional,
        cancel_event=cancel_event,
        progress=progress,
    )


def pairwise(
    left: list[Optional[str]],
    right: list[Optional[str]],
    algorithm: str | PhoneticAlgorithm = "soundex",
    max_code_len: int | None = None,
    traditional: bool = True,
) -> list[Optional[bool]]:
    """Check each aligned pair ``(left[i], right[i])`` for a shared code.

    Args:
        left: First list of words.
        right: Second list of words (must be same length as left).
        algorithm: Phonetic algorithm to use.
        max_code_len: Maximum code length, None for the algorithm default.
        traditional: Classic CH/SCH rules for Metaphone; ignored otherwise.

    Returns:
        One entry per pair: True when both codes are non-empty and equal,
        None when either word is missing.

    Raises:
        ValidationError: If left and right have different lengths.
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have equal length, got {len(left)} and {len(right)}"
        )

    left_codes = encode(left, algorithm, max_code_len, traditional)
    right_codes = encode(right, algorithm, max_code_len, traditional)

    results: list[Optional[bool]] = []
    for a, b in zip(left_codes, right_codes):
        if a is None or b is None:
            results.append(None)
        else:
            results.append(bool(a) and a == b)
    return results


def group_by_code(
    words: Iterable[Optional[str]],
    algorithm: str | PhoneticAlgorithm = "soundex",
    max_code_len: int | None = None,
    traditional: bool = True,
) -> dict[str, list[int]]:
    """Group word positions by phonetic code.

    This is the blocking step of record linkage: only words within one
    group need to be compared in detail.

    Returns:
        Dict mapping each code to the positions of the words carrying it,
        in order of first appearance. Missing words and words without a
        code (no letters) are left out.

    Example:
        >>> group_by_code(["Catherine", "Kathryn", "Katherine"], "metaphone")
        {'K0RN': [0, 1, 2]}
    """
    groups: dict[str, list[int]] = {}
    for i, code in enumerate(encode(words, algorithm, max_code_len, traditional)):
        if code:
            groups.setdefault(code, []).append(i)
    return groups
