"""Column-level Polars API for phonetic encoding.

This module encodes whole Polars Series in one call through the list batch
layer (:mod:`phonics.batch`), so missing values, ordering and checkpoints
behave exactly as they do there.

When to Use This Module (polars_api)
------------------------------------
- Encoding a full column once, e.g. to store the codes
- Aligned sound-alike tests between two columns
- Blocking a DataFrame by phonetic code before a detailed comparison

For DataFrame-level joins and deduplication, see ``phonics.polars_ext``.

Functions in This Module
------------------------
- ``encode_series()``: Phonetic codes of a Series
- ``batch_sounds_like()``: Aligned sound-alike test between two Series
- ``phonetic_blocks()``: Add a code column and a block id to a DataFrame

Example Usage
-------------
>>> import polars as pl
>>> import phonics
>>>
>>> df = pl.DataFrame({"name": ["Smith", "Smyth", "Jones", None]})
>>> df = df.with_columns(code=phonics.encode_series(df["name"]))
>>> blocked = phonics.phonetic_blocks(df, "name", algorithm="metaphone")

See Also
--------
- ``phonics.polars_ext``: DataFrame joins and deduplication
- ``phonics.expr``: Polars expression namespace for column operations
"""

import logging
import threading
from typing import Optional, Union

import polars as pl

from phonics import batch
from phonics.enums import PhoneticAlgorithm
from phonics.exceptions import ValidationError

logger = logging.getLogger(__name__)

CODE_COLUMN = "_phonetic_code"
BLOCK_COLUMN = "_block_id"


def encode_series(
    series: "pl.Series",
    algorithm: Union[str, PhoneticAlgorithm] = "soundex",
    max_code_len: Optional[int] = None,
    traditional: bool = True,
    cancel_event: Optional[threading.Event] = None,
) -> "pl.Series":
    """
    Compute the phonetic code of every value of a Series in a single call.

    Args:
        series: String Series to encode
        algorithm: "soundex" (default), "refined_soundex" or "metaphone"
        max_code_len: Maximum code length, None for the algorithm default
        traditional: Classic CH/SCH rules for Metaphone; ignored otherwise
        cancel_event: Optional event checked at every batch checkpoint

    Returns:
        Utf8 Series with the same name and length; null where the input is null

    Example:
        >>> s = pl.Series("name", ["Robert", None, "Rupert"])
        >>> encode_series(s).to_list()
        ['R163', None, 'R163']

    See Also:
        phonetic_blocks: Group DataFrame rows by code
    """
    values = [None if v is None else str(v) for v in series.to_list()]
    codes = batch.encode(
        values,
        algorithm,
        max_code_len=max_code_len,
        traditional=traditional,
        cancel_event=cancel_event,
    )
    return pl.Series(series.name, codes, dtype=pl.Utf8)


def batch_sounds_like(
    left: "pl.Series",
    right: "pl.Series",
    algorithm: Union[str, PhoneticAlgorithm] = "soundex",
    max_code_len: Optional[int] = None,
    traditional: bool = True,
) -> "pl.Series":
    """
    Check aligned pairs of two Series for a shared phonetic code.

    Args:
        left: First string Series
        right: Second string Series (must be same length as left)
        algorithm: Phonetic algorithm to use

    Returns:
        Boolean Series, null where either side is null

    Example:
        >>> df = pl.DataFrame({"a": ["Smith", "Jones"], "b": ["Smyth", "Johnson"]})
        >>> df = df.with_columns(same=batch_sounds_like(df["a"], df["b"]))
    """
    if len(left) != len(right):
        raise ValidationError("Series must have equal length")

    left_values = [None if v is None else str(v) for v in left.to_list()]
    right_values = [None if v is None else str(v) for v in right.to_list()]
    results = batch.pairwise(
        left_values,
        right_values,
        algorithm,
        max_code_len=max_code_len,
        traditional=traditional,
    )
    return pl.Series("sounds_like", results, dtype=pl.Boolean)


def phonetic_blocks(
    df: "pl.DataFrame",
    column: str,
    algorithm: Union[str, PhoneticAlgorithm] = "soundex",
    max_code_len: Optional[int] = None,
    traditional: bool = True,
) -> "pl.DataFrame":
    """
    Assign each row of a DataFrame to a phonetic block.

    Args:
        df: DataFrame to block
        column: Name of the string column to encode
        algorithm: Phonetic algorithm to use

    Returns:
        Original DataFrame with added columns:
        - _phonetic_code: Code of the value in ``column`` (null for nulls)
        - _block_id: Dense block number in order of first appearance
          (null where the code is null or empty)

    Example:
        >>> df = pl.DataFrame({"name": ["Smith", "Jones", "Smyth"]})
        >>> phonetic_blocks(df, "name")["_block_id"].to_list()
        [0, 1, 0]
    """
    codes = encode_series(
        df[column], algorithm, max_code_len=max_code_len, traditional=traditional
    ).to_list()

    block_of: dict = {}
    block_ids = []
    for code in codes:
        if not code:
            block_ids.append(None)
            continue
        if code not in block_of:
            block_of[code] = len(block_of)
        block_ids.append(block_of[code])

    logger.debug("phonetic_blocks column=%s rows=%d blocks=%d", column, len(df), len(block_of))
    return df.with_columns(
        pl.Series(CODE_COLUMN, codes, dtype=pl.Utf8),
        pl.Series(BLOCK_COLUMN, block_ids, dtype=pl.Int64),
    )
