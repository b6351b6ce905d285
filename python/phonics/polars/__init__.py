"""
Polars integration for phonics.

This module provides phonetic encoding and sound-alike matching for Polars
DataFrames and Series, at three levels:

Levels:
    1. **Expression Namespace** (`.phonics`) - Per-row operations
       Use this for column-wise encoding in Polars expressions.
       Example: `df.with_columns(code=pl.col("name").phonics.metaphone())`

    2. **Column API** - Whole-Series encoding and blocking
       Example: `encode_series(df["name"], algorithm="soundex")`

    3. **DataFrame Functions** - Joins, deduplication
       Example: `phonetic_join(left_df, right_df, "surname", "name")`

Examples:
    >>> import polars as pl
    >>> import phonics.polars as php  # or: from phonics import polars as php

    >>> df = pl.DataFrame({"name": ["Smith", "Smyth", "Jones"]})
    >>> php.phonetic_blocks(df, "name")
    >>> php.dedupe_series(df["name"], algorithm="metaphone")
"""

# Expression namespace is registered on import
# (importing phonics.expr handles this)
import phonics.expr as _expr  # noqa: F401

# Column-level API
from phonics.polars_api import (
    batch_sounds_like,
    encode_series,
    phonetic_blocks,
)

# DataFrame functions for joins and deduplication
from phonics.polars_ext import (
    dedupe_rows,
    dedupe_series,
    phonetic_join,
)

__all__ = [
    # Column API
    "encode_series",
    "batch_sounds_like",
    "phonetic_blocks",
    # DataFrame functions
    "dedupe_series",
    "dedupe_rows",
    "phonetic_join",
]
