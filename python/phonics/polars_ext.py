"""High-level Polars DataFrame operations for phonics.

This module provides user-friendly functions for sound-alike matching on
Polars DataFrames and Series: joins on phonetic codes and deduplication of
values or rows that are spelled differently but sound the same.

Functions in This Module
------------------------
- ``dedupe_series()``: Deduplicate a Series, grouping sound-alike values
- ``dedupe_rows()``: Deduplicate DataFrame rows that sound alike on every column
- ``phonetic_join()``: Join two DataFrames on phonetic codes

Example Usage
-------------
>>> import polars as pl
>>> import phonics
>>>
>>> # Join customer records on the sound of the surname
>>> left = pl.DataFrame({"surname": ["Smith", "Jones"]})
>>> right = pl.DataFrame({"name": ["Smyth", "Johns", "Brown"]})
>>> result = phonics.phonetic_join(left, right, left_on="surname", right_on="name")
>>>
>>> # Mark rows whose first and last names sound alike
>>> df = pl.DataFrame({
...     "first": ["Catherine", "Kathryn", "John"],
...     "last": ["Smith", "Smyth", "Doe"],
... })
>>> deduped = phonics.dedupe_rows(df, columns=["first", "last"], algorithm="metaphone")
>>> unique_rows = deduped.filter(pl.col("_is_canonical"))

See Also
--------
- ``phonics.polars_api``: Column-level encoding and blocking
- ``phonics.expr``: Polars expression namespace for column operations
- ``phonics.PhoneticIndex``: Reusable index for repeated lookups
"""

import logging
from typing import Dict, List, Literal, Optional, Tuple, Union

import polars as pl

from phonics.enums import PhoneticAlgorithm
from phonics.exceptions import ValidationError
from phonics.polars_api import encode_series

logger = logging.getLogger(__name__)

_KEEP_STRATEGIES = ("first", "last")


def _group_members(keys: List[Optional[tuple]]) -> Dict[tuple, List[int]]:
    """Positions sharing each complete key, in order of first appearance."""
    groups: Dict[tuple, List[int]] = {}
    for i, key in enumerate(keys):
        if key is not None:
            groups.setdefault(key, []).append(i)
    return groups


def _check_keep(keep: str) -> None:
    if keep not in _KEEP_STRATEGIES:
        raise ValidationError(f"keep must be one of {_KEEP_STRATEGIES}, got {keep!r}")


def dedupe_series(
    series: "pl.Series",
    algorithm: Union[str, PhoneticAlgorithm] = "soundex",
    max_code_len: Optional[int] = None,
    traditional: bool = True,
) -> "pl.DataFrame":
    """
    Deduplicate a Series, grouping values that share a phonetic code.

    Args:
        series: Series of strings to deduplicate
        algorithm: Phonetic algorithm to use (string or PhoneticAlgorithm enum)
        max_code_len: Maximum code length, None for the algorithm default
        traditional: Classic CH/SCH rules for Metaphone; ignored otherwise

    Returns:
        DataFrame with one row per input value, in input order:
        - value: The original string value
        - code: Its phonetic code
        - group_id: Group identifier (None for values without a sound-alike)
        - is_canonical: True for the first value in each group and for
          every ungrouped value

    Example:
        >>> series = pl.Series(["Smith", "Smyth", "Jones", "Smithe"])
        >>> result = dedupe_series(series)
        >>> print(result.filter(pl.col("group_id").is_not_null()))

    See Also:
        dedupe_rows: Deduplicate DataFrame rows over several columns
    """
    values = [None if v is None else str(v) for v in series.to_list()]
    codes = encode_series(
        series, algorithm, max_code_len=max_code_len, traditional=traditional
    ).to_list()

    group_ids: List[Optional[int]] = [None] * len(values)
    is_canonical = [True] * len(values)
    groups = _group_members([(code,) if code else None for code in codes])

    group_counter = 0
    for members in groups.values():
        if len(members) == 1:
            continue
        for idx in members:
            group_ids[idx] = group_counter
            is_canonical[idx] = idx == members[0]
        group_counter += 1

    return pl.DataFrame(
        {
            "value": values,
            "code": codes,
            "group_id": group_ids,
            "is_canonical": is_canonical,
        },
        schema={
            "value": pl.Utf8,
            "code": pl.Utf8,
            "group_id": pl.Int64,
            "is_canonical": pl.Boolean,
        },
    )


def dedupe_rows(
    df: "pl.DataFrame",
    columns: List[str],
    algorithm: Union[str, PhoneticAlgorithm] = "soundex",
    algorithms: Optional[Dict[str, Union[str, PhoneticAlgorithm]]] = None,
    keep: Literal["first", "last"] = "first",
    max_code_len: Optional[int] = None,
    traditional: bool = True,
) -> "pl.DataFrame":
    """
    Deduplicate a DataFrame by grouping rows that sound alike on every column.

    Two rows are duplicates when each listed column yields the same
    non-empty phonetic code for both. A row with a null or letterless
    value in any listed column is never grouped.

    Args:
        df: DataFrame to deduplicate
        columns: List of column names to compare
        algorithm: Default phonetic algorithm (string or PhoneticAlgorithm enum)
        algorithms: Optional dict mapping column names to algorithms
        keep: Strategy for selecting canonical row in each group:
            - "first": Keep the first row (by original index)
            - "last": Keep the last row (by original index)
        max_code_len: Maximum code length for every column, None for each
            algorithm's default
        traditional: Classic CH/SCH rules for Metaphone columns; ignored otherwise

    Returns:
        Original DataFrame with added columns:
        - _group_id: Integer group ID for duplicate clusters (null for unique rows)
        - _is_canonical: True for the row to keep in each group

    Example:
        >>> df = pl.DataFrame({
        ...     "first": ["Catherine", "Kathryn", "John"],
        ...     "last": ["Smith", "Smyth", "Doe"],
        ... })
        >>> result = dedupe_rows(df, columns=["first", "last"], algorithm="metaphone")
        >>> result["_group_id"].to_list()
        [0, 0, None]
    """
    _check_keep(keep)

    n = len(df)
    if n == 0:
        return df.with_columns(
            pl.lit(None).cast(pl.Int64).alias("_group_id"),
            pl.lit(True).alias("_is_canonical"),
        )

    per_column = []
    for col in columns:
        col_algorithm = (algorithms or {}).get(col, algorithm)
        codes = encode_series(
            df[col], col_algorithm, max_code_len=max_code_len, traditional=traditional
        )
        per_column.append(codes.to_list())

    keys: List[Optional[tuple]] = []
    for row_codes in zip(*per_column):
        keys.append(row_codes if all(row_codes) else None)

    group_ids: List[Optional[int]] = [None] * n
    is_canonical: List[bool] = [True] * n

    group_counter = 0
    for members in _group_members(keys).values():
        if len(members) == 1:
            # Unique row - no group ID, is canonical
            continue

        canonical_idx = members[0] if keep == "first" else members[-1]
        for idx in members:
            group_ids[idx] = group_counter
            if idx != canonical_idx:
                is_canonical[idx] = False
        group_counter += 1

    logger.debug("dedupe_rows rows=%d groups=%d", n, group_counter)
    return df.with_columns(
        pl.Series("_group_id", group_ids, dtype=pl.Int64),
        pl.Series("_is_canonical", is_canonical),
    )


def phonetic_join(
    left: "pl.DataFrame",
    right: "pl.DataFrame",
    left_on: Optional[str] = None,
    right_on: Optional[str] = None,
    on: Optional[List[Tuple[str, str]]] = None,
    algorithm: Union[str, PhoneticAlgorithm] = "soundex",
    max_code_len: Optional[int] = None,
    traditional: bool = True,
    how: Literal["inner", "left"] = "inner",
) -> "pl.DataFrame":
    """
    Join two DataFrames on the phonetic codes of their key columns.

    Rows pair up when every key column pair yields the same code. Values
    that are null or have no letters never match anything.

    Args:
        left: Left DataFrame
        right: Right DataFrame
        left_on: Column name in left DataFrame (for single-column join)
        right_on: Column name in right DataFrame (for single-column join)
        on: List of (left_col, right_col) pairs for a multi-column join
        algorithm: Phonetic algorithm to use (string or PhoneticAlgorithm enum)
        max_code_len: Maximum code length, None for the algorithm default
        traditional: Classic CH/SCH rules for Metaphone; ignored otherwise
        how: Join type - "inner" (default) or "left"

    Returns:
        Joined DataFrame with all columns from both DataFrames. Columns of
        ``right`` whose name clashes with ``left`` get a ``_right`` suffix.

    Example:
        >>> left = pl.DataFrame({"surname": ["Smith", "Jones"]})
        >>> right = pl.DataFrame({"name": ["Smyth", "Brown"]})
        >>> phonetic_join(left, right, left_on="surname", right_on="name")
    """
    if on is not None:
        pairs = list(on)
    elif left_on is not None and right_on is not None:
        pairs = [(left_on, right_on)]
    else:
        raise ValidationError("Must specify either 'on' or both 'left_on' and 'right_on'")
    if how not in ("inner", "left"):
        raise ValidationError(f"how must be 'inner' or 'left', got {how!r}")

    key_columns = [f"_phonetic_key_{i}" for i in range(len(pairs))]

    def with_keys(df: "pl.DataFrame", side: int) -> "pl.DataFrame":
        keys = []
        for key, pair in zip(key_columns, pairs):
            codes = encode_series(
                df[pair[side]], algorithm, max_code_len=max_code_len, traditional=traditional
            )
            # Empty codes must not join with each other
            keys.append(
                pl.Series(key, [code or None for code in codes.to_list()], dtype=pl.Utf8)
            )
        return df.with_columns(keys)

    joined = with_keys(left, 0).join(
        with_keys(right, 1),
        on=key_columns,
        how=how,
        suffix="_right",
    )
    return joined.drop(key_columns)
