"""Polars expression namespace for phonetic encoding.

This module registers a `.phonics` namespace on Polars expressions,
enabling phonetic encoding and sound-alike tests directly in Polars
expression contexts. Null values stay null.

Warning:
    Encoding runs row by row through map_elements. For a whole column,
    ``phonics.polars_api.encode_series`` does the same work in one call.

Example:
    >>> import polars as pl
    >>> import phonics  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["Robert", "Rupert", None]})
    >>> df.with_columns(code=pl.col("name").phonics.soundex())
"""

from typing import Literal, Optional, Union

import polars as pl

from phonics.encoders import get_encoder
from phonics.enums import PhoneticAlgorithm


@pl.api.register_expr_namespace("phonics")
class PhonicsExprNamespace:
    """
    Phonetic encoding namespace for Polars expressions.

    Access via `.phonics` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def encode(
        self,
        algorithm: Union[
            str,
            PhoneticAlgorithm,
            Literal["soundex", "refined_soundex", "metaphone"],
        ] = "soundex",
        max_code_len: Optional[int] = None,
        traditional: bool = True,
    ) -> pl.Expr:
        """
        Generate the phonetic code of each value.

        Args:
            algorithm: Phonetic algorithm to use (string or PhoneticAlgorithm enum)
            max_code_len: Maximum code length, None for the algorithm default
            traditional: Classic CH/SCH rules for Metaphone; ignored otherwise

        Returns:
            Phonetic code expression (Utf8)

        Example:
            >>> df.with_columns(
            ...     code=pl.col("name").phonics.encode("metaphone")
            ... )
        """
        encoder = get_encoder(algorithm, max_code_len, traditional)

        def encode_value(value):
            if value is None:
                return None
            return encoder(str(value))

        return self._expr.map_elements(encode_value, return_dtype=pl.Utf8)

    def soundex(self, max_code_len: int = 4) -> pl.Expr:
        """Soundex code of each value."""
        return self.encode("soundex", max_code_len=max_code_len)

    def refined_soundex(self, max_code_len: int = 10) -> pl.Expr:
        """Refined Soundex code of each value."""
        return self.encode("refined_soundex", max_code_len=max_code_len)

    def metaphone(self, max_code_len: int = 10, traditional: bool = True) -> pl.Expr:
        """Metaphone code of each value."""
        return self.encode("metaphone", max_code_len=max_code_len, traditional=traditional)

    def sounds_like(
        self,
        other: Union[str, pl.Expr],
        algorithm: Union[
            str,
            PhoneticAlgorithm,
            Literal["soundex", "refined_soundex", "metaphone"],
        ] = "soundex",
        max_code_len: Optional[int] = None,
        traditional: bool = True,
    ) -> pl.Expr:
        """
        Check whether values share a phonetic code with another value/column.

        Args:
            other: String literal or column expression to compare against
            algorithm: Phonetic algorithm to use (string or PhoneticAlgorithm enum)
            max_code_len: Maximum code length, None for the algorithm default
            traditional: Classic CH/SCH rules for Metaphone; ignored otherwise

        Returns:
            Boolean expression, null where either side is null

        Example:
            >>> df.filter(pl.col("name").phonics.sounds_like("Smith"))
            >>> df.with_columns(
            ...     same=pl.col("name1").phonics.sounds_like(pl.col("name2"), "metaphone")
            ... )
        """
        encoder = get_encoder(algorithm, max_code_len, traditional)

        if isinstance(other, str):
            # Compare against a literal string
            target = encoder(other)

            def match_literal(value):
                if value is None:
                    return None
                return bool(target) and encoder(str(value)) == target

            return self._expr.map_elements(match_literal, return_dtype=pl.Boolean)

        # Compare against another column
        def match_row(row):
            left, right = row["_left"], row["_right"]
            if left is None or right is None:
                return None
            code = encoder(str(left))
            return bool(code) and code == encoder(str(right))

        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            match_row,
            return_dtype=pl.Boolean,
        )
