"""Tests for Polars integration.

Covers the ``.phonics`` expression namespace, the column-level API
(``phonics.polars_api``) and the DataFrame functions (``phonics.polars_ext``).
"""

import threading

import polars as pl
import pytest

import phonics
import phonics.polars as php
from phonics.polars_api import BLOCK_COLUMN, CODE_COLUMN


class TestExpressionNamespace:
    """Tests for the .phonics expression namespace."""

    def test_soundex(self):
        df = pl.DataFrame({"name": ["Robert", "Rupert", None, "123"]})
        result = df.with_columns(code=pl.col("name").phonics.soundex())
        assert result["code"].to_list() == ["R163", "R163", None, ""]
        assert result["code"].dtype == pl.Utf8

    def test_refined_soundex(self):
        df = pl.DataFrame({"name": ["Robert", "Braz"]})
        result = df.select(pl.col("name").phonics.refined_soundex())
        assert result["name"].to_list() == ["R901096", "B1905"]

    def test_metaphone(self):
        df = pl.DataFrame({"name": ["knight", "night", "Thompson"]})
        result = df.select(pl.col("name").phonics.metaphone())
        assert result["name"].to_list() == ["NFT", "NFT", "0MPSN"]

    def test_metaphone_revised(self):
        df = pl.DataFrame({"name": ["school"]})
        traditional = df.select(pl.col("name").phonics.metaphone())
        revised = df.select(pl.col("name").phonics.metaphone(traditional=False))
        assert traditional["name"].to_list() == ["SXL"]
        assert revised["name"].to_list() == ["SKL"]

    def test_encode_with_enum(self):
        df = pl.DataFrame({"name": ["Washington"]})
        result = df.select(
            pl.col("name").phonics.encode(phonics.PhoneticAlgorithm.SOUNDEX, max_code_len=6)
        )
        assert result["name"].to_list() == ["W25235"]

    def test_encode_unknown_algorithm(self):
        with pytest.raises(phonics.AlgorithmError):
            pl.col("name").phonics.encode("nysiis")

    def test_sounds_like_literal(self):
        df = pl.DataFrame({"name": ["Smyth", "Jones", None]})
        result = df.select(pl.col("name").phonics.sounds_like("Smith"))
        assert result["name"].to_list() == [True, False, None]

    def test_sounds_like_letterless_literal(self):
        df = pl.DataFrame({"name": ["", "Smith"]})
        result = df.select(pl.col("name").phonics.sounds_like("123"))
        assert result["name"].to_list() == [False, False]

    def test_sounds_like_column(self):
        df = pl.DataFrame(
            {
                "a": ["Catherine", "Smith", None],
                "b": ["Kathryn", "Jones", "Smith"],
            }
        )
        result = df.with_columns(
            same=pl.col("a").phonics.sounds_like(pl.col("b"), algorithm="metaphone")
        )
        assert result["same"].to_list() == [True, False, None]

    def test_filter(self):
        df = pl.DataFrame({"name": ["Smith", "Smyth", "Jones"]})
        result = df.filter(pl.col("name").phonics.sounds_like("Smithe"))
        assert result["name"].to_list() == ["Smith", "Smyth"]


class TestEncodeSeries:
    """Tests for encode_series."""

    def test_basic(self):
        s = pl.Series("name", ["Robert", None, "Rupert"])
        result = php.encode_series(s)
        assert result.name == "name"
        assert result.dtype == pl.Utf8
        assert result.to_list() == ["R163", None, "R163"]

    def test_algorithms(self):
        s = pl.Series(["Thompson"])
        assert php.encode_series(s, "metaphone").to_list() == ["0MPSN"]
        assert php.encode_series(s, "refined_soundex").to_list() == [
            phonics.refined_soundex("Thompson")
        ]

    def test_empty(self):
        result = php.encode_series(pl.Series([], dtype=pl.Utf8))
        assert len(result) == 0
        assert result.dtype == pl.Utf8

    def test_cancelled(self):
        event = threading.Event()
        event.set()
        with pytest.raises(phonics.EncodingCancelled):
            php.encode_series(pl.Series(["Smith"]), cancel_event=event)


class TestBatchSoundsLike:
    """Tests for batch_sounds_like."""

    def test_basic(self):
        left = pl.Series(["Smith", "Jones", None])
        right = pl.Series(["Smyth", "Johnson", "Brown"])
        result = php.batch_sounds_like(left, right)
        assert result.name == "sounds_like"
        assert result.to_list() == [True, False, None]

    def test_length_mismatch(self):
        with pytest.raises(phonics.ValidationError):
            php.batch_sounds_like(pl.Series(["a", "b"]), pl.Series(["a"]))


class TestPhoneticBlocks:
    """Tests for phonetic_blocks."""

    def test_blocks(self):
        df = pl.DataFrame({"name": ["Smith", "Jones", "Smyth", None, "42"]})
        result = php.phonetic_blocks(df, "name")
        assert result[CODE_COLUMN].to_list() == ["S530", "J520", "S530", None, ""]
        assert result[BLOCK_COLUMN].to_list() == [0, 1, 0, None, None]
        assert result[BLOCK_COLUMN].dtype == pl.Int64

    def test_keeps_original_columns(self):
        df = pl.DataFrame({"id": [1, 2], "name": ["Catherine", "Kathryn"]})
        result = php.phonetic_blocks(df, "name", algorithm="metaphone")
        assert result.columns == ["id", "name", CODE_COLUMN, BLOCK_COLUMN]
        assert result[BLOCK_COLUMN].to_list() == [0, 0]


class TestDedupeSeries:
    """Tests for dedupe_series."""

    def test_basic_dedup(self):
        series = pl.Series(["Smith", "Smyth", "Jones", "Smithe"])
        result = php.dedupe_series(series)
        assert result.columns == ["value", "code", "group_id", "is_canonical"]
        assert result["group_id"].to_list() == [0, 0, None, 0]
        assert result["is_canonical"].to_list() == [True, False, True, False]

    def test_missing_values_are_not_grouped(self):
        series = pl.Series(["", None, "", "Lee"])
        result = php.dedupe_series(series)
        assert result["group_id"].to_list() == [None, None, None, None]
        assert result["is_canonical"].to_list() == [True, True, True, True]

    def test_non_string_values(self):
        result = php.dedupe_series(pl.Series([1, 2, None]))
        assert result["value"].to_list() == ["1", "2", None]
        assert result["code"].to_list() == ["", "", None]
        assert result["group_id"].to_list() == [None, None, None]

    def test_empty_series(self):
        result = php.dedupe_series(pl.Series([], dtype=pl.Utf8))
        assert len(result) == 0
        assert result.schema["group_id"] == pl.Int64


class TestDedupeRows:
    """Tests for dedupe_rows."""

    def test_multi_column(self):
        df = pl.DataFrame(
            {
                "first": ["Catherine", "Kathryn", "John"],
                "last": ["Smith", "Smyth", "Doe"],
            }
        )
        result = php.dedupe_rows(df, columns=["first", "last"], algorithm="metaphone")
        assert result["_group_id"].to_list() == [0, 0, None]
        assert result["_is_canonical"].to_list() == [True, False, True]

    def test_every_column_must_match(self):
        df = pl.DataFrame({"first": ["John", "Jon"], "last": ["Smith", "Brown"]})
        result = php.dedupe_rows(df, columns=["first", "last"])
        assert result["_group_id"].to_list() == [None, None]

    def test_keep_last(self):
        df = pl.DataFrame({"name": ["Smith", "Smyth", "Jones"]})
        result = php.dedupe_rows(df, columns=["name"], keep="last")
        assert result["_is_canonical"].to_list() == [False, True, True]

    def test_per_column_algorithms(self):
        df = pl.DataFrame({"first": ["Catherine", "Kathryn"], "last": ["Smith", "Smyth"]})
        # Soundex splits Catherine (C365) from Kathryn (K365)
        plain = php.dedupe_rows(df, columns=["first", "last"])
        mixed = php.dedupe_rows(
            df, columns=["first", "last"], algorithms={"first": "metaphone"}
        )
        assert plain["_group_id"].to_list() == [None, None]
        assert mixed["_group_id"].to_list() == [0, 0]

    def test_revised_metaphone_rules(self):
        df = pl.DataFrame({"name": ["school", "skool"]})
        traditional = php.dedupe_rows(df, columns=["name"], algorithm="metaphone")
        revised = php.dedupe_rows(
            df, columns=["name"], algorithm="metaphone", traditional=False
        )
        assert traditional["_group_id"].to_list() == [None, None]
        assert revised["_group_id"].to_list() == [0, 0]
        assert revised["_is_canonical"].to_list() == [True, False]

    def test_max_code_len(self):
        df = pl.DataFrame({"name": ["Washington", "Washingburn"]})
        full = php.dedupe_rows(df, columns=["name"], max_code_len=6)
        short = php.dedupe_rows(df, columns=["name"], max_code_len=2)
        assert full["_group_id"].to_list() == [None, None]
        assert short["_group_id"].to_list() == [0, 0]

    def test_null_never_grouped(self):
        df = pl.DataFrame({"name": [None, None, "Lee"]})
        result = php.dedupe_rows(df, columns=["name"])
        assert result["_group_id"].to_list() == [None, None, None]

    def test_empty_dataframe(self):
        df = pl.DataFrame({"name": []}, schema={"name": pl.Utf8})
        result = php.dedupe_rows(df, columns=["name"])
        assert len(result) == 0
        assert "_group_id" in result.columns
        assert "_is_canonical" in result.columns

    def test_invalid_keep(self):
        df = pl.DataFrame({"name": ["Smith"]})
        with pytest.raises(phonics.ValidationError):
            php.dedupe_rows(df, columns=["name"], keep="longest")


class TestPhoneticJoin:
    """Tests for phonetic_join."""

    def test_inner_join(self):
        left = pl.DataFrame({"id": [1, 2], "surname": ["Smith", "Jones"]})
        right = pl.DataFrame({"name": ["Smyth", "Johns", "Brown"], "score": [10, 20, 30]})
        result = php.phonetic_join(left, right, left_on="surname", right_on="name")

        pairs = sorted(zip(result["surname"].to_list(), result["name"].to_list()))
        assert pairs == [("Jones", "Johns"), ("Smith", "Smyth")]
        assert not any(c.startswith("_phonetic_key") for c in result.columns)

    def test_left_join_keeps_unmatched(self):
        left = pl.DataFrame({"surname": ["Smith", "Lee"]})
        right = pl.DataFrame({"name": ["Smyth"]})
        result = php.phonetic_join(left, right, left_on="surname", right_on="name", how="left")
        rows = dict(zip(result["surname"].to_list(), result["name"].to_list()))
        assert rows == {"Smith": "Smyth", "Lee": None}

    def test_letterless_values_never_join(self):
        left = pl.DataFrame({"k": ["", "123", None]})
        right = pl.DataFrame({"k": ["", "456", None]})
        result = php.phonetic_join(left, right, left_on="k", right_on="k")
        assert len(result) == 0

    def test_clashing_column_suffix(self):
        left = pl.DataFrame({"name": ["Smith"]})
        right = pl.DataFrame({"name": ["Smyth"]})
        result = php.phonetic_join(left, right, left_on="name", right_on="name")
        assert result.columns == ["name", "name_right"]
        assert result.row(0) == ("Smith", "Smyth")

    def test_multi_column(self):
        left = pl.DataFrame({"first": ["Catherine", "John"], "last": ["Smith", "Doe"]})
        right = pl.DataFrame({"given": ["Kathryn", "Jon"], "family": ["Smyth", "Smith"]})
        result = php.phonetic_join(
            left, right, on=[("first", "given"), ("last", "family")], algorithm="metaphone"
        )
        assert result.select("first", "given").rows() == [("Catherine", "Kathryn")]

    def test_metaphone_join(self):
        left = pl.DataFrame({"word": ["knight"]})
        right = pl.DataFrame({"other": ["night", "nite", "day"]})
        result = php.phonetic_join(
            left, right, left_on="word", right_on="other", algorithm="metaphone"
        )
        assert sorted(result["other"].to_list()) == ["night"]

    def test_missing_key_spec(self):
        left = pl.DataFrame({"a": ["x"]})
        with pytest.raises(phonics.ValidationError):
            php.phonetic_join(left, left, left_on="a")

    def test_invalid_how(self):
        left = pl.DataFrame({"a": ["x"]})
        with pytest.raises(phonics.ValidationError):
            php.phonetic_join(left, left, left_on="a", right_on="a", how="outer")


class TestTopLevelExports:
    """The DataFrame functions are reachable from the package root."""

    def test_exports(self):
        assert phonics.encode_series is php.encode_series
        assert phonics.phonetic_join is php.phonetic_join
        assert phonics.dedupe_rows is php.dedupe_rows


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
