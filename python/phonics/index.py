"""PhoneticIndex for repeated sound-alike lookups.

This module provides a reusable index from phonetic code to the items
carrying it, built from a Python list or a Polars Series. Queries are
encoded once and answered with a dictionary lookup instead of a scan.

Warning:
    This class is NOT thread-safe. Create separate instances per thread
    for concurrent operations.
"""

import logging
import pickle
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

import polars as pl

from phonics._utils import normalize_algorithm, resolve_max_code_len
from phonics.encoders import get_encoder
from phonics.enums import PhoneticAlgorithm

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhoneticMatch:
    """An indexed item sharing the query's phonetic code."""

    text: str
    id: int
    code: str


class PhoneticIndex:
    """
    A reusable phonetic index for record linkage lookups.

    Items are grouped by phonetic code; a search returns every item whose
    code equals the query's code, in insertion order. Items without letters
    (and null items) are stored but never returned.

    The index can be persisted to disk and reloaded for later use.

    Warning:
        This class is NOT thread-safe. Create separate instances for each
        thread when using in concurrent applications.

    Example:
        >>> import polars as pl
        >>> from phonics import PhoneticIndex
        >>>
        >>> names = pl.Series(["Smith", "Jones", "Smyth"])
        >>> index = PhoneticIndex.from_series(names, algorithm="metaphone")
        >>> [m.text for m in index.search("Smithe")]
        ['Smith', 'Smyth']
        >>>
        >>> # Save for later reuse
        >>> index.save("names_index.pkl")
        >>> index = PhoneticIndex.load("names_index.pkl")
    """

    def __init__(
        self,
        items: List[str],
        algorithm: Union[str, PhoneticAlgorithm] = "metaphone",
        max_code_len: Optional[int] = None,
        traditional: bool = True,
    ):
        """
        Create a PhoneticIndex from a list of strings.

        Args:
            items: List of strings to index
            algorithm: Phonetic algorithm used for items and queries
            max_code_len: Maximum code length, None for the algorithm default
            traditional: Classic CH/SCH rules for Metaphone; ignored otherwise
        """
        self._algorithm = normalize_algorithm(algorithm)
        self._max_code_len = resolve_max_code_len(self._algorithm, max_code_len)
        self._traditional = traditional
        self._encoder = get_encoder(self._algorithm, self._max_code_len, traditional)
        self._items: List[str] = []
        self._buckets: Dict[str, List[int]] = {}
        for item in items:
            self.add(item)
        logger.debug(
            "PhoneticIndex built algorithm=%s items=%d codes=%d",
            self._algorithm,
            len(self._items),
            len(self._buckets),
        )

    @classmethod
    def from_series(
        cls,
        series: "pl.Series",
        algorithm: Union[str, PhoneticAlgorithm] = "metaphone",
        max_code_len: Optional[int] = None,
        traditional: bool = True,
    ) -> "PhoneticIndex":
        """
        Create a PhoneticIndex from a Polars Series.

        Null values are indexed as empty strings so that match ids keep
        lining up with Series positions.

        Example:
            >>> names = pl.Series(["Smith", "Jones", "Smyth"])
            >>> index = PhoneticIndex.from_series(names, algorithm="soundex")
        """
        items = [str(x) if x is not None else "" for x in series.to_list()]
        return cls(items, algorithm=algorithm, max_code_len=max_code_len, traditional=traditional)

    @classmethod
    def from_dataframe(
        cls,
        df: "pl.DataFrame",
        column: str,
        algorithm: Union[str, PhoneticAlgorithm] = "metaphone",
        max_code_len: Optional[int] = None,
        traditional: bool = True,
    ) -> "PhoneticIndex":
        """Create a PhoneticIndex from a DataFrame column."""
        return cls.from_series(
            df[column], algorithm=algorithm, max_code_len=max_code_len, traditional=traditional
        )

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def add(self, item: str) -> int:
        """
        Add an item to the index.

        Returns:
            The id of the new item (its position in insertion order).
        """
        item_id = len(self._items)
        self._items.append(item)
        code = self._encoder(item)
        if code:
            self._buckets.setdefault(code, []).append(item_id)
        return item_id

    def code_of(self, text: str) -> str:
        """Phonetic code of ``text`` under this index's settings."""
        return self._encoder(text)

    def search(self, query: str, limit: Optional[int] = None) -> List[PhoneticMatch]:
        """
        Find the indexed items that share the query's phonetic code.

        Args:
            query: Query string to look up
            limit: Maximum number of results to return (None for all)

        Returns:
            List of PhoneticMatch objects in insertion order
        """
        code = self._encoder(query)
        ids = self._buckets.get(code, []) if code else []
        if limit is not None:
            ids = ids[:limit]
        return [PhoneticMatch(self._items[i], i, code) for i in ids]

    def search_series(
        self,
        queries: "pl.Series",
        limit: Optional[int] = None,
        include_query: bool = True,
    ) -> "pl.DataFrame":
        """
        Search for each query in a Series, returning a DataFrame of results.

        Args:
            queries: Series of query strings
            limit: Maximum matches per query (None for all)
            include_query: Include query column in results

        Returns:
            DataFrame with columns:
            - query_idx: Index of the query in the input Series
            - query: The query string (if include_query=True)
            - match: The matched string from the index
            - match_idx: Index of the match in the original indexed data
            - code: The shared phonetic code
        """
        rows = []
        for query_idx, query in enumerate(queries.to_list()):
            if query is None:
                continue

            for match in self.search(str(query), limit=limit):
                row = {
                    "query_idx": query_idx,
                    "match": match.text,
                    "match_idx": match.id,
                    "code": match.code,
                }
                if include_query:
                    row["query"] = str(query)
                rows.append(row)

        columns = ["query_idx", "query", "match", "match_idx", "code"]
        if not include_query:
            columns.remove("query")
        schema = {
            "query_idx": pl.Int64,
            "query": pl.Utf8,
            "match": pl.Utf8,
            "match_idx": pl.Int64,
            "code": pl.Utf8,
        }
        schema = {name: schema[name] for name in columns}

        if not rows:
            return pl.DataFrame(schema=schema)
        return pl.DataFrame(rows, schema=schema)

    def batch_search(
        self,
        queries: List[str],
        limit: Optional[int] = None,
    ) -> List[List[PhoneticMatch]]:
        """
        Search for multiple queries, returning results for each.

        Returns:
            List of lists, where each inner list contains PhoneticMatch
            objects for the corresponding query
        """
        return [self.search(q, limit=limit) for q in queries]

    def codes(self) -> Dict[str, List[str]]:
        """Return each code with the items carrying it."""
        return {code: [self._items[i] for i in ids] for code, ids in self._buckets.items()}

    def get_items(self) -> List[str]:
        """Return the list of indexed items."""
        return self._items.copy()

    def __len__(self) -> int:
        """Return the number of indexed items."""
        return len(self._items)

    def save(self, path: Union[str, Path]) -> None:
        """
        Save the index to a file.

        Args:
            path: File path to save to (typically .pkl extension)

        Example:
            >>> index.save("my_index.pkl")
        """
        data = {
            "items": self._items,
            "algorithm": self._algorithm,
            "max_code_len": self._max_code_len,
            "traditional": self._traditional,
        }
        with open(path, "wb") as f:
            pickle.dump(data, f)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "PhoneticIndex":
        """
        Load an index from a file.

        Args:
            path: File path to load from

        Returns:
            PhoneticIndex instance

        Example:
            >>> index = PhoneticIndex.load("my_index.pkl")
        """
        with open(path, "rb") as f:
            data = pickle.load(f)

        return cls(
            items=data["items"],
            algorithm=data["algorithm"],
            max_code_len=data["max_code_len"],
            traditional=data["traditional"],
        )

    def __repr__(self) -> str:
        return f"PhoneticIndex(algorithm={self._algorithm!r}, size={len(self._items)})"
