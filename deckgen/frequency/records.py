"""Frequency statistics and lookup results.

A lookup either found a record or was confirmed absent. Both outcomes are
cached, so a word that failed once is never queried again.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union


# Rank given to entries without frequency data (sorts after everything else)
MAX_RANK: int = 2**63 - 1


@dataclass(frozen=True)
class FrequencyRecord:
    """Frequency statistics returned by the corpus service for one query."""
    hits: int
    total: int
    frequency: int
    query: str

    @property
    def rank(self) -> int:
        """Corpus tokens per hit; lower is more frequent. Zero hits rank best."""
        if self.hits == 0:
            return 0
        return self.total // self.hits

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hits": self.hits,
            "total": self.total,
            "frequency": self.frequency,
            "query": self.query,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FrequencyRecord":
        """Build a record from a cache entry.

        Accepts both lowercase keys and the PascalCase keys written by older
        generator versions ("Hits", "Total", ...). Raises ValueError on
        missing or non-integer fields.
        """
        def _field(name: str) -> Any:
            if name in data:
                return data[name]
            pascal = name[0].upper() + name[1:]
            if pascal in data:
                return data[pascal]
            raise ValueError(f"missing field '{name}'")

        hits = _field("hits")
        total = _field("total")
        frequency = _field("frequency")
        query = _field("query")
        for name, value in (("hits", hits), ("total", total), ("frequency", frequency)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"field '{name}' must be an integer, got {value!r}")
        return cls(hits=hits, total=total, frequency=frequency, query=str(query))


@dataclass(frozen=True)
class Found:
    record: FrequencyRecord


class NotFound:
    """Confirmed-absent lookup. Use the NOT_FOUND singleton."""

    _instance: Optional["NotFound"] = None

    def __new__(cls) -> "NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFound()

LookupResult = Union[Found, NotFound]


def rank_of(result: LookupResult) -> int:
    """Rank used for ordering: the record's rank, or MAX_RANK when absent."""
    if isinstance(result, Found):
        return result.record.rank
    return MAX_RANK


__all__ = [
    "MAX_RANK",
    "FrequencyRecord",
    "Found",
    "NotFound",
    "NOT_FOUND",
    "LookupResult",
    "rank_of",
]
