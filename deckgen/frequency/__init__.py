"""Frequency lookup: records, cache, service client and resolver."""

from deckgen.frequency.records import (
    MAX_RANK,
    FrequencyRecord,
    Found,
    NotFound,
    NOT_FOUND,
    LookupResult,
    rank_of,
)
from deckgen.frequency.client import (
    DEFAULT_API_URL,
    FrequencyClient,
    FrequencyLookupError,
    parse_frequency_payload,
)

__all__ = [
    # records
    "MAX_RANK",
    "FrequencyRecord",
    "Found",
    "NotFound",
    "NOT_FOUND",
    "LookupResult",
    "rank_of",
    # client
    "DEFAULT_API_URL",
    "FrequencyClient",
    "FrequencyLookupError",
    "parse_frequency_payload",
]
