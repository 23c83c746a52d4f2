"""Resolve words to frequency statistics, cache first."""

from typing import Protocol

import requests

from deckgen.common.logging import log_debug, log_error, log_info
from deckgen.frequency.cache import FrequencyCache
from deckgen.frequency.records import NOT_FOUND, Found, FrequencyRecord, LookupResult
from deckgen.input.lexical import build_query_key, lookup_forms

LOG_PREFIX = "frequency"


class FrequencyFetcher(Protocol):
    def fetch(self, query: str) -> FrequencyRecord: ...


class FrequencyResolver:
    """Looks up query keys in the cache and falls back to the service.

    Every outcome is cached, failures included, so a key reaches the
    service at most once for the lifetime of the cache file.
    """

    def __init__(
        self,
        cache: FrequencyCache,
        client: FrequencyFetcher,
        verbose: bool = False,
        debug: bool = False,
    ) -> None:
        self.cache = cache
        self.client = client
        self.verbose = verbose
        self.debug = debug
        self.network_calls = 0
        self.cache_hits = 0
        self.failures = 0

    def resolve(self, query_key: str) -> LookupResult:
        cached = self.cache.get(query_key)
        if cached is not None:
            self.cache_hits += 1
            log_info(self.verbose, LOG_PREFIX, "cache-hit", f"{query_key} -> {cached!r}")
            return cached

        log_info(self.verbose, LOG_PREFIX, "cache-miss", query_key)
        self.network_calls += 1
        try:
            record = self.client.fetch(query_key)
        except (requests.RequestException, ValueError) as e:
            self.failures += 1
            log_error(LOG_PREFIX, f"Error fetching frequency data for {query_key!r}: {e}")
            self.cache.put(query_key, NOT_FOUND)
            return NOT_FOUND

        result = Found(record)
        log_debug(self.debug, f"{query_key}: hits={record.hits} total={record.total} rank={record.rank}")
        self.cache.put(query_key, result)
        return result

    def resolve_word(self, raw_word: str) -> LookupResult:
        """Resolve a raw dictionary entry such as 'das Haus (Häuser)'."""
        return self.resolve(build_query_key(lookup_forms(raw_word)))


__all__ = [
    "FrequencyFetcher",
    "FrequencyResolver",
]
