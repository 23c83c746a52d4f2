"""Corpus frequency service client (DWDS frequency API by default)."""

import os
from typing import Any, Dict, Optional

import requests
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from deckgen.common.logging import log_info
from deckgen.frequency.records import FrequencyRecord

DEFAULT_API_URL = "https://dwds.de/api/frequency/"
API_URL_ENV = "FREQUENCY_API_URL"

# Module-level session for connection reuse
_session = requests.Session()
_session.headers.update({
    "User-Agent": "deckgen/0.1 (+flashcard deck frequency ranking)",
    "Accept": "application/json",
})


class FrequencyLookupError(ValueError):
    """The service answered, but not with a usable frequency payload."""


def default_api_url() -> str:
    return os.environ.get(API_URL_ENV) or DEFAULT_API_URL


def _require_int(payload: Dict[str, Any], name: str) -> int:
    value = payload.get(name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise FrequencyLookupError(f"'{name}' must be an integer, got {value!r}")
    return value


def parse_frequency_payload(payload: Any, query: str) -> FrequencyRecord:
    """Validate a service response and turn it into a FrequencyRecord.

    Expected shape: {"hits": 10, "total": "100", "frequency": 5, "q": "Haus"}.
    `total` arrives as a string-encoded integer. Any other shape raises
    FrequencyLookupError.
    """
    if not isinstance(payload, dict):
        raise FrequencyLookupError(f"expected a JSON object, got {type(payload).__name__}")

    hits = _require_int(payload, "hits")
    frequency = _require_int(payload, "frequency")

    raw_total = payload.get("total")
    if not isinstance(raw_total, str) or not raw_total.strip().isdigit():
        raise FrequencyLookupError(f"'total' must be a string-encoded integer, got {raw_total!r}")
    total = int(raw_total.strip())

    if hits < 0:
        raise FrequencyLookupError(f"'hits' must not be negative, got {hits}")

    return FrequencyRecord(hits=hits, total=total, frequency=frequency, query=query)


class FrequencyClient:
    """Blocking client for the frequency service.

    One call per query key. With the default retry_count of 1 a failure is
    final; higher values retry transport errors with exponential backoff.
    """

    _retry_wait = wait_exponential(multiplier=1, min=1, max=8)

    def __init__(
        self,
        api_url: Optional[str] = None,
        timeout_sec: float = 20.0,
        retry_count: int = 1,
        session: Optional[requests.Session] = None,
        verbose: bool = False,
    ) -> None:
        if retry_count < 1:
            raise ValueError(f"retry_count must be at least 1, got {retry_count}")
        self.api_url = api_url or default_api_url()
        self.timeout_sec = timeout_sec
        self.retry_count = retry_count
        self.session = session or _session
        self.verbose = verbose

    def _get_json(self, query: str) -> Any:
        resp = self.session.get(self.api_url, params={"q": query}, timeout=self.timeout_sec)
        resp.raise_for_status()
        return resp.json()

    def fetch(self, query: str) -> FrequencyRecord:
        """Fetch frequency statistics for a pipe-joined query key.

        Raises requests.RequestException on transport/HTTP errors and
        ValueError (including FrequencyLookupError) on unusable payloads.
        """
        log_info(self.verbose, "frequency", "api", f"GET {self.api_url}?q={query}")
        retrying = Retrying(
            reraise=True,
            stop=stop_after_attempt(self.retry_count),
            wait=self._retry_wait,
            retry=retry_if_exception_type(requests.RequestException),
        )
        payload = retrying(self._get_json, query)
        return parse_frequency_payload(payload, query)


__all__ = [
    "DEFAULT_API_URL",
    "FrequencyClient",
    "FrequencyLookupError",
    "default_api_url",
    "parse_frequency_payload",
]
