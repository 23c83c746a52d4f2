"""Persistent frequency cache.

The whole cache lives in one JSON file per deck:

{
  "Haus": {"hits": 10, "total": 100, "frequency": 5, "query": "Haus"},
  "Xyzzy": null
}

null marks a lookup that failed and must not be retried. The file is read
once when the run starts and written once when it ends.
"""

import json
from pathlib import Path
from typing import Dict, Optional

from deckgen.common.logging import log_info, log_warning
from deckgen.common.utils import ensure_dir
from deckgen.frequency.records import NOT_FOUND, Found, FrequencyRecord, LookupResult

LOG_PREFIX = "cache"


class FrequencyCache:
    """In-memory query key -> lookup result map backed by a JSON file."""

    def __init__(self, path: Path, entries: Optional[Dict[str, LookupResult]] = None) -> None:
        self.path = path
        self._entries: Dict[str, LookupResult] = dict(entries or {})

    @classmethod
    def load(cls, path: Path, enabled: bool = True, verbose: bool = False) -> "FrequencyCache":
        """Load the cache file at `path`.

        Args:
            path: Cache file location (also where flush() writes)
            enabled: When False, ignore any existing file and start empty
            verbose: Enable verbose logging

        A missing file yields an empty cache. An unreadable or malformed file
        is reported and also yields an empty cache; it is overwritten on flush.
        """
        if not enabled or not path.exists():
            return cls(path)

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            log_warning(LOG_PREFIX, f"Ignoring unreadable cache {path.name}: {e}")
            return cls(path)

        if not isinstance(data, dict):
            log_warning(LOG_PREFIX, f"Ignoring cache {path.name}: expected a JSON object")
            return cls(path)

        entries: Dict[str, LookupResult] = {}
        for key, value in data.items():
            if value is None:
                entries[key] = NOT_FOUND
                continue
            if not isinstance(value, dict):
                log_warning(LOG_PREFIX, f"Dropping malformed entry for {key!r}")
                continue
            try:
                entries[key] = Found(FrequencyRecord.from_dict(value))
            except ValueError as e:
                log_warning(LOG_PREFIX, f"Dropping malformed entry for {key!r}: {e}")

        log_info(verbose, LOG_PREFIX, "file", f"Loaded {len(entries)} entries from {path.name}")
        return cls(path, entries)

    def get(self, key: str) -> Optional[LookupResult]:
        """Return the cached result, or None if the key was never looked up."""
        return self._entries.get(key)

    def put(self, key: str, result: LookupResult) -> None:
        self._entries[key] = result

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def to_json(self) -> str:
        data = {
            key: (result.record.to_dict() if isinstance(result, Found) else None)
            for key, result in self._entries.items()
        }
        return json.dumps(data, ensure_ascii=False, indent=2) + "\n"

    def flush(self, verbose: bool = False) -> Path:
        """Write the whole cache back to its file."""
        ensure_dir(self.path.parent)
        self.path.write_text(self.to_json(), encoding="utf-8")
        log_info(verbose, LOG_PREFIX, "file", f"Saved {len(self._entries)} entries to {self.path.name}")
        return self.path


__all__ = [
    "FrequencyCache",
]
