"""Deck folder configuration.

Each deck folder can have a -config.json file that specifies:
- input_file: word list (default: original-words.csv)
- output_file: generated deck (default: anki-deck.csv)
- overrides_file / extras_file: optional tables (default: overrides.csv / extra.csv)
- cache_file: frequency cache (default: frequency_cache.json)
- note_type: note type label written into every row
- api_url: http(s) frequency service endpoint (default: FREQUENCY_API_URL or DWDS)
- timeout_sec: per-request timeout (default: 20)
- retry_count: attempts per lookup (default: 1, no retry)
- cache: whether to read the existing cache file (default: true). When false,
  every word is looked up again and the cache file is rewritten.
"""

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional


CONFIG_FILENAME = "-config.json"
DEFAULT_NOTE_TYPE = "Einfach (beide Richtungen)"


@dataclass
class DeckConfig:
    """Configuration for one deck folder."""
    input_file: str = "original-words.csv"
    output_file: str = "anki-deck.csv"
    overrides_file: str = "overrides.csv"
    extras_file: str = "extra.csv"
    cache_file: str = "frequency_cache.json"
    note_type: str = DEFAULT_NOTE_TYPE
    api_url: Optional[str] = None  # None: FREQUENCY_API_URL env var, then DWDS
    timeout_sec: float = 20.0
    retry_count: int = 1
    cache: bool = True

    def __post_init__(self):
        for name in ("input_file", "output_file", "overrides_file", "extras_file", "cache_file", "note_type"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{name} must be a non-empty string, got {value!r}")
        if self.api_url is not None and (
            not isinstance(self.api_url, str) or not self.api_url.startswith(("http://", "https://"))
        ):
            raise ValueError(f"api_url must be an http(s) URL, got {self.api_url!r}")
        if isinstance(self.retry_count, bool) or not isinstance(self.retry_count, int) or self.retry_count < 1:
            raise ValueError(f"retry_count must be an integer >= 1, got {self.retry_count!r}")
        if isinstance(self.timeout_sec, bool) or not isinstance(self.timeout_sec, (int, float)) or self.timeout_sec <= 0:
            raise ValueError(f"timeout_sec must be a positive number, got {self.timeout_sec!r}")
        if not isinstance(self.cache, bool):
            raise ValueError(f"cache must be true or false, got {self.cache!r}")


def load_deck_config(deck_dir: Path) -> DeckConfig:
    """Load configuration from a deck folder's -config.json file.

    Returns defaults if the config file doesn't exist. Unknown keys are
    ignored; invalid values raise ValueError.
    """
    config_path = deck_dir / CONFIG_FILENAME
    if not config_path.exists():
        return DeckConfig()

    with open(config_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{config_path.name} must contain a JSON object")

    defaults = asdict(DeckConfig())
    known = {k: v for k, v in data.items() if k in defaults}
    return DeckConfig(**known)


def write_deck_config(deck_dir: Path, config: DeckConfig) -> Path:
    """Write a configuration file to a deck folder."""
    config_path = deck_dir / CONFIG_FILENAME
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(asdict(config), f, indent=2, ensure_ascii=False)
    return config_path


def resolve_path(deck_dir: Path, filename: str) -> Path:
    """Resolve a configured file name relative to the deck folder."""
    return (deck_dir / filename).resolve()
