"""Main processing logic for deck generation.

Steps for one deck folder:
1. Read overrides and extras (optional), the frequency cache and the word list
   (required), so a malformed table fails before any lookup
2. Resolve a frequency rank for every word
3. Rank, prepend extras, renumber
4. Write the deck file
5. Save the frequency cache
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from deckgen.common.config import DeckConfig, resolve_path
from deckgen.common.logging import log_debug, log_info
from deckgen.frequency.cache import FrequencyCache
from deckgen.frequency.client import FrequencyClient
from deckgen.frequency.records import rank_of
from deckgen.frequency.resolver import FrequencyFetcher, FrequencyResolver
from deckgen.input.tables import Entry, load_extras, load_overrides, read_word_list
from deckgen.output.deck import write_deck
from deckgen.output.ranking import rank_entries


@dataclass
class DeckResult:
    """Outcome of one deck run."""
    output_path: Path
    entries: List[Entry]
    network_calls: int = 0
    cache_hits: int = 0
    failures: int = 0


def process_deck(
    deck_dir: Path,
    deck_name: str,
    config: Optional[DeckConfig] = None,
    client: Optional[FrequencyFetcher] = None,
    verbose: bool = False,
    debug: bool = False,
) -> DeckResult:
    """Generate the ranked deck file for one deck folder.

    Args:
        deck_dir: Folder holding the deck's input tables
        deck_name: Deck name written into every row
        config: Deck configuration (defaults if None)
        client: Frequency fetcher (a FrequencyClient built from config if None)

    Raises FileNotFoundError if the deck folder or its word list is missing;
    nothing is written in that case.
    """
    config = config or DeckConfig()
    if not deck_dir.is_dir():
        raise FileNotFoundError(f"Deck folder not found: {deck_dir}")

    input_path = resolve_path(deck_dir, config.input_file)
    output_path = resolve_path(deck_dir, config.output_file)
    overrides_path = resolve_path(deck_dir, config.overrides_file)
    extras_path = resolve_path(deck_dir, config.extras_file)
    cache_path = resolve_path(deck_dir, config.cache_file)

    overrides = load_overrides(overrides_path, verbose=verbose)
    extras = load_extras(extras_path, verbose=verbose)
    cache = FrequencyCache.load(cache_path, enabled=config.cache, verbose=verbose)
    entries = read_word_list(input_path, verbose=verbose)

    if client is None:
        client = FrequencyClient(
            api_url=config.api_url,
            timeout_sec=config.timeout_sec,
            retry_count=config.retry_count,
            verbose=verbose,
        )
    resolver = FrequencyResolver(cache, client, verbose=verbose, debug=debug)

    ranks = []
    for entry in entries:
        rank = rank_of(resolver.resolve_word(entry.front))
        log_debug(debug, f"{entry.front}: rank={rank}")
        ranks.append(rank)

    ranked = rank_entries(entries, ranks, overrides=overrides, extras=extras)

    write_deck(output_path, ranked, deck_name, note_type=config.note_type, verbose=verbose)
    cache.flush(verbose=verbose)

    log_info(
        verbose,
        "deck",
        "ok",
        f"{len(ranked)} cards ({len(extras)} extras), "
        f"{resolver.network_calls} lookups, {resolver.cache_hits} cached, {resolver.failures} failed",
    )
    return DeckResult(
        output_path=output_path,
        entries=ranked,
        network_calls=resolver.network_calls,
        cache_hits=resolver.cache_hits,
        failures=resolver.failures,
    )


__all__ = [
    "DeckResult",
    "process_deck",
]
