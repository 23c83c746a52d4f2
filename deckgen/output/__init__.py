"""Output generation: ranking, card identifiers and the deck file."""

from deckgen.output.identity import generate_persistent_id, to_base36
from deckgen.output.ranking import (
    find_override,
    apply_frequency_order,
    prepend_extras,
    renumber,
    rank_entries,
)
from deckgen.output.deck import DEFAULT_NOTE_TYPE, render_deck, write_deck
from deckgen.output.processing import DeckResult, process_deck

__all__ = [
    # identity
    "generate_persistent_id",
    "to_base36",
    # ranking
    "find_override",
    "apply_frequency_order",
    "prepend_extras",
    "renumber",
    "rank_entries",
    # deck
    "DEFAULT_NOTE_TYPE",
    "render_deck",
    "write_deck",
    # processing
    "DeckResult",
    "process_deck",
]
