"""Final card order from frequency ranks, overrides and extras.

1. Stable sort by frequency rank (lower = more common; input order breaks ties)
2. order = position
3. The first override (file order) whose prefix matches the front,
   case-insensitively, replaces order
4. Stable re-sort by order
5. Extras go in front, in file order, then everything is renumbered 0..n-1
"""

from typing import List, Optional, Sequence

from deckgen.input.tables import Entry, OverrideRule


def find_override(front: str, overrides: Sequence[OverrideRule]) -> Optional[OverrideRule]:
    """Return the first rule whose prefix starts `front`, ignoring case."""
    folded = front.lower()
    for rule in overrides:
        if folded.startswith(rule.front_prefix.lower()):
            return rule
    return None


def apply_frequency_order(
    entries: List[Entry],
    ranks: Sequence[int],
    overrides: Sequence[OverrideRule],
) -> List[Entry]:
    """Order entries by rank, then apply overrides. Mutates `order` in place.

    `ranks[i]` is the frequency rank of `entries[i]`.
    """
    if len(ranks) != len(entries):
        raise ValueError(f"got {len(ranks)} ranks for {len(entries)} entries")

    for entry, rank in zip(entries, ranks):
        entry.order = rank
    entries.sort(key=lambda e: e.order)

    for i, entry in enumerate(entries):
        entry.order = i
        rule = find_override(entry.front, overrides)
        if rule is not None:
            entry.order = rule.order

    entries.sort(key=lambda e: e.order)
    return entries


def prepend_extras(entries: List[Entry], extras: Sequence[Entry]) -> List[Entry]:
    """Insert extras ahead of every ranked entry, keeping their file order."""
    entries[0:0] = extras
    return entries


def renumber(entries: List[Entry]) -> List[Entry]:
    """Set order to each entry's position."""
    for i, entry in enumerate(entries):
        entry.order = i
    return entries


def rank_entries(
    entries: List[Entry],
    ranks: Sequence[int],
    overrides: Sequence[OverrideRule] = (),
    extras: Sequence[Entry] = (),
) -> List[Entry]:
    """Run the full ordering. The result's order values are exactly 0..n-1."""
    apply_frequency_order(entries, ranks, overrides)
    prepend_extras(entries, extras)
    return renumber(entries)


__all__ = [
    "find_override",
    "apply_frequency_order",
    "prepend_extras",
    "renumber",
    "rank_entries",
]
