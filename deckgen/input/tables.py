"""Reading the deck's input tables.

Three comma-separated files with a header row live in each deck folder:
- original-words.csv: Front, Back (required)
- overrides.csv: Front, Order (optional)
- extra.csv: Front, Back, Order (optional)

Header names are matched case-insensitively.
"""

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from deckgen.common.logging import log_info


@dataclass
class Entry:
    """One front/back vocabulary pair and its current position."""
    front: str
    back: str
    order: int = 0


@dataclass(frozen=True)
class OverrideRule:
    """Force entries whose front starts with `front_prefix` to `order`."""
    front_prefix: str
    order: int


# Accepted header spellings per logical column (lowercased)
_COLUMN_ALIASES: Dict[str, Sequence[str]] = {
    "front": ("front",),
    "back": ("back",),
    "order": ("order",),
    "prefix": ("front", "frontprefix", "prefix"),
}


def _resolve_columns(path: Path, fieldnames: Optional[Sequence[str]], wanted: Sequence[str]) -> Dict[str, str]:
    """Map logical column names to the header names used in the file."""
    by_lower = {name.strip().lower(): name for name in (fieldnames or []) if name}
    columns: Dict[str, str] = {}
    for logical in wanted:
        for alias in _COLUMN_ALIASES[logical]:
            if alias in by_lower:
                columns[logical] = by_lower[alias]
                break
        else:
            raise ValueError(f"{path.name}: missing required column '{logical}' (header: {list(fieldnames or [])})")
    return columns


def _parse_order(path: Path, line_num: int, value: Optional[str]) -> int:
    try:
        return int((value or "").strip())
    except ValueError:
        raise ValueError(f"{path.name}:{line_num}: Order must be an integer, got {value!r}") from None


def _read_rows(path: Path, wanted: Sequence[str]):
    """Yield (line_num, {logical: value}) for every data row."""
    with open(path, encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)
        # Empty file: no header, no rows
        if reader.fieldnames is None:
            return
        columns = _resolve_columns(path, reader.fieldnames, wanted)
        for row in reader:
            values = {logical: (row.get(header) or "") for logical, header in columns.items()}
            # Skip fully blank lines
            if not any(v.strip() for v in values.values()):
                continue
            yield reader.line_num, values


def read_word_list(path: Path, verbose: bool = False) -> List[Entry]:
    """Read the required word list. Raises FileNotFoundError if it is missing."""
    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")

    entries = [Entry(front=values["front"], back=values["back"]) for _, values in _read_rows(path, ("front", "back"))]
    log_info(verbose, "input", "file", f"Read {len(entries)} words from {path.name}")
    return entries


def load_overrides(path: Path, verbose: bool = False) -> List[OverrideRule]:
    """Read override rules in file order. A missing file means no overrides."""
    if not path.exists():
        return []

    rules = [
        OverrideRule(front_prefix=values["prefix"], order=_parse_order(path, line_num, values["order"]))
        for line_num, values in _read_rows(path, ("prefix", "order"))
    ]
    log_info(verbose, "input", "file", f"Read {len(rules)} overrides from {path.name}")
    return rules


def load_extras(path: Path, verbose: bool = False) -> List[Entry]:
    """Read extra entries in file order. A missing file means no extras."""
    if not path.exists():
        return []

    extras = [
        Entry(front=values["front"], back=values["back"], order=_parse_order(path, line_num, values["order"]))
        for line_num, values in _read_rows(path, ("front", "back", "order"))
    ]
    log_info(verbose, "input", "file", f"Read {len(extras)} extras from {path.name}")
    return extras


__all__ = [
    "Entry",
    "OverrideRule",
    "read_word_list",
    "load_overrides",
    "load_extras",
]
