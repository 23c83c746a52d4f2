"""Tab-separated deck file for spaced-repetition import.

Layout:
    #separator:tab
    #html:true
    #guid column:1
    #notetype column:2
    #deck column:3
    #tags column:6
    <id>\t<note type>\t<deck>\t<front>\t<back>\t<tags>
"""

import csv
import io
from pathlib import Path
from typing import Iterable, List

from deckgen.common.config import DEFAULT_NOTE_TYPE
from deckgen.common.logging import log_info
from deckgen.common.utils import ensure_dir
from deckgen.input.tables import Entry
from deckgen.output.identity import generate_persistent_id

HEADER_LINES = [
    "#separator:tab",
    "#html:true",
    "#guid column:1",
    "#notetype column:2",
    "#deck column:3",
    "#tags column:6",
]


def deck_rows(entries: Iterable[Entry], deck_name: str, note_type: str = DEFAULT_NOTE_TYPE) -> List[List[str]]:
    """One row per entry in the given order: id, note type, deck, front, back, tags."""
    return [
        [generate_persistent_id(entry.front), note_type, deck_name, entry.front, entry.back, ""]
        for entry in entries
    ]


def render_deck(entries: Iterable[Entry], deck_name: str, note_type: str = DEFAULT_NOTE_TYPE) -> str:
    buf = io.StringIO()
    for line in HEADER_LINES:
        buf.write(line + "\n")
    writer = csv.writer(buf, delimiter="\t", lineterminator="\n")
    writer.writerows(deck_rows(entries, deck_name, note_type))
    return buf.getvalue()


def write_deck(
    path: Path,
    entries: Iterable[Entry],
    deck_name: str,
    note_type: str = DEFAULT_NOTE_TYPE,
    verbose: bool = False,
) -> Path:
    """Render the deck and write it to `path` (UTF-8)."""
    content = render_deck(entries, deck_name, note_type)
    ensure_dir(path.parent)
    path.write_text(content, encoding="utf-8")
    log_info(verbose, "deck", "file", f"Wrote {path.name}")
    return path


__all__ = [
    "DEFAULT_NOTE_TYPE",
    "HEADER_LINES",
    "deck_rows",
    "render_deck",
    "write_deck",
]
