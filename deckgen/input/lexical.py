"""Lexical expansion of dictionary entries into frequency lookup forms.

Two parenthetical conventions are understood:
- "das Haus (Häuser)": a note separated by a space. The note is dropped.
- "Bild(es)", "Haus(-es,-er)": inflectional endings glued to the stem.
  Each comma-separated ending produces one form; a leading hyphen on an
  ending is removed before it is appended to the stem.
"""

import re
from typing import List, Sequence

_NOTE_RE = re.compile(r"\s*\([^)]*\)")
_ENDINGS_RE = re.compile(r"(\w+)\(([^)]+)\)")
_LEAD_TOKEN_RE = re.compile(r"[, (]")

QUERY_SEPARATOR = "|"


def expand_word(raw_word: str) -> List[str]:
    """Expand a raw entry into its canonical forms.

    Entries without parentheses, and entries whose parentheses match neither
    convention, come back unchanged as the only form.
    """
    if "(" not in raw_word:
        return [raw_word]

    if " (" in raw_word:
        return [_NOTE_RE.sub("", raw_word).strip()]

    match = _ENDINGS_RE.search(raw_word)
    if match:
        stem = match.group(1)
        forms = []
        for ending in match.group(2).split(","):
            ending = ending.strip()
            if ending.startswith("-"):
                ending = ending[1:]
            forms.append(stem + ending)
        return forms

    return [raw_word]


def reduce_form(form: str) -> str:
    """Keep only the lead token, up to the first comma, space or '('."""
    return _LEAD_TOKEN_RE.split(form, maxsplit=1)[0]


def lookup_forms(raw_word: str) -> List[str]:
    """Forms sent to the frequency service for one entry.

    Only the first expanded form is used, reduced to its lead token. The
    remaining expansions are not queried.
    """
    forms = expand_word(raw_word)
    return [reduce_form(forms[0])]


def build_query_key(forms: Sequence[str]) -> str:
    """Join lookup forms into the query/cache key, e.g. 'Hauses|Hauser'."""
    return QUERY_SEPARATOR.join(forms)


__all__ = [
    "QUERY_SEPARATOR",
    "expand_word",
    "reduce_form",
    "lookup_forms",
    "build_query_key",
]
