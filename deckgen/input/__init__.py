"""Input processing: deck tables and lexical expansion."""

from deckgen.input.lexical import (
    expand_word,
    reduce_form,
    lookup_forms,
    build_query_key,
)
from deckgen.input.tables import (
    Entry,
    OverrideRule,
    read_word_list,
    load_overrides,
    load_extras,
)

__all__ = [
    # lexical
    "expand_word",
    "reduce_form",
    "lookup_forms",
    "build_query_key",
    # tables
    "Entry",
    "OverrideRule",
    "read_word_list",
    "load_overrides",
    "load_extras",
]
