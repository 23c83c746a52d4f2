"""Frequency-ranked flashcard deck generation library.

Subpackages:
- deckgen.common: Shared utilities (utils, logging, config)
- deckgen.input: Input processing (word list tables, lexical expansion)
- deckgen.frequency: Frequency service client and resolver
- deckgen.output: Output generation (ranking, identifiers, deck file)
"""
