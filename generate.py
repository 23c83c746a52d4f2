#!/usr/bin/env python3
"""Frequency-ranked flashcard deck generation.

Reads a deck folder's word list, ranks the words by corpus frequency,
applies overrides and extras, and writes a tab-separated deck file.

Folder structure:
    decks/<deck-name>/
        -config.json           (optional)
        original-words.csv     (Front,Back)
        overrides.csv          (Front,Order; optional)
        extra.csv              (Front,Back,Order; optional)
        frequency_cache.json   (created on first run)
        anki-deck.csv          (generated)

Usage:
    python generate.py german-a1 --verbose
    python generate.py german-a1 --init
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from deckgen.common.utils import _load_env_file, find_decks_dir
from deckgen.common.config import CONFIG_FILENAME, DeckConfig, load_deck_config, write_deck_config
from deckgen.common.logging import set_log_context, setup_prefixed_stdout
from deckgen.output.processing import process_deck


# Load .env on import
_load_env_file()


def init_deck_folder(deck_dir: Path, verbose: bool = False) -> Path:
    """Create a deck folder with a default config and an empty word list."""
    deck_dir.mkdir(parents=True, exist_ok=True)
    config = DeckConfig()
    if not (deck_dir / CONFIG_FILENAME).exists():
        write_deck_config(deck_dir, config)
        if verbose:
            print(f"[init] [file] Created {CONFIG_FILENAME}")
    input_path = deck_dir / config.input_file
    if not input_path.exists():
        input_path.write_text("Front,Back\n", encoding="utf-8")
        if verbose:
            print(f"[init] [file] Created {input_path.name}")
    return deck_dir


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a frequency-ranked flashcard deck from decks/<deck-name>/original-words.csv"
    )
    parser.add_argument(
        "deck_name",
        nargs="?",
        help="Deck name (folder under the decks directory, also written into every row)",
    )
    parser.add_argument(
        "--decks-dir",
        type=str,
        default=None,
        help="Directory containing deck folders (default: DECKGEN_DECKS_DIR or nearest ./decks)",
    )
    parser.add_argument(
        "--init",
        action="store_true",
        help="Create the deck folder with a default -config.json and empty word list, then exit",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for deck generation."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.deck_name:
        print("Please provide a deck name as a parameter.")
        parser.print_usage()
        return 2

    if args.verbose:
        setup_prefixed_stdout()
    set_log_context(args.deck_name)

    try:
        if args.decks_dir:
            decks_dir = Path(args.decks_dir).expanduser().resolve()
        elif args.init:
            try:
                decks_dir = find_decks_dir()
            except FileNotFoundError:
                decks_dir = Path.cwd() / "decks"
        else:
            decks_dir = find_decks_dir()
        deck_dir = decks_dir / args.deck_name

        if args.init:
            init_deck_folder(deck_dir, verbose=args.verbose)
            print(f"Deck folder is ready: {deck_dir}")
            return 0

        config = load_deck_config(deck_dir)
        result = process_deck(
            deck_dir,
            args.deck_name,
            config=config,
            verbose=args.verbose,
            debug=args.debug,
        )
    except FileNotFoundError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"[error] Invalid deck input: {e}", file=sys.stderr)
        return 1

    print(f"Processed CSV file has been generated: {result.output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
