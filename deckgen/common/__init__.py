"""Common utilities shared across input and output processing."""

from deckgen.common.utils import (
    _load_env_file,
    ensure_dir,
    find_decks_dir,
)
from deckgen.common.logging import (
    log_debug,
    log_info,
    log_error,
    log_warning,
    set_log_context,
    get_log_context,
    setup_prefixed_stdout,
)
from deckgen.common.config import (
    CONFIG_FILENAME,
    DEFAULT_NOTE_TYPE,
    DeckConfig,
    load_deck_config,
    write_deck_config,
    resolve_path,
)

__all__ = [
    # utils
    "_load_env_file",
    "ensure_dir",
    "find_decks_dir",
    # logging
    "log_debug",
    "log_info",
    "log_error",
    "log_warning",
    "set_log_context",
    "get_log_context",
    "setup_prefixed_stdout",
    # config
    "CONFIG_FILENAME",
    "DEFAULT_NOTE_TYPE",
    "DeckConfig",
    "load_deck_config",
    "write_deck_config",
    "resolve_path",
]
