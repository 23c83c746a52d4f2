"""Common utility functions shared across the library."""

import os
from pathlib import Path
from typing import Optional


_DEF_ENV_LOADED = False

DECKS_DIRNAME = "decks"
DECKS_DIR_ENV = "DECKGEN_DECKS_DIR"


def _load_env_file() -> None:
    """Load environment variables from .env file if present."""
    global _DEF_ENV_LOADED
    if _DEF_ENV_LOADED:
        return
    _DEF_ENV_LOADED = True
    try:
        # Look for .env in deckgen/common/../.. (project root) or deckgen/common/..
        here = Path(__file__).parent
        candidates = [
            here.parent.parent / ".env",  # project root
            here.parent / ".env",
            Path.cwd() / ".env",
        ]
        for p in candidates:
            if not p.exists():
                continue
            for raw in p.read_text(encoding="utf-8", errors="ignore").splitlines():
                line = raw.strip()
                if not line or line.startswith("#"):
                    continue
                if line.startswith("export "):
                    line = line[len("export "):].strip()
                if "=" not in line:
                    continue
                k, v = line.split("=", 1)
                key = k.strip()
                val = v.strip().strip('"').strip("'")
                if key and os.environ.get(key) is None:
                    os.environ[key] = val
    except OSError:
        pass


# Call once on import
_load_env_file()


def ensure_dir(path: Path) -> None:
    """Create directory if it doesn't exist."""
    path.mkdir(parents=True, exist_ok=True)


def find_decks_dir(start: Optional[Path] = None) -> Path:
    """Locate the directory holding one sub-folder per deck.

    Resolution order:
    1. DECKGEN_DECKS_DIR environment variable
    2. First ancestor of `start` (default: cwd) that contains a decks/ folder

    Raises FileNotFoundError if neither yields a directory.
    """
    env_dir = os.environ.get(DECKS_DIR_ENV)
    if env_dir:
        path = Path(env_dir).expanduser().resolve()
        if not path.is_dir():
            raise FileNotFoundError(f"{DECKS_DIR_ENV} does not point to a directory: {path}")
        return path

    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        decks = candidate / DECKS_DIRNAME
        if decks.is_dir():
            return decks

    raise FileNotFoundError(f"Could not find a '{DECKS_DIRNAME}' directory above {current}")
