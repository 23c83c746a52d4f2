"""Logging utilities for deck generation."""

import sys
from typing import Optional


# Module-level state
_LOG_CONTEXT: Optional[str] = None


def set_log_context(deck_name: Optional[str]) -> None:
    """Set the deck name shown in front of every prefixed stdout line."""
    global _LOG_CONTEXT
    _LOG_CONTEXT = deck_name or None


def get_log_context() -> Optional[str]:
    """Get the current deck log context."""
    return _LOG_CONTEXT


def log_debug(enabled: bool, message: str) -> None:
    """Print a debug message if debugging is enabled."""
    if enabled:
        print(f"[debug] {message}")


def log_info(enabled: bool, prefix: str, tag: str, message: str) -> None:
    """Print a tagged status line like '[frequency] [cache-hit] Haus' if enabled."""
    if enabled:
        print(f"[{prefix}] [{tag}] {message}")


def log_error(prefix: str, message: str) -> None:
    """Print a tagged error line. Errors are never gated by verbosity."""
    print(f"[{prefix}] [error] {message}")


def log_warning(prefix: str, message: str) -> None:
    """Print a tagged warning line. Warnings are never gated by verbosity."""
    print(f"[{prefix}] [warning] {message}")


def _emoji_for(tag: str) -> str:
    mapping = {
        "cache-hit": "🎯",
        "cache-miss": "💥",
        "api": "🌐",
        "file": "💾",
        "error": "❌",
    }
    return mapping.get(tag, "")


class _ContextPrefixedWriter:
    """Wrapper for stdout that adds the deck context and status emoji to output."""

    def __init__(self, wrapped):
        self._wrapped = wrapped

    def _decorate(self, line: str) -> str:
        context = f"[{_LOG_CONTEXT}]" if _LOG_CONTEXT else "[main]"
        prefix = context + " "

        # Find the status tag: the second bracketed group, e.g. "[frequency] [api] ..."
        tags = []
        rest = line
        while rest.startswith("[") and len(tags) < 2:
            end = rest.find("]")
            if end == -1:
                break
            tags.append(rest[1:end])
            rest = rest[end + 1:].lstrip()
        emoji = _emoji_for(tags[-1]) if tags else ""
        if not emoji:
            return prefix + line

        head = " ".join(f"[{t}]" for t in tags)
        return f"{prefix}{head} {emoji} {rest}"

    def write(self, s: str) -> int:
        if not isinstance(s, str):
            return 0
        # If this is just a newline from print's second write, don't prefix
        if s == "\n":
            self._wrapped.write("\n")
            return 1

        parts = s.split("\n")
        for i, part in enumerate(parts):
            if part == "" and i == len(parts) - 1:
                continue
            self._wrapped.write(self._decorate(part))
            if i < len(parts) - 1:
                self._wrapped.write("\n")
        return len(s)

    def flush(self) -> None:
        self._wrapped.flush()

    def isatty(self) -> bool:
        try:
            return bool(self._wrapped.isatty())
        except (AttributeError, ValueError):
            return False


def setup_prefixed_stdout() -> None:
    """Set up deck-prefixed stdout writer."""
    if isinstance(sys.stdout, _ContextPrefixedWriter):
        return
    try:
        sys.stdout.reconfigure(line_buffering=True)  # type: ignore
    except AttributeError:
        pass
    sys.stdout = _ContextPrefixedWriter(sys.stdout)  # type: ignore
