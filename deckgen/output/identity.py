"""Stable card identifiers.

The id only depends on the front text, so regenerating a deck keeps every
card's id and re-importing updates cards instead of duplicating them.
"""

import hashlib

BASE36_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ID_LENGTH = 10


def to_base36(data: bytes) -> str:
    """Render bytes as an unsigned big-endian integer in base 36."""
    value = int.from_bytes(data, "big")
    digits = []
    while value > 0:
        value, remainder = divmod(value, 36)
        digits.append(BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def generate_persistent_id(front: str) -> str:
    """Leading 10 base-36 digits of the SHA-256 of the UTF-8 front text."""
    digest = hashlib.sha256(front.encode("utf-8")).digest()
    return to_base36(digest)[:ID_LENGTH]


__all__ = [
    "BASE36_DIGITS",
    "ID_LENGTH",
    "to_base36",
    "generate_persistent_id",
]
