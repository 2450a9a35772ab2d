#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dompath/hashing.py
"""Deterministic identifier-safe hashing.

``simple_hash`` turns any value into a short token made only of ASCII
letters and digits, suitable as a key or resource name where punctuation is
not allowed. The token is the first 15 characters of the input followed by
16 characters mixed from the whole input, with everything outside
``[A-Za-z0-9]`` removed.

This is not a cryptographic hash and collisions are possible. It is stable:
equal inputs always give equal tokens.

Examples
--------
    >>> simple_hash("test")
    'test4ceZf9ABkDEFeHIJ'
    >>> simple_hash(None)
    'nullhash'
    >>> simple_hash("")
    'emptystring'

"""

from __future__ import annotations

from typing import Any, Final

from dompath.constants import (
    HASH_ALPHABET,
    HASH_EMPTY_TOKEN,
    HASH_ENTITY_PATTERN,
    HASH_NULL_TOKEN,
    HASH_PREFIX_LENGTH,
    HASH_SLOT_COUNT,
    HASH_STRIP_PATTERN,
    HASH_UNDEFINED_TOKEN,
)


class _Undefined:
    """Marker for a value that was never supplied."""

    _instance = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = _Undefined()


def _mix(text: str) -> list[int]:
    length = len(text)
    slots = [length + i for i in range(HASH_SLOT_COUNT)]
    for i, char in enumerate(text):
        update = ord(char) * (i & 0xFF)
        # Both indices may coincide; the slot then receives the update twice.
        slots[i & 0xF] += update
        slots[(i << 2) & 0xF] += update
    return slots


def simple_hash(value: Any = UNDEFINED) -> str:
    """Return an alphanumeric token derived from ``value``.

    Parameters
    ----------
    value : Any, optional
        Value to hash. ``None`` and an omitted value have their own tokens;
        anything else is converted with ``str()``.

    Returns
    -------
    str
        Token containing only ``[A-Za-z0-9]``, at most 31 characters long.

    """
    if value is None:
        return HASH_NULL_TOKEN
    if value is UNDEFINED:
        return HASH_UNDEFINED_TOKEN

    text = value if isinstance(value, str) else str(value)
    if not text:
        return HASH_EMPTY_TOKEN

    suffix = "".join(HASH_ALPHABET[slot & 0x3F] for slot in _mix(text))
    combined = text[:HASH_PREFIX_LENGTH] + suffix
    combined = HASH_ENTITY_PATTERN.sub(r"p\1", combined)
    return HASH_STRIP_PATTERN.sub("", combined)


hash_value = simple_hash

__all__ = ["UNDEFINED", "simple_hash", "hash_value"]
