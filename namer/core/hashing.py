"""
Stable digest generation.

Provides a short, deterministic fingerprint of a name without randomness.
Python's built-in hash() is salted per process, so names are hashed with
FNV-1a instead.
"""

from typing import Union

FNV32_OFFSET_BASIS = 0x811C9DC5
FNV32_PRIME = 0x01000193
DIGEST_LENGTH = 8


def fnv1a_32(data: bytes) -> int:
    """
    Compute the 32-bit FNV-1a hash of a byte sequence.

    Each byte is XORed into the accumulator, which is then multiplied by
    the FNV prime modulo 2**32.

    Args:
        data: Raw bytes to hash

    Returns:
        Unsigned 32-bit integer
    """
    h = FNV32_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV32_PRIME) & 0xFFFFFFFF
    return h


def digest(value: Union[str, bytes]) -> str:
    """
    Generate the 8-character hex digest of a name.

    Strings are hashed as their UTF-8 encoding.

    Example:
        digest("a") -> "e40c292c"
    """
    raw = value.encode("utf-8") if isinstance(value, str) else value
    return format(fnv1a_32(raw), "08x")
