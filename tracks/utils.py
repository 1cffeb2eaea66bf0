"""Identity helpers for tracked objects.

This module converts 128-bit object identities into the string and integer
forms used for labels and marker ids.
"""

from __future__ import annotations

from uuid import UUID

_UINT32_MASK = 0xFFFFFFFF
_GOLDEN_RATIO_32 = 0x9E3779B9


def uuid_to_string(uuid_value: UUID) -> str:
    """Convert a uuid to its 32-character lowercase hex form without dashes.

    Args:
        uuid_value: Object identity.

    Returns:
        Hex string, e.g. '1f0c...'.
    """
    return uuid_value.hex


def uuid_to_int(uuid_value: UUID) -> int:
    """Project a uuid onto a signed 32-bit integer.

    Uses a hash-combine over the 16 identity bytes, so the result is stable
    across processes (unlike the builtin, salted ``hash``).

    Args:
        uuid_value: Object identity.

    Returns:
        Integer in [-2**31, 2**31).
    """
    seed = 0
    for byte in uuid_value.bytes:
        seed ^= (byte + _GOLDEN_RATIO_32 + (seed << 6) + (seed >> 2)) & _UINT32_MASK
    if seed >= 1 << 31:
        seed -= 1 << 32
    return seed
