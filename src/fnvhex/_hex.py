"""Byte -> two-character lowercase hex lookup table."""

from __future__ import annotations

_DIGITS = "0123456789abcdef"

# Built once at import; never mutated.
HEX_TABLE: tuple[str, ...] = tuple(
    _DIGITS[(b >> 4) & 15] + _DIGITS[b & 15] for b in range(256)
)


def hex_byte(b: int) -> str:
    """Return the zero-padded lowercase hex form of a byte (``5 -> "05"``)."""
    return HEX_TABLE[b & 0xFF]
