"""FNV-1a 64-bit hash implementation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

FNV1A_OFFSET: int = 0xCBF29CE484222325
FNV1A_PRIME: int = 0x100000001B3
_MASK64: int = 0xFFFFFFFFFFFFFFFF

# FNV1A_PRIME == (1 << 40) + _PRIME_LOW
_PRIME_LOW: int = 0x1B3

Limbs = tuple[int, int, int, int]


def fold(state: int, byte: int) -> int:
    """One FNV-1a step: xor the byte in, multiply by the prime mod 2**64."""
    return ((state ^ byte) * FNV1A_PRIME) & _MASK64


def fnv1a_u64(data: Iterable[int]) -> int:
    """Compute FNV-1a 64-bit hash of a byte sequence."""
    h = FNV1A_OFFSET
    for byte in data:
        h ^= byte
        h = (h * FNV1A_PRIME) & _MASK64
    return h


def split_limbs(state: int) -> Limbs:
    """Split a 64-bit value into 16-bit limbs ``(v0, v1, v2, v3)``, low first."""
    return (
        state & 0xFFFF,
        (state >> 16) & 0xFFFF,
        (state >> 32) & 0xFFFF,
        (state >> 48) & 0xFFFF,
    )


def join_limbs(limbs: Limbs) -> int:
    v0, v1, v2, v3 = limbs
    return (v3 << 48) | (v2 << 32) | (v1 << 16) | v0


def fold_limbs(limbs: Limbs, byte: int) -> Limbs:
    """:func:`fold` using only 16-bit limbs and 32-bit-safe intermediates.

    Reference for ports to hosts without 64-bit integers. The prime's high
    part is ``1 << 40``, so its contribution is ``v0 << 8`` into limb 2 and
    ``v1 << 8`` into limb 3; anything above limb 3 is dropped.
    """
    v0, v1, v2, v3 = limbs
    v0 ^= byte & 0xFF

    t0 = v0 * _PRIME_LOW
    t1 = v1 * _PRIME_LOW
    t2 = v2 * _PRIME_LOW
    t3 = v3 * _PRIME_LOW
    t2 += v0 << 8
    t3 += v1 << 8

    t1 += t0 >> 16
    t2 += t1 >> 16
    t3 += t2 >> 16
    return (t0 & 0xFFFF, t1 & 0xFFFF, t2 & 0xFFFF, t3 & 0xFFFF)
