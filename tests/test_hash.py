"""Tests for FNV-1a hash implementation."""

import random

from fnvhex._hash import (
    FNV1A_OFFSET,
    FNV1A_PRIME,
    fnv1a_u64,
    fold,
    fold_limbs,
    join_limbs,
    split_limbs,
)


def test_constants():
    assert FNV1A_OFFSET == 14695981039346656037
    assert FNV1A_PRIME == 1099511628211


def test_empty_input():
    """No bytes should return the offset basis."""
    assert fnv1a_u64(b"") == FNV1A_OFFSET


def test_known_values():
    assert fnv1a_u64(b"a") == 0xAF63DC4C8601EC8C
    assert fnv1a_u64(b"foobar") == 0x85944171F73967E8


def test_range():
    h = fnv1a_u64(b"hello")
    assert 0 <= h < 2**64
    assert fnv1a_u64(b"hello") == h


def test_different_inputs_differ():
    assert fnv1a_u64(b"cat") != fnv1a_u64(b"dog")


def test_case_sensitive():
    assert fnv1a_u64(b"Hello") != fnv1a_u64(b"hello")


def test_fold_wraps():
    """Multiplication wraps modulo 2**64 instead of growing."""
    h = fold(0xFFFFFFFFFFFFFFFF, 0)
    assert h == (0xFFFFFFFFFFFFFFFF * FNV1A_PRIME) % 2**64


def test_fold_chain_matches_fnv1a():
    h = FNV1A_OFFSET
    for b in b"spaces matter":
        h = fold(h, b)
    assert h == fnv1a_u64(b"spaces matter")


def test_limbs_roundtrip():
    assert split_limbs(FNV1A_OFFSET) == (0x2325, 0x8422, 0x9CE4, 0xCBF2)
    assert join_limbs((0x2325, 0x8422, 0x9CE4, 0xCBF2)) == FNV1A_OFFSET


def test_fold_limbs_matches_fold():
    """The 16-bit limb multiply must agree with native wrapping multiply."""
    rng = random.Random(0xF00D)
    states = [0, 1, FNV1A_OFFSET, 0xFFFFFFFFFFFFFFFF, 0x8000000000000000]
    states += [rng.getrandbits(64) for _ in range(200)]
    for state in states:
        for byte in (0, 1, 0x7F, 0x80, 0xFF, rng.randrange(256)):
            got = join_limbs(fold_limbs(split_limbs(state), byte))
            assert got == fold(state, byte)


def test_fold_limbs_stay_16_bit():
    limbs = split_limbs(0xFFFFFFFFFFFFFFFF)
    for byte in range(256):
        limbs = fold_limbs(limbs, byte)
        assert all(0 <= v <= 0xFFFF for v in limbs)
