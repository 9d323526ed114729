"""Text -> 16-character FNV-1a 64 hex digest."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._hash import fnv1a_u64, split_limbs
from ._hex import hex_byte
from ._utf8 import code_units, iter_utf8

if TYPE_CHECKING:
    from collections.abc import Iterable


def render(state: int) -> str:
    """Render a 64-bit state as 16 hex chars, most significant limb first."""
    v0, v1, v2, v3 = split_limbs(state)
    return "".join(
        hex_byte(v >> 8) + hex_byte(v & 255) for v in (v3, v2, v1, v0)
    )


def digest_units(units: Iterable[int]) -> str:
    """Digest a sequence of UTF-16 code units (lone surrogates allowed)."""
    return render(fnv1a_u64(iter_utf8(units)))


def digest(text: str) -> str:
    """Return the FNV-1a 64-bit digest of ``text`` as 16 lowercase hex chars.

    ``text`` is hashed as the UTF-8 encoding of its UTF-16 code units, so the
    result matches UTF-16 hosts bit for bit. Never raises for any ``str``,
    including the empty string and strings with unpaired surrogates.
    """
    return digest_units(code_units(text))
