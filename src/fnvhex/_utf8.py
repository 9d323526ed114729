"""UTF-16 code units to UTF-8 bytes, tolerant of lone surrogates."""

from __future__ import annotations

import sys
from array import array
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

_SURROGATE_MASK = 0xFC00
_HIGH_SURROGATE = 0xD800
_LOW_SURROGATE = 0xDC00


def code_units(text: str) -> list[int]:
    """Return the UTF-16 code units of ``text``.

    Astral code points become surrogate pairs. Lone surrogates already in
    the string pass through as-is.
    """
    units = array("H", text.encode("utf-16-le", "surrogatepass"))
    if sys.byteorder == "big":
        units.byteswap()
    return units.tolist()


def iter_utf8(units: Iterable[int]) -> Iterator[int]:
    """Yield the UTF-8 bytes for a sequence of UTF-16 code units.

    A high surrogate followed by a low surrogate is combined into one
    4-byte sequence. Any other surrogate is encoded as a plain 3-byte
    sequence of its raw value, so the output is defined for every input.
    """
    it = iter(units)
    pending: int | None = None
    while True:
        if pending is not None:
            c, pending = pending, None
        else:
            nxt = next(it, None)
            if nxt is None:
                return
            c = nxt & 0xFFFF

        if c < 0x80:
            yield c
        elif c < 0x800:
            yield 0xC0 | (c >> 6)
            yield 0x80 | (c & 0x3F)
        else:
            if (c & _SURROGATE_MASK) == _HIGH_SURROGATE:
                nxt = next(it, None)
                if nxt is not None:
                    lo = nxt & 0xFFFF
                    if (lo & _SURROGATE_MASK) == _LOW_SURROGATE:
                        cp = 0x10000 + ((c & 0x3FF) << 10) + (lo & 0x3FF)
                        yield 0xF0 | (cp >> 18)
                        yield 0x80 | ((cp >> 12) & 0x3F)
                        yield 0x80 | ((cp >> 6) & 0x3F)
                        yield 0x80 | (cp & 0x3F)
                        continue
                    # Not a pair: the lookahead is processed next round.
                    pending = lo
            yield 0xE0 | (c >> 12)
            yield 0x80 | ((c >> 6) & 0x3F)
            yield 0x80 | (c & 0x3F)


def utf8_bytes(units: Iterable[int]) -> bytes:
    """Eager form of :func:`iter_utf8`."""
    return bytes(iter_utf8(units))
