"""Data structures for fnvhex."""

from __future__ import annotations

import sys
from array import array
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class KnownAnswer:
    name: str
    units: tuple[int, ...]   # UTF-16 code units, lone surrogates allowed
    expected: str            # 16 lowercase hex chars

    @property
    def text(self) -> str:
        """The code units as a ``str``; valid pairs combine, lone ones stay."""
        raw = array("H", self.units)
        if sys.byteorder == "big":
            raw.byteswap()
        return raw.tobytes().decode("utf-16-le", "surrogatepass")
