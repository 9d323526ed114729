"""fnvhex: FNV-1a 64-bit hex digests of text, stable across UTF-16 hosts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._digest import digest, digest_units, render
from ._errors import (
    FnvhexChecksumError,
    FnvhexError,
    FnvhexFormatError,
    FnvhexMismatchError,
    FnvhexVersionError,
)
from ._hash import (
    FNV1A_OFFSET,
    FNV1A_PRIME,
    fnv1a_u64,
    fold,
    fold_limbs,
    join_limbs,
    split_limbs,
)
from ._hex import HEX_TABLE, hex_byte
from ._types import KnownAnswer
from ._utf8 import code_units, iter_utf8, utf8_bytes

if TYPE_CHECKING:
    from pathlib import Path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "FNV1A_OFFSET",
    "FNV1A_PRIME",
    "FnvhexChecksumError",
    "FnvhexError",
    "FnvhexFormatError",
    "FnvhexMismatchError",
    "FnvhexVersionError",
    "HEX_TABLE",
    "KnownAnswer",
    "code_units",
    "digest",
    "digest_units",
    "fnv1a_u64",
    "fold",
    "fold_limbs",
    "hex_byte",
    "iter_utf8",
    "join_limbs",
    "load_vectors",
    "render",
    "self_test",
    "split_limbs",
    "utf8_bytes",
    "verify",
]


def self_test(data_dir: Path | str | None = None) -> list[KnownAnswer]:
    """Check digest() against the bundled known-answer vectors.

    Args:
        data_dir: Path to a vector directory. If None, uses bundled data.
    """
    from ._loader import load_vectors, verify

    return verify(load_vectors(data_dir))


# Deferred import so the loader (and msgpack) is only pulled in when
# vectors are actually needed.
def __getattr__(name: str):
    if name in ("load_vectors", "verify"):
        from . import _loader
        return getattr(_loader, name)
    raise AttributeError(f"module 'fnvhex' has no attribute {name!r}")
