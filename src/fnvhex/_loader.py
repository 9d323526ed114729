"""Known-answer vector loading, manifest validation, and verification."""

from __future__ import annotations

import hashlib
import json
import logging
import re
from importlib import resources
from pathlib import Path
from typing import Any

import msgpack

from ._digest import digest_units
from ._errors import (
    FnvhexChecksumError,
    FnvhexError,
    FnvhexFormatError,
    FnvhexMismatchError,
    FnvhexVersionError,
)
from ._types import KnownAnswer

logger = logging.getLogger(__name__)

_EXPECTED_VERSION = "1.0"

_VECTORS_FILE = "vectors.bin"

_DIGEST_RE = re.compile(r"[0-9a-f]{16}")


def _default_data_dir() -> Path:
    return Path(str(resources.files("fnvhex") / "data"))


def _sha256(path: Path) -> str:
    return hashlib.sha256(path.read_bytes()).hexdigest()


def _checked_vectors_path(data_dir: Path) -> Path:
    """Validate manifest version and checksum; return the vectors file path."""
    manifest_path = data_dir / "manifest.json"
    if not manifest_path.exists():
        raise FnvhexError(f"manifest.json not found in {data_dir}")
    manifest: dict[str, Any] = json.loads(manifest_path.read_text())

    version = manifest.get("version")
    if version != _EXPECTED_VERSION:
        raise FnvhexVersionError(
            f"Expected data version {_EXPECTED_VERSION!r}, got {version!r}"
        )

    path = data_dir / _VECTORS_FILE
    if not path.exists():
        raise FnvhexError(f"Missing data file: {path}")
    expected = manifest.get("files", {}).get(_VECTORS_FILE)
    if expected is None:
        raise FnvhexError(f"No checksum in manifest for {_VECTORS_FILE}")
    actual = _sha256(path)
    if actual != expected:
        raise FnvhexChecksumError(
            f"Checksum mismatch for {_VECTORS_FILE}: "
            f"expected {expected[:16]}..., got {actual[:16]}..."
        )
    return path


def _parse_entry(i: int, entry: Any) -> KnownAnswer:
    if not isinstance(entry, list) or len(entry) != 3:
        raise FnvhexFormatError(f"Vector #{i}: expected [name, units, digest]")
    name, units, expected = entry
    if not isinstance(name, str):
        raise FnvhexFormatError(f"Vector #{i}: name must be a string")
    if not isinstance(units, list) or not all(
        isinstance(u, int) and 0 <= u <= 0xFFFF for u in units
    ):
        raise FnvhexFormatError(
            f"Vector {name!r}: units must be 16-bit unsigned integers"
        )
    if not isinstance(expected, str) or not _DIGEST_RE.fullmatch(expected):
        raise FnvhexFormatError(
            f"Vector {name!r}: digest must be 16 lowercase hex chars"
        )
    return KnownAnswer(name=name, units=tuple(units), expected=expected)


def load_vectors(data_dir: Path | str | None = None) -> list[KnownAnswer]:
    """Load and validate the known-answer vectors."""
    if data_dir is None:
        data_dir = _default_data_dir()
    else:
        data_dir = Path(data_dir)

    raw = msgpack.unpackb(_checked_vectors_path(data_dir).read_bytes(), raw=False)
    if not isinstance(raw, list):
        raise FnvhexFormatError("vectors.bin must hold an array of vectors")
    vectors = [_parse_entry(i, entry) for i, entry in enumerate(raw)]
    logger.debug("Loaded %d known-answer vectors from %s", len(vectors), data_dir)
    return vectors


def verify(vectors: list[KnownAnswer] | None = None) -> list[KnownAnswer]:
    """Recompute every vector; raise FnvhexMismatchError on any disagreement."""
    if vectors is None:
        vectors = load_vectors()

    mismatches: list[tuple[str, str, str]] = []
    for v in vectors:
        actual = digest_units(v.units)
        if actual != v.expected:
            logger.warning(
                "Vector %r: expected %s, got %s", v.name, v.expected, actual
            )
            mismatches.append((v.name, v.expected, actual))
    if mismatches:
        raise FnvhexMismatchError(mismatches)
    return vectors
