"""fnvhex error types."""


class FnvhexError(Exception):
    """Base error for all fnvhex failures."""


class FnvhexVersionError(FnvhexError):
    """Manifest version mismatch."""


class FnvhexChecksumError(FnvhexError):
    """File checksum verification failed."""


class FnvhexFormatError(FnvhexError):
    """Vector file entry has the wrong shape."""


class FnvhexMismatchError(FnvhexError):
    """Computed digest disagrees with a known-answer vector."""

    def __init__(self, mismatches: list[tuple[str, str, str]]) -> None:
        self.mismatches = mismatches
        details = ", ".join(
            f"{name}: expected {expected}, got {actual}"
            for name, expected, actual in mismatches
        )
        super().__init__(f"{len(mismatches)} vector(s) failed: {details}")
