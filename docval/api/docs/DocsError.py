"""Exceptions raised while loading a documentation corpus."""

from pathlib import Path


class DocsError(Exception):
    """Base class for docs domain errors."""

    pass


class NotFoundError(DocsError):
    """Raised when the corpus root is missing or is not a directory. Fatal."""

    def __init__(self, path: Path, reason: str = "does not exist"):
        self.path = path
        super().__init__(f"Root directory {path} {reason}")


class DecodeError(DocsError):
    """Raised when a single file cannot be decoded as text. Recovered per file."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot decode {path}: {cause}")


class TraversalError(DocsError):
    """Raised when an I/O error interrupts directory traversal or a file read. Fatal."""

    def __init__(self, path: Path | str, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"I/O error at {path}: {cause.strerror or cause}")
