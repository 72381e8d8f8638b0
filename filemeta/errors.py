# filemeta/errors.py

from __future__ import annotations


class FileMetaError(Exception):
    """Base class for per-path inspection failures."""

    def __init__(self, path: str, operation: str, reason: str) -> None:
        self.path = path
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation} failed for {path}: {reason}")

    @classmethod
    def from_os_error(cls, path: str, operation: str, exc: OSError) -> FileMetaError:
        reason = exc.strerror or f"{type(exc).__name__}: {exc}"
        return cls(path, operation, reason)


class AttributeLookupError(FileMetaError):
    """The path could not be stat-ed; no report can be built for it."""


class FileOpenError(FileMetaError):
    """The content scan could not open or read the file."""
