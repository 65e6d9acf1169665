"""Errors raised by the strict entry-building API."""

from __future__ import annotations

from pathlib import Path


class EntryError(Exception):
    """Base exception for entry classification failures."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class MetadataUnavailableError(EntryError):
    """Raised when filesystem metadata for a path cannot be queried."""


class DirectoryUnreadableError(EntryError):
    """Raised when a directory cannot be opened or read."""
