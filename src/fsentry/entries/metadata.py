"""Filesystem metadata queries."""

from __future__ import annotations

import os
import stat
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Protocol

from .errors import MetadataUnavailableError
from .models import RawMetadata


class MetadataProvider(Protocol):
    """Capability returning raw metadata for a path."""

    def query(self, path: Path) -> RawMetadata:
        """Return metadata for ``path`` or raise ``MetadataUnavailableError``."""
        ...


def _timestamp(value: Optional[float]) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


class StatMetadataProvider:
    """Query metadata with ``os.stat``.

    Creation time is taken from ``st_birthtime`` where the platform exposes it
    and left empty otherwise.
    """

    def __init__(self, follow_symlinks: bool = True) -> None:
        self.follow_symlinks = follow_symlinks

    def query(self, path: Path) -> RawMetadata:
        try:
            result = os.stat(path, follow_symlinks=self.follow_symlinks)
        except (OSError, ValueError) as exc:
            raise MetadataUnavailableError(path, f"Cannot read metadata for {path}: {exc}") from exc

        is_directory = stat.S_ISDIR(result.st_mode)
        return RawMetadata(
            is_directory=is_directory,
            size_bytes=0 if is_directory else result.st_size,
            created_at=_timestamp(getattr(result, "st_birthtime", None)),
            modified_at=_timestamp(result.st_mtime),
        )


__all__ = ["MetadataProvider", "StatMetadataProvider"]
