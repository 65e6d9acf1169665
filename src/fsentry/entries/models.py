"""Data models describing classified filesystem entries."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from fsentry.classification.models import MimeCategory

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class EntryBaseModel(BaseModel):
    """Shared configuration for immutable entry models."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class RawMetadata(EntryBaseModel):
    """Filesystem metadata reported for a single path.

    Attributes:
        is_directory: Whether the path is a directory.
        size_bytes: Size reported by the filesystem.
        created_at: Creation time when the platform reports one.
        modified_at: Last modification time when available.
    """

    is_directory: bool
    size_bytes: int = Field(default=0, ge=0)
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None


class ClassifiedEntry(EntryBaseModel):
    """Description of one filesystem node.

    Attributes:
        name: Final path segment, empty when the path has none.
        path: Path as supplied by the caller.
        is_directory: Whether the node is a directory.
        size_bytes: Size in bytes, 0 for placeholders.
        type_label: Human-readable label derived from the extension.
        mime: First MIME guess for the name, if any.
        category: Coarse content category.
        created_at: Creation timestamp, epoch when unavailable.
        modified_at: Modification timestamp, epoch when unavailable.
    """

    name: str = ""
    path: Path = Field(default_factory=Path)
    is_directory: bool = False
    size_bytes: int = Field(default=0, ge=0)
    type_label: str = ""
    mime: Optional[str] = None
    category: MimeCategory = MimeCategory.TEXT
    created_at: datetime = EPOCH
    modified_at: datetime = EPOCH

    @classmethod
    def placeholder(cls, path: Path | None = None) -> "ClassifiedEntry":
        """Return the entry used when metadata for a path is unavailable.

        The name stays empty and the category is ``TEXT``; both timestamps are
        set to the current time.
        """
        now = datetime.now(timezone.utc)
        return cls(path=path or Path(), created_at=now, modified_at=now)


class DirectoryListing(EntryBaseModel):
    """Immediate children of one directory.

    Attributes:
        parent: Parent of the listed directory, absent for roots and failed reads.
        entries: Classified children in directory-read order.
    """

    parent: Optional[Path] = None
    entries: List[ClassifiedEntry] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "DirectoryListing":
        """Return the listing used when a directory cannot be read."""
        return cls()


__all__ = [
    "EPOCH",
    "ClassifiedEntry",
    "DirectoryListing",
    "EntryBaseModel",
    "RawMetadata",
]
