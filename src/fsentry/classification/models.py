"""Classification enums shared across the package."""

from __future__ import annotations

from enum import Enum


class MimeCategory(str, Enum):
    """Coarse content category assigned to a filesystem entry.

    ``ARCHIVE`` is assigned to every MIME type whose top-level type is
    ``application`` (including JSON and PDF), not only to real archives.
    Consumers rely on that mapping, so it is kept as is.
    """

    TEXT = "TEXT"
    IMAGE = "IMAGE"
    AUDIO = "AUDIO"
    ARCHIVE = "ARCHIVE"
    VIDEO = "VIDEO"
    UNKNOWN = "UNKNOWN"


__all__ = ["MimeCategory"]
