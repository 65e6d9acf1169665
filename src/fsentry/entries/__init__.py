"""Classified entries and directory listings."""

from .builder import EntryBuilder, build_entry, labeler_from_options, list_directory
from .errors import DirectoryUnreadableError, EntryError, MetadataUnavailableError
from .metadata import MetadataProvider, StatMetadataProvider
from .models import EPOCH, ClassifiedEntry, DirectoryListing, RawMetadata

__all__ = [
    "EPOCH",
    "ClassifiedEntry",
    "DirectoryListing",
    "DirectoryUnreadableError",
    "EntryBuilder",
    "EntryError",
    "MetadataProvider",
    "MetadataUnavailableError",
    "RawMetadata",
    "StatMetadataProvider",
    "build_entry",
    "labeler_from_options",
    "list_directory",
]
