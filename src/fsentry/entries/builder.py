"""Compose metadata, labels, and categories into classified entries."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

from fsentry.classification.heuristics import TextHeuristic
from fsentry.classification.labels import ExtensionLabeler
from fsentry.classification.mime import MimeCategoryResolver, MimeGuesser, guess_mime
from fsentry.config.models import ClassificationOptions

from .errors import DirectoryUnreadableError, MetadataUnavailableError
from .metadata import MetadataProvider, StatMetadataProvider
from .models import EPOCH, ClassifiedEntry, DirectoryListing

LOGGER = logging.getLogger(__name__)


def _extension(path: Path) -> str:
    suffix = path.suffix
    return suffix[1:] if suffix.startswith(".") else suffix


def _parent(path: Path) -> Path | None:
    parent = path.parent
    if parent == path:
        return None
    return parent


def labeler_from_options(options: ClassificationOptions) -> ExtensionLabeler:
    """Return the label table selected by ``options`` with its overrides applied.

    Raises:
        LabelTableError: If ``labels_file`` is set but cannot be loaded.
    """
    if options.labels_file:
        labeler = ExtensionLabeler.from_file(options.labels_file)
    else:
        labeler = ExtensionLabeler.from_resource()
    if options.extra_labels:
        labeler = labeler.with_overrides(options.extra_labels)
    return labeler


class EntryBuilder:
    """Build classified entries and directory listings.

    ``inspect`` and ``read_directory`` raise typed errors on filesystem
    failures. ``build_entry`` and ``list_directory`` never raise for those
    failures and return a placeholder entry or an empty listing instead.
    """

    def __init__(
        self,
        labeler: ExtensionLabeler | None = None,
        resolver: MimeCategoryResolver | None = None,
        guesser: MimeGuesser = guess_mime,
        metadata: MetadataProvider | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.logger = logger or LOGGER
        self.labeler = labeler if labeler is not None else ExtensionLabeler.from_resource()
        self.guesser = guesser
        if resolver is None:
            resolver = MimeCategoryResolver(guesser=guesser, logger=self.logger)
        self.resolver = resolver
        self.metadata = metadata if metadata is not None else StatMetadataProvider()

    @classmethod
    def from_config(
        cls,
        options: ClassificationOptions,
        *,
        guesser: MimeGuesser = guess_mime,
        logger: logging.Logger | None = None,
    ) -> "EntryBuilder":
        """Build an entry builder wired according to classification options.

        Raises:
            LabelTableError: If the configured label table cannot be loaded.
        """
        log = logger or LOGGER
        labeler = labeler_from_options(options)
        resolver = MimeCategoryResolver(
            guesser=guesser,
            heuristic=TextHeuristic(sample_size=options.sample_size_bytes),
            logger=log,
        )
        return cls(
            labeler=labeler,
            resolver=resolver,
            guesser=guesser,
            metadata=StatMetadataProvider(follow_symlinks=options.follow_symlinks),
            logger=log,
        )

    def inspect(self, path: str | os.PathLike[str]) -> ClassifiedEntry:
        """Classify a single path.

        Args:
            path: File or directory to describe.

        Returns:
            ClassifiedEntry: Populated entry for the path.

        Raises:
            MetadataUnavailableError: If filesystem metadata cannot be queried.
        """
        target = Path(path)
        self.logger.debug("Building entry for path: %s", target)
        raw = self.metadata.query(target)

        mime = self.guesser(target)
        if mime is not None:
            self.logger.debug("MIME type for path %s: %s", target, mime)

        return ClassifiedEntry(
            name=target.name,
            path=target,
            is_directory=raw.is_directory,
            size_bytes=raw.size_bytes,
            type_label=self.labeler.label(_extension(target)),
            mime=mime,
            category=self.resolver.resolve(target),
            created_at=raw.created_at or EPOCH,
            modified_at=raw.modified_at or EPOCH,
        )

    def build_entry(self, path: str | os.PathLike[str]) -> ClassifiedEntry:
        """Classify a path, returning a placeholder when metadata is unavailable."""
        try:
            return self.inspect(path)
        except MetadataUnavailableError as exc:
            self.logger.error("Failed to retrieve metadata: %s", exc)
            return ClassifiedEntry.placeholder(Path(path))

    def read_directory(self, path: str | os.PathLike[str]) -> DirectoryListing:
        """List the immediate children of a directory.

        Children that the directory iterator cannot produce are skipped. Each
        remaining child is classified with ``build_entry``, so a child removed
        between listing and classification appears as a placeholder.

        Args:
            path: Directory to list.

        Returns:
            DirectoryListing: Parent reference and classified children.

        Raises:
            DirectoryUnreadableError: If the directory cannot be opened.
        """
        target = Path(path)
        self.logger.debug("Listing directory: %s", target)
        try:
            scanner = os.scandir(target)
        except (OSError, ValueError) as exc:
            message = f"Cannot read directory {target}: {exc}"
            raise DirectoryUnreadableError(target, message) from exc

        with scanner:
            entries = [self.build_entry(child) for child in self._iter_children(target, scanner)]

        self.logger.info("Directory processed successfully: %s", target)
        return DirectoryListing(parent=_parent(target), entries=entries)

    def list_directory(self, path: str | os.PathLike[str]) -> DirectoryListing:
        """List a directory, returning an empty listing when it cannot be read."""
        try:
            return self.read_directory(path)
        except DirectoryUnreadableError as exc:
            self.logger.error("Failed to read directory: %s", exc)
            return DirectoryListing.empty()

    def _iter_children(self, root: Path, scanner: Iterator[os.DirEntry[str]]) -> Iterator[Path]:
        # scandir cannot resume after a read error, so the remaining children are dropped.
        while True:
            try:
                child = next(scanner)
            except StopIteration:
                return
            except OSError as exc:
                self.logger.warning("Stopped reading %s after error: %s", root, exc)
                return
            self.logger.debug("Processing directory entry: %s", child.path)
            yield Path(child.path)


_DEFAULT_BUILDER: EntryBuilder | None = None


def _default_builder() -> EntryBuilder:
    global _DEFAULT_BUILDER
    if _DEFAULT_BUILDER is None:
        _DEFAULT_BUILDER = EntryBuilder()
    return _DEFAULT_BUILDER


def build_entry(path: str | os.PathLike[str]) -> ClassifiedEntry:
    """Classify ``path`` with a default builder."""
    return _default_builder().build_entry(path)


def list_directory(path: str | os.PathLike[str]) -> DirectoryListing:
    """List ``path`` with a default builder."""
    return _default_builder().list_directory(path)


__all__ = ["EntryBuilder", "build_entry", "labeler_from_options", "list_directory"]
