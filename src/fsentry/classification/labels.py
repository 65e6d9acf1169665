"""Extension-to-label lookup backed by a packaged YAML table."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Dict, Mapping

import yaml

LOGGER = logging.getLogger(__name__)

LABELS_RESOURCE = "extension_labels.yaml"


class LabelTableError(Exception):
    """Raised when the extension label table cannot be parsed."""


def parse_label_table(text: str) -> Dict[str, str]:
    """Flatten a sectioned YAML label document into a single table.

    Args:
        text: YAML document mapping section names to ``extension: label`` pairs.

    Returns:
        Dict[str, str]: Mapping of extension to descriptive label.

    Raises:
        LabelTableError: If the document is not a mapping of string mappings.
    """
    try:
        raw = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise LabelTableError(f"Failed to parse label table: {exc}") from exc

    if not isinstance(raw, dict):
        raise LabelTableError("Label table must contain a mapping at the top level.")

    table: Dict[str, str] = {}
    for section, entries in raw.items():
        if not isinstance(entries, dict):
            raise LabelTableError(f"Label section '{section}' must be a mapping.")
        for extension, label in entries.items():
            if not isinstance(label, str):
                raise LabelTableError(
                    f"Label for extension '{extension}' in section '{section}' must be a string."
                )
            table[str(extension)] = label
    return table


@lru_cache(maxsize=1)
def _packaged_labels() -> Mapping[str, str]:
    text = resources.files(__package__).joinpath(LABELS_RESOURCE).read_text(encoding="utf-8")
    table = parse_label_table(text)
    LOGGER.debug("Loaded %d extension labels from %s", len(table), LABELS_RESOURCE)
    return table


def load_default_labels() -> Dict[str, str]:
    """Return a copy of the packaged extension label table."""
    return dict(_packaged_labels())


class ExtensionLabeler:
    """Map file extensions to human-readable type labels.

    Lookups are case-sensitive against lowercase keys, so ``"ZIP"`` does not
    match ``"zip"``. Unknown extensions are returned unchanged.
    """

    def __init__(self, labels: Mapping[str, str] | None = None) -> None:
        self._labels: Dict[str, str] = dict(labels) if labels is not None else load_default_labels()

    @classmethod
    def from_resource(cls) -> "ExtensionLabeler":
        """Build a labeler from the packaged table."""
        return cls(load_default_labels())

    @classmethod
    def from_yaml(cls, text: str) -> "ExtensionLabeler":
        """Build a labeler from a sectioned YAML document."""
        return cls(parse_label_table(text))

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> "ExtensionLabeler":
        """Build a labeler from a sectioned YAML file on disk.

        Raises:
            LabelTableError: If the file cannot be read or parsed.
        """
        try:
            text = Path(path).expanduser().read_text(encoding="utf-8")
        except OSError as exc:
            raise LabelTableError(f"Unable to read label table {path}: {exc}") from exc
        return cls.from_yaml(text)

    def with_overrides(self, extra: Mapping[str, str]) -> "ExtensionLabeler":
        """Return a new labeler whose table is updated with ``extra``."""
        merged = dict(self._labels)
        merged.update(extra)
        return ExtensionLabeler(merged)

    @property
    def labels(self) -> Dict[str, str]:
        """Return a copy of the lookup table."""
        return dict(self._labels)

    def label(self, extension: str) -> str:
        """Return the label for ``extension`` or the extension itself when unmapped."""
        return self._labels.get(extension, extension)

    def __contains__(self, extension: object) -> bool:
        return extension in self._labels

    def __len__(self) -> int:
        return len(self._labels)


def label_for_extension(extension: str) -> str:
    """Label ``extension`` using the packaged table."""
    return _packaged_labels().get(extension, extension)


__all__ = [
    "ExtensionLabeler",
    "LabelTableError",
    "LABELS_RESOURCE",
    "label_for_extension",
    "load_default_labels",
    "parse_label_table",
]
