"""Byte-level text detection used when no MIME guess is available."""

from __future__ import annotations

import logging
import os
from typing import Union

LOGGER = logging.getLogger(__name__)

DEFAULT_SAMPLE_SIZE = 1024

# Tab, line feed, carriage return, and printable ASCII.
TEXT_BYTES = frozenset({0x09, 0x0A, 0x0D, *range(0x20, 0x7F)})

PathLike = Union[str, "os.PathLike[str]"]


def is_text_bytes(data: bytes) -> bool:
    """Return True when every byte in ``data`` is plain ASCII text."""
    return all(byte in TEXT_BYTES for byte in data)


class TextHeuristic:
    """Decide whether a file is plausibly text from a bounded prefix."""

    def __init__(self, sample_size: int = DEFAULT_SAMPLE_SIZE) -> None:
        if sample_size < 1:
            raise ValueError("sample_size must be at least 1 byte.")
        self.sample_size = sample_size

    def looks_like_text(self, path: PathLike, logger: logging.Logger | None = None) -> bool:
        """Return True if the first ``sample_size`` bytes of ``path`` are all text bytes.

        Files that cannot be opened or read are reported as not text. An
        empty file counts as text.

        Args:
            path: File to inspect.
            logger: Optional logger for diagnostics; defaults to the module logger.

        Returns:
            bool: Whether the sampled prefix contains only text bytes.
        """
        log = logger or LOGGER
        log.debug("Checking if path is a text file: %s", path)
        try:
            with open(path, "rb") as fh:
                sample = fh.read(self.sample_size)
        except (OSError, ValueError) as exc:
            log.error("Failed to read file %s: %s", path, exc)
            return False

        log.debug("Read %d bytes from file: %s", len(sample), path)
        if not is_text_bytes(sample):
            log.debug("Non-text byte found in %s", path)
            return False
        log.debug("File appears to be text: %s", path)
        return True


_DEFAULT_HEURISTIC = TextHeuristic()


def looks_like_text(path: PathLike) -> bool:
    """Apply the default heuristic to ``path``."""
    return _DEFAULT_HEURISTIC.looks_like_text(path)


__all__ = [
    "DEFAULT_SAMPLE_SIZE",
    "TEXT_BYTES",
    "TextHeuristic",
    "is_text_bytes",
    "looks_like_text",
]
