"""MIME guessing and category resolution."""

from __future__ import annotations

import logging
import mimetypes
import os
from pathlib import Path
from typing import Callable, Optional

from .heuristics import PathLike, TextHeuristic
from .models import MimeCategory

LOGGER = logging.getLogger(__name__)

MimeGuesser = Callable[[PathLike], Optional[str]]

_TOP_LEVEL_CATEGORIES = {
    "text": MimeCategory.TEXT,
    "image": MimeCategory.IMAGE,
    "audio": MimeCategory.AUDIO,
    "video": MimeCategory.VIDEO,
    "application": MimeCategory.ARCHIVE,
}


def _as_relative_name(name: str) -> str:
    if name[:5].lower() == "data:":
        return os.path.join(os.curdir, name)
    return name


def guess_mime(path: PathLike) -> Optional[str]:
    """Return the first MIME type guessed from the file name, if any.

    Only the name is consulted; file contents are never read.
    """
    name = os.fspath(path)
    guess_file_type = getattr(mimetypes, "guess_file_type", None)
    if guess_file_type is not None:
        mime, _ = guess_file_type(name, strict=False)
    else:
        # guess_type reads a leading "data:" as a data URL.
        mime, _ = mimetypes.guess_type(_as_relative_name(name), strict=False)
    return mime


def category_for_mime(mime: str) -> MimeCategory:
    """Map the top-level type of ``mime`` to a category."""
    top_level = mime.split("/", 1)[0].strip().lower()
    return _TOP_LEVEL_CATEGORIES.get(top_level, MimeCategory.UNKNOWN)


class MimeCategoryResolver:
    """Assign a category from a MIME guess, falling back to content sniffing.

    A MIME guess always wins when present. Without one, the text heuristic
    decides between ``TEXT`` and ``UNKNOWN``.
    """

    def __init__(
        self,
        guesser: MimeGuesser = guess_mime,
        heuristic: TextHeuristic | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.guesser = guesser
        self.heuristic = heuristic if heuristic is not None else TextHeuristic()
        self.logger = logger or LOGGER

    def resolve(self, path: PathLike) -> MimeCategory:
        """Return the category for ``path``.

        Args:
            path: File or directory to classify.

        Returns:
            MimeCategory: ``UNKNOWN`` for missing paths and directories,
            otherwise the category derived from the MIME guess or content.
        """
        target = Path(path)
        self.logger.debug("Determining MIME category for path: %s", target)

        # os.path reports ENAMETOOLONG, EACCES and NUL bytes as missing; older pathlib raises.
        if not os.path.exists(target):
            self.logger.warning("Path does not exist: %s", target)
            return MimeCategory.UNKNOWN
        if os.path.isdir(target):
            self.logger.info("Path is a directory, not a file: %s", target)
            return MimeCategory.UNKNOWN

        mime = self.guesser(target)
        if mime is not None:
            self.logger.debug("MIME type %s identified for path: %s", mime, target)
            category = category_for_mime(mime)
            if category is MimeCategory.UNKNOWN:
                self.logger.warning("Unknown MIME type %s for path: %s", mime, target)
            return category

        self.logger.warning("No MIME type could be identified for path: %s", target)
        if self.heuristic.looks_like_text(target, logger=self.logger):
            self.logger.info("Path %s identified as text by content analysis.", target)
            return MimeCategory.TEXT

        self.logger.warning("Content analysis could not classify path: %s", target)
        return MimeCategory.UNKNOWN


__all__ = [
    "MimeCategoryResolver",
    "MimeGuesser",
    "category_for_mime",
    "guess_mime",
]
