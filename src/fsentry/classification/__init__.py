"""Classification pipeline package."""

from .heuristics import DEFAULT_SAMPLE_SIZE, TextHeuristic, is_text_bytes, looks_like_text
from .labels import (
    ExtensionLabeler,
    LabelTableError,
    label_for_extension,
    load_default_labels,
)
from .mime import MimeCategoryResolver, MimeGuesser, category_for_mime, guess_mime
from .models import MimeCategory

__all__ = [
    "DEFAULT_SAMPLE_SIZE",
    "ExtensionLabeler",
    "LabelTableError",
    "MimeCategory",
    "MimeCategoryResolver",
    "MimeGuesser",
    "TextHeuristic",
    "category_for_mime",
    "guess_mime",
    "is_text_bytes",
    "label_for_extension",
    "load_default_labels",
    "looks_like_text",
]
