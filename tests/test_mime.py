"""Tests for MIME category resolution."""

import logging
from pathlib import Path
from typing import Optional

import pytest

from fsentry.classification import (
    MimeCategory,
    MimeCategoryResolver,
    TextHeuristic,
    category_for_mime,
    guess_mime,
)


class RecordingGuesser:
    def __init__(self, result: Optional[str]) -> None:
        self.result = result
        self.calls: list[Path] = []

    def __call__(self, path) -> Optional[str]:
        self.calls.append(Path(path))
        return self.result


@pytest.mark.parametrize(
    ("mime", "expected"),
    [
        ("text/plain", MimeCategory.TEXT),
        ("image/jpeg", MimeCategory.IMAGE),
        ("audio/mpeg", MimeCategory.AUDIO),
        ("video/mp4", MimeCategory.VIDEO),
        ("application/zip", MimeCategory.ARCHIVE),
        ("application/json", MimeCategory.ARCHIVE),
        ("application/pdf", MimeCategory.ARCHIVE),
        ("font/woff2", MimeCategory.UNKNOWN),
        ("chemical/x-pdb", MimeCategory.UNKNOWN),
    ],
)
def test_category_for_mime_uses_top_level_type(mime: str, expected: MimeCategory) -> None:
    assert category_for_mime(mime) is expected


def test_guess_mime_uses_file_name() -> None:
    assert guess_mime("photo.jpg") == "image/jpeg"
    assert guess_mime(Path("notes.txt")) == "text/plain"
    assert guess_mime("README") is None


def test_nonexistent_path_is_unknown(tmp_path: Path) -> None:
    guesser = RecordingGuesser("text/plain")
    resolver = MimeCategoryResolver(guesser=guesser)

    assert resolver.resolve(tmp_path / "missing.txt") is MimeCategory.UNKNOWN
    assert guesser.calls == []


def test_directory_is_unknown_despite_extension(tmp_path: Path) -> None:
    folder = tmp_path / "holiday.jpg"
    folder.mkdir()

    assert MimeCategoryResolver().resolve(folder) is MimeCategory.UNKNOWN


def test_jpg_file_is_image(tmp_path: Path) -> None:
    image = tmp_path / "photo.jpg"
    image.write_bytes(b"\xff\xd8\xff\xe0\x00\x10JFIF")

    assert MimeCategoryResolver().resolve(image) is MimeCategory.IMAGE


def test_text_file_without_guess_falls_back_to_content(tmp_path: Path) -> None:
    note = tmp_path / "note.txt"
    note.write_text("plain ascii content\n", encoding="ascii")

    resolver = MimeCategoryResolver(guesser=RecordingGuesser(None))

    assert resolver.resolve(note) is MimeCategory.TEXT


def test_binary_file_without_guess_is_unknown(tmp_path: Path) -> None:
    blob = tmp_path / "blob"
    blob.write_bytes(b"\x00\x01\x02\x03")

    assert MimeCategoryResolver().resolve(blob) is MimeCategory.UNKNOWN


def test_guess_wins_over_content(tmp_path: Path) -> None:
    fake = tmp_path / "fake.mp3"
    fake.write_text("this is actually text", encoding="ascii")

    assert MimeCategoryResolver().resolve(fake) is MimeCategory.AUDIO


def test_unrecognised_top_level_type_is_unknown(tmp_path: Path, caplog) -> None:
    model = tmp_path / "molecule"
    model.write_text("ATOM 1", encoding="ascii")
    resolver = MimeCategoryResolver(guesser=RecordingGuesser("chemical/x-pdb"))

    with caplog.at_level(logging.WARNING, logger="fsentry"):
        assert resolver.resolve(model) is MimeCategory.UNKNOWN

    assert "Unknown MIME type chemical/x-pdb" in caplog.text


def test_custom_heuristic_sample_size(tmp_path: Path) -> None:
    sample = tmp_path / "mixed"
    sample.write_bytes(b"abcd\x00\x00")

    short = MimeCategoryResolver(heuristic=TextHeuristic(sample_size=4))
    full = MimeCategoryResolver()

    assert short.resolve(sample) is MimeCategory.TEXT
    assert full.resolve(sample) is MimeCategory.UNKNOWN


def test_injected_logger_receives_diagnostics(tmp_path: Path, caplog) -> None:
    logger = logging.getLogger("tests.mime")
    resolver = MimeCategoryResolver(logger=logger)

    with caplog.at_level(logging.DEBUG, logger="tests.mime"):
        resolver.resolve(tmp_path / "gone")

    assert [record.name for record in caplog.records] == ["tests.mime", "tests.mime"]
    assert "Path does not exist" in caplog.records[-1].getMessage()


def test_guess_mime_treats_scheme_like_names_as_files() -> None:
    assert guess_mime("data:text/plain,hello.mp3") == "audio/mpeg"
    assert guess_mime("data:archive.zip") == "application/zip"


@pytest.mark.parametrize("name", ["a" * 300 + ".txt", "bad\x00name.txt"])
def test_unusable_paths_are_unknown(tmp_path: Path, name: str) -> None:
    guesser = RecordingGuesser("text/plain")

    assert MimeCategoryResolver(guesser=guesser).resolve(tmp_path / name) is MimeCategory.UNKNOWN
    assert guesser.calls == []
