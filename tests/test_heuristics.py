"""Tests for the text/binary heuristic."""

from pathlib import Path

import pytest

from fsentry.classification.heuristics import (
    DEFAULT_SAMPLE_SIZE,
    TextHeuristic,
    is_text_bytes,
    looks_like_text,
)


def test_printable_ascii_and_whitespace_is_text(tmp_path: Path) -> None:
    sample = tmp_path / "notes"
    sample.write_bytes(bytes(range(0x20, 0x7F)) + b"\t\r\n")

    assert looks_like_text(sample) is True


def test_nul_byte_in_prefix_is_not_text(tmp_path: Path) -> None:
    sample = tmp_path / "blob"
    sample.write_bytes(b"hello\x00world")

    assert looks_like_text(sample) is False


@pytest.mark.parametrize("byte", [0x00, 0x07, 0x0B, 0x0C, 0x1B, 0x7F, 0x80, 0xFF])
def test_single_disallowed_byte_rejects_file(tmp_path: Path, byte: int) -> None:
    sample = tmp_path / "sample"
    sample.write_bytes(b"a" * 100 + bytes([byte]) + b"a" * 100)

    assert looks_like_text(sample) is False


def test_utf8_text_is_not_ascii_text(tmp_path: Path) -> None:
    sample = tmp_path / "unicode"
    sample.write_text("café", encoding="utf-8")

    assert looks_like_text(sample) is False


def test_empty_file_is_text(tmp_path: Path) -> None:
    sample = tmp_path / "empty"
    sample.write_bytes(b"")

    assert looks_like_text(sample) is True


def test_bytes_past_the_sample_are_ignored(tmp_path: Path) -> None:
    sample = tmp_path / "long"
    sample.write_bytes(b"x" * DEFAULT_SAMPLE_SIZE + b"\x00\x01\x02")

    assert looks_like_text(sample) is True
    assert TextHeuristic(sample_size=DEFAULT_SAMPLE_SIZE + 1).looks_like_text(sample) is False


def test_unreadable_paths_are_not_text(tmp_path: Path) -> None:
    assert looks_like_text(tmp_path / "missing") is False
    assert looks_like_text(tmp_path) is False
    assert looks_like_text(tmp_path / "bad\x00name") is False


def test_sample_size_must_be_positive() -> None:
    with pytest.raises(ValueError):
        TextHeuristic(sample_size=0)


def test_is_text_bytes_checks_every_byte() -> None:
    assert is_text_bytes(b"") is True
    assert is_text_bytes(b"line one\r\nline\ttwo\n") is True
    assert is_text_bytes(b"line\x00") is False
