"""Tests for chunk text helpers."""

import pytest

from app.services.chunking.cleaners import (
    is_blank,
    last_boundary_index,
    normalize_chunk,
    truncate_at_boundary,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("no boundary here", -1),
        ("one. two", 3),
        ("a? b! c. d", 7),
        ("end!\nnext line", 4),
        ("question? then. finally!", 23),
    ],
)
def test_last_boundary_index(text, expected) -> None:
    assert last_boundary_index(text) == expected


def test_truncate_requires_index_past_floor() -> None:
    assert truncate_at_boundary("Hello world. More", 11) == "Hello world. More"
    assert truncate_at_boundary("Hello world. More", 10) == "Hello world."


def test_truncate_without_boundary_is_noop() -> None:
    assert truncate_at_boundary("plain words only", 0) == "plain words only"


def test_normalize_chunk_replaces_newlines_and_trims() -> None:
    assert normalize_chunk("  first\nsecond\n\nthird \n") == "first second  third"


@pytest.mark.parametrize("text", [None, "", "   ", "\n\t "])
def test_is_blank_true(text) -> None:
    assert is_blank(text)


def test_is_blank_false() -> None:
    assert not is_blank(" x ")
