"""Text helpers for the chunking loop: blank checks, boundary search, chunk normalization."""

BOUNDARY_CHARS = (".", "?", "!", "\n")


def is_blank(text: str | None) -> bool:
    """True for None, empty, or whitespace-only text."""
    return not text or not text.strip()


def last_boundary_index(text: str) -> int:
    """Index of the last '.', '?', '!' or newline in text, or -1 if none occurs."""
    return max(text.rfind(ch) for ch in BOUNDARY_CHARS)


def truncate_at_boundary(text: str, min_chars: int) -> str:
    """
    Cut text right after its last boundary character, but only when that character
    sits strictly past min_chars. Otherwise return text unchanged.
    """
    idx = last_boundary_index(text)
    if idx != -1 and idx > min_chars:
        return text[: idx + 1]
    return text


def normalize_chunk(text: str) -> str:
    """Replace newlines with spaces and trim surrounding whitespace."""
    return text.replace("\n", " ").strip()
