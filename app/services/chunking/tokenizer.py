"""Tokenizer for chunking. Wraps a tiktoken encoding behind a small encode/decode protocol."""

from functools import lru_cache
from typing import Protocol, Sequence

import tiktoken

from app.config.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ENCODING = "cl100k_base"


class Tokenizer(Protocol):
    """Deterministic text <-> token id codec with a fixed vocabulary."""

    def encode(self, text: str) -> list[int]: ...

    def decode(self, tokens: Sequence[int]) -> str: ...


class TiktokenTokenizer:
    """tiktoken-backed Tokenizer. Special tokens are encoded as plain text, never rejected."""

    def __init__(self, encoding_name: str = DEFAULT_ENCODING):
        self.encoding_name = encoding_name
        self._encoding = tiktoken.get_encoding(encoding_name)

    def encode(self, text: str) -> list[int]:
        return self._encoding.encode(text, disallowed_special=())

    def decode(self, tokens: Sequence[int]) -> str:
        return self._encoding.decode(list(tokens))


@lru_cache
def get_tokenizer(encoding_name: str = DEFAULT_ENCODING) -> TiktokenTokenizer:
    """Return the shared tokenizer for an encoding. Loaded once per process."""
    logger.info("Loading tiktoken encoding", extra={"encoding": encoding_name})
    return TiktokenTokenizer(encoding_name)


def count_tokens(text: str, encoding_name: str = DEFAULT_ENCODING, tokenizer: Tokenizer | None = None) -> int:
    """Return token count for text."""
    if not text:
        return 0
    tok = tokenizer if tokenizer is not None else get_tokenizer(encoding_name)
    return len(tok.encode(text))
