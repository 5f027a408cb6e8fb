"""Shared fixtures: a character-level tokenizer and clean config caches."""

from typing import Sequence

import pytest

from app.config.chunking.models import ChunkingConfig
from app.config.chunking.static import clear_chunking_cache
from app.config.settings import get_settings


class CharTokenizer:
    """One token per character. Deterministic and exactly invertible."""

    def __init__(self) -> None:
        self.encode_calls = 0

    def encode(self, text: str) -> list[int]:
        self.encode_calls += 1
        return [ord(c) for c in text]

    def decode(self, tokens: Sequence[int]) -> str:
        return "".join(chr(t) for t in tokens)


@pytest.fixture()
def char_tokenizer() -> CharTokenizer:
    return CharTokenizer()


@pytest.fixture()
def make_config():
    """Build a ChunkingConfig with loose floors unless overridden."""

    def _make(**kwargs) -> ChunkingConfig:
        params = {
            "chunk_token_size": 20,
            "min_chunk_size_chars": 100,
            "min_chunk_length_to_embed": 0,
            "max_num_chunks": 10000,
        }
        params.update(kwargs)
        return ChunkingConfig(**params)

    return _make


@pytest.fixture(autouse=True)
def _reset_config_caches(monkeypatch):
    monkeypatch.delenv("CHUNKING_PROFILE", raising=False)
    get_settings.cache_clear()
    clear_chunking_cache()
    yield
    get_settings.cache_clear()
    clear_chunking_cache()
