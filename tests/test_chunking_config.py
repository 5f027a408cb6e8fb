"""Tests for chunking profiles and config resolution."""

import pytest
from pydantic import ValidationError

from app.config.chunking.models import ChunkingConfig
from app.config.chunking.static import (
    get_active_profile_name,
    load_chunking_profiles,
    resolve_chunking_config,
)


def test_profiles_load_from_static_json() -> None:
    profiles = load_chunking_profiles()

    assert {"default", "embedding"} <= set(profiles)
    assert all(isinstance(cfg, ChunkingConfig) for cfg in profiles.values())


def test_active_profile_is_default() -> None:
    config = resolve_chunking_config("active")

    assert get_active_profile_name() == "default"
    assert config == ChunkingConfig(
        chunk_token_size=75,
        min_chunk_size_chars=350,
        min_chunk_length_to_embed=5,
        max_num_chunks=10000,
    )


def test_named_profile() -> None:
    config = resolve_chunking_config("embedding")

    assert config.chunk_token_size == 128
    assert config.min_chunk_size_chars == 32
    assert config.min_chunk_length_to_embed == 64
    assert config.max_num_chunks == 100


def test_unknown_profile_raises() -> None:
    with pytest.raises(ValueError, match="Unknown chunking profile"):
        resolve_chunking_config("nope")


def test_overrides_merge_over_profile() -> None:
    config = resolve_chunking_config("embedding", {"chunk_token_size": 256})

    assert config.chunk_token_size == 256
    assert config.max_num_chunks == 100


def test_invalid_override_rejected() -> None:
    with pytest.raises(ValidationError):
        resolve_chunking_config("active", {"chunk_token_size": 0})


def test_environment_selects_active_profile(monkeypatch) -> None:
    from app.config.settings import get_settings

    monkeypatch.setenv("CHUNKING_PROFILE", "embedding")
    get_settings.cache_clear()

    assert get_active_profile_name() == "embedding"
    assert resolve_chunking_config("active").chunk_token_size == 128


def test_environment_profile_must_exist(monkeypatch) -> None:
    from app.config.settings import get_settings

    monkeypatch.setenv("CHUNKING_PROFILE", "missing")
    get_settings.cache_clear()

    with pytest.raises(ValueError, match="not found"):
        resolve_chunking_config("active")


def test_config_is_frozen() -> None:
    config = ChunkingConfig()

    with pytest.raises(ValidationError):
        config.chunk_token_size = 10
