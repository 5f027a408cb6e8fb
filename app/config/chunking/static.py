"""Static chunking config loader. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from app.config.chunking.models import ChunkingConfig
from app.config.settings import get_settings

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, ChunkingConfig] | None = None
_active_profile: str | None = None


def _load_raw_data() -> dict[str, Any]:
    """Load raw JSON; used to read both profiles and active."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def load_chunking_profiles() -> dict[str, ChunkingConfig]:
    """Load chunking profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    data = _load_raw_data()
    profiles = data.get("profiles", {})
    _cached = {k: ChunkingConfig.model_validate(v) for k, v in profiles.items()}
    return _cached


def get_chunking_config(profile_name: str) -> ChunkingConfig | None:
    """Return chunking config for the given profile, or None if missing."""
    return load_chunking_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """
    Return the active profile name. CHUNKING_PROFILE in the environment wins over
    the one marked active in static.json, which defaults to 'default' if missing.
    """
    global _active_profile
    override = get_settings().chunking_profile
    if override:
        return override
    if _active_profile is not None:
        return _active_profile
    data = _load_raw_data()
    _active_profile = data.get("active", "default")
    return _active_profile


def get_active_chunking_config() -> ChunkingConfig:
    """Return the chunking config for the active profile. Uses get_active_profile_name()."""
    name = get_active_profile_name()
    cfg = get_chunking_config(name)
    if cfg is None:
        raise ValueError(f"Active profile {name!r} not found in profiles")
    return cfg


def resolve_chunking_config(profile_name: str, overrides: dict[str, Any] | None = None) -> ChunkingConfig:
    """
    Resolve chunking config by profile name and optional overrides.
    If profile_name is "active", use the active profile.
    Non-empty overrides are merged over the profile and validated again.
    Raises ValueError if the profile is missing.
    """
    if profile_name == "active":
        base = get_active_chunking_config()
    else:
        base = get_chunking_config(profile_name)
        if base is None:
            raise ValueError(f"Unknown chunking profile: {profile_name!r}")
    if not overrides:
        return base
    merged = {**base.model_dump(), **overrides}
    return ChunkingConfig.model_validate(merged)


def clear_chunking_cache() -> None:
    """Forget loaded profiles and the active name so the next call rereads static.json."""
    global _cached, _active_profile
    _cached = None
    _active_profile = None
