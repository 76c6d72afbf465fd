"""Static codec profile loader. Read-only; no business logic."""

import json
from pathlib import Path

from mimeword.config.codec.models import CodecConfig

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, CodecConfig] | None = None
_active_profile: str | None = None


def _load_raw_data() -> dict:
    """Load raw JSON; used to read both profiles and active."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def load_codec_profiles() -> dict[str, CodecConfig]:
    """Load codec profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    data = _load_raw_data()
    profiles = data.get("profiles", {})
    _cached = {k: CodecConfig.model_validate(v) for k, v in profiles.items()}
    return _cached


def get_codec_config(profile_name: str) -> CodecConfig | None:
    """Return codec config for the given profile, or None if missing."""
    return load_codec_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """Return the profile name marked as active in static.json. Defaults to 'default' if missing."""
    global _active_profile
    if _active_profile is not None:
        return _active_profile
    data = _load_raw_data()
    _active_profile = data.get("active", "default")
    return _active_profile


def resolve_codec_config(profile_name: str, overrides: dict | None = None) -> CodecConfig:
    """
    Resolve codec config by profile name, then apply field overrides (scheme, charset, split).
    "active" selects the profile marked active in static.json.
    Raises ValueError for an unknown profile or invalid overrides.
    """
    name = get_active_profile_name() if profile_name == "active" else profile_name
    cfg = get_codec_config(name)
    if cfg is None:
        raise ValueError(f"Unknown codec profile: {profile_name!r}")
    if overrides:
        return CodecConfig.model_validate({**cfg.model_dump(), **overrides})
    return cfg
