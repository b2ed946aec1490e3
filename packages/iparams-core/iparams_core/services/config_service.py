"""Configuration service: where the store file lives and how it is encoded."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

_CONFIG_CACHE: Dict[str, Dict[str, Any]] = {}

DEFAULT_FILE_NAME = "InternalParams.enfity"
DEFAULT_CONFIG_NAME = "iparams.yaml"


def get_iparams_home() -> Path:
    """
    Get the default storage directory.

    Uses IPARAMS_HOME env var or defaults to the current directory.
    """
    home = os.environ.get("IPARAMS_HOME")
    if home:
        return Path(home).expanduser()
    return Path.cwd()


def _default_config_path() -> Path:
    """Resolve the default config path (supports IPARAMS_CONFIG_PATH override)."""
    env_path = os.getenv("IPARAMS_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return Path.cwd() / DEFAULT_CONFIG_NAME


def clear_config_cache() -> None:
    """Clear cached config (primarily for tests)."""
    _CONFIG_CACHE.clear()


def load_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load YAML configuration with caching.

    Args:
        path: Optional custom path. Defaults to IPARAMS_CONFIG_PATH or ./iparams.yaml.
              A missing default config is empty; a missing explicit path raises.
    """
    resolved = Path(path).expanduser() if path else _default_config_path()
    if not path and not resolved.exists():
        return {}
    key = str(resolved.resolve())
    if key not in _CONFIG_CACHE:
        with open(resolved, "r", encoding="utf-8") as f:
            _CONFIG_CACHE[key] = yaml.safe_load(f) or {}
    return _CONFIG_CACHE[key]


class StoreSettings(BaseModel):
    """The ``store:`` config section."""
    model_config = ConfigDict(extra="ignore")

    file_name: str = DEFAULT_FILE_NAME
    storage_dir: Path = Field(default_factory=get_iparams_home)
    encoding: str = "utf-8"


def get_store_settings(config: Optional[Dict[str, Any]] = None) -> StoreSettings:
    """Return validated store settings from ``config`` (default: loaded config)."""
    if config is None:
        config = load_config()
    section = config.get("store") if isinstance(config, dict) else None
    return StoreSettings.model_validate(section if isinstance(section, dict) else {})


def resolve_store_path(name: str | Path, settings: Optional[StoreSettings] = None) -> Path:
    """Join a relative file name onto the storage directory; absolute paths pass through."""
    candidate = Path(name).expanduser()
    if candidate.is_absolute():
        return candidate
    if settings is None:
        settings = get_store_settings()
    return Path(settings.storage_dir).expanduser() / candidate
