"""iparams services (configuration)."""
from .config_service import (
    StoreSettings,
    clear_config_cache,
    get_iparams_home,
    get_store_settings,
    load_config,
    resolve_store_path,
)

__all__ = [
    "StoreSettings",
    "clear_config_cache",
    "get_iparams_home",
    "get_store_settings",
    "load_config",
    "resolve_store_path",
]
