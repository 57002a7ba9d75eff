from .loader import load_config, load_registry_config, merge_config
from .defaults import DEFAULT_CONFIG
from .registry_config import RegistryConfig, CLOSE_POLICIES

__all__ = [
    "load_config",
    "load_registry_config",
    "merge_config",
    "DEFAULT_CONFIG",
    "RegistryConfig",
    "CLOSE_POLICIES",
]
