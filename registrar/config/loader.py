import copy
from pathlib import Path

import yaml

from .defaults import DEFAULT_CONFIG
from registrar.config.registry_config import RegistryConfig


# -------------------------------------------------
# REGISTRY CONFIG LOADER
# -------------------------------------------------
def load_registry_config(cfg: dict) -> RegistryConfig:
    defaults = RegistryConfig()

    return RegistryConfig(
        key_max_length=cfg.get("key_max_length", defaults.key_max_length),
        type_id_max_length=cfg.get("type_id_max_length", defaults.type_id_max_length),
        close_policy=cfg.get("close_policy", defaults.close_policy),
    )


# -------------------------------------------------
# RECURSIVE MERGE
# -------------------------------------------------
def merge_config(base: dict, override: dict) -> dict:
    """
    Merge override into base in place. Nested dicts merge key by key;
    any other value (lists included) replaces the default.
    """
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            merge_config(base[key], value)
        else:
            base[key] = value
    return base


# -------------------------------------------------
# MAIN CONFIG LOADER
# -------------------------------------------------
def load_config(path: str | None) -> dict:
    """
    Load and merge user config with defaults.

    - Defaults win wherever the user omits a field
    - The registry section always exists
    - registry_config is always attached
    """

    user_config = {}

    if path:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}

        if not isinstance(user_config, dict):
            raise ValueError("Config file must contain a YAML dictionary")

    config = copy.deepcopy(DEFAULT_CONFIG)

    merge_config(config, user_config)

    config["registry"] = config.get("registry") or {}
    config["registry_config"] = load_registry_config(config["registry"])

    return config
