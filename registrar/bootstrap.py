import logging

from registrar.core.registry import Registry
from registrar.core.settings_registry import SettingsRegistry
from registrar.observability.factory import build_observers
from registrar.types.auto_register import auto_register_types
from registrar.types.table import TypeTable
from registrar.utils.logger import get_logger


def build_registry(config: dict, settings: bool = False) -> Registry:
    """
    Build a registry from a config produced by load_config().

    Types are populated from config["types"]["modules"] and observers
    from config["observability"] before the registry is returned.
    """
    level = logging.getLevelName(str(config.get("logging", {}).get("level", "INFO")).upper())
    logger = get_logger("registrar", level if isinstance(level, int) else logging.INFO)

    registry_config = config["registry_config"]
    registry_cls = SettingsRegistry if settings else Registry

    table = TypeTable(
        name=registry_cls.__name__,
        max_length=registry_config.type_id_max_length,
    )
    modules = config.get("types", {}).get("modules", [])
    auto_register_types(table, modules)

    observers = build_observers(config.get("observability", {}))

    logger.info(
        "Built %s with %d type(s) and %d observer(s)",
        registry_cls.__name__, len(table), len(observers),
    )
    return registry_cls(types=table, config=registry_config, observers=observers)
