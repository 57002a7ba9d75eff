import logging

from registrar.observability.hooks import (
    FileRegistryObserver,
    LoggingRegistryObserver,
    RegistryObserver,
)


def build_observers(config: dict) -> list[RegistryObserver]:
    observers = []

    for obs in config.get("observers", []):
        if obs["type"] == "logging":
            level = logging.getLevelName(str(obs.get("level", "INFO")).upper())
            observers.append(
                LoggingRegistryObserver(
                    logger_name=obs.get("logger", "registrar.events"),
                    level=level if isinstance(level, int) else logging.INFO,
                )
            )

        elif obs["type"] == "file":
            observers.append(
                FileRegistryObserver(path=obs.get("path", "registry_events.jsonl"))
            )

        elif obs["type"] == "metrics":
            # Imported here: monitoring builds on these hooks
            from registrar.monitoring.metrics import MetricsCollector

            observers.append(MetricsCollector())

        else:
            raise ValueError(f"Unknown observer type: {obs['type']!r}")

    return observers
