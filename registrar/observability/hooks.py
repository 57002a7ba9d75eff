import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path

from registrar.core.events import RegistryEvent


class RegistryObserver(ABC):
    """
    Base class for registry observers.

    Any callable taking a RegistryEvent can observe a registry; subclasses
    of this class just implement record().
    """

    @abstractmethod
    def record(self, event: RegistryEvent):
        pass

    def __call__(self, event: RegistryEvent):
        self.record(event)


class LoggingRegistryObserver(RegistryObserver):
    def __init__(self, logger_name: str = "registrar.events", level: int = logging.INFO):
        self.logger = logging.getLogger(logger_name)
        self.level = level

    def record(self, event: RegistryEvent):
        if event.key is None:
            self.logger.log(self.level, "[REGISTRY %s]", event.type.value)
        else:
            self.logger.log(
                self.level, "[REGISTRY %s] key=%s child=%r",
                event.type.value, event.key, event.child,
            )


class FileRegistryObserver(RegistryObserver):
    """Appends one JSON line per event."""

    def __init__(self, path: str = "registry_events.jsonl"):
        self.path = Path(path)

    def record(self, event: RegistryEvent):
        payload = {
            "type": event.type.value,
            "key": event.key,
            "child": repr(event.child) if event.child is not None else None,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(payload) + "\n")
