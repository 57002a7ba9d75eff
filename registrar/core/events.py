from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from registrar.core.validator import validate_object, validate_string


class EventType(str, Enum):
    CREATE = "CREATE"
    GET = "GET"
    REMOVE = "REMOVE"
    CLOSE = "CLOSE"


@dataclass(frozen=True)
class RegistryEvent:
    """
    A lifecycle notification pushed to every registry observer.

    key and child are None for CLOSE. child is also None for a GET
    on a key that is not bound.
    """

    type: EventType
    key: Optional[str] = None
    child: Optional[Any] = None

    def __post_init__(self):
        validate_object(self.type, "type")
        if self.type is not EventType.CLOSE:
            validate_string(self.key, "key")
