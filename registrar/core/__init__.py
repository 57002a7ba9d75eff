from .errors import (
    RegistryError,
    RegistryClosed,
    KeyConflict,
    TypeResolutionError,
    ChildClosed,
    InvalidArgument,
    ChildNotFound,
    RegistryCloseError,
)
from .events import EventType, RegistryEvent
from .child import ChildLifecycle, SettingsChild, BaseChild, BaseSettingsChild
from .registry import Registry
from .settings_registry import SettingsRegistry

__all__ = [
    "RegistryError",
    "RegistryClosed",
    "KeyConflict",
    "TypeResolutionError",
    "ChildClosed",
    "InvalidArgument",
    "ChildNotFound",
    "RegistryCloseError",
    "EventType",
    "RegistryEvent",
    "ChildLifecycle",
    "SettingsChild",
    "BaseChild",
    "BaseSettingsChild",
    "Registry",
    "SettingsRegistry",
]
