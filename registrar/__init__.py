"""
Registrar v1.0

Keyed lifecycle registry: creates, tracks and tears down named child
resources, with a two-phase close protocol shared by registry and child.
"""

from .__version__ import __version__

from .core import (
    RegistryError,
    RegistryClosed,
    KeyConflict,
    TypeResolutionError,
    ChildClosed,
    InvalidArgument,
    ChildNotFound,
    RegistryCloseError,
    EventType,
    RegistryEvent,
    ChildLifecycle,
    SettingsChild,
    BaseChild,
    BaseSettingsChild,
    Registry,
    SettingsRegistry,
)
from .types import TypeTable, type_id_for, auto_register_types
from .config import RegistryConfig, load_config
from .observability import RegistryObserver, build_observers
from .bootstrap import build_registry

__all__ = [
    "__version__",
    # errors
    "RegistryError",
    "RegistryClosed",
    "KeyConflict",
    "TypeResolutionError",
    "ChildClosed",
    "InvalidArgument",
    "ChildNotFound",
    "RegistryCloseError",
    # lifecycle
    "EventType",
    "RegistryEvent",
    "ChildLifecycle",
    "SettingsChild",
    "BaseChild",
    "BaseSettingsChild",
    "Registry",
    "SettingsRegistry",
    # types
    "TypeTable",
    "type_id_for",
    "auto_register_types",
    # config / observability
    "RegistryConfig",
    "load_config",
    "RegistryObserver",
    "build_observers",
    "build_registry",
]
