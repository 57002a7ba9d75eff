from .hooks import RegistryObserver, LoggingRegistryObserver, FileRegistryObserver
from .factory import build_observers

__all__ = [
    "RegistryObserver",
    "LoggingRegistryObserver",
    "FileRegistryObserver",
    "build_observers",
]
