"""
Child lifecycle contract.

A child is created by a registry, bound to exactly one key, and closed
through one of two paths:

- close(): child-initiated. Asks the parent to remove the entry, which in
  turn calls close_without_remove() on this child.
- close_without_remove(): registry-initiated. Clears the child's own
  state and never calls back into the registry.
"""

import weakref
from abc import ABC, abstractmethod

from registrar.core.errors import ChildClosed
from registrar.core.validator import validate_object, validate_string


class ChildLifecycle(ABC):

    @abstractmethod
    def initialize(self, parent, key: str):
        pass

    @abstractmethod
    def close(self):
        pass

    @abstractmethod
    def close_without_remove(self):
        pass

    @abstractmethod
    def get_key(self) -> str:
        pass

    @abstractmethod
    def get_parent(self):
        pass

    @abstractmethod
    def is_initialized(self) -> bool:
        """True once initialize() has bound the child to a key."""


class SettingsChild(ChildLifecycle):

    @abstractmethod
    def initialize(self, parent, key: str, settings=None):
        pass

    @abstractmethod
    def get_settings(self):
        pass


class BaseChild(ChildLifecycle):
    """
    Reusable child implementation.

    The parent is held through a weak reference: the registry owns its
    children, never the other way round.
    """

    def __init__(self):
        self._key = None
        self._parent_ref = None
        self._closed = False

    # --------------------------------------------------
    # LIFECYCLE
    # --------------------------------------------------

    def initialize(self, parent, key: str):
        validate_object(parent, "parent")
        validate_string(key, "key")
        assert self._key is None, f"initialize() called twice on child '{self._key}'"

        self._parent_ref = weakref.ref(parent)
        self._key = key
        self._closed = False

    def close(self):
        if self._closed:
            raise ChildClosed(f"Child '{self._key}' has been closed and may not be used.")

        assert self._key is not None, "close(): child was never initialized"
        parent = self._parent_ref() if self._parent_ref is not None else None

        if parent is not None:
            # The registry calls close_without_remove() on us
            parent.close_child(self._key)

        if not self._closed:
            self._release()

    def close_without_remove(self):
        if self._closed:
            raise ChildClosed(f"Child '{self._key}' has been closed and may not be used.")

        assert self._key is not None, "close_without_remove(): child was never initialized"
        self._release()

    def _release(self):
        self._parent_ref = None
        self._closed = True

    # --------------------------------------------------
    # ACCESSORS
    # --------------------------------------------------

    def get_key(self) -> str:
        # Readable after close for diagnostics
        assert self._key is not None, "get_key(): child was never initialized"
        return self._key

    def get_parent(self):
        if self._closed:
            raise ChildClosed(f"Child '{self._key}' has been closed and may not be used.")

        assert self._parent_ref is not None, "get_parent(): child was never initialized"
        parent = self._parent_ref()
        if parent is None:
            raise ChildClosed(f"The registry owning child '{self._key}' no longer exists.")
        return parent

    def is_initialized(self) -> bool:
        return self._key is not None

    @property
    def key(self) -> str:
        return self.get_key()

    @property
    def closed(self) -> bool:
        return self._closed

    # --------------------------------------------------
    # IDENTITY
    # --------------------------------------------------

    def __eq__(self, other):
        if self is other:
            return True
        if type(self) is not type(other):
            return NotImplemented
        return self._key == other._key

    def __hash__(self):
        return hash(self._key)

    def __repr__(self):
        return f"{type(self).__name__}(key={self._key!r}, closed={self._closed})"


class BaseSettingsChild(BaseChild, SettingsChild):
    """
    A child carrying an opaque settings value supplied at creation.
    The registry never interprets the settings.
    """

    def __init__(self):
        super().__init__()
        self._settings = None

    def initialize(self, parent, key: str, settings=None):
        validate_object(parent, "parent")
        validate_string(key, "key")
        validate_object(settings, "settings")

        super().initialize(parent, key)
        self._settings = settings

    def get_settings(self):
        assert self._settings is not None, "get_settings(): settings read before initialize()"
        return self._settings

    @property
    def settings(self):
        return self.get_settings()

    def __repr__(self):
        return (
            f"{type(self).__name__}(key={self._key!r}, closed={self._closed}, "
            f"settings={self._settings!r})"
        )
