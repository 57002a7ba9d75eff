"""
Keyed lifecycle registry.

Creates children by type identifier, binds each to a unique key, and
coordinates shutdown through the two-phase close protocol:

    child.close()       -> registry.close_child(key) -> child.close_without_remove()
    registry.close()    -> registry.close_child(key) for every key

Once closed, a registry rejects every call except is_closed().
"""

import logging
import threading
from typing import Callable, FrozenSet, Optional

from registrar.config.registry_config import RegistryConfig
from registrar.core.child import ChildLifecycle
from registrar.core.errors import (
    ChildNotFound,
    KeyConflict,
    RegistryCloseError,
    RegistryClosed,
    TypeResolutionError,
)
from registrar.core.events import EventType, RegistryEvent
from registrar.core.validator import validate_callable, validate_object, validate_string
from registrar.types.table import TypeTable, construct, type_id_for

logger = logging.getLogger(__name__)


class Registry:

    # Contract every constructed child must satisfy
    child_contract = ChildLifecycle

    def __init__(self, types=None, config: Optional[RegistryConfig] = None, observers=None):
        self._config = config or RegistryConfig()

        if isinstance(types, TypeTable):
            self._types = types
        else:
            self._types = TypeTable(
                name=type(self).__name__,
                entries=types,
                max_length=self._config.type_id_max_length,
            )

        self._children = {}
        self._observers = []
        self._closed = False
        # Reentrant: close() calls close_child(), and a child's close()
        # calls back in while create()/close() may already hold the lock
        self._lock = threading.RLock()

        for observer in observers or ():
            self.add_observer(observer)

    # --------------------------------------------------
    # PROPERTIES
    # --------------------------------------------------

    @property
    def config(self) -> RegistryConfig:
        return self._config

    @property
    def types(self) -> TypeTable:
        return self._types

    def is_closed(self) -> bool:
        return self._closed

    # --------------------------------------------------
    # TYPES
    # --------------------------------------------------

    def register_type(self, type_id: str, constructor: Callable) -> None:
        with self._lock:
            self._check_open()
            self._types.register(type_id, constructor)

    # --------------------------------------------------
    # CHILD LIFECYCLE
    # --------------------------------------------------

    def create(self, key, type_id=None):
        """
        Construct the type named by type_id, bind it to key and initialize it.

        create(type_id) uses the type identifier itself as the key. A class
        may be passed in place of a string identifier; it is constructed
        directly and, when used as the key, keyed by '<module>.<qualname>'.
        """
        return self._create(key, type_id)

    def _create(self, key, type_id, **init_kwargs):
        with self._lock:
            self._check_open()
            key, type_id = self._normalize_create_args(key, type_id)

            if key in self._children:
                raise KeyConflict(key)

            child = self._construct(type_id)
            self._children[key] = child

            try:
                child.initialize(self, key, **init_kwargs)
            except Exception:
                self._children.pop(key, None)
                raise

            logger.debug("Created child '%s' (%s)", key, type(child).__name__)
            self._notify(RegistryEvent(EventType.CREATE, key, child))
            return child

    def get(self, key: str):
        """
        Return the child bound to key, or None if no child is bound.
        Emits GET in both cases.
        """
        with self._lock:
            self._check_open()
            self._validate_key(key)

            child = self._children.get(key)
            self._notify(RegistryEvent(EventType.GET, key, child))
            return child

    def close_child(self, key: str):
        """
        Remove key and close the removed child without calling back here.
        Returns the removed child, or None if key was not bound.
        Emits REMOVE in both cases.
        """
        with self._lock:
            self._check_open()
            self._validate_key(key)

            child = self._children.pop(key, None)
            if child is not None:
                child.close_without_remove()
                assert key not in self._children, f"close_child(): '{key}' still present after removal"
                logger.debug("Closed child '%s'", key)

            self._notify(RegistryEvent(EventType.REMOVE, key, child))
            return child

    def close(self) -> None:
        """
        Close every child, then the registry itself.

        Not idempotent: a second call raises RegistryClosed.
        """
        with self._lock:
            self._check_open()

            errors = {}
            for key in self.get_keys():
                if self._config.close_policy == "collect":
                    try:
                        self.close_child(key)
                    except Exception as exc:
                        logger.error("Failed to close child '%s': %s", key, exc)
                        errors[key] = exc
                else:
                    self.close_child(key)

            assert not self._children, "close(): the child table should be empty"
            self._closed = True
            logger.debug("Registry closed (%d failure(s))", len(errors))

            self._notify(RegistryEvent(EventType.CLOSE))
            self._observers.clear()

            if errors:
                raise RegistryCloseError(errors)

    # --------------------------------------------------
    # QUERIES
    # --------------------------------------------------

    def contains_child(self, key: str) -> bool:
        with self._lock:
            self._check_open()
            self._validate_key(key)
            return key in self._children

    def get_child_count(self) -> int:
        with self._lock:
            self._check_open()
            return len(self._children)

    def get_keys(self) -> FrozenSet[str]:
        with self._lock:
            self._check_open()
            return frozenset(self._children)

    # --------------------------------------------------
    # OBSERVERS
    # --------------------------------------------------

    def add_observer(self, observer: Callable[[RegistryEvent], None]) -> None:
        with self._lock:
            self._check_open()
            validate_callable(observer, "observer")
            if observer not in self._observers:
                self._observers.append(observer)

    def remove_observer(self, observer: Callable[[RegistryEvent], None]) -> None:
        with self._lock:
            self._check_open()
            validate_object(observer, "observer")
            if observer in self._observers:
                self._observers.remove(observer)

    def get_observer_count(self) -> int:
        with self._lock:
            self._check_open()
            return len(self._observers)

    def _notify(self, event: RegistryEvent) -> None:
        for observer in list(self._observers):
            try:
                observer(event)
            except Exception:
                # Observers must never break registry state transitions
                logger.exception("Observer %r failed on %s event", observer, event.type.value)

    # --------------------------------------------------
    # INTERNALS
    # --------------------------------------------------

    def _check_open(self) -> None:
        if self._closed:
            raise RegistryClosed("This registry is closed and unable to process calls.")

    def _validate_key(self, key) -> str:
        return validate_string(key, "key", self._config.key_max_length)

    def _normalize_create_args(self, key, type_id):
        if type_id is None:
            type_id = key
            if isinstance(key, type):
                key = type_id_for(key)

        self._validate_key(key)
        if not isinstance(type_id, type):
            validate_string(type_id, "type_id", self._config.type_id_max_length)

        return key, type_id

    def _construct(self, type_id):
        if isinstance(type_id, type):
            name = type_id_for(type_id)
            child = construct(name, type_id)
        else:
            name = type_id
            child = self._types.build(type_id)

        if not isinstance(child, self.child_contract):
            raise TypeResolutionError(
                name,
                f"'{name}' built a {type(child).__name__}, "
                f"which does not implement {self.child_contract.__name__}",
            )

        # A child belongs to exactly one key in exactly one registry
        if child.is_initialized():
            raise TypeResolutionError(
                name,
                f"'{name}' returned child '{child.get_key()}', which is already bound",
            )
        return child

    # --------------------------------------------------
    # PYTHON PROTOCOLS
    # --------------------------------------------------

    def __getitem__(self, key: str):
        child = self.get(key)
        if child is None:
            raise ChildNotFound(key)
        return child

    def __contains__(self, key) -> bool:
        return self.contains_child(key)

    def __len__(self) -> int:
        return self.get_child_count()

    def __bool__(self) -> bool:
        # Truthy even when empty or closed
        return True

    def __iter__(self):
        return iter(self.get_keys())

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if not self._closed:
            self.close()
        return False

    def __repr__(self):
        with self._lock:
            return (
                f"{type(self).__name__}(children={sorted(self._children)}, "
                f"closed={self._closed})"
            )
