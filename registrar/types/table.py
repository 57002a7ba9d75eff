from __future__ import annotations

import logging
from typing import Callable, Dict, Mapping, Optional

from registrar.core.errors import KeyConflict, TypeResolutionError
from registrar.core.validator import validate_callable, validate_string

logger = logging.getLogger(__name__)

TYPE_ID_MAX_LENGTH = 2048


def type_id_for(cls: type) -> str:
    """Canonical identifier of a class: '<module>.<qualname>'."""
    return f"{cls.__module__}.{cls.__qualname__}"


class TypeTable:
    """
    String-to-constructor table used to build registry children by name.

    Populated explicitly at startup (register() or auto_register_types()),
    so nothing is ever loaded dynamically from an arbitrary identifier.
    """

    def __init__(
        self,
        name: str = "types",
        entries: Optional[Mapping[str, Callable]] = None,
        max_length: int = TYPE_ID_MAX_LENGTH,
    ) -> None:
        self._name = name
        self._max_length = max_length
        self._constructors: Dict[str, Callable] = {}

        for type_id, constructor in (entries or {}).items():
            self.register(type_id, constructor)

    @property
    def name(self) -> str:
        return self._name

    def register(self, type_id: str, constructor: Callable) -> None:
        validate_string(type_id, "type_id", self._max_length)
        validate_callable(constructor, "constructor")

        if type_id in self._constructors:
            raise KeyConflict(
                type_id, f"{self._name} table: '{type_id}' already registered"
            )
        self._constructors[type_id] = constructor
        logger.debug("%s table: registered '%s'", self._name, type_id)

    def register_class(self, cls: type) -> str:
        type_id = type_id_for(cls)
        self.register(type_id, cls)
        return type_id

    def unregister(self, type_id: str) -> Optional[Callable]:
        return self._constructors.pop(type_id, None)

    def resolve(self, type_id: str) -> Callable:
        validate_string(type_id, "type_id", self._max_length)

        constructor = self._constructors.get(type_id)
        if constructor is None:
            available = ", ".join(self.keys()) or "<none>"
            raise TypeResolutionError(
                type_id,
                f"{self._name} table: '{type_id}' not found. Available: {available}",
            )
        return constructor

    def build(self, type_id: str, *args, **kwargs):
        constructor = self.resolve(type_id)
        return construct(type_id, constructor, *args, **kwargs)

    def keys(self):
        return tuple(sorted(self._constructors.keys()))

    def __contains__(self, type_id) -> bool:
        return type_id in self._constructors

    def __len__(self) -> int:
        return len(self._constructors)

    def __repr__(self) -> str:
        return f"TypeTable(name={self._name!r}, types={list(self.keys())})"


def construct(type_id, constructor: Callable, *args, **kwargs):
    """
    Call constructor, wrapping any failure in TypeResolutionError.
    """
    try:
        return constructor(*args, **kwargs)
    except Exception as exc:
        raise TypeResolutionError(
            type_id, f"Unable to construct '{type_id}': {exc}"
        ) from exc
