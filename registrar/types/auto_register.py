"""
Auto-registration of child types.

Imports each listed module and calls its register(table) hook, if any.
Explicit and debuggable: nothing is imported that is not listed.
"""

import logging
from importlib import import_module
from typing import Iterable, List

from registrar.types.table import TypeTable

logger = logging.getLogger(__name__)


def auto_register_types(table: TypeTable, modules: Iterable[str]) -> List[str]:
    """
    Returns the module paths whose register() hook ran successfully.
    """
    registered = []

    for module_path in modules:
        try:
            module = import_module(module_path)
        except ImportError as exc:
            logger.warning("Skipping type module '%s': %s", module_path, exc)
            continue

        register_fn = getattr(module, "register", None)
        if not callable(register_fn):
            logger.warning("Type module '%s' has no register() hook", module_path)
            continue

        register_fn(table)
        registered.append(module_path)
        logger.debug("Registered types from '%s'", module_path)

    return registered
