"""
Registry error taxonomy.

Every failure raised by a registry or one of its children derives from
RegistryError so callers can catch the whole family at once.
"""


class RegistryError(Exception):
    pass


class RegistryClosed(RegistryError):
    """Raised for any call on a registry after close()."""


class KeyConflict(RegistryError):
    def __init__(self, key: str, message: str | None = None):
        self.key = key
        super().__init__(message or f"A child already exists with key='{key}'")


class TypeResolutionError(RegistryError):
    """
    The type identifier could not be resolved, or constructing it failed.
    The underlying failure (if any) is chained as __cause__.
    """

    def __init__(self, type_id, message: str):
        self.type_id = type_id
        super().__init__(message)


class ChildClosed(RegistryError):
    """Raised for any call on a child after it was closed."""


class InvalidArgument(RegistryError, ValueError):
    def __init__(self, argument: str, message: str):
        self.argument = argument
        super().__init__(f"{argument}: {message}")


class ChildNotFound(RegistryError, KeyError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self):
        return f"No child registered under key='{self.key}'"


class RegistryCloseError(RegistryError):
    """
    Raised by close() under the "collect" close policy when one or more
    children failed to close. The registry is closed regardless.
    """

    def __init__(self, errors: dict):
        self.errors = dict(errors)
        keys = ", ".join(sorted(self.errors))
        super().__init__(f"{len(self.errors)} child(ren) failed to close: {keys}")
