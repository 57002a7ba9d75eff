from registrar.core.child import SettingsChild
from registrar.core.registry import Registry
from registrar.core.validator import validate_object


class SettingsRegistry(Registry):
    """
    A registry whose children receive an opaque settings value at
    initialization. The settings are passed through untouched.
    """

    child_contract = SettingsChild

    def create(self, key, type_id=None, *, settings=None):
        with self._lock:
            self._check_open()
            validate_object(settings, "settings")
            return self._create(key, type_id, settings=settings)
