from .table import TypeTable, type_id_for
from .auto_register import auto_register_types

__all__ = ["TypeTable", "type_id_for", "auto_register_types"]
