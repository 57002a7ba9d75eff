DEFAULT_CONFIG = {
    # -----------------------------
    # REGISTRY LIMITS & POLICY
    # -----------------------------
    "registry": {
        "key_max_length": 256,
        "type_id_max_length": 2048,
        "close_policy": "fail_fast",   # fail_fast | collect
    },

    # -----------------------------
    # CHILD TYPES (OPTIONAL)
    # -----------------------------
    # Modules exposing a register(table) hook
    "types": {
        "modules": [],
    },

    # -----------------------------
    # OBSERVERS (OPTIONAL)
    # -----------------------------
    "observability": {
        "observers": [],
    },

    # -----------------------------
    # LOGGING
    # -----------------------------
    "logging": {
        "level": "INFO",
    },
}
