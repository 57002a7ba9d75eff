from dataclasses import dataclass


CLOSE_POLICIES = ("fail_fast", "collect")


# -------------------------------------------------
# REGISTRY CONFIG
# -------------------------------------------------
@dataclass
class RegistryConfig:
    """
    Limits and policies for a single registry.

    close_policy:
    - fail_fast: the first child that fails to close aborts close()
    - collect: close every child, then raise all failures together
    """
    key_max_length: int = 256
    type_id_max_length: int = 2048
    close_policy: str = "fail_fast"

    def __post_init__(self):
        if self.close_policy not in CLOSE_POLICIES:
            raise ValueError(
                f"close_policy must be one of {CLOSE_POLICIES}, got {self.close_policy!r}"
            )
        if self.key_max_length <= 0 or self.type_id_max_length <= 0:
            raise ValueError("maximum lengths must be positive")
