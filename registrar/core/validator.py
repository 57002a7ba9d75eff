from registrar.core.errors import InvalidArgument


def validate_object(value, name: str):
    if value is None:
        raise InvalidArgument(name, "must not be None")
    return value


def validate_string(value, name: str, max_length: int | None = None) -> str:
    """
    Fail fast unless value is a non-empty (after strip) string no longer
    than max_length.
    """
    validate_object(value, name)

    if not isinstance(value, str):
        raise InvalidArgument(name, f"must be a string, got {type(value).__name__}")

    if not value.strip():
        raise InvalidArgument(name, "must not be empty or whitespace")

    if max_length is not None and len(value) > max_length:
        raise InvalidArgument(
            name, f"length {len(value)} exceeds maximum of {max_length}"
        )

    return value


def validate_callable(value, name: str):
    validate_object(value, name)

    if not callable(value):
        raise InvalidArgument(name, f"must be callable, got {type(value).__name__}")

    return value
