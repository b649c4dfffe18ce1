import os
from typing import Union


def str2bool(
    value: Union[str, bool], variable_name: str = "environment variable"
) -> bool:
    """Parse a 'true'/'false' flag, case-insensitively.

    Args:
        value: Raw flag, or an already parsed boolean.
        variable_name: Name reported when the value cannot be parsed.

    Returns:
        The parsed flag.

    Raises:
        ValueError: If the value is neither 'true' nor 'false'.
    """
    if isinstance(value, bool):
        return value
    normalised = value.strip().lower()
    if normalised == "true":
        return True
    if normalised == "false":
        return False
    raise ValueError(
        f"Expected {variable_name} to be 'true' or 'false', got '{value}'"
    )


def read_bool_env(name: str, default: bool) -> bool:
    """Read an `AZ_ANALYZE_IMAGE_*` flag, falling back to `default` when unset."""
    return str2bool(os.getenv(name, default), variable_name=name)
