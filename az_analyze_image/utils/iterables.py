from enum import Enum
from typing import Iterable, Union


def join_values(values: Iterable[Union[Enum, str]], separator: str = ",") -> str:
    """Join enum wire values (or plain strings) in the given order.

    Args:
        values: Elements to join.
        separator: Separator placed between elements.

    Returns:
        The joined string.
    """
    return separator.join(
        value.value if isinstance(value, Enum) else str(value) for value in values
    )
