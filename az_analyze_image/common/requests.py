import re
from types import MappingProxyType
from typing import Mapping

from az_analyze_image.common.secret import Secret
from az_analyze_image.config import (
    CONTENT_TYPE_HEADER,
    OCTET_STREAM_CONTENT_TYPE,
    SUBSCRIPTION_KEY_HEADER,
)
from az_analyze_image.errors import InvalidHeaderValueError

# Only visible ASCII, space and horizontal tab may appear in a header value.
ILLEGAL_HEADER_VALUE_CHARACTER = re.compile(r"[^\t\x20-\x7e]")
SENSITIVE_HEADERS = frozenset({SUBSCRIPTION_KEY_HEADER.lower()})
MIN_KEY_LENGTH_TO_REVEAL_PREFIX = 8


def create_headers(key: Secret) -> Mapping[str, str]:
    """Build the immutable header set shared by every call of a client.

    Args:
        key: The subscription key.

    Returns:
        Read-only mapping with the subscription key and the default content type.

    Raises:
        InvalidHeaderValueError: If the key cannot be used as an HTTP header value.
    """
    key_value = key.value()
    ensure_valid_header_value(name=SUBSCRIPTION_KEY_HEADER, value=key_value)
    return MappingProxyType(
        {
            SUBSCRIPTION_KEY_HEADER: key_value,
            CONTENT_TYPE_HEADER: OCTET_STREAM_CONTENT_TYPE,
        }
    )


def ensure_valid_header_value(name: str, value: str) -> None:
    if ILLEGAL_HEADER_VALUE_CHARACTER.search(value) is not None:
        raise InvalidHeaderValueError(
            f"Invalid header value for {name}: value contains characters not allowed in HTTP headers."
        )


def redact_headers(headers: Mapping[str, str]) -> dict:
    """Copy headers with sensitive values masked, for debug output.

    Args:
        headers: The headers to redact.

    Returns:
        A new dictionary safe to log.
    """
    return {
        name: mask_secret_value(value) if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def redact_secret_from_string(value: str, secret_value: str) -> str:
    """Replace every occurrence of the secret in the string with its masked form.

    Args:
        value: The string to clean.
        secret_value: The raw secret that must not leak.

    Returns:
        The string with the secret masked.
    """
    if not secret_value:
        return value
    return value.replace(secret_value, mask_secret_value(secret_value))


def mask_secret_value(secret_value: str) -> str:
    if len(secret_value) < MIN_KEY_LENGTH_TO_REVEAL_PREFIX:
        return "***"
    return f"{secret_value[:2]}***{secret_value[-2:]}"
