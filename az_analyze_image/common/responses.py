import json
from typing import Callable, Type, TypeVar

from dataclasses_json import DataClassJsonMixin

from az_analyze_image.errors import APICallError, ResponseDecodingError

T = TypeVar("T", bound=DataClassJsonMixin)

DECODING_ERRORS = (ValueError, KeyError, TypeError, AttributeError)


def response_is_successful(status_code: int) -> bool:
    return 200 <= status_code < 300


def decode_body(body: bytes, target_class: Type[T], status_code: int) -> T:
    """Decode a JSON response body into the given result class.

    Args:
        body: Raw response body.
        target_class: Dataclass the body is expected to match.
        status_code: HTTP status of the response, kept for error reporting.

    Returns:
        The decoded instance.

    Raises:
        ResponseDecodingError: If the body is not JSON or does not match the schema.
    """
    try:
        return target_class.from_dict(json.loads(body))
    except DECODING_ERRORS as error:
        raise ResponseDecodingError(
            description=(
                f"Could not decode response body (status {status_code}) "
                f"as {target_class.__name__}: {error!r}"
            ),
            status_code=status_code,
        ) from error


def handle_response(
    status_code: int,
    body: bytes,
    result_class: Type[T],
    error_response_class: Type[DataClassJsonMixin],
    api_error_factory: Callable[[int, DataClassJsonMixin], APICallError],
) -> T:
    """Turn a raw response into a result or raise the version's API error.

    Args:
        status_code: HTTP status of the response.
        body: Raw response body.
        result_class: Success schema of the API version.
        error_response_class: Error envelope schema of the API version.
        api_error_factory: Builds the API error from status and decoded envelope.

    Returns:
        The decoded success result.

    Raises:
        APICallError: On non-2xx status with a decodable error envelope.
        ResponseDecodingError: If either body cannot be decoded.
    """
    if response_is_successful(status_code=status_code):
        return decode_body(
            body=body, target_class=result_class, status_code=status_code
        )
    error_response = decode_body(
        body=body, target_class=error_response_class, status_code=status_code
    )
    raise api_error_factory(status_code, error_response)
