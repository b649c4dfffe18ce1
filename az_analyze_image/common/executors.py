import asyncio
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Tuple

import aiohttp
import requests
from aiohttp import ClientError
from requests import RequestException

from az_analyze_image.common.inputs import ImageData, ImageInput, ImageUrl
from az_analyze_image.common.requests import (
    redact_headers,
    redact_secret_from_string,
)
from az_analyze_image.config import CONTENT_TYPE_HEADER, SUBSCRIPTION_KEY_HEADER
from az_analyze_image.errors import TransportError
from az_analyze_image.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RequestData:
    """Data class for the single analyze request.

    Attributes:
        url: The URL of the request.
        headers: The headers of the request.
        parameters: Ordered query parameters.
        data: Raw body, used for image bytes.
        payload: JSON body, used for image URLs.
        timeout: Transport timeout in seconds, None to wait indefinitely.
    """

    url: str
    headers: Mapping[str, str]
    parameters: List[Tuple[str, str]]
    data: Optional[bytes]
    payload: Optional[dict]
    timeout: Optional[float] = None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(url='{self.url}', "
            f"headers={redact_headers(self.headers)}, "
            f"parameters={self.parameters})"
        )


def prepare_request_data(
    url: str,
    headers: Mapping[str, str],
    parameters: List[Tuple[str, str]],
    image_input: ImageInput,
    timeout: Optional[float] = None,
) -> RequestData:
    """Prepare request data for the given image input.

    URL inputs are sent as JSON, so the default octet-stream content type is
    dropped and the transport sets `application/json` itself.

    Args:
        url: The URL of the request.
        headers: The client's default headers.
        parameters: Ordered query parameters.
        image_input: The image reference or bytes.
        timeout: Transport timeout in seconds.

    Returns:
        The request data.
    """
    if isinstance(image_input, ImageUrl):
        return RequestData(
            url=url,
            headers={
                name: value
                for name, value in headers.items()
                if name.lower() != CONTENT_TYPE_HEADER.lower()
            },
            parameters=parameters,
            data=None,
            payload=image_input.to_payload(),
            timeout=timeout,
        )
    if isinstance(image_input, ImageData):
        return RequestData(
            url=url,
            headers=dict(headers),
            parameters=parameters,
            data=image_input.data,
            payload=None,
            timeout=timeout,
        )
    raise TypeError(
        f"Expected ImageUrl or ImageData as image input, got {type(image_input).__name__}"
    )


def _secret_in(request_data: RequestData) -> str:
    return request_data.headers.get(SUBSCRIPTION_KEY_HEADER, "")


def wrap_errors(function: Callable) -> Callable:
    def decorate(request_data: RequestData) -> Any:
        try:
            return function(request_data)
        except RequestException as error:
            raise TransportError(
                "Error with server connection: "
                f"{redact_secret_from_string(str(error), _secret_in(request_data))}"
            ) from error

    return decorate


def wrap_errors_async(function: Callable) -> Callable:
    async def decorate(request_data: RequestData) -> Any:
        try:
            return await function(request_data)
        except (ClientError, asyncio.TimeoutError) as error:
            raise TransportError(
                "Error with server connection: "
                f"{redact_secret_from_string(str(error), _secret_in(request_data))}"
            ) from error

    return decorate


@wrap_errors
def make_request(request_data: RequestData) -> Tuple[int, bytes]:
    """Send the request with `requests`.

    Args:
        request_data: The request data.

    Returns:
        Status code and raw body of the response.
    """
    logger.debug("POST %r", request_data)
    response = requests.post(
        request_data.url,
        headers=dict(request_data.headers),
        params=request_data.parameters,
        data=request_data.data,
        json=request_data.payload,
        timeout=request_data.timeout,
    )
    logger.debug("Response status: %s", response.status_code)
    return response.status_code, response.content


@wrap_errors_async
async def make_request_async(request_data: RequestData) -> Tuple[int, bytes]:
    """Send the request with `aiohttp`.

    Args:
        request_data: The request data.

    Returns:
        Status code and raw body of the response.
    """
    logger.debug("POST %r", request_data)
    timeout = aiohttp.ClientTimeout(total=request_data.timeout)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        async with session.post(
            request_data.url,
            headers=dict(request_data.headers),
            params=request_data.parameters,
            data=request_data.data,
            json=request_data.payload,
        ) as response:
            body = await response.read()
            logger.debug("Response status: %s", response.status)
            return response.status, body
