from typing import Optional

from az_analyze_image.errors import APICallError
from az_analyze_image.v40.entities import ErrorResponse, ErrorResponseInnerError


class APIError(APICallError):
    """Error envelope returned by the Analyze Image API v4.0.

    Attributes:
        status_code: The HTTP status code of the response.
        error_response: The decoded `ErrorResponse`.
    """

    def __init__(self, status_code: int, error_response: ErrorResponse):
        super().__init__(status_code=status_code, error_response=error_response)

    @property
    def error_response(self) -> ErrorResponse:
        return super().error_response

    @property
    def innererror(self) -> Optional[ErrorResponseInnerError]:
        return self.error_response.error.innererror
