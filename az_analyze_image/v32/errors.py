from az_analyze_image.errors import APICallError
from az_analyze_image.v32.entities import (
    ComputerVisionErrorResponse,
    ComputerVisionInnerErrorCodeValue,
)


class APIError(APICallError):
    """Error envelope returned by the Analyze Image API v3.2.

    Attributes:
        status_code: The HTTP status code of the response.
        error_response: The decoded `ComputerVisionErrorResponse`.
    """

    def __init__(self, status_code: int, error_response: ComputerVisionErrorResponse):
        super().__init__(status_code=status_code, error_response=error_response)

    @property
    def error_response(self) -> ComputerVisionErrorResponse:
        return super().error_response

    @property
    def inner_code(self) -> ComputerVisionInnerErrorCodeValue:
        """Detailed error code from `innererror`."""
        return self.error_response.error.innererror.code
