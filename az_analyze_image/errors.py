from typing import Any, Optional


class AnalyzeImageClientError(Exception):
    """Base class for Analyze Image client errors."""

    pass


class ValidationError(AnalyzeImageClientError):
    """Error detected locally, before any request is sent."""

    pass


class InvalidHeaderValueError(ValidationError):
    """Error for an API key that cannot be sent as an HTTP header value."""

    pass


class NoFeaturesOrModelNameError(ValidationError):
    """Error for v4.0 calls that specify neither `features` nor `model_name`."""

    def __init__(self):
        super().__init__("Either `features` or `model_name` must be specified.")


class SecretZeroizedError(AnalyzeImageClientError):
    """Error for reading a secret whose value was already wiped."""

    pass


class TransportError(AnalyzeImageClientError):
    """Error raised when the HTTP exchange itself fails."""

    pass


class ResponseDecodingError(TransportError):
    """Error for response bodies that do not match the expected schema.

    Attributes:
        status_code: HTTP status of the response that could not be decoded.
    """

    def __init__(self, description: str, status_code: int):
        super().__init__(description)
        self.__status_code = status_code

    @property
    def status_code(self) -> int:
        """HTTP status of the response that could not be decoded."""
        return self.__status_code


class APICallError(AnalyzeImageClientError):
    """Error reported by the Analyze Image service through its error envelope.

    Each API version raises its own subclass that knows the shape of
    `error_response`.

    Attributes:
        status_code: The HTTP status code of the response.
        error_response: The decoded error envelope.
    """

    def __init__(self, status_code: int, error_response: Any):
        super().__init__(
            f"API error response ({status_code}): {self._describe(error_response)}"
        )
        self.__status_code = status_code
        self.__error_response = error_response

    @property
    def status_code(self) -> int:
        """The HTTP status code of the response."""
        return self.__status_code

    @property
    def error_response(self) -> Any:
        """The decoded error envelope."""
        return self.__error_response

    @property
    def code(self) -> Optional[str]:
        """Top-level error code as sent by the service."""
        return self._code_of(self.__error_response)

    @property
    def message(self) -> Optional[str]:
        """Top-level error message as sent by the service."""
        return self.__error_response.error.message

    @staticmethod
    def _code_of(error_response: Any) -> Optional[str]:
        code = error_response.error.code
        return getattr(code, "value", code)

    @classmethod
    def _describe(cls, error_response: Any) -> str:
        return f"{cls._code_of(error_response)}: {error_response.error.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"status_code={self.status_code}, "
            f"code='{self.code}', "
            f"message='{self.message}')"
        )
