"""Client for the Azure AI Services Analyze Image API v4.0 (2023-04-01-preview).

Image constraints imposed by the API:
- JPEG, PNG, GIF, BMP, WEBP, ICO, TIFF or MPO format.
- Less than 20 MiB (`MAX_IMAGE_SIZE`).
- Dimensions greater than 50 x 50 and less than 16,000 x 16,000 pixels.
"""

from typing import List, Optional, Tuple

from az_analyze_image.common.executors import (
    RequestData,
    make_request,
    make_request_async,
    prepare_request_data,
)
from az_analyze_image.common.inputs import ImageData, ImageInput, ImageUrl
from az_analyze_image.common.requests import create_headers
from az_analyze_image.common.responses import handle_response
from az_analyze_image.common.secret import Secret
from az_analyze_image.errors import NoFeaturesOrModelNameError, SecretZeroizedError
from az_analyze_image.utils.decorators import preview
from az_analyze_image.utils.iterables import join_values
from az_analyze_image.utils.logging import get_logger
from az_analyze_image.v40.entities import (
    DEFAULT_API_VERSION,
    AnalyzeImageOptions,
    ErrorResponse,
    ImageAnalysisResult,
)
from az_analyze_image.v40.errors import APIError

ANALYZE_PATH = "computervision/imageanalysis:analyze"

logger = get_logger(__name__)


class Client:
    """Client for the Analyze Image API v4.0.

    Every analyze call needs `features` or `model_name` in its options; the
    check happens before any request is sent.

    Example:
        >>> with Client(key=os.environ["CV_KEY"], endpoint=os.environ["CV_ENDPOINT"]) as client:
        ...     analysis = client.analyze_image_url(
        ...         image_url="https://example.com/people.jpg",
        ...         options=AnalyzeImageOptions(features=[VisualFeature.PEOPLE]),
        ...     )
        ...     people = analysis.people_result.values
    """

    @preview(info=f"api-version {DEFAULT_API_VERSION} may change or be retired.")
    def __init__(self, key: str, endpoint: str, timeout: Optional[float] = None):
        """Create a new client.

        Args:
            key: Azure AI Services key.
            endpoint: Azure AI Services Computer Vision endpoint, ending with "/".
            timeout: Optional transport timeout in seconds. None waits indefinitely.

        Raises:
            InvalidHeaderValueError: If the key cannot be sent as an HTTP header value.
        """
        secret = Secret(key)
        try:
            headers = create_headers(key=secret)
        except BaseException:
            secret.zeroize()
            raise
        self.__secret = secret
        self.__headers = headers
        self.__url = f"{endpoint}{ANALYZE_PATH}"
        self.__timeout = timeout

    @property
    def url(self) -> str:
        return self.__url

    def close(self) -> None:
        self.__secret.zeroize()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(url='{self.__url}', key={self.__secret!r})"

    def analyze_image_url(
        self,
        image_url: str,
        options: Optional[AnalyzeImageOptions] = None,
    ) -> ImageAnalysisResult:
        """Analyze the image behind a publicly reachable URL.

        Args:
            image_url: Publicly reachable URL of an image.
            options: Parameters of the call, naming `features` or `model_name`.

        Returns:
            ImageAnalysisResult: The decoded analysis.

        Raises:
            NoFeaturesOrModelNameError: If neither `features` nor `model_name` is set.
            APIError: If the service answered with its error envelope.
            TransportError: If the call failed or the response could not be decoded.
        """
        return self._analyze(image_input=ImageUrl(url=image_url), options=options)

    def analyze_image(
        self,
        image_data: bytes,
        options: Optional[AnalyzeImageOptions] = None,
    ) -> ImageAnalysisResult:
        """Analyze raw image bytes. See `analyze_image_url` for errors."""
        return self._analyze(image_input=ImageData(data=image_data), options=options)

    async def analyze_image_url_async(
        self,
        image_url: str,
        options: Optional[AnalyzeImageOptions] = None,
    ) -> ImageAnalysisResult:
        return await self._analyze_async(
            image_input=ImageUrl(url=image_url), options=options
        )

    async def analyze_image_async(
        self,
        image_data: bytes,
        options: Optional[AnalyzeImageOptions] = None,
    ) -> ImageAnalysisResult:
        return await self._analyze_async(
            image_input=ImageData(data=image_data), options=options
        )

    def _analyze(
        self, image_input: ImageInput, options: Optional[AnalyzeImageOptions]
    ) -> ImageAnalysisResult:
        request_data = self._prepare_request(image_input=image_input, options=options)
        status_code, body = make_request(request_data)
        return _handle_response(status_code=status_code, body=body)

    async def _analyze_async(
        self, image_input: ImageInput, options: Optional[AnalyzeImageOptions]
    ) -> ImageAnalysisResult:
        request_data = self._prepare_request(image_input=image_input, options=options)
        status_code, body = await make_request_async(request_data)
        return _handle_response(status_code=status_code, body=body)

    def _prepare_request(
        self, image_input: ImageInput, options: Optional[AnalyzeImageOptions]
    ) -> RequestData:
        options = options or AnalyzeImageOptions()
        validate_parameters(options=options)
        if self.__secret.zeroized:
            raise SecretZeroizedError("Client was closed and its key zeroized.")
        return prepare_request_data(
            url=self.__url,
            headers=self.__headers,
            parameters=build_query_params(options=options),
            image_input=image_input,
            timeout=self.__timeout,
        )


def validate_parameters(options: AnalyzeImageOptions) -> None:
    # An empty `features` list still counts as set.
    if options.features is None and options.model_name is None:
        raise NoFeaturesOrModelNameError()


def build_query_params(options: AnalyzeImageOptions) -> List[Tuple[str, str]]:
    """Build the query of the v4.0 call.

    POST {endpoint}computervision/imageanalysis:analyze?api-version=...&features=...&gender-neutral-caption=...&language=...&model-name=...&smartcrops-aspect-ratios=...

    `api-version` is always first. `gender-neutral-caption` is sent whenever it
    is not None; the other options are left out when absent or empty.

    Args:
        options: Parameters of the call.

    Returns:
        Ordered list of query parameters.
    """
    query_params = [("api-version", DEFAULT_API_VERSION)]
    if options.features:
        query_params.append(("features", join_values(options.features)))
    if options.gender_neutral_caption is not None:
        query_params.append(
            (
                "gender-neutral-caption",
                "true" if options.gender_neutral_caption else "false",
            )
        )
    if options.language:
        query_params.append(("language", options.language))
    if options.model_name:
        query_params.append(("model-name", options.model_name))
    if options.smartcrops_aspect_ratios:
        query_params.append(
            ("smartcrops-aspect-ratios", options.smartcrops_aspect_ratios)
        )
    logger.debug("Query parameters: %s", query_params)
    return query_params


def _handle_response(status_code: int, body: bytes) -> ImageAnalysisResult:
    return handle_response(
        status_code=status_code,
        body=body,
        result_class=ImageAnalysisResult,
        error_response_class=ErrorResponse,
        api_error_factory=APIError,
    )
