import warnings

from az_analyze_image.common.secret import Secret
from az_analyze_image.config import WARNINGS_DISABLED, AnalyzeImagePreviewWarning
from az_analyze_image.errors import (
    AnalyzeImageClientError,
    APICallError,
    InvalidHeaderValueError,
    NoFeaturesOrModelNameError,
    ResponseDecodingError,
    SecretZeroizedError,
    TransportError,
    ValidationError,
)

# AZ_ANALYZE_IMAGE_WARNINGS_DISABLED=true silences the preview warning
# emitted when a v4.0 client is created.
if WARNINGS_DISABLED:
    warnings.simplefilter("ignore", AnalyzeImagePreviewWarning)

try:
    from az_analyze_image.version import __version__
except ImportError:
    __version__ = "development"
