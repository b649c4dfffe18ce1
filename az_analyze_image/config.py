import os

from az_analyze_image.utils.environment import read_bool_env

LOG_LEVEL = os.getenv("AZ_ANALYZE_IMAGE_LOG_LEVEL", "WARNING")
WARNINGS_DISABLED = read_bool_env(
    "AZ_ANALYZE_IMAGE_WARNINGS_DISABLED", default=False
)

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"
CONTENT_TYPE_HEADER = "Content-Type"
OCTET_STREAM_CONTENT_TYPE = "application/octet-stream"


class AnalyzeImagePreviewWarning(Warning):
    """Warning emitted when a client targets a preview API version that may change or be retired."""

    pass
