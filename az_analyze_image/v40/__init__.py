"""Client for the Azure AI Services Analyze Image API v4.0 (2023-04-01-preview)."""
from az_analyze_image.v40.client import Client, build_query_params, validate_parameters
from az_analyze_image.v40.entities import (
    DEFAULT_API_VERSION,
    MAX_IMAGE_SIZE,
    AdultMatch,
    AdultResult,
    AnalyzeImageOptions,
    BoundingBox,
    CaptionResult,
    CropRegion,
    DenseCaption,
    DenseCaptionsResult,
    DetectedObject,
    DetectedPerson,
    DocumentLine,
    DocumentPage,
    DocumentSpan,
    DocumentStyle,
    DocumentWord,
    ErrorResponse,
    ErrorResponseDetails,
    ErrorResponseInnerError,
    ImageAnalysisResult,
    ImageMetadataApiModel,
    ImagePredictionResult,
    ObjectsResult,
    PeopleResult,
    ReadResult,
    SmartCropsResult,
    Tag,
    TagsResult,
    VisualFeature,
)
from az_analyze_image.v40.errors import APIError
