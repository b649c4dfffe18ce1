"""Client for the Azure AI Services Analyze Image API v3.2.

Types in `entities` map one-to-one to the API definitions of this version and
are not shared with the v4.0 module.
"""
from az_analyze_image.v32.client import Client, build_query_params
from az_analyze_image.v32.entities import (
    MAX_IMAGE_SIZE,
    AdultInfo,
    AnalyzeImageOptions,
    BoundingRect,
    Category,
    CategoryDetail,
    CelebritiesModel,
    ColorInfo,
    ComputerVisionError,
    ComputerVisionErrorCodes,
    ComputerVisionErrorResponse,
    ComputerVisionInnerError,
    ComputerVisionInnerErrorCodeValue,
    DescriptionExclude,
    DetectedBrand,
    DetectedObject,
    Details,
    FaceDescription,
    FaceRectangle,
    Gender,
    ImageAnalysis,
    ImageCaption,
    ImageDescriptionDetails,
    ImageMetadata,
    ImageTag,
    ImageType,
    LandmarksModel,
    ObjectHierarchy,
    VisualFeatureTypes,
)
from az_analyze_image.v32.errors import APIError
