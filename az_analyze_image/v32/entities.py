from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from dataclasses_json import DataClassJsonMixin, config

PixelCount = int
Number = float

# Service limit on the size of analyzed images, in bytes. Not enforced client-side.
MAX_IMAGE_SIZE = 4 * 1024 * 1024


def wire_name(name: str) -> dict:
    return config(field_name=name)


class VisualFeatureTypes(str, Enum):
    """Visual feature types that can be requested with `visualFeatures`.

    Attributes:
        ADULT: Detects pornographic, gory and racy content.
        BRANDS: Detects brands and their approximate location. English only.
        CATEGORIES: Categorizes image content according to the service taxonomy.
        COLOR: Determines accent and dominant colors and black & white images.
        DESCRIPTION: Describes the image content with complete English sentences.
        FACES: Detects faces with coordinates, gender and age.
        IMAGE_TYPE: Detects clip art and line drawings.
        OBJECTS: Detects objects and their approximate location. English only.
        TAGS: Tags the image with words related to its content.
    """

    ADULT = "Adult"
    BRANDS = "Brands"
    CATEGORIES = "Categories"
    COLOR = "Color"
    DESCRIPTION = "Description"
    FACES = "Faces"
    IMAGE_TYPE = "ImageType"
    OBJECTS = "Objects"
    TAGS = "Tags"


class Details(str, Enum):
    """Domain-specific details that can be requested with `details`."""

    CELEBRITIES = "Celebrities"
    LANDMARKS = "Landmarks"


class DescriptionExclude(str, Enum):
    """Domain models that can be turned off when generating the description."""

    CELEBRITIES = "Celebrities"
    LANDMARKS = "Landmarks"


class Gender(str, Enum):
    FEMALE = "Female"
    MALE = "Male"


class ComputerVisionErrorCodes(str, Enum):
    """Top-level error codes of the v3.2 error envelope."""

    INTERNAL_SERVER_ERROR = "InternalServerError"
    INVALID_ARGUMENT = "InvalidArgument"
    INVALID_REQUEST = "InvalidRequest"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"

    @property
    def description(self) -> str:
        return _ERROR_CODE_DESCRIPTIONS[self]


_ERROR_CODE_DESCRIPTIONS = {
    ComputerVisionErrorCodes.INTERNAL_SERVER_ERROR: "Internal Server Error",
    ComputerVisionErrorCodes.INVALID_ARGUMENT: "Invalid Argument",
    ComputerVisionErrorCodes.INVALID_REQUEST: "Invalid Request",
    ComputerVisionErrorCodes.SERVICE_UNAVAILABLE: "Service Unavailable",
}


class ComputerVisionInnerErrorCodeValue(str, Enum):
    """Detailed error codes carried by `innererror`."""

    BAD_ARGUMENT = "BadArgument"
    CANCELLED_REQUEST = "CancelledRequest"
    DETECT_FACE_ERROR = "DetectFaceError"
    FAILED_TO_PROCESS = "FailedToProcess"
    INTERNAL_SERVER_ERROR = "InternalServerError"
    INVALID_DETAILS = "InvalidDetails"
    INVALID_IMAGE_FORMAT = "InvalidImageFormat"
    INVALID_IMAGE_SIZE = "InvalidImageSize"
    INVALID_IMAGE_URL = "InvalidImageUrl"
    INVALID_MODEL = "InvalidModel"
    INVALID_THUMBNAIL_SIZE = "InvalidThumbnailSize"
    # documented as NotSupportedFeature, sent as UnsupportedFeature
    NOT_SUPPORTED_FEATURE = "UnsupportedFeature"
    NOT_SUPPORTED_IMAGE = "NotSupportedImage"
    NOT_SUPPORTED_LANGUAGE = "NotSupportedLanguage"
    NOT_SUPPORTED_VISUAL_FEATURE = "NotSupportedVisualFeature"
    STORAGE_EXCEPTION = "StorageException"
    TIMEOUT = "Timeout"
    UNSPECIFIED = "Unspecified"
    UNSUPPORTED_MEDIA_TYPE = "UnsupportedMediaType"


@dataclass(frozen=True)
class AnalyzeImageOptions:
    """Optional parameters of the v3.2 analyze call.

    Every field defaults to None, which leaves the parameter out of the request.
    An empty list or empty string is treated the same way. With no visual
    features the service answers as if `Categories` had been requested.

    Attributes:
        visual_features: Visual feature types to return, in request order.
        details: Domain-specific details to return.
        language: Output language, "en" on the service side when omitted.
        description_exclude: Domain models to turn off for the description.
        model_version: "latest" or a dated version such as "2021-05-01".
    """

    visual_features: Optional[List[VisualFeatureTypes]] = None
    details: Optional[List[Details]] = None
    language: Optional[str] = None
    description_exclude: Optional[List[DescriptionExclude]] = None
    model_version: Optional[str] = None


@dataclass(frozen=True)
class AdultInfo(DataClassJsonMixin):
    """Whether the image contains adult-oriented, racy or gory content.

    Attributes:
        adult_score: Score from 0 to 1 of adult-oriented content.
        gore_score: Score from 0 to 1 of gory content.
        is_adult_content: Whether the image contains adult-oriented content.
        is_gory_content: Whether the image is gory.
        is_racy_content: Whether the image is racy.
        racy_score: Score from 0 to 1 of suggestive content.
    """

    adult_score: Number = field(metadata=wire_name("adultScore"))
    gore_score: Number = field(metadata=wire_name("goreScore"))
    is_adult_content: bool = field(metadata=wire_name("isAdultContent"))
    is_gory_content: bool = field(metadata=wire_name("isGoryContent"))
    is_racy_content: bool = field(metadata=wire_name("isRacyContent"))
    racy_score: Number = field(metadata=wire_name("racyScore"))


@dataclass(frozen=True)
class BoundingRect(DataClassJsonMixin):
    """A bounding box for an area inside an image, in pixels."""

    h: PixelCount
    w: PixelCount
    x: PixelCount
    y: PixelCount


@dataclass(frozen=True)
class FaceRectangle(DataClassJsonMixin):
    """Rectangle of a face, in pixels from the top-left corner."""

    height: PixelCount
    left: PixelCount
    top: PixelCount
    width: PixelCount


@dataclass(frozen=True)
class CelebritiesModel(DataClassJsonMixin):
    confidence: Number
    face_rectangle: FaceRectangle = field(metadata=wire_name("faceRectangle"))
    name: str


@dataclass(frozen=True)
class LandmarksModel(DataClassJsonMixin):
    confidence: Number
    name: str


@dataclass(frozen=True)
class CategoryDetail(DataClassJsonMixin):
    celebrities: Optional[List[CelebritiesModel]] = None
    landmarks: Optional[List[LandmarksModel]] = None


@dataclass(frozen=True)
class Category(DataClassJsonMixin):
    """An identified category.

    Attributes:
        name: Name of the category.
        score: Scoring of the category.
        detail: Celebrities and landmarks, when details were requested.
    """

    name: str
    score: Number
    detail: Optional[CategoryDetail] = None


@dataclass(frozen=True)
class ColorInfo(DataClassJsonMixin):
    accent_color: str = field(metadata=wire_name("accentColor"))
    dominant_color_background: str = field(
        metadata=wire_name("dominantColorBackground")
    )
    dominant_color_foreground: str = field(
        metadata=wire_name("dominantColorForeground")
    )
    dominant_colors: List[str] = field(metadata=wire_name("dominantColors"))
    is_bw_img: bool = field(metadata=wire_name("isBWImg"))


@dataclass(frozen=True)
class DetectedBrand(DataClassJsonMixin):
    confidence: Number
    name: str
    rectangle: BoundingRect


@dataclass(frozen=True)
class ObjectHierarchy(DataClassJsonMixin):
    """Parent of a detected object in the service taxonomy, e.g. 'dog' for 'bulldog'."""

    confidence: Number
    object: str
    parent: Optional["ObjectHierarchy"] = None


@dataclass(frozen=True)
class DetectedObject(DataClassJsonMixin):
    confidence: Number
    object: str
    rectangle: BoundingRect
    parent: Optional[ObjectHierarchy] = None


@dataclass(frozen=True)
class FaceDescription(DataClassJsonMixin):
    face_rectangle: FaceRectangle = field(metadata=wire_name("faceRectangle"))
    age: Optional[int] = None
    gender: Optional[Gender] = None


@dataclass(frozen=True)
class ImageCaption(DataClassJsonMixin):
    confidence: Number
    text: str


@dataclass(frozen=True)
class ImageDescriptionDetails(DataClassJsonMixin):
    """Captions sorted by confidence, along with description tags."""

    captions: List[ImageCaption]
    tags: List[str]


@dataclass(frozen=True)
class ImageMetadata(DataClassJsonMixin):
    format: str
    height: PixelCount
    width: PixelCount


@dataclass(frozen=True)
class ImageTag(DataClassJsonMixin):
    confidence: Number
    name: str
    hint: Optional[str] = None


@dataclass(frozen=True)
class ImageType(DataClassJsonMixin):
    """Clip art and line drawing classification.

    Attributes:
        clipart_type: 0 (none), 1 (ambiguous), 2 (normal) or 3 (good).
        line_drawing_type: 0 (none) or 1.
    """

    clipart_type: int = field(metadata=wire_name("clipArtType"))
    line_drawing_type: int = field(metadata=wire_name("lineDrawingType"))


@dataclass(frozen=True)
class ImageAnalysis(DataClassJsonMixin):
    """Result of the v3.2 analyze operation.

    Only `metadata`, `model_version` and `request_id` are always present;
    every other field is None unless the matching feature was requested (or,
    for `categories`, unless no feature was requested at all).
    """

    metadata: ImageMetadata
    model_version: str = field(metadata=wire_name("modelVersion"))
    request_id: str = field(metadata=wire_name("requestId"))
    adult: Optional[AdultInfo] = None
    brands: Optional[List[DetectedBrand]] = None
    categories: Optional[List[Category]] = None
    color: Optional[ColorInfo] = None
    description: Optional[ImageDescriptionDetails] = None
    faces: Optional[List[FaceDescription]] = None
    image_type: Optional[ImageType] = field(
        default=None, metadata=wire_name("imageType")
    )
    objects: Optional[List[DetectedObject]] = None
    tags: Optional[List[ImageTag]] = None


@dataclass(frozen=True)
class ComputerVisionInnerError(DataClassJsonMixin):
    code: ComputerVisionInnerErrorCodeValue
    message: str


@dataclass(frozen=True)
class ComputerVisionError(DataClassJsonMixin):
    code: ComputerVisionErrorCodes
    innererror: ComputerVisionInnerError
    message: str


@dataclass(frozen=True)
class ComputerVisionErrorResponse(DataClassJsonMixin):
    """Error envelope returned by the v3.2 API on non-2xx responses."""

    error: ComputerVisionError
