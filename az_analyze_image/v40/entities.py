from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from dataclasses_json import DataClassJsonMixin, config

PixelCount = int
Number = float

DEFAULT_API_VERSION = "2023-04-01-preview"

# Service limit on the size of analyzed images, in bytes. Not enforced client-side.
MAX_IMAGE_SIZE = 20 * 1024 * 1024


def wire_name(name: str) -> dict:
    return config(field_name=name)


class VisualFeature(str, Enum):
    """Visual features that can be requested with `features`."""

    CAPTION = "caption"
    DENSE_CAPTIONS = "denseCaptions"
    OBJECTS = "objects"
    PEOPLE = "people"
    READ = "read"
    SMART_CROPS = "smartCrops"
    TAGS = "tags"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AnalyzeImageOptions:
    """Optional parameters of the v4.0 analyze call.

    The service requires at least one of `features` or `model_name`; the
    client checks this before sending anything.

    Attributes:
        features: Visual features to return, in request order.
        gender_neutral_caption: Gender-neutral captioning for `caption` and
            `denseCaptions`. Sent whenever it is not None, including False.
        language: Output language, "en" on the service side when omitted.
        model_name: Name of a custom trained model.
        smartcrops_aspect_ratios: Comma-separated aspect ratios for `smartCrops`,
            between 0.75 and 1.8.
    """

    features: Optional[List[VisualFeature]] = None
    gender_neutral_caption: Optional[bool] = None
    language: Optional[str] = None
    model_name: Optional[str] = None
    smartcrops_aspect_ratios: Optional[str] = None


@dataclass(frozen=True)
class AdultMatch(DataClassJsonMixin):
    confidence: Number
    is_match: bool = field(metadata=wire_name("isMatch"))


@dataclass(frozen=True)
class AdultResult(DataClassJsonMixin):
    adult: AdultMatch
    gore: AdultMatch
    racy: AdultMatch


@dataclass(frozen=True)
class BoundingBox(DataClassJsonMixin):
    """A bounding box for an area inside an image, in pixels."""

    h: PixelCount
    w: PixelCount
    x: PixelCount
    y: PixelCount


@dataclass(frozen=True)
class CaptionResult(DataClassJsonMixin):
    confidence: Number
    text: str


@dataclass(frozen=True)
class CropRegion(DataClassJsonMixin):
    """Suggested crop, one per requested aspect ratio."""

    aspect_ratio: Number = field(metadata=wire_name("aspectRatio"))
    bounding_box: BoundingBox = field(metadata=wire_name("boundingBox"))


@dataclass(frozen=True)
class DenseCaption(DataClassJsonMixin):
    bounding_box: BoundingBox = field(metadata=wire_name("boundingBox"))
    confidence: Number
    text: str


@dataclass(frozen=True)
class DenseCaptionsResult(DataClassJsonMixin):
    values: List[DenseCaption]


@dataclass(frozen=True)
class Tag(DataClassJsonMixin):
    confidence: Number
    name: str


@dataclass(frozen=True)
class TagsResult(DataClassJsonMixin):
    values: List[Tag]


@dataclass(frozen=True)
class DetectedObject(DataClassJsonMixin):
    bounding_box: BoundingBox = field(metadata=wire_name("boundingBox"))
    tags: List[Tag]
    id: Optional[str] = None


@dataclass(frozen=True)
class ObjectsResult(DataClassJsonMixin):
    values: List[DetectedObject]


@dataclass(frozen=True)
class DetectedPerson(DataClassJsonMixin):
    bounding_box: BoundingBox = field(metadata=wire_name("boundingBox"))
    confidence: Number


@dataclass(frozen=True)
class PeopleResult(DataClassJsonMixin):
    values: List[DetectedPerson]


@dataclass(frozen=True)
class DocumentSpan(DataClassJsonMixin):
    """Region of the concatenated content, as zero-based offset and length."""

    length: int
    offset: int


@dataclass(frozen=True)
class DocumentLine(DataClassJsonMixin):
    """Adjacent sequence of content elements such as words.

    Attributes:
        bounding_box: Polygon of the line as a flat list of coordinates.
        content: Concatenated content of the contained elements in reading order.
        spans: Location of the line in the concatenated content.
    """

    bounding_box: List[Number] = field(metadata=wire_name("boundingBox"))
    content: str
    spans: List[DocumentSpan]


@dataclass(frozen=True)
class DocumentWord(DataClassJsonMixin):
    bounding_box: List[Number] = field(metadata=wire_name("boundingBox"))
    confidence: Number
    content: str
    span: DocumentSpan


@dataclass(frozen=True)
class DocumentPage(DataClassJsonMixin):
    """Content and layout elements extracted from one page of the input.

    Attributes:
        angle: General orientation of the content, clockwise, in (-180, 180].
        height: Height of the page in pixels (images) or inches (PDF).
        lines: Extracted lines.
        page_number: 1-based page number.
        spans: Location of the page in the concatenated content.
        width: Width of the page in pixels (images) or inches (PDF).
        words: Extracted words.
    """

    angle: Number
    height: Number
    lines: List[DocumentLine]
    page_number: int = field(metadata=wire_name("pageNumber"))
    spans: List[DocumentSpan]
    width: Number
    words: List[DocumentWord]


@dataclass(frozen=True)
class DocumentStyle(DataClassJsonMixin):
    confidence: Number
    is_handwritten: bool = field(metadata=wire_name("isHandwritten"))
    spans: List[DocumentSpan]


@dataclass(frozen=True)
class ReadResult(DataClassJsonMixin):
    content: str
    pages: List[DocumentPage]
    string_index_type: str = field(metadata=wire_name("stringIndexType"))
    styles: List[DocumentStyle]


@dataclass(frozen=True)
class SmartCropsResult(DataClassJsonMixin):
    values: List[CropRegion]


@dataclass(frozen=True)
class ImageMetadataApiModel(DataClassJsonMixin):
    height: PixelCount
    width: PixelCount


@dataclass(frozen=True)
class ImagePredictionResult(DataClassJsonMixin):
    """Prediction of a custom model selected with `model_name`."""

    objects_result: ObjectsResult = field(metadata=wire_name("objectsResult"))
    tags_result: TagsResult = field(metadata=wire_name("tagsResult"))


@dataclass(frozen=True)
class ImageAnalysisResult(DataClassJsonMixin):
    """Result of the v4.0 analyze operation.

    Only `metadata` and `model_version` are always present; every `*_result`
    field is None unless the matching feature (or a custom model) was requested.
    """

    metadata: ImageMetadataApiModel
    model_version: str = field(metadata=wire_name("modelVersion"))
    adult_result: Optional[AdultResult] = field(
        default=None, metadata=wire_name("adultResult")
    )
    caption_result: Optional[CaptionResult] = field(
        default=None, metadata=wire_name("captionResult")
    )
    custom_model_result: Optional[ImagePredictionResult] = field(
        default=None, metadata=wire_name("customModelResult")
    )
    dense_captions_result: Optional[DenseCaptionsResult] = field(
        default=None, metadata=wire_name("denseCaptionsResult")
    )
    objects_result: Optional[ObjectsResult] = field(
        default=None, metadata=wire_name("objectsResult")
    )
    people_result: Optional[PeopleResult] = field(
        default=None, metadata=wire_name("peopleResult")
    )
    read_result: Optional[ReadResult] = field(
        default=None, metadata=wire_name("readResult")
    )
    smart_crops_result: Optional[SmartCropsResult] = field(
        default=None, metadata=wire_name("smartCropsResult")
    )
    tags_result: Optional[TagsResult] = field(
        default=None, metadata=wire_name("tagsResult")
    )


@dataclass(frozen=True)
class ErrorResponseInnerError(DataClassJsonMixin):
    code: str
    message: str
    innererror: Optional["ErrorResponseInnerError"] = None


@dataclass(frozen=True)
class ErrorResponseDetails(DataClassJsonMixin):
    """Error info of the v4.0 envelope.

    Attributes:
        code: Error code, e.g. "InvalidRequest".
        message: Error message.
        details: Nested detailed errors, when sent.
        innererror: Detailed error, when sent.
        target: Target of the error, when sent.
    """

    code: str
    message: str
    details: Optional[List["ErrorResponseDetails"]] = None
    innererror: Optional[ErrorResponseInnerError] = None
    target: Optional[str] = None


@dataclass(frozen=True)
class ErrorResponse(DataClassJsonMixin):
    """Error envelope returned by the v4.0 API on non-2xx responses."""

    error: ErrorResponseDetails
