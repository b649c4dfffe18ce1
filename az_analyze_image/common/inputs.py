from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ImageUrl:
    """Publicly reachable URL of the image to analyze. Sent as `{"url": ...}`."""

    url: str

    def to_payload(self) -> dict:
        return {"url": self.url}


@dataclass(frozen=True, repr=False)
class ImageData:
    """Raw image bytes. Sent as the request body under `application/octet-stream`."""

    data: bytes

    def __repr__(self) -> str:
        return f"ImageData(<{len(self.data)} bytes>)"


ImageInput = Union[ImageUrl, ImageData]
