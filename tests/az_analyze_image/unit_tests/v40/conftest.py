import pytest


@pytest.fixture(scope="function")
def people_analysis_response() -> dict:
    return {
        "modelVersion": "2023-02-01-preview",
        "metadata": {"width": 1038, "height": 692},
        "peopleResult": {
            "values": [
                {
                    "boundingBox": {"x": 0, "y": 0, "w": 1038, "h": 692},
                    "confidence": 0.9153,
                },
                {
                    "boundingBox": {"x": 433, "y": 113, "w": 139, "h": 416},
                    "confidence": 0.0042,
                },
            ]
        },
    }


@pytest.fixture(scope="function")
def full_analysis_response() -> dict:
    return {
        "modelVersion": "2023-02-01-preview",
        "metadata": {"width": 1038, "height": 692},
        "captionResult": {
            "text": "a man pointing at a screen",
            "confidence": 0.7767,
        },
        "denseCaptionsResult": {
            "values": [
                {
                    "text": "a man pointing at a screen",
                    "confidence": 0.7767,
                    "boundingBox": {"x": 0, "y": 0, "w": 1038, "h": 692},
                }
            ]
        },
        "objectsResult": {
            "values": [
                {
                    "boundingBox": {"x": 730, "y": 66, "w": 135, "h": 85},
                    "tags": [{"name": "kitchen appliance", "confidence": 0.501}],
                }
            ]
        },
        "tagsResult": {
            "values": [
                {"name": "text", "confidence": 0.9968},
                {"name": "person", "confidence": 0.9423},
            ]
        },
        "smartCropsResult": {
            "values": [
                {
                    "aspectRatio": 0.9,
                    "boundingBox": {"x": 238, "y": 0, "w": 622, "h": 692},
                }
            ]
        },
        "adultResult": {
            "adult": {"isMatch": False, "confidence": 0.0012},
            "racy": {"isMatch": False, "confidence": 0.0021},
            "gore": {"isMatch": False, "confidence": 0.0014},
        },
        "readResult": {
            "stringIndexType": "TextElements",
            "content": "9:35 AM",
            "pages": [
                {
                    "height": 692.0,
                    "width": 1038.0,
                    "angle": 0.3048,
                    "pageNumber": 1,
                    "words": [
                        {
                            "content": "9:35",
                            "boundingBox": [131, 130, 171, 130, 171, 149, 130, 149],
                            "confidence": 0.993,
                            "span": {"offset": 0, "length": 4},
                        }
                    ],
                    "spans": [{"offset": 0, "length": 7}],
                    "lines": [
                        {
                            "content": "9:35 AM",
                            "boundingBox": [130, 129, 215, 130, 215, 149, 130, 148],
                            "spans": [{"offset": 0, "length": 7}],
                        }
                    ],
                }
            ],
            "styles": [
                {
                    "isHandwritten": True,
                    "spans": [{"offset": 0, "length": 4}],
                    "confidence": 0.6,
                }
            ],
        },
    }


@pytest.fixture(scope="function")
def invalid_request_error_response() -> dict:
    return {
        "error": {
            "code": "InvalidRequest",
            "message": "Image size is too big.",
            "innererror": {
                "code": "InvalidImageSize",
                "message": "Image size is too big.",
            },
        }
    }
