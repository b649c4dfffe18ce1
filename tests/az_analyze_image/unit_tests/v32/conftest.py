import pytest


@pytest.fixture(scope="function")
def full_analysis_response() -> dict:
    return {
        "categories": [
            {
                "name": "people_group",
                "score": 0.85546875,
                "detail": {
                    "celebrities": [
                        {
                            "name": "Satya Nadella",
                            "confidence": 0.999,
                            "faceRectangle": {
                                "left": 597,
                                "top": 162,
                                "width": 248,
                                "height": 248,
                            },
                        }
                    ]
                },
            },
            {"name": "outdoor_", "score": 0.00390625, "detail": {"landmarks": []}},
        ],
        "adult": {
            "isAdultContent": False,
            "isRacyContent": False,
            "isGoryContent": False,
            "adultScore": 0.0934349000453949,
            "racyScore": 0.068613491952419281,
            "goreScore": 0.08928389008070282,
        },
        "color": {
            "dominantColorForeground": "Brown",
            "dominantColorBackground": "Brown",
            "dominantColors": ["Brown", "Black"],
            "accentColor": "873B59",
            "isBWImg": False,
        },
        "imageType": {"clipArtType": 0, "lineDrawingType": 0},
        "tags": [
            {"name": "person", "confidence": 0.98979085683822632},
            {"name": "man", "confidence": 0.94493889808654785, "hint": "human"},
        ],
        "description": {
            "tags": ["person", "man", "outdoor"],
            "captions": [
                {
                    "text": "Satya Nadella sitting on a bench",
                    "confidence": 0.48293603002174407,
                }
            ],
        },
        "faces": [
            {
                "age": 44,
                "gender": "Male",
                "faceRectangle": {
                    "left": 593,
                    "top": 160,
                    "width": 250,
                    "height": 250,
                },
            }
        ],
        "objects": [
            {
                "rectangle": {"x": 0, "y": 0, "w": 50, "h": 50},
                "object": "tree",
                "confidence": 0.9,
                "parent": {
                    "object": "plant",
                    "confidence": 0.95,
                    "parent": {"object": "organism", "confidence": 0.97},
                },
            }
        ],
        "brands": [
            {
                "name": "Pepsi",
                "confidence": 0.857,
                "rectangle": {"x": 489, "y": 79, "w": 161, "h": 177},
            }
        ],
        "requestId": "0dbec5ad-a3d3-4f7e-96b4-dfd57efe967d",
        "metadata": {"width": 1500, "height": 1000, "format": "Jpeg"},
        "modelVersion": "2021-04-01",
    }


@pytest.fixture(scope="function")
def minimal_analysis_response() -> dict:
    return {
        "requestId": "9d5d1e3a-6d0a-4f42-8f4b-8bd2c1a0f0a2",
        "metadata": {"width": 800, "height": 600, "format": "Png"},
        "modelVersion": "2021-05-01",
    }


@pytest.fixture(scope="function")
def unsupported_feature_error_response() -> dict:
    return {
        "error": {
            "code": "InvalidRequest",
            "message": "Analyze query is invalid.",
            "innererror": {
                "code": "UnsupportedFeature",
                "message": "Feature Celebrities is not supported for the model version.",
            },
        }
    }
