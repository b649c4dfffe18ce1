import re
from urllib.parse import parse_qsl, urlparse

import pytest
import requests
from aiohttp import ClientConnectionError
from aioresponses import aioresponses
from requests_mock import Mocker

from az_analyze_image.config import AnalyzeImagePreviewWarning
from az_analyze_image.errors import (
    InvalidHeaderValueError,
    NoFeaturesOrModelNameError,
    ResponseDecodingError,
    TransportError,
)
from az_analyze_image.v40.client import Client
from az_analyze_image.v40.entities import (
    AnalyzeImageOptions,
    ImageAnalysisResult,
    VisualFeature,
)
from az_analyze_image.v40.errors import APIError

ENDPOINT = "https://westeurope.api.cognitive.microsoft.com/"
KEY = "0123456789abcdef0123456789abcdef"
ANALYZE_URL = f"{ENDPOINT}computervision/imageanalysis:analyze"
ANALYZE_URL_PATTERN = re.compile(
    r"^https://westeurope\.api\.cognitive\.microsoft\.com/computervision/imageanalysis:analyze.*$"
)


def test_client_construction_warns_about_preview_api() -> None:
    # when
    with pytest.warns(AnalyzeImagePreviewWarning) as record:
        client = Client(key=KEY, endpoint=ENDPOINT)

    # then
    assert client.url == ANALYZE_URL
    assert "2023-04-01-preview" in str(record[0].message)


def test_client_construction_when_key_is_not_valid_header_value() -> None:
    # when
    with pytest.raises(InvalidHeaderValueError):
        _ = Client(key="bad\nkey", endpoint=ENDPOINT)


def test_analyze_image_url_when_successful_response_expected(
    requests_mock: Mocker,
    full_analysis_response: dict,
) -> None:
    # given
    requests_mock.post(ANALYZE_URL, json=full_analysis_response)
    client = Client(key=KEY, endpoint=ENDPOINT)

    # when
    result = client.analyze_image_url(
        image_url="https://some.com/presentation.png",
        options=AnalyzeImageOptions(
            features=[VisualFeature.TAGS, VisualFeature.OBJECTS]
        ),
    )

    # then
    assert isinstance(result, ImageAnalysisResult)
    assert result.tags_result.values[0].name == "text"
    last_request = requests_mock.last_request
    assert parse_qsl(urlparse(last_request.url).query) == [
        ("api-version", "2023-04-01-preview"),
        ("features", "tags,objects"),
    ]
    assert last_request.json() == {"url": "https://some.com/presentation.png"}
    assert last_request.headers["Content-Type"] == "application/json"
    assert last_request.headers["Ocp-Apim-Subscription-Key"] == KEY


def test_analyze_image_when_successful_response_expected(
    requests_mock: Mocker,
    people_analysis_response: dict,
) -> None:
    # given
    requests_mock.post(ANALYZE_URL, json=people_analysis_response)
    client = Client(key=KEY, endpoint=ENDPOINT)

    # when
    result = client.analyze_image(
        image_data=b"\xff\xd8\xff",
        options=AnalyzeImageOptions(
            features=[VisualFeature.PEOPLE], gender_neutral_caption=False
        ),
    )

    # then
    assert len(result.people_result.values) == 2
    last_request = requests_mock.last_request
    assert parse_qsl(urlparse(last_request.url).query) == [
        ("api-version", "2023-04-01-preview"),
        ("features", "people"),
        ("gender-neutral-caption", "false"),
    ]
    assert last_request.body == b"\xff\xd8\xff"
    assert last_request.headers["Content-Type"] == "application/octet-stream"


@pytest.mark.parametrize(
    "options",
    [None, AnalyzeImageOptions(), AnalyzeImageOptions(language="en")],
)
def test_analyze_image_when_neither_features_nor_model_name_is_set(
    requests_mock: Mocker,
    options: AnalyzeImageOptions,
) -> None:
    # given
    client = Client(key=KEY, endpoint=ENDPOINT)

    # when
    with pytest.raises(NoFeaturesOrModelNameError):
        _ = client.analyze_image(image_data=b"\xff\xd8\xff", options=options)

    # then
    assert requests_mock.call_count == 0


def test_analyze_image_url_when_only_model_name_is_set(
    requests_mock: Mocker,
    full_analysis_response: dict,
) -> None:
    # given
    requests_mock.post(ANALYZE_URL, json=full_analysis_response)
    client = Client(key=KEY, endpoint=ENDPOINT)

    # when
    _ = client.analyze_image_url(
        image_url="https://some.com/presentation.png",
        options=AnalyzeImageOptions(model_name="my-model"),
    )

    # then
    assert parse_qsl(urlparse(requests_mock.last_request.url).query) == [
        ("api-version", "2023-04-01-preview"),
        ("model-name", "my-model"),
    ]


def test_analyze_image_url_when_error_envelope_returned(
    requests_mock: Mocker,
    invalid_request_error_response: dict,
) -> None:
    # given
    requests_mock.post(
        ANALYZE_URL, json=invalid_request_error_response, status_code=400
    )
    client = Client(key=KEY, endpoint=ENDPOINT)

    # when
    with pytest.raises(APIError) as error:
        _ = client.analyze_image_url(
            image_url="https://some.com/huge.png",
            options=AnalyzeImageOptions(features=[VisualFeature.CAPTION]),
        )

    # then
    assert error.value.status_code == 400
    assert error.value.code == "InvalidRequest"
    assert error.value.message == "Image size is too big."
    assert error.value.innererror.code == "InvalidImageSize"


def test_analyze_image_url_when_error_body_is_not_an_envelope(
    requests_mock: Mocker,
) -> None:
    # given
    requests_mock.post(ANALYZE_URL, json=[], status_code=500)
    client = Client(key=KEY, endpoint=ENDPOINT)

    # when
    with pytest.raises(ResponseDecodingError) as error:
        _ = client.analyze_image_url(
            image_url="https://some.com/presentation.png",
            options=AnalyzeImageOptions(features=[VisualFeature.CAPTION]),
        )

    # then
    assert error.value.status_code == 500


def test_analyze_image_url_when_connection_error_occurs(requests_mock: Mocker) -> None:
    # given
    requests_mock.post(ANALYZE_URL, exc=requests.exceptions.ReadTimeout)
    client = Client(key=KEY, endpoint=ENDPOINT, timeout=0.5)

    # when
    with pytest.raises(TransportError):
        _ = client.analyze_image_url(
            image_url="https://some.com/presentation.png",
            options=AnalyzeImageOptions(features=[VisualFeature.CAPTION]),
        )

    # then
    assert requests_mock.call_count == 1


@pytest.mark.asyncio
async def test_analyze_image_async_when_successful_response_expected(
    people_analysis_response: dict,
) -> None:
    # given
    client = Client(key=KEY, endpoint=ENDPOINT)

    with aioresponses() as m:
        m.post(ANALYZE_URL_PATTERN, payload=people_analysis_response)

        # when
        result = await client.analyze_image_async(
            image_data=b"\xff\xd8\xff",
            options=AnalyzeImageOptions(features=[VisualFeature.PEOPLE]),
        )

    # then
    assert result.people_result.values[0].confidence == 0.9153
    [(_, url)] = m.requests.keys()
    assert url.query["api-version"] == "2023-04-01-preview"
    assert url.query["features"] == "people"


@pytest.mark.asyncio
async def test_analyze_image_url_async_when_neither_features_nor_model_name_is_set() -> (
    None
):
    # given
    client = Client(key=KEY, endpoint=ENDPOINT)

    with aioresponses() as m:
        # when
        with pytest.raises(NoFeaturesOrModelNameError):
            _ = await client.analyze_image_url_async(
                image_url="https://some.com/presentation.png"
            )

    # then
    assert len(m.requests) == 0


@pytest.mark.asyncio
async def test_analyze_image_url_async_when_error_envelope_returned(
    invalid_request_error_response: dict,
) -> None:
    # given
    client = Client(key=KEY, endpoint=ENDPOINT)

    with aioresponses() as m:
        m.post(ANALYZE_URL_PATTERN, payload=invalid_request_error_response, status=400)

        # when
        with pytest.raises(APIError) as error:
            _ = await client.analyze_image_url_async(
                image_url="https://some.com/huge.png",
                options=AnalyzeImageOptions(model_name="my-model"),
            )

    # then
    assert error.value.code == "InvalidRequest"


@pytest.mark.asyncio
async def test_analyze_image_async_when_connection_error_occurs() -> None:
    # given
    client = Client(key=KEY, endpoint=ENDPOINT)

    with aioresponses() as m:
        m.post(ANALYZE_URL_PATTERN, exception=ClientConnectionError())

        # when
        with pytest.raises(TransportError):
            _ = await client.analyze_image_async(
                image_data=b"\xff\xd8\xff",
                options=AnalyzeImageOptions(features=[VisualFeature.READ]),
            )
