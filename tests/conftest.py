"""
Shared fixtures: canned API responses and a fake requests.post router.
"""
from unittest.mock import MagicMock, patch

import pytest

from spu_schedule import config

ADDRESS = "700 5th Ave"
PREMISE_CODE = "P-0042"
ACCOUNT_NUMBER = "4001234567"
TOKEN = "tok-123"

SERVICE_POINTS = {
    "Garbage": "SP-G",
    "Recycle": "SP-R",
    "Food/Yard Waste": "SP-Y",
    "Bulky Item": "SP-B",
}

CALENDAR_DATES = {
    "SP-G": ["03/01/2024", "03/08/2024"],
    "SP-R": ["03/08/2024", "03/22/2024"],
    "SP-Y": ["3/1/2024", "3/8/2024"],
    "SP-B": ["03/15/2024"],
}


def _response(payload=None, status_code=200, reason="OK"):
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def make_response():
    """Returns a factory for mocked requests.Response objects."""
    return _response


@pytest.fixture
def api_payloads():
    """JSON bodies of each endpoint for the fixture address."""
    return {
        config.AUTH_URL: {"access_token": TOKEN, "token_type": "bearer"},
        config.PREMISE_CODE_URL: {
            "address": [{"premCode": PREMISE_CODE, "addressLine1": ADDRESS.upper()}]
        },
        config.ACCOUNT_CODE_URL: {"account": {"accountNumber": ACCOUNT_NUMBER}},
        config.SERVICES_URL: {
            "accountContext": {
                "accountNumber": ACCOUNT_NUMBER,
                "personId": "PER-7",
                "companyCd": "SPU",
            },
            "accountSummaryType": {
                "swServices": [
                    {
                        "services": [
                            {"description": d, "servicePointId": sp}
                            for d, sp in SERVICE_POINTS.items()
                        ]
                    }
                ]
            },
        },
        config.CALENDAR_URL: {"calendar": CALENDAR_DATES},
    }


@pytest.fixture
def mock_post(api_payloads):
    """
    Patches requests.post so that each endpoint answers with its payload.

    Tests may replace entries in the `responses` attribute with their own
    mocked responses.
    """
    responses = {url: _response(body) for url, body in api_payloads.items()}

    def route(url, **kwargs):
        return responses[url]

    with patch("spu_schedule.services.http_gateway.requests.post") as mock:
        mock.side_effect = route
        mock.responses = responses
        yield mock
