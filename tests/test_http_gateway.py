"""
Unit tests for the HttpGateway.
"""
import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from spu_schedule.exceptions import RequestError, ResponseDecodeError
from spu_schedule.services.http_gateway import HttpGateway

URL = "https://example.test/rest/endpoint"


@patch("spu_schedule.services.http_gateway.requests.post")
def test_send_returns_decoded_json(mock_post, make_response):
    mock_post.return_value = make_response({"ok": True})

    result = HttpGateway(timeout=5).send(URL, {"a": 1})

    assert result == {"ok": True}
    mock_post.assert_called_once_with(
        URL,
        json={"a": 1},
        headers={"Content-Type": "application/json", "Accept": "application/json"},
        timeout=5,
    )


@patch("spu_schedule.services.http_gateway.requests.post")
def test_send_merges_caller_headers(mock_post, make_response):
    mock_post.return_value = make_response({})

    HttpGateway().send(URL, {}, {"Authorization": "Bearer abc", "Accept": "text/plain"})

    headers = mock_post.call_args.kwargs["headers"]
    assert headers["Authorization"] == "Bearer abc"
    assert headers["Accept"] == "text/plain"
    assert headers["Content-Type"] == "application/json"


@pytest.mark.parametrize("status, reason", [(500, "Internal Server Error"), (401, "Unauthorized"), (302, "Found")])
@patch("spu_schedule.services.http_gateway.requests.post")
def test_non_2xx_raises_request_error(mock_post, make_response, status, reason):
    mock_post.return_value = make_response({}, status_code=status, reason=reason)

    with pytest.raises(RequestError) as excinfo:
        HttpGateway().send(URL, {})

    assert excinfo.value.status_code == status
    assert excinfo.value.reason == reason
    assert str(excinfo.value) == f"{status}: {reason}"
    mock_post.assert_called_once()


@patch("spu_schedule.services.http_gateway.requests.post")
def test_2xx_edges_are_success(mock_post, make_response):
    mock_post.return_value = make_response([1, 2], status_code=299)
    assert HttpGateway().send(URL, {}) == [1, 2]


@patch("spu_schedule.services.http_gateway.requests.post")
def test_invalid_json_raises_decode_error(mock_post, make_response):
    mock_post.return_value = make_response(json.JSONDecodeError("Expecting value", "<html>", 0))

    with pytest.raises(ResponseDecodeError) as excinfo:
        HttpGateway().send(URL, {})

    assert isinstance(excinfo.value, RequestError)
    assert excinfo.value.status_code == 200


@patch("spu_schedule.services.http_gateway.requests.post")
def test_transport_error_raises_request_error_without_status(mock_post):
    mock_post.side_effect = requests.exceptions.ConnectionError("Connection refused")

    with pytest.raises(RequestError, match="Connection refused") as excinfo:
        HttpGateway().send(URL, {})

    assert excinfo.value.status_code is None
    mock_post.assert_called_once()


def test_send_uses_session_when_given(make_response):
    session = MagicMock()
    session.post.return_value = make_response({"via": "session"})

    assert HttpGateway(session=session).send(URL, {}) == {"via": "session"}
    session.post.assert_called_once()
