"""
Tests for HttpClient - headers, JSON handling and error mapping.

The requests session is replaced with a MagicMock returning real
requests.Response objects, so no network access is needed.
"""

import json
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest
import requests

from didox_sdk.http import HttpClient, HttpResponse
from didox_sdk.shared.errors import DidoxApiError, DidoxNetworkError

BASE_URL = "https://stage.goodsign.biz"


def make_response(
    status: int = 200, body: Optional[Any] = None, text: Optional[str] = None, reason: str = "OK"
) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json"
    if text is None:
        text = json.dumps(body) if body is not None else ""
    response._content = text.encode("utf-8")
    return response


def make_client(response: Optional[requests.Response] = None, **kwargs: Any) -> HttpClient:
    session = MagicMock()
    session.request.return_value = response if response is not None else make_response(body={"ok": True})
    return HttpClient(BASE_URL, session=session, **kwargs)


def sent_kwargs(client: HttpClient) -> dict:
    return client.session.request.call_args.kwargs


def test_get_returns_parsed_response() -> None:
    client = make_client(make_response(body={"_id": "abc"}))

    response = client.get("/v1/documents/abc")

    assert isinstance(response, HttpResponse)
    assert response.data == {"_id": "abc"}
    assert response.status == 200
    assert response.headers["Content-Type"] == "application/json"
    args = client.session.request.call_args.args
    assert args == ("GET", f"{BASE_URL}/v1/documents/abc")


def test_base_url_trailing_slash_is_stripped() -> None:
    session = MagicMock()
    session.request.return_value = make_response(body={})
    client = HttpClient(f"{BASE_URL}/", session=session)

    client.get("/v1/documents/abc")

    assert client.base_url == BASE_URL

    assert client.session.request.call_args.args[1] == f"{BASE_URL}/v1/documents/abc"


def test_partner_headers() -> None:
    client = make_client(partner_token="partner-token")

    client.get("/v1/documents/abc")

    headers = sent_kwargs(client)["headers"]
    assert headers["Content-Type"] == "application/json"
    assert headers["Accept"] == "application/json"
    assert headers["Authorization"] == "Bearer partner-token"
    assert headers["Partner-Authorization"] == "partner-token"
    assert "user-key" not in headers


def test_access_token_header() -> None:
    client = make_client(partner_token="partner-token")

    client.set_access_token("user-token")
    client.get("/v1/documents/abc")
    assert client.has_access_token
    assert sent_kwargs(client)["headers"]["user-key"] == "user-token"

    client.clear_access_token()
    client.get("/v1/documents/abc")
    assert not client.has_access_token
    assert "user-key" not in sent_kwargs(client)["headers"]


def test_extra_headers_override_defaults() -> None:
    client = make_client()

    client.post("/v1/auth/company/123456789/login/ru", headers={"user-key": "other"})

    assert sent_kwargs(client)["headers"]["user-key"] == "other"


def test_post_sends_json_body_and_timeout() -> None:
    client = make_client(timeout=5.0)

    client.post("/v1/documents/005/create", {"ActDoc": {"ActNo": "1"}})

    kwargs = sent_kwargs(client)
    assert kwargs["json"] == {"ActDoc": {"ActNo": "1"}}
    assert kwargs["timeout"] == 5.0


def test_per_request_timeout() -> None:
    client = make_client()

    client.get("/v1/documents/abc", timeout=1.5)

    assert sent_kwargs(client)["timeout"] == 1.5


def test_empty_body_is_none() -> None:
    client = make_client(make_response(status=204, text="", reason="No Content"))

    assert client.delete("/v1/documents/abc").data is None


def test_http_error_raises_api_error() -> None:
    client = make_client(
        make_response(status=400, body={"error": "bad payload"}, reason="Bad Request")
    )

    with pytest.raises(DidoxApiError) as exc_info:
        client.post("/v1/documents/002/create", {"FacturaDoc": {}})

    error = exc_info.value
    assert error.status_code == 400
    assert error.response == {"error": "bad payload"}
    assert error.message == "HTTP 400: Bad Request"


def test_invalid_json_raises_api_error() -> None:
    client = make_client(make_response(text="<html>oops</html>"))

    with pytest.raises(DidoxApiError) as exc_info:
        client.get("/v1/documents/abc")

    assert exc_info.value.message == "Invalid JSON response from Didox API"
    assert exc_info.value.status_code == 200


def test_timeout_raises_network_error() -> None:
    client = make_client(timeout=2.0)
    client.session.request.side_effect = requests.exceptions.Timeout("slow")

    with pytest.raises(DidoxNetworkError) as exc_info:
        client.get("/v1/documents/abc")

    assert exc_info.value.message == "Request timeout after 2.0s"
    assert isinstance(exc_info.value.cause, requests.exceptions.Timeout)


def test_connection_error_raises_network_error() -> None:
    client = make_client()
    client.session.request.side_effect = requests.exceptions.ConnectionError("dns")

    with pytest.raises(DidoxNetworkError) as exc_info:
        client.get("/v1/documents/abc")

    assert exc_info.value.message == "Network request failed"


def test_close_closes_session() -> None:
    client = make_client()

    client.close()

    client.session.close.assert_called_once()


def test_query_params_drop_none_values() -> None:
    client = make_client()

    client.get("/v1/profile/productClassCodes", params={"page": 2, "search": None})

    assert sent_kwargs(client)["params"] == {"page": 2}
