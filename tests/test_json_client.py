"""Tests for the HTTP JSON client."""
from unittest.mock import MagicMock

import pytest
import requests

import config
from source.json_client import FetchError, JsonClient
from source.json_loader import JsonParseError

URL = "https://example.com/data.json"


def make_response(status_code=200, body=b'{"a": 1}'):
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.encoding = "utf-8"
    response.url = URL
    return response


def make_client(*results, max_retries=2):
    session = MagicMock()
    session.get.side_effect = list(results)
    client = JsonClient(max_retries=max_retries, retry_delay=0, session=session)
    return client, session


def test_fetch_json():
    client, session = make_client(make_response())
    assert client.fetch_json(URL) == {"a": 1}
    session.get.assert_called_once_with(URL, timeout=config.REQUEST_TIMEOUT)


def test_session_headers():
    client, session = make_client()
    session.headers.update.assert_called_once_with({
        "Accept": "application/json",
        "User-Agent": config.USER_AGENT,
    })


def test_retries_server_errors():
    client, session = make_client(make_response(503), make_response(429), make_response())
    assert client.fetch_json(URL) == {"a": 1}
    assert session.get.call_count == 3


def test_retries_connection_errors_until_exhausted():
    error = requests.exceptions.ConnectionError("refused")
    client, session = make_client(error, error, error)
    with pytest.raises(FetchError, match="refused"):
        client.fetch_json(URL)
    assert session.get.call_count == 3


def test_does_not_retry_client_errors():
    client, session = make_client(make_response(404))
    with pytest.raises(FetchError) as exc_info:
        client.fetch_json(URL)
    assert exc_info.value.url == URL
    assert session.get.call_count == 1


def test_invalid_body():
    client, _ = make_client(make_response(body=b"<html></html>"))
    with pytest.raises(JsonParseError) as exc_info:
        client.fetch_json(URL)
    assert exc_info.value.source == URL
