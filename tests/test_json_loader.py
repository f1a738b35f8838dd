"""Tests for loading JSON documents."""
import io
from unittest.mock import MagicMock

import pytest

from source.json_loader import (
    JsonParseError,
    is_url,
    load_json,
    load_json_file,
    load_json_stream,
    parse_json,
)


def test_parse_json_keeps_key_order():
    value = parse_json('{"b": 1, "a": 2, "c": 3}')
    assert list(value) == ["b", "a", "c"]


def test_parse_error_has_position():
    with pytest.raises(JsonParseError) as exc_info:
        parse_json('{\n  "a": 1,\n  "b": }')
    error = exc_info.value
    assert error.lineno == 3
    assert error.colno == 8
    assert str(error).startswith("Invalid JSON: Expecting value")
    assert "(line 3, column 8)" in str(error)


def test_parse_error_names_source():
    with pytest.raises(JsonParseError, match=r"^input\.json: Invalid JSON"):
        parse_json("[1,", source="input.json")


def test_empty_text_is_invalid():
    with pytest.raises(JsonParseError):
        parse_json("   ")


@pytest.mark.parametrize("text", ["NaN", "[Infinity]", '{"a": -Infinity}'])
def test_non_standard_constants_rejected(text):
    with pytest.raises(JsonParseError, match="Unsupported constant"):
        parse_json(text)


def test_excessive_nesting_is_a_parse_error():
    with pytest.raises(JsonParseError, match="nests too deeply"):
        parse_json("[" * 100000 + "]" * 100000)


def test_load_json_file(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text("\ufeff" + '{"a": [1, 2]}', encoding="utf-8")
    assert load_json_file(path) == {"a": [1, 2]}


def test_load_json_file_error_mentions_path(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{oops}", encoding="utf-8")
    with pytest.raises(JsonParseError) as exc_info:
        load_json_file(path)
    assert exc_info.value.source == str(path)


def test_load_json_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_json_file(tmp_path / "missing.json")


def test_load_json_stream():
    assert load_json_stream(io.StringIO('{"x": null}')) == {"x": None}


def test_load_json_from_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("[true]"))
    assert load_json("-") == [True]


def test_load_json_from_url_uses_client():
    client = MagicMock()
    client.fetch_json.return_value = {"ok": True}
    assert load_json("https://example.com/data.json", client=client) == {"ok": True}
    client.fetch_json.assert_called_once_with("https://example.com/data.json")


def test_is_url():
    assert is_url("http://example.com")
    assert is_url("HTTPS://example.com/a.json")
    assert not is_url("data/http.json")
    assert not is_url("-")


def test_load_json_file_rejects_invalid_utf8(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"a": "\xff\xfe"}')
    with pytest.raises(JsonParseError, match="Not valid UTF-8") as exc_info:
        load_json_file(path)
    assert exc_info.value.source == str(path)


def test_load_json_stream_rejects_invalid_utf8():
    stream = io.TextIOWrapper(io.BytesIO(b"[\xff]"), encoding="utf-8")
    with pytest.raises(JsonParseError, match="Not valid UTF-8"):
        load_json_stream(stream)
