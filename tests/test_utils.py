import pytest
import requests

from scim_codegen import utils
from scim_codegen.utils import (
    JSONLoaderError,
    fetch_schema,
    load_schema_document,
    read_schema_file,
)


def test_read_file(tmp_path):
    path = tmp_path / "schema.json"
    path.write_text('{"id": "urn:x"}', encoding="utf-8")
    assert read_schema_file(path) == {"id": "urn:x"}


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_schema_file(tmp_path / "missing.json")


def test_invalid_file(tmp_path):
    path = tmp_path / "schema.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(JSONLoaderError, match="Invalid JSON"):
        read_schema_file(path)


@pytest.mark.parametrize("content", ["[]", '"urn:x"', "42", "null"])
def test_file_must_hold_an_object(tmp_path, content):
    path = tmp_path / "schema.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(JSONLoaderError, match="must be a JSON object"):
        read_schema_file(path)


def test_load_needs_exactly_one_source(tmp_path):
    with pytest.raises(JSONLoaderError):
        load_schema_document()
    with pytest.raises(JSONLoaderError):
        load_schema_document(
            file_path=tmp_path / "a.json", url="https://example.com/a.json"
        )


@pytest.mark.parametrize("url", ["not a url", "ftp://example.com/schema.json"])
def test_invalid_url(url):
    with pytest.raises(JSONLoaderError, match="Invalid URL"):
        fetch_schema(url)


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code
        self.headers = {"content-type": "application/scim+json;charset=UTF-8"}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(response=self)

    def json(self):
        return self.payload


def test_fetch(monkeypatch):
    calls = []

    def fake_get(url, timeout, headers):
        calls.append((url, timeout))
        return FakeResponse({"id": "urn:x"})

    monkeypatch.setattr(utils.requests, "get", fake_get)
    document = load_schema_document(url="https://example.com/Schemas/User", timeout=5)

    assert document == {"id": "urn:x"}
    assert calls == [("https://example.com/Schemas/User", 5)]


def test_fetched_document_must_be_an_object(monkeypatch):
    monkeypatch.setattr(
        utils.requests, "get", lambda url, timeout, headers: FakeResponse([{"id": "x"}])
    )
    with pytest.raises(JSONLoaderError, match="must be a JSON object, got list"):
        fetch_schema("https://example.com/Schemas")


def test_http_error(monkeypatch):
    monkeypatch.setattr(
        utils.requests,
        "get",
        lambda url, timeout, headers: FakeResponse({}, status_code=404),
    )
    with pytest.raises(JSONLoaderError, match="HTTP error 404"):
        fetch_schema("https://example.com/Schemas/Missing")


def test_timeout(monkeypatch):
    def fake_get(url, timeout, headers):
        raise requests.exceptions.Timeout()

    monkeypatch.setattr(utils.requests, "get", fake_get)
    with pytest.raises(JSONLoaderError, match="timeout"):
        fetch_schema("https://example.com/Schemas/Slow")
