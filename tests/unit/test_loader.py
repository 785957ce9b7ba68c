"""Unit tests for loading resume.json from files and URLs."""

import json

import pytest
import requests

from cvsite.contexts.document.exceptions import FetchError, ResumeNotFoundError, ResumeParseError
from cvsite.contexts.document.loader import is_url, load_resume, parse_resume_bytes


class FakeResponse:
    def __init__(self, status_code=200, content=b"", reason="OK"):
        self.status_code = status_code
        self.content = content
        self.reason = reason

    @property
    def ok(self):
        return self.status_code < 400


@pytest.mark.unit
def test_load_resume_from_path(tmp_path, resume_data):
    path = tmp_path / "resume.json"
    path.write_text(json.dumps(resume_data), encoding="utf-8")

    document = load_resume(path)

    assert document.personal_info.name == "Jordan Avery"
    assert document.data == resume_data


@pytest.mark.unit
def test_load_resume_missing_file(tmp_path):
    with pytest.raises(ResumeNotFoundError) as exc_info:
        load_resume(tmp_path / "absent.json")

    assert isinstance(exc_info.value, FetchError)
    assert exc_info.value.source.endswith("absent.json")


@pytest.mark.unit
def test_load_resume_invalid_json_reports_position(tmp_path):
    path = tmp_path / "resume.json"
    path.write_text('{\n  "meta": ,\n}', encoding="utf-8")

    with pytest.raises(ResumeParseError) as exc_info:
        load_resume(path)

    assert exc_info.value.line == 2
    assert exc_info.value.column is not None


@pytest.mark.unit
def test_parse_rejects_non_object_root():
    with pytest.raises(ResumeParseError, match="JSON object"):
        parse_resume_bytes(b"[1, 2]")


@pytest.mark.unit
def test_parse_rejects_non_list_sections():
    with pytest.raises(ResumeParseError, match="sections"):
        parse_resume_bytes(b'{"sections": {"type": "summary"}}')


@pytest.mark.unit
def test_parse_rejects_invalid_utf8():
    with pytest.raises(ResumeParseError, match="UTF-8"):
        parse_resume_bytes(b'{"name": "\xff"}')


@pytest.mark.unit
def test_parse_tolerates_bom_and_keeps_non_ascii():
    raw = "\ufeff{\"personalInfo\": {\"name\": \"João\"}}".encode("utf-8")

    document = parse_resume_bytes(raw)

    assert document.personal_info.name == "João"


@pytest.mark.unit
def test_parse_allows_missing_sections():
    document = parse_resume_bytes(b"{}")

    assert document.sections == []


@pytest.mark.unit
def test_is_url():
    assert is_url("https://example.com/resume.json")
    assert is_url("HTTP://example.com/resume.json")
    assert not is_url("resume.json")


@pytest.mark.unit
def test_load_resume_from_url(monkeypatch, resume_data):
    calls = []

    def fake_get(url, timeout=None):
        calls.append((url, timeout))
        return FakeResponse(content=json.dumps(resume_data).encode("utf-8"))

    monkeypatch.setattr(requests, "get", fake_get)

    document = load_resume("https://example.com/resume.json", timeout=3)

    assert document.personal_info.name == "Jordan Avery"
    assert calls == [("https://example.com/resume.json", 3)]


@pytest.mark.unit
def test_load_resume_url_not_found(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, timeout=None: FakeResponse(404, reason="Not Found"))

    with pytest.raises(ResumeNotFoundError) as exc_info:
        load_resume("https://example.com/resume.json")

    assert exc_info.value.status_code == 404


@pytest.mark.unit
def test_load_resume_network_failure(monkeypatch):
    def fake_get(url, timeout=None):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(requests, "get", fake_get)

    with pytest.raises(FetchError) as exc_info:
        load_resume("https://example.com/resume.json")

    assert not isinstance(exc_info.value, ResumeNotFoundError)
    assert exc_info.value.status_code is None
