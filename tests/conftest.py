"""Shared fixtures for cvsite tests."""

import json
from pathlib import Path

import pytest

from cvsite.contexts.document.model import ResumeDocument
from cvsite.utils.settings import load_settings

FIXTURES_PATH = Path(__file__).resolve().parent / "fixtures"
RESUME_FIXTURE = FIXTURES_PATH / "resume.json"


@pytest.fixture
def resume_data():
    """Raw resume.json object (fresh copy per test)."""
    return json.loads(RESUME_FIXTURE.read_text(encoding="utf-8"))


@pytest.fixture
def resume_document(resume_data):
    return ResumeDocument(resume_data)


@pytest.fixture
def settings():
    return load_settings()


@pytest.fixture
def strict_settings():
    """Settings where every missing section is an error."""
    return load_settings(overrides=["document.missing_sections=error"])


@pytest.fixture
def no_clipboard(monkeypatch):
    """Make clipboard copies fail as on a headless machine."""
    monkeypatch.setattr(
        "cvsite.contexts.editor.export.copy_to_clipboard",
        lambda text: (False, "No clipboard tool found"),
    )


@pytest.fixture
def resume_path():
    """Path of the resume.json fixture."""
    return RESUME_FIXTURE
