"""Shared fixtures for lens selector tests."""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from lens_selector.config import Settings, get_settings
from lens_selector.main import create_app


@pytest.fixture
def valid_lens() -> dict:
    """A minimal lens that satisfies the profile."""
    return {
        "resourceType": "Library",
        "id": "1",
        "name": "alpha",
        "content": [{"data": "QQ=="}],
        "type": {"text": "x"},
    }


@pytest.fixture
def lenses_dir(tmp_path) -> Path:
    folder = tmp_path / "lenses"
    folder.mkdir()
    return folder


@pytest.fixture
def write_lens(lenses_dir):
    """Write a lens file. Dicts are JSON-encoded, strings are written as-is."""

    def _write(filename: str, payload) -> Path:
        path = lenses_dir / filename
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def client(lenses_dir):
    settings = Settings(LENSES_FOLDER=str(lenses_dir))
    app = create_app(settings)
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
