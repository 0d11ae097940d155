"""Pytest fixtures for tests."""

import json
from pathlib import Path

import pytest

from colorfill.models import Color


@pytest.fixture
def red():
    """Pure red."""
    return Color(r=255, g=0, b=0)


@pytest.fixture
def write_document(tmp_path):
    """Write a JSON document into the temp dir and return its path."""

    def _write(content, name: str = "fill.json") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write
