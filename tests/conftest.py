import json
import os
import sys
import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from tears import create_app
from tears.models.catalog import load_catalog


@pytest.fixture
def catalog():
    """The small catalog used throughout the engine tests."""
    return load_catalog([
        {"id": "1", "text": "Sit with them", "polarity": "do", "tags": [], "priority": 1},
        {"id": "2", "text": "Don't argue", "polarity": "dont", "tags": ["anger"], "priority": 1},
    ], version="test")


@pytest.fixture
def app():
    return create_app({"TESTING": True, "SECRET_KEY": "test", "TEARS_CATALOG_PATH": None})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def catalog_file(tmp_path):
    """Write a catalog document to a temporary JSON file and return its path."""
    def _write(document):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(document), encoding="utf-8")
        return str(path)
    return _write
