# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a temporary backing file and a TestClient wired to it
# =============================================================================

import json
import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_product_store
from app.main import app
from lib.json_store import JsonProductStore


SAMPLE_PRODUCTS = [
    {"id": 1, "name": "Notebook", "price": 4.5},
    {"id": 2, "name": "Desk Lamp", "price": 29.99},
    {"id": 5, "name": "Coffee Mug", "price": 8},
]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def sample_products():
    """Catalog records written to the temporary backing file."""
    return [dict(p) for p in SAMPLE_PRODUCTS]


@pytest.fixture
def data_file(tmp_path, sample_products):
    """Temporary backing file seeded with sample products."""
    path = tmp_path / "products.json"
    path.write_text(json.dumps(sample_products), encoding="utf-8")
    return path


@pytest.fixture
def store(data_file):
    """Store bound to the temporary backing file."""
    return JsonProductStore(data_file)


@pytest.fixture
def make_client():
    """
    Build a TestClient whose requests use the given store.

    Overrides are cleared after the test.
    """
    clients = []

    def _make(store: JsonProductStore, **kwargs) -> TestClient:
        app.dependency_overrides[get_product_store] = lambda: store
        client = TestClient(app, **kwargs)
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client, store):
    """TestClient backed by the seeded temporary file."""
    return make_client(store)
