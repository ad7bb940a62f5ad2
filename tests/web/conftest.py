"""Shared fixtures for web API tests."""

import pytest
from fastapi.testclient import TestClient

from web.deps import get_knowledge_base


@pytest.fixture
def client():
    """Test client over a fresh, empty knowledge base."""
    get_knowledge_base.cache_clear()

    from web.app import app

    with TestClient(app) as test_client:
        yield test_client

    get_knowledge_base.cache_clear()


@pytest.fixture
def create_entry(client):
    """POST an entry and return the created payload."""

    def _create(**overrides):
        body = {"type": "code", "title": "Title", "content": "Content"}
        body.update(overrides)
        res = client.post("/api/entries", json=body)
        assert res.status_code == 201, res.text
        return res.json()["data"]

    return _create
