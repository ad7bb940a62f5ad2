"""Fixtures for end-to-end API scenarios."""

import pytest
from fastapi.testclient import TestClient

from web.deps import get_knowledge_base


@pytest.fixture
def client():
    get_knowledge_base.cache_clear()

    from web.app import app

    with TestClient(app) as test_client:
        yield test_client

    get_knowledge_base.cache_clear()
