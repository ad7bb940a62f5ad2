"""Shared test fixtures for DevKB."""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from knowledge import KnowledgeBase  # noqa: E402


@pytest.fixture
def kb():
    """Fresh in-memory knowledge base."""
    return KnowledgeBase()


@pytest.fixture
def sample_entries():
    """Payloads covering several types and overlapping tags."""
    return [
        {
            "type": "decision",
            "title": "Use JWT",
            "content": "We chose JWT for stateless auth",
            "tags": ["auth", "jwt"],
        },
        {
            "type": "architecture",
            "title": "Service layout",
            "content": "API gateway in front of the auth service and the search service.",
            "tags": ["auth", "infra"],
        },
        {
            "type": "code",
            "title": "Retry helper",
            "content": "def retry(fn, attempts=3): ...",
            "tags": ["python"],
        },
        {
            "type": "process",
            "title": "Release checklist",
            "content": "Tag the release, publish notes, announce in chat.",
            "tags": [],
        },
    ]


@pytest.fixture
def populated_kb(kb, sample_entries):
    for payload in sample_entries:
        kb.create(**payload)
    return kb
