"""Dependency injection for FastAPI routes."""

from functools import lru_cache

from knowledge import KnowledgeBase


@lru_cache
def get_knowledge_base() -> KnowledgeBase:
    """Process-wide knowledge base; empty at startup, gone at exit."""
    return KnowledgeBase()
