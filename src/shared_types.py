"""Shared enums and types for devkb."""

from enum import StrEnum


class KnowledgeEntryType(StrEnum):
    CODE = "code"
    DOCUMENTATION = "documentation"
    CONVERSATION = "conversation"
    DECISION = "decision"
    ARCHITECTURE = "architecture"
    PROCESS = "process"
