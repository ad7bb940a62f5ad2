"""Templated answers built from substring matches.

No ranking or model call: the first few matching entries, in store order,
are summarised into a fixed answer template.
"""

from typing import Iterable

from .models import AskResult, KnowledgeEntry
from .query import matches_query

MAX_SOURCES = 5
PREVIEW_CHARS = 100


def format_answer(question: str, entries: list[KnowledgeEntry]) -> str:
    if not entries:
        return (
            f'I don\'t have specific information about "{question}" in your knowledge base. '
            "You can add relevant documentation using the CLI or API."
        )
    lines = [f"- {e.title}: {e.content[:PREVIEW_CHARS]}..." for e in entries]
    header = f'Based on your knowledge base, here\'s what I found about "{question}":\n\n'
    return header + "\n".join(lines)


def answer_question(question: str, entries: Iterable[KnowledgeEntry]) -> AskResult:
    relevant = [e for e in entries if matches_query(e, question)][:MAX_SOURCES]
    return AskResult(
        answer=format_answer(question, relevant),
        sources=[e.id for e in relevant],
    )
