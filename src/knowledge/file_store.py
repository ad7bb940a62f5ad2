"""Flat-file knowledge directory used by the CLI: one JSON file per entry.

Independent of the API's in-memory EntryStore; the two never share state.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

import structlog

from shared_types import KnowledgeEntryType

from .models import KnowledgeEntry, utcnow
from .utils import generate_id, parse_date

logger = structlog.get_logger()

CLI_SOURCE = "cli"


class KnowledgeFileStore:
    """Reads and writes ``<knowledge_dir>/<id>.json`` records."""

    def __init__(self, knowledge_dir: str | Path):
        self.knowledge_dir = Path(knowledge_dir)

    def exists(self) -> bool:
        return self.knowledge_dir.is_dir()

    def add(
        self,
        entry_type: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
        tags: Optional[list[str]] = None,
    ) -> dict:
        """Write a new entry file and return the stored record."""
        record = {
            "id": generate_id(),
            "type": str(KnowledgeEntryType(entry_type)),
            "title": title or "Untitled",
            "content": content or "",
            "tags": list(tags or []),
            "createdAt": utcnow().isoformat(),
        }
        self.knowledge_dir.mkdir(parents=True, exist_ok=True)
        path = self.knowledge_dir / f"{record['id']}.json"
        path.write_text(json.dumps(record, indent=2))
        logger.info("knowledge_file.added", entry_id=record["id"], type=record["type"])
        return record

    def _files(self) -> list[Path]:
        if not self.exists():
            return []
        return sorted(self.knowledge_dir.glob("*.json"))

    def list_entries(self, entry_type: Optional[str] = None) -> list[dict]:
        """All readable records, optionally filtered by type, sorted by file name."""
        records = []
        for path in self._files():
            try:
                record = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
                logger.warning("knowledge_file.unreadable", path=str(path), error=str(e))
                continue
            if not isinstance(record, dict):
                logger.warning("knowledge_file.unreadable", path=str(path), error="not an object")
                continue
            if entry_type and record.get("type") != entry_type:
                continue
            records.append(_normalize(record))
        return records

    def count(self) -> int:
        return len(self._files())

    def as_entries(self) -> list[KnowledgeEntry]:
        """Records converted to KnowledgeEntry, skipping any with an unknown type."""
        entries = []
        for record in self.list_entries():
            try:
                entry_type = KnowledgeEntryType(record.get("type", ""))
            except ValueError:
                logger.debug("knowledge_file.unknown_type", entry_id=record.get("id"))
                continue
            created = _parse_created(record.get("createdAt"))
            entries.append(
                KnowledgeEntry(
                    id=str(record.get("id", "")),
                    type=entry_type,
                    title=record["title"],
                    content=record["content"],
                    source=CLI_SOURCE,
                    tags=record["tags"],
                    created_at=created,
                    updated_at=created,
                )
            )
        return entries


def _normalize(record: dict) -> dict:
    """Coerce hand-edited fields to the shapes readers expect."""
    tags = record.get("tags")
    record["tags"] = [str(t) for t in tags] if isinstance(tags, list) else []
    for key in ("title", "content"):
        value = record.get(key)
        record[key] = "" if value is None else str(value)
    return record


def _parse_created(value) -> datetime:
    if isinstance(value, str):
        try:
            return parse_date(value)
        except ValueError:
            pass
    return utcnow()
