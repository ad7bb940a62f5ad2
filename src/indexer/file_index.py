"""Flat JSON manifest of file-system paths and name search over it."""

import fnmatch
import json
from dataclasses import asdict, dataclass
from pathlib import Path, PurePosixPath
from typing import Iterable, Optional

import structlog

logger = structlog.get_logger()


class IndexNotFoundError(FileNotFoundError):
    """No index file has been written yet."""


@dataclass(frozen=True)
class IndexedFile:
    path: str
    name: str
    ext: str

    @classmethod
    def from_path(cls, path: Path) -> "IndexedFile":
        posix = PurePosixPath(path.as_posix())
        return cls(path=str(posix), name=posix.name, ext=posix.suffix)


def is_excluded(relative: Path, patterns: Iterable[str]) -> bool:
    """True if the relative path, or any component of it, matches a pattern."""
    posix = relative.as_posix()
    for pattern in patterns:
        if fnmatch.fnmatch(posix, pattern):
            return True
        if any(fnmatch.fnmatch(part, pattern) for part in relative.parts):
            return True
    return False


def _normalize_ext(ext: str) -> str:
    ext = ext.strip().lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


def build_index(
    paths: Iterable[str | Path],
    exclude_patterns: Iterable[str] = (),
    include_extensions: Iterable[str] = (),
    max_file_size: Optional[int] = None,
) -> list[IndexedFile]:
    """Walk each root and collect matching files.

    Roots that do not exist are skipped. Returned paths are relative to the
    working directory when they lie under it (absolute otherwise), sorted
    and de-duplicated.
    """
    cwd = Path.cwd()
    patterns = list(exclude_patterns)
    extensions = {_normalize_ext(e) for e in include_extensions if e.strip()}
    found: dict[str, IndexedFile] = {}

    for root in paths:
        root = Path(root)
        if not root.exists():
            logger.debug("index.root_missing", root=str(root))
            continue
        candidates = [root] if root.is_file() else sorted(root.rglob("*"))
        for path in candidates:
            if not path.is_file():
                continue
            relative = path.relative_to(root) if path != root else Path(path.name)
            if is_excluded(relative, patterns):
                continue
            if extensions and path.suffix.lower() not in extensions:
                continue
            if max_file_size is not None:
                try:
                    if path.stat().st_size > max_file_size:
                        logger.debug("index.file_too_large", path=str(path))
                        continue
                except OSError as e:
                    logger.warning("index.stat_failed", path=str(path), error=str(e))
                    continue
            if path.is_absolute() and path.is_relative_to(cwd):
                path = path.relative_to(cwd)
            item = IndexedFile.from_path(path)
            found[item.path] = item

    files = [found[p] for p in sorted(found)]
    logger.info("index.built", files=len(files))
    return files


class FileIndex:
    """On-disk index at ``<dataDir>/index/files.json``."""

    def __init__(self, index_file: str | Path):
        self.index_file = Path(index_file)

    def exists(self) -> bool:
        return self.index_file.is_file()

    def save(self, files: list[IndexedFile]) -> None:
        self.index_file.parent.mkdir(parents=True, exist_ok=True)
        self.index_file.write_text(json.dumps([asdict(f) for f in files], indent=2))

    def load(self) -> list[IndexedFile]:
        if not self.exists():
            raise IndexNotFoundError(str(self.index_file))
        data = json.loads(self.index_file.read_text(encoding="utf-8"))
        return [
            IndexedFile(path=item["path"], name=item["name"], ext=item.get("ext", ""))
            for item in data
        ]

    def count(self) -> int:
        return len(self.load()) if self.exists() else 0

    def search(
        self, query: str, ext: Optional[str] = None, limit: int = 10
    ) -> list[IndexedFile]:
        """Case-insensitive substring match over file names only."""
        needle = query.lower()
        wanted_ext = _normalize_ext(ext) if ext else None
        results = []
        for item in self.load():
            if needle not in item.name.lower():
                continue
            if wanted_ext and item.ext.lower() != wanted_ext:
                continue
            results.append(item)
        return results[:limit]
