"""Rendered article cache keyed on source mtime.

Each document path maps to two files under the cache root: the rendered
Markdown body in ``pages/{path}.html`` and its front matter plus source mtime
in ``meta/{path}.json``.
"""

import json
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import TypedDict

REQUIRED_META_KEYS = ("title", "tags", "source_mtime")


class CachedMetadata(TypedDict):
    title: str
    description: str
    tags: list[str]
    date: str | None
    draft: bool
    source_mtime: float


@dataclass
class CacheEntry:
    html: str
    meta: CachedMetadata


class FileCache:
    """Stores rendered article bodies so unchanged sources skip Markdown rendering.

    An entry is a hit only while the stored mtime equals the source's current one.
    """

    def __init__(self, cache_dir: Path) -> None:
        self._cache_dir = cache_dir

    @property
    def cache_dir(self) -> Path:
        return self._cache_dir

    def get(self, path: str, source_mtime: float) -> CacheEntry | None:
        """Look up a document path; stale or unreadable entries are misses."""
        html_path, meta_path = self._entry_paths(path)
        meta = _read_meta(meta_path)
        if meta is None or meta["source_mtime"] != source_mtime:
            return None

        try:
            return CacheEntry(html=html_path.read_text(encoding="utf-8"), meta=meta)
        except OSError:
            return None

    def set(self, path: str, html: str, meta: CachedMetadata) -> None:
        if not self._cache_dir.exists():
            self._cache_dir.mkdir(parents=True)
            (self._cache_dir / ".gitignore").write_text("*\n", encoding="utf-8")

        html_path, meta_path = self._entry_paths(path)
        for target, text in ((html_path, html), (meta_path, json.dumps(meta))):
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")

    def invalidate(self, path: str) -> None:
        for entry_path in self._entry_paths(path):
            entry_path.unlink(missing_ok=True)

    def clear(self) -> None:
        """Drop every entry, keeping the cache root and its .gitignore."""
        for subdir in ("pages", "meta"):
            shutil.rmtree(self._cache_dir / subdir, ignore_errors=True)

    def _entry_paths(self, path: str) -> tuple[Path, Path]:
        return self._cache_dir / "pages" / f"{path}.html", self._cache_dir / "meta" / f"{path}.json"


def _read_meta(meta_path: Path) -> CachedMetadata | None:
    try:
        data = json.loads(meta_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return None
    if not isinstance(data, dict) or any(key not in data for key in REQUIRED_META_KEYS):
        return None

    return CachedMetadata(
        title=data["title"],
        description=data.get("description", ""),
        tags=list(data["tags"]),
        date=data.get("date"),
        draft=bool(data.get("draft", False)),
        source_mtime=data["source_mtime"],
    )
