"""Markdown content loading.

Tutorial sources are Markdown files with optional TOML front matter::

    +++
    title = "Promises in JavaScript"
    description = "How promises chain"
    tags = ["promises", "fundamentals"]
    date = 2019-05-13
    +++

    Body in **Markdown**.

Plain-text front matter fields are HTML-escaped here. Everything downstream
(post list, layout) treats values as display-ready markup.
"""

import html
import logging
import re
import tomllib
from dataclasses import dataclass, field
from datetime import date as Date
from datetime import datetime
from pathlib import Path
from urllib.parse import quote

import mistune

from masteringjs.core.errors import InvalidInputError
from masteringjs.core.types import PageParams, Post, URLPath

logger = logging.getLogger(__name__)

FRONT_MATTER_DELIMITER = "+++"
HEADING_RE = re.compile(r"^#\s+(?P<title>.+?)\s*#*\s*$")
TAG_RE = re.compile(r"<[^>]+>")


@dataclass(frozen=True)
class Article:
    """A loaded tutorial page."""

    path: str
    source_path: Path
    title: str
    html: str
    description: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)
    date: Date | None = None
    draft: bool = False

    @property
    def url(self) -> URLPath:
        """Site URL of the article (e.g., "/tutorials/promises/")."""
        return URLPath(f"/{quote(self.path)}/")

    def to_post(self) -> Post:
        return Post(
            url=self.url,
            title=self.title,
            description=self.description,
            tags=self.tags,
        )

    def to_page_params(self) -> PageParams:
        return PageParams(title=self.title, content=self.html, date=self.date)


class ContentLoader:
    """Loads Markdown articles from a source directory.

    Document paths are relative to ``source_dir`` without the ``.md``
    extension. ``index.md`` stands for its directory.
    """

    def __init__(self, source_dir: Path) -> None:
        self._source_dir = source_dir
        self._markdown = mistune.create_markdown(
            escape=False,
            plugins=["strikethrough", "table", "url"],
        )

    @property
    def source_dir(self) -> Path:
        """Root directory containing markdown sources."""
        return self._source_dir

    def resolve(self, path: str) -> Path:
        """Resolve a document path to its source file.

        Args:
            path: Document path (e.g., "tutorials/promises")

        Returns:
            Path to the source file

        Raises:
            FileNotFoundError: If neither ``{path}.md`` nor ``{path}/index.md`` exists
        """
        path = path.strip("/")
        # Site root is the generated post list; "index" is only reachable through its directory
        if not path or path.rsplit("/", 1)[-1] == "index":
            raise FileNotFoundError(f"Source file not found: {self._source_dir / path / 'index.md'}")

        candidates = [self._source_dir / f"{path}.md", self._source_dir / path / "index.md"]
        for candidate in candidates:
            if candidate.is_file() and self._is_inside_source(candidate):
                return candidate
        raise FileNotFoundError(f"Source file not found: {candidates[0]}")

    def load(self, path: str) -> Article:
        """Load and render one article by document path."""
        source_path = self.resolve(path)
        return self.parse(source_path, path.strip("/"))

    def load_all(self) -> list[Article]:
        """Load every published article.

        Returns:
            Articles newest first; undated articles last, ties by path
        """
        articles = [self.parse(source, path) for path, source in self.iter_sources()]
        published = published_articles(articles)
        logger.debug(f"Loaded {len(published)} articles ({len(articles) - len(published)} drafts)")
        return published

    def iter_sources(self) -> list[tuple[str, Path]]:
        """List (document path, source file) pairs in path order."""
        if not self._source_dir.is_dir():
            return []
        sources = []
        for source in sorted(self._source_dir.rglob("*.md")):
            relative = source.relative_to(self._source_dir).with_suffix("")
            parts = relative.parts
            if parts[-1] == "index":
                parts = parts[:-1]
            if not parts:
                continue
            sources.append(("/".join(parts), source))
        return sources

    def parse(self, source_path: Path, path: str) -> Article:
        """Parse a source file into an Article.

        Raises:
            InvalidInputError: If front matter is malformed or no title is found
        """
        text = source_path.read_text(encoding="utf-8")
        meta, body = _split_front_matter(text, source_path)

        title = meta.get("title")
        if title is None:
            heading, body = _extract_heading(body)
            title = self._plain_text(heading) if heading is not None else None
        if not isinstance(title, str) or not title.strip():
            raise InvalidInputError("title", f"No title found in {source_path}")

        description = meta.get("description", "")
        if not isinstance(description, str):
            raise InvalidInputError("description", f"description must be a string in {source_path}")

        tags = meta.get("tags", [])
        if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
            raise InvalidInputError("tags", f"tags must be a list of strings in {source_path}")

        date = meta.get("date")
        if date is not None and not isinstance(date, Date):
            raise InvalidInputError("date", f"date must be a TOML date in {source_path}")

        draft = meta.get("draft", False)
        if not isinstance(draft, bool):
            raise InvalidInputError("draft", f"draft must be a boolean in {source_path}")

        logger.debug(f"Rendering {source_path} ({len(body)} characters)")
        return Article(
            path=path,
            source_path=source_path,
            title=html.escape(title.strip(), quote=False),
            html=str(self._markdown(body)),
            description=html.escape(description.strip(), quote=False),
            tags=tuple(html.escape(tag, quote=False) for tag in tags),
            date=date,
            draft=draft,
        )

    def _plain_text(self, markdown: str) -> str:
        """Render inline Markdown and keep only its text."""
        rendered = str(self._markdown(markdown))
        return html.unescape(TAG_RE.sub("", rendered)).strip()

    def _is_inside_source(self, candidate: Path) -> bool:
        try:
            candidate.resolve().relative_to(self._source_dir.resolve())
        except ValueError:
            return False
        return True


def _split_front_matter(text: str, source_path: Path) -> tuple[dict[str, object], str]:
    text = text.lstrip("\ufeff")
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return {}, text

    for end, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONT_MATTER_DELIMITER:
            break
    else:
        raise InvalidInputError("front_matter", f"Unterminated front matter in {source_path}")

    try:
        meta = tomllib.loads("".join(lines[1:end]))
    except tomllib.TOMLDecodeError as e:
        raise InvalidInputError("front_matter", f"Invalid front matter in {source_path}: {e}") from e

    # TOML datetimes carry a time; only the calendar date is kept
    if isinstance(meta.get("date"), datetime):
        meta["date"] = meta["date"].date()

    return meta, "".join(lines[end + 1 :])


def _extract_heading(body: str) -> tuple[str | None, str]:
    lines = body.splitlines(keepends=True)
    for i, line in enumerate(lines):
        if not line.strip():
            continue
        match = HEADING_RE.match(line.strip())
        if match is None:
            return None, body
        return match.group("title"), "".join(lines[:i] + lines[i + 1 :])
    return None, body


def published_articles(articles: list[Article]) -> list[Article]:
    """Drop drafts and order newest first, undated last, ties by path."""
    published = sorted((a for a in articles if not a.draft), key=lambda a: a.path)
    published.sort(key=lambda a: a.date.toordinal() if a.date else 0, reverse=True)
    return published
