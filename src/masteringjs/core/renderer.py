"""Page rendering with caching.

Combines content loading, the post list and the page layout. Article bodies
are cached by source mtime; the layout itself is cheap and always re-applied.
"""

import logging
from dataclasses import dataclass
from datetime import date as Date
from pathlib import Path

from masteringjs.core.cache import CachedMetadata, CacheEntry, FileCache
from masteringjs.core.content import Article, ContentLoader, published_articles
from masteringjs.core.layout import Layout
from masteringjs.core.listing import render_post_list
from masteringjs.core.types import PageParams

logger = logging.getLogger(__name__)

INDEX_TITLE = "Tutorials"


@dataclass
class RenderResult:
    """Result of rendering an article page."""

    html: str
    article: Article
    from_cache: bool


class PageRenderer:
    """Renders article and index pages.

    Args:
        loader: Content loader for the source directory
        layout: Document skeleton
        cache: Optional FileCache for rendered article bodies
        index_title: Title of the post list page
    """

    def __init__(
        self,
        loader: ContentLoader,
        layout: Layout | None = None,
        cache: FileCache | None = None,
        *,
        index_title: str = INDEX_TITLE,
    ) -> None:
        self._loader = loader
        self._layout = layout or Layout()
        self._cache = cache
        self._index_title = index_title

    @property
    def loader(self) -> ContentLoader:
        return self._loader

    @property
    def layout(self) -> Layout:
        return self._layout

    def render(self, path: str) -> RenderResult:
        """Render an article page.

        Args:
            path: Document path (e.g., "tutorials/promises")

        Returns:
            RenderResult with the full HTML document

        Raises:
            FileNotFoundError: If no source exists for the path
            InvalidInputError: If the source is malformed
        """
        path = path.strip("/")
        source_path = self._loader.resolve(path)
        article, from_cache = self._load_article(path, source_path)
        return RenderResult(html=self.render_article(article), article=article, from_cache=from_cache)

    def render_article(self, article: Article) -> str:
        """Wrap an already loaded article in the layout."""
        return self._layout.render(article.to_page_params())

    def articles(self) -> list[Article]:
        """Published articles, newest first."""
        articles = [self._load_article(path, source)[0] for path, source in self._loader.iter_sources()]
        return published_articles(articles)

    def render_index(self, articles: list[Article] | None = None) -> str:
        """Render the post list page.

        Args:
            articles: Published articles to list (default: load them)
        """
        if articles is None:
            articles = self.articles()
        posts = [article.to_post() for article in articles]
        params = PageParams(title=self._index_title, content=render_post_list(posts))
        return self._layout.render(params)

    def render_not_found(self, path: str) -> str:
        """Render the page served for unknown paths."""
        # path comes from the request URL and is not inserted
        content = '<p>The page you requested does not exist. <a href="/">Back to tutorials</a>.</p>'
        logger.debug(f"Rendering not-found page for {path!r}")
        return self._layout.render(PageParams(title="Not Found", content=content))

    def invalidate(self, path: str) -> None:
        """Invalidate cached content for a path."""
        if self._cache is not None:
            self._cache.invalidate(path)

    def _load_article(self, path: str, source_path: Path) -> tuple[Article, bool]:
        if self._cache is None:
            return self._loader.parse(source_path, path), False

        source_mtime = source_path.stat().st_mtime
        cached = self._cache.get(path, source_mtime)
        if cached is not None:
            return _from_cache(cached, path, source_path), True

        article = self._loader.parse(source_path, path)
        meta: CachedMetadata = {
            "title": article.title,
            "description": article.description,
            "tags": list(article.tags),
            "date": article.date.isoformat() if article.date else None,
            "draft": article.draft,
            "source_mtime": source_mtime,
        }
        self._cache.set(path, article.html, meta)
        return article, False


def _from_cache(cached: CacheEntry, path: str, source_path: Path) -> Article:
    """Create Article from cache entry."""
    meta = cached.meta
    return Article(
        path=path,
        source_path=source_path,
        title=meta["title"],
        html=cached.html,
        description=meta["description"],
        tags=tuple(meta["tags"]),
        date=Date.fromisoformat(meta["date"]) if meta["date"] else None,
        draft=meta["draft"],
    )
