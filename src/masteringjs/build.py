"""Static site build.

Writes the post list and every published article as ``index.html`` files
under the output directory, plus the bundled stylesheets.
"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from masteringjs.assets import get_static_dir
from masteringjs.config import Config
from masteringjs.core.cache import FileCache
from masteringjs.core.content import ContentLoader
from masteringjs.core.layout import Layout
from masteringjs.core.nav import BeaconReporter, Navigation
from masteringjs.core.renderer import PageRenderer

logger = logging.getLogger(__name__)


def create_renderer(config: Config) -> PageRenderer:
    """Create a PageRenderer from configuration."""
    reporter = BeaconReporter(config.analytics.endpoint) if config.analytics.endpoint else None
    layout = Layout(
        title_suffix=config.site.title_suffix,
        navigation=Navigation(reporter=reporter),
    )
    cache = FileCache(config.docs.cache_dir) if config.docs.cache_enabled else None
    return PageRenderer(
        ContentLoader(config.docs.source_dir),
        layout,
        cache,
        index_title=config.site.index_title,
    )


@dataclass
class BuildReport:
    """Summary of a site build."""

    output_dir: Path
    pages: list[Path] = field(default_factory=list)
    assets_copied: bool = False

    @property
    def page_count(self) -> int:
        return len(self.pages)


class SiteBuilder:
    """Renders the whole site into a directory.

    Args:
        renderer: Page renderer for the content source
        output_dir: Destination directory (created if missing)
    """

    def __init__(self, renderer: PageRenderer, output_dir: Path) -> None:
        self._renderer = renderer
        self._output_dir = output_dir

    def build(self) -> BuildReport:
        """Render every page and copy assets.

        Returns:
            BuildReport listing written files

        Raises:
            InvalidInputError: If any source file is malformed
        """
        report = BuildReport(output_dir=self._output_dir)
        self._output_dir.mkdir(parents=True, exist_ok=True)

        self._remove_stale_pages()

        articles = self._renderer.articles()
        report.pages.append(self._write("", self._renderer.render_index(articles)))

        for article in articles:
            report.pages.append(self._write(article.path, self._renderer.render_article(article)))

        report.assets_copied = self._copy_assets()
        logger.info(f"Built {report.page_count} pages into {self._output_dir}")
        return report

    def _remove_stale_pages(self) -> None:
        """Delete pages left by a previous build, keeping copied assets."""
        assets_dir = self._output_dir / "assets"
        for page in list(self._output_dir.rglob("index.html")):
            if not page.is_relative_to(assets_dir):
                page.unlink()

        # Deepest first so emptied parents are removed too
        directories = [d for d in self._output_dir.rglob("*") if d.is_dir() and not d.is_relative_to(assets_dir)]
        for directory in sorted(directories, key=lambda d: len(d.parts), reverse=True):
            if not any(directory.iterdir()):
                directory.rmdir()

    def _write(self, path: str, html: str) -> Path:
        target = self._output_dir / path / "index.html" if path else self._output_dir / "index.html"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")
        logger.debug(f"Wrote {target}")
        return target

    def _copy_assets(self) -> bool:
        assets_dir = get_static_dir() / "assets"
        if not assets_dir.is_dir():
            logger.warning(f"No bundled assets found in {assets_dir}")
            return False
        shutil.copytree(assets_dir, self._output_dir / "assets", dirs_exist_ok=True)
        return True
