"""Page layout.

Wraps a content fragment in the document skeleton shared by every page:
head with stylesheets, navigation bar, title heading and date line.

Values are interpolated verbatim. Escaping happens where text enters the
system (see ``masteringjs.core.content``), never here.
"""

from datetime import date as Date

from masteringjs.core.nav import Navigation
from masteringjs.core.types import PageParams

TITLE_SUFFIX = "Mastering JS"

DEFAULT_STYLESHEETS: tuple[str, ...] = (
    '<link rel="stylesheet" href="/assets/style.css" />',
    '<link rel="stylesheet" href="/assets/github.css" />',
    '<link href="https://fonts.googleapis.com/css?family=Montserrat:300,400,700|Inconsolata:400,700" rel="stylesheet">',
)

# Locale independent, matches the "ll" short form (e.g. "May 13, 2019")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_date(value: Date) -> str:
    """Format a date as abbreviated month, day and year."""
    return f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"


class Layout:
    """Document skeleton renderer.

    Args:
        title_suffix: Text appended to every ``<title>``
        stylesheets: Link tags placed in ``<head>``
        navigation: Navigation bar renderer (default: no telemetry)
    """

    def __init__(
        self,
        *,
        title_suffix: str = TITLE_SUFFIX,
        stylesheets: tuple[str, ...] = DEFAULT_STYLESHEETS,
        navigation: Navigation | None = None,
    ) -> None:
        self._title_suffix = title_suffix
        self._stylesheets = stylesheets
        self._navigation = navigation or Navigation()

    @property
    def navigation(self) -> Navigation:
        return self._navigation

    def render(self, params: PageParams) -> str:
        """Render a complete HTML document.

        Args:
            params: Page title, optional date and content fragment

        Returns:
            HTML document string
        """
        links = "\n    ".join(self._stylesheets)
        date_line = format_date(params.date) if params.date is not None else ""
        return f"""
<html>
  <head>
    <title>{params.title} - {self._title_suffix}</title>

    {links}
  </head>
  <body>
    {self._navigation.render()}
    <div class="content">
      <h1>{params.title}</h1>
      <div class="date">
        {date_line}
      </div>
      {params.content}
    </div>
  </body>
</html>
"""


def render_page(params: PageParams, *, navigation: Navigation | None = None) -> str:
    """Render a page with the default skeleton."""
    return Layout(navigation=navigation).render(params)
