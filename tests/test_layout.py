"""Tests for the page layout."""

import re
from datetime import date

import pytest
from masteringjs.core.layout import Layout, format_date, render_page
from masteringjs.core.nav import BeaconReporter, Navigation, render_nav
from masteringjs.core.types import PageParams

DATE_DIV_RE = re.compile(r'<div class="date">(.*?)</div>', re.DOTALL)


def _date_line(html: str) -> str:
    match = DATE_DIV_RE.search(html)
    assert match is not None
    return match.group(1).strip()


class TestFormatDate:
    """Tests for format_date()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (date(2019, 5, 13), "May 13, 2019"),
            (date(2020, 1, 2), "Jan 2, 2020"),
            (date(1999, 12, 31), "Dec 31, 1999"),
        ],
    )
    def test__date__abbreviated_month_day_year(self, value: date, expected: str) -> None:
        """Format as abbreviated month, unpadded day and year."""
        assert format_date(value) == expected


class TestRenderPage:
    """Tests for render_page()."""

    def test__basic_page__contains_title_heading_and_content(self) -> None:
        """Render title, heading and verbatim content."""
        html = render_page(PageParams(title="Test", content="<p>hi</p>"))

        assert "<title>Test - Mastering JS</title>" in html
        assert "<h1>Test</h1>" in html
        assert "<p>hi</p>" in html
        assert '<div class="date">' in html
        assert _date_line(html) == ""

    def test__with_date__renders_formatted_date(self) -> None:
        """Render the date line in short form."""
        html = render_page(PageParams(title="T", content="", date=date(2019, 5, 13)))

        assert _date_line(html) == "May 13, 2019"

    def test__same_input__identical_output(self) -> None:
        """Rendering is deterministic."""
        params = PageParams(title="T", content="<p>x</p>", date=date(2021, 7, 4))

        assert render_page(params) == render_page(params)

    def test__stylesheets__always_present(self) -> None:
        """The fixed stylesheet links are in the head."""
        html = render_page(PageParams(title="T", content=""))

        head = html.split("</head>")[0]
        assert '<link rel="stylesheet" href="/assets/style.css" />' in head
        assert '<link rel="stylesheet" href="/assets/github.css" />' in head
        assert "fonts.googleapis.com/css?family=Montserrat" in head

    def test__navigation__embedded_before_content(self) -> None:
        """The default navigation precedes the content block."""
        html = render_page(PageParams(title="T", content=""))

        assert render_nav().strip() in html
        assert html.index('<div class="nav">') < html.index('<div class="content">')

    def test__no_escaping__title_inserted_verbatim(self) -> None:
        """Title markup is inserted as given."""
        html = render_page(PageParams(title="<em>Hi</em>", content=""))

        assert "<h1><em>Hi</em></h1>" in html

    def test__injected_reporter__script_in_page(self) -> None:
        """A navigation with a reporter adds its beacon script."""
        navigation = Navigation(reporter=BeaconReporter("/api/track"))

        html = render_page(PageParams(title="T", content=""), navigation=navigation)

        assert '"/api/track"' in html
        assert "<script" in html


class TestLayout:
    """Tests for a configured Layout."""

    def test__custom_suffix__used_in_title(self) -> None:
        """Use the configured title suffix."""
        layout = Layout(title_suffix="Docs")

        html = layout.render(PageParams(title="Intro", content=""))

        assert "<title>Intro - Docs</title>" in html

    def test__custom_stylesheets__replace_defaults(self) -> None:
        """Use the configured stylesheet links."""
        layout = Layout(stylesheets=('<link rel="stylesheet" href="/x.css" />',))

        html = layout.render(PageParams(title="T", content=""))

        assert "/x.css" in html
        assert "/assets/style.css" not in html
