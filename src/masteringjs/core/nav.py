"""Site navigation fragment.

The navigation bar is static markup. Page-view telemetry is delegated to an
optional reporter that contributes a script fragment; rendering never
depends on what the reporter does at runtime.
"""

import json
from dataclasses import dataclass
from typing import Protocol


class Reporter(Protocol):
    """Contributes client-side telemetry markup to the navigation."""

    def script(self) -> str: ...


@dataclass(frozen=True)
class NavLink:
    """Navigation bar link."""

    title: str
    href: str
    css_class: str = "link"


DEFAULT_LINKS: tuple[NavLink, ...] = (
    NavLink(title="Mastering JS", href="/", css_class="brand"),
    NavLink(title="Tutorials", href="/"),
)


class BeaconReporter:
    """Fire-and-forget page view beacon.

    On page load the browser issues a GET to the endpoint with the current
    path and hostname. The response is ignored and failures are swallowed
    client side.
    """

    def __init__(self, endpoint: str) -> None:
        self._endpoint = endpoint

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def script(self) -> str:
        endpoint = json.dumps(self._endpoint)
        return f"""
<script type="text/javascript">
  window.addEventListener('load', function() {{
    var qs = 'path=' + encodeURIComponent(window.location.pathname) +
      '&hostname=' + encodeURIComponent(window.location.hostname);
    fetch({endpoint} + '?' + qs).catch(function() {{}});
  }});
</script>
"""


class Navigation:
    """Renders the navigation bar shared by every page."""

    def __init__(
        self,
        links: tuple[NavLink, ...] = DEFAULT_LINKS,
        *,
        reporter: Reporter | None = None,
    ) -> None:
        self._links = links
        self._reporter = reporter

    def render(self) -> str:
        items = "\n".join(
            f'    <a class="{link.css_class}" href="{link.href}">{link.title}</a>'
            for link in self._links
        )
        html = f"""
<div class="nav">
  <div class="nav-inner">
{items}
  </div>
</div>
"""
        if self._reporter is not None:
            html += self._reporter.script()
        return html


def render_nav() -> str:
    """Render the default navigation without telemetry."""
    return Navigation().render()
