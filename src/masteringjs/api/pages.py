"""HTML page endpoints.

Serves the post list and rendered articles with conditional-request headers.
"""

from datetime import UTC, datetime
from email.utils import format_datetime
from hashlib import md5

from aiohttp import web

from masteringjs.app_keys import live_reload_key, renderer_key
from masteringjs.live.reload import inject_live_reload

CACHE_CONTROL = "private, max-age=60"


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.get("/", get_index),
        web.get("/{path:.+}", get_page),
    ]


async def get_index(request: web.Request) -> web.Response:
    renderer = request.app[renderer_key]
    return _html_response(request, renderer.render_index())


async def get_page(request: web.Request) -> web.Response:
    path = request.match_info["path"]
    renderer = request.app[renderer_key]

    try:
        result = renderer.render(path)
    except FileNotFoundError:
        return _html_response(request, renderer.render_not_found(path), status=404)

    source_mtime = result.article.source_path.stat().st_mtime
    last_modified = datetime.fromtimestamp(source_mtime, tz=UTC)
    return _html_response(request, result.html, last_modified=last_modified)


def _html_response(
    request: web.Request,
    html: str,
    *,
    status: int = 200,
    last_modified: datetime | None = None,
) -> web.Response:
    if live_reload_key in request.app:
        html = inject_live_reload(html)

    if status != 200:
        return web.Response(text=html, content_type="text/html", status=status)

    etag = _compute_etag(html)
    if request.headers.get("If-None-Match") == etag:
        return web.Response(status=304, headers={"ETag": etag})

    headers = {"ETag": etag, "Cache-Control": CACHE_CONTROL}
    if last_modified is not None:
        headers["Last-Modified"] = format_datetime(last_modified, usegmt=True)

    return web.Response(text=html, content_type="text/html", headers=headers)


def _compute_etag(content: str) -> str:
    # First 16 hex chars (64 bits) are enough for cache validation
    content_hash = md5(content.encode("utf-8"), usedforsecurity=False).hexdigest()[:16]
    return f'"{content_hash}"'
