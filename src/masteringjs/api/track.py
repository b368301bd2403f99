"""Page view beacon sink.

Receives the fire-and-forget requests emitted by ``BeaconReporter`` and logs
them. Always answers 204 so the client never has anything to handle.
"""

import logging

from aiohttp import web

logger = logging.getLogger(__name__)

TRACK_PATH = "/api/track"


def create_track_routes() -> list[web.RouteDef]:
    return [web.get(TRACK_PATH, track_page_view)]


async def track_page_view(request: web.Request) -> web.Response:
    path = request.query.get("path", "")
    hostname = request.query.get("hostname", "")
    logger.info(f"Page view: {hostname}{path}")
    return web.Response(status=204)
