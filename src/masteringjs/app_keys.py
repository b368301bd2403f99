"""Application keys for type-safe app configuration access."""

from aiohttp import web

from masteringjs.core.renderer import PageRenderer
from masteringjs.live.reload import LiveReloadManager

renderer_key = web.AppKey("renderer", PageRenderer)
live_reload_key = web.AppKey("live_reload", LiveReloadManager)
