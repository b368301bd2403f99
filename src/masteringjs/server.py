"""aiohttp development server.

Application factory and route registration for previewing the site.
"""

import logging

from aiohttp import web

from masteringjs.api.pages import create_pages_routes
from masteringjs.api.track import create_track_routes
from masteringjs.app_keys import live_reload_key, renderer_key
from masteringjs.assets import get_static_dir
from masteringjs.build import create_renderer
from masteringjs.config import Config
from masteringjs.live.reload import LiveReloadManager, create_live_reload_routes

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()
    app[renderer_key] = create_renderer(config)

    # Specific routes first; page routes end with a catch-all
    app.router.add_routes(create_track_routes())

    if config.live_reload.enabled:
        manager = LiveReloadManager(
            config.docs.source_dir,
            watch_patterns=config.live_reload.watch_patterns,
        )
        app[live_reload_key] = manager
        app.router.add_routes(create_live_reload_routes(manager))
        app.on_startup.append(_start_live_reload)
        app.on_cleanup.append(_stop_live_reload)

    assets_dir = get_static_dir() / "assets"
    if assets_dir.exists():
        app.router.add_static("/assets", assets_dir)

    app.router.add_routes(create_pages_routes())

    return app


async def _start_live_reload(app: web.Application) -> None:
    await app[live_reload_key].start()


async def _stop_live_reload(app: web.Application) -> None:
    await app[live_reload_key].stop()


def run_server(config: Config) -> None:
    """Run the server until interrupted."""
    app = create_app(config)
    logger.info(f"Serving {config.docs.source_dir} on http://{config.server.host}:{config.server.port}")
    web.run_app(app, host=config.server.host, port=config.server.port, print=None)
