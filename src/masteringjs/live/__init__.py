"""Live reload for development mode."""

from masteringjs.live.reload import LiveReloadManager

__all__ = ["LiveReloadManager"]
