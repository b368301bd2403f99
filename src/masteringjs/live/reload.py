"""WebSocket-based live reload for development mode.

Monitors source markdown files for changes and notifies connected clients
via WebSocket to trigger page reloads.
"""

import asyncio
import json
import logging
import weakref
from pathlib import Path
from urllib.parse import quote

from aiohttp import WSMsgType, web
from watchfiles import Change, awatch

logger = logging.getLogger(__name__)

LIVE_RELOAD_PATH = "/ws/live-reload"

LIVE_RELOAD_SCRIPT = f"""
<script type="text/javascript">
  (function() {{
    var scheme = window.location.protocol === 'https:' ? 'wss://' : 'ws://';
    var socket = new WebSocket(scheme + window.location.host + '{LIVE_RELOAD_PATH}');
    socket.onmessage = function(event) {{
      var message = JSON.parse(event.data);
      if (message.type === 'reload') {{
        window.location.reload();
      }}
    }};
  }})();
</script>
"""


def inject_live_reload(html: str) -> str:
    """Insert the live reload client before ``</body>``."""
    marker = "</body>"
    index = html.rfind(marker)
    if index == -1:
        return html + LIVE_RELOAD_SCRIPT
    return html[:index] + LIVE_RELOAD_SCRIPT + html[index:]


class LiveReloadManager:
    """Manages WebSocket connections and file watching for live reload.

    Coordinates between file system watcher and connected WebSocket clients
    to provide automatic page refresh on source file changes.
    """

    def __init__(
        self,
        source_dir: Path,
        watch_patterns: list[str] | None = None,
    ) -> None:
        """Initialize the live reload manager.

        Args:
            source_dir: Directory to watch for changes
            watch_patterns: Glob patterns to watch (default: ["**/*.md"])
        """
        self._source_dir = source_dir
        self._watch_patterns = watch_patterns or ["**/*.md"]
        self._connections: weakref.WeakSet[web.WebSocketResponse] = weakref.WeakSet()
        self._watch_task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        """Start the file watcher."""
        if self._watch_task is not None:
            return
        self._watch_task = asyncio.create_task(self._watch_files())

    async def stop(self) -> None:
        """Stop the file watcher and close all connections."""
        if self._watch_task is not None:
            self._watch_task.cancel()
            try:
                await self._watch_task
            except asyncio.CancelledError:
                pass
            self._watch_task = None

        for ws in list(self._connections):
            await ws.close()

    async def handle_websocket(self, request: web.Request) -> web.WebSocketResponse:
        """Handle WebSocket connection for live reload."""
        ws = web.WebSocketResponse()
        await ws.prepare(request)

        self._connections.add(ws)

        try:
            async for msg in ws:
                if msg.type == WSMsgType.ERROR:
                    break
        finally:
            self._connections.discard(ws)

        return ws

    async def _watch_files(self) -> None:
        """Watch for file changes and broadcast reload events."""
        async for changes in awatch(self._source_dir):
            for change_type, path_str in changes:
                if change_type == Change.deleted:
                    continue

                path = Path(path_str)
                if not self.matches_patterns(path):
                    continue

                url = self.to_url(path)
                logger.info(f"Source changed: {path}")
                await self.broadcast_reload(url)

    def matches_patterns(self, path: Path) -> bool:
        """Check if a path matches any watch pattern."""
        try:
            relative = path.relative_to(self._source_dir)
        except ValueError:
            return False

        # PurePath.match treats "**" as a single segment, so "**/*.md" alone
        # would miss files at the top of source_dir
        return any(
            relative.match(pattern) or relative.match(pattern.removeprefix("**/"))
            for pattern in self._watch_patterns
        )

    def to_url(self, file_path: Path) -> str:
        """Convert a source file path to its site URL.

        Args:
            file_path: Absolute file path

        Returns:
            Site URL (e.g., "/tutorials/promises/")
        """
        relative = file_path.relative_to(self._source_dir).with_suffix("")
        parts = relative.parts
        if parts and parts[-1] == "index":
            parts = parts[:-1]

        return f"/{quote('/'.join(parts))}/" if parts else "/"

    async def broadcast_reload(self, path: str) -> None:
        """Broadcast reload event to all connected clients.

        Args:
            path: Site URL that changed
        """
        if not self._connections:
            return

        message = json.dumps({"type": "reload", "path": path})

        for ws in list(self._connections):
            if ws.closed:
                continue
            try:
                await ws.send_str(message)
            except ConnectionResetError:
                # Client disconnected mid-send, will be cleaned up by WeakSet
                logger.debug("Live reload client disconnected during broadcast")


def create_live_reload_routes(manager: LiveReloadManager) -> list[web.RouteDef]:
    """Create routes for live reload WebSocket."""
    return [web.get(LIVE_RELOAD_PATH, manager.handle_websocket)]
