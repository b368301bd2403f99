"""Configuration management for the Mastering JS site.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from masteringjs.core.layout import TITLE_SUFFIX
from masteringjs.core.renderer import INDEX_TITLE

CONFIG_FILENAME = "masteringjs.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class DocsConfig:
    """Content and output locations."""

    source_dir: Path = field(default_factory=lambda: Path("content"))
    output_dir: Path = field(default_factory=lambda: Path("dist"))
    cache_dir: Path = field(default_factory=lambda: Path(".cache"))
    cache_enabled: bool = True


@dataclass
class SiteConfig:
    """Page skeleton configuration."""

    title_suffix: str = TITLE_SUFFIX
    index_title: str = INDEX_TITLE


@dataclass
class AnalyticsConfig:
    """Page view beacon configuration."""

    endpoint: str | None = None


@dataclass
class LiveReloadConfig:
    """Live reload configuration."""

    enabled: bool = True
    watch_patterns: list[str] | None = None


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    docs: DocsConfig
    site: SiteConfig
    analytics: AnalyticsConfig
    live_reload: LiveReloadConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for masteringjs.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        return cls(
            server=ServerConfig(),
            docs=DocsConfig(),
            site=SiteConfig(),
            analytics=AnalyticsConfig(),
            live_reload=LiveReloadConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            docs=cls._parse_docs(data.get("docs"), config_dir),
            site=cls._parse_site(data.get("site")),
            analytics=cls._parse_analytics(data.get("analytics")),
            live_reload=cls._parse_live_reload(data.get("live_reload")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_docs(cls, data: object, config_dir: Path) -> DocsConfig:
        """Parse docs configuration section.

        Args:
            data: Raw docs section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            DocsConfig instance
        """
        if data is None:
            return DocsConfig(
                source_dir=config_dir / "content",
                output_dir=config_dir / "dist",
                cache_dir=config_dir / ".cache",
            )

        if not isinstance(data, dict):
            raise ValueError("docs section must be a dictionary")

        paths: dict[str, Path] = {}
        for key, default in (("source_dir", "content"), ("output_dir", "dist"), ("cache_dir", ".cache")):
            value = data.get(key, default)
            if not isinstance(value, str):
                raise ValueError(f"docs.{key} must be a string")
            paths[key] = config_dir / value

        cache_enabled = data.get("cache_enabled", True)
        if not isinstance(cache_enabled, bool):
            raise ValueError("docs.cache_enabled must be a boolean")

        return DocsConfig(cache_enabled=cache_enabled, **paths)

    @classmethod
    def _parse_site(cls, data: object) -> SiteConfig:
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        title_suffix = data.get("title_suffix", TITLE_SUFFIX)
        if not isinstance(title_suffix, str):
            raise ValueError("site.title_suffix must be a string")

        index_title = data.get("index_title", INDEX_TITLE)
        if not isinstance(index_title, str):
            raise ValueError("site.index_title must be a string")

        return SiteConfig(title_suffix=title_suffix, index_title=index_title)

    @classmethod
    def _parse_analytics(cls, data: object) -> AnalyticsConfig:
        if data is None:
            return AnalyticsConfig()

        if not isinstance(data, dict):
            raise ValueError("analytics section must be a dictionary")

        endpoint = data.get("endpoint")
        if endpoint is not None and not isinstance(endpoint, str):
            raise ValueError("analytics.endpoint must be a string")

        return AnalyticsConfig(endpoint=endpoint)

    @classmethod
    def _parse_live_reload(cls, data: object) -> LiveReloadConfig:
        if data is None:
            return LiveReloadConfig()

        if not isinstance(data, dict):
            raise ValueError("live_reload section must be a dictionary")

        enabled = data.get("enabled", True)
        if not isinstance(enabled, bool):
            raise ValueError("live_reload.enabled must be a boolean")

        watch_patterns_raw = data.get("watch_patterns")
        watch_patterns: list[str] | None = None
        if watch_patterns_raw is not None:
            if not isinstance(watch_patterns_raw, list):
                raise ValueError("live_reload.watch_patterns must be a list")
            watch_patterns = []
            for item in watch_patterns_raw:
                if not isinstance(item, str):
                    raise ValueError("live_reload.watch_patterns items must be strings")
                watch_patterns.append(item)

        return LiveReloadConfig(enabled=enabled, watch_patterns=watch_patterns)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        source_dir: Path | None = None,
        output_dir: Path | None = None,
        cache_enabled: bool | None = None,
        live_reload_enabled: bool | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Returns:
            New Config instance with overrides applied
        """
        server = replace(
            self.server,
            host=host if host is not None else self.server.host,
            port=port if port is not None else self.server.port,
        )
        docs = replace(
            self.docs,
            source_dir=source_dir if source_dir is not None else self.docs.source_dir,
            output_dir=output_dir if output_dir is not None else self.docs.output_dir,
            cache_enabled=cache_enabled if cache_enabled is not None else self.docs.cache_enabled,
        )
        live_reload = self.live_reload
        if live_reload_enabled is not None:
            live_reload = replace(self.live_reload, enabled=live_reload_enabled)

        return replace(self, server=server, docs=docs, live_reload=live_reload)
