"""CLI interface for the Mastering JS site.

Command-line tool for building and previewing the tutorial site.
"""

import logging
import sys
from pathlib import Path

import click

from masteringjs.config import Config

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover masteringjs.toml)",
)
source_dir_option = click.option(
    "--source-dir",
    "-s",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Markdown source directory (overrides config)",
)
cache_option = click.option(
    "--cache/--no-cache",
    default=None,
    help="Enable/disable caching of rendered articles (overrides config)",
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Mastering JS - tutorial site generator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@cli.command()
@config_option
@source_dir_option
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Output directory (overrides config)",
)
@cache_option
def build(
    config_path: Path | None,
    source_dir: Path | None,
    output_dir: Path | None,
    cache: bool | None,
) -> None:
    """Render the site into static HTML files."""
    from masteringjs.build import SiteBuilder, create_renderer

    try:
        config = Config.load(config_path).with_overrides(
            source_dir=source_dir,
            output_dir=output_dir,
            cache_enabled=cache,
        )
        click.echo(f"Source directory: {config.docs.source_dir}")
        click.echo(f"Output directory: {config.docs.output_dir}")

        report = SiteBuilder(create_renderer(config), config.docs.output_dir).build()
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(click.style(f"Built {report.page_count} pages", fg="green", bold=True))


@cli.command()
@config_option
@source_dir_option
@click.option("--host", default=None, help="Host to bind to (overrides config)")
@click.option("--port", "-p", type=int, default=None, help="Port to bind to (overrides config)")
@click.option(
    "--live-reload/--no-live-reload",
    default=None,
    help="Enable/disable live reload (overrides config, default: enabled)",
)
@cache_option
def serve(
    config_path: Path | None,
    source_dir: Path | None,
    host: str | None,
    port: int | None,
    live_reload: bool | None,
    cache: bool | None,
) -> None:
    """Start the preview server."""
    from masteringjs.server import run_server

    try:
        config = Config.load(config_path).with_overrides(
            host=host,
            port=port,
            source_dir=source_dir,
            cache_enabled=cache,
            live_reload_enabled=live_reload,
        )
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Source directory: {config.docs.source_dir}")
    if config.docs.cache_enabled:
        click.echo(f"Cache directory: {config.docs.cache_dir}")
    else:
        click.echo("Cache: disabled")
    if config.analytics.endpoint:
        click.echo(f"Analytics endpoint: {config.analytics.endpoint}")
    if config.live_reload.enabled:
        click.echo("Live reload: enabled")
    else:
        click.echo("Live reload: disabled")

    run_server(config)


if __name__ == "__main__":
    cli()
