"""Tests for CLI commands."""

from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner
from masteringjs.cli import cli
from masteringjs.config import Config


class TestBuildCommand:
    """Tests for the build command."""

    def test__content__builds_site(self, tmp_path: Path, content_dir: Path) -> None:
        """Build pages into the output directory."""
        config_file = tmp_path / "masteringjs.toml"
        config_file.write_text('[docs]\nsource_dir = "content"\noutput_dir = "public"\n')

        runner = CliRunner()
        result = runner.invoke(cli, ["build", "-c", str(config_file)])

        assert result.exit_code == 0, result.output
        assert "Built 3 pages" in result.output
        assert (tmp_path / "public" / "index.html").exists()

    def test__output_override__used(self, tmp_path: Path, content_dir: Path) -> None:
        """Command line directories override the config file."""
        config_file = tmp_path / "masteringjs.toml"
        config_file.write_text("")
        output = tmp_path / "elsewhere"

        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["build", "-c", str(config_file), "-s", str(content_dir), "-o", str(output), "--no-cache"],
        )

        assert result.exit_code == 0, result.output
        assert (output / "promises" / "index.html").exists()
        assert not (tmp_path / ".cache").exists()

    def test__invalid_content__exits_with_error(self, tmp_path: Path, content_dir: Path) -> None:
        """Report malformed sources and exit 1."""
        (content_dir / "broken.md").write_text("+++\ntitle = \n+++\n")
        config_file = tmp_path / "masteringjs.toml"
        config_file.write_text('[docs]\nsource_dir = "content"\n')

        runner = CliRunner()
        result = runner.invoke(cli, ["build", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "Error: Invalid front matter" in result.output

    def test__invalid_config__exits_with_error(self, tmp_path: Path) -> None:
        """Report configuration errors and exit 1."""
        config_file = tmp_path / "masteringjs.toml"
        config_file.write_text('[server]\nport = "x"\n')

        runner = CliRunner()
        result = runner.invoke(cli, ["build", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "server.port must be an integer" in result.output

    def test__missing_config_file__fails(self, tmp_path: Path) -> None:
        """Reject a config path that does not exist."""
        runner = CliRunner()
        result = runner.invoke(cli, ["build", "-c", str(tmp_path / "nope.toml")])

        assert result.exit_code != 0


class TestServeCommand:
    """Tests for the serve command."""

    def test__overrides__passed_to_server(self, tmp_path: Path, content_dir: Path) -> None:
        """Start the server with command line overrides applied."""
        config_file = tmp_path / "masteringjs.toml"
        config_file.write_text("")

        runner = CliRunner()
        with patch("masteringjs.server.run_server") as run_server:
            result = runner.invoke(
                cli,
                [
                    "serve",
                    "-c",
                    str(config_file),
                    "-s",
                    str(content_dir),
                    "--port",
                    "9001",
                    "--no-live-reload",
                ],
            )

        assert result.exit_code == 0, result.output
        assert "Starting server on 127.0.0.1:9001" in result.output
        assert "Live reload: disabled" in result.output
        run_server.assert_called_once()
        config: Config = run_server.call_args.args[0]
        assert config.server.port == 9001
        assert config.docs.source_dir == content_dir
        assert config.live_reload.enabled is False
