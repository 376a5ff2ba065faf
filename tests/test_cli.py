"""Tests for the command line interface."""

import pytest
from click.testing import CliRunner

from websitemover.cli.main import cli
from websitemover.config import read_configuration_file, write_configuration_file
from websitemover.config.models import MoveWebsiteFilesConfiguration


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def settings_file(tmp_path):
    """Settings with console logging only."""
    path = tmp_path / "websitemover.yaml"
    path.write_text("logging:\n  level: WARNING\n  file_enabled: false\n", encoding="utf-8")
    return path


@pytest.fixture
def website(tmp_path):
    """A small generated website."""
    root = tmp_path / "Working" / "Output" / "Website"
    (root / "html").mkdir(parents=True)
    (root / "index.html").write_text("index")
    (root / "html" / "topic.htm").write_text("topic")
    return root


class TestMoveCommand:
    """Tests for the move command."""

    def test_manual_move(self, runner, settings_file, website, tmp_path):
        """Test moving file by file."""
        destination = tmp_path / "Help"

        result = runner.invoke(
            cli, ["--config", str(settings_file), "move", str(website), str(destination), "--manual"]
        )

        assert result.exit_code == 0, result.output
        assert (destination / "html" / "topic.htm").exists()
        assert "Moved 2 files for the website content" in result.output
        assert "Relocation Summary" in result.output

    def test_direct_move(self, runner, settings_file, website, tmp_path):
        """Test moving whole folders."""
        destination = tmp_path / "Help"

        result = runner.invoke(
            cli, ["--config", str(settings_file), "move", str(website), str(destination), "--direct"]
        )

        assert result.exit_code == 0, result.output
        assert (destination / "html" / "topic.htm").exists()
        assert "(not counted)" in result.output

    def test_strategy_from_plugin_config(self, runner, settings_file, website, tmp_path):
        """Test that the fragment selects the strategy when no flag is given."""
        fragment = tmp_path / "MoveWebsiteFiles.xml"
        write_configuration_file(fragment, MoveWebsiteFilesConfiguration(use_direct_move=True))
        destination = tmp_path / "Help"

        result = runner.invoke(
            cli,
            [
                "--config", str(settings_file),
                "move", str(website), str(destination),
                "--plugin-config", str(fragment),
            ],
        )

        assert result.exit_code == 0, result.output
        assert "direct" in result.output

    def test_progress_interval(self, runner, settings_file, website, tmp_path):
        """Test overriding the progress interval."""
        result = runner.invoke(
            cli,
            [
                "--config", str(settings_file),
                "move", str(website), str(tmp_path / "Help"),
                "--manual", "--progress-interval", "1",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Moved 1 files" in result.output

    def test_collision_fails(self, runner, settings_file, website, tmp_path):
        """Test that errors exit with status 1."""
        destination = tmp_path / "Help"
        (destination / "html").mkdir(parents=True)

        result = runner.invoke(
            cli, ["--config", str(settings_file), "move", str(website), str(destination), "--direct"]
        )

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_overlapping_paths_fail(self, runner, settings_file, website):
        """Test that overlapping source and destination are refused."""
        result = runner.invoke(
            cli, ["--config", str(settings_file), "move", str(website), str(website / "out")]
        )

        assert result.exit_code == 1
        assert "overlap" in result.output

    def test_progress_printed(self, runner, settings_file, website, tmp_path):
        """Test that relocation progress reaches the console."""
        result = runner.invoke(
            cli,
            ["--config", str(settings_file), "move", str(website), str(tmp_path / "Help"), "--manual"],
        )

        assert result.exit_code == 0, result.output
        assert "Moving website files from" in result.output


class TestBuildCommand:
    """Tests for the build command."""

    def test_build_step(self, runner, settings_file, website, tmp_path):
        """Test running the website copy step with the plug-in."""
        output = tmp_path / "Help"

        result = runner.invoke(
            cli,
            ["--config", str(settings_file), "build", str(tmp_path / "Working"), str(output), "--perf"],
        )

        assert result.exit_code == 0, result.output
        assert (output / "index.html").read_text() == "index"
        assert "Build step complete" in result.output

    def test_malformed_plugin_config(self, runner, settings_file, website, tmp_path):
        """Test that a malformed fragment aborts the build."""
        fragment = tmp_path / "broken.xml"
        fragment.write_text("<configuration><useDirectMove>perhaps</useDirectMove></configuration>")

        result = runner.invoke(
            cli,
            [
                "--config", str(settings_file),
                "build", str(tmp_path / "Working"), str(tmp_path / "Help"),
                "--plugin-config", str(fragment),
            ],
        )

        assert result.exit_code == 1
        assert (website / "index.html").exists()

    def test_undecodable_plugin_config(self, runner, settings_file, website, tmp_path):
        """Test that a fragment with invalid bytes is reported as malformed."""
        fragment = tmp_path / "broken.xml"
        fragment.write_bytes(b"<configuration><useDirectMove>\xff</useDirectMove></configuration>")

        result = runner.invoke(
            cli,
            [
                "--config", str(settings_file),
                "build", str(tmp_path / "Working"), str(tmp_path / "Help"),
                "--plugin-config", str(fragment),
            ],
        )

        assert result.exit_code == 1
        assert "Invalid configuration XML" in result.output
        assert (website / "index.html").exists()

    def test_help_describes_folder_layout(self, runner, settings_file):
        """Test that the help explains which folder layouts are refused."""
        result = runner.invoke(cli, ["--config", str(settings_file), "build", "--help"])

        assert result.exit_code == 0
        assert "nested" in result.output


class TestConfigCommands:
    """Tests for the config command group."""

    def test_show_defaults(self, runner, settings_file):
        """Test showing the default configuration."""
        result = runner.invoke(cli, ["--config", str(settings_file), "config", "show"])

        assert result.exit_code == 0, result.output
        assert "Direct move" in result.output
        assert "Disabled" in result.output

    def test_show_file(self, runner, settings_file, tmp_path):
        """Test showing a saved configuration."""
        fragment = tmp_path / "MoveWebsiteFiles.xml"
        write_configuration_file(fragment, MoveWebsiteFilesConfiguration(use_direct_move=True))

        result = runner.invoke(cli, ["--config", str(settings_file), "config", "show", str(fragment)])

        assert result.exit_code == 0, result.output
        assert "Enabled" in result.output

    def test_edit_confirmed(self, runner, settings_file, tmp_path):
        """Test saving an edited configuration."""
        fragment = tmp_path / "MoveWebsiteFiles.xml"

        result = runner.invoke(
            cli, ["--config", str(settings_file), "config", "edit", str(fragment)], input="y\ny\n"
        )

        assert result.exit_code == 0, result.output
        assert read_configuration_file(fragment).use_direct_move is True

    def test_edit_discarded(self, runner, settings_file, tmp_path):
        """Test that discarded edits leave the file alone."""
        fragment = tmp_path / "MoveWebsiteFiles.xml"
        write_configuration_file(fragment, MoveWebsiteFilesConfiguration())

        result = runner.invoke(
            cli, ["--config", str(settings_file), "config", "edit", str(fragment)], input="y\nn\n"
        )

        assert result.exit_code == 0, result.output
        assert "discarded" in result.output
        assert read_configuration_file(fragment).use_direct_move is False


def test_version(runner):
    """Test the version option."""
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "websitemover" in result.output
