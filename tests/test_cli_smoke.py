"""Smoke tests for CLI commands.

Uses Click's CliRunner with documents written to a temp directory.
"""

import json
import warnings

import pytest
from click.testing import CliRunner

from colorfill.cli.main import cli
from colorfill.cli.output import describe_color_value
from colorfill.models import Color, Many


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def base_args(tmp_path):
    """Point the CLI at a config file that does not exist."""
    return ["--config", str(tmp_path / "config.json")]


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        """Test main CLI help displays."""
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'decode and normalize JSON color values' in result.output

    def test_version_flag(self, runner):
        """Test --version flag works."""
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '0.1.0' in result.output

    @pytest.mark.parametrize("command", ["parse", "normalize", "check"])
    def test_command_help(self, runner, command):
        """Test subcommand help."""
        result = runner.invoke(cli, [command, '--help'])
        assert result.exit_code == 0


@pytest.mark.integration
class TestParseCommand:
    """Test the parse command."""

    def test_single(self, runner, base_args, write_document):
        """Test a single color is printed with its components."""
        path = write_document({"color": "#F0F"})
        result = runner.invoke(cli, base_args + ["parse", str(path)])
        assert result.exit_code == 0
        assert "single #ff00ff (255, 0, 255)" in result.output

    def test_many_from_stdin(self, runner, base_args):
        """Test a bare array read from stdin."""
        result = runner.invoke(cli, base_args + ["parse", "--raw", "-"], input='["#fff", "#00ff00"]')
        assert result.exit_code == 0
        assert "many (2 colors)" in result.output
        assert "[1] #00ff00 (0, 255, 0)" in result.output

    def test_rainbow(self, runner, base_args, write_document):
        """Test the rainbow literal."""
        path = write_document({"color": "rainbow"})
        result = runner.invoke(cli, base_args + ["parse", str(path)])
        assert result.exit_code == 0
        assert result.output.strip() == "rainbow"

    def test_invalid_color(self, runner, base_args, write_document):
        """Test a bad color exits 1 with a readable message."""
        path = write_document({"color": "#gggggg"})
        result = runner.invoke(cli, base_args + ["parse", str(path)])
        assert result.exit_code == 1
        assert "ERROR: Invalid value for 'color'" in result.output
        assert "Traceback" not in result.output

    def test_invalid_raw_value(self, runner, base_args):
        """Test a bare value of the wrong kind."""
        result = runner.invoke(cli, base_args + ["parse", "--raw", "-"], input="42")
        assert result.exit_code == 1
        assert "got number" in result.output

    def test_missing_file(self, runner, base_args, tmp_path):
        """Test a missing file exits 1."""
        result = runner.invoke(cli, base_args + ["parse", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "File not found" in result.output


@pytest.mark.integration
class TestNormalizeCommand:
    """Test the normalize command."""

    def test_prints_canonical_document(self, runner, base_args, write_document):
        """Test the document is printed in canonical form."""
        path = write_document({"color": ["#F00", "#000"], "name": "dusk"})
        result = runner.invoke(cli, base_args + ["normalize", str(path)])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"color": ["#ff0000", "#000000"]}

    def test_in_place_with_backup(self, runner, base_args, write_document):
        """Test in-place rewrite keeps a backup by default."""
        path = write_document({"color": "#ABC"})
        result = runner.invoke(cli, base_args + ["normalize", "--in-place", str(path)])
        assert result.exit_code == 0
        assert json.loads(path.read_text()) == {"color": "#aabbcc"}
        assert path.with_suffix(".json.bak").exists()

    def test_config_disables_backup(self, runner, tmp_path, write_document):
        """Test config values are used when no flag is given."""
        config_path = write_document({"backup": False, "indent": 0}, name="config.json")
        path = write_document({"color": "#ABC"})
        result = runner.invoke(
            cli, ["--config", str(config_path), "normalize", "-i", str(path)]
        )
        assert result.exit_code == 0
        assert path.read_text().strip() == '{"color":"#aabbcc"}'
        assert not path.with_suffix(".json.bak").exists()

    def test_in_place_rejects_stdin(self, runner, base_args):
        """Test --in-place needs a real file."""
        result = runner.invoke(cli, base_args + ["normalize", "-i", "-"], input='{"color": "#fff"}')
        assert result.exit_code == 2

    def test_invalid_document_untouched(self, runner, base_args, write_document):
        """Test a failing document is not rewritten."""
        path = write_document('{"color": ["#fff", 1]}')
        result = runner.invoke(cli, base_args + ["normalize", "-i", str(path)])
        assert result.exit_code == 1
        assert "index 1" in result.output
        assert path.read_text() == '{"color": ["#fff", 1]}'

    def test_invalid_config(self, runner, write_document):
        """Test a broken config file is reported."""
        config_path = write_document("{", name="config.json")
        result = runner.invoke(cli, ["--config", str(config_path), "normalize", "-"], input="{}")
        assert result.exit_code == 1
        assert "invalid syntax" in result.output


@pytest.mark.integration
class TestCheckCommand:
    """Test the check command."""

    def test_all_valid(self, runner, base_args, write_document):
        """Test a clean batch exits 0."""
        first = write_document({"color": "rainbow"}, name="a.json")
        second = write_document({"color": []}, name="b.json")
        result = runner.invoke(cli, base_args + ["check", str(first), str(second)])
        assert result.exit_code == 0
        assert "OK    " in result.output
        assert "(2 total)" in result.output

    def test_reports_every_failure(self, runner, base_args, write_document, tmp_path):
        """Test all failing files are listed, not just the first."""
        good = write_document({"color": "#fff"}, name="good.json")
        bad = write_document({"color": "Rainbow"}, name="bad.json")
        missing = tmp_path / "missing.json"
        result = runner.invoke(cli, base_args + ["check", str(bad), str(good), str(missing)])
        assert result.exit_code == 1
        assert f"FAIL  {bad}" in result.output
        assert f"FAIL  {missing}" in result.output
        assert "Failed 2 of 3 operations" in result.output


@pytest.mark.integration
class TestUndecodableInput:
    """Test files that are not UTF-8 text."""

    def test_parse_reports_error(self, runner, base_args, tmp_path):
        """Test parse exits 1 with a message instead of a traceback."""
        bad = tmp_path / "bad.json"
        bad.write_bytes(b'{"color": "#ff\xff000"}')

        result = runner.invoke(cli, base_args + ["parse", str(bad)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert "not valid UTF-8" in result.output

    def test_normalize_reports_error(self, runner, base_args, tmp_path):
        """Test normalize exits 1 and leaves the file alone."""
        bad = tmp_path / "bad.json"
        bad.write_bytes(b"\xff")

        result = runner.invoke(cli, base_args + ["normalize", "-i", str(bad)])

        assert result.exit_code == 1
        assert bad.read_bytes() == b"\xff"

    def test_check_continues_past_bad_file(self, runner, base_args, tmp_path, write_document):
        """Test check reports the bad file and still checks the others."""
        bad = tmp_path / "bad.json"
        bad.write_bytes(b"\xff")
        good = write_document({"color": "#fff"}, name="good.json")
        other = write_document({"color": 3}, name="other.json")

        result = runner.invoke(cli, base_args + ["check", str(bad), str(good), str(other)])

        assert result.exit_code == 1
        assert f"FAIL  {bad}" in result.output
        assert f"OK    {good}" in result.output
        assert f"FAIL  {other}" in result.output
        assert "Failed 2 of 3 operations" in result.output


@pytest.mark.integration
class TestStdinInput:
    """Test reading documents from stdin."""

    def test_no_deprecation_warnings(self, runner, base_args):
        """Test reading stdin does not use deprecated click helpers."""
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", DeprecationWarning)
            result = runner.invoke(cli, base_args + ["parse", "-"], input='{"color": "#0f0"}')

        assert result.exit_code == 0
        assert not [w for w in caught if "get_text_stream" in str(w.message)]
        assert "single #00ff00 (0, 255, 0)" in result.output


class TestDescribeColorValue:
    """Test rendering of decoded values."""

    @pytest.mark.unit
    def test_many(self):
        """Test each color gets its own indexed line."""
        lines = describe_color_value(Many(colors=(Color.off(),)))
        assert lines == ["many (1 colors)", "  [0] #000000 (0, 0, 0)"]

    @pytest.mark.unit
    def test_rejects_non_variants(self):
        """Test anything other than a variant raises TypeError."""
        with pytest.raises(TypeError):
            describe_color_value(Color.off())
