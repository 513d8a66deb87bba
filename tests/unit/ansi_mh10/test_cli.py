"""
Unit tests for the ansi-mh10 CLI commands.

Tests parse, describe and version with the bundled catalog.
"""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from src.ansi_mh10.cli import EXIT_ERRORS, EXIT_FATAL, EXIT_OK, app, exit_code_for, expand_escapes
from src.ansi_mh10.core import errors
from src.ansi_mh10.core.models import ResolvedDataIdentifier

runner = CliRunner()


class TestExpandEscapes:
    """Tests for escape expansion."""

    def test_named_escapes(self):
        """<GS>, <RS> and <EOT> become control characters."""
        assert expand_escapes("06<GS>D1<RS><EOT>") == "06\x1dD1\x1e\x04"

    def test_hex_escapes(self):
        """\\xNN escapes become the named character."""
        assert expand_escapes(r"D1\x1dB1\x1E") == "D1\x1dB1\x1e"

    def test_literal_control_characters_pass_through(self):
        """Text without escapes is unchanged."""
        assert expand_escapes("D1\x1dB1") == "D1\x1dB1"

    def test_unknown_names_unchanged(self):
        """Only the known escape names are expanded."""
        assert expand_escapes("<FOO>") == "<FOO>"


class TestExitCode:
    """Tests for exit code selection."""

    def test_clean_results(self):
        """No errors gives exit code 0."""
        results = [ResolvedDataIdentifier(key=4000, identifier="D", value="050203", position=1)]
        assert exit_code_for(results) == EXIT_OK

    def test_non_fatal_errors(self):
        """Non-fatal errors give exit code 1."""
        results = [ResolvedDataIdentifier.from_error(errors.no_data_identifier(), 0)]
        assert exit_code_for(results) == EXIT_ERRORS

    def test_fatal_errors(self):
        """Any fatal result gives exit code 2."""
        results = [
            ResolvedDataIdentifier.from_error(errors.no_data_identifier(), 0),
            ResolvedDataIdentifier.from_error(errors.no_records(), 0),
        ]
        assert exit_code_for(results) == EXIT_FATAL


class TestParseCommand:
    """Tests for the parse command."""

    def test_json_output(self):
        """JSON output lists each field with its offset."""
        result = runner.invoke(app, ["parse", "D050203<GS>B1", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [item["key"] for item in data] == [4000, 2000]
        assert [item["position"] for item in data] == [1, 9]
        assert data[0]["title"] == "DATE"

    def test_table_output(self):
        """The table shows titles of resolved fields."""
        result = runner.invoke(app, ["parse", "D050203"])

        assert result.exit_code == 0
        assert "DATE" in result.stdout

    def test_invalid_value_exit_code(self):
        """Non-fatal errors exit with code 1."""
        result = runner.invoke(app, ["parse", "9N123", "--json"])

        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert [e["code"] for e in data[0]["errors"]] == [3005, 3100]

    def test_empty_input_exit_code(self):
        """Empty input is fatal and exits with code 2."""
        result = runner.invoke(app, ["parse", "", "--json"])

        assert result.exit_code == 2
        data = json.loads(result.stdout)
        assert data[0]["errors"][0]["code"] == 3004

    def test_position_option(self):
        """--position shifts reported offsets."""
        result = runner.invoke(app, ["parse", "D050203", "--json", "--position", "10"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)[0]["position"] == 11

    def test_reads_stdin(self):
        """Data is read from stdin when no argument is given."""
        result = runner.invoke(app, ["parse", "--json"], input="D050203\n")

        assert result.exit_code == 0
        assert json.loads(result.stdout)[0]["key"] == 4000

    def test_reads_file(self, tmp_path):
        """Data is read from --file."""
        path = tmp_path / "label.txt"
        path.write_text("06<GS>D050203<RS>\n", encoding="utf-8")

        result = runner.invoke(app, ["parse", "--file", str(path), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data[0]["key"] == 4000
        assert data[0]["position"] == 4

    def test_data_and_file_conflict(self, tmp_path):
        """Passing both DATA and --file is a usage error."""
        path = tmp_path / "label.txt"
        path.write_text("D050203", encoding="utf-8")

        result = runner.invoke(app, ["parse", "D050203", "--file", str(path)])

        assert result.exit_code == 2


class TestDescribeCommand:
    """Tests for the describe command."""

    @pytest.mark.parametrize(
        "identifier,key,title",
        [("9N", "14009", "PPN"), ("D", "4000", "DATE")],
    )
    def test_known_identifier(self, identifier, key, title):
        """Known identifiers show their catalog entry."""
        result = runner.invoke(app, ["describe", identifier])

        assert result.exit_code == 0
        assert key in result.stdout
        assert title in result.stdout

    def test_unknown_identifier(self):
        """Unknown identifiers exit with code 1."""
        result = runner.invoke(app, ["describe", "1A"])

        assert result.exit_code == 1
        assert "Unknown data identifier" in result.stdout


class TestVersionCommand:
    """Tests for the version command."""

    def test_version(self):
        """version prints the package version."""
        from src import __version__

        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert f"ansi-mh10 version {__version__}" in result.stdout
