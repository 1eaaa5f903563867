"""Tests for the spec-command CLI."""

from click.testing import CliRunner

from spec_command.cli import cli


class TestManualCommand:
    """Test the manual command."""

    def test_builtin_manual(self, api_reference_file):
        """Test the built-in manual is printed as Markdown."""
        result = CliRunner().invoke(cli, ["manual", "--database", str(api_reference_file)])

        assert result.exit_code == 0
        assert "# __spec__ Reference Manual" in result.output
        assert "### PI" in result.output
        assert "`PI` — circle constant" in result.output

    def test_bundled_database(self):
        """Test the packaged database is used by default."""
        result = CliRunner().invoke(cli, ["manual", "--kind", "constant"])

        assert result.exit_code == 0
        assert "## constant" in result.output
        assert "## macro" not in result.output

    def test_kind_filter(self, api_reference_file):
        """Test --kind restricts the manual to one kind."""
        result = CliRunner().invoke(
            cli, ["manual", "--database", str(api_reference_file), "--kind", "macro"]
        )

        assert result.exit_code == 0
        assert "### wa" in result.output
        assert "### PI" not in result.output

    def test_snippet_source(self):
        """Test the snippet manual with a configured motor."""
        result = CliRunner().invoke(
            cli, ["manual", "--source", "snippet", "--motor", "th # two theta"]
        )

        assert result.exit_code == 0
        assert "## snippet" in result.output
        assert "### mv" in result.output

    def test_motor_source(self):
        """Test the motor manual lists mnemonic descriptions."""
        result = CliRunner().invoke(
            cli, ["manual", "--source", "motor", "--motor", "th # two theta"]
        )

        assert result.exit_code == 0
        assert "`th` — two theta" in result.output

    def test_malformed_database(self, tmp_path):
        """Test a malformed database exits with an error."""
        broken = tmp_path / "broken.json"
        broken.write_text("{not json")

        result = CliRunner().invoke(cli, ["manual", "--database", str(broken)])

        assert result.exit_code == 1
        assert "Error" in result.output


class TestKindsCommand:
    """Test the kinds command."""

    def test_lists_kinds(self):
        """Test every kind label is listed."""
        result = CliRunner().invoke(cli, ["kinds"])

        assert result.exit_code == 0
        for name in ("constant", "variable", "macro", "function", "keyword", "snippet"):
            assert name in result.output


class TestSnippetsCommand:
    """Test the snippets command."""

    def test_lists_snippets(self):
        """Test built-in snippets are listed."""
        result = CliRunner().invoke(cli, ["snippets"])

        assert result.exit_code == 0
        assert "plotselect" in result.output
        assert "d4scan" in result.output

    def test_user_template(self):
        """Test a user template is added to the list."""
        result = CliRunner().invoke(cli, ["snippets", "--template", "tw ${1%MOT} # tweak"])

        assert result.exit_code == 0
        assert "tw" in result.output
