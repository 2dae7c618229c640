"""CLI smoke tests."""

from click.testing import CliRunner
from swagger_schema_docs.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "transform" in result.output
    assert "document" in result.output
    assert "export-fields" in result.output
    assert "generate-config" in result.output
