"""Smoke tests: imports work, CLI --help works."""

from click.testing import CliRunner

from mermaid_lint.__main__ import main


def test_import():
    import mermaid_lint

    assert mermaid_lint.validate is not None


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "Validate a Mermaid diagram" in result.output
