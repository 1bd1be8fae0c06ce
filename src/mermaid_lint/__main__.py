"""CLI entry point for mermaid-lint."""

import json
import logging
import sys

import click

from mermaid_lint.api import validate
from mermaid_lint.config import ValidatorConfig
from mermaid_lint.ir.diagnostics import ValidationResult


def format_text(result: ValidationResult) -> str:
    """Human-readable report: a status line, then one line per diagnostic."""
    status = "valid" if result.is_valid else "invalid"
    lines = [f"{status}: {result.diagram_type}"]
    for d in result.diagnostics:
        lines.append(f"{d.line}:{d.column} {d.code.value} {d.message}")
        if d.suggestion:
            lines.append(f"  suggestion: {d.suggestion}")
    return "\n".join(lines) + "\n"


def format_json(result: ValidationResult) -> str:
    return json.dumps(result.to_dict(), indent=2) + "\n"


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "-j", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--target-version", "-t", "target_version", type=str, default=None, help="Check compatibility with this Mermaid version")
@click.option("--quiet", "-q", "quiet", is_flag=True, help="Print nothing; report through the exit code only")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log parser activity to stderr")
def main(input: str | None, as_json: bool, target_version: str | None, quiet: bool, verbose: bool) -> None:
    """Validate a Mermaid diagram read from INPUT or stdin."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = ValidatorConfig(target_version=target_version, output_format="json" if as_json else "text")

    if input:
        try:
            with open(input, encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(2)
    else:
        text = sys.stdin.read()

    result = validate(text, target_version=config.target_version)

    if not quiet:
        if config.output_format == "json":
            click.echo(format_json(result), nl=False)
        else:
            click.echo(format_text(result), nl=False)

    sys.exit(0 if result.is_valid else 1)


if __name__ == "__main__":
    main()
