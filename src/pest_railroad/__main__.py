"""CLI entry point for pest-railroad."""

import sys

import click

from pest_railroad.config import OUTPUT_FORMATS, DiagramConfig
from pest_railroad.errors import GrammarSyntaxError
from pest_railroad.renderers.base import Renderer
from pest_railroad.renderers.svg import RailroadRenderer
from pest_railroad.transform.engine import generate_diagram


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option(
    "--format", "-f", "output_format", type=click.Choice(OUTPUT_FORMATS), default="svg", help="Output format"
)
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--mark-insensitive", "mark_insensitive", is_flag=True, help="Prefix case-insensitive strings with ^")
@click.option("--quiet", "-q", "quiet", is_flag=True, help="Do not print warnings for unsupported rules")
def main(input: str | None, output_format: str, output: str | None, mark_insensitive: bool, quiet: bool) -> None:
    """Pest grammar to railroad diagram output."""
    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    config = DiagramConfig(mark_case_insensitive=mark_insensitive, output_format=output_format)

    try:
        root, warnings = generate_diagram(text, config)
    except GrammarSyntaxError as e:
        click.echo(f"parse error:\n{e}", err=True)
        sys.exit(1)

    if not quiet:
        for warning in warnings:
            click.echo(f"Warning: {warning}", err=True)

    renderer: Renderer = RailroadRenderer(output_format)
    rendered = renderer.render(root)

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered)


if __name__ == "__main__":
    main()
