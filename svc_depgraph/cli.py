"""
Command-line interface for the dependency graph generator.
"""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import default_config
from .observability import configure_logging
from .pipeline import run_pipeline

console = Console(stderr=True)


def print_summary(summary: dict, output_path: str) -> None:
    """Show the run statistics as a table."""
    table = Table(title="Dependency Graph Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    for key, value in summary.items():
        table.add_row(key.replace("_", " ").title(), str(value))
    table.add_row("Output", output_path)

    console.print(table)


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write the diagram here instead")
@click.option("--quiet", "-q", is_flag=True, help="Do not echo the diagram to stdout")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, output: str | None, quiet: bool):
    """Render internal go-svc package dependencies as PlantUML."""
    configure_logging("DEBUG" if verbose else "INFO")

    if ctx.invoked_subcommand is not None:
        return

    config = default_config()
    if output:
        config = config.with_output(output)

    result = run_pipeline(config)

    if not result.success:
        console.print(f"[red]Error: {escape(result.error or '')}[/red]", highlight=False)
        if result.stack_trace:
            click.echo(result.stack_trace, err=True)
        raise click.Abort()

    if not quiet:
        click.echo(result.diagram, nl=False)

    print_summary(result.summary, result.output_path)


@cli.command()
def version():
    """Show version information."""
    console.print(f"svc-depgraph v{__version__}")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
