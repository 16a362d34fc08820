"""
WAQL Tool CLI - run WAQL queries against Wwise from the command line

Usage:
    waql --help
    waql run '$ from type Sound'
    waql run '$ from type Sound | name id path' --format csv
    waql run '$ from type Event | name' --output events.csv
    waql info
"""

import sys

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.syntax import Syntax
from rich.progress import Progress, SpinnerColumn, TextColumn

from . import __version__
from .client import WaapiClient
from .config import Settings
from .exceptions import WaqlToolError
from .executor import QueryExecutor, pretty_json
from .exporter import export_csv, to_csv_text
from .logging_config import setup_logging

console = Console()


def get_client(ctx) -> WaapiClient:
    """Get a client for the configured endpoint."""
    return WaapiClient(settings=ctx.obj["settings"])


def fail(message: str):
    """Print an error and exit with status 1."""
    console.print(f"[red]Error: {escape(message)}[/red]")
    sys.exit(1)


# =============================================================================
# MAIN CLI GROUP
# =============================================================================

@click.group()
@click.option("--url", envvar="WAQL_WAAPI_URL", help="WAAPI HTTP endpoint")
@click.option("--timeout", type=float, help="Read timeout in seconds")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__, prog_name="waql")
@click.pass_context
def cli(ctx, url, timeout, verbose):
    """
    WAQL Tool - query a running Wwise instance through WAAPI.

    \b
    Query syntax:
        <waql>                      e.g. $ from type Sound
        <waql> | <field> <field>    e.g. $ from type Sound | name id

    \b
    Environment Variables:
        WAQL_WAAPI_URL      - WAAPI endpoint (default: http://127.0.0.1:8090/waapi)
        WAQL_READ_TIMEOUT   - Read timeout in seconds (default: 30)
        WAQL_LOG_LEVEL      - Log level (default: WARNING)
    """
    overrides = {}
    if url:
        overrides["waapi_url"] = url
    if timeout is not None:
        overrides["read_timeout"] = timeout

    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        fail(f"Invalid configuration: {e}")

    setup_logging("DEBUG" if verbose else settings.log_level)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


# =============================================================================
# RUN COMMAND
# =============================================================================

@cli.command()
@click.argument("query")
@click.option("--format", "output_format", type=click.Choice(["table", "json", "csv"]), default="table", help="Output format")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Export the result table to a CSV file")
@click.pass_context
def run(ctx, query, output_format, output):
    """
    Execute a WAQL query.

    \b
    Examples:
        waql run '$ from type Sound'
        waql run '$ from type Sound | name id' --format csv
        waql run '$ "\\Actor-Mixer Hierarchy" select descendants | name type' -o objects.csv
    """
    with QueryExecutor(get_client(ctx)) as executor:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True
        ) as progress:
            progress.add_task("Executing query...", total=None)
            outcome = executor.execute(query)

    if not outcome.ok:
        fail(outcome.message)

    table = outcome.table

    if output:
        if table is None:
            fail("No table to export")
        try:
            path = export_csv(table, output)
        except WaqlToolError as e:
            fail(e.tagged())
        console.print(f"[green]✓[/green] Exported {outcome.count} row(s) to {escape(str(path))}")
        return

    if output_format == "json":
        console.print(Syntax(outcome.raw_text, "json"))
        return

    if output_format == "csv":
        if table is not None:
            click.echo(to_csv_text(table), nl=False)
        return

    # Table output
    if table is None:
        console.print(Syntax(outcome.raw_text, "json"))
        return

    rich_table = Table(show_header=True)
    for column in table.columns:
        rich_table.add_column(escape(column), style="cyan")
    for row in table.to_tuples():
        rich_table.add_row(*(escape(value) for value in row))

    console.print(rich_table)
    console.print(f"\n[dim]{outcome.status_message}[/dim]")


# =============================================================================
# INFO COMMAND
# =============================================================================

@cli.command()
@click.pass_context
def info(ctx):
    """Show information about the running Wwise instance."""
    with get_client(ctx) as client:
        try:
            data = client.get_info()
        except WaqlToolError as e:
            fail(e.tagged())

    console.print(Syntax(pretty_json(data), "json"))


# =============================================================================
# CONFIG COMMAND
# =============================================================================

@cli.command("config")
@click.pass_context
def config_show(ctx):
    """Show the effective configuration."""
    settings = ctx.obj["settings"]

    table = Table(title="Configuration", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for key, value in settings.model_dump().items():
        table.add_row(key, str(value))

    console.print(table)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
