"""Command-line interface for the Developer Feedback Loop."""

import json
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional, Tuple

import typer
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from devfeedback.config import get_settings
from devfeedback.database import Store, mask_url
from devfeedback.developers import Developer, DeveloperRegistry
from devfeedback.errors import DeveloperNotFoundError, DuplicateDeveloperError, StoreError
from devfeedback.feedback import FeedbackLog, FeedbackReporter
from devfeedback.logging import configure_logging, get_logger
from devfeedback.shell import InteractiveShell

logger = get_logger(__name__)

app = typer.Typer(
    name="devfeedback",
    help="Developer Feedback Loop - record developers and feedback about their work",
    add_completion=False,
)

console = Console()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """Start the interactive shell when no command is given."""
    settings = get_settings()
    if debug or settings.debug:
        configure_logging(log_level="DEBUG", log_file=settings.log_file, sql_echo=True)
    else:
        configure_logging(log_level=settings.log_level, log_file=settings.log_file)

    if ctx.invoked_subcommand is None:
        shell()


@contextmanager
def open_components() -> Generator[Tuple[DeveloperRegistry, FeedbackLog], None, None]:
    """
    Open the store and hydrate both collections for one command.

    The store is closed on every exit path. Store failures end the
    command with exit code 1.
    """
    settings = get_settings()
    settings.ensure_directories()

    try:
        with Store(settings.database_url) as store:
            developers = DeveloperRegistry(
                store, reject_duplicates=settings.reject_duplicate_developers
            )
            feedback = FeedbackLog(store)
            yield developers, feedback
    except StoreError as e:
        logger.error(f"Store failure: {e}")
        rprint(f"[red]Store error:[/red] {e}")
        raise typer.Exit(1)


def require_developer(developers: DeveloperRegistry, dev_id: str) -> Developer:
    """Look up a developer or raise DeveloperNotFoundError."""
    developer = developers.search_developer(dev_id)
    if developer is None:
        raise DeveloperNotFoundError(dev_id)
    return developer


@app.command("shell")
def shell() -> None:
    """Run the interactive menu."""
    with open_components() as (developers, feedback):
        InteractiveShell(developers, feedback, console=console).run()


# Developer commands
developer_app = typer.Typer(help="Developer registry")
app.add_typer(developer_app, name="developer")


@developer_app.command("add")
def developer_add(
    dev_id: str = typer.Argument(..., help="Developer ID"),
    name: str = typer.Argument(..., help="Developer name"),
    project: str = typer.Argument(..., help="Project the developer works on"),
) -> None:
    """Register a developer."""
    with open_components() as (developers, _):
        try:
            developers.add_developer(dev_id, name, project)
        except DuplicateDeveloperError as e:
            rprint(f"[red]{e}[/red]")
            raise typer.Exit(1)
    rprint("[green]Developer added successfully![/green]")


@developer_app.command("list")
def developer_list(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List developers in registration order."""
    with open_components() as (developers, _):
        if json_output:
            typer.echo(json.dumps([d.to_document() for d in developers], indent=2))
            return

        if not len(developers):
            rprint("[yellow]No developers found.[/yellow]")
            return

        table = Table(title="Developers", show_header=True)
        table.add_column("ID", style="cyan")
        table.add_column("Name", style="green")
        table.add_column("Project", style="yellow")

        for developer in developers:
            table.add_row(developer.dev_id, developer.name, developer.project)

        console.print(table)


@developer_app.command("show")
def developer_show(
    dev_id: str = typer.Argument(..., help="Developer ID"),
) -> None:
    """Show one developer and the feedback about them."""
    with open_components() as (developers, feedback):
        try:
            developer = require_developer(developers, dev_id)
        except DeveloperNotFoundError:
            rprint("[red]Developer not found![/red]")
            raise typer.Exit(1)

        console.print(developer.describe(), markup=False, highlight=False)
        items = feedback.for_developer(dev_id)
        rprint(f"[cyan]Feedback:[/cyan] {len(items)}")
        for item in items:
            console.print(f"  {item.describe()}", markup=False, highlight=False)


# Feedback commands
feedback_app = typer.Typer(help="Feedback log")
app.add_typer(feedback_app, name="feedback")


@feedback_app.command("add")
def feedback_add(
    dev_id: str = typer.Argument(..., help="Developer the feedback is about"),
    text: str = typer.Argument(..., help="Feedback text"),
) -> None:
    """Record feedback for a registered developer."""
    with open_components() as (developers, feedback):
        try:
            require_developer(developers, dev_id)
        except DeveloperNotFoundError:
            rprint("[red]Developer not found![/red]")
            raise typer.Exit(1)

        item = feedback.add_feedback(dev_id, text)
    rprint(f"[green]Feedback added successfully![/green] ID: {item.feedback_id}")


@feedback_app.command("list")
def feedback_list(
    dev_id: Optional[str] = typer.Option(None, "--dev", "-d", help="Filter by developer ID"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List feedback in submission order."""
    with open_components() as (_, feedback):
        items = feedback.for_developer(dev_id) if dev_id else list(feedback)

        if json_output:
            typer.echo(
                json.dumps(
                    [
                        {
                            "feedbackId": item.feedback_id,
                            "devId": item.dev_id,
                            "feedbackText": item.text,
                            "timestamp": item.timestamp.isoformat() if item.timestamp else None,
                        }
                        for item in items
                    ],
                    indent=2,
                )
            )
            return

        if not items:
            rprint("[yellow]No feedback records found.[/yellow]")
            return

        for item in items:
            console.print(item.describe(), markup=False, highlight=False)


@feedback_app.command("export")
def feedback_export(
    fmt: str = typer.Option("csv", "--format", "-f", help="Export format (csv or json)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to file"),
) -> None:
    """Export the feedback log."""
    if fmt not in ("csv", "json"):
        rprint(f"[red]Unknown format: {fmt}. Use csv or json[/red]")
        raise typer.Exit(1)

    with open_components() as (_, feedback):
        reporter = FeedbackReporter(feedback)
        data = reporter.export_to_csv() if fmt == "csv" else reporter.export_to_json()

    if output:
        output.write_text(data, encoding="utf-8")
        rprint(f"[green]Exported {len(feedback)} records to {output}[/green]")
    else:
        typer.echo(data, nl=False)


@feedback_app.command("summary")
def feedback_summary() -> None:
    """Show feedback counts per developer."""
    with open_components() as (_, feedback):
        summary = FeedbackReporter(feedback).summary()

    table = Table(title="Feedback Summary", show_header=True)
    table.add_column("Developer ID", style="cyan")
    table.add_column("Feedback", style="green")
    for dev_id, count in summary["per_developer"].items():
        table.add_row(dev_id, str(count))

    console.print(table)
    rprint(f"[cyan]Total:[/cyan] {summary['total_feedback']}")


# Config commands
config_app = typer.Typer(help="Configuration management")
app.add_typer(config_app, name="config")


@config_app.command("show")
def config_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show current configuration."""
    settings = get_settings()

    config_dict = {}
    for field_name in type(settings).model_fields:
        value = getattr(settings, field_name)
        if field_name == "database_url":
            value = mask_url(value)
        elif isinstance(value, Path):
            value = str(value)
        config_dict[field_name] = value

    if json_output:
        typer.echo(json.dumps(config_dict, indent=2))
        return

    table = Table(title="Developer Feedback Loop Configuration", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    for field_name, value in config_dict.items():
        table.add_row(field_name, str(value))

    console.print(table)


if __name__ == "__main__":
    app()
