"""Injury info CLI using Typer.

Runs source and active case lookups against the configured spreadsheet,
validates the reputable sources sheet and starts the API server.
"""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from injury_info.config import Settings, get_settings
from injury_info.connectors import GoogleSheetsAdapter
from injury_info.exceptions import ConnectorNotConfiguredError, InjuryInfoError
from injury_info.services import SharedServices, validate_source_row

app = typer.Typer(
    name="injury-info",
    help="Reputable sources and active case lookups for the injury info site.",
    no_args_is_help=True,
)
console = Console()


def _sheets_adapter(settings: Settings) -> GoogleSheetsAdapter:
    try:
        return GoogleSheetsAdapter(
            api_key=settings.google_api_key,
            spreadsheet_id=settings.google_spreadsheet_id,
            base_url=settings.google_sheets_base_url,
            timeout=settings.request_timeout,
        )
    except ConnectorNotConfiguredError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1) from e


@app.command()
def sources(
    query: str = typer.Argument(..., help="Free-text user question"),
    limit: int = typer.Option(3, "--limit", "-n", help="Maximum sources"),
) -> None:
    """Show the reputable sources ranked for a query."""
    services = SharedServices.create(get_settings())
    results = asyncio.run(services.sources.find_relevant_sources(query, limit))

    if not results:
        console.print(f"[yellow]No sources found for {query!r}[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Sources for {query!r}")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Priority", justify="right")
    table.add_column("Disease", style="cyan")
    table.add_column("Title")
    table.add_column("URL", style="dim")
    for candidate in results:
        source = candidate.record
        table.add_row(
            str(candidate.score),
            str(source.priority),
            source.disease_or_category,
            source.title,
            source.url,
        )
    console.print(table)


@app.command("check-case")
def check_case(
    query: str = typer.Argument(..., help="Free-text user question"),
) -> None:
    """Check whether a query matches an active case type."""
    services = SharedServices.create(get_settings())
    result = asyncio.run(services.cases.check_active_case(query))

    if not result.is_active:
        console.print("[dim]No active case matched[/dim]")
        return

    console.print(f"[bold green]Active case:[/bold green] {result.name}")
    console.print(f"  Type: {result.case_type}")
    console.print(f"  Matched: [cyan]{', '.join(result.matched_keywords)}[/cyan]")


@app.command("check-sheet")
def check_sheet() -> None:
    """Validate every row of the reputable sources sheet."""
    settings = get_settings()
    adapter = _sheets_adapter(settings)

    async def _read():
        titles = await adapter.list_sheets()
        if settings.sources_sheet not in titles:
            return titles, None
        return titles, await adapter.read_sheet(settings.sources_sheet)

    try:
        titles, sheet = asyncio.run(_read())
    except InjuryInfoError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1) from e

    if sheet is None:
        console.print(f"[red]Error: Sheet {settings.sources_sheet!r} not found[/red]")
        console.print(f"[dim]Available sheets: {', '.join(titles)}[/dim]")
        raise typer.Exit(1)

    console.print(f"[bold]{settings.sources_sheet}[/bold]: {len(sheet.data)} rows")
    console.print(f"[dim]Columns: {', '.join(sheet.headers)}[/dim]\n")

    table = Table(title="Invalid Rows")
    table.add_column("Row", justify="right", style="cyan")
    table.add_column("Title")
    table.add_column("Errors", style="red")
    invalid = 0
    for position, row in enumerate(sheet.data):
        errors = validate_source_row(row)
        if errors:
            invalid += 1
            table.add_row(
                str(position + 2), row.get("Source_Title", ""), "; ".join(errors)
            )

    if invalid:
        console.print(table)
        console.print(f"[yellow]{invalid} of {len(sheet.data)} rows invalid[/yellow]")
        raise typer.Exit(1)
    console.print("[green]All rows valid[/green]")


@app.command("search-sheet")
def search_sheet(
    sheet_name: str = typer.Argument(..., help="Sheet (tab) name"),
    query: str = typer.Argument(..., help="Case-insensitive text to find"),
    column: str | None = typer.Option(None, "--column", "-c", help="Column name"),
    limit: int = typer.Option(10, "--limit", "-n", help="Maximum rows"),
) -> None:
    """Search the rows of one sheet."""
    adapter = _sheets_adapter(get_settings())
    try:
        result = asyncio.run(adapter.search_sheet(sheet_name, query, column, limit))
    except InjuryInfoError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1) from e

    console.print(
        f"[bold]{result.total}[/bold] matches for {query!r} in {sheet_name}"
        f" ({result.column})"
    )
    for row in result.results:
        console.print(
            "  " + " | ".join(f"{key}: {value}" for key, value in row.items() if value)
        )


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Bind port"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run("injury_info.api.app:app", host=host, port=port)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
