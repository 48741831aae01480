"""
Ground Setup Command Line Interface.

Built with Typer for a modern, type-safe CLI experience.
"""

import logging
from datetime import date, datetime, time
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from . import __version__
from .api import SyncDriblClient
from .config import get_settings
from .data import Database, SyncStatus, WeeklyGroundRow, export_tables, week_view_name
from .data.export import LOOKUP_MISS
from .sync import SyncOrchestrator, rebuild_week, week_start_for

app = typer.Typer(
    name="ground-setup",
    help="Sync club fixtures from Dribl and work out weekly ground setup duties",
    add_completion=True,
    rich_markup_mode="rich",
)

console = Console()


def get_db() -> Database:
    """Open the configured database."""
    return Database(get_settings().storage.db_path)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    Ground Setup - keep the club's fixtures, teams and weekly ground
    setup sheets up to date.
    """
    level = "DEBUG" if verbose else get_settings().app.log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def sync(
    horizon: int = typer.Option(
        None, "--horizon", min=0, help="Days ahead to fetch (default from settings)"
    ),
) -> None:
    """
    Fetch fixtures from Dribl and update all tables.

    Updates the fixtures and teams, then rebuilds each affected week view.
    """
    console.print(Panel("[bold blue]Fixture Sync[/bold blue]", style="blue"))

    settings = get_settings()
    if not settings.validate_dribl_config():
        console.print("[red]Dribl season, competition, club and tenant must be set.[/red]")
        raise typer.Exit(1)

    db = get_db()
    client = SyncDriblClient(settings=settings.dribl)

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            progress.add_task("Syncing fixtures...", total=None)
            result = SyncOrchestrator(client, db, settings).run(horizon_days=horizon)
    finally:
        client.close()

    if result.status == SyncStatus.EMPTY:
        console.print(f"[yellow]{result.message}[/yellow]")
        return

    if result.status == SyncStatus.FAILURE:
        console.print(f"[red]Error: {result.message}[/red]")
        raise typer.Exit(1)

    summary_table = Table(title="Sync Summary", show_header=False)
    summary_table.add_column("Item", style="cyan")
    summary_table.add_column("Value", style="green")

    summary_table.add_row("Fixtures fetched", str(result.fixtures_fetched))
    summary_table.add_row("Fixtures updated", str(result.fixtures_updated))
    summary_table.add_row("Fixtures added", str(result.fixtures_added))
    summary_table.add_row("New teams", str(result.teams_added))
    summary_table.add_row(
        "Week views rebuilt",
        ", ".join(week_view_name(w) for w in result.weeks_rebuilt) or "None",
    )

    console.print(summary_table)
    console.print("\n[green]Sync complete![/green]")


@app.command()
def status() -> None:
    """Show what is stored locally."""
    db = get_db()

    status_table = Table(title="Ground Setup Status", show_header=False)
    status_table.add_column("Item", style="cyan")
    status_table.add_column("Value", style="white")

    status_table.add_row("Fixtures", str(db.get_fixture_count()))
    status_table.add_row("Teams", str(db.get_team_count()))
    status_table.add_row("Week views", str(len(db.get_week_starts())))

    last_sync = db.get_last_updated("fixtures")
    status_table.add_row(
        "Last sync", last_sync.strftime("%Y-%m-%d %H:%M") if last_sync else "Never"
    )

    console.print(status_table)


@app.command()
def fixtures(
    limit: int = typer.Option(50, "--limit", "-n", help="Number of fixtures to show"),
    ground: str = typer.Option(None, "--ground", "-g", help="Filter by ground name"),
) -> None:
    """List fixtures in table order."""
    db = get_db()
    rows = db.get_fixtures()

    if not rows:
        console.print("[yellow]No fixtures stored. Run 'ground-setup sync' first.[/yellow]")
        raise typer.Exit(1)

    if ground:
        rows = [f for f in rows if ground.lower() in f.ground.lower()]

    table = Table(title=f"Fixtures ({len(rows)})")
    table.add_column("Date", style="cyan")
    table.add_column("Round", style="dim")
    table.add_column("Home", style="white")
    table.add_column("Away", style="white")
    table.add_column("Ground", style="green")
    table.add_column("Field", style="green")
    table.add_column("Status", style="yellow")

    for f in rows[:limit]:
        table.add_row(
            f.date.strftime("%a %d %b %H:%M"),
            f.round,
            f.home_team,
            f.away_team,
            f.ground,
            f.field,
            f.status,
        )

    console.print(table)


@app.command()
def teams() -> None:
    """List the club's teams and their contacts."""
    roster = get_db().get_roster()

    if not roster:
        console.print("[yellow]No teams stored. Run 'ground-setup sync' first.[/yellow]")
        raise typer.Exit(1)

    table = Table(title=f"Teams ({len(roster)})")
    table.add_column("Team", style="white")
    table.add_column("Coach", style="cyan")
    table.add_column("Manager", style="cyan")
    table.add_column("Players", style="cyan")

    for entry in roster:
        table.add_row(*entry.to_row())

    console.print(table)


@app.command()
def contacts(
    team: str = typer.Argument(..., help="Exact team name"),
    coach: str = typer.Option(None, "--coach", help="Coach contacts"),
    manager: str = typer.Option(None, "--manager", help="Manager contacts"),
    players: str = typer.Option(None, "--players", help="Player contacts"),
) -> None:
    """Set contact details for a team on the roster."""
    if coach is None and manager is None and players is None:
        console.print("[red]Give at least one of --coach, --manager or --players.[/red]")
        raise typer.Exit(1)

    if not get_db().update_team_contacts(team, coach, manager, players):
        console.print(f"[red]Team not found: {team}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Updated contacts for {team}[/green]")


def _print_week(week_start: date, rows: list[WeeklyGroundRow]) -> None:
    table = Table(title=week_view_name(week_start))
    table.add_column("Date", style="cyan")
    table.add_column("Ground", style="green")
    table.add_column("Field", style="green")
    table.add_column("Team", style="white")
    table.add_column("Coach", style="dim")
    table.add_column("Manager", style="dim")
    table.add_column("Players", style="dim")

    for r in rows:
        if r.has_contacts:
            contact_cells = [r.coach_contacts, r.manager_contacts, r.player_contacts]
        else:
            contact_cells = [f"[red]{LOOKUP_MISS}[/red]"] * 3
        table.add_row(
            r.date.strftime("%a %d %b %H:%M"),
            r.ground,
            r.field,
            r.setup_team,
            *contact_cells,
        )

    console.print(table)


@app.command()
def week(
    day: str = typer.Argument(None, help="Any date in the week, YYYY-MM-DD (default today)"),
    rebuild: bool = typer.Option(
        False, "--rebuild", "-r", help="Rebuild the view from stored fixtures first"
    ),
) -> None:
    """Show the ground setup view for a week."""
    club = get_settings().club

    try:
        target = date.fromisoformat(day) if day else datetime.now(club.tz).date()
    except ValueError:
        console.print(f"[red]Invalid date: {day}[/red]")
        raise typer.Exit(1)

    week_start = week_start_for(datetime.combine(target, time.min), club.week_start_day, club.tz)
    db = get_db()

    if rebuild:
        rows = rebuild_week(db, week_start, club)
    else:
        rows = db.get_week_view(week_start)

    if not rows:
        console.print(f"[yellow]No club grounds in use for {week_view_name(week_start)}.[/yellow]")
        return

    _print_week(week_start, rows)


@app.command()
def weeks() -> None:
    """List stored week views."""
    week_starts = get_db().get_week_starts()

    if not week_starts:
        console.print("[yellow]No week views stored. Run 'ground-setup sync' first.[/yellow]")
        return

    for week_start in week_starts:
        console.print(f"  {week_view_name(week_start)}  [dim]({week_start.isoformat()})[/dim]")


@app.command()
def export(
    out_dir: Path = typer.Option(None, "--dir", "-d", help="Output directory"),
    formulas: bool = typer.Option(
        False, "--formulas", help="Write week contacts as VLOOKUP formulas"
    ),
) -> None:
    """Export all tables to CSV for pasting into the club spreadsheet."""
    target = out_dir or get_settings().storage.export_dir
    paths = export_tables(get_db(), target, formulas=formulas)

    for path in paths:
        console.print(f"  [green]{path}[/green]")
    console.print(f"\n[green]Exported {len(paths)} file(s)[/green]")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Ground Setup[/bold] v{__version__}")
    console.print("Club fixture sync and weekly ground setup rosters")


if __name__ == "__main__":
    app()
