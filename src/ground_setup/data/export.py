"""
CSV export of the stored tables.

Writes the Fixtures, Teams and weekly views in the column layout of the
club's spreadsheet. With formulas enabled the contact columns of a week view
are written as VLOOKUPs against the Teams sheet, so a pasted view keeps
tracking contacts edited in the roster.
"""

import csv
import logging
from datetime import date
from pathlib import Path

from .models import (
    FIXTURE_COLUMNS,
    TEAM_COLUMNS,
    WEEK_COLUMNS,
    FixtureRecord,
    TeamRosterEntry,
    WeeklyGroundRow,
)
from .storage import Database

logger = logging.getLogger(__name__)

# Teams sheet range the lookups search (header row excluded)
TEAMS_LOOKUP_RANGE = "Teams!A2:D201"

# Shown in place of contacts when the setup team is not on the roster
LOOKUP_MISS = "#N/A"


def week_view_name(week_start: date) -> str:
    """Sheet name of a week view, e.g. 'Week May 6'."""
    return f"Week {week_start.strftime('%b')} {week_start.day}"


def contact_lookup_formula(row_number: int, column: int) -> str:
    """
    VLOOKUP of the Team cell on a week view row against the Teams sheet.

    Args:
        row_number: 1-based sheet row (the header is row 1)
        column: Teams column to return (2 coach, 3 manager, 4 players)
    """
    return f"=vlookup(D{row_number},{TEAMS_LOOKUP_RANGE},{column},false)"


def fixture_rows(fixtures: list[FixtureRecord]) -> list[list[str]]:
    """Fixtures table with header."""
    return [FIXTURE_COLUMNS] + [f.to_row() for f in fixtures]


def roster_rows(roster: list[TeamRosterEntry]) -> list[list[str]]:
    """Teams table with header."""
    return [TEAM_COLUMNS] + [t.to_row() for t in roster]


def week_rows(rows: list[WeeklyGroundRow], formulas: bool = False) -> list[list[str]]:
    """Week view with header, contacts as values or lookup formulas."""
    values = [WEEK_COLUMNS]
    for i, row in enumerate(rows):
        if formulas:
            contacts = [contact_lookup_formula(i + 2, col) for col in (2, 3, 4)]
        elif row.has_contacts:
            contacts = [
                row.coach_contacts or "",
                row.manager_contacts or "",
                row.player_contacts or "",
            ]
        else:
            contacts = [LOOKUP_MISS] * 3
        values.append(
            [row.date.isoformat(), row.ground, row.field, row.setup_team, *contacts]
        )
    return values


def _write_csv(path: Path, rows: list[list[str]]) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        csv.writer(f).writerows(rows)


def export_tables(db: Database, out_dir: str | Path, formulas: bool = False) -> list[Path]:
    """
    Export every stored table to CSV files in a directory.

    Args:
        db: Database to read from
        out_dir: Directory to write into (created if missing)
        formulas: Write week view contacts as VLOOKUP formulas

    Returns:
        Paths of the written files
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    written = []

    path = out_dir / "Fixtures.csv"
    _write_csv(path, fixture_rows(db.get_fixtures()))
    written.append(path)

    path = out_dir / "Teams.csv"
    _write_csv(path, roster_rows(db.get_roster()))
    written.append(path)

    # Newest first, so an older week sharing a name gets the year appended
    names = set()
    for week_start in db.get_week_starts():
        name = week_view_name(week_start)
        if name in names:
            name = f"{name} {week_start.year}"
        names.add(name)
        path = out_dir / f"{name}.csv"
        _write_csv(path, week_rows(db.get_week_view(week_start), formulas=formulas))
        written.append(path)

    logger.info(f"Exported {len(written)} tables to {out_dir}")
    return written
