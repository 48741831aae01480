"""
SQLite database storage operations for Ground Setup.

Holds the tables a sync reads and writes: the Fixtures table, the
Teams roster, and the weekly ground setup views. Fixtures and Teams keep an
explicit position column because row order is part of their contract.
"""

import sqlite3
from contextlib import contextmanager
from datetime import date, datetime
from pathlib import Path
from typing import Generator

from .models import FixtureRecord, TeamRosterEntry, WeeklyGroundRow


# =============================================================================
# Database Schema
# =============================================================================

SCHEMA = """
-- Fixtures table (one row per Dribl fixture, in sheet order)
CREATE TABLE IF NOT EXISTS fixtures (
    position INTEGER PRIMARY KEY,
    fixture_id TEXT NOT NULL,
    match_id TEXT DEFAULT '',
    date TEXT NOT NULL,
    league TEXT DEFAULT '',
    round TEXT DEFAULT '',
    status TEXT DEFAULT '',
    name TEXT DEFAULT '',
    home_team TEXT DEFAULT '',
    away_team TEXT DEFAULT '',
    ground TEXT DEFAULT '',
    field TEXT DEFAULT '',
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

-- Teams roster (contacts are maintained by hand)
CREATE TABLE IF NOT EXISTS teams (
    position INTEGER PRIMARY KEY,
    team TEXT NOT NULL,
    coach_contacts TEXT DEFAULT '',
    manager_contacts TEXT DEFAULT '',
    player_contacts TEXT DEFAULT '',
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

-- One row per stored week view, kept even when the view has no rows
CREATE TABLE IF NOT EXISTS weeks (
    week_start DATE PRIMARY KEY,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

-- Weekly ground setup views; contacts are looked up from teams on read
CREATE TABLE IF NOT EXISTS week_views (
    week_start DATE NOT NULL,
    position INTEGER NOT NULL,
    date TEXT NOT NULL,
    ground TEXT NOT NULL,
    field TEXT NOT NULL,
    team TEXT NOT NULL,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    PRIMARY KEY (week_start, position)
);

CREATE INDEX IF NOT EXISTS idx_fixtures_fixture_id ON fixtures(fixture_id);
CREATE INDEX IF NOT EXISTS idx_teams_team ON teams(team);
"""


# =============================================================================
# Database Connection Management
# =============================================================================


class Database:
    """SQLite database manager for Ground Setup."""

    def __init__(self, db_path: str | Path = "data/ground_setup.db"):
        """Initialize database connection.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

    def _init_schema(self) -> None:
        """Initialize database schema."""
        with self.connection() as conn:
            conn.executescript(SCHEMA)

    @contextmanager
    def connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Context manager for database connections."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    # =========================================================================
    # Fixture Operations
    # =========================================================================

    def save_fixtures(self, fixtures: list[FixtureRecord]) -> None:
        """Replace the fixtures table, keeping list order as row order."""
        now = datetime.now()
        with self.connection() as conn:
            conn.execute("DELETE FROM fixtures")
            conn.executemany(
                """
                INSERT INTO fixtures
                (position, fixture_id, match_id, date, league, round, status,
                 name, home_team, away_team, ground, field, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                [(i, *f.to_row(), now) for i, f in enumerate(fixtures)],
            )

    def get_fixtures(self) -> list[FixtureRecord]:
        """Get all fixtures in table order."""
        with self.connection() as conn:
            rows = conn.execute("SELECT * FROM fixtures ORDER BY position").fetchall()
            return [self._row_to_fixture(row) for row in rows]

    def get_fixture_count(self) -> int:
        """Get total number of fixtures in database."""
        with self.connection() as conn:
            result = conn.execute("SELECT COUNT(*) FROM fixtures").fetchone()
            return result[0] if result else 0

    def _row_to_fixture(self, row: sqlite3.Row) -> FixtureRecord:
        """Convert database row to FixtureRecord model."""
        return FixtureRecord(
            fixture_id=row["fixture_id"],
            match_id=row["match_id"],
            date=row["date"],
            league=row["league"],
            round=row["round"],
            status=row["status"],
            name=row["name"],
            home_team=row["home_team"],
            away_team=row["away_team"],
            ground=row["ground"],
            field=row["field"],
        )

    # =========================================================================
    # Team Roster Operations
    # =========================================================================

    def save_roster(self, roster: list[TeamRosterEntry]) -> None:
        """Replace the teams table, keeping list order as row order."""
        now = datetime.now()
        with self.connection() as conn:
            conn.execute("DELETE FROM teams")
            conn.executemany(
                """
                INSERT INTO teams
                (position, team, coach_contacts, manager_contacts,
                 player_contacts, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                [(i, *t.to_row(), now) for i, t in enumerate(roster)],
            )

    def get_roster(self) -> list[TeamRosterEntry]:
        """Get all roster entries in table order."""
        with self.connection() as conn:
            rows = conn.execute("SELECT * FROM teams ORDER BY position").fetchall()
            return [
                TeamRosterEntry(
                    team_name=row["team"],
                    coach_contacts=row["coach_contacts"] or "",
                    manager_contacts=row["manager_contacts"] or "",
                    player_contacts=row["player_contacts"] or "",
                )
                for row in rows
            ]

    def update_team_contacts(
        self,
        team_name: str,
        coach_contacts: str | None = None,
        manager_contacts: str | None = None,
        player_contacts: str | None = None,
    ) -> bool:
        """
        Edit the hand-maintained contact columns of a team.

        Only the given columns change. Returns False if the team is unknown.
        """
        updates = {
            "coach_contacts": coach_contacts,
            "manager_contacts": manager_contacts,
            "player_contacts": player_contacts,
        }
        updates = {k: v for k, v in updates.items() if v is not None}
        if not updates:
            return False

        assignments = ", ".join(f"{column} = ?" for column in updates)
        with self.connection() as conn:
            cursor = conn.execute(
                f"UPDATE teams SET {assignments}, updated_at = ? WHERE team = ?",  # noqa: S608
                (*updates.values(), datetime.now(), team_name),
            )
            return cursor.rowcount > 0

    # =========================================================================
    # Week View Operations
    # =========================================================================

    def save_week_view(self, week_start: date, rows: list[WeeklyGroundRow]) -> None:
        """Clear and rewrite the view for one week. An empty view is still kept."""
        now = datetime.now()
        with self.connection() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO weeks (week_start, updated_at) VALUES (?, ?)",
                (week_start.isoformat(), now),
            )
            conn.execute(
                "DELETE FROM week_views WHERE week_start = ?", (week_start.isoformat(),)
            )
            conn.executemany(
                """
                INSERT INTO week_views
                (week_start, position, date, ground, field, team, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                [
                    (
                        week_start.isoformat(),
                        i,
                        r.date.isoformat(),
                        r.ground,
                        r.field,
                        r.setup_team,
                        now,
                    )
                    for i, r in enumerate(rows)
                ],
            )

    def get_week_view(self, week_start: date) -> list[WeeklyGroundRow]:
        """
        Get the stored view for one week.

        Contacts are looked up live against the teams table, taking the
        first matching roster row. A team with no roster row gets None.
        """
        with self.connection() as conn:
            rows = conn.execute(
                """
                SELECT w.date, w.ground, w.field, w.team,
                       t.coach_contacts, t.manager_contacts, t.player_contacts
                FROM week_views w
                LEFT JOIN teams t ON t.position = (
                    SELECT MIN(position) FROM teams WHERE team = w.team
                )
                WHERE w.week_start = ?
                ORDER BY w.position
                """,
                (week_start.isoformat(),),
            ).fetchall()
            return [
                WeeklyGroundRow(
                    date=datetime.fromisoformat(row["date"]),
                    ground=row["ground"],
                    field=row["field"],
                    setup_team=row["team"],
                    coach_contacts=row["coach_contacts"],
                    manager_contacts=row["manager_contacts"],
                    player_contacts=row["player_contacts"],
                )
                for row in rows
            ]

    def get_week_starts(self) -> list[date]:
        """Get the start date of every stored week view, newest first."""
        with self.connection() as conn:
            rows = conn.execute(
                "SELECT week_start FROM weeks ORDER BY week_start DESC"
            ).fetchall()
            return [date.fromisoformat(row["week_start"]) for row in rows]

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def get_team_count(self) -> int:
        """Get total number of roster entries."""
        with self.connection() as conn:
            result = conn.execute("SELECT COUNT(*) FROM teams").fetchone()
            return result[0] if result else 0

    def get_last_updated(self, table: str) -> datetime | None:
        """Get the last update time for a table."""
        with self.connection() as conn:
            result = conn.execute(
                f"SELECT MAX(updated_at) FROM {table}"  # noqa: S608
            ).fetchone()
            if result and result[0]:
                return datetime.fromisoformat(result[0])
            return None

