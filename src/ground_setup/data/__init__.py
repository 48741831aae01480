"""
Data Models and Storage Module.

Contains Pydantic models for fixtures, rosters and week views, plus SQLite
storage and CSV export.
"""

from .export import export_tables, week_view_name
from .models import (
    FIXTURE_COLUMNS,
    TEAM_COLUMNS,
    WEEK_COLUMNS,
    FixtureRecord,
    SyncResult,
    SyncStatus,
    TeamRosterEntry,
    WeeklyGroundRow,
)
from .processors import process_fixture, process_fixtures_page
from .storage import Database

__all__ = [
    # Models
    "FixtureRecord",
    "TeamRosterEntry",
    "WeeklyGroundRow",
    "SyncResult",
    "SyncStatus",
    "FIXTURE_COLUMNS",
    "TEAM_COLUMNS",
    "WEEK_COLUMNS",
    # Storage
    "Database",
    # Processors
    "process_fixture",
    "process_fixtures_page",
    # Export
    "export_tables",
    "week_view_name",
]
