"""
Fixture Sync Pipeline.

Fetches fixtures, reconciles the stored tables and derives the team roster
and weekly ground setup views.
"""

from .fetcher import FixtureFetcher
from .merger import merge_fixtures
from .orchestrator import SyncOrchestrator, rebuild_week
from .roster import club_team_names, derive_roster, locale_sort_key
from .weekly import (
    build_week_view,
    fixtures_in_week,
    pick_setup_team,
    week_start_for,
    week_starts_between,
)

__all__ = [
    "FixtureFetcher",
    "SyncOrchestrator",
    "rebuild_week",
    "merge_fixtures",
    "derive_roster",
    "club_team_names",
    "locale_sort_key",
    "build_week_view",
    "fixtures_in_week",
    "pick_setup_team",
    "week_start_for",
    "week_starts_between",
]
