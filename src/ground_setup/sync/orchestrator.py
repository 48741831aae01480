"""
Sync orchestration.

One run fetches fixtures, merges them into the Fixtures table, adds new
teams to the roster and rebuilds every week view the fetched fixtures fall
in. Transport failures and empty fetches leave every table untouched.
"""

import logging
from datetime import date, datetime

from ..api.client import DriblAPIError
from ..config import ClubSettings, Settings
from ..data.models import FixtureRecord, SyncResult, SyncStatus, WeeklyGroundRow
from ..data.storage import Database
from .fetcher import FixtureFetcher, FixturePageSource
from .merger import merge_fixtures
from .roster import derive_roster
from .weekly import build_week_view, localize, week_start_for, week_starts_between

logger = logging.getLogger(__name__)


class SyncOrchestrator:
    """Runs the fetch, merge, roster and week view steps against a database."""

    def __init__(self, source: FixturePageSource, db: Database, settings: Settings):
        self.db = db
        self.settings = settings
        self.fetcher = FixtureFetcher(source, tz=settings.club.tz)

    def run(self, horizon_days: int | None = None, now: datetime | None = None) -> SyncResult:
        """
        Run a full sync.

        Args:
            horizon_days: Override the configured fetch horizon
            now: Reference time for the horizon (defaults to the current time)

        Returns:
            SyncResult tagged success, empty or failure
        """
        horizon = self.settings.dribl.horizon_days if horizon_days is None else horizon_days

        try:
            fetched = self.fetcher.fetch(horizon, now=now)
        except DriblAPIError as e:
            logger.error(f"Fixture fetch failed: {e}")
            return SyncResult.failure(e)

        if not fetched:
            return SyncResult.empty("No data received.")

        existing = self.db.get_fixtures()
        merged = merge_fixtures(existing, fetched)
        self.db.save_fixtures(merged)
        added = len(merged) - len(existing)

        roster = self.db.get_roster()
        new_roster = derive_roster(roster, fetched, self.settings.club.name)
        self.db.save_roster(new_roster)

        earliest, latest = self.changed_date_range(fetched)
        club = self.settings.club
        first_week = week_start_for(earliest, club.week_start_day, club.tz)
        last_week = week_start_for(latest, club.week_start_day, club.tz)

        weeks = week_starts_between(first_week, last_week)
        for week_start in weeks:
            rebuild_week(self.db, week_start, club)

        result = SyncResult(
            status=SyncStatus.SUCCESS,
            message=f"Synced {len(fetched)} fixtures",
            fixtures_fetched=len(fetched),
            fixtures_updated=len(fetched) - added,
            fixtures_added=added,
            teams_added=len(new_roster) - len(roster),
            weeks_rebuilt=weeks,
        )
        logger.info(
            f"{result.message}: {result.fixtures_updated} updated, "
            f"{result.fixtures_added} added, {result.teams_added} new teams, "
            f"{len(weeks)} week view(s) rebuilt"
        )
        return result

    def changed_date_range(self, fixtures: list[FixtureRecord]) -> tuple[datetime, datetime]:
        """Earliest and latest kickoff among fixtures, seeded from the first."""
        tz = self.settings.club.tz
        earliest = latest = localize(fixtures[0].date, tz)
        for fixture in fixtures[1:]:
            when = localize(fixture.date, tz)
            if when < earliest:
                earliest = when
            if when > latest:
                latest = when
        return earliest, latest


def rebuild_week(db: Database, week_start: date, club: ClubSettings) -> list[WeeklyGroundRow]:
    """Rebuild and store one week view from the stored fixtures and roster."""
    rows = build_week_view(week_start, db.get_fixtures(), db.get_roster(), club)
    db.save_week_view(week_start, rows)
    return rows
