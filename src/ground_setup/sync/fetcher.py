"""
Fixture fetching with a date horizon.

Dribl pages are not guaranteed to be in date order, so paging stops on the
furthest date seen so far rather than on the last fixture kept.
"""

import logging
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Protocol

from ..data.models import FixtureRecord
from ..data.processors import process_fixtures_page
from .weekly import localize

logger = logging.getLogger(__name__)


class FixturePageSource(Protocol):
    """Anything that returns raw fixtures pages by cursor."""

    def get_fixtures_page(self, cursor: str | None = None) -> dict[str, Any]: ...


class FixtureFetcher:
    """Collects upcoming fixtures across all pages up to a horizon."""

    def __init__(self, source: FixturePageSource, tz: tzinfo = timezone.utc):
        """
        Args:
            source: Client providing fixtures pages
            tz: Timezone for fixture dates that carry no offset
        """
        self.source = source
        self.tz = tz

    def fetch(self, horizon_days: int, now: datetime | None = None) -> list[FixtureRecord]:
        """
        Fetch every fixture dated no later than horizon_days from now.

        Paging continues while the last page kept at least one fixture, a
        next cursor was returned, and no fixture seen so far lies beyond the
        horizon.

        Args:
            horizon_days: How many days ahead to fetch
            now: Reference time (defaults to the current time)

        Returns:
            Fixtures in the order received; empty when nothing was returned

        Raises:
            DriblAPIError: If any page request fails
        """
        now = localize(now or datetime.now(timezone.utc), self.tz)
        limit = now + timedelta(days=horizon_days)

        fixtures: list[FixtureRecord] = []
        latest = now
        cursor: str | None = None
        pages = 0

        while True:
            page = self.source.get_fixtures_page(cursor)
            pages += 1
            records, next_cursor = process_fixtures_page(page)

            kept = 0
            for record in records:
                when = localize(record.date, self.tz)
                if when > latest:
                    latest = when
                if when > limit:
                    continue
                fixtures.append(record)
                kept += 1

            logger.debug(
                f"Page {pages}: {len(records)} fixtures, {kept} within horizon, "
                f"latest seen {latest:%Y-%m-%d}"
            )

            if kept == 0 or next_cursor is None or latest >= limit:
                break
            cursor = next_cursor

        if not fixtures:
            logger.warning("No fixtures returned within the horizon")
        else:
            logger.info(f"Fetched {len(fixtures)} fixtures from {pages} page(s)")
        return fixtures
