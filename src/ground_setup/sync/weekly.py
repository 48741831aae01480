"""
Weekly ground setup views.

A setup week starts at local midnight on the club's configured weekday and
covers the following seven days. For each week the view lists every club
ground and field in use, once, with the club team that plays the first match
there and is therefore responsible for putting up the goals and nets.
"""

import logging
from datetime import date, datetime, time, timedelta, tzinfo

from ..config import ClubSettings
from ..data.models import FixtureRecord, TeamRosterEntry, WeeklyGroundRow

logger = logging.getLogger(__name__)

WEEK_LENGTH = timedelta(days=7)


# =============================================================================
# Week Boundaries
# =============================================================================


def localize(dt: datetime, tz: tzinfo) -> datetime:
    """Express a datetime in the club timezone; naive values are taken as local."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def week_start_for(dt: datetime, weekday: int, tz: tzinfo) -> date:
    """Roll a datetime back to the most recent week start day (inclusive)."""
    local = localize(dt, tz)
    return local.date() - timedelta(days=(local.weekday() - weekday) % 7)


def week_start_datetime(week_start: date, tz: tzinfo) -> datetime:
    """Local midnight at the start of a week."""
    return datetime.combine(week_start, time.min, tzinfo=tz)


def week_starts_between(first: date, last: date) -> list[date]:
    """Week start dates from first to last inclusive, seven days apart."""
    starts = []
    current = first
    while current <= last:
        starts.append(current)
        current += WEEK_LENGTH
    return starts


def fixtures_in_week(
    week_start: date, fixtures: list[FixtureRecord], tz: tzinfo
) -> list[FixtureRecord]:
    """
    Fixtures played during a week, earliest first.

    A fixture belongs to the week when it is strictly after the week's
    starting midnight and no more than seven days after it.
    """
    start = week_start_datetime(week_start, tz)
    selected = [
        f
        for f in fixtures
        if timedelta(0) < localize(f.date, tz) - start <= WEEK_LENGTH
    ]
    return sorted(selected, key=lambda f: localize(f.date, tz))


# =============================================================================
# View Building
# =============================================================================


def pick_setup_team(fixture: FixtureRecord, club_name: str) -> str:
    """The club's team in a fixture, preferring home; home if neither is ours."""
    if fixture.home_team.startswith(club_name):
        return fixture.home_team
    if fixture.away_team.startswith(club_name):
        return fixture.away_team
    return fixture.home_team


def build_week_view(
    week_start: date,
    fixtures: list[FixtureRecord],
    roster: list[TeamRosterEntry],
    club: ClubSettings,
) -> list[WeeklyGroundRow]:
    """
    Build the ground setup rows for one week.

    Args:
        week_start: First day of the week
        fixtures: The full fixtures table
        roster: Teams roster used to resolve contacts
        club: Club name prefix, owned grounds and timezone

    Returns:
        One row per club ground and field in use, in kickoff order
    """
    tz = club.tz
    grounds = set(club.grounds)

    # First roster row wins, as with a spreadsheet lookup
    contacts: dict[str, TeamRosterEntry] = {}
    for entry in roster:
        contacts.setdefault(entry.team_name, entry)

    rows: dict[str, WeeklyGroundRow] = {}
    for fixture in fixtures_in_week(week_start, fixtures, tz):
        key = f"{fixture.ground}|{fixture.field}"
        if fixture.ground not in grounds or key in rows:
            continue

        setup_team = pick_setup_team(fixture, club.name)
        entry = contacts.get(setup_team)
        if entry is None:
            logger.warning(f"No roster entry for {setup_team!r} at {fixture.ground}")

        rows[key] = WeeklyGroundRow(
            date=fixture.date,
            ground=fixture.ground,
            field=fixture.field,
            setup_team=setup_team,
            coach_contacts=entry.coach_contacts if entry else None,
            manager_contacts=entry.manager_contacts if entry else None,
            player_contacts=entry.player_contacts if entry else None,
        )

    logger.debug(f"Week of {week_start}: {len(rows)} grounds to set up")
    return list(rows.values())
