"""
Team roster derivation.

The roster lists every club team seen in the fixtures. Contact columns are
edited by hand, so merging only ever adds names and never rewrites entries.
"""

import logging
import unicodedata

from ..data.models import FixtureRecord, TeamRosterEntry

logger = logging.getLogger(__name__)


def locale_sort_key(name: str) -> tuple[str, str, str]:
    """
    Sort key approximating locale-aware collation.

    Compares letters ignoring accents and case first, then accents, then
    case with lowercase first.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), name.casefold(), name.swapcase()


def club_team_names(fixtures: list[FixtureRecord], club_name: str) -> list[str]:
    """Distinct home and away team names belonging to the club, first seen first."""
    names: dict[str, None] = {}
    for fixture in fixtures:
        for team in (fixture.home_team, fixture.away_team):
            if team and team.startswith(club_name):
                names.setdefault(team)
    return list(names)


def derive_roster(
    existing: list[TeamRosterEntry],
    fixtures: list[FixtureRecord],
    club_name: str,
) -> list[TeamRosterEntry]:
    """
    Add newly seen club teams to the roster.

    Args:
        existing: Current roster, contacts preserved verbatim
        fixtures: Fixtures to scan for team names
        club_name: Prefix identifying the club's teams

    Returns:
        Existing plus new entries, sorted by team name
    """
    known = {entry.team_name for entry in existing}
    new_entries = [
        TeamRosterEntry(team_name=name)
        for name in club_team_names(fixtures, club_name)
        if name not in known
    ]

    if new_entries:
        logger.info(
            f"Adding {len(new_entries)} team(s): "
            + ", ".join(e.team_name for e in new_entries)
        )

    return sorted(existing + new_entries, key=lambda e: locale_sort_key(e.team_name))
