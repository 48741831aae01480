"""
Pydantic data models for Ground Setup.

These models represent fixtures as stored in the Fixtures table, entries of
the Teams roster, and rows of the derived weekly ground setup views.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


# Header rows of the three stored tables
FIXTURE_COLUMNS = [
    "Fixture ID",
    "Match ID",
    "Date",
    "League",
    "Round",
    "Status",
    "Name",
    "Home Team",
    "Away Team",
    "Ground",
    "Field",
]

TEAM_COLUMNS = [
    "Team",
    "Coach Contacts",
    "Manager Contacts",
    "Player Contacts",
]

WEEK_COLUMNS = [
    "Date",
    "Ground",
    "Field",
    "Team",
    "Coach Contacts",
    "Manager Contacts",
    "Player Contacts",
]


# =============================================================================
# Core Data Models
# =============================================================================


class FixtureRecord(BaseModel):
    """One scheduled match, keyed by its Dribl fixture hash."""

    fixture_id: str = Field(description="Dribl fixture hash_id")
    match_id: str = Field(default="", description="Dribl match_hash_id")
    date: datetime = Field(description="Kickoff time")
    league: str = Field(default="")
    round: str = Field(default="")
    status: str = Field(default="")
    name: str = Field(default="")
    home_team: str = Field(default="")
    away_team: str = Field(default="")
    ground: str = Field(default="")
    field: str = Field(default="")

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: object) -> datetime:
        """Accept ISO 8601 strings, including bare dates and a trailing Z."""
        if isinstance(v, datetime):
            return v
        if isinstance(v, date):
            return datetime(v.year, v.month, v.day)
        return datetime.fromisoformat(str(v))

    @field_validator(
        "match_id",
        "league",
        "round",
        "status",
        "name",
        "home_team",
        "away_team",
        "ground",
        "field",
        mode="before",
    )
    @classmethod
    def none_to_empty(cls, v: object) -> str:
        """Dribl sends null for unassigned values."""
        return "" if v is None else str(v)

    def to_row(self) -> list[str]:
        """Values in Fixtures table column order."""
        return [
            self.fixture_id,
            self.match_id,
            self.date.isoformat(),
            self.league,
            self.round,
            self.status,
            self.name,
            self.home_team,
            self.away_team,
            self.ground,
            self.field,
        ]


class TeamRosterEntry(BaseModel):
    """
    A club team and its contacts.

    Contact columns are maintained by hand in the Teams table; a sync only
    ever adds new team names.
    """

    team_name: str = Field(description="Full Dribl team name")
    coach_contacts: str = Field(default="")
    manager_contacts: str = Field(default="")
    player_contacts: str = Field(default="")

    def to_row(self) -> list[str]:
        """Values in Teams table column order."""
        return [
            self.team_name,
            self.coach_contacts,
            self.manager_contacts,
            self.player_contacts,
        ]


class WeeklyGroundRow(BaseModel):
    """
    One ground/field that needs setting up in a given week.

    Contact fields are None when the setup team has no roster entry.
    """

    date: datetime = Field(description="Kickoff of the first match at the venue")
    ground: str
    field: str
    setup_team: str = Field(description="Club team responsible for the setup")
    coach_contacts: str | None = None
    manager_contacts: str | None = None
    player_contacts: str | None = None

    @property
    def key(self) -> str:
        """Ground and field identity of the row."""
        return f"{self.ground}|{self.field}"

    @property
    def has_contacts(self) -> bool:
        """Whether the roster lookup found the setup team."""
        return self.coach_contacts is not None


# =============================================================================
# Sync Results
# =============================================================================


class SyncStatus(StrEnum):
    """Outcome of a sync run."""

    SUCCESS = "success"
    EMPTY = "empty"
    FAILURE = "failure"


@dataclass
class SyncResult:
    """Tagged outcome of a sync run, surfaced by the caller."""

    status: SyncStatus
    message: str = ""
    fixtures_fetched: int = 0
    fixtures_updated: int = 0
    fixtures_added: int = 0
    teams_added: int = 0
    weeks_rebuilt: list[date] = field(default_factory=list)
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """True unless the run failed."""
        return self.status != SyncStatus.FAILURE

    @classmethod
    def empty(cls, reason: str = "No data received.") -> "SyncResult":
        return cls(status=SyncStatus.EMPTY, message=reason)

    @classmethod
    def failure(cls, error: Exception) -> "SyncResult":
        return cls(status=SyncStatus.FAILURE, message=str(error), error=error)
