"""
Pytest configuration for ground-setup tests.
"""

from datetime import datetime

import pytest

from ground_setup.config import ClubSettings, DriblSettings, Settings, StorageSettings, get_settings
from ground_setup.data import Database, FixtureRecord

CLUB = "Oatley Football Club"


class FakePageSource:
    """Serves canned fixtures pages keyed by cursor and records each request."""

    def __init__(self, pages=None, error=None):
        self.pages = pages or {None: {"data": [], "meta": {}}}
        self.error = error
        self.cursors = []
        self.closed = False

    def get_fixtures_page(self, cursor=None):
        self.cursors.append(cursor)
        if self.error is not None:
            raise self.error
        return self.pages[cursor]

    def close(self):
        self.closed = True


def api_fixture(hash_id, date, home=f"{CLUB} U10", away="Other FC", ground="Renown Park", field="1", **attrs):
    """One entry of a Dribl fixtures page."""
    attributes = {
        "date": date,
        "match_hash_id": f"m-{hash_id}",
        "league_name": "Junior League",
        "round": "R1",
        "status": "scheduled",
        "name": f"{home} vs {away}",
        "home_team_name": home,
        "away_team_name": away,
        "ground_name": ground,
        "field_name": field,
    }
    attributes.update(attrs)
    return {"hash_id": hash_id, "attributes": attributes}


def api_page(items, next_cursor=None):
    """A Dribl fixtures page."""
    return {"data": items, "meta": {"next_cursor": next_cursor}}


@pytest.fixture
def make_fixture():
    """Factory for FixtureRecord with sensible defaults."""

    def _make(fixture_id="A", date="2024-05-01T09:00:00", **kwargs):
        values = {
            "match_id": f"m-{fixture_id}",
            "league": "Junior League",
            "round": "R1",
            "status": "scheduled",
            "name": "",
            "home_team": f"{CLUB} U10",
            "away_team": "Other FC",
            "ground": "Renown Park",
            "field": "1",
        }
        values.update(kwargs)
        return FixtureRecord(fixture_id=fixture_id, date=date, **values)

    return _make


@pytest.fixture
def club():
    return ClubSettings(
        name=CLUB,
        grounds=["Carinya School Fields", "Renown Park", "The Green"],
        week_start_day=0,
        timezone="Australia/Sydney",
    )


@pytest.fixture
def settings(tmp_path, club):
    return Settings(
        dribl=DriblSettings(horizon_days=31),
        club=club,
        storage=StorageSettings(db_path=tmp_path / "ground_setup.db", export_dir=tmp_path / "exports"),
    )


@pytest.fixture
def db(settings):
    return Database(settings.storage.db_path)


@pytest.fixture
def now():
    """Reference time for horizon checks, club local time."""
    return datetime(2024, 4, 30, 12, 0)


@pytest.fixture
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
