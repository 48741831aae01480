"""
Tests for the command line interface.
"""

from datetime import date

import pytest
from typer.testing import CliRunner

from ground_setup import cli
from ground_setup.api import DriblAPIError
from ground_setup.data import Database, TeamRosterEntry

from .conftest import CLUB, FakePageSource, api_fixture, api_page

runner = CliRunner()


@pytest.fixture
def db_path(tmp_path, monkeypatch, clear_settings_cache):
    path = tmp_path / "cli.db"
    monkeypatch.setenv("STORAGE_DB_PATH", str(path))
    monkeypatch.setenv("STORAGE_EXPORT_DIR", str(tmp_path / "exports"))
    return path


@pytest.fixture
def fake_source(monkeypatch):
    """Replace the Dribl client used by the sync command."""
    source = FakePageSource()
    monkeypatch.setattr(cli, "SyncDriblClient", lambda **kwargs: source)
    return source


def test_version():
    result = runner.invoke(cli.app, ["version"])

    assert result.exit_code == 0
    assert "Ground Setup" in result.output


def test_sync(db_path, fake_source):
    fake_source.pages = {None: api_page([api_fixture("A", "2024-05-01T09:00:00")])}

    result = runner.invoke(cli.app, ["sync"])

    assert result.exit_code == 0, result.output
    assert "Sync complete" in result.output
    assert fake_source.closed
    assert [f.fixture_id for f in Database(db_path).get_fixtures()] == ["A"]


def test_sync_empty_is_a_notice(db_path, fake_source):
    result = runner.invoke(cli.app, ["sync"])

    assert result.exit_code == 0
    assert "No data received." in result.output
    assert Database(db_path).get_fixture_count() == 0


def test_sync_failure_exits(db_path, fake_source):
    fake_source.error = DriblAPIError("Unexpected status code: 500", status_code=500)

    result = runner.invoke(cli.app, ["sync"])

    assert result.exit_code == 1
    assert "Unexpected status code: 500" in result.output


def test_status(db_path):
    result = runner.invoke(cli.app, ["status"])

    assert result.exit_code == 0
    assert "Never" in result.output


def test_fixtures_without_data(db_path):
    result = runner.invoke(cli.app, ["fixtures"])

    assert result.exit_code == 1


def test_contacts(db_path):
    Database(db_path).save_roster([TeamRosterEntry(team_name=f"{CLUB} U10")])

    result = runner.invoke(cli.app, ["contacts", f"{CLUB} U10", "--coach", "Sam"])

    assert result.exit_code == 0
    assert Database(db_path).get_roster()[0].coach_contacts == "Sam"


def test_contacts_unknown_team(db_path):
    result = runner.invoke(cli.app, ["contacts", "Nobody FC", "--coach", "Sam"])

    assert result.exit_code == 1


def test_week_rebuild(db_path, make_fixture):
    Database(db_path).save_fixtures([make_fixture("A", date="2024-05-01T09:00:00")])

    result = runner.invoke(cli.app, ["week", "2024-05-02", "--rebuild"])

    assert result.exit_code == 0, result.output
    assert "Week Apr 29" in result.output
    assert len(Database(db_path).get_week_view(date(2024, 4, 29))) == 1


def test_week_invalid_date(db_path):
    result = runner.invoke(cli.app, ["week", "someday"])

    assert result.exit_code == 1


def test_export(db_path, tmp_path, make_fixture):
    Database(db_path).save_fixtures([make_fixture("A")])

    result = runner.invoke(cli.app, ["export", "--formulas"])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "exports" / "Fixtures.csv").exists()
    assert (tmp_path / "exports" / "Teams.csv").exists()
