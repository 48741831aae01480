"""
Tests for SQLite storage of fixtures, roster and week views.
"""

from datetime import date, datetime, timezone

from ground_setup.data import TeamRosterEntry, WeeklyGroundRow

from .conftest import CLUB


def week_row(team, field="1", when=datetime(2024, 5, 4, 9, 0)):
    return WeeklyGroundRow(date=when, ground="Renown Park", field=field, setup_team=team)


class TestFixtureStorage:
    def test_round_trip_keeps_order(self, db, make_fixture):
        fixtures = [make_fixture("C"), make_fixture("A"), make_fixture("B")]

        db.save_fixtures(fixtures)

        assert db.get_fixtures() == fixtures
        assert db.get_fixture_count() == 3

    def test_save_replaces_table(self, db, make_fixture):
        db.save_fixtures([make_fixture("A"), make_fixture("B")])
        db.save_fixtures([make_fixture("C")])

        assert [f.fixture_id for f in db.get_fixtures()] == ["C"]

    def test_timezone_aware_dates(self, db, make_fixture):
        when = datetime(2024, 5, 3, 23, 0, tzinfo=timezone.utc)
        db.save_fixtures([make_fixture("A", date=when)])

        assert db.get_fixtures()[0].date == when

    def test_empty_database(self, db):
        assert db.get_fixtures() == []
        assert db.get_roster() == []
        assert db.get_week_starts() == []
        assert db.get_last_updated("fixtures") is None


class TestRosterStorage:
    def test_round_trip(self, db):
        roster = [
            TeamRosterEntry(team_name=f"{CLUB} U10", coach_contacts="Sam"),
            TeamRosterEntry(team_name=f"{CLUB} U12"),
        ]

        db.save_roster(roster)

        assert db.get_roster() == roster
        assert db.get_team_count() == 2

    def test_update_contacts(self, db):
        db.save_roster([TeamRosterEntry(team_name=f"{CLUB} U10", coach_contacts="Sam")])

        assert db.update_team_contacts(f"{CLUB} U10", manager_contacts="Alex")

        entry = db.get_roster()[0]
        assert entry.coach_contacts == "Sam"
        assert entry.manager_contacts == "Alex"

    def test_update_unknown_team(self, db):
        assert not db.update_team_contacts("Nobody FC", coach_contacts="x")

    def test_update_nothing(self, db):
        db.save_roster([TeamRosterEntry(team_name=f"{CLUB} U10")])

        assert not db.update_team_contacts(f"{CLUB} U10")


class TestWeekViewStorage:
    def test_contacts_looked_up_on_read(self, db):
        db.save_roster([TeamRosterEntry(team_name=f"{CLUB} U10", coach_contacts="Sam")])
        db.save_week_view(date(2024, 4, 29), [week_row(f"{CLUB} U10")])

        db.update_team_contacts(f"{CLUB} U10", coach_contacts="Jo")

        rows = db.get_week_view(date(2024, 4, 29))
        assert rows[0].coach_contacts == "Jo"
        assert rows[0].manager_contacts == ""

    def test_lookup_miss(self, db):
        db.save_week_view(date(2024, 4, 29), [week_row("Nobody FC")])

        rows = db.get_week_view(date(2024, 4, 29))

        assert rows[0].setup_team == "Nobody FC"
        assert not rows[0].has_contacts

    def test_duplicate_roster_names_use_first(self, db):
        db.save_roster(
            [
                TeamRosterEntry(team_name=f"{CLUB} U10", coach_contacts="first"),
                TeamRosterEntry(team_name=f"{CLUB} U10", coach_contacts="second"),
            ]
        )
        db.save_week_view(date(2024, 4, 29), [week_row(f"{CLUB} U10")])

        rows = db.get_week_view(date(2024, 4, 29))

        assert len(rows) == 1
        assert rows[0].coach_contacts == "first"

    def test_save_replaces_only_that_week(self, db):
        db.save_week_view(date(2024, 4, 29), [week_row("A", "1"), week_row("B", "2")])
        db.save_week_view(date(2024, 5, 6), [week_row("C")])

        db.save_week_view(date(2024, 4, 29), [week_row("D", "3")])

        assert [r.setup_team for r in db.get_week_view(date(2024, 4, 29))] == ["D"]
        assert [r.setup_team for r in db.get_week_view(date(2024, 5, 6))] == ["C"]
        assert db.get_week_starts() == [date(2024, 5, 6), date(2024, 4, 29)]

    def test_row_order_preserved(self, db):
        rows = [week_row("A", "2"), week_row("B", "1")]
        db.save_week_view(date(2024, 4, 29), rows)

        assert [r.field for r in db.get_week_view(date(2024, 4, 29))] == ["2", "1"]

    def test_empty_view_still_listed(self, db):
        db.save_week_view(date(2024, 4, 29), [week_row("A")])

        db.save_week_view(date(2024, 4, 29), [])

        assert db.get_week_view(date(2024, 4, 29)) == []
        assert db.get_week_starts() == [date(2024, 4, 29)]
