"""
Tests for merging fetched fixtures into the stored fixtures table.
"""

from ground_setup.sync import merge_fixtures


class TestMergeFixtures:
    def test_empty_table_takes_all_fetched(self, make_fixture):
        fetched = [make_fixture("A"), make_fixture("B")]

        assert merge_fixtures([], fetched) == fetched

    def test_matched_row_updated_in_place(self, make_fixture):
        existing = [make_fixture("X"), make_fixture("A"), make_fixture("Y")]
        cancelled = make_fixture("A", status="cancelled")

        merged = merge_fixtures(existing, [cancelled])

        assert len(merged) == 3
        assert [f.fixture_id for f in merged] == ["X", "A", "Y"]
        assert merged[1].status == "cancelled"

    def test_unrelated_rows_preserved(self, make_fixture):
        old = make_fixture("OLD", date="2024-03-01T09:00:00", ground="The Green")
        merged = merge_fixtures([old], [make_fixture("NEW")])

        assert merged[0] == old
        assert merged[0].to_row() == old.to_row()

    def test_new_rows_appended_in_fetch_order(self, make_fixture):
        existing = [make_fixture("A")]
        fetched = [make_fixture("C"), make_fixture("A", field="2"), make_fixture("B")]

        merged = merge_fixtures(existing, fetched)

        assert [f.fixture_id for f in merged] == ["A", "C", "B"]
        assert merged[0].field == "2"

    def test_cardinality(self, make_fixture):
        existing = [make_fixture("A"), make_fixture("B"), make_fixture("C")]
        fetched = [make_fixture("B"), make_fixture("D"), make_fixture("E")]

        merged = merge_fixtures(existing, fetched)

        unmatched = 2
        assert len(merged) == len(existing) + unmatched

    def test_idempotent(self, make_fixture):
        existing = [make_fixture("A"), make_fixture("B")]
        fetched = [make_fixture("B", status="postponed"), make_fixture("C")]

        once = merge_fixtures(existing, fetched)
        twice = merge_fixtures(once, fetched)

        assert twice == once

    def test_fetched_record_matches_one_row_only(self, make_fixture):
        existing = [make_fixture("A", field="old-1"), make_fixture("A", field="old-2")]

        merged = merge_fixtures(existing, [make_fixture("A", field="new")])

        assert [f.field for f in merged] == ["new", "old-2"]

    def test_duplicate_fetched_ids_are_appended(self, make_fixture):
        existing = [make_fixture("A", field="old")]
        fetched = [make_fixture("A", field="first"), make_fixture("A", field="second")]

        merged = merge_fixtures(existing, fetched)

        assert [f.field for f in merged] == ["first", "second"]

    def test_does_not_mutate_inputs(self, make_fixture):
        existing = [make_fixture("A")]
        fetched = [make_fixture("A", status="cancelled"), make_fixture("B")]

        merge_fixtures(existing, fetched)

        assert len(fetched) == 2
        assert existing[0].status == "scheduled"
