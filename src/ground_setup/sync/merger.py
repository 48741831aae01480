"""
Merging fetched fixtures into the stored fixtures table.
"""

from ..data.models import FixtureRecord


def merge_fixtures(
    existing: list[FixtureRecord], fetched: list[FixtureRecord]
) -> list[FixtureRecord]:
    """
    Reconcile fetched fixtures against the stored table.

    Each stored row is replaced in place by the first pending fetched fixture
    with the same id, which is then consumed; rows with no match are kept
    unchanged. Fetched fixtures left over are appended in fetch order.
    Quadratic, which is fine for a season of club fixtures.

    Args:
        existing: Stored fixtures in table order
        fetched: Freshly fetched fixtures

    Returns:
        The new table
    """
    pending = list(fetched)
    merged = []

    for row in existing:
        for i, fixture in enumerate(pending):
            if fixture.fixture_id == row.fixture_id:
                merged.append(pending.pop(i))
                break
        else:
            merged.append(row)

    return merged + pending
