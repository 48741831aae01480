"""
Data Processors for Dribl API Responses.

Transforms raw API JSON into typed FixtureRecord models.
"""

import logging
from typing import Any

from pydantic import ValidationError

from .models import FixtureRecord

logger = logging.getLogger(__name__)


def process_fixture(item: dict[str, Any]) -> FixtureRecord:
    """
    Process one entry of a fixtures page 'data' array.

    Args:
        item: Fixture dictionary with 'hash_id' and 'attributes'

    Returns:
        FixtureRecord model

    Raises:
        KeyError: If the hash_id or date is missing
        ValidationError: If the date cannot be parsed
    """
    attrs = item.get("attributes") or {}
    return FixtureRecord(
        fixture_id=item["hash_id"],
        match_id=attrs.get("match_hash_id"),
        date=attrs["date"],
        league=attrs.get("league_name"),
        round=attrs.get("round"),
        status=attrs.get("status"),
        name=attrs.get("name"),
        home_team=attrs.get("home_team_name"),
        away_team=attrs.get("away_team_name"),
        ground=attrs.get("ground_name"),
        field=attrs.get("field_name"),
    )


def process_fixtures_page(page: dict[str, Any]) -> tuple[list[FixtureRecord], str | None]:
    """
    Process a full fixtures page.

    Entries without an id or a parseable date are skipped with a warning.

    Args:
        page: Decoded response with 'data' and 'meta'

    Returns:
        Tuple of (fixtures in page order, next cursor or None)
    """
    fixtures = []

    for item in page.get("data") or []:
        if not isinstance(item, dict):
            logger.warning(f"Skipping non-object fixture entry: {item!r}")
            continue
        try:
            fixtures.append(process_fixture(item))
        except (AttributeError, KeyError, TypeError, ValidationError) as e:
            logger.warning(f"Skipping malformed fixture {item.get('hash_id')!r}: {e}")

    meta = page.get("meta") or {}
    return fixtures, meta.get("next_cursor")
