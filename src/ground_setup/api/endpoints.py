"""
Dribl API endpoint definitions.

Note: The Dribl API is undocumented - URLs and parameters may change
between seasons.
"""

# Base URL
DRIBL_BASE_URL = "https://mc-api.dribl.com/api"

# Fixtures - Paginated match fixtures for a club
# Contains: fixture hash IDs, teams, grounds, fields, kickoff dates
# Paged with ?cursor=<meta.next_cursor> from the previous response
FIXTURES_PATH = "/fixtures"

# Default window the Dribl website uses when listing fixtures
DEFAULT_DATE_RANGE = "default"


def get_fixtures_url(base_url: str = DRIBL_BASE_URL) -> str:
    """Get URL for the fixtures listing."""
    return base_url.rstrip("/") + FIXTURES_PATH


def get_fixtures_params(
    season: str,
    competition: str,
    club: str,
    tenant: str,
    cursor: str | None = None,
) -> dict[str, str]:
    """
    Get query parameters for a page of fixtures.

    Args:
        season: Dribl season hash
        competition: Dribl competition hash
        club: Dribl club hash
        tenant: Dribl tenant hash
        cursor: Continuation cursor returned by the previous page
    """
    params = {
        "date_range": DEFAULT_DATE_RANGE,
        "season": season,
        "competition": competition,
        "club": club,
        "tenant": tenant,
    }
    if cursor is not None:
        params["cursor"] = cursor
    return params
