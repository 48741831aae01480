"""
Dribl API Integration Module.

Provides clients for fetching club fixtures from the Dribl API.
"""

from .client import (
    DriblAPIError,
    DriblClient,
    DriblNotFoundError,
    DriblRateLimitError,
    DriblResponseError,
    SyncDriblClient,
)

__all__ = [
    # Client
    "DriblClient",
    "SyncDriblClient",
    # Errors
    "DriblAPIError",
    "DriblNotFoundError",
    "DriblRateLimitError",
    "DriblResponseError",
]
