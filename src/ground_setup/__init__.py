"""
Ground Setup - Club fixture sync and weekly ground setup rosters.

Pulls the club's fixtures from Dribl, keeps a local Fixtures table and Teams
roster up to date, and works out which team sets up each ground every week.
"""

__version__ = "0.1.0"

from .config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__"]
