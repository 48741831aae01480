"""
Configuration management for Ground Setup using pydantic-settings.

Environment variables are loaded from .env file and validated at startup.
Each season the Dribl identifiers (season, competition, club, tenant) need
updating to match the new competition.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DriblSettings(BaseSettings):
    """Dribl fixtures API identifiers and fetch limits."""

    base_url: str = Field(
        default="https://mc-api.dribl.com/api", description="Dribl API base URL"
    )
    season: str = Field(default="3pmvvPRmvJ", description="Dribl season hash")
    competition: str = Field(default="3pmvZw6mvJ", description="Dribl competition hash")
    club: str = Field(default="wxNx5LOKkp", description="Dribl club hash")
    tenant: str = Field(default="b6lNb6NxE2", description="Dribl tenant hash")

    horizon_days: int = Field(
        default=31,
        ge=1,
        description="Only fetch fixtures up to this many days ahead",
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")

    model_config = SettingsConfigDict(env_prefix="DRIBL_")


class ClubSettings(BaseSettings):
    """The club whose teams and grounds are tracked."""

    name: str = Field(
        default="Oatley Football Club",
        description="Prefix shared by every team name belonging to the club",
    )
    grounds: list[str] = Field(
        default=["Carinya School Fields", "Renown Park", "The Green"],
        description="Grounds the club is responsible for setting up",
    )
    week_start_day: int = Field(
        default=0,
        ge=0,
        le=6,
        description="Weekday a setup week begins on (0 = Monday, 6 = Sunday)",
    )
    timezone: str = Field(
        default="Australia/Sydney", description="Timezone used to compute week boundaries"
    )

    model_config = SettingsConfigDict(env_prefix="CLUB_")

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, v: str) -> str:
        """Reject timezone names zoneinfo cannot resolve."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    @property
    def tz(self) -> ZoneInfo:
        """Resolved timezone object."""
        return ZoneInfo(self.timezone)


class StorageSettings(BaseSettings):
    """Local storage locations."""

    db_path: Path = Field(
        default=Path("data/ground_setup.db"), description="SQLite database path"
    )
    export_dir: Path = Field(default=Path("exports"), description="CSV export directory")

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    @field_validator("db_path", "export_dir", mode="before")
    @classmethod
    def ensure_path(cls, v: str | Path) -> Path:
        """Convert string to Path."""
        return Path(v)


class AppSettings(BaseSettings):
    """General application settings."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )

    model_config = SettingsConfigDict(env_prefix="")


class Settings(BaseSettings):
    """Main settings class combining all configuration sections."""

    dribl: DriblSettings = Field(default_factory=DriblSettings)
    club: ClubSettings = Field(default_factory=ClubSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    app: AppSettings = Field(default_factory=AppSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    def validate_dribl_config(self) -> bool:
        """Check that every Dribl identifier is set."""
        return all(
            [
                self.dribl.season,
                self.dribl.competition,
                self.dribl.club,
                self.dribl.tenant,
            ]
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings.
    """
    from dotenv import load_dotenv

    # Try to find and load .env from project root
    env_paths = [
        Path(".env"),
        Path(__file__).parent.parent.parent / ".env",
    ]

    for env_path in env_paths:
        if env_path.exists():
            load_dotenv(env_path, override=True)
            break

    return Settings()
