"""
Configuration settings for the fantasy football advisor.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Sleeper API Configuration
    sleeper_base_url: str = Field(default="https://api.sleeper.app/v1")
    sleeper_username: Optional[str] = Field(default=None)
    sleeper_user_id: Optional[str] = Field(default=None)
    sleeper_league_id: Optional[str] = Field(default=None)
    season: str = Field(default="2024")

    # Reddit Configuration
    reddit_base_url: str = Field(default="https://www.reddit.com")
    reddit_subreddit: str = Field(default="fantasyfootball")
    reddit_user_agent: str = Field(default="FantasyFootballAnalyzer/1.0")
    reddit_delay_seconds: float = Field(default=2.0, ge=0)
    include_reddit_analysis: bool = Field(default=True)
    max_reddit_searches: int = Field(default=10, ge=0)

    # Analysis Preferences
    max_waiver_recommendations: int = Field(default=5, ge=1)
    max_drop_candidates: int = Field(default=3, ge=1)
    trending_lookback_hours: int = Field(default=24, ge=1)
    trending_limit: int = Field(default=30, ge=1)
    heavy_drop_threshold: int = Field(default=100, ge=0)

    # Cache Configuration
    player_cache_ttl_seconds: int = Field(default=3600, ge=0)

    # HTTP; None leaves aiohttp's default timeout in place
    request_timeout_seconds: Optional[float] = Field(default=None, gt=0)

    # Logging
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=None)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Loguru level names are upper case."""
        return v.upper()

    @property
    def owner(self) -> Optional[str]:
        """User ID takes priority over username (skips one API call)."""
        return self.sleeper_user_id or self.sleeper_username
