"""Upstream API clients."""

from .errors import (
    FantasyAdvisorError,
    RedditAPIError,
    RosterNotFoundError,
    SleeperAPIError,
    UpstreamAPIError,
    UserNotFoundError,
)
from .reddit_client import RedditClient
from .sleeper_client import SLEEPER_API_BASE, SleeperClient

__all__ = [
    "FantasyAdvisorError",
    "RedditAPIError",
    "RedditClient",
    "RosterNotFoundError",
    "SLEEPER_API_BASE",
    "SleeperAPIError",
    "SleeperClient",
    "UpstreamAPIError",
    "UserNotFoundError",
]
