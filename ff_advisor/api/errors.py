"""Exceptions raised by the upstream API clients and data services."""

from typing import Optional


class FantasyAdvisorError(Exception):
    """Base exception for the advisor."""
    pass


class UpstreamAPIError(FantasyAdvisorError):
    """Non-2xx response or network failure talking to an upstream service."""

    service = "Upstream"

    def __init__(self, endpoint: str, status: Optional[int] = None, reason: Optional[str] = None):
        self.endpoint = endpoint
        self.status = status
        self.reason = reason
        if status is None:
            message = f"{self.service} request to {endpoint} failed: {reason}"
        elif reason:
            message = f"{self.service} API error {status} {reason} for {endpoint}"
        else:
            message = f"{self.service} API error {status} for {endpoint}"
        super().__init__(message)


class SleeperAPIError(UpstreamAPIError):
    """Raised for Sleeper API failures."""
    service = "Sleeper"


class RedditAPIError(UpstreamAPIError):
    """Raised for Reddit API failures."""
    service = "Reddit"


class RosterNotFoundError(FantasyAdvisorError):
    """No roster in the league belongs to the requested owner."""

    def __init__(self, league_id: str, owner_id: str):
        self.league_id = league_id
        self.owner_id = owner_id
        super().__init__(f"Roster not found for user {owner_id} in league {league_id}")


class UserNotFoundError(FantasyAdvisorError):
    """Sleeper has no user with the given username."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Sleeper user not found: {username}")
