"""Data services built on the upstream clients."""

from .player_directory import RemotePlayerDirectory
from .roster_service import (
    RosterService,
    available_players,
    describe_trending,
    format_roster_with_names,
    select_roster,
)
from .sentiment import SentimentSource, extract_player_mentions, score_text

__all__ = [
    "RemotePlayerDirectory",
    "RosterService",
    "SentimentSource",
    "available_players",
    "describe_trending",
    "extract_player_mentions",
    "format_roster_with_names",
    "score_text",
    "select_roster",
]
