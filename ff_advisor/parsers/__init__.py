"""Sleeper and Reddit API response parsers."""

from .reddit_parsers import parse_comment_listing, parse_listing
from .sleeper_parsers import (
    parse_league_info,
    parse_player,
    parse_player_directory,
    parse_roster,
    parse_trending,
)

__all__ = [
    "parse_comment_listing",
    "parse_league_info",
    "parse_listing",
    "parse_player",
    "parse_player_directory",
    "parse_roster",
    "parse_trending",
]
