"""Parsers turning Sleeper API JSON into domain models."""

from typing import Any, Dict, List, Optional

from loguru import logger
from pydantic import ValidationError

from ..models.player import Player
from ..models.roster import LeagueInfo, Roster, TrendingSignal


def parse_player(player_id: str, data: Dict[str, Any]) -> Optional[Player]:
    """Build a Player from one directory entry; None if the entry is unusable."""
    if not isinstance(data, dict):
        return None
    try:
        return Player(
            player_id=str(data.get("player_id") or player_id),
            first_name=data.get("first_name") or "",
            last_name=data.get("last_name") or "",
            position=data.get("position"),
            team=data.get("team"),
            injury_status=data.get("injury_status"),
            active=bool(data.get("active", False)),
        )
    except ValidationError as e:
        logger.debug(f"Skipping malformed player {player_id}: {e}")
        return None


def parse_player_directory(data: Any) -> Dict[str, Player]:
    """Parse the ``players/nfl`` payload keyed by player_id."""
    if not isinstance(data, dict):
        return {}
    directory: Dict[str, Player] = {}
    for player_id, pdata in data.items():
        player = parse_player(player_id, pdata)
        if player is not None:
            directory[str(player_id)] = player
    return directory


def _id_list(values: Any) -> List[str]:
    # Sleeper uses "0" for an empty starter slot and null for empty lists
    if not values:
        return []
    return [str(v) for v in values if v is not None and str(v) != "0"]


def parse_roster(data: Dict[str, Any]) -> Roster:
    """Parse one entry of ``league/{id}/rosters``."""
    return Roster(
        roster_id=data.get("roster_id"),
        owner_id=data.get("owner_id"),
        starters=_id_list(data.get("starters")),
        players=_id_list(data.get("players")),
        taxi=_id_list(data.get("taxi")),
        reserve=_id_list(data.get("reserve")),
        settings=data.get("settings") or {},
    )


def parse_trending(data: Any) -> List[TrendingSignal]:
    """Parse a trending list, keeping upstream order."""
    if not isinstance(data, list):
        return []
    signals = []
    for item in data:
        if isinstance(item, dict) and item.get("player_id"):
            signals.append(
                TrendingSignal(player_id=str(item["player_id"]), count=int(item.get("count") or 0))
            )
    return signals


def parse_league_info(data: Dict[str, Any]) -> LeagueInfo:
    """League summary; ``scoring`` is the points-per-reception value."""
    scoring_settings = data.get("scoring_settings") or {}
    return LeagueInfo(
        league_id=data.get("league_id"),
        name=data.get("name") or "Unknown League",
        scoring=float(scoring_settings.get("rec") or 0),
        roster_positions=data.get("roster_positions") or [],
        total_rosters=data.get("total_rosters"),
    )
