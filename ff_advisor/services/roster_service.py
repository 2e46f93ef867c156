"""
League, roster, and transaction access on top of the Sleeper client.
"""

import re
from typing import Any, Dict, Iterable, List, Mapping

from loguru import logger

from ..api.errors import RosterNotFoundError, UserNotFoundError
from ..api.sleeper_client import SleeperClient
from ..models.player import Player
from ..models.report import RosterBreakdown, TrendingPlayer
from ..models.roster import LeagueInfo, Roster, TrendingSignal
from ..parsers.sleeper_parsers import parse_league_info, parse_roster, parse_trending

# Sleeper user IDs are long numeric strings; anything else is a username
_USER_ID_PATTERN = re.compile(r"^\d{10,}$")


class RosterService:
    """Read-only access to Sleeper league data for one user."""

    def __init__(self, client: SleeperClient):
        self.client = client

    async def resolve_user_id(self, username_or_id: str) -> str:
        """Return the user_id, looking the user up only when given a username."""
        if _USER_ID_PATTERN.match(username_or_id):
            return username_or_id
        user = await self.client.get_user(username_or_id)
        if not user or not user.get("user_id"):
            raise UserNotFoundError(username_or_id)
        return str(user["user_id"])

    async def fetch_user_leagues(self, user_id: str, season: str) -> List[LeagueInfo]:
        leagues = await self.client.get_user_leagues(user_id, season) or []
        return [parse_league_info(league) for league in leagues]

    async def fetch_league(self, league_id: str) -> LeagueInfo:
        data = await self.client.get_league(league_id)
        info = parse_league_info(data or {})
        if info.league_id is None:
            info = info.model_copy(update={"league_id": league_id})
        return info

    async def fetch_rosters(self, league_id: str) -> List[Roster]:
        rosters = await self.client.get_league_rosters(league_id) or []
        return [parse_roster(r) for r in rosters]

    async def fetch_roster(self, league_id: str, owner_id: str) -> Roster:
        """The owner's roster within the league.

        Raises:
            RosterNotFoundError: No roster in the league belongs to ``owner_id``
        """
        return select_roster(await self.fetch_rosters(league_id), league_id, owner_id)

    async def fetch_league_users(self, league_id: str) -> List[Dict[str, Any]]:
        return await self.client.get_league_users(league_id) or []

    async def fetch_matchups(self, league_id: str, week: int) -> List[Dict[str, Any]]:
        return await self.client.get_matchups(league_id, week) or []

    async def fetch_transactions(self, league_id: str, round_: int) -> List[Dict[str, Any]]:
        return await self.client.get_transactions(league_id, round_) or []

    async def fetch_trending(
        self, kind: str = "add", lookback_hours: int = 24, limit: int = 25
    ) -> List[TrendingSignal]:
        """Trending adds or drops in upstream order (descending count)."""
        data = await self.client.get_trending_players(kind, lookback_hours, limit)
        return parse_trending(data)

    async def fetch_available_players(
        self, league_id: str, directory: Mapping[str, Player]
    ) -> Dict[str, Player]:
        """Active players on no roster in the league."""
        return available_players(await self.fetch_rosters(league_id), directory)


def select_roster(rosters: Iterable[Roster], league_id: str, owner_id: str) -> Roster:
    for roster in rosters:
        if roster.owner_id == owner_id:
            return roster
    logger.error(f"No roster for owner {owner_id} in league {league_id}")
    raise RosterNotFoundError(league_id, owner_id)


def available_players(
    rosters: Iterable[Roster], directory: Mapping[str, Player]
) -> Dict[str, Player]:
    """Directory minus every rostered player, restricted to active players."""
    rostered = set()
    for roster in rosters:
        rostered.update(roster.players)
    return {
        pid: player
        for pid, player in directory.items()
        if pid not in rostered and player.active
    }


def format_roster_with_names(roster: Roster, directory: Mapping[str, Player]) -> RosterBreakdown:
    """Roster slots as display strings; unknown IDs are shown as-is."""

    def _name(player_id: str) -> str:
        player = directory.get(player_id)
        return player.display_name() if player else player_id

    return RosterBreakdown(
        owner_id=roster.owner_id,
        roster_id=roster.roster_id,
        starters=[_name(pid) for pid in roster.starters],
        bench=[_name(pid) for pid in roster.bench],
        taxi=[_name(pid) for pid in roster.taxi],
        reserve=[_name(pid) for pid in roster.reserve],
    )


def describe_trending(
    signals: List[TrendingSignal], directory: Mapping[str, Player]
) -> List[TrendingPlayer]:
    """Join trending signals with directory names for display."""
    described = []
    for signal in signals:
        player = directory.get(signal.player_id)
        described.append(
            TrendingPlayer(
                player_id=signal.player_id,
                count=signal.count,
                name=player.full_name if player else "Unknown",
                position=player.position.value if player and player.position else "N/A",
                team=(player.team if player else None) or "FA",
            )
        )
    return described
