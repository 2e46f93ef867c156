"""Pytest configuration and shared fixtures for all tests."""

from typing import Any, Callable, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from ff_advisor.models.player import Player
from ff_advisor.models.roster import Roster, TrendingSignal


def make_response(
    payload: Any = None,
    status: int = 200,
    reason: str = "OK",
    json_error: Optional[Exception] = None,
) -> MagicMock:
    """Async context manager standing in for ``session.get(...)``.

    ``json_error`` makes ``response.json()`` raise, as for an HTML error page.
    """
    response = MagicMock()
    response.status = status
    response.reason = reason
    if json_error is not None:
        response.json = AsyncMock(side_effect=json_error)
    else:
        response.json = AsyncMock(return_value=payload)

    ctx = MagicMock()
    ctx.__aenter__ = AsyncMock(return_value=response)
    ctx.__aexit__ = AsyncMock(return_value=None)
    return ctx


def make_session(*responses: MagicMock) -> MagicMock:
    """Mock aiohttp session whose ``get`` returns ``responses`` in order."""
    session = MagicMock()
    session.get = MagicMock(side_effect=list(responses))
    session.close = AsyncMock()
    return session


@pytest.fixture
def make_player() -> Callable[..., Player]:
    """Factory for directory players."""

    def _make(
        player_id: str,
        first_name: str,
        last_name: str,
        position: Optional[str],
        team: Optional[str] = "FA",
        injury_status: Optional[str] = None,
        active: bool = True,
    ) -> Player:
        return Player(
            player_id=player_id,
            first_name=first_name,
            last_name=last_name,
            position=position,
            team=team,
            injury_status=injury_status,
            active=active,
        )

    return _make


@pytest.fixture
def directory(make_player) -> Dict[str, Player]:
    """Player directory covering the sample roster and a few free agents."""
    players = [
        make_player("qb1", "Josh", "Allen", "QB", "BUF"),
        make_player("rb1", "Bijan", "Robinson", "RB", "ATL"),
        make_player("rb2", "Breece", "Hall", "RB", "NYJ", injury_status="Questionable"),
        make_player("wr1", "CeeDee", "Lamb", "WR", "DAL", injury_status="Out"),
        make_player("wr2", "Puka", "Nacua", "WR", "LAR"),
        make_player("wr3", "Rashee", "Rice", "WR", "KC"),
        make_player("te1", "Sam", "LaPorta", "TE", "DET"),
        make_player("ir1", "Nick", "Chubb", "RB", "CLE", injury_status="IR"),
        # Free agents
        make_player("fa_rb", "Jaylen", "Wright", "RB", "MIA"),
        make_player("fa_wr", "Jalen", "McMillan", "WR", "TB"),
        make_player("fa_qb", "Drake", "Maye", "QB", "NE"),
        make_player("fa_te", "Tucker", "Kraft", "TE", "GB"),
        make_player("fa_out", "Tank", "Dell", "WR", "HOU", injury_status="Out"),
        make_player("fa_inactive", "Retired", "Guy", "WR", None, active=False),
        make_player("fa_k", "Jake", "Bates", "K", "DET"),
    ]
    return {p.player_id: p for p in players}


@pytest.fixture
def roster() -> Roster:
    """QB 1, RB 3, WR 3, TE 1. The starting WR is Out; two healthy WRs on the bench."""
    return Roster(
        roster_id=1,
        owner_id="123456789012",
        starters=["qb1", "rb1", "rb2", "wr1", "te1"],
        players=["qb1", "rb1", "rb2", "wr1", "te1", "wr2", "wr3", "ir1"],
    )


@pytest.fixture
def trending_adds() -> List[TrendingSignal]:
    return [
        TrendingSignal(player_id="fa_rb", count=500),
        TrendingSignal(player_id="fa_wr", count=320),
        TrendingSignal(player_id="fa_out", count=300),
        TrendingSignal(player_id="rb1", count=250),
        TrendingSignal(player_id="missing", count=200),
        TrendingSignal(player_id="fa_inactive", count=150),
        TrendingSignal(player_id="fa_qb", count=120),
        TrendingSignal(player_id="fa_te", count=40),
    ]


@pytest.fixture
def sleeper_players_payload() -> Dict[str, Dict[str, Any]]:
    """Trimmed ``players/nfl`` response."""
    return {
        "4046": {
            "player_id": "4046",
            "first_name": "Patrick",
            "last_name": "Mahomes",
            "position": "QB",
            "team": "KC",
            "injury_status": None,
            "active": True,
        },
        "6794": {
            "player_id": "6794",
            "first_name": "Justin",
            "last_name": "Jefferson",
            "position": "WR",
            "team": "MIN",
            "injury_status": "Questionable",
            "active": True,
        },
        "BUF": {
            "first_name": "Buffalo",
            "last_name": "Bills",
            "position": "DEF",
            "team": "BUF",
            "active": True,
        },
        "1234": {
            "player_id": "1234",
            "first_name": "Big",
            "last_name": "Lineman",
            "position": "OT",
            "team": "NYG",
            "active": True,
        },
        "9999": {
            "player_id": "9999",
            "first_name": "Long",
            "last_name": "Snapper",
            "position": "LS",
            "team": None,
            "injury_status": "PUP",
            "active": False,
        },
    }


@pytest.fixture
def sleeper_rosters_payload() -> List[Dict[str, Any]]:
    """``league/{id}/rosters`` response with two teams."""
    return [
        {
            "roster_id": 1,
            "owner_id": "111111111111",
            "starters": ["4046", "0"],
            "players": ["4046", "BUF"],
            "taxi": None,
            "reserve": None,
            "settings": {"wins": 3},
        },
        {
            "roster_id": 2,
            "owner_id": "222222222222",
            "starters": ["6794"],
            "players": ["6794", "1234"],
            "taxi": [],
            "reserve": ["1234"],
            "settings": {},
        },
    ]


def reddit_listing(*posts: Dict[str, Any]) -> Dict[str, Any]:
    """Wrap post dicts in Reddit's listing envelope."""
    return {"kind": "Listing", "data": {"children": [{"kind": "t3", "data": p} for p in posts]}}
