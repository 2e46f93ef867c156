"""Roster, league, and signal models."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .player import Position


class Roster(BaseModel):
    """A team's roster in a Sleeper league. Read-only within the pipeline."""

    roster_id: Optional[int] = None
    owner_id: Optional[str] = None
    starters: List[str] = Field(default_factory=list)
    players: List[str] = Field(default_factory=list)
    taxi: List[str] = Field(default_factory=list)
    reserve: List[str] = Field(default_factory=list)
    settings: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def bench(self) -> List[str]:
        """Rostered players who are not starting, in roster order."""
        starters = set(self.starters)
        return [pid for pid in self.players if pid not in starters]

    def has_player(self, player_id: str) -> bool:
        return player_id in self.players


class TrendingSignal(BaseModel):
    """How many leagues added or dropped a player in the lookback window."""

    player_id: str
    count: int = 0

    model_config = ConfigDict(frozen=True)


class PositionPlayer(BaseModel):
    """Player summary used in the position breakdown."""

    id: str
    name: str
    team: Optional[str] = None
    status: str = "active"


class PositionNeed(BaseModel):
    """Rostered depth at one position against its target."""

    position: Position
    count: int
    threshold: int
    need: bool
    players: List[PositionPlayer] = Field(default_factory=list)


class LeagueInfo(BaseModel):
    """League summary carried into the report."""

    league_id: Optional[str] = None
    name: str = "Unknown League"
    scoring: float = 0.0
    roster_positions: List[str] = Field(default_factory=list)
    total_rosters: Optional[int] = None
