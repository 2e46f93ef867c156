"""Report object handed to the formatter."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .player import Position
from .recommendation import DropCandidate, Recommendation, SitStartAlert
from .roster import LeagueInfo, PositionNeed


class RosterBreakdown(BaseModel):
    """Roster slots rendered as ``Name (POS - TEAM)`` strings."""

    owner_id: Optional[str] = None
    roster_id: Optional[int] = None
    starters: List[str] = Field(default_factory=list)
    bench: List[str] = Field(default_factory=list)
    taxi: List[str] = Field(default_factory=list)
    reserve: List[str] = Field(default_factory=list)


class TrendingPlayer(BaseModel):
    """Trending signal joined with directory details."""

    player_id: str
    count: int
    name: str = "Unknown"
    position: str = "N/A"
    team: str = "FA"


class AnalysisReport(BaseModel):
    """Complete team analysis. Plain data, JSON-serialisable."""

    league_info: LeagueInfo
    roster: RosterBreakdown
    position_analysis: Dict[Position, PositionNeed]
    waiver_recommendations: List[Recommendation] = Field(default_factory=list)
    drop_candidates: List[DropCandidate] = Field(default_factory=list)
    sit_start_recommendations: List[SitStartAlert] = Field(default_factory=list)
    trending_adds: List[TrendingPlayer] = Field(default_factory=list)
    trending_drops: List[TrendingPlayer] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=datetime.now)
