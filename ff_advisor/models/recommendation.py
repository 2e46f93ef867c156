"""Recommendation output models."""

from typing import List, Optional

from pydantic import BaseModel, Field

from .player import Position
from .sentiment import SentimentResult


class Recommendation(BaseModel):
    """A ranked waiver pickup."""

    player_id: str
    name: str
    position: Optional[Position] = None
    team: Optional[str] = None
    trending_count: int = 0
    position_need: bool = False
    sentiment: Optional[SentimentResult] = None
    discussion_count: int = 0
    priority_score: float = 0.0


class DropCandidate(BaseModel):
    """A rostered player worth dropping, listed once with its first reason."""

    player_id: str
    name: str
    position: Optional[Position] = None
    team: Optional[str] = None
    injury_status: str = "active"
    reason: str
    trending_drop_count: int = 0


class Alternative(BaseModel):
    player_id: str
    name: str
    team: Optional[str] = None
    status: str = "active"


class SitStartAlert(BaseModel):
    """Bench an injured starter in favour of a healthy bench player."""

    type: str = "sit"
    player_id: str
    player_name: str
    position: Optional[Position] = None
    reason: str
    alternatives: List[Alternative] = Field(default_factory=list)
