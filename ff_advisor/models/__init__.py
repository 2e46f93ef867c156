"""Domain models."""

from .player import InjuryStatus, Player, Position
from .recommendation import Alternative, DropCandidate, Recommendation, SitStartAlert
from .report import AnalysisReport, RosterBreakdown, TrendingPlayer
from .roster import LeagueInfo, PositionNeed, PositionPlayer, Roster, TrendingSignal
from .sentiment import Discussion, SentimentLabel, SentimentResult, SentimentScore

__all__ = [
    "Alternative",
    "AnalysisReport",
    "Discussion",
    "DropCandidate",
    "InjuryStatus",
    "LeagueInfo",
    "Player",
    "Position",
    "PositionNeed",
    "PositionPlayer",
    "Recommendation",
    "Roster",
    "RosterBreakdown",
    "SentimentLabel",
    "SentimentResult",
    "SentimentScore",
    "SitStartAlert",
    "TrendingPlayer",
    "TrendingSignal",
]
