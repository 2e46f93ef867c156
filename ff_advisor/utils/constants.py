"""
Fantasy football configuration tables: position depth targets, scoring
weights, and the keyword lexicon used for forum sentiment.

Scoring functions take these tables as arguments; the values here are only
defaults, so tests and callers can substitute their own.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

# Target roster depth per position; a position is a need when count < target
DEFAULT_POSITION_THRESHOLDS: Dict[str, int] = {
    "QB": 2,
    "RB": 4,
    "WR": 4,
    "TE": 2,
    "K": 1,
    "DEF": 1,
}

# Drop counts above this read as a league-wide exodus
HEAVY_DROP_THRESHOLD = 100

# Waiver scoring weights
TRENDING_DIVISOR = 10
TRENDING_CAP = 50.0
POSITION_NEED_BONUS = 30.0
SENTIMENT_WEIGHT = 10.0

# Number of trending adds considered as waiver candidates
WAIVER_CANDIDATE_POOL = 15

# Report thresholds for waiver priority labels
PRIORITY_HIGH = 70
PRIORITY_MEDIUM = 40


@dataclass(frozen=True)
class SentimentLexicon:
    """Positive and negative keyword lists, matched as lower-case substrings."""

    positive: Tuple[str, ...]
    negative: Tuple[str, ...]


DEFAULT_LEXICON = SentimentLexicon(
    positive=(
        "great", "good", "excellent", "strong", "best", "start", "must start",
        "breakout", "stud", "rb1", "wr1", "te1", "league winner", "smash play",
        "explosive", "touchdown", "targets", "volume", "opportunity",
    ),
    negative=(
        "bad", "terrible", "worst", "bench", "sit", "avoid", "bust",
        "injured", "injury", "questionable", "doubtful", "out", "limited",
        "concerned", "risky", "trap", "fade",
    ),
)

# Search terms for "Who Do I Start" index threads
WDIS_QUERY = 'WDIS OR "Who Do I Start" OR "Official Index"'
