"""Forum sentiment models."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class SentimentLabel(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class SentimentScore(BaseModel):
    """Keyword tally for one corpus."""

    positive_count: int = 0
    negative_count: int = 0
    sentiment_score: float = Field(0.0, ge=-1.0, le=1.0)
    sentiment_label: SentimentLabel = SentimentLabel.NEUTRAL


class Discussion(BaseModel):
    title: str
    score: int = 0
    url: Optional[str] = None


class SentimentResult(SentimentScore):
    """Sentiment verdict for one player query.

    A coarse directional signal from keyword counts, not NLP.
    """

    query: str
    posts_found: int = 0
    comment_count: int = 0
    total_score: int = 0
    total_comments: int = 0
    top_discussions: List[Discussion] = Field(default_factory=list)
    recent_posts: List[Discussion] = Field(default_factory=list)
