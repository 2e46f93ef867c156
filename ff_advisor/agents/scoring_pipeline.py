"""
Recommendation scoring pipeline.

Combines trending-player signals, roster position needs, and forum sentiment
into three ranked lists: waiver pickups, drop candidates, and sit/start
alerts. Scoring is best-effort: players missing from the directory are
skipped, and a failing sentiment lookup only removes the sentiment term.
"""

from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from loguru import logger

from ..models.player import Player, Position
from ..models.recommendation import Alternative, DropCandidate, Recommendation, SitStartAlert
from ..models.roster import PositionNeed, Roster, TrendingSignal
from ..models.sentiment import SentimentResult
from ..utils.constants import (
    DEFAULT_POSITION_THRESHOLDS,
    HEAVY_DROP_THRESHOLD,
    POSITION_NEED_BONUS,
    SENTIMENT_WEIGHT,
    TRENDING_CAP,
    TRENDING_DIVISOR,
)
from .position_analysis import analyze_roster_by_position, position_has_need

SentimentLookup = Callable[[str], Awaitable[Optional[SentimentResult]]]


def calculate_pickup_priority(
    trending_count: int, position_need: bool, sentiment: Optional[SentimentResult] = None
) -> float:
    """
    Waiver priority score.

    - Trending: ``min(count / 10, 50)``
    - Position need: +30
    - Sentiment: ``(score + 1) * 10``, mapping [-1, 1] onto [0, 20]; absent
      sentiment adds nothing
    """
    score = min(trending_count / TRENDING_DIVISOR, TRENDING_CAP)
    if position_need:
        score += POSITION_NEED_BONUS
    if sentiment is not None:
        score += (sentiment.sentiment_score + 1) * SENTIMENT_WEIGHT
    return score


@dataclass
class PipelineResult:
    """Everything one pipeline run produces."""
    position_analysis: Dict[Position, PositionNeed]
    waiver_recommendations: List[Recommendation] = field(default_factory=list)
    drop_candidates: List[DropCandidate] = field(default_factory=list)
    sit_start_alerts: List[SitStartAlert] = field(default_factory=list)


class ScoringPipeline:
    """Ranks waiver pickups, drop candidates and sit/start alerts for a roster."""

    def __init__(
        self,
        position_thresholds: Optional[Mapping[str, int]] = None,
        heavy_drop_threshold: int = HEAVY_DROP_THRESHOLD,
        waiver_limit: int = 10,
        sentiment_lookup: Optional[SentimentLookup] = None,
        max_sentiment_lookups: Optional[int] = None,
    ):
        """
        Args:
            position_thresholds: Target depth per position (defaults to the standard table)
            heavy_drop_threshold: Drop counts above this get the league-wide reason
            waiver_limit: Number of waiver recommendations kept
            sentiment_lookup: Async ``name -> SentimentResult | None``; None disables sentiment
            max_sentiment_lookups: Only the first N candidates get a lookup
        """
        self.position_thresholds = (
            DEFAULT_POSITION_THRESHOLDS if position_thresholds is None else position_thresholds
        )
        self.heavy_drop_threshold = heavy_drop_threshold
        self.waiver_limit = waiver_limit
        self.sentiment_lookup = sentiment_lookup
        self.max_sentiment_lookups = max_sentiment_lookups

    def analyze_positions(
        self, roster: Roster, directory: Mapping[str, Player]
    ) -> Dict[Position, PositionNeed]:
        return analyze_roster_by_position(roster.players, directory, self.position_thresholds)

    # ------------------------------------------------------------------ waivers

    def select_waiver_candidates(
        self,
        roster: Roster,
        directory: Mapping[str, Player],
        trending_adds: Sequence[TrendingSignal],
        available: Optional[Mapping[str, Player]] = None,
    ) -> List[Tuple[TrendingSignal, Player]]:
        """Trending adds that are unrostered, known, active and not Out/IR."""
        rostered = set(roster.players)
        candidates = []
        for signal in trending_adds:
            if signal.player_id in rostered:
                continue
            if available is not None and signal.player_id not in available:
                continue
            player = directory.get(signal.player_id)
            if player is None or not player.active or player.is_unavailable:
                continue
            candidates.append((signal, player))
        return candidates

    def recommend_waivers(
        self,
        roster: Roster,
        directory: Mapping[str, Player],
        trending_adds: Sequence[TrendingSignal],
        position_analysis: Optional[Mapping[Position, PositionNeed]] = None,
        available: Optional[Mapping[str, Player]] = None,
        sentiments: Optional[Mapping[str, Optional[SentimentResult]]] = None,
    ) -> List[Recommendation]:
        """Score and rank waiver candidates.

        Position needs come from the current roster and are not updated as
        picks are ranked. Ties keep trending order.
        """
        if position_analysis is None:
            position_analysis = self.analyze_positions(roster, directory)
        sentiments = sentiments or {}

        recommendations = []
        for signal, player in self.select_waiver_candidates(roster, directory, trending_adds, available):
            need = position_has_need(position_analysis, player.position)
            sentiment = sentiments.get(signal.player_id)
            recommendations.append(
                Recommendation(
                    player_id=signal.player_id,
                    name=player.full_name,
                    position=player.position,
                    team=player.team,
                    trending_count=signal.count,
                    position_need=need,
                    sentiment=sentiment,
                    discussion_count=sentiment.posts_found if sentiment else 0,
                    priority_score=calculate_pickup_priority(signal.count, need, sentiment),
                )
            )

        # sorted() is stable, equal scores stay in encounter order
        ranked = sorted(recommendations, key=lambda r: r.priority_score, reverse=True)
        return ranked[: self.waiver_limit]

    async def gather_sentiment(
        self, candidates: Sequence[Tuple[TrendingSignal, Player]]
    ) -> Dict[str, Optional[SentimentResult]]:
        """Look up sentiment for candidates one at a time.

        Lookups are awaited sequentially; a failing lookup yields None.
        """
        sentiments: Dict[str, Optional[SentimentResult]] = {}
        if self.sentiment_lookup is None:
            return sentiments

        if self.max_sentiment_lookups is not None:
            candidates = candidates[: self.max_sentiment_lookups]

        for signal, player in candidates:
            try:
                sentiments[signal.player_id] = await self.sentiment_lookup(player.full_name)
            except Exception as e:
                logger.warning(f"Error analyzing {player.full_name} sentiment: {e}")
                sentiments[signal.player_id] = None
        return sentiments

    async def score_waivers(
        self,
        roster: Roster,
        directory: Mapping[str, Player],
        trending_adds: Sequence[TrendingSignal],
        position_analysis: Optional[Mapping[Position, PositionNeed]] = None,
        available: Optional[Mapping[str, Player]] = None,
    ) -> List[Recommendation]:
        """``recommend_waivers`` with sentiment fetched through ``sentiment_lookup``."""
        candidates = self.select_waiver_candidates(roster, directory, trending_adds, available)
        sentiments = await self.gather_sentiment(candidates)
        return self.recommend_waivers(
            roster,
            directory,
            trending_adds,
            position_analysis=position_analysis,
            available=available,
            sentiments=sentiments,
        )

    # -------------------------------------------------------------------- drops

    def drop_reason(self, drop_count: int) -> str:
        if drop_count > self.heavy_drop_threshold:
            return f"Heavily dropped league-wide ({drop_count} leagues)"
        return f"Trending drop ({drop_count} leagues)"

    def find_drop_candidates(
        self,
        roster: Roster,
        directory: Mapping[str, Player],
        trending_drops: Sequence[TrendingSignal],
    ) -> List[DropCandidate]:
        """Rostered players trending as drops, then rostered Out/IR players.

        Each player appears once; the first reason found wins, so trending
        drops take precedence over injuries.
        """
        rostered = set(roster.players)
        candidates: Dict[str, DropCandidate] = {}

        for signal in trending_drops:
            if signal.player_id not in rostered or signal.player_id in candidates:
                continue
            player = directory.get(signal.player_id)
            if player is None:
                continue
            candidates[signal.player_id] = DropCandidate(
                player_id=signal.player_id,
                name=player.full_name,
                position=player.position,
                team=player.team,
                injury_status=player.status_label,
                reason=self.drop_reason(signal.count),
                trending_drop_count=signal.count,
            )

        for player_id in roster.players:
            if player_id in candidates:
                continue
            player = directory.get(player_id)
            if player is None or not player.is_unavailable:
                continue
            candidates[player_id] = DropCandidate(
                player_id=player_id,
                name=player.full_name,
                position=player.position,
                team=player.team,
                injury_status=player.status_label,
                reason=f"Injured: {player.status_label}",
                trending_drop_count=0,
            )

        return list(candidates.values())

    # ---------------------------------------------------------------- sit/start

    def find_sit_start_alerts(
        self, roster: Roster, directory: Mapping[str, Player]
    ) -> List[SitStartAlert]:
        """Injured starters with at least one healthy same-position bench player.

        No alert is raised when the bench offers nobody to start instead.
        """
        bench = [directory[pid] for pid in roster.bench if pid in directory]
        alerts = []

        for starter_id in roster.starters:
            starter = directory.get(starter_id)
            if starter is None or starter.position is None or starter.is_healthy:
                continue

            alternatives = [
                Alternative(
                    player_id=p.player_id,
                    name=p.full_name,
                    team=p.team,
                    status=p.status_label,
                )
                for p in bench
                if p.position == starter.position and p.is_healthy
            ]
            if not alternatives:
                continue

            alerts.append(
                SitStartAlert(
                    player_id=starter_id,
                    player_name=starter.full_name,
                    position=starter.position,
                    reason=f"Injury: {starter.status_label}",
                    alternatives=alternatives,
                )
            )
        return alerts

    # ---------------------------------------------------------------------- run

    async def run(
        self,
        roster: Roster,
        directory: Mapping[str, Player],
        trending_adds: Sequence[TrendingSignal],
        trending_drops: Sequence[TrendingSignal],
        available: Optional[Mapping[str, Player]] = None,
    ) -> PipelineResult:
        """Produce all three recommendation lists for ``roster``."""
        position_analysis = self.analyze_positions(roster, directory)
        waivers = await self.score_waivers(
            roster, directory, trending_adds, position_analysis=position_analysis, available=available
        )
        drops = self.find_drop_candidates(roster, directory, trending_drops)
        alerts = self.find_sit_start_alerts(roster, directory)

        logger.info(
            f"Pipeline complete: {len(waivers)} waiver recommendations, "
            f"{len(drops)} drop candidates, {len(alerts)} sit/start alerts"
        )
        return PipelineResult(
            position_analysis=position_analysis,
            waiver_recommendations=waivers,
            drop_candidates=drops,
            sit_start_alerts=alerts,
        )
