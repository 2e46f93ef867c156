"""
Fantasy football analysis engine.

Fetches Sleeper league data concurrently, runs the scoring pipeline (with
forum sentiment looked up one player at a time), and assembles the report
object consumed by the formatter.
"""

import asyncio
from datetime import datetime
from typing import Optional

from loguru import logger

from config.settings import Settings
from ..api.reddit_client import RedditClient
from ..api.sleeper_client import SleeperClient
from ..models.report import AnalysisReport
from ..services.player_directory import RemotePlayerDirectory
from ..services.roster_service import (
    RosterService,
    available_players,
    describe_trending,
    format_roster_with_names,
    select_roster,
)
from ..services.sentiment import SentimentSource
from ..utils.constants import DEFAULT_POSITION_THRESHOLDS, WAIVER_CANDIDATE_POOL
from ..utils.rate_limiter import MinIntervalScheduler
from .scoring_pipeline import ScoringPipeline

TRENDING_SUMMARY_SIZE = 10


class AnalysisEngine:
    """
    Builds a complete team analysis for one owner in one league.

    Primary data (league, rosters, player directory, trending lists) is
    fetched concurrently and any failure there aborts the run. Sentiment is
    optional enrichment: failures only drop the sentiment term.
    """

    def __init__(
        self,
        settings: Settings,
        sleeper: Optional[SleeperClient] = None,
        reddit: Optional[RedditClient] = None,
        directory: Optional[RemotePlayerDirectory] = None,
        scheduler: Optional[MinIntervalScheduler] = None,
    ):
        self.settings = settings
        self.sleeper = sleeper or SleeperClient(
            base_url=settings.sleeper_base_url,
            timeout_seconds=settings.request_timeout_seconds,
        )
        self.reddit = reddit or RedditClient(
            subreddit=settings.reddit_subreddit,
            base_url=settings.reddit_base_url,
            user_agent=settings.reddit_user_agent,
            timeout_seconds=settings.request_timeout_seconds,
        )
        self.directory = directory or RemotePlayerDirectory(
            self.sleeper, ttl_seconds=settings.player_cache_ttl_seconds
        )
        self.roster_service = RosterService(self.sleeper)
        self.scheduler = scheduler or MinIntervalScheduler(settings.reddit_delay_seconds)
        self.sentiment = SentimentSource(self.reddit, self.scheduler)

        logger.info("AnalysisEngine initialized")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        await self.sleeper.close()
        await self.reddit.close()

    def build_pipeline(self) -> ScoringPipeline:
        lookup = self.sentiment.lookup if self.settings.include_reddit_analysis else None
        return ScoringPipeline(
            position_thresholds=DEFAULT_POSITION_THRESHOLDS,
            heavy_drop_threshold=self.settings.heavy_drop_threshold,
            waiver_limit=self.settings.max_waiver_recommendations,
            sentiment_lookup=lookup,
            max_sentiment_lookups=self.settings.max_reddit_searches,
        )

    async def analyze_team(self, owner: str, league_id: str) -> AnalysisReport:
        """
        Run the full analysis.

        Args:
            owner: Sleeper username or user_id
            league_id: Sleeper league ID

        Returns:
            AnalysisReport with roster breakdown, position needs and recommendations

        Raises:
            UpstreamAPIError: A primary Sleeper fetch failed
            RosterNotFoundError: The owner has no roster in the league
            UserNotFoundError: The username does not exist
        """
        logger.info(f"Starting team analysis for {owner} in league {league_id}")
        user_id = await self.roster_service.resolve_user_id(owner)

        lookback = self.settings.trending_lookback_hours
        limit = self.settings.trending_limit
        tasks = [
            asyncio.ensure_future(self.roster_service.fetch_league(league_id)),
            asyncio.ensure_future(self.roster_service.fetch_rosters(league_id)),
            asyncio.ensure_future(self.directory.fetch_player_directory()),
            asyncio.ensure_future(self.roster_service.fetch_trending("add", lookback, limit)),
            asyncio.ensure_future(self.roster_service.fetch_trending("drop", lookback, limit)),
        ]
        try:
            league, rosters, directory, trending_adds, trending_drops = await asyncio.gather(*tasks)
        except Exception:
            # First failure wins; stop the rest (notably the players/nfl download)
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        roster = select_roster(rosters, league_id, user_id)
        available = available_players(rosters, directory)
        logger.info(
            f"Roster has {len(roster.players)} players; {len(available)} available in league"
        )

        pipeline = self.build_pipeline()
        result = await pipeline.run(
            roster,
            directory,
            trending_adds[:WAIVER_CANDIDATE_POOL],
            trending_drops,
            available=available,
        )

        return AnalysisReport(
            league_info=league,
            roster=format_roster_with_names(roster, directory),
            position_analysis=result.position_analysis,
            waiver_recommendations=result.waiver_recommendations,
            drop_candidates=result.drop_candidates[: self.settings.max_drop_candidates],
            sit_start_recommendations=result.sit_start_alerts,
            trending_adds=describe_trending(trending_adds[:TRENDING_SUMMARY_SIZE], directory),
            trending_drops=describe_trending(trending_drops[:TRENDING_SUMMARY_SIZE], directory),
            timestamp=datetime.now(),
        )
