"""
Forum sentiment for fantasy football players.

Searches r/fantasyfootball for a player, gathers post titles, bodies and
reply threads into one corpus, and tallies a fixed keyword lexicon. This is a
coarse directional signal, not NLP.
"""

from typing import Any, Dict, Iterable, List, Optional

from loguru import logger

from ..api.errors import UpstreamAPIError
from ..api.reddit_client import RedditClient
from ..models.sentiment import Discussion, SentimentLabel, SentimentResult, SentimentScore
from ..utils.constants import DEFAULT_LEXICON, SentimentLexicon
from ..utils.rate_limiter import MinIntervalScheduler


def score_text(corpus: str, lexicon: SentimentLexicon = DEFAULT_LEXICON) -> SentimentScore:
    """Tally lexicon hits in ``corpus``.

    Matching is case-insensitive substring matching and each keyword counts at
    most once no matter how often it appears. The score is
    ``(pos - neg) / (pos + neg)``, or exactly 0 when nothing matched.
    """
    text = corpus.lower()
    positive = sum(1 for keyword in lexicon.positive if keyword.lower() in text)
    negative = sum(1 for keyword in lexicon.negative if keyword.lower() in text)

    total = positive + negative
    score = 0.0 if total == 0 else (positive - negative) / total

    if positive > negative:
        label = SentimentLabel.POSITIVE
    elif negative > positive:
        label = SentimentLabel.NEGATIVE
    else:
        label = SentimentLabel.NEUTRAL

    return SentimentScore(
        positive_count=positive,
        negative_count=negative,
        sentiment_score=score,
        sentiment_label=label,
    )


def extract_player_mentions(text: str, player_names: Iterable[str]) -> List[str]:
    """Names whose full name or last name appears in ``text``, deduplicated."""
    lower_text = text.lower()
    mentions: List[str] = []
    for name in player_names:
        lower_name = name.lower().strip()
        if not lower_name:
            continue
        last_name = lower_name.split()[-1]
        if (lower_name in lower_text or last_name in lower_text) and name not in mentions:
            mentions.append(name)
    return mentions


class SentimentSource:
    """Keyword sentiment over forum search results.

    Every Reddit request goes through ``scheduler`` so that lookups stay
    sequential and spaced out.
    """

    def __init__(
        self,
        client: RedditClient,
        scheduler: MinIntervalScheduler,
        lexicon: SentimentLexicon = DEFAULT_LEXICON,
        search_limit: int = 15,
        comment_posts: int = 5,
        comment_limit: int = 30,
        include_comments: bool = True,
    ):
        self.client = client
        self.scheduler = scheduler
        self.lexicon = lexicon
        self.search_limit = search_limit
        self.comment_posts = comment_posts
        self.comment_limit = comment_limit
        self.include_comments = include_comments

    async def analyze_player(self, query: str) -> SentimentResult:
        """Search for ``query`` and score everything found.

        Raises:
            RedditAPIError: The search itself failed. Failing comment threads
                are skipped.
        """
        logger.info(f"Analyzing forum sentiment for {query}")
        posts = await self.scheduler.run(self.client.search, query, limit=self.search_limit)

        comments: List[Dict[str, Any]] = []
        if self.include_comments:
            for post in posts[: self.comment_posts]:
                if not post.get("id"):
                    continue
                try:
                    comments.extend(
                        await self.scheduler.run(
                            self.client.get_post_comments, post["id"], limit=self.comment_limit
                        )
                    )
                except UpstreamAPIError as e:
                    logger.warning(f"Error fetching comments for post {post['id']}: {e}")

        corpus = " ".join(
            [f"{p.get('title', '')} {p.get('selftext', '')}" for p in posts]
            + [c.get("body", "") for c in comments]
        )
        sentiment = score_text(corpus, self.lexicon)

        result = SentimentResult(
            query=query,
            posts_found=len(posts),
            comment_count=len(comments),
            total_score=sum(p.get("score", 0) for p in posts),
            total_comments=sum(p.get("num_comments", 0) for p in posts),
            top_discussions=[
                Discussion(title=p.get("title", ""), score=p.get("score", 0), url=p.get("url"))
                for p in posts[:3]
            ],
            recent_posts=[
                Discussion(title=p.get("title", ""), score=p.get("score", 0), url=p.get("url"))
                for p in posts[:5]
            ],
            **sentiment.model_dump(),
        )
        logger.debug(
            f"Sentiment for {query}: {result.sentiment_label.value} "
            f"({result.positive_count}+/{result.negative_count}-, {len(posts)} posts)"
        )
        return result

    async def lookup(self, query: str) -> Optional[SentimentResult]:
        """``analyze_player`` that degrades to None when Reddit is unavailable."""
        try:
            return await self.analyze_player(query)
        except UpstreamAPIError as e:
            logger.warning(f"Sentiment lookup failed for {query}: {e}")
            return None

    async def trending_topics(self, limit: int = 50) -> Dict[str, Any]:
        """Summary of the subreddit's hot posts."""
        hot_posts = await self.scheduler.run(self.client.get_hot_posts, limit=limit)
        return {
            "hot_posts": hot_posts[:10],
            "total_discussions": len(hot_posts),
            "top_by_score": sorted(hot_posts, key=lambda p: p["score"], reverse=True)[:5],
            "top_by_comments": sorted(hot_posts, key=lambda p: p["num_comments"], reverse=True)[:5],
        }

    async def wdis_threads(self) -> List[Dict[str, Any]]:
        return await self.scheduler.run(self.client.get_wdis_threads)
