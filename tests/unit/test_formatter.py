"""Unit tests for ff_advisor/report/formatter.py."""

from datetime import datetime

import pytest

from ff_advisor.agents.scoring_pipeline import ScoringPipeline
from ff_advisor.models.recommendation import Recommendation
from ff_advisor.models.report import AnalysisReport, RosterBreakdown
from ff_advisor.models.roster import LeagueInfo, TrendingSignal
from ff_advisor.models.sentiment import SentimentLabel, SentimentResult
from ff_advisor.report.formatter import ReportFormatter, priority_label


@pytest.fixture
def report(roster, directory, trending_adds):
    pipeline = ScoringPipeline()
    drops = [TrendingSignal(player_id="wr3", count=150)]
    return AnalysisReport(
        league_info=LeagueInfo(league_id="42", name="Degens & Friends", scoring=0.5),
        roster=RosterBreakdown(),
        position_analysis=pipeline.analyze_positions(roster, directory),
        waiver_recommendations=pipeline.recommend_waivers(roster, directory, trending_adds),
        drop_candidates=pipeline.find_drop_candidates(roster, directory, drops),
        sit_start_recommendations=pipeline.find_sit_start_alerts(roster, directory),
        timestamp=datetime(2024, 10, 9, 8, 30),
    )


@pytest.fixture
def empty_report(roster, directory):
    return AnalysisReport(
        league_info=LeagueInfo(),
        roster=RosterBreakdown(),
        position_analysis=ScoringPipeline().analyze_positions(roster, directory),
        timestamp=datetime(2024, 10, 9, 8, 30),
    )


class TestPriorityLabel:
    """Test priority buckets."""

    @pytest.mark.parametrize(
        "score, label",
        [(80, "HIGH"), (70.1, "HIGH"), (70, "MEDIUM"), (41, "MEDIUM"), (40, "LOW"), (0, "LOW")],
    )
    def test_buckets(self, score, label):
        assert priority_label(score) == label


class TestRenderHtml:
    """Test the HTML email body."""

    def test_sections(self, report):
        html = ReportFormatter().render_html(report)

        assert "<h2>Top Waiver Wire Pickups</h2>" in html
        assert "<h2>Drop Candidates</h2>" in html
        assert "<h2>Sit/Start Recommendations</h2>" in html
        assert "<h2>Position Summary</h2>" in html
        assert "Degens &amp; Friends" in html
        assert "0.5 PPR" in html
        assert "2024-10-09 08:30" in html

    def test_waiver_rows(self, report):
        html = ReportFormatter().render_html(report)
        assert '<tr class="priority-high"><td><strong>Jaylen Wright</strong></td>' in html
        assert "+500 adds" in html
        assert "N/A" in html

    def test_waiver_rows_limited(self, report):
        html = ReportFormatter(waiver_rows=1).render_html(report)
        assert "Jaylen Wright" in html
        assert "Jalen McMillan" not in html

    def test_drops_and_alerts(self, report):
        html = ReportFormatter().render_html(report)
        assert "Heavily dropped league-wide (150 leagues)" in html
        assert "SIT: CeeDee Lamb" in html
        assert "<li>Puka Nacua (LAR) - active</li>" in html

    def test_position_summary(self, report):
        html = ReportFormatter().render_html(report)
        assert "<li>RB: 3 Need depth</li>" in html
        assert "<li>K:" not in html

    def test_empty_sections(self, empty_report):
        html = ReportFormatter().render_html(empty_report)
        assert "No strong waiver recommendations at this time." in html
        assert "No obvious drop candidates on your roster." in html
        assert "Your current lineup looks good! No major concerns." in html
        assert "Unknown League" in html

    def test_sentiment_column(self, empty_report):
        sentiment = SentimentResult(
            query="x", posts_found=6, sentiment_score=0.5, sentiment_label=SentimentLabel.POSITIVE
        )
        report = empty_report.model_copy(
            update={
                "waiver_recommendations": [
                    Recommendation(
                        player_id="1",
                        name="<script>",
                        trending_count=10,
                        sentiment=sentiment,
                        discussion_count=6,
                        priority_score=16.0,
                    )
                ]
            }
        )
        html = ReportFormatter().render_html(report)
        assert '<span class="positive">POSITIVE</span> (6 posts)' in html
        assert "&lt;script&gt;" in html
        assert "<script>" not in html


class TestRenderText:
    """Test the plain-text summary."""

    def test_text(self, report):
        text = ReportFormatter().render_text(report)
        assert text.startswith("League: Degens & Friends (0.5 PPR)")
        assert " 80.0 [HIGH] Jaylen Wright (RB - MIA) +500 adds" in text
        assert "SIT CeeDee Lamb (Injury: Out); start Puka Nacua, Rashee Rice" in text

    def test_empty_text(self, empty_report):
        text = ReportFormatter().render_text(empty_report)
        assert text.count("  none") == 3
