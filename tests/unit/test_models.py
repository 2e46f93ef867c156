"""Unit tests for ff_advisor/models."""

import pytest
from pydantic import ValidationError

from ff_advisor.models.player import InjuryStatus, Player, Position
from ff_advisor.models.roster import Roster
from ff_advisor.models.sentiment import SentimentScore


class TestPlayer:
    """Test Player normalisation and helpers."""

    def test_position_normalised(self):
        """Test lower-case positions are accepted and unknown ones dropped."""
        assert Player(player_id="1", position="wr").position == Position.WR
        assert Player(player_id="2", position="OT").position is None
        assert Player(player_id="3").position is None

    def test_missing_injury_is_active(self):
        """Test null and empty injury designations mean healthy."""
        assert Player(player_id="1", injury_status=None).injury_status == InjuryStatus.ACTIVE
        assert Player(player_id="2", injury_status="").is_healthy

    def test_unknown_injury_kept_verbatim(self):
        """Test designations outside the enum survive unchanged."""
        player = Player(player_id="1", injury_status="Sus")
        assert player.injury_status == "Sus"
        assert player.status_label == "Sus"
        assert not player.is_healthy
        assert not player.is_unavailable

    @pytest.mark.parametrize("status", ["Out", "IR"])
    def test_unavailable(self, status):
        """Test Out and IR are unavailable."""
        assert Player(player_id="1", injury_status=status).is_unavailable

    def test_questionable_is_not_unavailable(self):
        player = Player(player_id="1", injury_status="Questionable")
        assert player.injury_status == InjuryStatus.QUESTIONABLE
        assert not player.is_unavailable
        assert not player.is_healthy

    def test_display_name(self):
        """Test display name with and without a team."""
        player = Player(player_id="1", first_name="Josh", last_name="Allen", position="QB", team="BUF")
        assert player.display_name() == "Josh Allen (QB - BUF)"
        free_agent = Player(player_id="2", first_name="No", last_name="Team")
        assert free_agent.display_name() == "No Team (N/A - FA)"

    def test_frozen(self):
        """Test players cannot be mutated."""
        player = Player(player_id="1")
        with pytest.raises(ValidationError):
            player.team = "KC"

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            Player(player_id="")


class TestRoster:
    """Test roster helpers."""

    def test_bench_keeps_roster_order(self, roster):
        """Test bench is players minus starters."""
        assert roster.bench == ["wr2", "wr3", "ir1"]

    def test_has_player(self, roster):
        assert roster.has_player("qb1")
        assert not roster.has_player("fa_rb")

    def test_empty_defaults(self):
        roster = Roster()
        assert roster.players == []
        assert roster.bench == []


class TestSentimentScore:
    """Test sentiment bounds."""

    def test_score_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            SentimentScore(sentiment_score=1.5)
