"""Roster depth per position against a target table."""

from typing import Dict, Iterable, List, Mapping, Optional

from ..models.player import Player, Position
from ..models.roster import PositionNeed, PositionPlayer
from ..utils.constants import DEFAULT_POSITION_THRESHOLDS


def analyze_roster_by_position(
    player_ids: Iterable[str],
    directory: Mapping[str, Player],
    thresholds: Optional[Mapping[str, int]] = None,
) -> Dict[Position, PositionNeed]:
    """Group rostered players into the six fantasy buckets and flag needs.

    Players missing from the directory or without a fantasy position are
    dropped silently. ``need`` is ``count < threshold``. Nothing is remembered
    between calls.
    """
    thresholds = DEFAULT_POSITION_THRESHOLDS if thresholds is None else thresholds
    buckets: Dict[Position, List[PositionPlayer]] = {position: [] for position in Position}

    for player_id in player_ids:
        player = directory.get(player_id)
        if player is None or player.position is None:
            continue
        buckets[player.position].append(
            PositionPlayer(
                id=player_id,
                name=player.full_name,
                team=player.team,
                status=player.status_label,
            )
        )

    analysis: Dict[Position, PositionNeed] = {}
    for position, players in buckets.items():
        threshold = thresholds.get(position.value, 0)
        analysis[position] = PositionNeed(
            position=position,
            count=len(players),
            threshold=threshold,
            need=len(players) < threshold,
            players=players,
        )
    return analysis


def position_has_need(analysis: Mapping[Position, PositionNeed], position: Optional[Position]) -> bool:
    if position is None:
        return False
    entry = analysis.get(position)
    return bool(entry and entry.need)
