"""
Schedule statistics for quick fairness auditing.

A "round" is 3 consecutive games, one per team split of a 4-player group.
It is a display grouping only; the scheduler does not enforce it.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Sequence

from doubles.models.game import ScheduledGame
from doubles.models.player import Player

GAMES_PER_ROUND = 3


@dataclass
class MatchingStats:
    total_games: int
    total_rounds: int
    players_count: int
    games_per_player: float  # mean over the roster
    rests_per_player: float  # mean over the roster


def count_games_per_player(players: Sequence[Player], games: Sequence[ScheduledGame]) -> Dict[str, int]:
    """Games played per player id; every roster player is present, even at 0."""
    counts = {p.id: 0 for p in players}
    for game in games:
        for p in game.playing_players:
            counts[p.id] = counts.get(p.id, 0) + 1
    return counts


def count_rests_per_player(players: Sequence[Player], games: Sequence[ScheduledGame]) -> Dict[str, int]:
    """Games sat out per player id; every roster player is present, even at 0."""
    counts = {p.id: 0 for p in players}
    for game in games:
        for p in game.resting_players:
            counts[p.id] = counts.get(p.id, 0) + 1
    return counts


def rest_spread(players: Sequence[Player], games: Sequence[ScheduledGame]) -> int:
    """Max minus min rest count across the roster (0 for an empty roster)."""
    rests = list(count_rests_per_player(players, games).values())
    if not rests:
        return 0
    return max(rests) - min(rests)


def _mean(values: List[int], divisor: int) -> float:
    if divisor == 0:
        return 0.0
    return sum(values) / divisor


def get_matching_stats(players: Sequence[Player], games: Sequence[ScheduledGame]) -> MatchingStats:
    """Summarise a schedule: totals plus per-player average games and rests."""
    player_count = len(players)
    total_games = len(games)

    game_counts = count_games_per_player(players, games)
    rest_counts = count_rests_per_player(players, games)

    return MatchingStats(
        total_games=total_games,
        total_rounds=math.ceil(total_games / GAMES_PER_ROUND),
        players_count=player_count,
        games_per_player=_mean(list(game_counts.values()), player_count),
        rests_per_player=_mean(list(rest_counts.values()), player_count),
    )
