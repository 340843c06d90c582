"""
Doubles Match Scheduler — rest-balanced 2v2 rotation

Given a roster of N players (N >= 4), schedules every 4-player group in each of
its 3 team splits exactly once, choosing the order so rest is spread evenly.

Selection order for the next game (strict priority):
1. Avoid resting anyone who rested in the immediately preceding game
2. Lowest sum of rest counts among the resting players
3. Lowest "most recent rest" among the resting players (longest ago wins)
4. Enumeration order (first enumerated task wins)

Non-goals:
- Persistence, availability changes, skill seeding, re-scheduling
- Any randomness
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import FrozenSet, List, Sequence, Tuple, TypeVar

from doubles.models.game import ScheduledGame
from doubles.models.player import Player

T = TypeVar("T")

MIN_PLAYERS = 4
SPLITS_PER_GROUP = 3

# "Never rested"; must never equal the index of a preceding game
NEVER_RESTED = -999


class MatchSchedulerError(Exception):
    """Base exception for match scheduling errors"""

    pass


class InsufficientPlayersError(MatchSchedulerError):
    """Roster is too small to form a doubles game"""

    def __init__(self, player_count: int):
        self.player_count = player_count
        super().__init__(f"At least {MIN_PLAYERS} players are required (got {player_count})")


class DuplicatePlayerError(MatchSchedulerError):
    """Roster contains the same player id more than once"""

    def __init__(self, player_id: str):
        self.player_id = player_id
        super().__init__(f"Duplicate player id in roster: {player_id}")


# ============================================================================
# Enumeration
# ============================================================================


def generate_team_splits(four_players: Sequence[T]) -> List[Tuple[Tuple[T, T], Tuple[T, T]]]:
    """
    Return the 3 ways to split 4 players into two teams of 2.

    For [A, B, C, D]:
      1. [A, B] vs [C, D]
      2. [A, C] vs [B, D]
      3. [A, D] vs [B, C]
    """
    assert len(four_players) == 4, f"Team splits need exactly 4 players, got {len(four_players)}"
    p0, p1, p2, p3 = four_players
    return [
        ((p0, p1), (p2, p3)),
        ((p0, p2), (p1, p3)),
        ((p0, p3), (p1, p2)),
    ]


# ============================================================================
# Rest tracking
# ============================================================================


@dataclass
class _Group:
    """A 4-player group and its not-yet-scheduled splits, in player indices.

    All splits of a group share one resting set, so they share every
    selection criterion except enumeration order. Groups are enumerated in
    order and their splits are kept in split order, so the first remaining
    split of the best group is the first enumerated best task.
    """

    order: int
    members: FrozenSet[int]
    resting: Tuple[int, ...]
    splits: List[Tuple[Tuple[int, int], Tuple[int, int]]]


class _RestTracker:
    """Per-player rest counters for one scheduling run, keyed by roster index."""

    def __init__(self, player_count: int):
        self.rest_counts: List[int] = [0] * player_count
        self.last_rest_game_index: List[int] = [NEVER_RESTED] * player_count
        self.total_rests = 0
        self.last_resting: FrozenSet[int] = frozenset()
        # Players by most recent rest first; recomputed after each game
        self.by_recency: List[int] = list(range(player_count))

    def selection_key(self, group: _Group) -> Tuple[bool, int, int, int]:
        """
        Sort key for a candidate group; the smallest key is scheduled next.

        Resting players are the complement of the group's 4 members, so:
        - someone rested last game unless the group holds every last-game rester
        - resting rest total is the overall total minus the members' counts
        - the latest rest is that of the most recent rester outside the group
        """
        rested_last_game = not self.last_resting <= group.members
        rest_total = self.total_rests - sum(self.rest_counts[i] for i in group.members)
        latest_rest = next(
            self.last_rest_game_index[i] for i in self.by_recency if i not in group.members
        )
        return (rested_last_game, rest_total, latest_rest, group.order)

    def record_rest(self, resting: Sequence[int], game_index: int) -> None:
        for i in resting:
            self.rest_counts[i] += 1
            self.last_rest_game_index[i] = game_index
        self.total_rests += len(resting)
        self.last_resting = frozenset(resting)
        self.by_recency.sort(key=lambda i: self.last_rest_game_index[i], reverse=True)


def _build_groups(player_count: int) -> List[_Group]:
    indices = range(player_count)
    groups: List[_Group] = []
    for group in itertools.combinations(indices, 4):
        members = frozenset(group)
        groups.append(_Group(
            order=len(groups),
            members=members,
            resting=tuple(i for i in indices if i not in members),
            splits=generate_team_splits(group),
        ))
    return groups


# ============================================================================
# Scheduler
# ============================================================================


def _validate_roster(players: Sequence[Player]) -> None:
    if len(players) < MIN_PLAYERS:
        raise InsufficientPlayersError(len(players))
    seen = set()
    for p in players:
        if p.id in seen:
            raise DuplicatePlayerError(p.id)
        seen.add(p.id)


def expected_game_count(player_count: int) -> int:
    """C(N, 4) * 3, the number of games a full rotation produces."""
    if player_count < MIN_PLAYERS:
        return 0
    groups = player_count * (player_count - 1) * (player_count - 2) * (player_count - 3) // 24
    return groups * SPLITS_PER_GROUP


def generate_matches(players: Sequence[Player]) -> List[ScheduledGame]:
    """
    Build the full rest-balanced doubles rotation for a roster.

    Args:
        players: Roster in display order (ids must be unique)

    Returns:
        Games numbered 1..C(N,4)*3 covering every group and team split once

    Raises:
        InsufficientPlayersError: Fewer than 4 players
        DuplicatePlayerError: A player id appears more than once
    """
    _validate_roster(players)
    roster = list(players)

    if len(roster) == MIN_PLAYERS:
        return [
            ScheduledGame(game_number=n, team1=team1, team2=team2, resting_players=())
            for n, (team1, team2) in enumerate(generate_team_splits(roster), start=1)
        ]

    pending = _build_groups(len(roster))
    tracker = _RestTracker(len(roster))
    games: List[ScheduledGame] = []

    while pending:
        game_index = len(games)
        best = min(pending, key=tracker.selection_key)
        team1, team2 = best.splits.pop(0)
        if not best.splits:
            pending.remove(best)

        games.append(ScheduledGame(
            game_number=game_index + 1,
            team1=(roster[team1[0]], roster[team1[1]]),
            team2=(roster[team2[0]], roster[team2[1]]),
            resting_players=tuple(roster[i] for i in best.resting),
        ))
        tracker.record_rest(best.resting, game_index)

    return games
