"""
Placeholder rosters for previewing a schedule before real players are known.
"""

from typing import List

from doubles.models.player import Player


def generate_dummy_players(count: int) -> List[Player]:
    """
    Create count placeholder players.

    Ids are dummy-1..dummy-N and names Player 1..Player N; no account is linked.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return [Player(id=f"dummy-{i}", name=f"Player {i}", user_id=None) for i in range(1, count + 1)]
