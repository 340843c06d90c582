from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from doubles.models.player import Player


@dataclass(frozen=True)
class ScheduledGame:
    game_number: int  # 1-based, gapless
    team1: Tuple[Player, Player]
    team2: Tuple[Player, Player]
    resting_players: Tuple[Player, ...]  # roster order

    @property
    def playing_players(self) -> Tuple[Player, ...]:
        return self.team1 + self.team2
