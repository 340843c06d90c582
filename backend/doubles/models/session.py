from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

# Team number recorded for players sitting out a game
RESTING_TEAM = 0


@dataclass
class SessionGamePlayer:
    user_id: Optional[str]
    player_name: str
    team: int  # 1, 2, or RESTING_TEAM
    position: int  # 0-3 on court, 4.. resting
    score: Optional[int] = None


@dataclass
class SessionGameDraft:
    game_number: int
    players: List[SessionGamePlayer]
    status: str = "scheduled"
    winner: Optional[int] = None


@dataclass
class SessionDraft:
    """Unsaved match session, laid out the way the session store expects it."""

    name: str
    date: date
    player_count: int
    games: List[SessionGameDraft] = field(default_factory=list)

    @property
    def game_count(self) -> int:
        return len(self.games)
