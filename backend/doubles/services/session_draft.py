"""
Session Draft — lay out a generated schedule as session game records

Mirrors what the session-creation workflow stores for each game:
- Players on court get team 1/2 and positions 0-3 in team order
- Resting players get team 0 and positions 4.. in roster order
- Every game starts "scheduled" with no winner and no scores

Nothing is persisted here; callers own storage.
"""

from datetime import date
from typing import List, Sequence

from doubles.models.game import ScheduledGame
from doubles.models.player import Player
from doubles.models.session import (
    RESTING_TEAM,
    SessionDraft,
    SessionGameDraft,
    SessionGamePlayer,
)
from doubles.services.match_scheduler import generate_matches


def _row(player: Player, team: int, position: int) -> SessionGamePlayer:
    return SessionGamePlayer(
        user_id=player.user_id,
        player_name=player.name,
        team=team,
        position=position,
    )


def game_to_draft(game: ScheduledGame) -> SessionGameDraft:
    """Flatten one scheduled game into per-player session rows."""
    rows: List[SessionGamePlayer] = [
        _row(game.team1[0], 1, 0),
        _row(game.team1[1], 1, 1),
        _row(game.team2[0], 2, 2),
        _row(game.team2[1], 2, 3),
    ]
    for offset, player in enumerate(game.resting_players):
        rows.append(_row(player, RESTING_TEAM, 4 + offset))

    return SessionGameDraft(game_number=game.game_number, players=rows)


def build_session_draft(name: str, session_date: date, players: Sequence[Player]) -> SessionDraft:
    """
    Generate the schedule for a roster and wrap it as an unsaved session.

    Raises:
        ValueError: name is blank
        InsufficientPlayersError: fewer than 4 players
        DuplicatePlayerError: repeated player id
    """
    if not name or not name.strip():
        raise ValueError("Session name is required")

    games = generate_matches(players)

    return SessionDraft(
        name=name.strip(),
        date=session_date,
        player_count=len(players),
        games=[game_to_draft(g) for g in games],
    )
