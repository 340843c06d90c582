from doubles.models.game import ScheduledGame
from doubles.models.player import Player
from doubles.models.session import RESTING_TEAM, SessionDraft, SessionGameDraft, SessionGamePlayer

__all__ = [
    "Player",
    "ScheduledGame",
    "SessionDraft",
    "SessionGameDraft",
    "SessionGamePlayer",
    "RESTING_TEAM",
]
