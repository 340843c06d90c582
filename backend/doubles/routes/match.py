"""
API Routes for doubles match scheduling (stateless previews)
"""

import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, model_validator

from doubles.config import MAX_PLAYERS
from doubles.models.game import ScheduledGame
from doubles.models.player import Player
from doubles.models.session import SessionDraft
from doubles.services.match_scheduler import MatchSchedulerError, generate_matches
from doubles.services.schedule_stats import MatchingStats, get_matching_stats
from doubles.services.session_draft import build_session_draft
from doubles.utils.dummy_players import generate_dummy_players

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# Request Models
# ============================================================================


class PlayerInfo(BaseModel):
    id: str
    name: str
    user_id: Optional[str] = None

    @model_validator(mode="after")
    def validate_name(self):
        if not self.name.strip():
            raise ValueError("Player name is required")
        return self

    def to_player(self) -> Player:
        return Player(id=self.id, name=self.name, user_id=self.user_id)


class ScheduleRequest(BaseModel):
    players: List[PlayerInfo]

    @model_validator(mode="after")
    def validate_roster_size(self):
        if len(self.players) > MAX_PLAYERS:
            raise ValueError(f"At most {MAX_PLAYERS} players are supported")
        return self


class SessionDraftRequest(ScheduleRequest):
    name: str
    date: date


# ============================================================================
# Response Models
# ============================================================================


class GameResponse(BaseModel):
    game_number: int
    team1: List[PlayerInfo]
    team2: List[PlayerInfo]
    resting_players: List[PlayerInfo]


class StatsResponse(BaseModel):
    total_games: int
    total_rounds: int
    players_count: int
    games_per_player: float
    rests_per_player: float


class ScheduleResponse(BaseModel):
    games: List[GameResponse]
    stats: StatsResponse


class PreviewResponse(ScheduleResponse):
    players: List[PlayerInfo]


class SessionGamePlayerResponse(BaseModel):
    user_id: Optional[str]
    player_name: str
    team: int
    position: int
    score: Optional[int]


class SessionGameResponse(BaseModel):
    game_number: int
    status: str
    winner: Optional[int]
    players: List[SessionGamePlayerResponse]


class SessionDraftResponse(BaseModel):
    name: str
    date: date
    player_count: int
    game_count: int
    games: List[SessionGameResponse]


# ============================================================================
# Converters
# ============================================================================


def _player_info(p: Player) -> PlayerInfo:
    return PlayerInfo(id=p.id, name=p.name, user_id=p.user_id)


def _game_response(game: ScheduledGame) -> GameResponse:
    return GameResponse(
        game_number=game.game_number,
        team1=[_player_info(p) for p in game.team1],
        team2=[_player_info(p) for p in game.team2],
        resting_players=[_player_info(p) for p in game.resting_players],
    )


def _stats_response(stats: MatchingStats) -> StatsResponse:
    return StatsResponse(
        total_games=stats.total_games,
        total_rounds=stats.total_rounds,
        players_count=stats.players_count,
        games_per_player=stats.games_per_player,
        rests_per_player=stats.rests_per_player,
    )


def _session_draft_response(draft: SessionDraft) -> SessionDraftResponse:
    return SessionDraftResponse(
        name=draft.name,
        date=draft.date,
        player_count=draft.player_count,
        game_count=draft.game_count,
        games=[
            SessionGameResponse(
                game_number=g.game_number,
                status=g.status,
                winner=g.winner,
                players=[
                    SessionGamePlayerResponse(
                        user_id=row.user_id,
                        player_name=row.player_name,
                        team=row.team,
                        position=row.position,
                        score=row.score,
                    )
                    for row in g.players
                ],
            )
            for g in draft.games
        ],
    )


def _schedule(players: List[Player]) -> List[ScheduledGame]:
    try:
        games = generate_matches(players)
    except MatchSchedulerError as e:
        logger.warning(f"Schedule rejected for {len(players)} players: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    logger.info(f"Generated schedule: players={len(players)}, games={len(games)}")
    return games


# ============================================================================
# Endpoints
# ============================================================================


@router.post("/match/schedule", response_model=ScheduleResponse)
def create_schedule(request: ScheduleRequest):
    """
    Generate the rest-balanced doubles rotation for a roster.

    Nothing is stored; the caller persists the returned games if needed.

    Errors:
        400: fewer than 4 players or duplicate player ids
        422: blank player name or more than MAX_PLAYERS players
    """
    players = [p.to_player() for p in request.players]
    games = _schedule(players)
    return ScheduleResponse(
        games=[_game_response(g) for g in games],
        stats=_stats_response(get_matching_stats(players, games)),
    )


@router.get("/match/schedule/preview", response_model=PreviewResponse)
def preview_schedule(
    player_count: int = Query(..., ge=4, le=MAX_PLAYERS, description="Number of placeholder players"),
):
    """Preview the schedule shape for a placeholder roster of player_count players."""
    players = generate_dummy_players(player_count)
    games = _schedule(players)
    return PreviewResponse(
        players=[_player_info(p) for p in players],
        games=[_game_response(g) for g in games],
        stats=_stats_response(get_matching_stats(players, games)),
    )


@router.post("/match/sessions/draft", response_model=SessionDraftResponse)
def create_session_draft(request: SessionDraftRequest):
    """
    Build an unsaved match session: schedule plus per-game player rows.

    Resting players are listed with team 0 after the four players on court.
    """
    players = [p.to_player() for p in request.players]
    try:
        draft = build_session_draft(request.name, request.date, players)
    except (MatchSchedulerError, ValueError) as e:
        logger.warning(f"Session draft rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"Built session draft '{draft.name}': players={draft.player_count}, games={draft.game_count}")
    return _session_draft_response(draft)
