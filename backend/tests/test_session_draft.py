"""
Tests for building unsaved session drafts from a roster.
"""

from datetime import date

import pytest

from doubles.models.player import Player
from doubles.models.session import RESTING_TEAM
from doubles.services.match_scheduler import InsufficientPlayersError
from doubles.services.session_draft import build_session_draft


def _roster(n: int) -> list[Player]:
    return [Player(id=f"p{i}", name=f"Name {i}", user_id=f"u{i}" if i % 2 else None) for i in range(1, n + 1)]


def test_draft_shape_six_players():
    draft = build_session_draft("Sunday doubles", date(2026, 10, 18), _roster(6))

    assert draft.name == "Sunday doubles"
    assert draft.date == date(2026, 10, 18)
    assert draft.player_count == 6
    assert draft.game_count == 45
    assert [g.game_number for g in draft.games] == list(range(1, 46))


def test_rows_use_team_and_position_layout():
    draft = build_session_draft("Evening", date(2026, 1, 1), _roster(6))
    first = draft.games[0]

    assert [(r.team, r.position) for r in first.players] == [
        (1, 0), (1, 1), (2, 2), (2, 3), (RESTING_TEAM, 4), (RESTING_TEAM, 5),
    ]
    # Game 1 plays the first four players, so the last two rest
    assert [r.player_name for r in first.players] == [f"Name {i}" for i in range(1, 7)]
    assert first.players[0].user_id == "u1"
    assert first.players[1].user_id is None


def test_games_start_unscored():
    draft = build_session_draft("Evening", date(2026, 1, 1), _roster(4))
    for g in draft.games:
        assert g.status == "scheduled"
        assert g.winner is None
        assert len(g.players) == 4
        assert all(r.score is None for r in g.players)


def test_name_is_trimmed():
    draft = build_session_draft("  Club night  ", date(2026, 1, 1), _roster(4))
    assert draft.name == "Club night"


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_name_rejected(name):
    with pytest.raises(ValueError):
        build_session_draft(name, date(2026, 1, 1), _roster(4))


def test_small_roster_rejected():
    with pytest.raises(InsufficientPlayersError):
        build_session_draft("Too few", date(2026, 1, 1), _roster(3))
