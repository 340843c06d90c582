"""
Print a doubles rotation and its statistics.

Usage:
    python preview_schedule.py --players 6
    python preview_schedule.py --names Alice Bob Carol Dave Erin
"""

import argparse
import sys

from doubles.config import MAX_PLAYERS
from doubles.models.player import Player
from doubles.services.match_scheduler import MatchSchedulerError, generate_matches
from doubles.services.schedule_stats import count_rests_per_player, get_matching_stats
from doubles.utils.dummy_players import generate_dummy_players


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Preview a rest-balanced doubles rotation.")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--players", "-p", type=int, help="Number of placeholder players")
    group.add_argument("--names", "-n", type=str, nargs="+", help="Player names in roster order")
    parser.add_argument(
        "--max-players",
        type=int,
        default=MAX_PLAYERS,
        help=f"Refuse rosters larger than this (default: {MAX_PLAYERS})",
    )
    return parser.parse_args(argv)


def build_roster(args) -> list:
    if args.names:
        return [Player(id=f"p{i}", name=name) for i, name in enumerate(args.names, 1)]
    return generate_dummy_players(args.players)


def format_game(game) -> str:
    t1 = " / ".join(p.name for p in game.team1)
    t2 = " / ".join(p.name for p in game.team2)
    line = f"#{game.game_number:>3}  {t1}  vs  {t2}"
    if game.resting_players:
        line += "   rest: " + ", ".join(p.name for p in game.resting_players)
    return line


def main(argv=None) -> int:
    args = parse_args(argv)
    players = build_roster(args)

    if len(players) > args.max_players:
        print(f"Error: {len(players)} players exceeds the limit of {args.max_players}")
        return 1

    try:
        games = generate_matches(players)
    except MatchSchedulerError as e:
        print(f"Error: {e}")
        return 1

    for game in games:
        print(format_game(game))

    stats = get_matching_stats(players, games)
    rests = count_rests_per_player(players, games)
    print()
    print(f"Players: {stats.players_count}")
    print(f"Total games: {stats.total_games} ({stats.total_rounds} rounds)")
    print(f"Games per player: {stats.games_per_player:.2f}")
    print(f"Rests per player: {stats.rests_per_player:.2f}")
    for p in players:
        print(f"  {p.name:<20} rests={rests[p.id]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
