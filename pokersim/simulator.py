"""Monte Carlo runs of dealt games, with their statistics stored in SQLite."""

from __future__ import annotations

import argparse
import random
import sqlite3
from collections import Counter
from contextlib import closing
from dataclasses import dataclass

from .calculator import calculate_hand, compare_hands
from .cards import Combination
from .table import Game

DEFAULT_DB_PATH = "simulations.db"
DEFAULT_SIMULATION_SIZE = 1_000_000_000
PROGRESS_INTERVAL = 10_000_000

TWO_PLAYERS_TABLE = "TwoPlayersPreFlop"
THREE_PLAYERS_TABLE = "ThreePlayersPreFlop"
COMBINATIONS_TABLE = "Combinations"

COMBINATION_NAMES = {
    Combination.HIGH_CARD: "High Card",
    Combination.PAIR: "Pair",
    Combination.TWO_PAIR: "Two Pair",
    Combination.THREE_OF_A_KIND: "Three Of A Kind",
    Combination.STRAIGHT: "Straight",
    Combination.FLUSH: "Flush",
    Combination.FULL_HOUSE: "Full House",
    Combination.FOUR_OF_A_KIND: "Four Of A Kind",
    Combination.STRAIGHT_FLUSH: "Straight Flush",
}


@dataclass
class HandStats:
    """How often a starting hand was dealt, won outright and drew."""

    hits: int = 0
    wins: int = 0
    draws: int = 0

    @property
    def win_chance(self) -> float:
        """Wins as a percentage of the deals."""
        return self.wins / self.hits * 100

    @property
    def draw_chance(self) -> float:
        """Draws as a percentage of the deals."""
        return self.draws / self.hits * 100


def _checked_table_name(table_name: str) -> str:
    if not table_name.isidentifier():
        raise ValueError(f"invalid table name: {table_name!r}")
    return table_name


def _played_games(players_count: int, simulation_size: int, rng: random.Random):
    """Yield fully dealt games, reporting progress along the way."""
    for number in range(1, simulation_size + 1):
        game = Game(players_count, rng)
        game.play()
        if number % PROGRESS_INTERVAL == 0:
            print(f"Games: {number}")
        yield game


def simulate_pre_flop(
    players_count: int,
    simulation_size: int,
    db_path: str = DEFAULT_DB_PATH,
    table_name: str = TWO_PLAYERS_TABLE,
    rng: random.Random | None = None,
) -> dict[str, HandStats]:
    """Deal games and record, for each starting hand, its deals, wins and draws."""
    table_name = _checked_table_name(table_name)
    rng = rng if rng is not None else random.Random()
    stats: dict[str, HandStats] = {}

    for game in _played_games(players_count, simulation_size, rng):
        hands = game.hands
        keys = [hand.export() for hand in hands]
        for key in keys:
            stats.setdefault(key, HandStats()).hits += 1

        result = compare_hands(hands, game.river)
        if result.winner is None:
            for key in keys:
                stats[key].draws += 1
        else:
            stats[keys[result.winner]].wins += 1

    with closing(sqlite3.connect(db_path)) as connection, connection:
        connection.execute(
            f"""CREATE TABLE IF NOT EXISTS {table_name} (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                hand TEXT,
                hits INTEGER,
                wins INTEGER,
                draws INTEGER,
                winChance REAL,
                drawChance REAL
            )"""
        )
        connection.executemany(
            f"INSERT INTO {table_name} "
            "(hand, hits, wins, draws, winChance, drawChance) VALUES (?, ?, ?, ?, ?, ?)",
            [
                (key, s.hits, s.wins, s.draws, s.win_chance, s.draw_chance)
                for key, s in stats.items()
            ],
        )

    return stats


def simulate_pre_flop_stand_off(
    simulation_size: int,
    db_path: str = DEFAULT_DB_PATH,
    rng: random.Random | None = None,
) -> dict[str, HandStats]:
    """Starting-hand statistics for heads-up games."""
    return simulate_pre_flop(2, simulation_size, db_path, TWO_PLAYERS_TABLE, rng)


def simulate_pre_flop_three_players(
    simulation_size: int,
    db_path: str = DEFAULT_DB_PATH,
    rng: random.Random | None = None,
) -> dict[str, HandStats]:
    """Starting-hand statistics for three-player games."""
    return simulate_pre_flop(3, simulation_size, db_path, THREE_PLAYERS_TABLE, rng)


def simulate_combination_chance(
    simulation_size: int,
    db_path: str = DEFAULT_DB_PATH,
    rng: random.Random | None = None,
) -> dict[Combination, int]:
    """Count how often each combination is the best of a single dealt hand."""
    rng = rng if rng is not None else random.Random()
    counts: Counter[Combination] = Counter()

    for game in _played_games(1, simulation_size, rng):
        counts[calculate_hand(game.hands[0], game.river).combination] += 1

    rows = []
    for key in range(len(counts)):
        combination = Combination(key)
        hits = counts.get(combination, 0)
        rows.append(
            (COMBINATION_NAMES[combination], hits, hits / simulation_size * 100)
        )

    with closing(sqlite3.connect(db_path)) as connection, connection:
        connection.execute(
            f"""CREATE TABLE IF NOT EXISTS {COMBINATIONS_TABLE} (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                hand TEXT,
                hits INTEGER,
                chance REAL
            )"""
        )
        connection.executemany(
            f"INSERT INTO {COMBINATIONS_TABLE} (hand, hits, chance) VALUES (?, ?, ?)",
            rows,
        )

    return dict(counts)


def main(argv: list[str] | None = None) -> int:
    """Run a simulation from the command line."""
    parser = argparse.ArgumentParser(
        prog="pokersim", description="Simulate poker deals and store the statistics."
    )
    parser.add_argument(
        "--mode",
        choices=("two", "three", "combinations"),
        default="three",
        help="which simulation to run (default: three)",
    )
    parser.add_argument(
        "--games",
        type=int,
        default=DEFAULT_SIMULATION_SIZE,
        help="number of games to deal",
    )
    parser.add_argument("--db", default=DEFAULT_DB_PATH, help="SQLite database file")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    if args.mode == "two":
        simulate_pre_flop_stand_off(args.games, args.db, rng)
    elif args.mode == "three":
        simulate_pre_flop_three_players(args.games, args.db, rng)
    else:
        simulate_combination_chance(args.games, args.db, rng)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())