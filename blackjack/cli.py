"""Command-line entry point: seat the players and play rounds."""

from __future__ import annotations

import argparse
import os
import random
import re
import subprocess
import sys

from blackjack.game import BlackjackGame, GameOver
from blackjack.player import AIPlayer, Player
from blackjack.statistics import save_stats_to_csv

STARTING_BALANCE = 1000
STATS_FILE = "player_stats.csv"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="blackjack", description="Play blackjack.")
    parser.add_argument(
        "--stats-file", default=STATS_FILE, help="where to save the players' results"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for shuffling")
    parser.add_argument(
        "--quick", action="store_true", help="skip pauses and screen clearing"
    )
    return parser.parse_args(argv)


def _read_count(prompt: str) -> int:
    while True:
        match = _LEADING_INT.match(input(prompt))
        if match and int(match.group(1)) >= 0:
            return int(match.group(1))
        print("Invalid input. Please enter a non-negative number.")


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    if os.name == "nt":
        subprocess.run("chcp 65001 > nul", shell=True, check=False)

    options = {}
    if args.quick:
        options = {"sleep": lambda _seconds: None, "clear_screen": lambda: None}
    game = BlackjackGame(rng=random.Random(args.seed), **options)

    try:
        humans = _read_count("Enter number of human players: ")
        for number in range(1, humans + 1):
            name = input(f"Enter name for player {number}: ")
            game.add_player(Player(name, STARTING_BALANCE))

        computers = _read_count("Enter number of AI players: ")
        for number in range(1, computers + 1):
            game.add_player(AIPlayer(f"AI_Player_{number}", STARTING_BALANCE))

        while True:
            game.play_round()
            print(game.statistics_table(), end="")
            if not game.ask_replay():
                break
    except GameOver as over:
        print(over)
        return 0
    except (EOFError, KeyboardInterrupt):
        print()
        return 1

    try:
        save_stats_to_csv(game.players, args.stats_file)
    except OSError:
        print(f"Failed to open file: {args.stats_file}", file=sys.stderr)
    print("Thanks for playing!")
    return 0


if __name__ == "__main__":
    sys.exit(main())