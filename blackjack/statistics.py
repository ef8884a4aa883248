"""Saving player results to a CSV file."""

from __future__ import annotations

import os
from typing import Iterable

from blackjack.player import Player

CSV_HEADER = "Name,Wins,Losses,Pushes,Total Earnings,Balance\n"


def save_stats_to_csv(players: Iterable[Player], filename: str | os.PathLike) -> None:
    """Write the results of the human players to filename; OSError if it cannot be opened."""
    with open(filename, "w", encoding="utf-8", newline="") as out:
        out.write(CSV_HEADER)
        for player in players:
            if player.is_ai:
                continue
            out.write(
                f"{player.name},{player.wins},{player.losses},{player.pushes},"
                f"{player.total_earnings:g},{player.balance:g}\n"
            )