"""One table of blackjack: betting, dealing, turns and settling hands."""

from __future__ import annotations

import os
import random
import re
import subprocess
import sys
import time
from typing import Callable, TextIO

from blackjack.cards import BLACKJACK, Dealer, Deck
from blackjack.player import InsufficientBalanceError, Move, Player

AI_MIN_BET = 50
AI_BET_SPREAD = 151
TURN_DELAY = 8.0
DOUBLE_DOWN_DELAY = 3.0
TABLE_WIDTH = 74

_WHOLE_NUMBER = re.compile(r"[+-]?\d+")


class GameOver(Exception):
    """No player at the table has any money left."""


def _clear_terminal() -> None:
    command = "cls" if os.name == "nt" else "clear"
    try:
        subprocess.run(command, shell=True, check=False)
    except OSError:
        pass


def _first_char(answer: str) -> str:
    return answer.strip()[:1]


class BlackjackGame:
    """A dealer, a shoe and the players sitting at the table."""

    def __init__(
        self,
        deck: Deck | None = None,
        *,
        rng: random.Random | None = None,
        ask: Callable[[str], str] = input,
        out: TextIO | None = None,
        sleep: Callable[[float], object] = time.sleep,
        clear_screen: Callable[[], object] = _clear_terminal,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.deck = deck if deck is not None else Deck(self._rng)
        self.dealer = Dealer()
        self.players: list[Player] = []
        self._ask = ask
        self._out = out
        self._sleep = sleep
        self._clear_screen = clear_screen

    def _say(self, text: str) -> None:
        (self._out if self._out is not None else sys.stdout).write(text)

    def add_player(self, player: Player) -> None:
        self.players.append(player)

    def _remove_broke_players(self) -> None:
        self.players = [player for player in self.players if player.balance > 0]

    def _place_bets(self) -> None:
        for player in self.players:
            if player.is_ai:
                bet = AI_MIN_BET + self._rng.randrange(AI_BET_SPREAD)
                player.place_bet(bet)
                self._say(f"{player.name} (AI) bets ${bet}\n")
                continue
            while True:
                text = self._ask(
                    f"\n{player.name}'s Balance: ${player.balance:g}. Enter bet: "
                ).strip(" \t")
                if _WHOLE_NUMBER.fullmatch(text) and int(text) > 0:
                    try:
                        player.place_bet(int(text))
                    except InsufficientBalanceError:
                        self._say("Insufficient balance. ")
                    else:
                        break
                else:
                    self._say("Invalid input. Please enter a positive whole number.\n")

    def _deal_opening_cards(self) -> None:
        for _ in range(2):
            for player in self.players:
                player.add_card(0, self.deck.deal_card())
            self.dealer.hand.add_card(self.deck.deal_card())

    def _offer_insurance(self) -> None:
        up_card = self.dealer.hand.cards[1]
        if "".join(up_card.rank.split()).upper() != "A":
            return
        for player in self.players:
            if player.is_ai:
                continue
            answer = self._ask(f"{player.name}, want insurance? (y/n): ")
            if _first_char(answer) == "y":
                player.insure(player.balance / 10)

    def _play_hand(self, player: Player, idx: int) -> None:
        up_card = self.dealer.hand.cards[1]
        first_move = True
        while True:
            hand = player.hands[idx]
            self._say(f"\nHand {idx + 1}:\n")
            self._say(hand.render())

            if hand.is_bust():
                self._say("Busted!\n")
                return
            if hand.total() == BLACKJACK:
                self._say("Blackjack! You stand automatically.\n")
                return

            move = player.choose_move(hand, up_card)
            if player.is_ai and move == Move.DOUBLE_DOWN and not first_move:
                # The strategy may ask to double after a hit; the computer
                # player then keeps drawing instead of asking again forever.
                move = Move.HIT

            if move == Move.HIT:
                player.add_card(idx, self.deck.deal_card())
                first_move = False
            elif move == Move.STAND:
                return
            elif move == Move.DOUBLE_DOWN and first_move:
                player.double_down(idx, self.deck.deal_card())
                self._say("You chose to Double Down!\n")
                self._say("Your updated hand:\n")
                self._say(player.hands[idx].render())
                self._sleep(DOUBLE_DOWN_DELAY)
                return
            elif move == Move.SURRENDER and first_move:
                player.surrender(idx)
                self._say("You surrendered.\n")
                return
            else:
                self._say("Invalid option or not allowed after first move.\n")

    def _play_turn(self, player: Player) -> None:
        if not player.is_ai:
            self._ask(f"\n[Private] {player.name}, press Enter to begin your turn...")
            self._clear_screen()

        self._say(f"\n-- {player.name}'s Turn --\n")
        for idx in range(len(player.hands)):
            self._play_hand(player, idx)

        if not player.is_ai:
            self._say(
                f"\nTurn complete. Switching to next player in {TURN_DELAY:g} seconds..."
            )
            self._sleep(TURN_DELAY)
            self._clear_screen()

    def _settle(self) -> None:
        dealer_hand = self.dealer.hand
        dealer_total = dealer_hand.total()
        for player in self.players:
            for idx, hand in enumerate(player.hands):
                heading = f"\n{player.name}'s Result for Hand {idx + 1}: "
                if player.get_bet(idx) == 0:
                    self._say(heading + "You surrendered.\n")
                    continue
                total = hand.total()
                if hand.is_bust():
                    self._say(heading + "You busted.\n")
                    player.lose_bet(idx)
                elif dealer_hand.is_bust() or total > dealer_total:
                    self._say(heading + "You win!\n")
                    player.win_bet(idx)
                elif total < dealer_total:
                    self._say(heading + "You lose.\n")
                    player.lose_bet(idx)
                else:
                    self._say(heading + "Push.\n")
                    player.push_bet(idx)

    def play_round(self) -> None:
        """Play one full round; GameOver if nobody has money left."""
        self.dealer.reset_hand()
        self._remove_broke_players()
        if not self.players:
            raise GameOver("All players are out of money. Game over.")

        self.deck.shuffle()
        for player in self.players:
            player.reset_hands()

        self._place_bets()
        self._deal_opening_cards()

        self._say("\nDealer's Hand:\n")
        self._say(self.dealer.hand.render(hide_first_card=True))

        self._offer_insurance()

        if self.dealer.hand.total() == BLACKJACK:
            self._say("\nDealer has Blackjack!\n")
            for player in self.players:
                player.win_insurance()
            return

        for player in self.players:
            self._play_turn(player)

        self.dealer.play(self.deck)
        self._say("\nDealer's Hand:\n")
        self._say(self.dealer.hand.render())
        self._settle()

    def ask_replay(self) -> bool:
        answer = self._ask("\nPlay another round? (y/n): ")
        return _first_char(answer) in ("y", "Y")

    def statistics_table(self) -> str:
        """A table of every player's results so far."""
        rule = "-" * TABLE_WIDTH + "\n"
        lines = [
            "\n=== Game Statistics ===\n",
            f"{'Name':<12}{'Wins':<8}{'Losses':<8}{'Pushes':<8}"
            f"{'Total Earnings':<18}{'Balance':<10}{'Win Rate':<10}\n",
            rule,
        ]
        for player in self.players:
            games = player.wins + player.losses + player.pushes
            win_rate = 100.0 * player.wins / games if games else 0.0
            sign = "+" if player.total_earnings >= 0 else ""
            earnings = f"{sign}{int(player.total_earnings)}"
            lines.append(
                f"{player.name:<12}{player.wins:<8}{player.losses:<8}{player.pushes:<8}"
                f"{earnings:<18}${player.balance:<9.2f}{win_rate:.1f}%\n"
            )
        lines.append(rule)
        return "".join(lines)