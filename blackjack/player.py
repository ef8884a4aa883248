"""Human and computer players: money, bets, hands and results."""

from __future__ import annotations

import re
from enum import IntEnum
from typing import Callable

from blackjack.cards import Card, Hand

MOVE_PROMPT = "1) Hit  2) Stand  3) Double Down  4) Surrender\nChoice: "
AI_MAX_BET = 100.0

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class InsufficientBalanceError(ValueError):
    """A bet asked for more money than the player has."""


class Move(IntEnum):
    HIT = 1
    STAND = 2
    DOUBLE_DOWN = 3
    SURRENDER = 4


class Player:
    """A player at the table, with one or more hands and a bet on each."""

    is_ai = False

    def __init__(
        self,
        name: str,
        balance: float,
        *,
        ask: Callable[[str], str] = input,
    ) -> None:
        self.name = name
        self.balance = float(balance)
        self.hands: list[Hand] = [Hand()]
        self.bets: list[float] = [0.0]
        self.insurance_bet = 0.0
        self.wins = 0
        self.losses = 0
        self.pushes = 0
        self.total_earnings = 0.0
        self._ask = ask

    def place_bet(self, amount: float) -> None:
        """Stake an amount on the first hand."""
        if amount > self.balance:
            raise InsufficientBalanceError(
                f"{self.name} cannot bet {amount:g} with a balance of {self.balance:g}"
            )
        if not self.bets:
            self.bets.append(0.0)
        self.bets[0] = amount
        self.balance -= amount

    def get_bet(self, idx: int) -> float:
        """The bet on hand idx, or 0 if there is no such hand."""
        if 0 <= idx < len(self.bets):
            return self.bets[idx]
        return 0.0

    def win_bet(self, idx: int) -> None:
        self.balance += self.bets[idx] * 2
        self.record_win(self.bets[idx])

    def lose_bet(self, idx: int) -> None:
        self.record_loss(self.bets[idx])

    def push_bet(self, idx: int) -> None:
        self.balance += self.bets[idx]
        self.record_push()

    def reset_hands(self) -> None:
        self.hands = [Hand()]
        self.bets = [0.0]
        self.insurance_bet = 0.0

    def add_card(self, idx: int, card: Card) -> None:
        self.hands[idx].add_card(card)

    def split_hand(self) -> bool:
        """Split a pair in the first hand into two hands; report whether it happened."""
        if not self.hands[0].is_splittable() or self.balance < self.bets[0]:
            return False
        new_hand = Hand()
        new_hand.add_card(self.hands[0].remove_card())
        self.hands.append(new_hand)
        self.bets.append(self.bets[0])
        self.balance -= self.bets[0]
        return True

    def double_down(self, idx: int, card: Card) -> None:
        """Double the bet on a hand and take exactly one card, if affordable."""
        if self.balance >= self.bets[idx]:
            self.balance -= self.bets[idx]
            self.bets[idx] *= 2
            self.hands[idx].add_card(card)

    def insure(self, amount: float) -> None:
        if amount <= self.balance:
            self.insurance_bet = amount
            self.balance -= amount

    def win_insurance(self) -> None:
        self.balance += self.insurance_bet * 3

    def surrender(self, idx: int) -> None:
        """Give up a hand, getting half the bet back."""
        half = self.bets[idx] / 2
        self.balance += half
        self.record_loss(half)
        self.bets[idx] = 0.0

    def choose_move(self, hand: Hand, dealer_card: Card) -> int:
        """Ask for a move; anything that is not a number gives 0."""
        match = _LEADING_INT.match(self._ask(MOVE_PROMPT))
        return int(match.group(1)) if match else 0

    def record_win(self, amount: float) -> None:
        self.wins += 1
        self.total_earnings += amount

    def record_loss(self, amount: float) -> None:
        self.losses += 1
        self.total_earnings -= amount

    def record_push(self) -> None:
        self.pushes += 1

    def statistics_text(self) -> str:
        return (
            f"\n--- Statistics for {self.name} ---\n"
            f"Wins: {self.wins}\n"
            f"Losses: {self.losses}\n"
            f"Pushes: {self.pushes}\n"
            f"Total Earnings: ${self.total_earnings:g}\n"
            f"Current Balance: ${self.balance:g}\n"
            "---------------------------\n"
        )


class AIPlayer(Player):
    """A computer player that bets a fixed stake and follows a basic strategy."""

    is_ai = True

    def place_bet(self, amount: float) -> None:
        """Stake up to 100, whatever amount is asked for."""
        stake = min(self.balance, AI_MAX_BET)
        self.bets[0] = stake
        self.balance -= stake

    def choose_move(self, hand: Hand, dealer_card: Card) -> Move:
        total = hand.total()
        dealer = dealer_card.value

        if total == 9 and 3 <= dealer <= 6:
            return Move.DOUBLE_DOWN
        if total == 10 and 2 <= dealer <= 9:
            return Move.DOUBLE_DOWN
        if total == 11 and 2 <= dealer <= 10:
            return Move.DOUBLE_DOWN

        if total <= 8:
            return Move.HIT
        if total == 9:
            return Move.DOUBLE_DOWN if 3 <= dealer <= 6 else Move.HIT
        if total == 10:
            return Move.DOUBLE_DOWN if dealer <= 9 else Move.HIT
        if total == 11:
            return Move.DOUBLE_DOWN
        if 12 <= total <= 16:
            return Move.STAND if 2 <= dealer <= 6 else Move.HIT
        return Move.STAND