"""Cards, the shoe they are dealt from, hands and the dealer."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

SUITS = ("Hearts", "Diamonds", "Clubs", "Spades")
RANKS = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")
DEFAULT_DECKS = 6
BLACKJACK = 21

RESET = "\033[0m"
RED = "\033[31m"
BOLD_RED = "\033[1;31m"
BOLD_GREEN = "\033[1;32m"

_CARD_BORDER = "+-------+"
_HIDDEN_ROW = "|*******|"
_BLANK_ROW = "|       |"
_CARD_INNER_WIDTH = 7

_SUIT_SYMBOLS = {
    "Hearts": f"{RED}H{RESET}",
    "Diamonds": f"{RED}D{RESET}",
    "Clubs": "C",
    "Spades": "S",
}


@dataclass(frozen=True)
class Card:
    """A playing card; its value follows blackjack rules with aces as 11."""

    rank: str
    suit: str

    def __post_init__(self) -> None:
        # An unknown rank is rejected as soon as the card is made.
        _ = self.value

    @property
    def value(self) -> int:
        if self.rank == "A":
            return 11
        if self.rank in ("K", "Q", "J"):
            return 10
        return int(self.rank)

    def suit_symbol(self) -> str:
        """One-letter suit symbol, red hearts and diamonds, '?' if unknown."""
        return _SUIT_SYMBOLS.get(self.suit, "?")

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"


class Deck:
    """A shoe of several decks that reshuffles itself when it runs out."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.cards: list[Card] = []
        self._position = 0
        self.init()

    def init(self, number_of_decks: int = DEFAULT_DECKS) -> None:
        """Refill the shoe with fresh decks and shuffle it."""
        self.cards = [
            Card(rank, suit)
            for _ in range(number_of_decks)
            for suit in SUITS
            for rank in RANKS
        ]
        self.shuffle()

    def shuffle(self) -> None:
        """Shuffle every card back into the shoe."""
        self._rng.shuffle(self.cards)
        self._position = 0

    @property
    def remaining(self) -> int:
        return len(self.cards) - self._position

    def deal_card(self) -> Card:
        """Deal the next card, refilling the shoe with a fresh one if empty."""
        if self._position >= len(self.cards):
            self.init()
        card = self.cards[self._position]
        self._position += 1
        return card


@dataclass
class Hand:
    """The cards held in one blackjack hand."""

    cards: list[Card] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def add_card(self, card: Card) -> None:
        self.cards.append(card)

    def total(self) -> int:
        """Best total, counting aces as 1 where 11 would bust."""
        total = sum(card.value for card in self.cards)
        soft_aces = sum(1 for card in self.cards if card.value == 11)
        while total > BLACKJACK and soft_aces:
            total -= 10
            soft_aces -= 1
        return total

    def is_bust(self) -> bool:
        return self.total() > BLACKJACK

    def render(self, hide_first_card: bool = False) -> str:
        """Draw the hand as ASCII cards, with a status line unless hidden."""
        rows: list[list[str]] = [[] for _ in range(7)]
        for position, card in enumerate(self.cards):
            if position == 0 and hide_first_card:
                column = [_CARD_BORDER] + [_HIDDEN_ROW] * 5 + [_CARD_BORDER]
            else:
                rank = card.rank
                pad = " " * (_CARD_INNER_WIDTH - len(rank))
                column = [
                    _CARD_BORDER,
                    f"|{rank}{pad}|",
                    _BLANK_ROW,
                    f"|   {card.suit_symbol()}   |",
                    _BLANK_ROW,
                    f"|{pad}{rank}|",
                    _CARD_BORDER,
                ]
            for row, part in zip(rows, column):
                row.append(part)

        lines = ["".join(f"{part} " for part in row) for row in rows]

        if not hide_first_card:
            total = self.total()
            if self.is_bust():
                lines.append(f"{BOLD_RED}BUSTED (Total: {total}){RESET}")
            elif total == BLACKJACK and len(self.cards) == 2:
                lines.append(f"{BOLD_GREEN}BLACKJACK!{RESET}")
            else:
                lines.append(f"Total: {total}")

        return "\n".join(lines) + "\n"

    def clear(self) -> None:
        self.cards.clear()

    def is_splittable(self) -> bool:
        return len(self.cards) == 2 and self.cards[0].rank == self.cards[1].rank

    def remove_card(self) -> Card:
        """Take the last card off the hand."""
        return self.cards.pop()


@dataclass
class Dealer:
    """The house: draws to 17 and stands."""

    hand: Hand = field(default_factory=Hand)

    def play(self, deck: Deck) -> None:
        while self.hand.total() < 17:
            self.hand.add_card(deck.deal_card())

    def reset_hand(self) -> None:
        self.hand.clear()