import random
from collections import Counter

import pytest

from blackjack.cards import RANKS, SUITS, Card, Dealer, Deck, Hand


def hand_of(*ranks, suit="Spades"):
    hand = Hand()
    for rank in ranks:
        hand.add_card(Card(rank, suit))
    return hand


class ScriptedDeck:
    def __init__(self, ranks):
        self._cards = [Card(rank, "Clubs") for rank in ranks]
        self.dealt = 0

    def deal_card(self):
        card = self._cards[self.dealt]
        self.dealt += 1
        return card


def test_card_values_follow_rank():
    assert Card("A", "Hearts").value == 11
    assert all(Card(rank, "Clubs").value == 10 for rank in ("K", "Q", "J", "10"))
    assert Card("7", "Clubs").value == int("7")


def test_card_with_unknown_rank_is_rejected():
    with pytest.raises(ValueError):
        Card("X", "Hearts")


def test_card_str():
    assert str(Card("A", "Spades")) == "A of Spades"


def test_suit_symbols():
    assert Card("2", "Clubs").suit_symbol() == "C"
    assert Card("2", "Spades").suit_symbol() == "S"
    assert Card("2", "Hearts").suit_symbol() == "\033[31mH\033[0m"
    assert Card("2", "Diamonds").suit_symbol() == "\033[31mD\033[0m"
    assert Card("2", "Stars").suit_symbol() == "?"


def test_deck_holds_six_full_decks():
    deck = Deck(random.Random(7))
    counts = Counter((card.rank, card.suit) for card in deck.cards)
    assert set(counts) == {(r, s) for r in RANKS for s in SUITS}
    assert set(counts.values()) == {6}


def test_deck_init_with_other_count():
    deck = Deck(random.Random(7))
    deck.init(1)
    assert len(deck.cards) == len(RANKS) * len(SUITS)
    assert deck.remaining == len(deck.cards)


def test_dealing_whole_shoe_then_refills():
    deck = Deck(random.Random(3))
    deck.init(1)
    dealt = [deck.deal_card() for _ in range(len(deck.cards))]
    assert Counter(dealt) == Counter(Card(r, s) for r in RANKS for s in SUITS)
    assert deck.remaining == 0
    deck.deal_card()
    counts = Counter((card.rank, card.suit) for card in deck.cards)
    assert set(counts.values()) == {6}
    assert deck.remaining == len(deck.cards) - 1


def test_shuffle_resets_position():
    deck = Deck(random.Random(5))
    for _ in range(10):
        deck.deal_card()
    deck.shuffle()
    assert deck.remaining == len(deck.cards)


def test_hand_total_counts_aces_softly():
    assert hand_of("A", "K").total() == 21
    assert hand_of("A", "A", "9").total() == 21
    assert hand_of("A", "K", "Q").total() == 21


def test_bust_hand():
    hand = hand_of("K", "Q", "5")
    assert hand.is_bust()
    assert not hand_of("K", "Q").is_bust()


def test_splittable():
    assert hand_of("8", "8").is_splittable()
    assert not hand_of("8", "9").is_splittable()
    assert not hand_of("8", "8", "8").is_splittable()


def test_remove_card_returns_last():
    hand = hand_of("2", "K")
    assert hand.remove_card() == Card("K", "Spades")
    assert hand.cards == [Card("2", "Spades")]


def test_clear_empties_hand():
    hand = hand_of("2", "3")
    hand.clear()
    assert len(hand) == 0
    assert hand.total() == 0


def test_render_shows_blackjack():
    text = hand_of("A", "K").render()
    lines = text.splitlines()
    assert lines[0] == "+-------+ +-------+ "
    assert lines[1] == "|A      | |K      | "
    assert lines[3] == "|   S   | |   S   | "
    assert lines[5] == "|      A| |      K| "
    assert "BLACKJACK!" in lines[7]


def test_render_hides_first_card_and_total():
    lines = hand_of("10", "9").render(hide_first_card=True).splitlines()
    assert len(lines) == 7
    assert lines[1] == "|*******| |9      | "
    assert not any("Total" in line for line in lines)


def test_render_bust_and_plain_total():
    assert "BUSTED (Total: 25)" in hand_of("K", "Q", "5").render()
    plain = hand_of("10", "9").render().splitlines()[-1]
    assert plain == f"Total: {hand_of('10', '9').total()}"


def test_dealer_draws_to_seventeen():
    dealer = Dealer()
    deck = Deck(random.Random(11))
    dealer.play(deck)
    assert dealer.hand.total() >= 17


def test_dealer_stands_on_seventeen():
    dealer = Dealer(hand_of("10", "7"))
    deck = ScriptedDeck(["5"])
    dealer.play(deck)
    assert deck.dealt == 0
    assert len(dealer.hand) == 2


def test_dealer_hits_below_seventeen_and_resets():
    dealer = Dealer(hand_of("10", "6"))
    deck = ScriptedDeck(["2", "K"])
    dealer.play(deck)
    assert deck.dealt == 1
    dealer.reset_hand()
    assert len(dealer.hand) == 0