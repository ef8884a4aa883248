# blackjack

A blackjack game for the terminal. Human players share one keyboard and play alongside any number of computer players against the dealer.

## Installing

```
pip install .
```

## Playing

```
blackjack
```

Options:

- `--stats-file PATH` — where the human players' results are saved (default `player_stats.csv` in the current directory).
- `--seed N` — seed the shuffling and the computer players' announced bets, so a game can be repeated.
- `--quick` — skip the pauses and the screen clearing between turns.

When the game starts it asks how many human players there are and what each one is called, then how many AI players to add (named `AI_Player_1`, `AI_Player_2`, ...). Every player starts with $1000.

Each round works like this:

- Players who have no money left are removed from the table. If nobody is left, the game prints "All players are out of money. Game over." and ends.
- Everyone places a bet. Humans type a positive whole number no larger than their balance. For each AI player the table announces a random bet between $50 and $200, but an AI player always stakes $100, or its whole balance if that is less.
- Cards are dealt from a six-deck shoe, which is reshuffled at the start of every round and refilled when it runs out. The dealer's first card is dealt face down.
- If the dealer's face-up card is an ace, each human player is offered insurance. Insurance costs a tenth of the player's balance; if the dealer has blackjack, three times the insurance stake is paid back.
- If the dealer has blackjack, the round ends there.
- Otherwise each player takes a turn. Before a human player's turn the game waits for Enter and clears the screen; afterwards it pauses for 8 seconds and clears the screen again. On each hand you choose `1` hit, `2` stand, `3` double down or `4` surrender. Doubling down and surrendering are only allowed as the first move. A hand reaching 21 stands automatically.
- The dealer draws until reaching at least 17, and every hand is settled: a bust loses, a higher total than the dealer's (or a dealer bust) wins even money, a lower total loses, and an equal total is a push. A surrendered hand gets half its bet back and counts as a loss.

AI players follow a fixed strategy: they double on 9 against a dealer 3–6, on 10 against 2–9 and on 11; they hit on 8 or less; on 12–16 they stand against a dealer 2–6 and hit otherwise; and they stand on 17 or more. If the strategy asks to double after a card has been drawn, the AI player hits instead.

After each round a statistics table shows every player's wins, losses, pushes, total earnings, balance and win rate. When you choose to stop playing, the human players' results are written to the statistics file. The file is not written if the game ends because everyone ran out of money, or if input ends (Ctrl-D) or is interrupted (Ctrl-C).

## What it does not do

Splitting pairs is not offered during play, although `Player.split_hand` is available to code using the library. There is no saving or resuming of a game in progress; the statistics file is written only at the end.

## Using it as a library

- `blackjack.cards` provides `Card`, `Deck`, `Hand` (with `total()`, `is_bust()` and `render()` for the ASCII-art view) and `Dealer`.
- `blackjack.player` provides `Player`, the rule-based `AIPlayer`, the `Move` enum and `InsufficientBalanceError`, raised by `Player.place_bet` when a bet exceeds the balance. `Player.statistics_text()` gives a short summary of one player's results.
- `blackjack.statistics.save_stats_to_csv(players, filename)` writes the results of the human players to a CSV file.
- `blackjack.game.BlackjackGame` runs whole rounds with `play_round()`, asks about another round with `ask_replay()` and returns the results table from `statistics_table()`. It raises `GameOver` when no player has any money left. Input, output, pauses and screen clearing can be replaced through its constructor arguments.

## Running the tests

```
pip install .[test]
pytest
```