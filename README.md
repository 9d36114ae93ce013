# pokersim

A Monte Carlo simulator for Texas Hold'em. It deals random games, finds every
player's best combination with the five community cards, and stores the
statistics in an SQLite database:

- **Pre-flop odds** for two or three players: for each starting hand (for
  example `Ah Kd`), how often it was dealt, how often it won outright and how
  often the game was a draw, with win and draw percentages. These go into the
  `TwoPlayersPreFlop` or `ThreePlayersPreFlop` table.
- **Combination frequencies**: how often a single player ends up with each
  combination, from High Card to Straight Flush, in the `Combinations` table.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Command line

```
pokersim
```

With no options this runs the three-player pre-flop simulation for one
billion games and appends its rows to `simulations.db` in the current
directory. Progress is printed every ten million games.

Options:

- `--mode {two,three,combinations}`: which simulation to run (default `three`).
- `--games N`: number of games to deal.
- `--db PATH`: SQLite database file (default `simulations.db`).
- `--seed N`: seed for the random number generator, for repeatable runs.

For example:

```
pokersim --mode two --games 100000 --db odds.db --seed 7
```

Each run inserts new rows; tables are created if they do not exist and are
never cleared.

## Library use

```python
import random

from pokersim.cards import Card, Combination, Hand, Suit
from pokersim.calculator import calculate_hand, compare_hands
from pokersim.simulator import simulate_pre_flop_stand_off

hand = Hand()
hand.add_card(Card(number=14, suit=Suit.CLUBS))
hand.add_card(Card(number=13, suit=Suit.DIAMONDS))

river = [
    Card(number=14, suit=Suit.HEARTS),
    Card(number=6, suit=Suit.SPADES),
    Card(number=9, suit=Suit.CLUBS),
    Card(number=5, suit=Suit.HEARTS),
    Card(number=10, suit=Suit.SPADES),
]

result = calculate_hand(hand, river)
assert result.combination == Combination.PAIR
assert result.active_cards == (14, 14, 13, 10, 9)

stats = simulate_pre_flop_stand_off(100_000, "simulations.db", random.Random(7))
print(stats["Ac Ad"].win_chance)
```

Card numbers run from 2 to 14, the ace being 14. `Hand.export()` gives the
canonical text of a starting hand, higher card first, such as `Kd 10c`.

`calculate_hand(hand, river)` returns a `HandResult` with the `combination`
(a `Combination`) and the `active_cards` numbers that score it.
`compare_hands(hands, river)` returns a `GameResult` whose `winner` is the
index of the winning hand, or `None` for a draw (`is_draw` is then true).

`simulate_pre_flop(players_count, simulation_size, db_path, table_name, rng)`
is the general form behind `simulate_pre_flop_stand_off` and
`simulate_pre_flop_three_players`; it returns a dictionary of `HandStats`
(`hits`, `wins`, `draws`, `win_chance`, `draw_chance`) keyed by exported hand.
`simulate_combination_chance(simulation_size, db_path, rng)` returns the count
of each `Combination` seen.

In `pokersim.table`, a `Game` deals a shuffled `Deck` to the players, then the
flop, turn and river; `Game.play()` runs it to the end and `Game.hands` and
`Game.river` hold the cards dealt. Dealing river cards out of order raises
`TableError`, and drawing from an empty deck raises `EmptyDeckError`.

## Tests

```
pip install .[test]
pytest
```