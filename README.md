# enfrendados

Enfrendados is a dice game for the terminal that combines luck and arithmetic.

At the start of a turn, two twelve-sided dice are rolled. Their sum is the
target number. Then your six-sided dice are rolled. You pick them one at a
time, by index, until the dice you have picked reach the target or go past it.

- **Hitting the target exactly:** the dice you used leave your stock. If you
  have used up all your dice, you win a 10000-point prize. Otherwise you score
  your remaining stock multiplied by the target, and your opponent loses as
  many dice as you used.
- **Going past the target:** one die moves from your opponent's stock to
  yours. This only happens while your opponent has more than one die.

## Installation

```
pip install .
```

The game needs Python 3.10 or later and uses no third-party libraries.

## Playing

```
enfrendados
```

The main menu offers these options:

| Option | Action |
|--------|--------|
| 1 | Play a turn as "Jugador 1", then show both stocks and the points scored |
| 2 | Show the top-4 ranking |
| 3 | Show the credits |
| 0 | Exit, after you confirm with `s` or `n` |

Each time you play, the points of "Jugador 1" are added to a top-4 ranking.
The menu uses ANSI escape sequences for colour and cursor placement, so it
needs a terminal that supports them. The program exits when you confirm exit
or when input ends.

## What it does not do

- Option 1 plays a single turn for the first player. The second player never
  takes a turn, and there is no full match with a winner.
- The ranking only lasts while the program runs. It is not saved to disk.

## Using it as a library

```python
from enfrendados.game import PlayerState, play_turn
from enfrendados.stats import Ranking

ranking = Ranking(4)
ranking.add("Ana", 120)
ranking.add("Luis", 300)
print(ranking.render())
```

- `enfrendados.game` provides the dice rolls (`roll_d6`, `roll_d12`), the
  `PlayerState` dataclass and `play_turn`.
  - `play_turn(player, opponent, choose, rng)` updates both states and returns
    a `TurnOutcome`.
  - `choose(target, available, total)` returns the index of the next die to
    take. An index that is not available raises `ValueError`.
- `enfrendados.stats.Ranking` is a bounded high-score table with the best
  score first. Its default capacity is 4.
- `enfrendados.console.Console` writes ANSI sequences to an `out` stream and
  reads keys from an `inp` stream. Both streams default to the standard
  streams, and you can pass other streams to use it without a terminal. The
  module also defines the `Color` and `Key` enums.
- `enfrendados.cli` provides `main`, `credits_text` and `confirm_exit`.

## Running the tests

```
pip install ".[test]"
pytest
```