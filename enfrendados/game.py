"""Dice rolls and the rules of a single turn."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol, Tuple

EMPTY_BONUS = 10000
STARTING_DICE = 6


class _RandInt(Protocol):
    def randint(self, a: int, b: int) -> int: ...


Chooser = Callable[[int, Dict[int, int], int], int]


def roll_d6(rng: Optional[_RandInt] = None) -> int:
    """Roll a six-sided die."""
    return (rng if rng is not None else random).randint(1, 6)


def roll_d12(rng: Optional[_RandInt] = None) -> int:
    """Roll a twelve-sided die."""
    return (rng if rng is not None else random).randint(1, 12)


@dataclass
class PlayerState:
    """A player's dice stock and accumulated points."""

    dice: int = STARTING_DICE
    points: int = 0


@dataclass(frozen=True)
class TurnOutcome:
    """What happened during one turn."""

    target: int
    rolls: Tuple[int, ...]
    chosen: Tuple[int, ...]
    total: int

    @property
    def exact(self) -> bool:
        return self.total == self.target

    @property
    def overshot(self) -> bool:
        return self.total > self.target

    @property
    def dice_used(self) -> int:
        return len(self.chosen)


def play_turn(
    player: PlayerState,
    opponent: PlayerState,
    choose: Chooser,
    rng: Optional[_RandInt] = None,
) -> TurnOutcome:
    """Play one turn for ``player`` and update both states.

    ``choose(target, available, total)`` receives the target, a mapping of
    index to value for the dice still unused, and the running total, and
    returns the index of the die to take. An index that is not available
    raises ValueError.
    """
    target = roll_d12(rng) + roll_d12(rng)
    rolls = tuple(roll_d6(rng) for _ in range(player.dice))
    remaining = dict(enumerate(rolls))
    chosen = []
    total = 0

    while total < target and remaining:
        index = choose(target, dict(remaining), total)
        if index not in remaining:
            raise ValueError(f"die {index!r} is not available")
        total += remaining.pop(index)
        chosen.append(index)

    outcome = TurnOutcome(target, rolls, tuple(chosen), total)

    if outcome.exact:
        player.dice -= outcome.dice_used
        if player.dice == 0:
            player.points += EMPTY_BONUS
        else:
            player.points += player.dice * total
            opponent.dice -= outcome.dice_used
    elif outcome.overshot and opponent.dice > 1:
        opponent.dice -= 1
        player.dice += 1

    return outcome