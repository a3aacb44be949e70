"""
Dice and random event amounts.
"""

import random
from typing import Optional, Tuple


class Dice:
    """
    Seedable source of dice rolls and Fortune/Crisis amounts.

    Each game owns its own instance so two games never share a random stream.
    """

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)
        self.last_roll: Optional[Tuple[int, int]] = None

    def roll(self) -> int:
        """Roll two six-sided dice and return their sum (2-12)."""
        die1 = self.rng.randint(1, 6)
        die2 = self.rng.randint(1, 6)
        self.last_roll = (die1, die2)
        return die1 + die2

    def random_amount(self, low: int, high: int) -> int:
        """Return a uniform integer in [low, high], both ends included."""
        if low > high:
            raise ValueError(f"low ({low}) cannot exceed high ({high})")
        return self.rng.randint(low, high)
