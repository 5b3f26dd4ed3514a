"""
dice.py
Defines dice rolling utilities for the simulator.
Related modules:
- engine.py: Uses roll_n to roll the remaining pool on every step.
"""

import random
from typing import List


def roll_die(rng: random.Random, sides: int = 6) -> int:
    """
    Roll a single die using the provided random number generator.
    Args:
        rng (random.Random): RNG instance.
        sides (int): Number of faces on the die.
    Returns:
        int: Die face (1..sides).
    """
    return rng.randint(1, sides)


def roll_n(n: int, rng: random.Random, sides: int = 6) -> List[int]:
    """
    Roll n dice using the provided RNG.
    Args:
        n (int): Number of dice to roll.
        rng (random.Random): RNG instance.
        sides (int): Number of faces on each die.
    Returns:
        list[int]: List of die faces.
    """
    return [roll_die(rng, sides) for _ in range(n)]
