"""
rules.py
Defines the elimination rule: how many dice leave the pool after a roll and how many points that roll scores.
Related modules:
- engine.py: Uses process_roll on every step of a trial.
"""

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class RollOutcome:
    """
    Result of applying the elimination rule to one roll of the pool.
    Fields:
        score_delta (int): Points scored by this roll.
        dice_removed (int): Dice that leave the pool.
    """
    score_delta: int
    dice_removed: int


def count_matches(rolls: Sequence[int], face: int) -> int:
    """
    Count the dice in a roll showing the given face.
    """
    return sum(1 for d in rolls if d == face)


def process_roll(rolls: Sequence[int], magic_number: int) -> RollOutcome:
    """
    Apply the elimination rule to a single roll.
    Any die showing the magic number voids the roll: nothing is scored and every
    magic die is removed. Otherwise the lowest die is scored and removed.
    Args:
        rolls (sequence[int]): Faces rolled this step.
        magic_number (int): The face that removes dice without scoring.
    Returns:
        RollOutcome: Points scored and dice removed.
    Raises:
        ValueError: If no dice were rolled.
    """
    if not rolls:
        raise ValueError("cannot score an empty roll")
    magic_count = count_matches(rolls, magic_number)
    if magic_count > 0:
        return RollOutcome(score_delta=0, dice_removed=magic_count)
    return RollOutcome(score_delta=min(rolls), dice_removed=1)
