"""
state.py
Defines the per-trial GameState dataclass.
Related modules:
- engine.py: Mutates GameState during a trial; one instance per trial, never shared.
"""

from dataclasses import dataclass


@dataclass
class GameState:
    """
    Mutable state of one trial.
    Fields:
        remaining_dice (int): Dice still in the pool.
        total_score (int): Points accumulated so far.
        steps (int): Roll steps taken.
        status (str): Trial status (ROLLING, DONE).
    """
    remaining_dice: int
    total_score: int = 0
    steps: int = 0
    status: str = "ROLLING"  # ROLLING | DONE

    def __post_init__(self):
        if self.remaining_dice == 0:
            self.status = "DONE"
