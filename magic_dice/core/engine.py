"""
engine.py
Implements the GameEngine class, which plays a single trial: roll the remaining pool, apply the elimination rule, repeat until no dice remain.
Related modules:
- config.py: GameConfig sizes the pool and the dice.
- state.py: GameState holds the per-trial pool and score.
- dice.py: Rolls the pool.
- rules.py: Scores each roll and decides how many dice leave the pool.
"""

import random
from typing import List, Optional, Tuple

from .config import GameConfig
from .state import GameState
from .dice import roll_n
from .rules import RollOutcome, process_roll


class GameOverError(Exception):
    """
    Raised when a step is requested on a trial that has already finished.
    """
    pass


class GameEngine:
    """
    State machine for one trial. Every engine owns its GameState and its RNG; nothing is shared between trials.
    """
    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None, record_history: bool = False):
        """
        Initialize a fresh trial.
        Args:
            config (GameConfig): Game configuration.
            rng (random.Random|None): RNG for this trial. A new OS-seeded instance is created when omitted.
            record_history (bool): Keep every (rolls, outcome) pair in self.history.
        """
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.state = GameState(remaining_dice=config.dice_count)
        self.record_history = record_history
        self.history: List[Tuple[List[int], RollOutcome]] = []

    def is_terminal(self) -> bool:
        """
        Returns True once the pool is empty.
        """
        return self.state.status == "DONE"

    def step(self) -> RollOutcome:
        """
        Roll every remaining die once and apply the elimination rule.
        Returns:
            RollOutcome: What this roll scored and removed.
        Raises:
            GameOverError: If the pool is already empty.
        """
        if self.is_terminal():
            raise GameOverError("No dice left to roll")
        rolls = roll_n(self.state.remaining_dice, self.rng, self.config.sides_per_die)
        outcome = process_roll(rolls, self.config.magic_number)

        self.state.total_score += outcome.score_delta
        self.state.remaining_dice -= outcome.dice_removed
        self.state.steps += 1
        if self.state.remaining_dice <= 0:
            self.state.remaining_dice = 0
            self.state.status = "DONE"

        if self.record_history:
            self.history.append((rolls, outcome))
        return outcome

    def play(self) -> int:
        """
        Run the trial to completion.
        Returns:
            int: Final score.
        """
        while not self.is_terminal():
            self.step()
        return self.state.total_score


def play_trial(config: GameConfig, rng: Optional[random.Random] = None) -> int:
    """
    Play one complete trial with fresh state and return its final score.
    Args:
        config (GameConfig): Game configuration.
        rng (random.Random|None): RNG to draw from; see GameEngine.
    Returns:
        int: Final score (never negative).
    """
    return GameEngine(config, rng=rng).play()
