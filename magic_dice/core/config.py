"""
config.py
Defines the GameConfig dataclass, which centralizes the dice-pool size, die shape, magic number and run size for the simulator.
Related modules:
- engine.py: Uses GameConfig to build a fresh GameState per trial.
- runner.py: Uses GameConfig to size, partition and seed a run.
"""

from dataclasses import dataclass
from typing import Optional

DEFAULT_DICE_COUNT = 5
DEFAULT_SIDES_PER_DIE = 6
DEFAULT_MAGIC_NUMBER = 3
DEFAULT_TRIAL_COUNT = 10000


class ConfigError(ValueError):
    """
    Raised when a GameConfig field is missing, of the wrong type or out of range.
    """
    pass


def _require_int(name: str, value) -> None:
    # bool is a subclass of int, but True dice make no sense
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class GameConfig:
    """
    Immutable settings for one simulation run.
    Fields:
        dice_count (int): Dice in the pool at the start of every trial (0 allowed).
        sides_per_die (int): Faces per die, numbered 1..sides_per_die.
        magic_number (int): Face that removes dice without scoring.
        trial_count (int): Number of independent trials in a run.
        workers (int|None): Worker processes; None means one per CPU.
        rng_seed (int|None): Seed for reproducible runs; None draws from OS entropy.
    """
    dice_count: int = DEFAULT_DICE_COUNT
    sides_per_die: int = DEFAULT_SIDES_PER_DIE
    magic_number: int = DEFAULT_MAGIC_NUMBER
    trial_count: int = DEFAULT_TRIAL_COUNT
    workers: Optional[int] = None
    rng_seed: Optional[int] = None

    def __post_init__(self):
        for name in ("dice_count", "sides_per_die", "magic_number", "trial_count"):
            _require_int(name, getattr(self, name))
        if self.dice_count < 0:
            raise ConfigError("dice_count must be zero or more")
        if self.sides_per_die < 2:
            raise ConfigError("sides_per_die must be at least 2")
        if not (1 <= self.magic_number <= self.sides_per_die):
            raise ConfigError(f"magic_number must be between 1 and {self.sides_per_die}")
        if self.trial_count < 1:
            raise ConfigError("trial_count must be at least 1")
        if self.workers is not None:
            _require_int("workers", self.workers)
            if self.workers < 1:
                raise ConfigError("workers must be at least 1")
        if self.rng_seed is not None:
            _require_int("rng_seed", self.rng_seed)

    def __str__(self) -> str:
        return (f"GameConfig[dice={self.dice_count}, sides={self.sides_per_die}, "
                f"magic={self.magic_number}, sims={self.trial_count}]")
