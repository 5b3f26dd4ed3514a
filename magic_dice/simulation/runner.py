"""
runner.py
Implements SimulationRunner, which plays many independent trials, folds their scores into a frequency table and summarizes it.
Trials are split into partitions; each partition owns a private RNG and a private partial table, and partial tables
are merged in partition order once every partition has finished.
Related modules:
- engine.py: GameEngine plays each trial.
- statistics.py: Table merging and RunStatistics.
"""

import logging
import os
import random
import time
from collections import Counter
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional

from magic_dice.core.config import GameConfig
from magic_dice.core.engine import GameEngine
from .statistics import RunStatistics, compute_statistics, merge_tables

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResults:
    """
    Outcome of a run: the configuration it used, the final frequency table and its statistics.
    Fields:
        config (GameConfig): Configuration of the run.
        frequencies (mapping): Read-only final score -> occurrence count.
        statistics (RunStatistics): Derived summary.
    """
    config: GameConfig
    frequencies: Mapping[int, int]
    statistics: RunStatistics

    def probability(self, score: int) -> float:
        """Empirical probability of a final score."""
        return self.frequencies.get(score, 0) / self.statistics.trial_count

    def sorted_items(self):
        """(score, count) pairs in ascending score order."""
        return sorted(self.frequencies.items())


def split_work(total: int, parts: int) -> List[int]:
    """Divide total trials into at most `parts` near-equal, non-empty chunks."""
    base = total // parts
    remainder = total % parts
    sizes = []
    for i in range(parts):
        chunk = base + (1 if i < remainder else 0)
        if chunk > 0:
            sizes.append(chunk)
    return sizes


def _run_partition(config: GameConfig, n_trials: int, seed: int) -> Counter:
    # Runs in a worker process; must stay importable at module level.
    rng = random.Random(seed)
    table = Counter()
    for _ in range(n_trials):
        table[GameEngine(config, rng=rng).play()] += 1
    return table


class SimulationRunner:
    """
    Runs config.trial_count independent trials and aggregates them.
    """
    def __init__(self, config: GameConfig, partitions: Optional[int] = None):
        """
        Args:
            config (GameConfig): Game configuration.
            partitions (int|None): Number of chunks (each with its own RNG stream). Defaults to the worker count.
                Runs with the same rng_seed and partition count produce the same table regardless of workers.
        """
        self.config = config
        self.workers = min(config.workers or os.cpu_count() or 1, config.trial_count)
        if partitions is not None and partitions < 1:
            raise ValueError("partitions must be at least 1")
        self.partitions = min(partitions or self.workers, config.trial_count)

    def _partition_seeds(self, count: int) -> List[int]:
        if self.config.rng_seed is None:
            seeder = random.SystemRandom()
        else:
            seeder = random.Random(self.config.rng_seed)
        return [seeder.getrandbits(64) for _ in range(count)]

    def _run_partitions(self, sizes: List[int], seeds: List[int]) -> List[Counter]:
        if self.workers == 1:
            return [_run_partition(self.config, n, seed) for n, seed in zip(sizes, seeds)]
        with ProcessPoolExecutor(max_workers=min(self.workers, len(sizes))) as executor:
            # map() yields in submission order, which keeps the merge deterministic
            return list(executor.map(_run_partition, [self.config] * len(sizes), sizes, seeds))

    def run(self) -> SimulationResults:
        """
        Play every trial and summarize the results.
        Returns:
            SimulationResults: Frequency table and statistics.
        Raises:
            RuntimeError: If the merged table does not account for every trial.
        """
        config = self.config
        sizes = split_work(config.trial_count, self.partitions)
        seeds = self._partition_seeds(len(sizes))
        logger.debug("Starting run: %s, %d partitions, %d workers", config, len(sizes), self.workers)

        start = time.perf_counter()
        table = merge_tables(self._run_partitions(sizes, seeds))
        elapsed = time.perf_counter() - start

        played = sum(table.values())
        if played != config.trial_count:
            raise RuntimeError(f"aggregated {played} trials, expected {config.trial_count}")

        stats = compute_statistics(table, config.trial_count, elapsed)
        logger.info("Finished %d trials in %.3fs (%.0f trials/s)",
                    config.trial_count, stats.elapsed_seconds, stats.throughput)
        return SimulationResults(config=config, frequencies=MappingProxyType(dict(table)), statistics=stats)


def run(config: GameConfig, partitions: Optional[int] = None) -> SimulationResults:
    """
    Run a full simulation for the given configuration.
    Args:
        config (GameConfig): Game configuration.
        partitions (int|None): See SimulationRunner.
    Returns:
        SimulationResults: Frequency table and statistics.
    """
    return SimulationRunner(config, partitions=partitions).run()
