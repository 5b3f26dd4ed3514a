"""
statistics.py
Frequency-table helpers and the RunStatistics summary derived from a finished run.
Related modules:
- runner.py: Builds partial tables per partition, merges them and calls compute_statistics.
"""

import time
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Mapping

# Smallest elapsed time we report; a run faster than the clock can resolve would otherwise divide by zero.
_MIN_ELAPSED = time.get_clock_info("perf_counter").resolution


@dataclass(frozen=True)
class RunStatistics:
    """
    Read-only summary of a completed run.
    Fields:
        trial_count (int): Trials in the run.
        mean (float): Mean final score.
        min_score (int): Lowest score that occurred.
        max_score (int): Highest score that occurred.
        mode (int): Most frequent score; ties go to the smallest score.
        unique_scores (int): Distinct scores that occurred.
        elapsed_seconds (float): Wall-clock duration of the run.
        throughput (float): Trials per second.
    """
    trial_count: int
    mean: float
    min_score: int
    max_score: int
    mode: int
    unique_scores: int
    elapsed_seconds: float
    throughput: float


def tally(scores: Iterable[int]) -> Counter:
    """Fold final scores into a frequency table."""
    return Counter(scores)


def merge_tables(tables: Iterable[Mapping[int, int]]) -> Counter:
    """
    Sum partial frequency tables by score, in the order given.
    Args:
        tables (iterable[mapping]): Partial tables, one per partition.
    Returns:
        Counter: Merged table.
    """
    merged = Counter()
    for table in tables:
        merged.update(table)
    return merged


def mode_of(table: Mapping[int, int]) -> int:
    """
    Return the most frequent score, preferring the smallest score on ties.
    """
    return min(table, key=lambda score: (-table[score], score))


def compute_statistics(table: Mapping[int, int], trial_count: int, elapsed_seconds: float) -> RunStatistics:
    """
    Derive RunStatistics from a completed frequency table.
    Args:
        table (mapping): Final score -> occurrence count.
        trial_count (int): Trials in the run (must match the table total).
        elapsed_seconds (float): Measured wall-clock duration.
    Returns:
        RunStatistics: Summary of the run.
    Raises:
        ValueError: If the table is empty or trial_count is not positive.
    """
    if trial_count < 1 or not table:
        raise ValueError("statistics need at least one trial")
    elapsed = max(elapsed_seconds, _MIN_ELAPSED)
    total = sum(score * count for score, count in table.items())
    return RunStatistics(
        trial_count=trial_count,
        mean=total / trial_count,
        min_score=min(table),
        max_score=max(table),
        mode=mode_of(table),
        unique_scores=len(table),
        elapsed_seconds=elapsed,
        throughput=trial_count / elapsed,
    )
