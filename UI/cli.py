import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from magic_dice.core.config import (
    ConfigError,
    GameConfig,
    DEFAULT_DICE_COUNT,
    DEFAULT_SIDES_PER_DIE,
    DEFAULT_MAGIC_NUMBER,
    DEFAULT_TRIAL_COUNT,
)
from magic_dice.simulation.runner import SimulationResults, run


# Variants shown after the default run in --demo mode: (title, overrides)
CONFIG_EXAMPLES = [
    ("Quick game with 3 dice", {"dice_count": 3, "trial_count": 5000}),
    ("Different magic number (2 instead of 3)", {"magic_number": 2, "trial_count": 5000}),
    ("8-sided dice", {"dice_count": 4, "sides_per_die": 8, "magic_number": 4, "trial_count": 5000}),
    ("Quick test (1000 simulations)", {"trial_count": 1000}),
]


def display_configuration(config: GameConfig):
    """
    Print the configuration a run used.
    Args:
        config (GameConfig): The game configuration.
    """
    print(f"Configuration: {config}")


def display_results(results: SimulationResults):
    """
    Print the score distribution, one line per score in ascending order, followed by the run time.
    Args:
        results (SimulationResults): Output of a run.
    """
    stats = results.statistics
    print(f"Number of simulations was {stats.trial_count} using {results.config.dice_count} dice.")
    for score, count in results.sorted_items():
        print(f"Total {score} occurs {results.probability(score):.2f} occurred {float(count):.1f} times.")
    print(f"Total simulation took {stats.elapsed_seconds:.1f} seconds.")


def display_statistics(results: SimulationResults):
    """
    Print the statistical summary block.
    Args:
        results (SimulationResults): Output of a run.
    """
    stats = results.statistics
    print("\nStatistical Summary:")
    print(f"Mean Score: {stats.mean:.2f}")
    print(f"Min Score: {stats.min_score}")
    print(f"Max Score: {stats.max_score}")
    print(f"Mode Score: {stats.mode}")
    print(f"Unique Scores: {stats.unique_scores}")
    print(f"Performance: {stats.throughput:.0f} simulations/second")


def run_demo(base: GameConfig):
    """
    Run the base configuration with the full report, then each entry of CONFIG_EXAMPLES.
    Args:
        base (GameConfig): Configuration the examples are derived from.
    """
    print("Dice Game Simulation")
    print("=" * 60)
    print("Default Simulation:")
    print("-" * 50)
    results = run(base)
    display_configuration(base)
    print()
    display_results(results)
    display_statistics(results)

    print("\n" + "=" * 60 + "\n")
    print("Configuration Examples:")
    print("-" * 55)
    for i, (title, overrides) in enumerate(CONFIG_EXAMPLES, start=1):
        print(f"\n{i}. {title}:")
        config = replace(base, **overrides)
        results = run(config)
        display_configuration(config)
        display_results(results)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Monte Carlo simulation of the magic-number dice game')
    add_config_arguments(parser)
    parser.add_argument('--demo', action='store_true', help='Run the default simulation followed by several configuration examples')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log run progress')
    return parser


def add_config_arguments(parser: argparse.ArgumentParser):
    """
    Register the GameConfig flags on a parser. Shared with scripts/plot_distribution.py.
    """
    parser.add_argument('--dice', type=int, default=DEFAULT_DICE_COUNT, help='Dice in the starting pool')
    parser.add_argument('--sides', type=int, default=DEFAULT_SIDES_PER_DIE, help='Faces per die')
    parser.add_argument('--magic', type=int, default=DEFAULT_MAGIC_NUMBER, help='Face that removes dice without scoring')
    parser.add_argument('--sims', type=int, default=DEFAULT_TRIAL_COUNT, help='Number of trials')
    parser.add_argument('--workers', type=int, default=None, help='Worker processes (default: one per CPU)')
    parser.add_argument('--seed', type=int, default=None, help='Seed for a reproducible run')


def config_from_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> GameConfig:
    """
    Build a GameConfig from parsed flags, reporting invalid values through the parser.
    """
    try:
        return GameConfig(
            dice_count=args.dice,
            sides_per_die=args.sides,
            magic_number=args.magic,
            trial_count=args.sims,
            workers=args.workers,
            rng_seed=args.seed,
        )
    except ConfigError as e:
        parser.error(str(e))


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = config_from_args(parser, args)

    if args.demo:
        run_demo(config)
        return

    results = run(config)
    display_configuration(config)
    print()
    display_results(results)
    display_statistics(results)


if __name__ == "__main__":
    main(sys.argv[1:])
