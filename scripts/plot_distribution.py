"""
Run one simulation and render its score distribution as a bar chart.
Usage:
    python -m scripts.plot_distribution --dice 5 --sims 100000 --out distribution.png
"""
import argparse

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from magic_dice.simulation.runner import SimulationResults, run
from UI.cli import add_config_arguments, config_from_args


def plot_distribution(results: SimulationResults, out_path: str):
    scores = [score for score, _ in results.sorted_items()]
    probs = [results.probability(score) * 100.0 for score in scores]
    stats = results.statistics

    width = max(6, int(len(scores) * 0.35))
    plt.figure(figsize=(width, 4))
    bars = plt.bar([str(s) for s in scores], probs, color='C0')
    plt.xlabel('Final score')
    plt.ylabel('Probability (%)')
    plt.title(f'{results.config} (mean {stats.mean:.2f}, mode {stats.mode})')
    # labels get unreadable past a couple dozen bars
    if len(scores) <= 25:
        for rect, val in zip(bars, probs):
            plt.text(rect.get_x() + rect.get_width() / 2.0, rect.get_height() + 0.2, f"{val:.1f}", ha='center', va='bottom', fontsize=7)
    plt.tight_layout()
    plt.savefig(out_path)
    plt.close()


def main():
    parser = argparse.ArgumentParser(description='Plot the final-score distribution of a simulation run')
    add_config_arguments(parser)
    parser.add_argument('--out', type=str, default='distribution.png', help='Image file to write')
    args = parser.parse_args()

    config = config_from_args(parser, args)
    results = run(config)
    plot_distribution(results, args.out)
    print(f"Saved chart for {config} to {args.out}")


if __name__ == '__main__':
    main()
