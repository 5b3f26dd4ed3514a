import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from types import MappingProxyType

from magic_dice.core.config import GameConfig
from magic_dice.simulation.runner import SimulationResults
from magic_dice.simulation.statistics import compute_statistics
from UI.cli import display_results, display_statistics, main, run_demo


def _results():
    cfg = GameConfig(dice_count=2, trial_count=4)
    table = {0: 1, 3: 3}
    stats = compute_statistics(table, trial_count=4, elapsed_seconds=2.0)
    return SimulationResults(config=cfg, frequencies=MappingProxyType(table), statistics=stats)


class TestCliOutput(unittest.TestCase):
    def test_display_results_lines(self):
        out = io.StringIO()
        with redirect_stdout(out):
            display_results(_results())
        self.assertEqual(out.getvalue().splitlines(), [
            "Number of simulations was 4 using 2 dice.",
            "Total 0 occurs 0.25 occurred 1.0 times.",
            "Total 3 occurs 0.75 occurred 3.0 times.",
            "Total simulation took 2.0 seconds.",
        ])

    def test_display_statistics_block(self):
        out = io.StringIO()
        with redirect_stdout(out):
            display_statistics(_results())
        lines = out.getvalue().splitlines()
        self.assertEqual(lines[1], "Statistical Summary:")
        self.assertIn("Mean Score: 2.25", lines)
        self.assertIn("Mode Score: 3", lines)
        self.assertIn("Unique Scores: 2", lines)
        self.assertIn("Performance: 2 simulations/second", lines)

    def test_main_runs_configured_simulation(self):
        out = io.StringIO()
        with redirect_stdout(out):
            main(["--dice", "3", "--sims", "200", "--workers", "1", "--seed", "5"])
        text = out.getvalue()
        self.assertIn("Configuration: GameConfig[dice=3, sides=6, magic=3, sims=200]", text)
        self.assertIn("Number of simulations was 200 using 3 dice.", text)
        self.assertIn("Statistical Summary:", text)

    def test_invalid_config_exits_with_usage_error(self):
        err = io.StringIO()
        with redirect_stderr(err):
            with self.assertRaises(SystemExit) as ctx:
                main(["--magic", "9"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("magic_number", err.getvalue())

    def test_demo_runs_every_example(self):
        out = io.StringIO()
        with redirect_stdout(out):
            run_demo(GameConfig(trial_count=500, workers=1, rng_seed=9))
        text = out.getvalue()
        self.assertIn("GameConfig[dice=3, sides=6, magic=3, sims=5000]", text)
        self.assertIn("GameConfig[dice=5, sides=6, magic=2, sims=5000]", text)
        self.assertIn("GameConfig[dice=4, sides=8, magic=4, sims=5000]", text)
        self.assertIn("GameConfig[dice=5, sides=6, magic=3, sims=1000]", text)
        self.assertEqual(text.count("Statistical Summary:"), 1)


if __name__ == '__main__':
    unittest.main()
