import random
import unittest
from magic_dice.core.dice import roll_n
from magic_dice.core.rules import RollOutcome, count_matches, process_roll


class TestRules(unittest.TestCase):
    def test_count_matches(self):
        self.assertEqual(count_matches([3, 1, 3, 6], 3), 2)
        self.assertEqual(count_matches([1, 2], 3), 0)

    def test_magic_roll_scores_nothing_and_removes_magic_dice(self):
        self.assertEqual(process_roll([3, 6, 6, 5], 3), RollOutcome(0, 1))
        self.assertEqual(process_roll([3, 1, 3], 3), RollOutcome(0, 2))
        # a low die alongside the magic number still scores nothing
        self.assertEqual(process_roll([1, 3], 3), RollOutcome(0, 1))

    def test_no_magic_scores_lowest_and_removes_one(self):
        self.assertEqual(process_roll([5, 2, 6], 3), RollOutcome(2, 1))
        self.assertEqual(process_roll([4], 3), RollOutcome(4, 1))

    def test_empty_roll_rejected(self):
        with self.assertRaises(ValueError):
            process_roll([], 3)


class TestDice(unittest.TestCase):
    def test_roll_n_respects_sides(self):
        rng = random.Random(5)
        faces = roll_n(500, rng, sides=8)
        self.assertEqual(len(faces), 500)
        self.assertTrue(all(1 <= f <= 8 for f in faces))
        self.assertEqual(set(faces), set(range(1, 9)))

    def test_roll_zero_dice(self):
        self.assertEqual(roll_n(0, random.Random(1)), [])


if __name__ == '__main__':
    unittest.main()
