import unittest

from nighttrain.narrator import BufferNarrator
from nighttrain.state import GameState
from nighttrain.tracker import Tracker


class TestTracker(unittest.TestCase):
    def setUp(self):
        self.state = GameState()
        self.narrator = BufferNarrator()
        self.tracker = Tracker(self.state, self.narrator)

    def test_achievement_announced_once(self):
        self.assertTrue(self.tracker.unlock_achievement("Codebreaker"))
        self.assertFalse(self.tracker.unlock_achievement("Codebreaker"))
        self.assertEqual(self.state.achievements, ["Codebreaker"])
        self.assertEqual(self.narrator.lines, ["🏅 Achievement unlocked: Codebreaker"])

    def test_endings_are_recorded_silently(self):
        self.assertTrue(self.tracker.unlock_ending("Off The Map"))
        self.assertFalse(self.tracker.unlock_ending("Off The Map"))
        self.assertTrue(self.tracker.unlock_ending("Station Walkthrough"))
        self.assertEqual(self.state.endings_unlocked, ["Off The Map", "Station Walkthrough"])
        self.assertEqual(self.narrator.lines, [])

    def test_finish_run_prints_summary(self):
        self.tracker.unlock_achievement("Wrong Universe")
        self.tracker.unlock_ending("Standard Escape")
        self.narrator.take()

        self.tracker.finish_run()

        self.assertTrue(self.state.game_over)
        self.assertEqual(self.narrator.lines, [
            "",
            "Summary:",
            "Achievements earned this run:",
            "- Wrong Universe",
            "Endings unlocked so far:",
            "- Standard Escape",
            "Restart the game to play again.",
        ])

    def test_summary_without_achievements(self):
        text = [line for line, _ in self.tracker.summary_lines()]
        self.assertIn("No achievements earned this run.", text)
        self.assertNotIn("Endings unlocked so far:", text)


if __name__ == '__main__':
    unittest.main()
