import unittest

from ludo_duel.game import resolve_roll
from ludo_duel.state import GameState
from ludo_duel.types import Color, OutcomeKind, Position


def make_state(red, blue, current=Color.RED):
    return GameState(positions=(red, blue), current_player=current)


class TestCapturesAndWins(unittest.TestCase):
    def test_capture(self):
        start = make_state(Position.on_track(5), Position.on_track(8))
        state, outcome = resolve_roll(start, 3)
        self.assertEqual(state.position_of(Color.RED), Position.on_track(8))
        self.assertTrue(state.position_of(Color.BLUE).is_base)
        self.assertEqual(outcome.kind, OutcomeKind.CAPTURED)
        self.assertEqual(outcome.events.captured, Color.BLUE)
        self.assertEqual(state.current_player, Color.BLUE)

    def test_capture_on_entry_cell(self):
        # Red waits on Blue's entry cell; Blue comes out with a 6 and captures it
        start = make_state(Position.on_track(14), Position.base(), current=Color.BLUE)
        state, outcome = resolve_roll(start, 6)
        self.assertEqual(state.position_of(Color.BLUE), Position.on_track(14))
        self.assertTrue(state.position_of(Color.RED).is_base)
        self.assertEqual(outcome.events.captured, Color.RED)
        self.assertTrue(outcome.events.entered)

    def test_capture_across_wrap(self):
        start = make_state(Position.on_track(1), Position.on_track(26), current=Color.BLUE)
        state, outcome = resolve_roll(start, 3)
        self.assertEqual(state.position_of(Color.BLUE), Position.on_track(1))
        self.assertTrue(state.position_of(Color.RED).is_base)
        self.assertEqual(outcome.kind, OutcomeKind.CAPTURED)

    def test_no_capture_on_other_cell(self):
        start = make_state(Position.on_track(5), Position.on_track(9))
        state, outcome = resolve_roll(start, 3)
        self.assertEqual(state.position_of(Color.BLUE), Position.on_track(9))
        self.assertIsNone(outcome.events.captured)
        self.assertEqual(outcome.kind, OutcomeKind.MOVED)

    def test_exact_landing_on_entry_goes_home(self):
        start = make_state(Position.on_track(25), Position.base())
        state, outcome = resolve_roll(start, 3)
        self.assertTrue(state.position_of(Color.RED).is_home)
        self.assertEqual(outcome.kind, OutcomeKind.REACHED_HOME)
        self.assertTrue(outcome.events.reached_home)
        self.assertEqual(state.current_player, Color.BLUE)

    def test_blue_goes_home_on_its_entry(self):
        start = make_state(Position.base(), Position.on_track(10), current=Color.BLUE)
        state, outcome = resolve_roll(start, 4)
        self.assertTrue(state.position_of(Color.BLUE).is_home)
        self.assertEqual(outcome.kind, OutcomeKind.REACHED_HOME)

    def test_overshoot_keeps_cycling(self):
        start = make_state(Position.on_track(25), Position.base())
        state, outcome = resolve_roll(start, 4)
        self.assertEqual(state.position_of(Color.RED), Position.on_track(1))
        self.assertEqual(outcome.kind, OutcomeKind.MOVED)

    def test_landing_on_opponent_entry_is_not_home(self):
        start = make_state(Position.on_track(11), Position.base())
        state, _ = resolve_roll(start, 3)
        self.assertEqual(state.position_of(Color.RED), Position.on_track(14))

    def test_home_is_terminal(self):
        state = make_state(Position.home(), Position.on_track(3))
        for dice in range(1, 7):
            state = GameState(positions=state.positions, current_player=Color.RED)
            state, outcome = resolve_roll(state, dice)
            self.assertTrue(state.position_of(Color.RED).is_home)
            self.assertEqual(outcome.kind, OutcomeKind.ALREADY_HOME)
            self.assertFalse(outcome.extra_turn)
            self.assertEqual(state.current_player, Color.BLUE)


if __name__ == "__main__":
    unittest.main()
