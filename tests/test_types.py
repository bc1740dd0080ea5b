import dataclasses
import unittest

from ludo_duel.state import GameState
from ludo_duel.types import Color, Position, PositionKind


class TestPosition(unittest.TestCase):
    def test_constructors(self):
        self.assertTrue(Position.base().is_base)
        self.assertTrue(Position.home().is_home)
        pos = Position.on_track(4)
        self.assertTrue(pos.is_on_track)
        self.assertEqual(pos.index, 4)
        self.assertEqual(str(pos), "ON_TRACK(4)")
        self.assertEqual(str(Position.home()), "HOME")

    def test_illegal_positions_rejected(self):
        with self.assertRaises(ValueError):
            Position(PositionKind.ON_TRACK)
        with self.assertRaises(ValueError):
            Position.on_track(-1)
        with self.assertRaises(ValueError):
            Position(PositionKind.BASE, 3)
        with self.assertRaises(ValueError):
            Position(PositionKind.HOME, 0)

    def test_equality_and_immutability(self):
        self.assertEqual(Position.on_track(3), Position.on_track(3))
        self.assertNotEqual(Position.on_track(3), Position.on_track(4))
        with self.assertRaises(dataclasses.FrozenInstanceError):
            Position.base().kind = PositionKind.HOME


class TestColor(unittest.TestCase):
    def test_names_and_opponent(self):
        self.assertEqual(Color.RED.display_name, "Red")
        self.assertEqual(Color.BLUE.display_name, "Blue")
        self.assertEqual(Color.RED.opponent, Color.BLUE)
        self.assertEqual(Color.BLUE.opponent, Color.RED)


class TestGameState(unittest.TestCase):
    def test_shared_cell_rejected(self):
        with self.assertRaises(ValueError):
            GameState(positions=(Position.on_track(3), Position.on_track(3)))

    def test_last_roll_range(self):
        with self.assertRaises(ValueError):
            GameState(positions=(Position.base(), Position.base()), last_roll=7)

    def test_positions_by_color(self):
        state = GameState(positions=(Position.base(), Position.on_track(14)))
        self.assertEqual(state.position_of(Color.BLUE), Position.on_track(14))
        self.assertTrue(state.position_of(Color.RED).is_base)
        self.assertEqual(
            state.positions_by_color(),
            {Color.RED: Position.base(), Color.BLUE: Position.on_track(14)},
        )

    def test_current_player_normalised(self):
        state = GameState(positions=(Position.base(), Position.base()), current_player=1)
        self.assertIs(state.current_player, Color.BLUE)


if __name__ == "__main__":
    unittest.main()
