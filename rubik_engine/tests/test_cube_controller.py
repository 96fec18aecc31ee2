import unittest

from PySide6.QtCore import QCoreApplication

from rubik_engine.app.cube_controller import CubeController
from rubik_engine.core import CubeState, Move
from rubik_engine.core.errors import InvalidMoveNotation
from rubik_engine.logic.move_engine import apply_move


class TestCubeController(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = QCoreApplication.instance() or QCoreApplication([])

    def setUp(self):
        self.c = CubeController()
        self.moves = []
        self.states = []
        self.solved_count = 0
        self.c.move_applied.connect(lambda old, new, mv: self.moves.append((old, new, mv)))
        self.c.state_changed.connect(lambda s: self.states.append(s))
        self.c.solved.connect(self._on_solved)

    def _on_solved(self):
        self.solved_count += 1

    def test_starts_solved(self):
        self.assertTrue(self.c.is_solved())
        self.assertEqual(self.c.state, CubeState.solved())

    def test_move_applied_carries_old_new_and_move(self):
        before = self.c.state
        after = self.c.apply_move(Move.R)
        self.assertEqual(len(self.moves), 1)
        old, new, mv = self.moves[0]
        self.assertIs(old, before)
        self.assertIs(new, after)
        self.assertEqual(mv, Move.R)
        self.assertEqual(new, apply_move(before, Move.R))
        self.assertTrue(old.is_solved())
        self.assertEqual(self.states, [after])

    def test_notation_emits_one_signal_per_move(self):
        self.c.apply_notation("R U R' U'")
        self.assertEqual([m for _, _, m in self.moves], [Move.R, Move.U, Move.R_PRIME, Move.U_PRIME])
        for (_, new, _), (old, _, _) in zip(self.moves, self.moves[1:]):
            self.assertIs(new, old)

    def test_bad_notation_leaves_state_untouched(self):
        with self.assertRaises(InvalidMoveNotation):
            self.c.apply_notation("R U X")
        self.assertEqual(self.moves, [])
        self.assertTrue(self.c.is_solved())

    def test_solved_signal(self):
        self.c.apply_move(Move.F)
        self.assertEqual(self.solved_count, 0)
        self.c.apply_move(Move.F_PRIME)
        self.assertEqual(self.solved_count, 1)

    def test_scramble(self):
        seq = self.c.scramble(12)
        self.assertEqual(len(seq), 12)
        self.assertEqual(len(self.moves), 12)
        self.assertTrue(self.c.state.validate())

    def test_reset_and_load(self):
        self.c.apply_move(Move.B2)
        self.c.reset()
        self.assertTrue(self.c.is_solved())
        self.assertEqual(self.states[-1], CubeState.solved())

        other = apply_move(CubeState.solved(), Move.L)
        self.c.load(other)
        self.assertIs(self.c.state, other)


if __name__ == "__main__":
    unittest.main()
