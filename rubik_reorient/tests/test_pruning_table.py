# rubik_reorient/tests/test_pruning_table.py
import unittest

from rubik_reorient.core import CubeModel
from rubik_reorient.logic.reorient import Reorient
from rubik_reorient.solve.pruning_table import PruningTable, reoriented_solved_states


class TestPruningTable(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.layers = []
        cls.table = PruningTable(2, on_layer=lambda d, n: cls.layers.append((d, n)))

    def test_layers_reported(self):
        self.assertEqual([d for d, _ in self.layers], [0, 1, 2])
        self.assertEqual(self.layers[0], (0, 24))
        self.assertEqual(len(self.table), sum(n for _, n in self.layers))

    def test_solved_in_any_orientation_is_zero(self):
        self.assertEqual(self.table.lower_bound(CubeModel()), 0)
        for state in reoriented_solved_states():
            self.assertEqual(self.table.lower_bound(state), 0)

    def test_distances(self):
        c = CubeModel()
        c.apply_move("R")
        self.assertEqual(self.table.lower_bound(c), 1)
        c.apply_move("U")
        self.assertEqual(self.table.lower_bound(c), 2)
        c.apply_move("F")
        # Fuera de la tabla: depth + 1
        self.assertEqual(self.table.lower_bound(c), 3)

    def test_invariant_under_reorientation(self):
        for seq in ["R", "R U", "R U F", "F2 D'"]:
            base = CubeModel()
            base.apply_sequence(seq)
            expected = self.table.lower_bound(base)
            for r in Reorient.ALL:
                rotated = base.copy().apply_moves(r.equivalent_moves())
                self.assertEqual(self.table.lower_bound(rotated), expected, (seq, r))

    def test_negative_depth_raises(self):
        with self.assertRaises(ValueError):
            PruningTable(-1)


if __name__ == "__main__":
    unittest.main()
