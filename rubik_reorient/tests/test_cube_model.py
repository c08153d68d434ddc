# rubik_reorient/tests/test_cube_model.py
import unittest
from rubik_reorient.core import CubeModel


class TestCubeModel(unittest.TestCase):
    def test_starts_solved(self):
        c = CubeModel()
        self.assertTrue(c.is_solved())
        self.assertTrue(c.is_solved_any_orientation())

    def test_U_then_Uprime_returns(self):
        c = CubeModel()
        before = c.to_hashable()
        c.apply_move("U")
        c.apply_move("U'")
        self.assertEqual(before, c.to_hashable())

    def test_U2_equals_two_U(self):
        c1 = CubeModel()
        c2 = CubeModel()
        c1.apply_move("U2")
        c2.apply_move("U")
        c2.apply_move("U")
        self.assertEqual(c1.to_hashable(), c2.to_hashable())

    def test_F_then_Fprime_returns(self):
        c = CubeModel()
        before = c.to_hashable()
        c.apply_sequence("F F'")
        self.assertEqual(before, c.to_hashable())

    def test_four_quarter_turns_return(self):
        for mv in ["R", "L", "U", "D", "F", "B", "M", "E", "S", "Rw", "x", "y", "z"]:
            c = CubeModel()
            c.apply_moves([mv] * 4)
            self.assertTrue(c.is_solved(), mv)

    def test_U_sends_front_row_to_left(self):
        c = CubeModel()
        c.apply_move("U")
        self.assertEqual(c.state["L"][0:3], ["G"] * 3)
        self.assertEqual(c.state["F"][0:3], ["R"] * 3)

    def test_R_sends_front_column_up(self):
        c = CubeModel()
        c.apply_move("R")
        self.assertEqual([c.state["U"][i] for i in (2, 5, 8)], ["G"] * 3)

    def test_F_sends_up_row_to_right(self):
        c = CubeModel()
        c.apply_move("F")
        self.assertEqual([c.state["R"][i] for i in (2, 5, 8)], ["W"] * 3)

    def test_rotations_follow_their_faces(self):
        c = CubeModel()
        c.apply_move("x")
        self.assertEqual(c.state["U"], ["G"] * 9)

        c = CubeModel()
        c.apply_move("y")
        self.assertEqual(c.state["L"], ["G"] * 9)

        c = CubeModel()
        c.apply_move("z")
        self.assertEqual(c.state["R"], ["W"] * 9)

    def test_x_equals_R_Mprime_Lprime(self):
        c1 = CubeModel()
        c2 = CubeModel()
        c1.apply_move("x")
        c2.apply_sequence("R M' L'")
        self.assertEqual(c1.to_hashable(), c2.to_hashable())

    def test_wide_move_equals_face_plus_slice(self):
        c1 = CubeModel()
        c2 = CubeModel()
        c3 = CubeModel()
        c1.apply_move("Rw")
        c2.apply_sequence("R M'")
        c3.apply_sequence("x L")
        self.assertEqual(c1.to_hashable(), c2.to_hashable())
        self.assertEqual(c1.to_hashable(), c3.to_hashable())

    def test_rotation_is_solved_in_some_orientation(self):
        c = CubeModel()
        c.apply_sequence("x y")
        self.assertFalse(c.is_solved())
        self.assertTrue(c.is_solved_any_orientation())

    def test_copy_is_independent(self):
        c = CubeModel()
        d = c.copy()
        d.apply_move("R")
        self.assertTrue(c.is_solved())
        self.assertFalse(d.is_solved())

    def test_invalid_move_raises(self):
        c = CubeModel()
        with self.assertRaises(ValueError):
            c.apply_move("Q")
        with self.assertRaises(ValueError):
            c.apply_move("R3")

    def test_color_counts_remain_constant(self):
        c = CubeModel()
        # aplica varios movimientos
        c.apply_sequence("R U R' U' L D L' D' U2 R2 Fw x' S")

        flat = []
        for face in c.FACES:
            flat.extend(c.state[face])

        # Cada color debe aparecer 9 veces
        for color in ["W", "Y", "O", "R", "G", "B"]:
            self.assertEqual(flat.count(color), 9)


if __name__ == "__main__":
    unittest.main()
