# rubik_reorient/tests/test_reorient.py
import unittest
from collections import Counter

from rubik_reorient.config import SearchConfig
from rubik_reorient.core import CubeModel
from rubik_reorient.logic.reorient import Reorient


class TestReorientCatalog(unittest.TestCase):
    def test_catalog_has_24_members(self):
        self.assertEqual(len(Reorient.ALL), 24)
        self.assertIs(Reorient.ALL[0], Reorient.NONE)
        self.assertEqual(len(set(Reorient.ALL)), 24)

    def test_base_costs_by_class(self):
        costs = Counter(r.base_cost for r in Reorient.ALL)
        self.assertEqual(costs, Counter({0: 1, 1: 6, 2: 3 + 8, 3: 6}))
        self.assertEqual(Reorient.R.base_cost, 1)
        self.assertEqual(Reorient.U2.base_cost, 2)
        self.assertEqual(Reorient.UF.base_cost, 3)
        self.assertEqual(Reorient.DBL.base_cost, 2)

    def test_each_member_reaches_a_distinct_orientation(self):
        states = set()
        for r in Reorient.ALL:
            c = CubeModel().apply_moves(r.equivalent_moves())
            self.assertTrue(c.is_solved_any_orientation(), r)
            states.add(c.to_hashable())
        self.assertEqual(len(states), 24)

    def test_equivalent_moves_length(self):
        self.assertEqual(Reorient.NONE.equivalent_moves(), ())
        self.assertEqual(Reorient.B.equivalent_moves(), ("z'",))
        self.assertEqual(Reorient.UF.equivalent_moves(), ("x", "y2"))

    def test_display_tokens(self):
        self.assertEqual(Reorient.NONE.display(), " ")
        self.assertEqual(Reorient.NONE.display(sticker_notation=True), " ")
        self.assertEqual(Reorient.R.display(), " Ox ")
        self.assertEqual(Reorient.R.display(sticker_notation=True), " 23I:L ")
        self.assertEqual(Reorient.DBL.display(), " Oy'x' ")
        self.assertEqual(Reorient.DF.display(sticker_notation=True), " 23I:DF ")

    def test_token_notations_are_unique(self):
        xyz = [r.xyz_token for r in Reorient.ALL if not r.is_none()]
        stickers = [r.sticker_token for r in Reorient.ALL if not r.is_none()]
        self.assertEqual(len(set(xyz)), 23)
        self.assertEqual(len(set(stickers)), 23)

    def test_from_name(self):
        self.assertIs(Reorient.from_name("xy"), Reorient.UFR)
        self.assertIs(Reorient.from_name("Oxy"), Reorient.UFR)
        self.assertIs(Reorient.from_name("23I:UFR"), Reorient.DBL)
        self.assertIs(Reorient.from_name("DF"), Reorient.DF)
        self.assertIs(Reorient.from_name("x2"), Reorient.R2)
        with self.assertRaises(ValueError):
            Reorient.from_name("nope")


class TestCost(unittest.TestCase):
    def test_identity_cost_is_always_zero(self):
        self.assertEqual(Reorient.NONE.cost(), 0)
        self.assertEqual(Reorient.NONE.cost(frozenset(Reorient.ALL)), 0)
        config = SearchConfig(cheap_moves=frozenset({Reorient.NONE}))
        self.assertEqual(config.cost(Reorient.NONE), 0)

    def test_cheap_override_forces_one(self):
        for r in Reorient.ALL:
            if r.is_none():
                continue
            config = SearchConfig(cheap_moves=frozenset({r}))
            self.assertEqual(config.cost(r), 1)
            self.assertLessEqual(config.cost(r), r.base_cost)

    def test_uncheap_members_keep_base_cost(self):
        config = SearchConfig.from_names(["xy"])
        self.assertEqual(config.cost(Reorient.UFR), 1)
        self.assertEqual(config.cost(Reorient.DBL), 2)
        self.assertEqual(config.cost(Reorient.UF), 3)


class TestSearchConfig(unittest.TestCase):
    def test_defaults(self):
        config = SearchConfig()
        self.assertEqual(config.pruning_depth, 2)
        self.assertEqual(config.max_depth, 3)
        self.assertFalse(config.sticker_notation)
        self.assertFalse(config.show_all)
        self.assertEqual(config.cheap_moves, frozenset())

    def test_from_names(self):
        config = SearchConfig.from_names(["xy", "23I:F", " "], max_depth=1)
        self.assertEqual(config.cheap_moves, frozenset({Reorient.UFR, Reorient.B}))
        self.assertEqual(config.max_depth, 1)

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            SearchConfig(pruning_depth=1)
        with self.assertRaises(ValueError):
            SearchConfig(max_depth=-1)
        with self.assertRaises(ValueError):
            SearchConfig.from_names(["nope"])

    def test_is_immutable(self):
        config = SearchConfig()
        with self.assertRaises(AttributeError):
            config.max_depth = 5


if __name__ == "__main__":
    unittest.main()
