# rubik_reorient/tests/test_cli.py
import io
import logging
import unittest

from rubik_reorient.cli import PROMPT, build_parser, main, run_loop
from rubik_reorient.config import SearchConfig
from rubik_reorient.solve.pruning_table import PruningTable


class TestCli(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.table = PruningTable(2)

    def _run(self, text, config=None):
        stdout = io.StringIO()
        stderr = io.StringIO()
        code = run_loop(config or SearchConfig(), self.table, io.StringIO(text), stdout, stderr)
        return code, stdout.getvalue(), stderr.getvalue()

    def test_parser(self):
        args = build_parser().parse_args(["-c", "xy", "z2", "-c", "y", "-a", "-m", "2", "-s"])
        self.assertEqual(args.cheap_moves, ["xy", "z2", "y"])
        self.assertTrue(args.show_all)
        self.assertTrue(args.stickers)
        self.assertEqual(args.max_depth, 2)
        self.assertEqual(args.depth, 2)
        self.assertEqual(args.loglevel, logging.WARNING)

    def test_loop_reports_solutions(self):
        code, out, err = self._run("R U\n")
        self.assertEqual(code, 0)
        self.assertEqual(err, "")
        self.assertIn("Found 4 solutions with 1 reorients (3 STM).", out)
        self.assertIn("1 of them add only 1 ETM.", out)
        self.assertIn("R Oz' U\n", out)
        self.assertNotIn("R Oyx U", out)
        self.assertEqual(out.count(PROMPT), 2)

    def test_loop_show_all(self):
        _code, out, _err = self._run("R U\n", SearchConfig(show_all=True))
        self.assertIn("R Oyx U\n", out)
        self.assertNotIn("of them add only", out)

    def test_loop_continues_after_bad_input(self):
        code, out, err = self._run("R Q\nM\nR\n")
        self.assertEqual(code, 0)
        self.assertIn("Q", err)
        self.assertIn("M", err)
        self.assertIn("Found 1 solutions with 0 reorients (1 STM).", out)
        self.assertIn("R\n", out)

    def test_main_rejects_unknown_cheap_move(self):
        self.assertEqual(main(["-c", "nope"]), 2)

    def test_logger_is_silent_without_configuration(self):
        handlers = logging.getLogger("rubik_reorient.cli").handlers
        self.assertTrue(any(isinstance(h, logging.NullHandler) for h in handlers))


if __name__ == "__main__":
    unittest.main()
