"""
Unit tests for the command-line front end.
"""

import io
import re
import unittest
from contextlib import redirect_stderr, redirect_stdout

from cubesearch.cli import format_results, main


def run_main(*argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(list(argv))
    return code, out.getvalue(), err.getvalue()


class TestMain(unittest.TestCase):
    """Test cases for main()."""

    def test_draw_only(self):
        """Test drawing a cube without searching."""
        code, out, _ = run_main("3", "X0", "--no-color")
        self.assertEqual(code, 0)
        lines = out.split("\n")
        self.assertEqual(lines[0], "X0")
        self.assertNotIn("sequence", out)

    def test_search(self):
        """Test search mode with a single move."""
        code, out, _ = run_main("-3", "X0", "--no-color")
        self.assertEqual(code, 0)
        lines = out.rstrip("\n").split("\n")
        self.assertEqual(lines[-2], "1 sequence from 18 exploratory moves:")
        self.assertEqual(lines[-1], "X0")

    def test_search_output_format(self):
        """Test the summary line and the tab-separated result lines."""
        code, out, _ = run_main("-2", "X0", "Y1", "--no-color")
        self.assertEqual(code, 0)
        lines = out.rstrip("\n").split("\n")
        summary = next(i for i, line in enumerate(lines) if "exploratory" in line)
        self.assertRegex(lines[summary], r"^\d+ sequences? from \d+ exploratory moves?:$")
        found = int(re.match(r"\d+", lines[summary]).group())
        results = [s for line in lines[summary + 1:] for s in line.split("\t")]
        self.assertEqual(len(results), found)
        self.assertIn("X0Y1", results)
        for line in lines[summary + 1:]:
            self.assertLessEqual(len(line.split("\t")), 4)

    def test_search_without_moves(self):
        """Test that search mode without moves only draws the cube."""
        code, out, _ = run_main("-3", "--no-color")
        self.assertEqual(code, 0)
        self.assertNotIn("sequence", out)

    def test_net(self):
        """Test the net layout."""
        code, out, _ = run_main("2", "--net", "--no-color")
        self.assertEqual(code, 0)
        self.assertIn("O O  G G  R R  B B", out)

    def test_moves_joined_by_newlines(self):
        """Test that a comment ends with its argument."""
        code, out, _ = run_main("3", "X0#comment", "Y1", "--no-color")
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("X0#comment\nY1\n"))

    def test_invalid_coordinate(self):
        """Test that malformed moves exit with status 1."""
        code, out, err = run_main("3", "X5", "--no-color")
        self.assertEqual(code, 1)
        self.assertIn("Invalid coordinate", err)
        self.assertEqual(out, "")

    def test_invalid_size(self):
        """Test that bad sizes exit with status 1."""
        for argv in ([], ["0"], ["11"], ["-11"], ["abc"]):
            with self.assertRaises(SystemExit) as ctx:
                run_main(*argv)
            self.assertEqual(ctx.exception.code, 1, argv)


class TestFormatResults(unittest.TestCase):
    """Test cases for format_results()."""

    def test_groups(self):
        """Test grouping into lines."""
        lines = format_results(["a", "b", "c", "d", "e", "f"], 4)
        self.assertEqual(lines, ["a\tb\tc\td", "e\tf"])

    def test_empty(self):
        """Test that no results give no lines."""
        self.assertEqual(format_results([], 4), [])


if __name__ == '__main__':
    unittest.main()
