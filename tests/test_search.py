"""
Unit tests for the move search.
"""

import unittest
from unittest import mock

from cubesearch.cube import Cube
from cubesearch.exceptions import CubeSizeMismatchError, InvalidAxisError, InvalidSearchBoundError
from cubesearch.moves import Axis, Move, parse_moves
from cubesearch.operations import all_moves
from cubesearch.search import LayerUsage, SearchResult, Trail, find_moves


def pairs(sequence):
    """Split a sequence string into its two-character moves."""
    return [sequence[i:i + 2] for i in range(0, len(sequence), 2)]


def trail_of(text):
    trail = Trail()
    for move in parse_moves(text, 9):
        trail = trail.extend(move)
    return trail


class TestLayerUsage(unittest.TestCase):
    """Test cases for the double move tracker."""

    def test_flags(self):
        """Test setting and reading flags."""
        usage = LayerUsage(3)
        self.assertFalse(usage.has_flag('X', 1))
        usage.set_flag('X', 1)
        self.assertTrue(usage.has_flag(Axis.X_POS, 1))
        self.assertFalse(usage.has_flag('x', 1))
        self.assertFalse(usage.has_flag('X', 0))

    def test_invalid_axis(self):
        """Test that invalid axes raise InvalidAxisError."""
        usage = LayerUsage(2)
        with self.assertRaises(InvalidAxisError):
            usage.set_flag('w', 0)


class TestTrail(unittest.TestCase):
    """Test cases for the Trail class."""

    def test_empty(self):
        """Test the empty trail."""
        trail = Trail()
        self.assertEqual(len(trail), 0)
        self.assertEqual(list(trail), [])
        self.assertEqual(str(trail), "")

    def test_most_recent_first(self):
        """Test iteration order and the chronological string."""
        trail = trail_of("X0 y1 Z2")
        self.assertEqual(len(trail), 3)
        self.assertEqual([str(m) for m in trail], ["Z2", "y1", "X0"])
        self.assertEqual(str(trail), "X0y1Z2")

    def test_extend_shares_history(self):
        """Test that extending a trail leaves the original unchanged."""
        base = trail_of("X0")
        longer = base.extend(Move.of("Y1"))
        self.assertEqual(str(base), "X0")
        self.assertEqual(str(longer), "X0Y1")
        self.assertIs(longer.parent, base)

    def test_materialize(self):
        """Test replaying a trail on a cube."""
        cube = Cube(3)
        trail = trail_of("X0 y1 Z2")
        self.assertEqual(trail.materialize(cube), cube.move(parse_moves("X0 y1 Z2", 2)))

    def test_completes_rotation(self):
        """Test detection of whole-cube rotations."""
        self.assertTrue(trail_of("X0").completes_rotation(Move.of("X1"), 2))
        self.assertFalse(trail_of("X0").completes_rotation(Move.of("x1"), 2))
        self.assertFalse(trail_of("Y0").completes_rotation(Move.of("X1"), 2))
        self.assertTrue(trail_of("X2 X0").completes_rotation(Move.of("X1"), 3))
        self.assertFalse(trail_of("X0 X0").completes_rotation(Move.of("X2"), 3))
        self.assertFalse(trail_of("X0 X1 Y0").completes_rotation(Move.of("X2"), 3))


class TestFindMoves(unittest.TestCase):
    """Test cases for find_moves."""

    def test_single_move_size_three(self):
        """Test finding a single move on a 3x3x3 cube."""
        src = Cube(3)
        dst = src.move(parse_moves("X0", 2))
        result = find_moves(src, dst, 1)
        self.assertIsInstance(result, SearchResult)
        self.assertEqual(result.sequences, ["X0"])
        self.assertEqual(result.explored, 18)

    def test_every_single_move_size_two(self):
        """Test that each single move is found as the only solution."""
        src = Cube(2)
        for move in all_moves(2):
            sequences, explored = find_moves(src, src.move([move]), 1)
            self.assertEqual(sequences, [str(move)])
            self.assertEqual(explored, 12)

    def test_zero_length(self):
        """Test searching without any moves."""
        self.assertEqual(find_moves(Cube(3), Cube(3), 0), SearchResult([""], 0))
        dst = Cube(3).move(parse_moves("X0", 2))
        self.assertEqual(find_moves(Cube(3), dst, 0), SearchResult([], 0))

    def test_equal_cubes_not_extended(self):
        """Test that a matching trail is not explored further."""
        self.assertEqual(find_moves(Cube(2), Cube(2), 3), SearchResult([""], 0))

    def test_solutions_reach_target(self):
        """Test that every found sequence produces the target."""
        src = Cube(2)
        dst = src.move(parse_moves("X0 Y1", 1))
        sequences, _ = find_moves(src, dst, 3)
        self.assertIn("X0Y1", sequences)
        for sequence in sequences:
            self.assertEqual(src.move(parse_moves(sequence, 1)), dst, sequence)

    def test_shortest_first(self):
        """Test that sequences are reported in non-decreasing length."""
        src = Cube(2)
        dst = src.move(parse_moves("Z0 x1", 1))
        sequences, _ = find_moves(src, dst, 3)
        lengths = [len(s) for s in sequences]
        self.assertEqual(lengths, sorted(lengths))

    def test_no_reverse_pairs(self):
        """Test that no solution contains a move followed by its reverse."""
        src = Cube(2)
        dst = src.move(parse_moves("X0 Y1 z0", 1))
        sequences, _ = find_moves(src, dst, 3)
        self.assertIn("X0Y1z0", sequences)
        for sequence in sequences:
            moves = pairs(sequence)
            for first, second in zip(moves, moves[1:]):
                self.assertNotEqual(first, second.swapcase(), sequence)

    def test_no_triple_moves(self):
        """Test that three identical moves in a row are pruned."""
        src = Cube(3)
        dst = src.move(parse_moves("3X0", 2))
        sequences, _ = find_moves(src, dst, 3)
        self.assertIn("x0", sequences)
        self.assertNotIn("X0X0X0", sequences)

    def test_double_move_kept_once(self):
        """Test that a 180 degree turn is only reported in one sense."""
        src = Cube(3)
        dst = src.move(parse_moves("2X0", 2))
        sequences, _ = find_moves(src, dst, 2)
        self.assertIn("X0X0", sequences)
        self.assertNotIn("x0x0", sequences)

    def test_double_move_tracker_reset_per_depth(self):
        """Test that a double move found at a shallower depth doesn't block a deeper one."""
        src = Cube(2)
        dst = src.move(parse_moves("Y1 X0 X0", 1))
        self.assertEqual(find_moves(src, dst, 3).sequences, ["Y1X0X0"])

        dst = src.move(parse_moves("Y0 2X0", 1))
        sequences, _ = find_moves(src, dst, 3)
        self.assertIn("Y0X0X0", sequences)
        self.assertNotIn("Y0x0x0", sequences)

    def test_whole_cube_rotation_pruned(self):
        """Test that turning every layer the same way is not reported."""
        src = Cube(2)
        dst = src.move(parse_moves("X0 X1", 1))
        sequences, _ = find_moves(src, dst, 2)
        self.assertNotIn("X0X1", sequences)
        self.assertNotIn("X1X0", sequences)

    def test_size_one_moves_are_whole_cube_rotations(self):
        """Test that a single brick cube has no distinguishing moves."""
        src = Cube(1)
        sequences, explored = find_moves(src, src.move([Move.of("X0")]), 1)
        self.assertEqual(sequences, [])
        self.assertEqual(explored, 0)

    def test_size_mismatch(self):
        """Test that cubes of different size fail before searching."""
        with mock.patch.object(Trail, "materialize") as materialize:
            with self.assertRaises(CubeSizeMismatchError):
                find_moves(Cube(2), Cube(3), 1)
            materialize.assert_not_called()

    def test_negative_length(self):
        """Test that a negative bound is rejected."""
        with self.assertRaises(InvalidSearchBoundError):
            find_moves(Cube(2), Cube(2), -1)


if __name__ == '__main__':
    unittest.main()
