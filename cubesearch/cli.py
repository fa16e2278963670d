"""
cli.py: Command-line front end.

Depicts a cube after applying moves to a solved cube, and optionally
searches for every move sequence of the same length that produces the
same picture.
"""

import argparse
import sys
from typing import List, Optional, Sequence, TextIO

import colorama

from .config import settings
from .cube import MAX_SIZE, MIN_SIZE, Cube
from .exceptions import CubeError
from .logging import get_logger, set_log_level
from .moves import parse_moves
from .render import render_cube, render_net
from .search import find_moves

logger = get_logger(__name__)

DESCRIPTION = """\
Depicts a cube of edge length |SIZE| after applying the given MOVES to a
solved cube. A negative SIZE also searches for every sequence of at most as
many moves as given that reaches the same state.

MOVES is a sequence of pairs <axis><coord>. <axis> is one of X, Y, Z, x, y,
z: uppercase rotates a layer by +90 degrees (counter-clockwise), lowercase
by -90 degrees (clockwise) about the named axis, which runs through the
center of the cube. <coord> is a single digit 0 <= coord < |SIZE| selecting
the layer; 0 is the leftmost / bottommost / hindmost layer. A digit 2-9
before <axis> repeats the move, and # starts a comment."""


class UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = UsageArgumentParser(
        prog="cubesearch",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("size", type=int, help="Cube edge length, 1-10; negative to search for move sequences")
    parser.add_argument("moves", nargs="*", help="Move sequence, e.g. X0 y2 2Z1")
    parser.add_argument("--net", action="store_true", help="Draw all six faces as an unfolded net")
    parser.add_argument("--no-color", dest="color", action="store_false", default=None, help="Draw color initials instead of ANSI colors")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def format_results(sequences: Sequence[str], per_line: int) -> List[str]:
    """Group found sequences into tab-separated lines."""
    return [
        "\t".join(sequences[i:i + per_line])
        for i in range(0, len(sequences), per_line)
    ]


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def run(size: int, move_text: str, search: bool, net: bool = False,
        color: Optional[bool] = None, out: Optional[TextIO] = None):
    """
    Draw the moved cube and, in search mode, list the matching sequences.

    Raises:
        CubeError: If the move text is malformed
    """
    out = out or sys.stdout
    moves = parse_moves(move_text, size - 1)

    src_cube = Cube(size)
    dst_cube = src_cube.move(moves)

    print(move_text, file=out)
    picture = render_net(dst_cube, color) if net else render_cube(dst_cube, color)
    print(picture, file=out)

    max_len = len(moves)
    if search and max_len != 0:
        sequences, explored = find_moves(src_cube, dst_cube, max_len)
        print(f"{_plural(len(sequences), 'sequence')} from {_plural(explored, 'exploratory move')}:", file=out)
        for line in format_results(sequences, settings.results_per_line):
            print(line, file=out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level("DEBUG")

    size = abs(args.size)
    if not MIN_SIZE <= size <= MAX_SIZE:
        parser.error(f"size must be between {MIN_SIZE} and {MAX_SIZE} (negative to search), got {args.size}")

    colorama.init()
    try:
        run(size, "\n".join(args.moves), args.size < 0, args.net, args.color)
    except CubeError as e:
        logger.error("invalid input", error_type=e.error_type, details=e.details)
        print(f"{parser.prog}: error: {e.message}", file=sys.stderr)
        return 1
    finally:
        colorama.deinit()

    return 0
