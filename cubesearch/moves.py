"""
Moves on a cube and the textual move notation.

A move rotates one layer of bricks by 90 degrees about a cube axis. It is
written as an axis letter followed by a coordinate digit, e.g. ``X0``.
Uppercase letters rotate counter-clockwise (+90 degrees), lowercase letters
clockwise (-90 degrees). A digit 2-9 in front of the axis letter repeats the
move, and ``#`` starts a comment that runs to the end of the line.
"""

import enum
from dataclasses import dataclass, field
from typing import Iterable, List

from .exceptions import InvalidAxisError, InvalidCoordinateError


class Axis(enum.Enum):
    """Rotation axis together with the rotation sense."""
    X_POS = "X"
    X_NEG = "x"
    Y_POS = "Y"
    Y_NEG = "y"
    Z_POS = "Z"
    Z_NEG = "z"

    @classmethod
    def parse(cls, value) -> "Axis":
        """
        Convert an axis letter to an Axis.

        Raises:
            InvalidAxisError: If value is not one of X, x, Y, y, Z, z
        """
        if isinstance(value, Axis):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidAxisError(value) from None

    @property
    def inverse(self) -> "Axis":
        """The same physical axis with the opposite rotation sense."""
        return Axis(self.value.swapcase())

    @property
    def index(self) -> int:
        """Index of the coordinate along this axis (0=x, 1=y, 2=z)."""
        return "xyz".index(self.value.lower())

    @property
    def is_positive(self) -> bool:
        return self.value.isupper()

    def __str__(self) -> str:
        return self.value


# Enumeration order used by the move search
AXIS_ORDER = (Axis.X_POS, Axis.X_NEG, Axis.Y_POS, Axis.Y_NEG, Axis.Z_POS, Axis.Z_NEG)


def make_ident(axis: Axis, coord: int) -> int:
    """Pack an axis and a coordinate into one integer for fast comparison."""
    return (ord(axis.value) << 4) | coord


@dataclass(frozen=True)
class Move:
    """
    A single layer rotation.

    Attributes:
        axis (Axis): Rotation axis and sense
        coord (int): Coordinate of the rotated layer along the axis
        ident (int): Packed identity of axis and coord
    """
    axis: Axis
    coord: int
    ident: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        axis = Axis.parse(self.axis)
        if not isinstance(self.coord, int) or not 0 <= self.coord <= 9:
            raise InvalidCoordinateError(f"Invalid coordinate value {self.coord!r}", self.coord)
        object.__setattr__(self, "axis", axis)
        object.__setattr__(self, "ident", make_ident(axis, self.coord))

    @classmethod
    def of(cls, text: str) -> "Move":
        """Build a move from its two-character notation, e.g. ``Move.of("X0")``."""
        if len(text) != 2 or not text[1].isdigit():
            raise InvalidCoordinateError(f"Invalid move {text!r}", text)
        return cls(Axis.parse(text[0]), int(text[1]))

    @property
    def inverse(self) -> "Move":
        """The move that undoes this one."""
        return Move(self.axis.inverse, self.coord)

    def __str__(self) -> str:
        return f"{self.axis.value}{self.coord}"


def parse_moves(text: str, axmax: int) -> List[Move]:
    """
    Parse free-form move notation into a list of moves.

    Args:
        text (str): Move description, e.g. ``"X0 2y1  # comment"``
        axmax (int): Largest valid coordinate (cube size - 1)

    Returns:
        List[Move]: Parsed moves in order. A repeat count n emits the move
        n % 4 times.

    Raises:
        InvalidCoordinateError: If an axis letter is not followed by a digit
            in 0..axmax
    """
    moves = []

    count = 1
    axis = None
    in_comment = False
    for ch in text:
        if in_comment:
            # Ignore until end of line
            if ch == "\n":
                in_comment = False
        elif axis is None:
            if ch in "XxYyZz":
                axis = Axis(ch)
            elif "2" <= ch <= "9":
                # A prefixed digit acts as a repeat count
                count = int(ch)
            elif ch == "#":
                in_comment = True
        else:
            # Expecting a coordinate digit
            if not ("0" <= ch <= "9" and int(ch) <= axmax):
                raise InvalidCoordinateError(f"Invalid coordinate value {ch!r}", ch, {"axis": axis.value})

            move = Move(axis, int(ch))
            moves.extend([move] * (count % 4))

            axis = None
            count = 1

    if axis is not None:
        raise InvalidCoordinateError(f"Missing coordinate after axis {axis.value!r}", None, {"axis": axis.value})

    return moves


def moves_to_string(moves: Iterable[Move]) -> str:
    """Render moves, oldest first, as concatenated axis/coordinate pairs."""
    return "".join(str(move) for move in moves)
