"""
Core state model for a cube puzzle: face colors, bricks and cubes.
"""

import enum
from dataclasses import dataclass, astuple
from typing import Iterator, NamedTuple, Optional, Sequence, Tuple

from .exceptions import InvalidBrickLayoutError, InvalidCubeSizeError


MIN_SIZE = 1
MAX_SIZE = 10


class Color(enum.Enum):
    """The six face colors. Values double as numeric codes in face grids."""
    RED = 1
    ORANGE = 2
    WHITE = 3
    YELLOW = 4
    GREEN = 5
    BLUE = 6

    @property
    def initial(self) -> str:
        return self.name[0]


class Face(enum.Enum):
    """The six outward directions of a brick or cube."""
    XP = "xp"
    XN = "xn"
    YP = "yp"
    YN = "yn"
    ZP = "zp"
    ZN = "zn"

    @property
    def axis_index(self) -> int:
        """Index of the coordinate this face is perpendicular to (0=x, 1=y, 2=z)."""
        return "xyz".index(self.value[0])

    @property
    def is_positive(self) -> bool:
        return self.value[1] == "p"


class Pos(NamedTuple):
    """A brick location in the cube-local frame."""
    x: int
    y: int
    z: int


@dataclass(frozen=True, eq=False)
class FaceColors:
    """
    Color assignment for the six faces of a brick.

    Equality only looks at the three positive-facing colors (xp, yp, zp).
    The negative-facing colors are carried along by rotations but never
    compared; use identical() for a full comparison.
    """
    xp: Color = Color.RED
    xn: Color = Color.ORANGE
    yp: Color = Color.WHITE
    yn: Color = Color.YELLOW
    zp: Color = Color.GREEN
    zn: Color = Color.BLUE

    def __eq__(self, other) -> bool:
        if not isinstance(other, FaceColors):
            return NotImplemented
        return self.xp == other.xp and self.yp == other.yp and self.zp == other.zp

    def __hash__(self) -> int:
        return hash((self.xp, self.yp, self.zp))

    def identical(self, other: "FaceColors") -> bool:
        """Compare all six faces."""
        return astuple(self) == astuple(other)

    def get(self, face: Face) -> Color:
        return getattr(self, face.value)


@dataclass(frozen=True)
class Brick:
    """
    One unit of the cube surface.

    Attributes:
        pos (Pos): Current position in the cube-local frame
        hue (FaceColors): Current color of each of the six faces
    """
    pos: Pos
    hue: FaceColors = FaceColors()

    @classmethod
    def at(cls, x: int, y: int, z: int) -> "Brick":
        """Create a brick in the solved orientation at the given position."""
        return cls(Pos(x, y, z))

    def identical(self, other: "Brick") -> bool:
        """Compare position and all six face colors."""
        return self.pos == other.pos and self.hue.identical(other.hue)


def is_surface(pos: Tuple[int, int, int], size: int) -> bool:
    """Check whether a position lies on the surface of a cube of the given size."""
    axmax = size - 1
    return any(c == 0 or c == axmax for c in pos)


class Cube:
    """
    A cube puzzle with a given edge length.

    Only bricks on the surface are stored; interior bricks never show a face.
    The brick order is fixed at construction and preserved by every move, so
    two cubes derived from the same start compare brick by brick. A cube
    built from the same bricks in a different order does not compare equal.

    Attributes:
        size (int): The edge length of the cube (1 to 10)
        bricks (tuple): The surface bricks
    """

    def __init__(self, size: int = 3, bricks: Optional[Sequence[Brick]] = None):
        """
        Initialize a Cube.

        Args:
            size (int): Edge length of the cube (default: 3)
            bricks (sequence, optional): Surface bricks in a moved state. If
                omitted, the cube is created in its solved state.

        Raises:
            InvalidCubeSizeError: If size is outside 1..10
            InvalidBrickLayoutError: If the bricks don't match the surface of the cube
        """
        if not isinstance(size, int) or isinstance(size, bool) or not MIN_SIZE <= size <= MAX_SIZE:
            raise InvalidCubeSizeError(size)

        self.size = size

        if bricks is not None:
            bricks = tuple(bricks)
            expected = len(_solved_bricks(size))
            if len(bricks) != expected:
                raise InvalidBrickLayoutError(
                    f"Got {len(bricks)} bricks, a cube of size {size} has {expected} surface bricks",
                    {"size": size, "count": len(bricks), "expected": expected},
                )
            for brick in bricks:
                if not is_surface(brick.pos, size):
                    raise InvalidBrickLayoutError(
                        f"Brick at {tuple(brick.pos)} is not on the surface of a cube of size {size}",
                        {"size": size, "pos": tuple(brick.pos)},
                    )
            self.bricks = bricks
        else:
            self.bricks = _solved_bricks(size)

    @property
    def axmax(self) -> int:
        """The largest coordinate value along any axis."""
        return self.size - 1

    def brick_at(self, x: int, y: int, z: int) -> Optional[Brick]:
        """
        Get the brick currently at a position.

        Returns:
            The brick at (x, y, z), or None for interior positions
        """
        pos = Pos(x, y, z)
        for brick in self.bricks:
            if brick.pos == pos:
                return brick
        return None

    def move(self, moves) -> "Cube":
        """
        Apply a move sequence and return the resulting cube.

        Args:
            moves: Iterable of Move objects, oldest first

        Returns:
            Cube: A new cube in the resulting state
        """
        from .operations import transform
        return transform(self, moves)

    def copy(self) -> "Cube":
        """
        Create a copy of the cube.

        Returns:
            A new Cube instance sharing the (immutable) bricks
        """
        return Cube(self.size, self.bricks)

    def __iter__(self) -> Iterator[Brick]:
        return iter(self.bricks)

    def __len__(self) -> int:
        return len(self.bricks)

    def __repr__(self) -> str:
        """String representation of the cube."""
        return f"Cube(size={self.size})"

    def __eq__(self, other: "Cube") -> bool:
        """
        Check equality with another cube, brick by brick.

        Bricks are compared by index, so the order matters: reordering the
        bricks of a cube yields a cube that is not equal to it.
        """
        if not isinstance(other, Cube):
            return False
        return self.size == other.size and self.bricks == other.bricks

    def __hash__(self) -> int:
        return hash((self.size, self.bricks))


_SOLVED_CACHE = {}


def _solved_bricks(size: int) -> Tuple[Brick, ...]:
    bricks = _SOLVED_CACHE.get(size)
    if bricks is None:
        bricks = tuple(
            Brick.at(x, y, z)
            for z in range(size)
            for y in range(size)
            for x in range(size)
            if is_surface((x, y, z), size)
        )
        _SOLVED_CACHE[size] = bricks
    return bricks
