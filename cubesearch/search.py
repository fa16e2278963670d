"""
Exhaustive breadth-first search for move sequences between two cube states.

Every sequence of at most ``max_len`` moves that turns the source cube into
the destination cube is reported, except for sequences that are redundant
by construction:

- a move directly followed by its reverse,
- three identical moves in a row (one reverse move does the same),
- a 180 degree turn reached in the opposite sense of one already produced
  at the same search depth,
- a set of moves that turns every layer along one axis in the same sense,
  which only rotates the cube as a whole.

The search keeps all trails of the widest level in memory at once, so the
queue grows roughly with ``(6 * size) ** max_len``. Keep ``max_len`` in the
single digits for cubes larger than 2.
"""

from collections import deque
from itertools import islice
from typing import Iterator, List, NamedTuple, Optional

from .cube import Cube
from .exceptions import CubeSizeMismatchError, InvalidSearchBoundError
from .logging import get_logger
from .moves import AXIS_ORDER, Axis, Move, moves_to_string
from .operations import all_moves, transform

logger = get_logger(__name__)


class LayerUsage:
    """
    Records which layer double moves were produced at the current depth.

    Holds one flag per axis sense and coordinate. The search replaces the
    whole object when it advances to a deeper level.
    """

    def __init__(self, size: int):
        self.size = size
        self._flags = {axis: [False] * size for axis in AXIS_ORDER}

    def set_flag(self, axis, coord: int):
        """Mark the double move of the layer at coord in the given sense."""
        self._flags[Axis.parse(axis)][coord] = True

    def has_flag(self, axis, coord: int) -> bool:
        """Check whether the double move was already produced."""
        return self._flags[Axis.parse(axis)][coord]


class Trail:
    """
    A candidate move sequence.

    Trails are immutable and share their history: extending a trail creates
    a new node pointing at the old one, so iteration runs most recent move
    first. The cube state is replayed on demand instead of being stored.
    """

    __slots__ = ("move", "parent", "length")

    def __init__(self, move: Optional[Move] = None, parent: Optional["Trail"] = None):
        self.move = move
        self.parent = parent
        if move is None:
            self.length = 0
        else:
            self.length = parent.length + 1 if parent is not None else 1

    def extend(self, move: Move) -> "Trail":
        """Return a new trail with move appended as the most recent move."""
        return Trail(move, self)

    def __iter__(self) -> Iterator[Move]:
        trail = self
        while trail is not None and trail.move is not None:
            yield trail.move
            trail = trail.parent

    def __len__(self) -> int:
        return self.length

    def chronological(self) -> List[Move]:
        """The moves, oldest first."""
        moves = list(self)
        moves.reverse()
        return moves

    def materialize(self, cube: Cube) -> Cube:
        """Apply the trail's moves to a cube."""
        return transform(cube, self.chronological())

    def completes_rotation(self, move: Move, size: int) -> bool:
        """
        Check whether move and the last size-1 moves turn every layer.

        Such a group of moves, all in the same axis sense and covering each
        coordinate once, is a rigid rotation of the whole cube.
        """
        coords = {move.coord}
        for prior in islice(self, size - 1):
            if prior.axis is not move.axis:
                return False
            coords.add(prior.coord)
        return len(coords) == size

    def __str__(self) -> str:
        return moves_to_string(self.chronological())

    def __repr__(self) -> str:
        return f"Trail({str(self)!r})"


class SearchResult(NamedTuple):
    """Found sequences in discovery order and the number of moves explored."""
    sequences: List[str]
    explored: int


def _candidates(trail: Trail, moves, size: int, usage: LayerUsage) -> Iterator[Move]:
    """Yield the moves worth trying after trail, recording double moves in usage."""
    length = len(trail)
    axmax = size - 1
    prev = trail.move
    prev2 = trail.parent.move if length > 1 else None

    for move in moves:
        if prev is not None:
            # Don't rotate a layer back in the opposite direction of its previous move
            if move.coord == prev.coord and move.axis is prev.axis.inverse:
                continue

            # Don't rotate a layer in the same direction thrice
            if prev2 is not None and move.ident == prev.ident and move.ident == prev2.ident:
                continue

        is_double = prev is not None and move.ident == prev.ident

        # Don't do a double move if the opposite double has been done
        if is_double and usage.has_flag(move.axis.inverse, move.coord):
            continue

        if length >= axmax and trail.completes_rotation(move, size):
            continue

        if is_double:
            usage.set_flag(move.axis, move.coord)

        yield move


def find_moves(src_cube: Cube, dst_cube: Cube, max_len: int) -> SearchResult:
    """
    Find all move sequences, no longer than max_len, that transform src_cube
    into dst_cube.

    Args:
        src_cube (Cube): Starting state
        dst_cube (Cube): Target state, same size as src_cube
        max_len (int): Maximum number of moves in a sequence

    Returns:
        SearchResult: The sequences as strings (oldest move first), shortest
        first, and the number of moves explored

    Raises:
        CubeSizeMismatchError: If the cubes differ in size
        InvalidSearchBoundError: If max_len is negative
    """
    size = src_cube.size
    if dst_cube.size != size:
        raise CubeSizeMismatchError(size, dst_cube.size)
    if max_len < 0:
        raise InvalidSearchBoundError(max_len)

    moves = all_moves(size)

    usage = LayerUsage(size)
    last_len = 0

    queue = deque([Trail()])
    sequences = []
    explored = 0

    while queue:
        trail = queue.popleft()

        # Does the trail's move sequence produce the target state?
        if trail.materialize(src_cube) == dst_cube:
            # Collect the match and don't continue the trail
            sequences.append(str(trail))
            continue

        length = len(trail)
        if length >= max_len:
            continue

        if length > last_len:
            usage = LayerUsage(size)
            last_len = length
            logger.debug(
                "search depth advanced",
                depth=length,
                queued=len(queue) + 1,
                found=len(sequences),
                explored=explored,
            )

        for move in _candidates(trail, moves, size, usage):
            queue.append(trail.extend(move))
            explored += 1

    logger.info(
        "search finished",
        size=size,
        max_len=max_len,
        found=len(sequences),
        explored=explored,
    )

    return SearchResult(sequences, explored)
