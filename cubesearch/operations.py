"""
Operations that can be performed on bricks and cubes.

The six brick rotations turn a brick by 90 degrees about one cube axis.
Positive (uppercase) rotations are counter-clockwise when looking down the
axis from its positive end.
"""

from typing import Callable, Iterable, Sequence, Tuple

from .cube import Brick, Cube, FaceColors, Pos
from .exceptions import InvalidCoordinateError
from .moves import AXIS_ORDER, Axis, Move


def rotate_x_pos(brick: Brick, axmax: int) -> Brick:
    """Rotate a brick counter-clockwise by 90 degrees about the X axis."""
    pos, hue = brick.pos, brick.hue
    return Brick(
        Pos(pos.x, axmax - pos.z, pos.y),
        FaceColors(xp=hue.xp, xn=hue.xn, yp=hue.zn, yn=hue.zp, zp=hue.yp, zn=hue.yn),
    )


def rotate_x_neg(brick: Brick, axmax: int) -> Brick:
    """Rotate a brick clockwise by 90 degrees about the X axis."""
    pos, hue = brick.pos, brick.hue
    return Brick(
        Pos(pos.x, pos.z, axmax - pos.y),
        FaceColors(xp=hue.xp, xn=hue.xn, yp=hue.zp, yn=hue.zn, zp=hue.yn, zn=hue.yp),
    )


def rotate_y_pos(brick: Brick, axmax: int) -> Brick:
    """Rotate a brick counter-clockwise by 90 degrees about the Y axis."""
    pos, hue = brick.pos, brick.hue
    return Brick(
        Pos(pos.z, pos.y, axmax - pos.x),
        FaceColors(xp=hue.zp, xn=hue.zn, yp=hue.yp, yn=hue.yn, zp=hue.xn, zn=hue.xp),
    )


def rotate_y_neg(brick: Brick, axmax: int) -> Brick:
    """Rotate a brick clockwise by 90 degrees about the Y axis."""
    pos, hue = brick.pos, brick.hue
    return Brick(
        Pos(axmax - pos.z, pos.y, pos.x),
        FaceColors(xp=hue.zn, xn=hue.zp, yp=hue.yp, yn=hue.yn, zp=hue.xp, zn=hue.xn),
    )


def rotate_z_pos(brick: Brick, axmax: int) -> Brick:
    """Rotate a brick counter-clockwise by 90 degrees about the Z axis."""
    pos, hue = brick.pos, brick.hue
    return Brick(
        Pos(axmax - pos.y, pos.x, pos.z),
        FaceColors(xp=hue.yn, xn=hue.yp, yp=hue.xp, yn=hue.xn, zp=hue.zp, zn=hue.zn),
    )


def rotate_z_neg(brick: Brick, axmax: int) -> Brick:
    """Rotate a brick clockwise by 90 degrees about the Z axis."""
    pos, hue = brick.pos, brick.hue
    return Brick(
        Pos(pos.y, axmax - pos.x, pos.z),
        FaceColors(xp=hue.yp, xn=hue.yn, yp=hue.xn, yn=hue.xp, zp=hue.zp, zn=hue.zn),
    )


def get_rotator(axis) -> Callable[[Brick, int], Brick]:
    """
    Select the brick rotation for an axis.

    Args:
        axis: Axis or axis letter ('X', 'x', 'Y', 'y', 'Z' or 'z')

    Returns:
        One of the six rotate_* functions

    Raises:
        InvalidAxisError: If axis is not a valid axis designator
    """
    axis = Axis.parse(axis)

    if axis is Axis.X_POS:
        return rotate_x_pos
    elif axis is Axis.X_NEG:
        return rotate_x_neg
    elif axis is Axis.Y_POS:
        return rotate_y_pos
    elif axis is Axis.Y_NEG:
        return rotate_y_neg
    elif axis is Axis.Z_POS:
        return rotate_z_pos
    else:
        return rotate_z_neg


def rotate_brick(brick: Brick, axis, axmax: int) -> Brick:
    """Rotate a brick by 90 degrees about an axis."""
    return get_rotator(axis)(brick, axmax)


def move_bricks(bricks: Sequence[Brick], axis, coord: int, axmax: int) -> Tuple[Brick, ...]:
    """
    Rotate one layer of bricks.

    Bricks whose coordinate along the axis equals coord are rotated, all
    others are passed through unchanged. The brick order is preserved.

    Raises:
        InvalidAxisError: If axis is not a valid axis designator
    """
    rotator = get_rotator(axis)
    index = Axis.parse(axis).index

    return tuple(
        rotator(brick, axmax) if brick.pos[index] == coord else brick
        for brick in bricks
    )


def move_layer(cube: Cube, axis, coord: int) -> Cube:
    """
    Rotate the layer at coord about an axis.

    Args:
        cube (Cube): The cube to move
        axis: Axis or axis letter
        coord (int): Coordinate of the layer along the axis

    Returns:
        Cube: A new cube in the resulting state

    Raises:
        InvalidAxisError: If axis is not a valid axis designator
        InvalidCoordinateError: If coord is outside the cube
    """
    if not 0 <= coord <= cube.axmax:
        raise InvalidCoordinateError(
            f"Coordinate {coord} is out of bounds for cube size {cube.size}", coord
        )
    return Cube(cube.size, move_bricks(cube.bricks, axis, coord, cube.axmax))


def transform(cube: Cube, moves: Iterable[Move]) -> Cube:
    """
    Apply a sequence of moves to a cube.

    Args:
        cube (Cube): The cube to transform
        moves: Moves to apply, oldest first

    Returns:
        Cube: The transformed cube

    Example:
        >>> c = Cube(3)
        >>> result = transform(c, parse_moves("X0 y2", c.axmax))
    """
    axmax = cube.axmax
    bricks = cube.bricks

    for move in moves:
        if move.coord > axmax:
            raise InvalidCoordinateError(
                f"Coordinate {move.coord} is out of bounds for cube size {cube.size}", move.coord
            )
        bricks = move_bricks(bricks, move.axis, move.coord, axmax)

    return Cube(cube.size, bricks)


def rotate(cube: Cube, axis, k: int = 1) -> Cube:
    """
    Rotate the whole cube rigidly about an axis.

    Equivalent to moving every layer along the axis in the same sense.

    Args:
        cube (Cube): The cube to rotate
        axis: Axis or axis letter
        k (int): Number of 90-degree rotations (default: 1)

    Returns:
        Cube: A new rotated cube
    """
    axis = Axis.parse(axis)
    k = k % 4  # Normalize rotation

    moves = [Move(axis, coord) for _ in range(k) for coord in range(cube.size)]
    return transform(cube, moves)


def all_moves(size: int) -> Tuple[Move, ...]:
    """Every single move on a cube of the given size, in search order."""
    return tuple(Move(axis, coord) for axis in AXIS_ORDER for coord in range(size))
