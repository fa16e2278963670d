"""
Utility functions for cubes.
"""

import numpy as np
from typing import Tuple

from .cube import MAX_SIZE, MIN_SIZE, Cube, Face


def validate_size(size: int) -> bool:
    """
    Validate that a cube size is acceptable.

    Args:
        size (int): The size to validate

    Returns:
        bool: True if size is valid, False otherwise
    """
    return isinstance(size, int) and not isinstance(size, bool) and MIN_SIZE <= size <= MAX_SIZE


def create_solved_cube(size: int) -> Cube:
    """
    Create a cube in its solved state.

    Args:
        size (int): Size of the cube

    Returns:
        Cube: A new solved cube
    """
    return Cube(size)


def surface_count(size: int) -> int:
    """Number of bricks on the surface of a cube of the given size."""
    return size ** 3 - max(size - 2, 0) ** 3


def get_dimensions(cube: Cube) -> Tuple[int, int, int]:
    """
    Get the dimensions of a cube.

    Returns:
        Tuple[int, int, int]: The dimensions (size, size, size)
    """
    return (cube.size, cube.size, cube.size)


def _face_cell(pos, face: Face, axmax: int) -> Tuple[int, int]:
    # (row, col) of a brick on a face, seen from outside the cube with
    # +y up for the side faces and +z towards the viewer for top/bottom
    x, y, z = pos
    if face is Face.ZP:
        return axmax - y, x
    if face is Face.ZN:
        return axmax - y, axmax - x
    if face is Face.XP:
        return axmax - y, axmax - z
    if face is Face.XN:
        return axmax - y, z
    if face is Face.YP:
        return z, x
    return axmax - z, x


def get_face(cube: Cube, face: Face) -> np.ndarray:
    """
    Get the colors of one face of the cube.

    Args:
        cube (Cube): The cube to read
        face (Face): The face to read

    Returns:
        np.ndarray: A size x size array of Color values, top row first,
        as seen when looking at the face from outside the cube
    """
    axmax = cube.axmax
    index = face.axis_index
    layer = axmax if face.is_positive else 0

    grid = np.zeros((cube.size, cube.size), dtype=int)
    for brick in cube.bricks:
        if brick.pos[index] == layer:
            row, col = _face_cell(brick.pos, face, axmax)
            grid[row, col] = brick.hue.get(face).value

    return grid


def is_face_solved(cube: Cube, face: Face) -> bool:
    """Check whether every brick on a face shows the same color."""
    grid = get_face(cube, face)
    return bool(np.all(grid == grid[0, 0]))
