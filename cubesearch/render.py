"""
render.py: Terminal pictures of a cube.

Two layouts are available:

- render_cube draws the three faces pointing towards the viewer (+x on the
  right, +y on top, +z in front) in an oblique projection.
- render_net unfolds all six faces into a flat cross.

With color enabled, faces are drawn as colorama background-colored blanks.
Without color each cell shows the initial letter of its color instead.
"""

from typing import Dict, List, Optional, Tuple

from colorama import Back, Style

from .config import settings
from .cube import Brick, Color, Cube, Face
from .utils import get_face

# Standard terminals lack orange, so ORANGE is drawn in magenta.
COLOR_STYLES = {
    Color.RED: Back.RED,
    Color.ORANGE: Back.MAGENTA,
    Color.WHITE: Back.WHITE,
    Color.YELLOW: Back.YELLOW,
    Color.GREEN: Back.GREEN,
    Color.BLUE: Back.BLUE,
}

# Cell offsets (row, first col, width) of each visible face of one brick,
# relative to the brick's anchor on the canvas
FRONT_SPANS = [(2, 0, 9), (3, 0, 9), (4, 0, 9), (5, 0, 9)]
TOP_SPANS = [(0, 2, 9), (1, 1, 9)]
RIGHT_SPANS = [(0, 11, 1), (1, 10, 2), (2, 9, 3), (3, 9, 3), (4, 9, 2), (5, 9, 1)]

Canvas = List[List[Optional[Color]]]


def _use_color(color: Optional[bool]) -> bool:
    return settings.color if color is None else color


def _cell(value: Optional[Color], color: bool, width: int = 1) -> str:
    if value is None:
        return " " * width
    if color:
        return f"{COLOR_STYLES[value]}{' ' * width}{Style.RESET_ALL}"
    return value.initial * width


def _paint(canvas: Canvas, row: int, col: int, spans, value: Color):
    for drow, dcol, width in spans:
        line = canvas[row + drow]
        for c in range(col + dcol, col + dcol + width):
            line[c] = value


def _anchor(brick: Brick, axmax: int) -> Tuple[int, int]:
    x, y, z = brick.pos
    return -4 * y + 2 * z + 4 * axmax, 9 * x - 3 * z + 3 * axmax


def _draw_brick(canvas: Canvas, brick: Brick, axmax: int):
    row, col = _anchor(brick, axmax)
    x, y, z = brick.pos

    if z == axmax:
        _paint(canvas, row, col, FRONT_SPANS, brick.hue.zp)
    if y == axmax:
        _paint(canvas, row, col, TOP_SPANS, brick.hue.yp)
    if x == axmax:
        _paint(canvas, row, col, RIGHT_SPANS, brick.hue.xp)


def _join_row(cells: List[Optional[Color]], color: bool) -> str:
    # Merge runs of equal cells to keep the escape sequences short
    parts = []
    start = 0
    for i in range(1, len(cells) + 1):
        if i == len(cells) or cells[i] != cells[start]:
            parts.append(_cell(cells[start], color, i - start))
            start = i
    return "".join(parts).rstrip()


def render_cube(cube: Cube, color: Optional[bool] = None) -> str:
    """
    Draw the visible faces of a cube.

    Args:
        cube (Cube): The cube to draw
        color (bool, optional): Emit ANSI colors (default: settings.color)

    Returns:
        str: The picture, one line per terminal row
    """
    color = _use_color(color)
    axmax = cube.axmax
    height = 6 * axmax + 6
    width = 12 * axmax + 12

    canvas: Canvas = [[None] * width for _ in range(height)]
    visible = [b for b in cube.bricks if axmax in b.pos]
    for brick in sorted(visible, key=lambda b: (b.pos.z, b.pos.y, b.pos.x)):
        _draw_brick(canvas, brick, axmax)

    return "\n".join(_join_row(line, color) for line in canvas)


def _face_row(grid, row: int, color: bool) -> str:
    cells = []
    for value in grid[row]:
        hue = Color(int(value))
        cells.append(_cell(hue, True, 2) if color else f"{hue.initial} ")
    return "".join(cells)


def render_net(cube: Cube, color: Optional[bool] = None) -> str:
    """
    Draw all six faces of a cube as an unfolded net.

    Layout::

              +y
          -x  +z  +x  -z
              -y

    Args:
        cube (Cube): The cube to draw
        color (bool, optional): Emit ANSI colors (default: settings.color)

    Returns:
        str: The net, one line per terminal row
    """
    color = _use_color(color)
    size = cube.size
    grids: Dict[Face, object] = {face: get_face(cube, face) for face in Face}
    indent = " " * (2 * size + 1)

    lines = []
    for row in range(size):
        lines.append(indent + _face_row(grids[Face.YP], row, color))
    for row in range(size):
        lines.append(" ".join(
            _face_row(grids[face], row, color)
            for face in (Face.XN, Face.ZP, Face.XP, Face.ZN)
        ))
    for row in range(size):
        lines.append(indent + _face_row(grids[Face.YN], row, color))

    return "\n".join(line.rstrip() for line in lines)
