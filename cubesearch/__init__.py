"""
Cubesearch
A Python library that models a layered cube puzzle and finds every move
sequence of bounded length between two cube states.
"""

__version__ = "0.1.0"

from .cube import Brick, Color, Cube, Face, FaceColors, Pos
from .moves import Axis, Move, parse_moves, moves_to_string
from .operations import move_layer, rotate, transform
from .search import SearchResult, find_moves
from .utils import validate_size, create_solved_cube

__all__ = [
    "Axis",
    "Brick",
    "Color",
    "Cube",
    "Face",
    "FaceColors",
    "Move",
    "Pos",
    "SearchResult",
    "create_solved_cube",
    "find_moves",
    "move_layer",
    "moves_to_string",
    "parse_moves",
    "rotate",
    "transform",
    "validate_size",
]
