"""
Basic usage examples for cubesearch.
"""

from cubesearch import Cube, Face, move_layer, parse_moves, rotate
from cubesearch.render import render_cube, render_net
from cubesearch.utils import get_face, surface_count


def example_basic_cube():
    """Create a cube and look at its bricks."""
    print("=== Basic Cube Example ===")
    
    # Create a 3x3x3 cube
    cube = Cube(3)
    print(f"Created cube: {cube}")
    print(f"Cube size: {cube.size}")
    print(f"Surface bricks: {len(cube.bricks)} (expected {surface_count(3)})")
    
    # Look up a corner brick
    brick = cube.brick_at(0, 0, 0)
    print(f"\nBrick at (0,0,0): {brick}")
    print(render_cube(cube))
    print()


def example_layer_moves():
    """Demonstrate single layer moves."""
    print("=== Layer Move Example ===")
    
    cube = Cube(3)
    
    # Turn the top layer counter-clockwise
    moved = move_layer(cube, 'Y', 2)
    print("After Y2:")
    print(render_cube(moved))
    
    # Turning it back restores the cube
    restored = move_layer(moved, 'y', 2)
    print(f"\nAfter y2, equal to the start? {restored == cube}")
    print()


def example_move_notation():
    """Apply a move sequence written in notation."""
    print("=== Move Notation Example ===")
    
    cube = Cube(3)
    text = """
        X0 y2     # two quarter turns
        2Z1       # a half turn of the middle layer
    """
    moves = parse_moves(text, cube.axmax)
    print(f"Parsed moves: {' '.join(str(m) for m in moves)}")
    
    result = cube.move(moves)
    print(render_net(result))
    print()


def example_faces():
    """Read single faces as numpy grids."""
    print("=== Face Grid Example ===")
    
    cube = rotate(Cube(2), 'X')
    for face in Face:
        print(f"{face.name}:\n{get_face(cube, face)}")
    print()


if __name__ == "__main__":
    example_basic_cube()
    example_layer_moves()
    example_move_notation()
    example_faces()
    
    print("=== All examples completed! ===")
