"""
Advanced usage examples for cubesearch.
Demonstrates the move search and its pruning.
"""

import time

from cubesearch import Cube, find_moves, parse_moves


def example_find_single_move():
    """Find the one move that produces a state."""
    print("=== Single Move Search Example ===")
    
    src = Cube(3)
    dst = src.move(parse_moves("X0", src.axmax))
    
    sequences, explored = find_moves(src, dst, 1)
    print(f"Found {sequences} after {explored} exploratory moves")
    print()


def example_alternative_sequences():
    """List every short sequence that reaches the same state."""
    print("=== Alternative Sequences Example ===")
    
    src = Cube(2)
    dst = src.move(parse_moves("X0 Y1 z0", src.axmax))
    
    sequences, explored = find_moves(src, dst, 3)
    print(f"{len(sequences)} sequences from {explored} exploratory moves:")
    for i in range(0, len(sequences), 4):
        print("\t".join(sequences[i:i + 4]))
    print()


def example_redundant_moves():
    """Show which equivalent sequences the search leaves out."""
    print("=== Redundant Moves Example ===")
    
    src = Cube(3)
    
    # A half turn is only reported in the sense found first
    dst = src.move(parse_moves("2x1", src.axmax))
    sequences, _ = find_moves(src, dst, 2)
    print(f"Half turn of layer 1: {sequences}")
    
    # Three quarter turns are reported as one reverse turn
    dst = src.move(parse_moves("3Y0", src.axmax))
    sequences, _ = find_moves(src, dst, 3)
    print(f"Three turns of Y0 found as: {[s for s in sequences if len(s) == 2]}")
    print()


def example_performance():
    """Measure how the search grows with depth."""
    print("=== Search Cost Example ===")
    
    src = Cube(3)
    for text in ["X0", "X0 y1", "X0 y1 Z2"]:
        moves = parse_moves(text, src.axmax)
        dst = src.move(moves)
        
        start = time.time()
        sequences, explored = find_moves(src, dst, len(moves))
        elapsed = time.time() - start
        
        print(f"{text}:")
        print(f"  Sequences: {len(sequences)}")
        print(f"  Explored moves: {explored}")
        print(f"  Search time: {elapsed*1000:.2f}ms")
    print()


if __name__ == "__main__":
    example_find_single_move()
    example_alternative_sequences()
    example_redundant_moves()
    example_performance()
    
    print("=== All advanced examples completed! ===")
