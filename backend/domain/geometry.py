"""
Grid geometry and occupancy helpers.

Positions are plain (x, y) integer tuples; equality is exact.
"""

from typing import Collection, Tuple

Position = Tuple[int, int]


def add(position: Position, vector: Tuple[int, int]) -> Position:
    return (position[0] + vector[0], position[1] + vector[1])


def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def in_bounds(position: Position, grid_size: int) -> bool:
    """True when both coordinates lie within [0, grid_size)."""
    x, y = position
    return 0 <= x < grid_size and 0 <= y < grid_size


def is_occupied(position: Position, occupied: Collection[Position]) -> bool:
    return position in occupied
