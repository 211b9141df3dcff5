"""
Base player interface for the headless driver.
"""

import random
from typing import Dict, List, Optional, Tuple

from domain.constants import DIRECTION_VECTORS
from domain.game_state import GameState
from domain.geometry import add, in_bounds, is_opposite


class Player:
    """
    Base class/interface for autopilot logic.

    A player looks at a GameState snapshot and returns the direction it
    wants the snake to take on the next tick.
    """

    def __init__(self, name: str, rng: Optional[random.Random] = None):
        self.name = name
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError

    def safe_moves(self, game_state: GameState) -> Dict[str, Tuple[int, int]]:
        """
        Map each direction that doesn't kill the snake next tick to the
        cell it leads to.

        Excludes reversals, walls and body cells. The tail counts as free
        because it moves away, unless the move eats food (the snake grows
        and the tail stays).
        """
        body: List[Tuple[int, int]] = game_state.snake_positions
        head = body[0]
        moves = {}
        for move, vector in DIRECTION_VECTORS.items():
            if is_opposite(vector, game_state.heading):
                continue
            cell = add(head, vector)
            if not in_bounds(cell, game_state.grid_size):
                continue
            blocking = body if cell == game_state.food else body[:-1]
            if cell in blocking:
                continue
            moves[move] = cell
        return moves
