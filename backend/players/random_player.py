"""
Random player implementation - picks random safe moves.
"""

from domain.constants import VALID_MOVES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    Picks a random direction that avoids walls, reversals and self-collisions.
    """

    def get_move(self, game_state: GameState) -> str:
        valid_moves = sorted(self.safe_moves(game_state))

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(valid_moves)
