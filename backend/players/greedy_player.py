"""
Greedy player implementation - heads for the food along safe cells.
"""

from domain.constants import VALID_MOVES
from domain.game_state import GameState
from .base import Player


class GreedyPlayer(Player):
    """
    Picks the safe move that brings the head closest (Manhattan distance)
    to the food, breaking ties at random.
    """

    def get_move(self, game_state: GameState) -> str:
        moves = self.safe_moves(game_state)
        if not moves:
            return self.rng.choice(sorted(VALID_MOVES))
        if game_state.food is None:
            return self.rng.choice(sorted(moves))

        fx, fy = game_state.food
        distances = {
            move: abs(x - fx) + abs(y - fy)
            for move, (x, y) in moves.items()
        }
        best = min(distances.values())
        candidates = sorted(move for move, d in distances.items() if d == best)
        return self.rng.choice(candidates)
