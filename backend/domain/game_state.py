"""
GameState entity - a read-only snapshot of the game for renderers.
"""

from typing import List, Tuple, Optional


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        state: 'ready', 'running' or 'ended'
        snake_positions: list of (x, y), head first
        heading: direction vector of the snake
        food: (x, y) of the food, or None before the first round
        food_variant: cosmetic food index
        score: current round score
        difficulty: current difficulty level
        grid_size: board dimension (square)
        message: scripted message currently shown
        leaderboard: list of display lines, best first
    """

    def __init__(
        self,
        state: str,
        snake_positions: List[Tuple[int, int]],
        heading: Tuple[int, int],
        food: Optional[Tuple[int, int]],
        food_variant: int,
        score: int,
        difficulty: str,
        grid_size: int,
        message: str = "",
        leaderboard: Optional[List[str]] = None,
    ):
        self.state = state
        self.snake_positions = snake_positions
        self.heading = heading
        self.food = food
        self.food_variant = food_variant
        self.score = score
        self.difficulty = difficulty
        self.grid_size = grid_size
        self.message = message
        self.leaderboard = leaderboard or []

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S = snake body
        H = snake head
        (0,0) is the top left, matching the screen coordinates the engine uses.
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake_positions):
            # The head may be off-grid for the instant before a wall hit is resolved
            if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
                continue
            board[y][x] = 'H' if pos_idx == 0 else 'S'

        result = []
        for y in range(self.grid_size):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # Only the last digit of each column index fits
        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_size)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState state={self.state}, food={self.food}, "
            f"length={len(self.snake_positions)}, score={self.score}>"
        )
