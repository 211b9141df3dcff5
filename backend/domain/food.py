"""
Food spawner for the game engine.
"""

import random
import logging
from typing import Collection, Optional, Tuple

from .constants import DIFFICULTY_SETTINGS, SLOW, validate_difficulty
from .geometry import is_occupied

logger = logging.getLogger(__name__)


class FoodPlacementError(RuntimeError):
    """No free cell is left in the eligible area (grid too small or full)."""


class Food:
    """
    The single food item on the board.

    Attributes:
        position: (x, y) of the food, None until first placed
        variant: cosmetic index renderers use to pick a sprite
        margin: minimum distance from any grid edge for new placements
    """

    def __init__(
        self,
        grid_size: int,
        difficulty: str = SLOW,
        variant_count: int = 4,
        max_attempts: int = 1000,
        rng: Optional[random.Random] = None,
    ):
        self.grid_size = grid_size
        self.variant_count = variant_count
        self.max_attempts = max_attempts
        self.rng = rng or random.Random()
        self.margin = margin_for(difficulty)
        self.variant = self.rng.randint(0, variant_count - 1)
        self.position: Optional[Tuple[int, int]] = None

    def set_difficulty(self, difficulty: str):
        self.margin = margin_for(difficulty)

    def advance_variant(self) -> int:
        self.variant = (self.variant + 1) % self.variant_count
        return self.variant

    def _random_cell(self, low: int, high: int) -> Tuple[int, int]:
        return (self.rng.randint(low, high), self.rng.randint(low, high))

    def place(
        self,
        occupied: Collection[Tuple[int, int]],
        margin: Optional[int] = None,
    ) -> Tuple[int, int]:
        """
        Move the food to a random cell not in `occupied`.

        Candidates are drawn uniformly from [margin, grid_size - 1 - margin]
        on both axes. After max_attempts rejected draws the free cells are
        enumerated and one is chosen uniformly, so a crowded board still
        terminates.

        Raises:
            FoodPlacementError: if no eligible cell is free
        """
        if margin is None:
            margin = self.margin
        low, high = margin, self.grid_size - 1 - margin
        if low > high:
            raise FoodPlacementError(
                f"Margin {margin} leaves no room on a {self.grid_size}x{self.grid_size} grid"
            )

        occupied = set(occupied)
        for _ in range(self.max_attempts):
            candidate = self._random_cell(low, high)
            if not is_occupied(candidate, occupied):
                self.position = candidate
                return candidate

        free_cells = [
            (x, y)
            for x in range(low, high + 1)
            for y in range(low, high + 1)
            if not is_occupied((x, y), occupied)
        ]
        if not free_cells:
            raise FoodPlacementError(
                f"No free cell for food in [{low}, {high}] with {len(occupied)} occupied cells"
            )
        logger.debug(
            f"Food placement fell back to enumeration after {self.max_attempts} draws "
            f"({len(free_cells)} free cells)"
        )
        self.position = self.rng.choice(free_cells)
        return self.position

    def __repr__(self):
        return f"<Food position={self.position}, variant={self.variant}, margin={self.margin}>"


def margin_for(difficulty: str) -> int:
    """Minimum food distance from the border for a difficulty level."""
    return DIFFICULTY_SETTINGS[validate_difficulty(difficulty)]["food_margin"]
